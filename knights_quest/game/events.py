"""
Turn log of the adventure.

Every entity action and state transition is recorded as a typed event. The
log forwards the rendered message of each event to the line writer as soon
as it is recorded, and keeps the events so that tests and callers can
inspect what happened during a turn.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import TypeVar

from pydantic import BaseModel, Field

from knights_quest.core.config import GameConfig
from knights_quest.core.constants import GameState
from knights_quest.core.rng import RandomSource
from knights_quest.ui.io import LineWriter


class EventType(Enum):
    """Enumeration of the kinds of events recorded in the turn log."""

    NARRATION = "narration"
    DAMAGE = "damage"
    HEAL = "heal"
    STANCE = "stance"
    ENCOUNTER = "encounter"
    STATE_CHANGE = "state_change"


class GameEvent(BaseModel):
    """Base class for all turn log events."""

    event_type: EventType = Field(description="The kind of event.")
    turn: int = Field(0, ge=0, description="The turn in which the event happened.")
    message: str = Field("", description="Human readable text of the event.")
    style: str | None = Field(None, description="Optional rich style for the text.")

    def __str__(self) -> str:
        return self.message


class NarrationEvent(GameEvent):
    """Plain story text with no state change attached."""

    event_type: EventType = EventType.NARRATION


class DamageEvent(GameEvent):
    """Damage applied to an entity."""

    event_type: EventType = EventType.DAMAGE
    target: str = Field(description="Name of the entity taking the damage.")
    amount: int = Field(ge=0, description="Damage applied after mitigation.")
    health_after: int = Field(ge=0, description="Health left after the hit.")


class HealEvent(GameEvent):
    """Healing applied to an entity."""

    event_type: EventType = EventType.HEAL
    target: str = Field(description="Name of the entity being healed.")
    amount: int = Field(ge=0, description="Healing requested.")
    health_after: int = Field(ge=0, description="Health after healing.")


class StanceEvent(GameEvent):
    """The defending stance of the player was raised or consumed."""

    event_type: EventType = EventType.STANCE
    actor: str = Field(description="Name of the entity changing stance.")
    defending: bool = Field(description="The stance after the change.")


class EncounterEvent(GameEvent):
    """A new enemy appeared."""

    event_type: EventType = EventType.ENCOUNTER
    enemy: str = Field(description="Name of the enemy met.")


class StateChangeEvent(GameEvent):
    """The session moved from one state to another."""

    event_type: EventType = EventType.STATE_CHANGE
    previous: GameState
    current: GameState


_E = TypeVar("_E", bound=GameEvent)


class TurnLog:
    """
    In-memory log of the events of a session.

    Keeps at most `capacity` events; older ones are dropped, but every event
    is written out when recorded.
    """

    def __init__(self, writer: LineWriter, capacity: int = 1000) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.writer = writer
        self.capacity = capacity
        self.turn = 0
        self._events: list[GameEvent] = []
        self._dropped = 0

    def record(self, event: _E) -> _E:
        """Stores the event, stamps it with the current turn and writes it out."""
        event.turn = self.turn
        self._events.append(event)
        if len(self._events) > self.capacity:
            del self._events[0]
            self._dropped += 1
        if event.message:
            self.writer.write_line(event.message, style=event.style)
        return event

    def say(self, message: str = "", style: str | None = None) -> NarrationEvent:
        """Records a narration line."""
        return self.record(NarrationEvent(message=message, style=style))

    def next_turn(self) -> int:
        self.turn += 1
        return self.turn

    def mark(self) -> int:
        """Returns a position usable with events_since()."""
        return self._dropped + len(self._events)

    def events_since(self, mark: int) -> list[GameEvent]:
        return self._events[max(0, mark - self._dropped) :]

    def of_type(self, event_cls: type[_E], since: int = 0) -> list[_E]:
        return [e for e in self.events_since(since) if isinstance(e, event_cls)]

    def clear(self) -> None:
        self._dropped += len(self._events)
        self._events.clear()

    def __iter__(self) -> Iterator[GameEvent]:
        return iter(self._events)

    def __len__(self) -> int:
        return len(self._events)


@dataclass
class TurnContext:
    """What an entity needs to act: dice, rules and somewhere to report."""

    rng: RandomSource
    log: TurnLog
    config: GameConfig = field(default_factory=GameConfig)
