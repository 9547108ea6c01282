"""
Tests for the turn log.
"""

import pytest

from knights_quest.core.constants import GameState
from knights_quest.game.events import (
    DamageEvent,
    EventType,
    NarrationEvent,
    StateChangeEvent,
    TurnLog,
)
from knights_quest.ui.io import MemoryLineWriter


@pytest.fixture
def log(writer):
    return TurnLog(writer)


def test_record_writes_message(log, writer):
    log.say("Hello")
    log.record(DamageEvent(target="Goblin", amount=3, health_after=37, message="Ouch"))
    assert writer.lines == ["Hello", "Ouch"]
    assert [e.event_type for e in log] == [EventType.NARRATION, EventType.DAMAGE]


def test_silent_events_are_kept_but_not_written(log, writer):
    log.record(StateChangeEvent(previous=GameState.EXPLORING, current=GameState.COMBAT))
    assert writer.lines == []
    assert len(log) == 1


def test_events_are_stamped_with_turn(log):
    log.next_turn()
    log.next_turn()
    event = log.say("Second turn")
    assert event.turn == 2


def test_events_since_mark(log):
    log.say("before")
    mark = log.mark()
    log.say("after")
    assert [str(e) for e in log.events_since(mark)] == ["after"]
    assert len(log.of_type(NarrationEvent, since=mark)) == 1


def test_capacity_drops_oldest():
    log = TurnLog(MemoryLineWriter(), capacity=2)
    mark = log.mark()
    for text in ("one", "two", "three"):
        log.say(text)
    assert [str(e) for e in log] == ["two", "three"]
    assert [str(e) for e in log.events_since(mark)] == ["two", "three"]


def test_clear_keeps_marks_valid(log):
    log.say("one")
    log.clear()
    mark = log.mark()
    log.say("two")
    assert [str(e) for e in log.events_since(mark)] == ["two"]


def test_invalid_capacity(writer):
    with pytest.raises(ValueError):
        TurnLog(writer, capacity=0)
