"""
Constants and enumerations for the adventure.

Defines the game states, the command vocabulary for each state, and the
default values used when creating the hero.
"""

from enum import Enum
from typing import TypeVar

# Default hero, used when the player does not type a name.
DEFAULT_HERO_NAME = "Sir Valiant"
DEFAULT_HERO_MAX_HEALTH = 100
DEFAULT_HERO_ATTACK_POWER = 20
DEFAULT_HERO_DEFENSE_POWER = 10

# Glyph used to draw the health bar, one per tenth of the maximum health.
HEALTH_GLYPH = "❤️"
HEALTH_BAR_SEGMENTS = 10


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.replace("_", " ").lower().capitalize()


class GameState(NiceEnum):
    """Defines the states of the game session."""

    EXPLORING = "EXPLORING"
    COMBAT = "COMBAT"
    GAME_OVER = "GAME_OVER"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this game state."""
        return {
            GameState.EXPLORING: "🧭",
            GameState.COMBAT: "⚔️",
            GameState.GAME_OVER: "💀",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        """Returns the color string associated with this game state."""
        return {
            GameState.EXPLORING: "bold green",
            GameState.COMBAT: "bold red",
            GameState.GAME_OVER: "dim white",
        }.get(self, "dim white")

    @property
    def colored_name(self) -> str:
        return self.colorize(self.display_name)

    def colorize(self, message: str) -> str:
        """Applies game state color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class ExploreCommand(NiceEnum):
    """Commands accepted while exploring."""

    ADVANCE = "w"
    REST = "q"
    QUIT = "s"


class CombatCommand(NiceEnum):
    """Commands accepted during combat."""

    ATTACK = "e"
    DEFEND = "q"
    FLEE = "w"


_C = TypeVar("_C", ExploreCommand, CombatCommand)


def parse_command(command_type: type[_C], token: str | None) -> _C | None:
    """
    Maps a raw input token to a command of the given vocabulary.

    Args:
        command_type (type[_C]): The command enumeration to look the token up in.
        token (str | None): The raw line read from the player, None on end of input.

    Returns:
        _C | None: The matching command, or None if the token is not recognized.

    """
    if token is None:
        return None
    token = token.strip().lower()
    for command in command_type:
        if command.value == token:
            return command
    return None
