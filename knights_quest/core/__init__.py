"""
Core module of Knight's Quest.

Contains the game constants, the configuration model, the random source and
the console and logging helpers.
"""

from .config import GameConfig, load_config
from .constants import (
    DEFAULT_HERO_NAME,
    CombatCommand,
    ExploreCommand,
    GameState,
    parse_command,
)
from .rng import DiceRoller, RandomSource, choose, roll_percent

__all__ = [
    # Import from config.py
    "GameConfig",
    "load_config",
    # Import from constants.py
    "DEFAULT_HERO_NAME",
    "CombatCommand",
    "ExploreCommand",
    "GameState",
    "parse_command",
    # Import from rng.py
    "DiceRoller",
    "RandomSource",
    "choose",
    "roll_percent",
]
