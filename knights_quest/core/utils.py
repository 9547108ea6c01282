"""
Utilities module for the adventure.

Provides common utility functions and helpers, including console printing
with rich formatting and the health bar renderer.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.rule import Rule

from knights_quest.core.constants import HEALTH_BAR_SEGMENTS, HEALTH_GLYPH

# Initialize the rich console.
_console = Console(markup=True, width=120, force_jupyter=False)


def cprint(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output.

    Args:
        *args: Arguments to pass to the console print function.
        **kwargs: Keyword arguments to pass to the console print function.

    """
    _console.print(*args, **kwargs)


def crule(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output with a rule.

    Args:
        *args: Arguments to pass to the Rule constructor.
        **kwargs: Keyword arguments to pass to the Rule constructor.

    """
    _console.print(Rule(*args, **kwargs))


def make_health_bar(current: int, maximum: int, glyph: str = HEALTH_GLYPH) -> str:
    """
    Creates the visual health bar of a combatant.

    One glyph is drawn for every full tenth of the maximum health.

    Args:
        current (int): The current health.
        maximum (int): The maximum health.
        glyph (str): The glyph to repeat. Defaults to a heart.

    Returns:
        str: The health bar, empty when the combatant is below one tenth.

    """
    return glyph * int(current // (maximum / HEALTH_BAR_SEGMENTS))
