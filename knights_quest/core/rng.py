"""
Random number source for the adventure.

Every roll in the game goes through a RandomSource injected at session
construction, so a scripted or seeded source makes a whole run repeatable.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Protocol, TypeVar, runtime_checkable

_T = TypeVar("_T")


@runtime_checkable
class RandomSource(Protocol):
    """Anything able to produce uniform integers in an inclusive range."""

    def next_in_range(self, lo: int, hi: int) -> int:
        """Returns a uniform integer N such that lo <= N <= hi."""
        ...


def roll_percent(source: RandomSource) -> int:
    """Rolls a percentile value in 0..99."""
    return source.next_in_range(0, 99)


def choose(source: RandomSource, items: Sequence[_T]) -> _T:
    """
    Picks one element uniformly at random.

    Args:
        source (RandomSource): The source to roll with.
        items (Sequence[_T]): The candidates, must not be empty.

    Returns:
        _T: The selected element.

    """
    if not items:
        raise ValueError("Cannot choose from an empty sequence")
    return items[source.next_in_range(0, len(items) - 1)]


class DiceRoller:
    """
    Production random source, backed by a private random.Random instance.

    The generator is seeded once: with the given seed when provided, from the
    operating system entropy pool otherwise.
    """

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._random = random.Random(seed)

    def next_in_range(self, lo: int, hi: int) -> int:
        if lo > hi:
            raise ValueError(f"Invalid range: {lo}..{hi}")
        return self._random.randint(lo, hi)

    def __repr__(self) -> str:
        return f"DiceRoller(seed={self.seed!r})"
