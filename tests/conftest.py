"""
Shared fixtures for the Knight's Quest tests.
"""

from collections import deque

import pytest

from knights_quest.core.config import GameConfig
from knights_quest.entities.enemy import Enemy, EnemyCatalog, EnemyTemplate
from knights_quest.entities.player import Player
from knights_quest.game.events import TurnContext, TurnLog
from knights_quest.game.session import GameSession
from knights_quest.ui.io import MemoryLineWriter, ScriptedCommandReader


class ScriptedRandom:
    """Random source returning pre-arranged values, in order.

    Fails loudly when a value is out of the requested range or when the game
    rolls more often than the test expected.
    """

    def __init__(self, *values: int) -> None:
        self.values: deque[int] = deque(values)
        self.calls: list[tuple[int, int]] = []

    def push(self, *values: int) -> None:
        self.values.extend(values)

    def next_in_range(self, lo: int, hi: int) -> int:
        self.calls.append((lo, hi))
        if not self.values:
            raise AssertionError(f"Unexpected roll in range {lo}..{hi}")
        value = self.values.popleft()
        if not lo <= value <= hi:
            raise AssertionError(f"Scripted value {value} outside {lo}..{hi}")
        return value


@pytest.fixture
def rng():
    return ScriptedRandom()


@pytest.fixture
def writer():
    return MemoryLineWriter()


@pytest.fixture
def reader():
    return ScriptedCommandReader()


@pytest.fixture
def ctx(rng, writer):
    return TurnContext(rng=rng, log=TurnLog(writer), config=GameConfig())


@pytest.fixture
def knight():
    return Player(
        name="Knight",
        max_health=100,
        attack_power=20,
        defense_power=10,
    )


@pytest.fixture
def goblin():
    return Enemy(
        name="Goblin",
        max_health=40,
        attack_power=10,
        description="A small and cunning goblin",
    )


@pytest.fixture
def catalog():
    return EnemyCatalog(
        [
            EnemyTemplate(
                name="Goblin",
                max_health=40,
                attack_power=10,
                description="A small and cunning goblin",
            ),
            EnemyTemplate(
                name="Slime",
                max_health=30,
                attack_power=8,
                description="A slow and slimy creature",
            ),
        ]
    )


@pytest.fixture
def session(knight, reader, writer, rng, catalog):
    return GameSession(
        player=knight,
        reader=reader,
        writer=writer,
        rng=rng,
        catalog=catalog,
    )
