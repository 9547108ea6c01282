"""
Entity module of Knight's Quest.

Defines the shared damage model and its two variants: the hero, with the
shield stance, and the enemies drawn from the catalog.
"""

from .enemy import Enemy, EnemyCatalog, EnemyTemplate, load_catalog
from .entity import Entity
from .player import Player

__all__ = [
    # Import from enemy.py
    "Enemy",
    "EnemyCatalog",
    "EnemyTemplate",
    "load_catalog",
    # Import from entity.py
    "Entity",
    # Import from player.py
    "Player",
]
