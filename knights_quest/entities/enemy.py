"""
Enemies and the catalog they are drawn from.

Templates are immutable blueprints loaded from JSON; every encounter spawns
a fresh Enemy at full health from one of them.
"""

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from catchery import log_debug, log_warning
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from knights_quest.core.rng import RandomSource, choose
from knights_quest.game.events import TurnContext

from .entity import Entity

# Catalog shipped with the game.
DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "enemies.json"


class Enemy(Entity):
    """A monster met while exploring."""

    description: str = Field("", description="Flavor text, no gameplay effect.")

    def attack(self, target: Entity, ctx: TurnContext) -> int:
        """
        Attacks the target, with the same damage formula as the hero.

        Returns:
            int: The damage dealt before any mitigation of the target.

        """
        damage = self.roll_attack(ctx)
        ctx.log.say(f"{self.name} ({self.description}) attacks {target.name}!")
        target.take_damage(damage, ctx)
        return damage


class EnemyTemplate(BaseModel):
    """Static blueprint of an enemy."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1, description="The name of the enemy.")
    max_health: int = Field(gt=0, description="The maximum health.")
    attack_power: int = Field(ge=0, description="The base attack damage.")
    description: str = Field("", description="Flavor text.")

    def spawn(self) -> Enemy:
        """Creates a new enemy at full health."""
        return Enemy(
            name=self.name,
            max_health=self.max_health,
            attack_power=self.attack_power,
            description=self.description,
        )


class EnemyCatalog:
    """Ordered collection of enemy templates, indexed by name."""

    def __init__(self, templates: list[EnemyTemplate]) -> None:
        if not templates:
            raise ValueError("The enemy catalog cannot be empty")
        self._templates: dict[str, EnemyTemplate] = {}
        for template in templates:
            if template.name in self._templates:
                raise ValueError(f"Duplicate enemy name: {template.name}")
            self._templates[template.name] = template

    @property
    def templates(self) -> list[EnemyTemplate]:
        return list(self._templates.values())

    def get(self, name: str) -> EnemyTemplate | None:
        template = self._templates.get(name)
        if template is None:
            log_warning(
                f"Enemy '{name}' not found in catalog",
                {"available": list(self._templates)},
            )
        return template

    def draw(self, rng: RandomSource) -> EnemyTemplate:
        """Picks a template uniformly at random."""
        return choose(rng, self.templates)

    def __iter__(self) -> Iterator[EnemyTemplate]:
        return iter(self._templates.values())

    def __len__(self) -> int:
        return len(self._templates)

    def __contains__(self, name: object) -> bool:
        return name in self._templates


def load_catalog(filepath: Path = DEFAULT_CATALOG_PATH) -> EnemyCatalog:
    """
    Loads the enemy catalog from a JSON list of templates.

    Args:
        filepath (Path):
            The JSON file to load. Defaults to the catalog shipped with the game.

    Returns:
        EnemyCatalog:
            The validated catalog.

    Raises:
        ValueError:
            If the file is missing, malformed or contains invalid templates.

    """
    try:
        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")
        if not filepath.is_file():
            raise ValueError(f"Not a file: {filepath}")
        with open(filepath, encoding="utf-8") as f:
            data: Any = json.load(f)
        if not data:
            raise ValueError(f"Empty data list in {filepath}")
        if not isinstance(data, list):
            raise ValueError(f"Expected list in {filepath}, got {type(data).__name__}")
        catalog = EnemyCatalog([EnemyTemplate.model_validate(e) for e in data])
    except (json.JSONDecodeError, FileNotFoundError, ValidationError, ValueError) as e:
        raise ValueError(f"File {filepath} raised an error: {e}") from e
    log_debug(f"Loaded {len(catalog)} enemy templates from {filepath}")
    return catalog
