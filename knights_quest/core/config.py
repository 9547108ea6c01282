"""
Game configuration module.

Holds the random-event table of the adventure: encounter and flee chances,
damage variances and the healing ranges. The defaults are the values the
game ships with; a JSON file can override any subset of them.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator


class GameConfig(BaseModel):
    """Numeric rules of the adventure."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    encounter_chance: int = Field(
        65,
        ge=0,
        le=100,
        description="Chance (percent) that advancing triggers an encounter.",
    )
    flee_chance: int = Field(
        40,
        ge=0,
        le=100,
        description="Chance (percent) that an escape attempt succeeds.",
    )
    attack_variance: int = Field(
        4,
        ge=0,
        description="Maximum random bonus added to every attack.",
    )
    shield_variance: int = Field(
        2,
        ge=0,
        description="Maximum random bonus added to the defense when shielding.",
    )
    wander_heal: tuple[int, int] = Field(
        (3, 7),
        description="Healing range when advancing finds nothing.",
    )
    rest_heal: tuple[int, int] = Field(
        (10, 24),
        description="Healing range when resting.",
    )
    victory_heal_base: int = Field(
        5,
        ge=0,
        description="Flat healing granted after defeating an enemy.",
    )
    victory_heal_divisor: int = Field(
        3,
        gt=0,
        description="The random part of the victory heal is below attack power // divisor.",
    )

    @model_validator(mode="after")
    def _check_ranges(self) -> "GameConfig":
        for name in ("wander_heal", "rest_heal"):
            lo, hi = getattr(self, name)
            if lo < 0 or lo > hi:
                raise ValueError(f"{name} must satisfy 0 <= lo <= hi, got ({lo}, {hi})")
        return self


def load_config(filepath: Path) -> GameConfig:
    """
    Loads a game configuration from a JSON object.

    Args:
        filepath (Path): The JSON file to load.

    Returns:
        GameConfig: The validated configuration.

    Raises:
        ValueError: If the file is missing, malformed or fails validation.

    """
    try:
        if not filepath.is_file():
            raise FileNotFoundError(f"File not found: {filepath}")
        with open(filepath, encoding="utf-8") as f:
            data: Any = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Expected object in {filepath}, got {type(data).__name__}")
        return GameConfig.model_validate(data)
    except (json.JSONDecodeError, FileNotFoundError, ValidationError, ValueError) as e:
        raise ValueError(f"File {filepath} raised an error: {e}") from e
