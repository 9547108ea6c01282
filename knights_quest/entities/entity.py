"""
Entity model shared by every combatant.

An entity has a name, a current and maximum health and an attack power.
Health only moves through take_damage (down, clamped at zero) and, for the
player, heal (up, clamped at the maximum).
"""

from typing import Any

from catchery import log_debug
from pydantic import BaseModel, Field, model_validator

from knights_quest.core.utils import make_health_bar
from knights_quest.game.events import DamageEvent, TurnContext


class Entity(BaseModel):
    """
    Base class for the player and the enemies.

    Attributes:
        name (str):
            The name of the entity.
        max_health (int):
            The maximum health, always positive.
        health (int):
            The current health, between 0 and max_health.
        attack_power (int):
            The base damage of the entity's attacks.

    """

    name: str = Field(min_length=1, description="The name of the entity.")
    max_health: int = Field(gt=0, description="The maximum health.")
    health: int = Field(ge=0, description="The current health.")
    attack_power: int = Field(ge=0, description="The base attack damage.")

    @model_validator(mode="before")
    @classmethod
    def _default_health(cls, data: Any) -> Any:
        # Entities are created at full health unless told otherwise.
        if isinstance(data, dict) and data.get("health") is None:
            data = {**data, "health": data.get("max_health")}
        return data

    @model_validator(mode="after")
    def _check_health(self) -> "Entity":
        if self.health > self.max_health:
            raise ValueError(
                f"health ({self.health}) cannot exceed max_health ({self.max_health})"
            )
        return self

    def is_alive(self) -> bool:
        """Returns True while the entity has health left."""
        return self.health > 0

    def is_full_health(self) -> bool:
        return self.health >= self.max_health

    def roll_attack(self, ctx: TurnContext) -> int:
        """Rolls the damage of one attack: attack power plus a small variance."""
        return self.attack_power + ctx.rng.next_in_range(0, ctx.config.attack_variance)

    def take_damage(self, amount: int, ctx: TurnContext) -> int:
        """
        Applies damage, clamping the health at zero.

        Args:
            amount (int):
                The damage to apply, must not be negative.
            ctx (TurnContext):
                The context used to report the hit.

        Returns:
            int:
                The health left after the hit.

        """
        if amount < 0:
            raise ValueError(f"Damage cannot be negative, got {amount}")
        self.health = max(0, self.health - amount)
        log_debug(
            "Damage applied",
            {"target": self.name, "amount": amount, "health": self.health},
        )
        ctx.log.record(
            DamageEvent(
                target=self.name,
                amount=amount,
                health_after=self.health,
                message=(
                    f"{self.name} took {amount} damage. "
                    f"Health: {self.health}/{self.max_health} HP"
                ),
            )
        )
        return self.health

    def status_line(self) -> str:
        bar = make_health_bar(self.health, self.max_health)
        return f"{self.name}: {bar} {self.health}/{self.max_health} HP"

    def display_stats(self, ctx: TurnContext) -> None:
        """Reports the health bar of the entity, without changing anything."""
        ctx.log.say(self.status_line())

    def __str__(self) -> str:
        return self.name
