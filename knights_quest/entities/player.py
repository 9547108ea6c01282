"""
The hero controlled by the player.

Adds the shield stance to the shared entity model: a defend action arms a
one-shot mitigation that is consumed by the very next hit, whatever its size.
"""

from catchery import log_debug
from pydantic import Field

from knights_quest.game.events import HealEvent, StanceEvent, TurnContext

from .entity import Entity


class Player(Entity):
    """
    Represents the hero.

    Attributes:
        defense_power (int):
            Damage absorbed by the shield when defending.
        is_defending (bool):
            True between a defend action and the next hit taken.

    """

    defense_power: int = Field(0, ge=0, description="Damage absorbed by the shield.")
    is_defending: bool = Field(False, description="Whether the shield is raised.")

    def attack(self, target: Entity, ctx: TurnContext) -> int:
        """
        Strikes the target with the sword.

        Returns:
            int: The damage dealt before any mitigation of the target.

        """
        damage = self.roll_attack(ctx)
        ctx.log.say(f"{self.name} attacks {target.name} with the sword!")
        target.take_damage(damage, ctx)
        return damage

    def defend(self, ctx: TurnContext) -> None:
        """Raises the shield until the next hit."""
        self.is_defending = True
        ctx.log.record(
            StanceEvent(
                actor=self.name,
                defending=True,
                message=f"{self.name} raises the shield to defend!",
            )
        )

    def take_damage(self, amount: int, ctx: TurnContext) -> int:
        if amount < 0:
            raise ValueError(f"Damage cannot be negative, got {amount}")
        final = amount
        if self.is_defending:
            shield = self.defense_power + ctx.rng.next_in_range(
                0, ctx.config.shield_variance
            )
            final = max(0, amount - shield)
            log_debug(
                "Shield mitigation",
                {"raw": amount, "shield": shield, "final": final},
            )
            ctx.log.say(f"{self.name} blocked part of the attack with the shield!")
        try:
            return super().take_damage(final, ctx)
        finally:
            # The shield only covers one hit.
            if self.is_defending:
                self.is_defending = False
                ctx.log.record(StanceEvent(actor=self.name, defending=False))

    def heal(self, amount: int, ctx: TurnContext) -> int:
        """
        Restores health, up to the maximum.

        The requested amount is always reported, even when the hero was
        already at full health.

        Returns:
            int: The health after healing.

        """
        if amount < 0:
            raise ValueError(f"Healing cannot be negative, got {amount}")
        self.health = min(self.max_health, self.health + amount)
        ctx.log.record(
            HealEvent(
                target=self.name,
                amount=amount,
                health_after=self.health,
                message=(
                    f"{self.name} recovered {amount} HP. "
                    f"Health: {self.health}/{self.max_health} HP"
                ),
            )
        )
        return self.health
