"""Weapons an entity can carry."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from .projectiles import Arrow

if TYPE_CHECKING:
    from .entity import Entity

Point = tuple[float, float]


class Weapon(ABC):
    """Something that attacks from one point towards another."""

    def __init__(self, attack_speed: float, damage: float) -> None:
        self.attack_speed = attack_speed
        self.damage = int(damage)
        self.cooldown = 0.0
        self.owner: Entity | None = None

    @abstractmethod
    def attack(self, start: Point, target: Point) -> None:
        """Attack from ``start`` towards ``target`` if the weapon is ready."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance cooldowns and anything the weapon has fired."""


class Bow(Weapon):
    """Fires arrows; attack speed sets the delay between shots."""

    def __init__(self, attack_speed: float, damage: float, arrow_speed: float) -> None:
        super().__init__(attack_speed, damage)
        self.arrow_speed = arrow_speed
        self.arrows: list[Arrow] = []

    def attack(self, start: Point, target: Point) -> None:
        if self.cooldown > 0:
            return
        if self.owner is None:
            raise RuntimeError("bow has no owner")
        self.arrows.append(
            Arrow(start, target, self.arrow_speed, self.damage, self.owner, self.owner.level)
        )
        self.cooldown = 30 / self.attack_speed

    def update(self, dt: float) -> None:
        self.cooldown -= dt
        self.arrows = [arrow for arrow in self.arrows if arrow.life]
        for arrow in self.arrows:
            arrow.update(dt)