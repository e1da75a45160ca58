"""Arrows shot by the player and bones thrown by skeletons."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, ClassVar

from .entity import Entity
from .level import TILE_SIZE

if TYPE_CHECKING:
    from .level import LevelManager

Point = tuple[float, float]


def _direction(position: Point, target: Point) -> tuple[float, float]:
    dx = target[0] - position[0]
    dy = target[1] - position[1]
    length = math.hypot(dx, dy)
    if length != 0:
        dx /= length
        dy /= length
    return dx, dy


class _Projectile(Entity):
    """Shared flight state: velocity, spawn delay and travel distance."""

    max_distance: ClassVar[float] = 400.0

    def __init__(
        self,
        position: Point,
        target: Point,
        speed: float,
        damage: float,
        shooter: Entity | None,
        level: LevelManager | None,
        texture_path: str,
    ) -> None:
        super().__init__(position[0], position[1], 32, 32, texture_path, level, shooter)
        self.damage = damage
        self.start = (position[0], position[1])
        self.use_pixel_perfect = True
        self.can_collide = False
        self.spawn_timer = 0.1
        dir_x, dir_y = _direction(position, target)
        self.velocity = (dir_x * speed, dir_y * speed)
        self.rotation = math.degrees(math.atan2(dir_y, dir_x)) + 90.0

    def _tick_spawn(self, dt: float) -> None:
        if self.spawn_timer > 0:
            self.spawn_timer -= dt
            if self.spawn_timer <= 0:
                self.can_collide = True

    def _hits_unshootable(self) -> bool:
        if self.level is None:
            return False
        rows = range(int(self.y / TILE_SIZE), math.floor((self.y + self.height - 1) / TILE_SIZE) + 1)
        cols = range(int(self.x / TILE_SIZE), math.floor((self.x + self.width - 1) / TILE_SIZE) + 1)
        return any(not self.level.is_shootable(j, i) for i in rows for j in cols)

    def _beyond(self, width: float, height: float) -> bool:
        return self.x < 0 or self.y < 0 or self.x > width or self.y > height

    def _advance(self, dt: float) -> bool:
        """Move along the velocity; False once the maximum range is reached."""
        self.x += self.velocity[0] * dt
        self.y += self.velocity[1] * dt
        dx = self.x - self.start[0]
        dy = self.y - self.start[1]
        if dx * dx + dy * dy >= self.max_distance * self.max_distance:
            self.explode()
            return False
        return True

    def explode(self) -> None:
        self.life = False


class Arrow(_Projectile):
    """A player's arrow; damages whatever it hits except its shooter."""

    max_distance: ClassVar[float] = 400.0

    def __init__(
        self,
        position: Point,
        target: Point,
        speed: float,
        damage: float,
        shooter: Entity | None,
        level: LevelManager | None,
    ) -> None:
        super().__init__(position, target, speed, damage, shooter, level, "image/arrow.png")
        if self.rotation < 0:
            self.rotation += 360.0
        if self.rotation >= 360.0:
            self.rotation -= 360.0

    def update(self, dt: float) -> None:
        if not self.life:
            return
        self._tick_spawn(dt)
        if self.can_collide and self.owner.is_player and self._hits_unshootable():
            self.explode()
            return
        self._advance(dt)

    def is_out_of_screen(self, width: float, height: float) -> bool:
        return self._beyond(width, height)

    def explode(self) -> None:
        self.life = False

    def on_collision(self, other: Entity | None) -> None:
        if not self.life or other is None or other is self.owner:
            return
        other.take_damage(self.damage)
        self.explode()

    def check_collision(self, other: Entity) -> bool:
        if self.aabb_collision(other):
            return self.pixel_perfect_collision(other) if self.use_pixel_perfect else True
        return False


class Bone(_Projectile):
    """A spinning bone that only hurts the player."""

    max_distance: ClassVar[float] = 450.0

    def __init__(
        self,
        position: Point,
        target: Point,
        speed: float,
        damage: float,
        shooter: Entity | None,
        level: LevelManager | None,
    ) -> None:
        super().__init__(position, target, speed, damage, shooter, level, "image/bone.png")
        self.rotation_speed = 720.0

    def update(self, dt: float) -> None:
        if not self.life:
            return
        self._tick_spawn(dt)
        if self.can_collide and self._hits_unshootable():
            self.explode()
            return
        if self._advance(dt):
            self.rotation += self.rotation_speed * dt

    def is_out_of_screen(self, width: float, height: float) -> bool:
        return self._beyond(width, height)

    def explode(self) -> None:
        self.life = False

    def on_collision(self, other: Entity | None) -> None:
        if not self.life or other is None or not self.can_collide:
            return
        if other.is_player:
            other.take_damage(int(self.damage))
            self.explode()

    def check_collision(self, other: Entity) -> bool:
        if not other.is_player:
            return False
        if self.aabb_collision(other):
            return self.pixel_perfect_collision(other) if self.use_pixel_perfect else True
        return False