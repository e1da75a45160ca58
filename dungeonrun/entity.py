"""Base game object: position, health, collisions and map interaction."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, ClassVar

from .geometry import AlphaMask, Rect, pixel_perfect_test
from .level import TILE_SIZE
from .status import StatusEffectType, StatusSystem

if TYPE_CHECKING:
    from .level import LevelManager


class Entity:
    """Something that lives on the map; (x, y) is the centre of its box.

    Subclasses that represent the controllable hero set ``is_player`` to True.
    """

    WALL_PENETRATION: ClassVar[float] = 10.0
    is_player: ClassVar[bool] = False

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        texture_path: str = "",
        level: LevelManager | None = None,
        owner: Entity | None = None,
        mask: AlphaMask | None = None,
    ) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.dx = 0.0
        self.dy = 0.0
        self.speed = 0.0
        self.dir = 0
        self.hp = 100
        self.max_hp = 100
        self.life = True
        self.texture_path = texture_path
        self.level = level
        self.owner: Entity = owner if owner is not None else self
        self.mask: AlphaMask | None = (
            mask if mask is not None else AlphaMask.filled(int(width), int(height))
        )
        self.is_solid = True
        self.can_collide = True
        self.use_pixel_perfect = True
        self.is_dying = False
        self.death_timer = 0.0
        self.death_duration = 0.5
        self.status = StatusSystem(self)

    def start_dying(self) -> None:
        self.is_dying = True
        self.can_collide = False

    def update_death(self, dt: float) -> None:
        if self.is_dying:
            self.death_timer += dt
            if self.death_timer >= self.death_duration:
                self.life = False

    def update(self, dt: float) -> None:
        """Advance the entity by ``dt`` seconds; the base only runs the death timer."""
        self.update_death(dt)

    def bounds(self) -> Rect:
        return Rect(self.x - self.width / 2, self.y - self.height / 2, self.width, self.height)

    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def check_collision(self, other: Entity) -> bool:
        if not (self.can_collide and other.can_collide and self.is_solid and other.is_solid):
            return False
        if other is self.owner:
            return False
        if self.is_dying or other.is_dying:
            return False
        return self.aabb_collision(other) and (
            not self.use_pixel_perfect or self.pixel_perfect_collision(other)
        )

    def on_collision(self, other: Entity | None) -> None:
        """Push both entities apart along the axis of least overlap."""
        if other is None:
            return
        push_force = 0.5
        min_distance = 0.1

        mine = self.bounds()
        theirs = other.bounds()

        dir_x = other.x - self.x
        dir_y = other.y - self.y
        length = math.hypot(dir_x, dir_y)
        if length > min_distance:
            dir_x /= length
            dir_y /= length
        else:
            dir_x, dir_y = 1.0, 0.0

        overlap_x = min(mine.right - theirs.left, theirs.right - mine.left)
        overlap_y = min(mine.bottom - theirs.top, theirs.bottom - mine.top)

        if overlap_x < overlap_y:
            push = overlap_x * push_force
            self.x -= dir_x * push
            other.x += dir_x * push
        else:
            push = overlap_y * push_force
            self.y -= dir_y * push
            other.y += dir_y * push

    def aabb_collision(self, other: Entity) -> bool:
        return self.bounds().intersects(other.bounds())

    def pixel_perfect_collision(self, other: Entity | None, alpha_threshold: int = 128) -> bool:
        if other is None or other.mask is None or self.mask is None:
            return False
        return pixel_perfect_test(
            self.bounds(), self.mask, other.bounds(), other.mask, alpha_threshold
        )

    def interact_with_map(self) -> None:
        """Keep the entity out of non-walkable tiles and inside the top-left edge."""
        if not self.is_solid or not self.can_collide or self.level is None:
            return

        box = self.bounds()
        left, top, width, height = box.left, box.top, box.width, box.height
        changed = False
        if left < 0:
            left = 0.0
            self.dx = 0
            changed = True
        if top < 0:
            top = 0.0
            self.dy = 0
            changed = True

        probes = (
            (left, top + height * 0.5),
            (left + width, top + height * 0.5),
            (left + width * 0.5, top),
            (left + width * 0.5, top + height),
        )
        for px, py in probes:
            tx = math.floor(px / TILE_SIZE)
            ty = math.floor(py / TILE_SIZE)
            if self.level.is_walkable(tx, ty):
                continue
            tile = Rect(tx * TILE_SIZE, ty * TILE_SIZE, TILE_SIZE, TILE_SIZE)
            overlap = Rect(left, top, width, height).intersection(tile)
            if overlap is None:
                continue
            if overlap.width < overlap.height:
                push = overlap.width - self.WALL_PENETRATION
                if push > 0:
                    left += -push if left < tile.left else push
                    self.dx = 0
                    changed = True
            else:
                push = overlap.height - self.WALL_PENETRATION
                if push > 0:
                    top += -push if top < tile.top else push
                    self.dy = 0
                    changed = True

        if changed:
            self.x = left + width * 0.5
            self.y = top + height * 0.5

    def take_damage(self, damage: float) -> None:
        self.hp -= int(damage)
        if self.hp <= 0:
            self.hp = 0
            self.start_dying()

    def apply_status_effect(
        self, effect_type: StatusEffectType, duration: float, intensity: float = 1.0
    ) -> None:
        self.status.apply_effect(effect_type, duration, intensity)

    def has_status_effect(self, effect_type: StatusEffectType) -> bool:
        return self.status.has_effect(effect_type)