"""The ghost: floats through walls, stops to aim and dashes at the player."""

from __future__ import annotations

import math
import random
from enum import IntEnum
from typing import TYPE_CHECKING, ClassVar

from .entity import Entity
from .geometry import Rect, bounding_box_test
from .monster import Monster

if TYPE_CHECKING:
    from .level import LevelManager
    from .player import Player


class GhostRow(IntEnum):
    DOWN = 0
    DL = 1
    LEFT = 2
    UL = 3
    UP = 4


GHOST_FRAMES: tuple[tuple[Rect, ...], ...] = tuple(
    tuple(Rect(col * 32, row * 40, 32, 40) for col in range(3)) for row in range(5)
)


def angle_to_row(angle: float) -> tuple[GhostRow, bool]:
    """Sprite row and mirroring for a heading in degrees in [0, 360)."""
    if angle < 22.5 or angle >= 337.5:
        return GhostRow.LEFT, True
    if angle < 67.5:
        return GhostRow.DL, True
    if angle < 112.5:
        return GhostRow.DOWN, False
    if angle < 157.5:
        return GhostRow.DL, False
    if angle < 202.5:
        return GhostRow.LEFT, False
    if angle < 247.5:
        return GhostRow.UL, True
    if angle < 292.5:
        return GhostRow.UP, False
    return GhostRow.UL, False


def _heading(vx: float, vy: float) -> float:
    angle = math.degrees(math.atan2(vy, vx))
    return angle + 360.0 if angle < 0 else angle


class Ghost(Monster):
    """Drifts towards the player, waits briefly, then dashes at where it saw it."""

    BASE_SPEED: ClassVar[float] = 0.1
    DASH_SPEED: ClassVar[float] = 0.35
    DASH_DURATION: ClassVar[float] = 0.45
    WAIT_DURATION: ClassVar[float] = 0.35
    VISION_RADIUS: ClassVar[float] = 120.0
    POST_ATTACK_IDLE: ClassVar[float] = 1.0
    ANIM_PERIOD: ClassVar[float] = 0.18

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        texture_path: str,
        player: Player,
        level: LevelManager | None = None,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(x, y, width, height, texture_path, player, level, rng)
        self.damage = 8
        self.reward = 10
        self.attack_cooldown = 1.0
        self.hp = 25
        self.can_collide = False
        self.speed = self.BASE_SPEED
        self.death_duration = 0.4

        self.prev_x = 0.0
        self.prev_y = 0.0
        self.move_x = 0.0
        self.move_y = 0.0

        self.post_attack_idle = False
        self.post_attack_idle_timer = 0.0

        self.waiting = False
        self.dashing = False
        self.hit_this_dash = False
        self.wait_timer = 0.0
        self.dash_timer = 0.0
        self.dash_dir = (0.0, 0.0)
        self.last_seen: tuple[float, float] = (0.0, 0.0)

        self.anim_col = 0
        self.anim_timer = 0.0
        self.texture_rect = GHOST_FRAMES[GhostRow.DOWN][0]
        self.mirrored = False
        self.death_frame: Rect | None = None

    @property
    def alpha(self) -> float:
        """Opacity while fading out after death, 1.0 otherwise."""
        if not self.is_dying:
            return 1.0
        return max(0.0, 1.0 - self.death_timer / self.death_duration)

    def update(self, dt: float) -> None:
        if not self.life:
            return
        self.prev_x, self.prev_y = self.x, self.y

        if self.is_dying:
            self.death_timer += dt
            if self.death_timer >= self.death_duration:
                self.life = False
            return

        if self.post_attack_idle:
            self.post_attack_idle_timer -= dt
            if self.post_attack_idle_timer <= 0:
                self.post_attack_idle = False
            return

        if not self.update_ai(dt):
            self.interact_with_map()
            self.move_x = self.x - self.prev_x
            self.move_y = self.y - self.prev_y
            self._update_animation(dt)
            return

        if self.current_cooldown > 0:
            self.current_cooldown -= dt

        if self.dashing:
            self._update_dash(dt)
        else:
            self._update_chase(dt)

        self._update_animation(dt)
        self.move_x = self.x - self.prev_x
        self.move_y = self.y - self.prev_y

    def start_dying(self) -> None:
        if self.is_dying:
            return
        self.is_dying = True
        self.death_frame = self.texture_rect
        self.death_timer = 0.0

    def check_collision(self, other: Entity | None) -> bool:
        """Only projectiles and obstacles touch a ghost; players and monsters pass through."""
        if not self.life or self.is_dying or other is None or other is self:
            return False
        if other.is_player or isinstance(other, Monster):
            return False
        return self.aabb_collision(other)

    def on_collision(self, other: Entity | None) -> None:
        """A projectile's own handler deals the damage; touching a ghost has no further effect."""
        if other is None or other.is_player or isinstance(other, Monster):
            return

    def _update_chase(self, dt: float) -> None:
        px, py = self.target.position()
        dx = px - self.x
        dy = py - self.y
        distance = math.hypot(dx, dy)

        if distance < self.VISION_RADIUS and self.current_cooldown <= 0 and not self.waiting:
            self.waiting = True
            self.wait_timer = self.WAIT_DURATION
            self.last_seen = (px, py)

        if self.waiting:
            self.wait_timer -= dt
            if self.wait_timer <= 0:
                self.waiting = False
                self.dashing = True
                self.dash_timer = self.DASH_DURATION
                self.hit_this_dash = False
                dir_x = self.last_seen[0] - self.x
                dir_y = self.last_seen[1] - self.y
                length = math.hypot(dir_x, dir_y)
                if length:
                    dir_x /= length
                    dir_y /= length
                self.dash_dir = (dir_x, dir_y)
            return

        if distance > 1.0:
            step = self.BASE_SPEED * dt * 1000.0
            self.x += dx / distance * step
            self.y += dy / distance * step

    def _update_dash(self, dt: float) -> None:
        step = self.DASH_SPEED * dt * 1000.0
        self.x += self.dash_dir[0] * step
        self.y += self.dash_dir[1] * step
        self.dash_timer -= dt

        if not self.hit_this_dash and bounding_box_test(self.bounds(), self.target.bounds()):
            self.target.take_damage(self.damage)
            self.hit_this_dash = True

        if self.dash_timer <= 0:
            self.dashing = False
            self.current_cooldown = self.attack_cooldown
            self.post_attack_idle = True
            self.post_attack_idle_timer = self.POST_ATTACK_IDLE
            row, mirror = angle_to_row(_heading(*self.dash_dir))
            self.texture_rect = GHOST_FRAMES[row][0]
            self.mirrored = mirror

    def _update_animation(self, dt: float) -> None:
        self.anim_timer += dt
        if self.anim_timer < self.ANIM_PERIOD and not self.dashing:
            return
        self.anim_timer = 0.0

        if self.dashing:
            vx, vy = self.dash_dir
        elif abs(self.move_x) > 0.1 or abs(self.move_y) > 0.1:
            vx, vy = self.move_x, self.move_y
        else:
            vx = self.target.x - self.x
            vy = self.target.y - self.y

        row, mirror = angle_to_row(_heading(vx, vy))
        self.anim_col = 2 if self.dashing else (1 if self.anim_col == 0 else 0)
        self.texture_rect = GHOST_FRAMES[row][self.anim_col]
        self.mirrored = mirror