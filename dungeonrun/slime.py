"""The slime: a slow melee monster with a jump attack."""

from __future__ import annotations

import math
import random
from typing import TYPE_CHECKING, ClassVar

from .geometry import Rect
from .monster import Monster

if TYPE_CHECKING:
    from .level import LevelManager
    from .player import Player


def _rects(*values: tuple[int, int, int, int]) -> tuple[Rect, ...]:
    return tuple(Rect(*value) for value in values)


# 16 walking frames (two per direction row) followed by 8 groups of 5 attack frames.
SLIME_FRAMES: tuple[Rect, ...] = _rects(
    (0, 0, 23, 20), (25, 0, 21, 20),
    (0, 23, 23, 15), (24, 21, 23, 17),
    (0, 39, 24, 19), (27, 40, 23, 19),
    (0, 59, 23, 20), (26, 60, 22, 19),
    (0, 81, 23, 20), (26, 81, 21, 20),
    (23, 23, -23, 15), (47, 21, -23, 17),
    (24, 39, -24, 19), (50, 40, -23, 19),
    (23, 59, -23, 20), (48, 60, -22, 19),
    (0, 102, 23, 18), (25, 102, 37, 57), (63, 102, 37, 61), (103, 102, 33, 57), (137, 101, 23, 18),
    (0, 162, 23, 21), (26, 163, 42, 26), (68, 164, 41, 41), (112, 164, 23, 41), (0, 23, 23, 17),
    (0, 207, 25, 19), (29, 207, 40, 19), (70, 207, 59, 19), (130, 207, 36, 23), (169, 207, 25, 19),
    (0, 232, 23, 21), (26, 231, 43, 26), (69, 231, 41, 41), (112, 231, 24, 41), (138, 23, 23, 20),
    (0, 272, 22, 20), (23, 272, 37, 57), (65, 272, 37, 61), (103, 272, 32, 57), (138, 271, 22, 20),
    (23, 162, -23, 21), (68, 163, -42, 26), (109, 164, -41, 41), (135, 164, -23, 41),
    (137, 162, -23, 17),
    (25, 207, -25, 19), (69, 207, -40, 19), (129, 207, -59, 19), (166, 207, -36, 23),
    (194, 207, 25, -19),
    (23, 232, -23, 21), (68, 231, -45, 26), (110, 231, -41, 41), (136, 231, -24, 41),
    (161, 231, -23, 20),
)

ATTACK_ORIGINS: tuple[tuple[float, float], ...] = (
    (7, 8), (12, 5), (9, 5), (10, 4), (7, 6),
    (3, 13), (23, 9), (24, 8), (4, 8), (3, 9),
    (5, 7), (21, 7), (40, 6), (17, 7), (5, 7),
    (7, 7), (33, 18), (31, 34), (11, 34), (11, 13),
    (12, 8), (22, 45), (15, 49), (12, 45), (12, 8),
    (12, 13), (12, 9), (12, 8), (12, 8), (12, 9),
    (12, 7), (12, 7), (12, 6), (12, 7), (12, 7),
    (12, 7), (12, 13), (12, 29), (12, 29), (12, 8),
)

_WALK_FRAME_COUNT = 16
_WALK_ORIGIN = (12.0, 10.0)


class Slime(Monster):
    """Chases the player and damages it in a three-stage attack."""

    ATTACK_RANGE: ClassVar[float] = 30.0
    FRAME_DURATION: ClassVar[float] = 0.2
    ATTACK_WINDUP: ClassVar[float] = 0.2
    ATTACK_STRIKE: ClassVar[float] = 0.1
    ATTACK_RECOVERY: ClassVar[float] = 0.3

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
        self.damage = 10
        self.reward = 5
        self.attack_cooldown = 1.0
        self.speed = 0.05
        self.hp = 30
        self.death_duration = 0.5
        self.prev_x = 0.0
        self.prev_y = 0.0
        self.frame_time = 0.0
        self.current_frame = 0.0
        self.attacking = False
        self.attack_stage = 0
        self.attack_stage_time = 0.0
        self.texture_rect = SLIME_FRAMES[0]
        self.origin: tuple[float, float] = (0.0, 0.0)
        self.death_position: tuple[float, float] | None = None

    def start_dying(self) -> None:
        if self.is_dying:
            return
        self.is_dying = True
        self.can_collide = False
        self.death_position = (self.x + self.width / 2, self.y + self.height / 2)

    def update(self, dt: float) -> None:
        if not self.life:
            return
        self.prev_x, self.prev_y = self.x, self.y

        if self.is_dying:
            self.death_timer += dt
            if self.death_timer >= self.death_duration:
                self.life = False
                self.target.add_money(self.reward)
            return

        if not self.update_ai(dt):
            self.dx = self.x - self.prev_x
            self.dy = self.y - self.prev_y
            self.frame_time += dt
            if self.frame_time >= self.FRAME_DURATION:
                self.frame_time = 0.0
                self.current_frame = 1.0 - self.current_frame
            self._show_walk_frame()
            self.interact_with_map()
            return

        self.set_target_position(self.target.position())
        if self.current_cooldown > 0:
            self.current_cooldown -= dt
        self._update_movement(dt)
        self._update_attack(dt)
        self.interact_with_map()

    def _show_walk_frame(self) -> None:
        self.texture_rect = SLIME_FRAMES[self.animation_row() * 2 + int(self.current_frame)]
        self.origin = _WALK_ORIGIN

    def _distance_to_target_position(self) -> float:
        return math.hypot(self.target_position[0] - self.x, self.target_position[1] - self.y)

    def _update_movement(self, dt: float) -> None:
        if not self.life or self.attacking:
            return
        distance = self._distance_to_target_position()
        if distance >= self.ATTACK_RANGE:
            self.dx = (self.target_position[0] - self.x) / distance
            self.dy = (self.target_position[1] - self.y) / distance
            self.x += self.dx * self.speed * dt * 1000
            self.y += self.dy * self.speed * dt * 1000

        self.frame_time += dt
        if self.frame_time >= self.FRAME_DURATION:
            self.frame_time = 0.0
            self.current_frame += 1
            if self.current_frame >= 2:
                self.current_frame = 0.0
        self._show_walk_frame()

    def _update_attack(self, dt: float) -> None:
        if not self.life:
            return
        distance = self._distance_to_target_position()
        if not self.attacking and distance <= self.ATTACK_RANGE and self.current_cooldown <= 0:
            self.attacking = True
            self.attack_stage = 0
            self.attack_stage_time = self.ATTACK_WINDUP

        if not self.attacking:
            return

        self.attack_stage_time -= dt
        if self.attack_stage_time <= 0:
            self.attack_stage += 1
            if self.attack_stage == 1:
                self.attack_stage_time = self.ATTACK_STRIKE
                if self.pixel_perfect_collision(self.target):
                    self.target.take_damage(self.damage)
            elif self.attack_stage == 2:
                self.attack_stage_time = self.ATTACK_RECOVERY
            elif self.attack_stage == 3:
                self.attacking = False
                self.current_cooldown = self.attack_cooldown

        index = self.animation_row() * 5 + self.attack_frame()
        self.texture_rect = SLIME_FRAMES[_WALK_FRAME_COUNT + index]
        self.origin = ATTACK_ORIGINS[index]

    def attack_frame(self) -> int:
        """Frame within the current attack row, from the stage and its progress."""
        if self.attack_stage == 0:
            progress = 1.0 - self.attack_stage_time / self.ATTACK_WINDUP
            return int(progress * 2)
        if self.attack_stage == 1:
            return 2
        if self.attack_stage == 2:
            progress = 1.0 - self.attack_stage_time / self.ATTACK_RECOVERY
            return 3 + int(progress)
        return 0

    def animation_row(self) -> int:
        """Sprite row for the current movement direction."""
        if self.dx == 0 and self.dy == 0:
            return 0
        angle = math.degrees(math.atan2(self.dy, self.dx))
        if angle < 0:
            angle += 360.0
        if 112.5 <= angle < 157.5:
            return 1
        if 67.5 <= angle < 112.5:
            return 0
        if 157.5 <= angle < 202.5:
            return 2
        if 202.5 <= angle < 247.5:
            return 3
        if 247.5 <= angle < 292.5:
            return 4
        if 292.5 <= angle < 337.5:
            return 7
        if angle >= 337.5 or angle < 22.5:
            return 6
        return 5