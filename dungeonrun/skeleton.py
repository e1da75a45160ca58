"""The skeleton: keeps its distance and throws spinning bones at the player."""

from __future__ import annotations

import math
import random
from typing import TYPE_CHECKING, ClassVar

from .geometry import Rect
from .monster import AIState, Monster
from .projectiles import Bone

if TYPE_CHECKING:
    from .level import LevelManager
    from .player import Player


def _rects(*values: tuple[int, int, int, int]) -> tuple[Rect, ...]:
    return tuple(Rect(*value) for value in values)


def _row(row: int, count: int) -> tuple[Rect, ...]:
    return tuple(Rect(col * 32, row * 32, 32, 32) for col in range(count))


# Four frames for attacking downwards, then four for attacking upwards.
ATTACK_FRAMES: tuple[Rect, ...] = _rects(
    (95, 32, 30, 32),
    (130, 32, 25, 62),
    (159, 29, 35, 65),
    (196, 32, 23, 62),
    (111, 160, 23, 32),
    (138, 128, 25, 61),
    (167, 128, 27, 61),
    (197, 128, 23, 61),
)

ATTACK_ORIGINS: tuple[tuple[float, float], ...] = tuple(
    (frame.width / 2, origin_y)
    for frame, origin_y in zip(ATTACK_FRAMES, (16.0, 16.0, 16.0, 16.0, 15.0, 45.0, 45.0, 45.0))
)

MOVE_DOWN_FRAMES = _row(1, 2)
MOVE_DOWN_LEFT_FRAMES = _row(2, 4)
MOVE_LEFT_FRAMES = _row(3, 4)
MOVE_UP_LEFT_FRAMES = _row(4, 4)
MOVE_UP_FRAMES = _row(5, 2)

_WALK_ORIGIN = (16.0, 16.0)


def _walk_frames(angle: float) -> tuple[tuple[Rect, ...], bool]:
    """Walking frames and mirroring for a heading in degrees (0 points right)."""
    if 67.5 < angle <= 112.5:
        return MOVE_DOWN_FRAMES, False
    if 22.5 < angle <= 67.5:
        return MOVE_DOWN_LEFT_FRAMES, True
    if 112.5 < angle <= 157.5:
        return MOVE_DOWN_LEFT_FRAMES, False
    if 157.5 < angle <= 202.5:
        return MOVE_LEFT_FRAMES, False
    if 202.5 < angle <= 247.5:
        return MOVE_UP_LEFT_FRAMES, False
    if 247.5 < angle <= 292.5:
        return MOVE_UP_FRAMES, False
    if 292.5 < angle <= 337.5:
        return MOVE_UP_LEFT_FRAMES, True
    return MOVE_LEFT_FRAMES, True


class Skeleton(Monster):
    """Walks into range, then winds up, throws a bone and recovers."""

    ATTACK_RANGE: ClassVar[float] = 200.0
    ATTACK_WINDUP: ClassVar[float] = 0.25
    ATTACK_STRIKE: ClassVar[float] = 0.25
    ATTACK_RECOVERY: ClassVar[float] = 0.25
    BONE_SPEED: ClassVar[float] = 180.0
    BONE_DAMAGE: ClassVar[int] = 15
    MOVE_ANIM_PERIOD: ClassVar[float] = 0.18
    FRAME_DURATION: ClassVar[float] = 0.25

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
        self.hp = 25
        self.damage = 15
        self.reward = 7
        self.attack_cooldown = 1.5
        self.speed = 0.05
        self.death_duration = 0.5

        self.attacking = False
        self.bone_fired = False
        self.attack_stage = 0
        self.stage_timer = 0.0
        self.upper_group = False
        self.mirrored = False

        self.move_anim_timer = 0.0
        self.move_frame = 0
        self.frame_time = 0.0
        self.current_frame = 0.0

        self.bones: list[Bone] = []
        self.texture_rect = Rect(0, 0, width, height)
        self.origin: tuple[float, float] = (width / 2, height / 2)
        self.death_frame: Rect | None = None

    @property
    def alpha(self) -> float:
        """Opacity while fading out after death, 1.0 otherwise."""
        if not self.is_dying:
            return 1.0
        return max(0.0, 1.0 - self.death_timer / self.death_duration)

    def start_dying(self) -> None:
        if self.is_dying:
            return
        self.is_dying = True
        self.can_collide = False
        self.death_frame = self.texture_rect
        self.death_timer = 0.0

    def update(self, dt: float) -> None:
        if not self.life:
            return

        if self.is_dying:
            self.death_timer += dt
            if self.death_timer >= self.death_duration:
                self.life = False
                self.target.add_money(self.reward)
            return

        self.update_ai(dt)

        for bone in self.bones:
            if bone.life:
                bone.update(dt)
            if bone.life and bone.check_collision(self.target):
                bone.on_collision(self.target)
        self.bones = [bone for bone in self.bones if bone.life]

        self.set_target_position(self.target.position())
        if self.current_cooldown > 0:
            self.current_cooldown -= dt

        self._update_attack(dt)
        self._update_movement(dt)
        self.interact_with_map()

    def _show_walk(self, dir_x: float, dir_y: float, dt: float) -> None:
        self.move_anim_timer += dt
        if self.move_anim_timer >= self.MOVE_ANIM_PERIOD:
            self.move_anim_timer = 0.0
            self.move_frame += 1
        angle = math.degrees(math.atan2(dir_y, dir_x))
        if angle < 0:
            angle += 360.0
        frames, mirror = _walk_frames(angle)
        self.texture_rect = frames[self.move_frame % len(frames)]
        self.origin = _WALK_ORIGIN
        self.mirrored = mirror

    def _show_idle(self, dt: float) -> None:
        self.frame_time += dt
        if self.frame_time >= self.FRAME_DURATION:
            self.frame_time = 0.0
            self.current_frame = 1.0 - self.current_frame
            width = int(self.width)
            self.texture_rect = Rect(int(self.current_frame) * width, 0, width, int(self.height))
            self.origin = (self.width / 2, self.height / 2)

    def _update_movement(self, dt: float) -> None:
        if self.attacking:
            return

        if self.ai_state is AIState.WAITING:
            if self.move_phase:
                dir_x = self.wander_target[0] - self.x
                dir_y = self.wander_target[1] - self.y
                distance = math.hypot(dir_x, dir_y)
                if distance > 0.1:
                    dir_x /= distance
                    dir_y /= distance
                self._show_walk(dir_x, dir_y, dt)
            else:
                self._show_idle(dt)
            return

        if self.ai_state is AIState.RETURNING:
            dir_x = self.home[0] - self.x
            dir_y = self.home[1] - self.y
            distance = math.hypot(dir_x, dir_y)
            if distance > 2.0:
                self._show_walk(dir_x / distance, dir_y / distance, dt)
            return

        dir_x = self.target_position[0] - self.x
        dir_y = self.target_position[1] - self.y
        distance = math.hypot(dir_x, dir_y)
        if distance > self.ATTACK_RANGE:
            vx = dir_x / distance
            vy = dir_y / distance
            self.move_anim_timer += dt
            if self.move_anim_timer >= self.MOVE_ANIM_PERIOD:
                self.move_anim_timer = 0.0
                self.move_frame += 1
            self.x += vx * self.speed * dt * 1000.0
            self.y += vy * self.speed * dt * 1000.0
            angle = math.degrees(math.atan2(vy, vx))
            if angle < 0:
                angle += 360.0
            frames, mirror = _walk_frames(angle)
            self.texture_rect = frames[self.move_frame % len(frames)]
            self.origin = _WALK_ORIGIN
            self.mirrored = mirror
            return

        self._show_idle(dt)

    def _update_attack(self, dt: float) -> None:
        vx = self.target_position[0] - self.x
        vy = self.target_position[1] - self.y
        distance = math.hypot(vx, vy)

        if not self.attacking and distance <= self.ATTACK_RANGE and self.current_cooldown <= 0:
            self.upper_group = vy < 0
            self.mirrored = vx < 0 if self.upper_group else vx > 0
            self.attacking = True
            self.bone_fired = False
            self.attack_stage = 0
            self.stage_timer = self.ATTACK_WINDUP

        if not self.attacking:
            return

        self.stage_timer -= dt
        if self.stage_timer <= 0:
            self.attack_stage += 1
            if self.attack_stage == 1:
                self.stage_timer = self.ATTACK_STRIKE
                if not self.bone_fired:
                    self.bones.append(
                        Bone(
                            (self.x, self.y),
                            self.target_position,
                            self.BONE_SPEED,
                            self.BONE_DAMAGE,
                            self,
                            self.level,
                        )
                    )
                    self.bone_fired = True
            elif self.attack_stage == 2:
                self.stage_timer = self.ATTACK_RECOVERY
            else:
                self.attacking = False
                self.current_cooldown = self.attack_cooldown
                return

        base = 4 if self.upper_group else 0
        if self.attack_stage == 0:
            progress = 1.0 - self.stage_timer / self.ATTACK_WINDUP
            local = 0 if progress < 0.5 else 1
        elif self.attack_stage == 1:
            local = 2
        else:
            local = 3
        index = base + local
        self.texture_rect = ATTACK_FRAMES[index]
        self.origin = ATTACK_ORIGINS[index]