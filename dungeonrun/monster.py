"""Monsters with a wander / chase / return AI, and a factory that builds them by name."""

from __future__ import annotations

import math
import random
from enum import Enum, auto
from typing import TYPE_CHECKING, Callable, ClassVar

from .entity import Entity
from .level import TILE_SIZE

if TYPE_CHECKING:
    from .level import LevelManager
    from .player import Player

Point = tuple[float, float]


class AIState(Enum):
    WAITING = auto()
    CHASING = auto()
    RETURNING = auto()


class Monster(Entity):
    """An enemy that idles around its home, chases the player and walks back."""

    DETECT_RADIUS: ClassVar[float] = 400.0
    LOST_RADIUS: ClassVar[float] = 500.0
    WANDER_RADIUS: ClassVar[float] = 120.0
    MOVE_PHASE: ClassVar[float] = 3.0
    IDLE_PHASE: ClassVar[float] = 3.0

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
        super().__init__(x, y, width, height, texture_path, level)
        self.damage = 0
        self.reward = 0
        self.attack_cooldown = 0.0
        self.current_cooldown = 0.0
        self.target = player
        self.home: Point = (x, y)
        self.wander_target: Point = (0.0, 0.0)
        self.ai_state = AIState.WAITING
        self.move_phase = False
        self.phase_timer = 0.0
        self.rng = rng or random.Random()
        self.target_position: Point = player.position()

    def set_target_position(self, position: Point) -> None:
        self.target_position = (position[0], position[1])

    def choose_new_wander_target(self) -> None:
        """Pick a walkable point near home; fall back to home after ten tries."""
        for _ in range(10):
            angle = self.rng.uniform(0.0, 2 * math.pi)
            radius = self.rng.uniform(20.0, self.WANDER_RADIUS)
            px = self.home[0] + math.cos(angle) * radius
            py = self.home[1] + math.sin(angle) * radius
            tx = int(px / TILE_SIZE)
            ty = int(py / TILE_SIZE)
            if self.level is None or self.level.is_walkable(tx, ty):
                self.wander_target = (px, py)
                return
        self.wander_target = self.home

    def _distance_to_target(self) -> float:
        return math.hypot(self.target.x - self.x, self.target.y - self.y)

    def _move_towards(self, point: Point, dt: float) -> float:
        """Step towards ``point`` unless already within two pixels; return the distance."""
        dir_x = point[0] - self.x
        dir_y = point[1] - self.y
        distance = math.hypot(dir_x, dir_y)
        if distance > 2.0:
            step = self.speed * dt * 1000
            self.x += dir_x / distance * step
            self.y += dir_y / distance * step
        return distance

    def _update_waiting(self, dt: float) -> bool:
        if self._distance_to_target() <= self.DETECT_RADIUS:
            self.ai_state = AIState.CHASING
            return True

        self.phase_timer -= dt
        if self.move_phase:
            distance = self._move_towards(self.wander_target, dt)
            if distance <= 2.0 or self.phase_timer <= 0:
                self.move_phase = False
                self.phase_timer = self.IDLE_PHASE
        elif self.phase_timer <= 0:
            self.move_phase = True
            self.phase_timer = self.MOVE_PHASE
            self.choose_new_wander_target()
        return False

    def _update_returning(self, dt: float) -> bool:
        if self._distance_to_target() <= self.DETECT_RADIUS:
            self.ai_state = AIState.CHASING
            return True

        if self._move_towards(self.home, dt) <= 2.0:
            self.ai_state = AIState.WAITING
            self.move_phase = False
            self.phase_timer = 0.0
        return False

    def update_ai(self, dt: float) -> bool:
        """Advance the AI; True while the monster is chasing the player."""
        if self.ai_state is AIState.WAITING:
            return self._update_waiting(dt)
        if self.ai_state is AIState.CHASING:
            if self._distance_to_target() > self.LOST_RADIUS:
                self.ai_state = AIState.RETURNING
                return self._update_returning(dt)
            return True
        return self._update_returning(dt)


Creator = Callable[..., Monster]


class MonsterFactory:
    """Builds monsters from registered type names."""

    def __init__(self) -> None:
        self._creators: dict[str, Creator] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._creators

    def register(self, name: str, creator: Creator) -> None:
        """Register a callable taking (x, y, width, height, texture_path, player, level)."""
        self._creators[name] = creator

    def create(
        self,
        kind: str,
        x: float,
        y: float,
        width: float,
        height: float,
        texture_path: str,
        player: Player,
        level: LevelManager | None,
    ) -> Monster | None:
        """A new monster of ``kind``, or None when that type is unknown."""
        creator = self._creators.get(kind)
        if creator is None:
            return None
        return creator(x, y, width, height, texture_path, player, level)