"""The hero controlled from the keyboard."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Callable, ClassVar, Collection

from .entity import Entity
from .geometry import Rect
from .status import StatusEffectType

if TYPE_CHECKING:
    from .level import LevelManager
    from .weapons import Weapon

Point = tuple[float, float]

# (keys that must be held, direction, animation rate, mirrored frame, texture row top)
_CONTROLS = (
    (frozenset("W"), 1, 10, False, 128),
    (frozenset("D"), 3, 10, True, 64),
    (frozenset("S"), 5, 10, False, 0),
    (frozenset("A"), 7, 10, False, 64),
    (frozenset("DW"), 2, 5, True, 96),
    (frozenset("AW"), 8, 5, False, 96),
    (frozenset("DS"), 4, 5, True, 32),
    (frozenset("AS"), 6, 5, False, 32),
)

# direction -> multipliers of speed for (dx, dy)
_VELOCITY = {
    0: (0.0, 0.0),
    1: (0.0, -1.41),
    2: (1.0, -1.0),
    3: (1.41, 0.0),
    4: (1.0, 1.0),
    5: (0.0, 1.41),
    6: (-1.0, 1.0),
    7: (-1.41, 0.0),
    8: (-1.0, -1.0),
}


class Player(Entity):
    """The player character: movement, weapon, money and profile stats."""

    is_player: ClassVar[bool] = True

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        texture_path: str = "",
        level: LevelManager | None = None,
        on_death: Callable[[Player], None] | None = None,
    ) -> None:
        super().__init__(x, y, width, height, texture_path, level)
        self.use_pixel_perfect = True
        self.max_hp = 100
        self.hp = self.max_hp
        self.money = 0
        self.base_speed = 0.1
        self.speed_multiplier = 0.1
        self.current_frame = 0.0
        self.texture_rect = Rect(0, 0, width, height)
        self.pressed_keys: set[str] = set()
        self.weapon: Weapon | None = None
        self.on_death = on_death

    def control(self, keys: Collection[str], dt: float) -> None:
        """Set the walking direction and animation frame from the held keys."""
        pressed = {key.upper() for key in keys}
        for required, direction, rate, mirrored, top in _CONTROLS:
            if not required <= pressed:
                continue
            self.dir = direction
            self.current_frame += rate * dt
            if self.current_frame > 4:
                self.current_frame = 0.0
            frame = int(self.current_frame)
            if mirrored:
                self.texture_rect = Rect(127 - 32 * frame, top, -32, 32)
            else:
                self.texture_rect = Rect(32 * frame, top, 32, 32)

    def update(self, dt: float) -> None:
        if self.life:
            self.status.update(dt)
            if not self.has_status_effect(StatusEffectType.STUNNED):
                self.control(self.pressed_keys, dt)

        modifier = 0.5 if self.has_status_effect(StatusEffectType.FREEZING) else 1.0
        if self.dir != 0:
            self.speed = self.base_speed * modifier

        if self.dir in _VELOCITY:
            fx, fy = _VELOCITY[self.dir]
            self.dx = fx * self.speed
            self.dy = fy * self.speed
        self.x += self.dx * 1000 * dt
        self.y += self.dy * 1000 * dt

        self.speed = 0.0
        self.dir = 0
        self.interact_with_map()
        if self.hp <= 0:
            self.life = False
            if self.on_death is not None:
                self.on_death(self)
        if self.weapon is not None:
            self.weapon.update(dt)

    def set_weapon(self, weapon: Weapon) -> None:
        weapon.owner = self
        self.weapon = weapon

    def attack(self, target: Point) -> None:
        """Attack towards ``target`` from a point 20 pixels out from the player."""
        if self.weapon is None:
            return
        dir_x = target[0] - self.x
        dir_y = target[1] - self.y
        length = math.hypot(dir_x, dir_y)
        if length > 0:
            dir_x /= length
            dir_y /= length
        spawn = (self.x + dir_x * 20.0, self.y + dir_y * 20.0)
        self.weapon.attack(spawn, target)

    def _require_weapon(self) -> Weapon:
        if self.weapon is None:
            raise RuntimeError("player has no weapon")
        return self.weapon

    def upgrade_hp(self, amount: int) -> None:
        self.max_hp += amount
        self.hp = self.max_hp

    def upgrade_damage(self, amount: int) -> None:
        self._require_weapon().damage += amount

    def upgrade_speed(self, amount: float) -> None:
        self._require_weapon().attack_speed *= amount

    def reset(self) -> None:
        self.life = True
        self.hp = self.max_hp
        self.is_dying = False
        self.can_collide = True
        self.death_timer = 0.0

    def add_money(self, amount: int) -> None:
        self.money += amount

    def load_profile_stats(
        self, hp: int, damage: int, speed_multiplier: float, starting_money: int
    ) -> None:
        self.max_hp = hp
        self.hp = hp
        self.money = starting_money
        self.base_speed = speed_multiplier
        if self.weapon is not None:
            self.weapon.damage = damage

    def set_max_hp(self, value: int) -> None:
        self.max_hp = value
        self.hp = value

    def set_strength(self, value: int) -> None:
        if self.weapon is not None:
            self.weapon.damage = value