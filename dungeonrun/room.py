"""A room: its waves of monsters, obstacles, collisions and exits."""

from __future__ import annotations

from itertools import combinations
from os import PathLike
from typing import TYPE_CHECKING

from .entity import Entity
from .geometry import Rect
from .level import TILE_SIZE
from .monster import MonsterFactory
from .waves import WaveManager
from .weapons import Bow

if TYPE_CHECKING:
    from .level import LevelManager
    from .monster import Monster
    from .player import Player


class RoomManager:
    """Runs one room of a run until all its waves are beaten."""

    def __init__(
        self,
        factory: MonsterFactory | None = None,
        data_dir: str | PathLike[str] = "data",
    ) -> None:
        self.wave_manager = WaveManager(factory, data_dir)
        self.player: Player | None = None
        self.level: LevelManager | None = None
        self.active = False
        self.exit_unlocked = False
        self.wait_timer = 0.0
        self.static_obstacles: list[Entity] = []
        self._exit_blocks: list[tuple[int, int]] = []

    @property
    def monsters(self) -> list[Monster]:
        return self.wave_manager.monsters

    @property
    def current_wave_index(self) -> int:
        return self.wave_manager.current_wave_index

    @property
    def total_waves(self) -> int:
        return self.wave_manager.total_waves

    @property
    def remaining_delay(self) -> float:
        return self.wave_manager.remaining_delay

    @property
    def waiting(self) -> bool:
        """True during the first second after the exits opened."""
        return self.wait_timer < 1.0

    @property
    def exit_blocks(self) -> tuple[tuple[int, int], ...]:
        return tuple(self._exit_blocks)

    def attach(self, player: Player, level: LevelManager) -> None:
        self.player = player
        self.level = level

    def load_room(self, room_name: str) -> None:
        if self.player is None:
            raise RuntimeError("room has no player attached")
        self.exit_unlocked = False
        self._exit_blocks = []
        self.wave_manager.load_room_waves(room_name)
        self.wave_manager.spawn_next_wave(self.player)
        self.active = True

    def _unlock_exits(self) -> None:
        level = self.level
        if level is None:
            return
        cells = [(x, y) for y in range(level.height) for x in range(level.width)]
        before = {cell: level.get_tile(*cell) for cell in cells}
        level.unlock_exits()
        self._exit_blocks = [cell for cell in cells if level.get_tile(*cell) != before[cell]]

    def update(self, dt: float) -> None:
        if not self.active:
            return
        waves = self.wave_manager
        waves.update(dt)
        self._update_collisions()

        if not self.exit_unlocked and waves.are_all_waves_done():
            self._unlock_exits()
            self.exit_unlocked = True
            self.wait_timer = 0.0
        if self.exit_unlocked:
            self.wait_timer += dt

        if waves.is_wave_cleared() and not waves.are_all_waves_done():
            if not waves.is_waiting() and self.player is not None:
                waves.start_next_wave(self.player)

    def is_room_cleared(self) -> bool:
        waves = self.wave_manager
        return (
            self.active
            and waves.are_all_waves_done()
            and waves.is_wave_cleared()
            and waves.current_wave_index == waves.total_waves
        )

    def is_player_near_exit(self) -> bool:
        if not self.exit_unlocked or self.player is None or self.level is None:
            return False
        player_bounds = self.player.bounds()
        return any(
            player_bounds.intersects(Rect(x * TILE_SIZE, y * TILE_SIZE, TILE_SIZE, TILE_SIZE))
            for x, y in self._exit_blocks
        )

    def reset_waves(self) -> None:
        self.wave_manager.current_wave_index = 1

    def add_static_obstacle(self, obstacle: Entity) -> None:
        self.static_obstacles.append(obstacle)

    def all_entities(self) -> list[Entity]:
        """The player, the living wave's monsters and the player's arrows."""
        entities: list[Entity] = []
        if self.player is not None:
            entities.append(self.player)
        entities.extend(self.wave_manager.monsters)
        if self.player is not None and isinstance(self.player.weapon, Bow):
            entities.extend(self.player.weapon.arrows)
        return entities

    def _update_collisions(self) -> None:
        entities = self.all_entities() + self.static_obstacles
        for first, second in combinations(entities, 2):
            if first.check_collision(second):
                first.on_collision(second)
                second.on_collision(first)