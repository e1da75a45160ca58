"""Waves of monsters loaded from per-room wave files."""

from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path
from typing import TYPE_CHECKING

from .ghost import Ghost
from .level import TILE_SIZE
from .monster import Monster, MonsterFactory
from .skeleton import Skeleton
from .slime import Slime
from .wave_loader import SpawnPoint, load_waves

if TYPE_CHECKING:
    from .player import Player

log = logging.getLogger(__name__)

MONSTER_SIZE = 32.0


def default_factory() -> MonsterFactory:
    """A factory that knows the slime, the ghost and the skeleton."""
    factory = MonsterFactory()
    factory.register("SLIME", Slime)
    factory.register("GHOST", Ghost)
    factory.register("SKELETON", Skeleton)
    return factory


class WaveManager:
    """Loads the waves of a room and spawns them one after another."""

    WAVE_DELAY = 5.0

    def __init__(
        self,
        factory: MonsterFactory | None = None,
        data_dir: str | PathLike[str] = "data",
    ) -> None:
        self.factory = factory if factory is not None else default_factory()
        self.data_dir = Path(data_dir)
        self.waves: list[list[SpawnPoint]] = []
        self.current_wave_index = 0
        self.monsters: list[Monster] = []
        self.wave_delay = 0.0
        self._waiting = False
        self.player: Player | None = None

    @property
    def total_waves(self) -> int:
        return len(self.waves)

    @property
    def remaining_delay(self) -> float:
        return self.wave_delay

    def load_room_waves(self, room_base_name: str) -> None:
        """Read ``<room>_1.waves``, ``<room>_2.waves`` ... until one is missing or empty."""
        self.waves = []
        self.current_wave_index = 0
        log.info("loading waves for room %s", room_base_name)
        number = 1
        while True:
            path = self.data_dir / f"{room_base_name}_{number}.waves"
            log.debug("checking wave file %s", path)
            wave = load_waves(path)
            if not wave:
                break
            self.waves.append(list(wave))
            number += 1
        log.info("total waves loaded: %d", len(self.waves))

    def spawn_next_wave(self, player: Player) -> None:
        """Replace the current monsters with those of the next wave."""
        if self.current_wave_index >= len(self.waves):
            log.info("no more waves to spawn")
            return

        self.monsters = []
        for spawn in self.waves[self.current_wave_index]:
            texture_path = f"image/{spawn.kind}.png"
            monster = self.factory.create(
                spawn.kind.upper(),
                spawn.x * float(TILE_SIZE),
                spawn.y * float(TILE_SIZE),
                MONSTER_SIZE,
                MONSTER_SIZE,
                texture_path,
                player,
                player.level,
            )
            if monster is None:
                log.warning("failed to spawn %s", spawn.kind)
                continue
            self.monsters.append(monster)
        self.current_wave_index += 1

    def is_wave_cleared(self) -> bool:
        return not any(monster.life for monster in self.monsters)

    def are_all_waves_done(self) -> bool:
        return self.current_wave_index >= len(self.waves) and not self.monsters

    def start_next_wave(self, player: Player) -> None:
        """Spawn the first wave at once; later waves follow after a delay."""
        self.player = player
        if self.current_wave_index >= len(self.waves):
            return
        if self.current_wave_index > 0:
            self.wave_delay = self.WAVE_DELAY
            self._waiting = True
            return
        self.spawn_next_wave(player)

    def update(self, dt: float) -> None:
        if self._waiting:
            self.wave_delay -= dt
            if self.wave_delay <= 0:
                self._waiting = False
                if self.player is not None:
                    self.spawn_next_wave(self.player)
        self.monsters = [monster for monster in self.monsters if monster.life]
        for monster in self.monsters:
            if monster.life:
                monster.update(dt)

    def is_waiting(self) -> bool:
        return self._waiting