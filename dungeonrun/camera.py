"""Camera that follows the player but stays inside the map."""

from __future__ import annotations

from dataclasses import dataclass

from .level import TILE_SIZE, LevelManager


@dataclass(frozen=True)
class View:
    center_x: float
    center_y: float
    width: float
    height: float


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def view_for_player(
    player_x: float,
    player_y: float,
    level: LevelManager,
    screen_width: float,
    screen_height: float,
) -> View:
    half_width = screen_width / 2
    half_height = screen_height / 2
    map_width = level.width * TILE_SIZE
    map_height = level.height * TILE_SIZE

    min_x = min(half_width, map_width - half_width)
    max_x = max(half_width, map_width - half_width)
    min_y = min(half_height, map_height - half_height)
    max_y = max(half_height, map_height - half_height)

    return View(
        _clamp(player_x, min_x, max_x),
        _clamp(player_y, min_y, max_y),
        screen_width,
        screen_height,
    )