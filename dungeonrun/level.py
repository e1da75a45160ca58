"""Tile maps: loading, querying and choosing tileset rectangles."""

from __future__ import annotations

import random
from dataclasses import dataclass
from os import PathLike
from typing import NamedTuple, Sequence

from .geometry import Rect

TILE_SIZE = 32


def _tile(x: int, y: int) -> Rect:
    return Rect(x, y, TILE_SIZE, TILE_SIZE)


TILE_TEXTURES: dict[str, Rect] = {
    "0": _tile(0, 0),
    "w": _tile(160, 128),
    "b": _tile(320, 32),
    " ": _tile(0, 32),
    "=": _tile(64, 192),
    "f": _tile(0, 96),
    "s": _tile(0, 128),
    "l": _tile(0, 160),
}

RANDOM_TILE_VARIANTS: dict[str, tuple[Rect, ...]] = {
    " ": tuple(_tile(col * 32, row * 32) for row in range(4) for col in range(4)),
    "f": tuple(_tile(128 + col * 32, row * 32) for row in range(4) for col in range(4)),
}

DEFAULT_LEVEL = (
    "wwwwwwwwwwwwwwwwwwwwwwwwwwwwwwww",
    "wwwwwwwwwwwwwwwwwwwwwwwwwwwwwwww",
    "wwwwwwwwwwwwwwwwwwwwwwwwwwwwwwww",
    "wwwwwwwwwwwwwwwwwwwwwwwwwwwwwwww",
    "wwwwwwwwwwwwwwwwwwwwwwwwwwwwwwww",
    "wwwww                      wwwww",
    "wwwww   =    fff    =      wwwww",
    "wwwww  fff  =   =  fff     wwwww",
    "wwwww =   =======    =     wwwww",
    "wwwww  fff    ==    fff    wwwww",
    "wwwww         ==           wwwww",
    "wwwww         =            wwwww",
    "wwwww   =    fff    =      wwwww",
    "wwwww  fff  =   =  fff     wwwww",
    "wwwww =   ========    =    wwwww",
    "wwwww  fff    =     fff    wwwww",
    "wwwww                      wwwww",
    "wwwww         =            wwwww",
    "wwwww   =    fff    =      wwwww",
    "wwwww  fff  =   =  fff     wwwww",
    "wwwww =   ========    =    wwwww",
    "wwwww  fff    =     fff    wwwww",
    "wwwww                      wwwww",
    "wwwwwwwwwwwwwwwwwwwwwwwwwwwwwwww",
    "wwwwwwwwwwwwwwwwwwwwwwwwwwwwwwww",
    "wwwwwwwwwwwwwwwwwwwwwwwwwwwwwwww",
    "wwwwwwwwwwwwwwwwwwwwwwwwwwwwwwww",
    "wwwwwwwwwwwwwwwwwwwwwwwwwwwwwwww",
)


class LevelError(ValueError):
    """A level file could not be read or is malformed."""


class _Around(NamedTuple):
    left: bool
    right: bool
    top: bool
    bottom: bool
    top_left: bool
    top_right: bool
    bottom_left: bool
    bottom_right: bool


def _rects(*coords: tuple[int, int]) -> tuple[Rect, ...]:
    return tuple(_tile(x, y) for x, y in coords)


@dataclass(frozen=True)
class _EdgeTiles:
    # outer/inner corners are ordered top-left, top-right, bottom-left, bottom-right
    outer: tuple[Rect, ...]
    inner: tuple[Rect, ...]
    filled: tuple[Rect, ...]
    bottom_edge: tuple[Rect, ...]
    top_edge: tuple[Rect, ...]
    right_edge: tuple[Rect, ...]
    left_edge: tuple[Rect, ...]
    fallback: Rect


_EDGE_TILES: dict[str, _EdgeTiles] = {
    "=": _EdgeTiles(
        outer=_rects((0, 128), (128, 128), (0, 256), (128, 256)),
        inner=_rects((96, 224), (32, 224), (96, 160), (32, 160)),
        filled=_rects((0, 288), (32, 288), (64, 288), (96, 288), (128, 288)),
        bottom_edge=_rects((32, 256), (64, 256), (96, 256), (64, 160)),
        top_edge=_rects((32, 128), (64, 128), (96, 128), (64, 224)),
        right_edge=_rects((128, 160), (128, 192), (128, 224), (32, 192)),
        left_edge=_rects((0, 192), (0, 224), (0, 160), (96, 192)),
        fallback=_tile(64, 192),
    ),
    "w": _EdgeTiles(
        outer=_rects((0, 320), (128, 320), (0, 448), (128, 448)),
        inner=_rects((96, 416), (32, 416), (96, 352), (32, 352)),
        filled=_rects((0, 480), (32, 480), (64, 480), (96, 480), (128, 480)),
        bottom_edge=_rects((32, 448), (64, 448), (96, 448), (64, 352)),
        top_edge=_rects((32, 320), (64, 320), (96, 320), (64, 416)),
        right_edge=_rects((128, 352), (128, 384), (128, 416), (32, 384)),
        left_edge=_rects((0, 352), (0, 384), (0, 416), (96, 384)),
        fallback=_tile(64, 384),
    ),
}

_BLOCK_OUTER = _rects((256, 0), (352, 0), (256, 64), (352, 64))
_BLOCK_INNER = _rects((288, 160), (256, 160), (288, 128), (256, 128))


def _corner(around: _Around, outer: Sequence[Rect], inner: Sequence[Rect]) -> Rect | None:
    a = around
    if not a.top and not a.left and a.right and a.bottom:
        return outer[0]
    if not a.top and not a.right and a.left and a.bottom:
        return outer[1]
    if not a.bottom and not a.left and a.right and a.top:
        return outer[2]
    if not a.bottom and not a.right and a.left and a.top:
        return outer[3]
    if a.top and a.left and not a.top_left:
        return inner[0]
    if a.top and a.right and not a.top_right:
        return inner[1]
    if a.bottom and a.left and not a.bottom_left:
        return inner[2]
    if a.bottom and a.right and not a.bottom_right:
        return inner[3]
    return None


class LevelManager:
    """A rectangular grid of single-character tiles."""

    def __init__(
        self, level_data: Sequence[str] | None = None, rng: random.Random | None = None
    ) -> None:
        rows = list(level_data) if level_data else list(DEFAULT_LEVEL)
        self._grid = [list(row) for row in rows]
        self.height = len(self._grid)
        self.width = len(self._grid[0]) if self._grid else 0
        self.exit_blocks: list[tuple[int, int]] = []
        self._rng = rng or random.Random()
        self._tile_cache: dict[tuple[int, int], Rect] = {}

    @property
    def rows(self) -> list[str]:
        return ["".join(row) for row in self._grid]

    def load_from_file(self, path: str | PathLike[str]) -> None:
        """Load a level; exit tiles 'z' are remembered and turned into walls."""
        try:
            with open(path, encoding="latin-1") as fh:
                rows = [line.rstrip("\n") for line in fh]
        except OSError as exc:
            raise LevelError(f"failed to open level file: {path}") from exc

        rows = [row for row in rows if row]
        if not rows:
            raise LevelError(f"level file is empty: {path}")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise LevelError(f"inconsistent level width: {path}")

        grid = [list(row) for row in rows]
        exits = [
            (x, y) for y, row in enumerate(grid) for x, tile in enumerate(row) if tile == "z"
        ]
        for x, y in exits:
            grid[y][x] = "b"

        self._grid = grid
        self.height = len(grid)
        self.width = width
        self.exit_blocks = exits
        self._tile_cache.clear()

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_tile(self, x: int, y: int) -> str:
        """The tile at (x, y), or '0' outside the map."""
        return self._grid[y][x] if self._in_bounds(x, y) else "0"

    def set_tile(self, x: int, y: int, tile: str) -> None:
        if self._in_bounds(x, y):
            self._grid[y][x] = tile

    def is_wall(self, x: int, y: int) -> bool:
        return self.get_tile(x, y) in ("b", "z")

    def is_walkable(self, x: int, y: int) -> bool:
        return self.get_tile(x, y) in (" ", "=", "f")

    def is_shootable(self, x: int, y: int) -> bool:
        return not self.is_wall(x, y)

    def find_tile(self, tile: str) -> tuple[int, int] | None:
        """First position of ``tile`` scanning rows top to bottom."""
        for y, row in enumerate(self._grid):
            for x, value in enumerate(row):
                if value == tile:
                    return x, y
        return None

    def unlock_exits(self) -> None:
        for x, y in self.exit_blocks:
            self.set_tile(x, y, "=")

    def _around(self, tile: str, x: int, y: int) -> _Around:
        def same(dx: int, dy: int) -> bool:
            return self.get_tile(x + dx, y + dy) == tile

        return _Around(
            left=same(-1, 0),
            right=same(1, 0),
            top=same(0, -1),
            bottom=same(0, 1),
            top_left=same(-1, -1),
            top_right=same(1, -1),
            bottom_left=same(-1, 1),
            bottom_right=same(1, 1),
        )

    def _edge_variant(self, tiles: _EdgeTiles, around: _Around, x: int, y: int) -> Rect:
        corner = _corner(around, tiles.outer, tiles.inner)
        if corner is not None:
            return corner
        a = around
        k = x + y
        if a.left and a.right and a.top and a.bottom:
            return tiles.filled[k % 5]
        if a.top and not a.bottom:
            return tiles.bottom_edge[k % 4]
        if a.bottom and not a.top:
            return tiles.top_edge[k % 4]
        if a.left and not a.right:
            return tiles.right_edge[k % 4]
        if a.right and not a.left:
            return tiles.left_edge[k % 4]
        return tiles.fallback

    def _block_variant(self, around: _Around, x: int, y: int) -> Rect | None:
        corner = _corner(around, _BLOCK_OUTER, _BLOCK_INNER)
        if corner is not None:
            return corner
        a = around
        k = x + y
        if a.right and not a.left:
            return _tile(256, 32)
        if a.left and not a.right:
            return _tile(352, 32)
        if a.bottom and not a.top:
            return _rects((288, 0), (320, 0))[k % 2]
        if a.top and not a.bottom:
            return _rects((288, 64), (320, 64))[k % 2]
        if a.left and a.right and a.top and a.bottom:
            return _rects((288, 32), (320, 32))[k % 2]
        if not a.left and not a.right and a.top and a.bottom:
            return _rects((224, 128), (224, 160))[k % 2]
        return None

    def path_variant(self, tile: str, x: int, y: int) -> Rect:
        """Tileset rectangle for a connected tile, chosen from its neighbours."""
        if tile in _EDGE_TILES:
            return self._edge_variant(_EDGE_TILES[tile], self._around(tile, x, y), x, y)
        if tile == "b":
            variant = self._block_variant(self._around(tile, x, y), x, y)
            if variant is not None:
                return variant
        return TILE_TEXTURES[tile]

    def random_tile_variant(self, tile: str) -> Rect:
        variants = RANDOM_TILE_VARIANTS.get(tile)
        if variants:
            return self._rng.choice(variants)
        return TILE_TEXTURES[tile]

    def tile_rect(self, x: int, y: int) -> Rect:
        """Tileset rectangle used to draw the tile at (x, y)."""
        tile = self.get_tile(x, y)
        if tile in ("=", "w", "b"):
            return self.path_variant(tile, x, y)
        if tile in RANDOM_TILE_VARIANTS:
            key = (x, y)
            if key not in self._tile_cache:
                self._tile_cache[key] = self.random_tile_variant(tile)
            return self._tile_cache[key]
        return TILE_TEXTURES[tile]