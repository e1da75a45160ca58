"""Reading monster spawn points from wave files."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike

_INT = re.compile(r"[+-]?\d+")
_WORD = re.compile(r"\S+")


@dataclass(frozen=True)
class SpawnPoint:
    """A monster type to spawn at tile (x, y)."""

    x: int
    y: int
    kind: str


class _Scanner:
    """Whitespace-separated extraction of characters, integers and words."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _skip_space(self) -> None:
        while self._pos < len(self._text) and self._text[self._pos].isspace():
            self._pos += 1

    def char(self) -> str | None:
        self._skip_space()
        if self._pos >= len(self._text):
            return None
        ch = self._text[self._pos]
        self._pos += 1
        return ch

    def _match(self, pattern: re.Pattern[str]) -> str | None:
        self._skip_space()
        found = pattern.match(self._text, self._pos)
        if not found:
            return None
        self._pos = found.end()
        return found.group()

    def integer(self) -> int | None:
        token = self._match(_INT)
        return int(token) if token is not None else None

    def word(self) -> str | None:
        return self._match(_WORD)


def _parse_line(line: str) -> SpawnPoint | None:
    scan = _Scanner(line)
    if scan.char() is None:
        return None
    x = scan.integer()
    if x is None or scan.char() is None:
        return None
    y = scan.integer()
    if y is None or scan.char() is None or scan.char() is None:
        return None
    kind = scan.word()
    if kind is None:
        return None
    return SpawnPoint(x, y, kind)


def load_waves(path: str | PathLike[str]) -> list[SpawnPoint]:
    """Spawn points of a wave file such as ``{3, 4}, slime``; empty if unreadable."""
    try:
        with open(path, encoding="utf-8") as fh:
            lines = fh.read().splitlines()
    except OSError:
        return []

    spawns = []
    for line in lines:
        if not line or line.startswith("//"):
            continue
        spawn = _parse_line(line)
        if spawn is not None:
            spawns.append(spawn)
    return spawns