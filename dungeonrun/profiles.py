"""Saved player profiles kept in a plain text file, one per line."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

_INT = re.compile(r"\s*([+-]?\d+)")
_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_WORD = re.compile(r"\s*(\S+)")


@dataclass
class Profile:
    name: str
    money: int = 0
    max_hp: int = 0
    strength: int = 0
    speed: float = 0.0


def _parse_line(line: str) -> Profile:
    """Read ``name money max_hp strength speed``; fields after a bad one stay zero."""
    word = _WORD.match(line)
    if word is None:
        return Profile("")
    profile = Profile(word.group(1))
    pos = word.end()
    for field, pattern, convert in (
        ("money", _INT, int),
        ("max_hp", _INT, int),
        ("strength", _INT, int),
        ("speed", _FLOAT, float),
    ):
        found = pattern.match(line, pos)
        if found is None:
            break
        setattr(profile, field, convert(found.group(1)))
        pos = found.end()
    return profile


class ProfileManager:
    """Loads, stores and looks up profiles in one file."""

    def __init__(self, path: str | PathLike[str]) -> None:
        self.path = Path(path)
        self.profiles: list[Profile] = []

    def load_profiles(self) -> None:
        """Replace the profiles with those in the file; none if it cannot be read."""
        self.profiles = []
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError:
            return
        for line in text.splitlines():
            if not line:
                continue
            profile = _parse_line(line)
            if profile.name:
                self.profiles.append(profile)

    def save_profiles(self) -> None:
        """Write every profile; an unwritable file is left alone."""
        lines = "".join(
            f"{p.name} {p.money} {p.max_hp} {p.strength} {p.speed:g}\n" for p in self.profiles
        )
        try:
            self.path.write_text(lines, encoding="utf-8")
        except OSError:
            return

    def add_profile(self, profile: Profile) -> None:
        self.profiles.append(profile)

    def get_profile(self, name: str) -> Profile | None:
        return next((p for p in self.profiles if p.name == name), None)