"""Timed status effects such as burning or freezing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class StatusEffectType(Enum):
    NONE = auto()
    BURNING = auto()
    FREEZING = auto()
    POISONED = auto()
    STUNNED = auto()


_DAMAGE_OVER_TIME = frozenset({StatusEffectType.BURNING, StatusEffectType.POISONED})
_TICK_SECONDS = 1.0


@dataclass
class StatusEffect:
    """One active effect; times are in seconds."""

    type: StatusEffectType
    duration: float
    intensity: float = 1.0
    time_since_applied: float = 0.0

    def is_expired(self) -> bool:
        return self.time_since_applied >= self.duration


class StatusSystem:
    """The set of effects currently applied to an owner with an ``hp`` attribute."""

    def __init__(self, owner: Any) -> None:
        self.owner = owner
        self._effects: list[StatusEffect] = []

    @property
    def effects(self) -> tuple[StatusEffect, ...]:
        return tuple(self._effects)

    def update(self, dt: float) -> None:
        remaining = []
        for effect in self._effects:
            effect.time_since_applied += dt
            if (
                effect.type in _DAMAGE_OVER_TIME
                and effect.time_since_applied >= _TICK_SECONDS
            ):
                self.owner.hp = int(self.owner.hp - effect.intensity)
                effect.time_since_applied = 0.0
            if not effect.is_expired():
                remaining.append(effect)
        self._effects = remaining

    def apply_effect(
        self, effect_type: StatusEffectType, duration: float, intensity: float = 1.0
    ) -> None:
        """Add an effect, or restart an existing one of the same type."""
        for effect in self._effects:
            if effect.type is effect_type:
                effect.duration = duration
                effect.time_since_applied = 0.0
                effect.intensity = intensity
                return
        self._effects.append(StatusEffect(effect_type, duration, intensity))

    def remove_effect(self, effect_type: StatusEffectType) -> None:
        self._effects = [e for e in self._effects if e.type is not effect_type]

    def has_effect(self, effect_type: StatusEffectType) -> bool:
        return any(e.type is effect_type for e in self._effects)

    def clear_all_effects(self) -> None:
        self._effects.clear()

    def is_burning(self) -> bool:
        return self.has_effect(StatusEffectType.BURNING)

    def is_frozen(self) -> bool:
        return self.has_effect(StatusEffectType.FREEZING)

    def is_poisoned(self) -> bool:
        return self.has_effect(StatusEffectType.POISONED)

    def is_stunned(self) -> bool:
        return self.has_effect(StatusEffectType.STUNNED)