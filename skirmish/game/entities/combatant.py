"""Combatant entity and its combat components.

This module contains the data model used by the battle calculator:
- CombatStats: additive/subtractive modifiers for the combat formulas
- Health: bounded vitality counter with derived status
- Combatant: identity plus stats, health and at most one weapon
"""

from dataclasses import dataclass
from typing import Optional

from ...core.data import HealthStatus
from .weapon import Weapon


DEFAULT_MAX_HEALTH = 10


@dataclass
class CombatStats:
    """A set of stats used in calculating combat values.

    Any integer is allowed, including negative values.
    """
    accuracy: int = 0  # Raises the attacker's hit rate
    evasion: int = 0   # Lowers the hit rate of attacks against this unit
    strength: int = 0  # Raises damage dealt
    defense: int = 0   # Lowers damage taken


class Health:
    """A creature's vitality, bound between 0 and a maximum value.

    The status is never stored; it is derived from the current value every
    time it is requested.
    """

    def __init__(self, max_hp: int):
        """Initialize health at its maximum.

        Args:
            max_hp: Maximum hit points

        Raises:
            ValueError: If max_hp is negative
        """
        if max_hp < 0:
            raise ValueError(f"Maximum health cannot be negative: {max_hp}")
        self._max = max_hp
        self._current = max_hp

    @property
    def current(self) -> int:
        return self._current

    @property
    def max(self) -> int:
        return self._max

    @property
    def is_defeated(self) -> bool:
        return self.check_status() == HealthStatus.DEFEATED

    def damage(self, amount: int) -> HealthStatus:
        """Reduce current health by the given amount and report the new status.

        Negative amounts raise current health; the result is still clamped
        to the maximum.

        Args:
            amount: Damage to subtract from current health

        Returns:
            The health status after the change
        """
        self._current -= amount
        self._clamp()
        return self.check_status()

    def _clamp(self) -> None:
        # Must run after every change to current health
        self._current = max(0, min(self._current, self._max))

    def check_status(self) -> HealthStatus:
        """Classify current health relative to the maximum.

        Healthy at the maximum, Defeated at 0, Hurt in between. The maximum
        is checked first, so a zero-maximum Health reports Healthy.
        """
        if self._current >= self._max:
            return HealthStatus.HEALTHY
        if self._current <= 0:
            return HealthStatus.DEFEATED
        return HealthStatus.HURT

    def __repr__(self) -> str:
        return f"Health(current={self._current}, max={self._max})"


class Combatant:
    """A character that might participate in combat.

    A combatant owns its stats, health and weapon outright. Reaching zero
    health only changes the derived status; the combatant stays a valid,
    inspectable value.
    """

    def __init__(self, name: str, max_health: int = DEFAULT_MAX_HEALTH):
        """Initialize a combatant with zeroed stats and no weapon.

        Args:
            name: Name used to refer to the combatant in text
            max_health: Maximum hit points
        """
        self.name = name
        self.stats = CombatStats()
        self.health = Health(max_health)
        self._weapon: Optional[Weapon] = None

    @property
    def current_weapon(self) -> Optional[Weapon]:
        return self._weapon

    def equip(self, weapon: Weapon) -> None:
        """Equip the given weapon, dropping any weapon currently held."""
        self._weapon = weapon

    @property
    def is_defeated(self) -> bool:
        return self.health.is_defeated

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Combatant(name={self.name!r}, health={self.health!r}, weapon={self._weapon!r})"
