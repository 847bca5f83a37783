"""Weapon equipment descriptor."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Weapon:
    """A weapon used in combat.

    Weapons are immutable once built. Hit rate and damage are not range
    checked; out-of-range values simply produce extreme battle outcomes.
    """
    name: str
    hit_rate: int  # Compared against a roll from 1 through 100
    damage: int    # Damage dealt on a direct hit

    def __str__(self) -> str:
        return self.name
