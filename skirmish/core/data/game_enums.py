"""Centralized game enums and constants.

This module contains the core combat enums that are shared by the calculator,
the resolver, the turn manager and the presentation layer.
"""

from enum import Enum, auto


class AttackResult(Enum):
    """Categorical outcome of one attack attempt."""
    DIRECT_HIT = auto()     # Full damage
    GLANCING_BLOW = auto()  # Half damage, truncated
    MISS = auto()           # No damage
    NO_WEAPON = auto()      # Attacker has nothing to attack with

    @property
    def applies_damage(self) -> bool:
        return self in (AttackResult.DIRECT_HIT, AttackResult.GLANCING_BLOW)


class HealthStatus(Enum):
    """Classification of current health relative to the maximum."""
    HEALTHY = auto()
    HURT = auto()
    DEFEATED = auto()


class BattleEndReason(Enum):
    """Why a battle stopped issuing turns."""
    DEFEAT = auto()
    TURN_LIMIT = auto()


ATTACK_RESULT_NAMES = {
    AttackResult.DIRECT_HIT: "Direct Hit",
    AttackResult.GLANCING_BLOW: "Glancing Blow",
    AttackResult.MISS: "Miss",
    AttackResult.NO_WEAPON: "No Weapon",
}

HEALTH_STATUS_NAMES = {
    HealthStatus.HEALTHY: "Healthy",
    HealthStatus.HURT: "Hurt",
    HealthStatus.DEFEATED: "Defeated",
}
