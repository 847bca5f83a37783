"""Core data definitions.

This package contains fundamental combat enums:
- game_enums.py: Attack results, health statuses and battle end reasons
"""

from .game_enums import (
    AttackResult,
    HealthStatus,
    BattleEndReason,
    ATTACK_RESULT_NAMES,
    HEALTH_STATUS_NAMES,
)

__all__ = [
    "AttackResult",
    "HealthStatus",
    "BattleEndReason",
    "ATTACK_RESULT_NAMES",
    "HEALTH_STATUS_NAMES",
]
