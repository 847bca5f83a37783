"""Battle managers.

This package contains the managers that run a battle around the combat core:
- turn_manager.py: Alternating attacks until one combatant is defeated
- log_manager.py: Event-driven logging and battle narration
"""

from .log_manager import LogManager, LogCategory, LogLevel, LogEntry, narrate_attack
from .turn_manager import (
    TurnManager,
    BattleOutcome,
    BattleConfigurationError,
    BattleOverError,
)

__all__ = [
    "LogManager",
    "LogCategory",
    "LogLevel",
    "LogEntry",
    "narrate_attack",
    "TurnManager",
    "BattleOutcome",
    "BattleConfigurationError",
    "BattleOverError",
]
