"""Event system for publisher-subscriber communication.

This package contains the event-driven plumbing:
- event_manager.py: Queued publisher-subscriber event routing
- events.py: Event definitions for battle and application communication
"""

from .event_manager import EventManager
from .events import (
    GameEvent,
    EventType,
    BattleStarted,
    TurnStarted,
    AttackResolved,
    UnitDamaged,
    UnitDefeated,
    BattleEnded,
    LogMessage,
    LogSaveRequested,
    GameStarted,
    GameEnded,
)

__all__ = [
    "EventManager",
    "GameEvent",
    "EventType",
    "BattleStarted",
    "TurnStarted",
    "AttackResolved",
    "UnitDamaged",
    "UnitDefeated",
    "BattleEnded",
    "LogMessage",
    "LogSaveRequested",
    "GameStarted",
    "GameEnded",
]
