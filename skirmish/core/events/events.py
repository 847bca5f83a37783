"""Battle events and their types.

This module defines the events that managers and front ends can subscribe to.

Event Design Principles:
- Events are immutable dataclasses
- All events carry the battle turn they belong to (0 outside a battle)
- Events are observational; nothing in the combat core reads them back
"""

from dataclasses import dataclass, field
from typing import Optional, TYPE_CHECKING
from abc import ABC
from enum import Enum, auto

from ..data import BattleEndReason, HealthStatus

if TYPE_CHECKING:
    from ...game.entities.combatant import Combatant
    from ...game.combat.combat_resolver import CombatResult


class EventType(Enum):
    """Types of events that managers can subscribe to."""
    # Battle Events
    BATTLE_STARTED = auto()
    TURN_STARTED = auto()
    ATTACK_RESOLVED = auto()
    UNIT_DAMAGED = auto()
    UNIT_DEFEATED = auto()
    BATTLE_ENDED = auto()

    # Logging Events
    LOG_MESSAGE = auto()
    LOG_SAVE_REQUESTED = auto()

    # Application Events
    GAME_STARTED = auto()
    GAME_ENDED = auto()


@dataclass(frozen=True)
class GameEvent(ABC):
    """Base class for all events."""
    turn: int
    event_type: EventType = field(init=False)


@dataclass(frozen=True)
class BattleStarted(GameEvent):
    """Event emitted before the first turn of a battle."""
    first: "Combatant"
    second: "Combatant"

    def __post_init__(self):
        # Set event_type since dataclass frozen=True prevents normal assignment
        object.__setattr__(self, 'event_type', EventType.BATTLE_STARTED)


@dataclass(frozen=True)
class TurnStarted(GameEvent):
    """Event emitted when an attacker begins its turn."""
    attacker: "Combatant"
    defender: "Combatant"

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.TURN_STARTED)


@dataclass(frozen=True)
class AttackResolved(GameEvent):
    """Event emitted once per turn with the complete record of the exchange."""
    result: "CombatResult"

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.ATTACK_RESOLVED)


@dataclass(frozen=True)
class UnitDamaged(GameEvent):
    """Event emitted when damage is applied to a combatant's health."""
    unit: "Combatant"
    damage: int
    status: HealthStatus

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.UNIT_DAMAGED)


@dataclass(frozen=True)
class UnitDefeated(GameEvent):
    """Event emitted when a combatant's status becomes Defeated."""
    unit: "Combatant"

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.UNIT_DEFEATED)


@dataclass(frozen=True)
class BattleEnded(GameEvent):
    """Event emitted when a battle stops issuing turns."""
    reason: BattleEndReason
    winner: Optional["Combatant"] = None
    loser: Optional["Combatant"] = None

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.BATTLE_ENDED)


@dataclass(frozen=True)
class LogMessage(GameEvent):
    """Event emitted when a log message is created."""
    message: str
    category: str = "SYSTEM"
    level: str = "INFO"
    source: str = "unknown"

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.LOG_MESSAGE)


@dataclass(frozen=True)
class LogSaveRequested(GameEvent):
    """Event emitted when the log buffer should be written to disk."""

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.LOG_SAVE_REQUESTED)


@dataclass(frozen=True)
class GameStarted(GameEvent):
    """Event emitted when the application finishes initialization."""
    title: str

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.GAME_STARTED)


@dataclass(frozen=True)
class GameEnded(GameEvent):
    """Event emitted when the application shuts down."""
    result: str
    reason: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.GAME_ENDED)
