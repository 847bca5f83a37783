"""
Log management system for battle narration and debugging.

This module provides centralized logging with categorization and filtering.
Components never print directly; they publish LogMessage events and the
LogManager stores, filters and optionally echoes them. Turn records are
turned into readable battle narration here, which keeps presentation out of
the combat core.
"""
import os
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Callable, Optional, TYPE_CHECKING

from ...core.data import AttackResult, BattleEndReason, HealthStatus
from ...core.events import (
    AttackResolved,
    BattleEnded,
    EventType,
    LogMessage as LogEvent,
    LogSaveRequested,
)

if TYPE_CHECKING:
    from ...core.events import EventManager
    from ..combat.combat_resolver import CombatResult


class LogCategory(Enum):
    """Categories for log messages."""
    SYSTEM = auto()   # Initialization, shutdown
    BATTLE = auto()   # Combat narration
    INPUT = auto()    # Input polling
    RENDER = auto()   # Frame drawing
    ASSET = auto()    # Asset loading
    DEBUG = auto()    # Debug messages
    WARNING = auto()  # Warning messages
    ERROR = auto()    # Error messages


class LogLevel(Enum):
    """Log levels for filtering."""
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


CATEGORY_TAGS = {
    LogCategory.SYSTEM: "SYS",
    LogCategory.BATTLE: "BTL",
    LogCategory.INPUT: "INP",
    LogCategory.RENDER: "RND",
    LogCategory.ASSET: "AST",
    LogCategory.DEBUG: "DBG",
    LogCategory.WARNING: "WRN",
    LogCategory.ERROR: "ERR",
}

# Minimum level a category is logged at when the event does not say
CATEGORY_LEVELS = {
    LogCategory.DEBUG: LogLevel.DEBUG,
    LogCategory.INPUT: LogLevel.DEBUG,
    LogCategory.WARNING: LogLevel.WARNING,
    LogCategory.ERROR: LogLevel.ERROR,
}


@dataclass
class LogEntry:
    """A single log message with metadata."""
    text: str
    category: LogCategory
    level: LogLevel = LogLevel.INFO
    timestamp: datetime = field(default_factory=datetime.now)

    def format(self, include_timestamp: bool = False, include_category: bool = True) -> str:
        """Format the message for display."""
        parts = []

        if include_timestamp:
            parts.append(f"[{self.timestamp.strftime('%H:%M:%S')}]")

        if include_category:
            parts.append(f"[{CATEGORY_TAGS.get(self.category, '???')}]")

        parts.append(self.text)
        return " ".join(parts)


def narrate_attack(result: "CombatResult") -> list[str]:
    """Describe one turn record as lines of battle text."""
    attacker = result.attacker_name
    defender = result.defender_name
    lines = [f"{attacker} attacks {defender}"]

    if result.attack_result == AttackResult.MISS:
        lines.append(f"{attacker} missed!")
    elif result.attack_result == AttackResult.NO_WEAPON:
        lines.append(f"{attacker} didn't equip a weapon!")
    elif result.attack_result == AttackResult.DIRECT_HIT:
        lines.append("It's a direct hit!")
    else:
        lines.append("It's a glancing blow.")

    if result.damage is not None:
        lines.append(f"{defender} takes {result.damage} damage.")
        lines.append(f"{defender} has {result.defender_health} hit points remaining.")
        if result.defender_status == HealthStatus.DEFEATED:
            lines.append(f"{defender} is defeated!")

    return lines


class LogManager:
    """Manages battle logging with categorization and filtering."""

    def __init__(
        self,
        event_manager: "EventManager",
        max_messages: int = 1000,
        default_level: LogLevel = LogLevel.INFO,
        echo: Optional[Callable[[str], None]] = None,
        log_dir: str = "logs"
    ):
        """Initialize the log manager.

        Args:
            event_manager: Event manager for event-driven logging
            max_messages: Maximum number of messages to store in the buffer
            default_level: Minimum level for messages to be shown
            echo: Optional sink that receives each visible formatted line
            log_dir: Directory used by save_log_to_file
        """
        self.messages: deque[LogEntry] = deque(maxlen=max_messages)
        self.log_level = default_level
        self.event_manager = event_manager
        self.echo = echo
        self.log_dir = log_dir

        self._setup_event_subscriptions()

    def _setup_event_subscriptions(self) -> None:
        """Set up event subscriptions for centralized logging."""
        self.event_manager.subscribe(
            EventType.LOG_MESSAGE,
            self._handle_log_message_event,
            subscriber_name="LogManager.log_message"
        )
        self.event_manager.subscribe(
            EventType.ATTACK_RESOLVED,
            self._handle_attack_resolved,
            subscriber_name="LogManager.attack_resolved"
        )
        self.event_manager.subscribe(
            EventType.BATTLE_ENDED,
            self._handle_battle_ended,
            subscriber_name="LogManager.battle_ended"
        )
        self.event_manager.subscribe(
            EventType.LOG_SAVE_REQUESTED,
            self._handle_log_save_request,
            subscriber_name="LogManager.log_save_request"
        )

    def _handle_log_message_event(self, event) -> None:
        if not isinstance(event, LogEvent):
            return
        try:
            category = LogCategory[event.category.upper()]
        except (KeyError, AttributeError):
            category = LogCategory.SYSTEM
        try:
            level = LogLevel[event.level.upper()]
        except (KeyError, AttributeError):
            level = LogLevel.INFO
        self.log(event.message, category, level)

    def _handle_attack_resolved(self, event) -> None:
        if isinstance(event, AttackResolved):
            for line in narrate_attack(event.result):
                self.battle(line)

    def _handle_battle_ended(self, event) -> None:
        if not isinstance(event, BattleEnded):
            return
        if event.reason == BattleEndReason.DEFEAT and event.winner is not None:
            self.battle(f"{event.winner.name} wins the battle!")
        elif event.reason == BattleEndReason.DEFEAT:
            self.battle("Both combatants have fallen.")
        else:
            self.battle(f"The battle ends in a stalemate after {event.turn} turns.")

    def _handle_log_save_request(self, event) -> None:
        if isinstance(event, LogSaveRequested):
            self.save_log_to_file()

    def log(self, text: str, category: LogCategory = LogCategory.SYSTEM,
            level: Optional[LogLevel] = None) -> None:
        """Add a message to the log.

        Args:
            text: The message text
            category: The category of the message
            level: Message level; defaults to the category's level
        """
        if level is None:
            level = CATEGORY_LEVELS.get(category, LogLevel.INFO)
        entry = LogEntry(text=text, category=category, level=level)
        self.messages.append(entry)

        if self.echo is not None and self._is_visible(entry):
            self.echo(entry.format(include_category=False))

    def _is_visible(self, entry: LogEntry) -> bool:
        return entry.level.value >= self.log_level.value

    # Convenience methods for common categories
    def system(self, text: str) -> None:
        self.log(text, LogCategory.SYSTEM)

    def battle(self, text: str) -> None:
        self.log(text, LogCategory.BATTLE)

    def error(self, text: str) -> None:
        self.log(text, LogCategory.ERROR)

    def set_log_level(self, level: LogLevel) -> None:
        self.log_level = level

    def save_log_to_file(self) -> Optional[str]:
        """Save all messages to a timestamped log file.

        Returns:
            Path of the written file, or None if writing failed
        """
        now = datetime.now()
        filepath = os.path.join(self.log_dir, f"log_{now.strftime('%Y%m%d_%H%M%S')}.log")

        try:
            os.makedirs(self.log_dir, exist_ok=True)

            with open(filepath, 'w', encoding='utf-8') as f:
                f.write("Skirmish - Battle Log\n")
                f.write(f"Generated: {now.strftime('%Y-%m-%d %H:%M:%S')}\n")
                f.write("=" * 60 + "\n\n")

                if not self.messages:
                    f.write("No messages to save.\n")
                else:
                    # Every message, ignoring the current filters
                    for msg in self.messages:
                        timestamp_str = msg.timestamp.strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
                        f.write(f"[{timestamp_str}] [{msg.category.name}] {msg.text}\n")
        except OSError as e:
            self.error(f"Failed to save log file: {e}")
            return None

        self.system(f"Battle log saved to {filepath}")
        return filepath
