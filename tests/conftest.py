"""
Basic test fixtures for the skirmish test suite.

Provides simple fixtures for building combatants, weapons and event buses.
"""

import sys
import os
import pytest
from typing import Optional

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from skirmish.core.events.event_manager import EventManager
from skirmish.core.events.events import EventType
from skirmish.game.entities.combatant import Combatant
from skirmish.game.entities.weapon import Weapon


class TestDataBuilder:
    """Builders for common test objects."""

    @staticmethod
    def weapon(name: str = "Longsword", hit_rate: int = 70, damage: int = 8) -> Weapon:
        return Weapon(name, hit_rate, damage)

    @staticmethod
    def combatant(
        name: str = "Test Combatant",
        weapon: Optional[Weapon] = None,
        max_health: int = 10,
        **stats: int
    ) -> Combatant:
        combatant = Combatant(name, max_health=max_health)
        for stat, value in stats.items():
            setattr(combatant.stats, stat, value)
        if weapon is not None:
            combatant.equip(weapon)
        return combatant


class EventRecorder:
    """Collects every event delivered by an EventManager."""

    def __init__(self, event_manager: EventManager):
        self.events = []
        for event_type in EventType:
            event_manager.subscribe(event_type, self.events.append, subscriber_name="EventRecorder")

    def of_type(self, event_class):
        return [event for event in self.events if isinstance(event, event_class)]


@pytest.fixture
def event_manager():
    """Create an event manager for testing."""
    return EventManager()


@pytest.fixture
def event_recorder(event_manager):
    """Record all events processed by the event_manager fixture."""
    return EventRecorder(event_manager)


@pytest.fixture
def longsword():
    """The reference weapon: hit rate 70, damage 8."""
    return TestDataBuilder.weapon()


@pytest.fixture
def alice(longsword):
    return TestDataBuilder.combatant("Alice", longsword)


@pytest.fixture
def vim(longsword):
    return TestDataBuilder.combatant("Vim", longsword)


@pytest.fixture
def unarmed():
    """A combatant with no weapon equipped."""
    return TestDataBuilder.combatant("Unarmed")
