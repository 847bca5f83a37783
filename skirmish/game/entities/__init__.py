"""Battle entities.

This package contains the combat data model:
- weapon.py: Immutable weapon descriptor
- combatant.py: CombatStats, Health and Combatant
- roster.py: YAML-driven weapon and combatant definitions
"""

from .weapon import Weapon
from .combatant import Combatant, CombatStats, Health, DEFAULT_MAX_HEALTH
from .roster import Roster, CombatantTemplate, RosterError, default_roster, load_roster, parse_roster

__all__ = [
    "Weapon",
    "Combatant",
    "CombatStats",
    "Health",
    "DEFAULT_MAX_HEALTH",
    "Roster",
    "CombatantTemplate",
    "RosterError",
    "default_roster",
    "load_roster",
    "parse_roster",
]
