"""Combat system components.

This package contains the combat logic with clear separation of concerns:
- battle_calculator.py: Pure hit rate, attack result and damage formulas
- combat_resolver.py: Applying one attack exchange to a defender's health
"""

from .battle_calculator import BattleCalculator, BattleForecast
from .combat_resolver import CombatResolver, CombatResult

__all__ = [
    "BattleCalculator",
    "BattleForecast",
    "CombatResolver",
    "CombatResult",
]
