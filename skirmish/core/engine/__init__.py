"""Core engine components.

This package contains the systems that drive a battle from outside:
- dice.py: Injected randomness sources for attack rolls
- game_loop.py: Fixed-timestep scheduler for update/render callbacks
"""

from .dice import DiceSource, RandomDice, FixedDice, SequenceDice, DiceExhaustedError
from .game_loop import GameLoop

__all__ = [
    "DiceSource",
    "RandomDice",
    "FixedDice",
    "SequenceDice",
    "DiceExhaustedError",
    "GameLoop",
]
