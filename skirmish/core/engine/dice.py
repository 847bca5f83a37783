"""Randomness sources for attack rolls.

The turn manager never rolls on its own; it asks an injected DiceSource.
Real play uses RandomDice, tests use FixedDice or SequenceDice.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Optional

import numpy as np


DEFAULT_DICE_SIDES = 100
REFERENCE_ROLL = 50


class DiceExhaustedError(RuntimeError):
    """Raised when a scripted dice sequence has no rolls left."""


class DiceSource(ABC):
    """Supplies die rolls, conventionally in [1, 100]."""

    @abstractmethod
    def roll(self) -> int:
        pass


class RandomDice(DiceSource):
    """Uniform rolls in [1, sides] from a numpy random generator."""

    def __init__(self, sides: int = DEFAULT_DICE_SIDES, seed: Optional[int] = None):
        if sides < 1:
            raise ValueError(f"Die must have at least one side: {sides}")
        self.sides = sides
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def roll(self) -> int:
        return int(self._rng.integers(1, self.sides, endpoint=True))

    def roll_many(self, count: int) -> list[int]:
        """Roll the die count times in one vectorized draw."""
        rolls = self._rng.integers(1, self.sides, size=count, endpoint=True)
        return [int(value) for value in rolls]


class FixedDice(DiceSource):
    """Always rolls the same value."""

    def __init__(self, value: int = REFERENCE_ROLL):
        self.value = value

    def roll(self) -> int:
        return self.value


class SequenceDice(DiceSource):
    """Rolls a scripted sequence of values, optionally repeating it."""

    def __init__(self, rolls: Iterable[int], cycle: bool = False):
        self._rolls = [int(value) for value in rolls]
        if not self._rolls:
            raise ValueError("SequenceDice needs at least one roll")
        self.cycle = cycle
        self._index = 0

    @property
    def remaining(self) -> Optional[int]:
        """Rolls left before exhaustion, or None when cycling."""
        if self.cycle:
            return None
        return len(self._rolls) - self._index

    def roll(self) -> int:
        if self._index >= len(self._rolls):
            if not self.cycle:
                raise DiceExhaustedError(
                    f"All {len(self._rolls)} scripted rolls have been used"
                )
            self._index = 0

        value = self._rolls[self._index]
        self._index += 1
        return value
