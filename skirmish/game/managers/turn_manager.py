"""
Turn management system for a two-combatant battle.

This module sequences alternating attacks between two combatants, applies
each result through the combat resolver and stops as soon as one side is
defeated. A turn limit guards against battles that can never end, such as
two unarmed combatants.
"""
from dataclasses import dataclass, field
from typing import Optional, TYPE_CHECKING

from ...core.data import BattleEndReason
from ...core.events import BattleEnded, BattleStarted, LogMessage, TurnStarted
from ..combat.combat_resolver import CombatResolver, CombatResult
from ..entities.combatant import Combatant

if TYPE_CHECKING:
    from ...core.engine.dice import DiceSource
    from ...core.events import EventManager


DEFAULT_MAX_TURNS = 100


class BattleConfigurationError(ValueError):
    """Raised when a battle is set up with invalid participants or limits."""


class BattleOverError(RuntimeError):
    """Raised when a turn is requested after the battle has ended."""


@dataclass(frozen=True)
class BattleOutcome:
    """Final result of a battle."""
    reason: BattleEndReason
    turns_taken: int
    winner: Optional[Combatant] = None
    loser: Optional[Combatant] = None
    records: tuple[CombatResult, ...] = field(default_factory=tuple)


class TurnManager:
    """Manages turn progression between two combatants."""

    def __init__(
        self,
        first: Combatant,
        second: Combatant,
        dice: "DiceSource",
        event_manager: Optional["EventManager"] = None,
        max_turns: Optional[int] = DEFAULT_MAX_TURNS
    ):
        """Set up a battle. Nothing is rolled until the first turn.

        Args:
            first: Combatant that attacks on odd turns
            second: Combatant that attacks on even turns
            dice: Randomness source for attack rolls
            event_manager: Optional event bus for turn records and logs
            max_turns: Turn limit, or None for no limit

        Raises:
            BattleConfigurationError: If the participants or limit are invalid
        """
        self._validate(first, second, max_turns)

        self.first = first
        self.second = second
        self.dice = dice
        self.event_manager = event_manager
        self.max_turns = max_turns
        self.resolver = CombatResolver(event_manager)

        self.records: list[CombatResult] = []
        self._started = False
        self._outcome: Optional[BattleOutcome] = None

    @staticmethod
    def _validate(first: Combatant, second: Combatant, max_turns: Optional[int]) -> None:
        for combatant in (first, second):
            if not isinstance(combatant, Combatant):
                raise BattleConfigurationError(
                    f"Battle participants must be Combatants, got {type(combatant).__name__}"
                )
        if first is second:
            raise BattleConfigurationError(f"{first.name} cannot battle themselves")
        if max_turns is not None and max_turns <= 0:
            raise BattleConfigurationError(f"max_turns must be positive: {max_turns}")

    @property
    def turns_taken(self) -> int:
        return len(self.records)

    @property
    def current_attacker(self) -> Combatant:
        """Combatant that attacks on the next turn."""
        return self.first if self.turns_taken % 2 == 0 else self.second

    @property
    def current_defender(self) -> Combatant:
        return self.second if self.turns_taken % 2 == 0 else self.first

    @property
    def is_over(self) -> bool:
        if self.first.is_defeated or self.second.is_defeated:
            return True
        return self.max_turns is not None and self.turns_taken >= self.max_turns

    @property
    def outcome(self) -> Optional[BattleOutcome]:
        """Final outcome, available once the battle is over."""
        if self._outcome is None and self.is_over:
            self._finish()
        return self._outcome

    def take_turn(self) -> CombatResult:
        """Resolve the next attack in the alternation.

        Returns:
            CombatResult for the turn

        Raises:
            BattleOverError: If the battle has already ended
        """
        if self.is_over:
            raise BattleOverError("The battle is over; no further turns can be taken")

        if not self._started:
            self._start()

        turn = self.turns_taken + 1
        attacker = self.current_attacker
        defender = self.current_defender

        self._publish(TurnStarted(turn=turn, attacker=attacker, defender=defender))

        dice_roll = self.dice.roll()
        result = self.resolver.execute_attack(attacker, defender, dice_roll, turn=turn)
        self.records.append(result)

        if self.is_over:
            self._finish()

        return result

    def run(self) -> BattleOutcome:
        """Take turns until one combatant is defeated or the limit is reached."""
        while not self.is_over:
            self.take_turn()

        outcome = self.outcome
        assert outcome is not None
        return outcome

    def _start(self) -> None:
        self._started = True
        self._publish(BattleStarted(turn=0, first=self.first, second=self.second))
        self._emit_log(f"Battle started: {self.first.name} vs {self.second.name}", turn=0)

    def _finish(self) -> None:
        """Record the outcome and announce the end of the battle."""
        if self._outcome is not None:
            return

        first_down = self.first.is_defeated
        second_down = self.second.is_defeated

        winner: Optional[Combatant] = None
        loser: Optional[Combatant] = None
        if first_down or second_down:
            reason = BattleEndReason.DEFEAT
            if second_down and not first_down:
                winner, loser = self.first, self.second
            elif first_down and not second_down:
                winner, loser = self.second, self.first
        else:
            reason = BattleEndReason.TURN_LIMIT

        self._outcome = BattleOutcome(
            reason=reason,
            turns_taken=self.turns_taken,
            winner=winner,
            loser=loser,
            records=tuple(self.records),
        )

        self._publish(BattleEnded(turn=self.turns_taken, reason=reason, winner=winner, loser=loser))
        if reason == BattleEndReason.TURN_LIMIT:
            self._emit_log(
                f"Battle stopped after {self.turns_taken} turns without a victor",
                turn=self.turns_taken,
                level="WARNING",
            )

    def _publish(self, event) -> None:
        if self.event_manager is not None:
            self.event_manager.publish(event)

    def _emit_log(self, message: str, turn: int, level: str = "INFO") -> None:
        """Emit a log message event."""
        self._publish(
            LogMessage(
                turn=turn,
                message=message,
                category="BATTLE",
                level=level,
                source="TurnManager"
            )
        )
