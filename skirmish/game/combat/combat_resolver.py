"""
Combat resolution system for executing attacks and applying damage.

This module applies the pure formulas from the battle calculator to real
combatants. One call resolves one exchange in a fixed order: outcome, then
damage, then the health change, then the status observation.
"""
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from ...core.data import AttackResult, HealthStatus
from ...core.events import AttackResolved, LogMessage, UnitDamaged, UnitDefeated
from ..entities.combatant import Combatant
from .battle_calculator import BattleCalculator

if TYPE_CHECKING:
    from ...core.events import EventManager


@dataclass(frozen=True)
class CombatResult:
    """Observable record of one attack exchange."""
    turn: int
    attacker_name: str
    defender_name: str
    dice_roll: int
    attack_result: AttackResult
    damage: Optional[int]
    defender_status: HealthStatus
    defender_health: int

    @property
    def damage_applied(self) -> bool:
        return self.damage is not None


class CombatResolver:
    """Handles attack execution and damage application."""

    def __init__(self, event_manager: Optional["EventManager"] = None):
        self.event_manager = event_manager

    def execute_attack(
        self,
        attacker: Combatant,
        defender: Combatant,
        dice_roll: int,
        turn: int = 0
    ) -> CombatResult:
        """
        Execute a single attack and apply its damage to the defender.

        Args:
            attacker: The combatant performing the attack
            defender: The combatant receiving the attack
            dice_roll: Die roll used to decide the outcome
            turn: Battle turn number, carried into the result and events

        Returns:
            CombatResult describing the exchange
        """
        attack_result = BattleCalculator.resolve_attack(dice_roll, attacker, defender)
        self._emit_log(
            f"{attacker.name} rolled {dice_roll} against hit rate "
            f"{BattleCalculator.calculate_hit_rate(attacker, defender)}: {attack_result.name}",
            turn,
            level="DEBUG",
        )

        damage: Optional[int] = None
        was_defeated = defender.health.is_defeated
        if attack_result.applies_damage:
            damage = BattleCalculator.calculate_damage(attack_result, attacker, defender)

        if damage is not None:
            status = defender.health.damage(damage)
        else:
            status = defender.health.check_status()

        result = CombatResult(
            turn=turn,
            attacker_name=attacker.name,
            defender_name=defender.name,
            dice_roll=dice_roll,
            attack_result=attack_result,
            damage=damage,
            defender_status=status,
            defender_health=defender.health.current,
        )

        self._publish_result(result, defender, was_defeated)
        return result

    def _publish_result(self, result: CombatResult, defender: Combatant, was_defeated: bool) -> None:
        """Report the exchange to subscribers, if anyone is listening."""
        if self.event_manager is None:
            return

        self.event_manager.publish(AttackResolved(turn=result.turn, result=result))

        if result.damage is not None:
            self.event_manager.publish(
                UnitDamaged(
                    turn=result.turn,
                    unit=defender,
                    damage=result.damage,
                    status=result.defender_status,
                )
            )

        if result.defender_status == HealthStatus.DEFEATED and not was_defeated:
            self.event_manager.publish(UnitDefeated(turn=result.turn, unit=defender))

    def _emit_log(self, message: str, turn: int, category: str = "BATTLE", level: str = "INFO") -> None:
        """Emit a log message event."""
        if self.event_manager is None:
            return
        self.event_manager.publish(
            LogMessage(
                turn=turn,
                message=message,
                category=category,
                level=level,
                source="CombatResolver"
            )
        )
