"""
Battle calculation system for attack outcomes and damage.

This module holds the pure combat formulas. Nothing here mutates a
combatant; the resolver and the turn manager apply the results.
"""
import math
from dataclasses import dataclass
from typing import Optional

from ...core.data import AttackResult
from ..entities.combatant import Combatant


DIRECT_HIT_MULTIPLIER = 1.0
GLANCING_BLOW_MULTIPLIER = 0.5


@dataclass(frozen=True)
class BattleForecast:
    """Read-only prediction of an attack, for display before it happens."""
    attacker_name: str
    defender_name: str
    can_attack: bool
    hit_rate: Optional[int] = None
    direct_hit_chance: float = 0.0
    direct_damage: Optional[int] = None
    glancing_damage: Optional[int] = None
    expected_damage: float = 0.0


class BattleCalculator:
    """Calculates hit rates, attack results and damage between two combatants."""

    @staticmethod
    def calculate_hit_rate(attacker: Combatant, defender: Combatant) -> Optional[int]:
        """
        Calculate the chance of the attacker hitting the defender.

        Args:
            attacker: The attacking combatant
            defender: The defending combatant

        Returns:
            Weapon hit rate plus attacker accuracy minus defender evasion, or
            None if the attacker has no weapon. The value is not clamped.
        """
        weapon = attacker.current_weapon
        if weapon is None:
            return None

        hit_rate = weapon.hit_rate
        hit_rate += attacker.stats.accuracy
        hit_rate -= defender.stats.evasion
        return hit_rate

    @staticmethod
    def resolve_attack(dice_roll: int, attacker: Combatant, defender: Combatant) -> AttackResult:
        """
        Resolve the result of an attack from a die roll.

        A roll at or below the hit rate is a direct hit ("if you meet it, you
        beat it"); anything above is a glancing blow.

        Args:
            dice_roll: Die roll, usually between 1 and 100 inclusive
            attacker: The attacking combatant
            defender: The defending combatant

        Returns:
            AttackResult for the attempt
        """
        if attacker.current_weapon is None:
            return AttackResult.NO_WEAPON

        hit_rate = BattleCalculator.calculate_hit_rate(attacker, defender)
        if hit_rate is None:
            # Unreachable while the weapon check above holds
            return AttackResult.MISS

        if dice_roll <= hit_rate:
            return AttackResult.DIRECT_HIT
        return AttackResult.GLANCING_BLOW

    @staticmethod
    def calculate_damage(
        attack_result: AttackResult,
        attacker: Combatant,
        defender: Combatant
    ) -> Optional[int]:
        """
        Calculate the damage of an attack.

        Base damage is weapon damage plus attacker strength minus defender
        defense. Direct hits deal the full base, glancing blows half of it,
        truncated toward zero (-5 becomes -2, not -3).

        Args:
            attack_result: Outcome from resolve_attack
            attacker: The attacking combatant
            defender: The defending combatant

        Returns:
            Damage amount, or None when the attack deals no damage
        """
        if attack_result == AttackResult.DIRECT_HIT:
            multiplier = DIRECT_HIT_MULTIPLIER
        elif attack_result == AttackResult.GLANCING_BLOW:
            multiplier = GLANCING_BLOW_MULTIPLIER
        else:
            return None

        weapon = attacker.current_weapon
        if weapon is None:
            return None

        damage = weapon.damage
        damage += attacker.stats.strength
        damage -= defender.stats.defense

        return math.trunc(damage * multiplier)

    @staticmethod
    def calculate_forecast(
        attacker: Combatant,
        defender: Combatant,
        dice_sides: int = 100
    ) -> BattleForecast:
        """
        Calculate a complete forecast of an attack without resolving it.

        Args:
            attacker: The attacking combatant
            defender: The defending combatant
            dice_sides: Number of faces on the die used for the roll

        Returns:
            BattleForecast with hit rate, direct hit chance and damage values
        """
        hit_rate = BattleCalculator.calculate_hit_rate(attacker, defender)
        if hit_rate is None:
            return BattleForecast(
                attacker_name=attacker.name,
                defender_name=defender.name,
                can_attack=False,
            )

        direct_hit_chance = BattleCalculator._direct_hit_chance(hit_rate, dice_sides)
        direct_damage = BattleCalculator.calculate_damage(AttackResult.DIRECT_HIT, attacker, defender)
        glancing_damage = BattleCalculator.calculate_damage(AttackResult.GLANCING_BLOW, attacker, defender)
        # Both are set once a weapon is present
        assert direct_damage is not None and glancing_damage is not None

        expected_damage = (
            direct_hit_chance * direct_damage
            + (1.0 - direct_hit_chance) * glancing_damage
        )

        return BattleForecast(
            attacker_name=attacker.name,
            defender_name=defender.name,
            can_attack=True,
            hit_rate=hit_rate,
            direct_hit_chance=direct_hit_chance,
            direct_damage=direct_damage,
            glancing_damage=glancing_damage,
            expected_damage=expected_damage,
        )

    @staticmethod
    def _direct_hit_chance(hit_rate: int, dice_sides: int) -> float:
        """Probability that a uniform roll in [1, dice_sides] meets the hit rate."""
        if dice_sides < 1:
            raise ValueError(f"Die must have at least one side: {dice_sides}")
        favourable = max(0, min(dice_sides, hit_rate))
        return favourable / dice_sides
