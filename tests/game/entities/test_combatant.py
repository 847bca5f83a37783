"""
Unit tests for the combat data model.

Tests Weapon, CombatStats, Health clamping and status classification,
and Combatant equipment handling.
"""
import pytest

from skirmish.core.data.game_enums import HealthStatus
from skirmish.game.entities.combatant import Combatant, CombatStats, Health, DEFAULT_MAX_HEALTH
from skirmish.game.entities.weapon import Weapon


class TestWeapon:
    """Test the immutable weapon descriptor."""

    def test_weapon_fields(self):
        weapon = Weapon("Longsword", 70, 8)

        assert weapon.name == "Longsword"
        assert weapon.hit_rate == 70
        assert weapon.damage == 8
        assert str(weapon) == "Longsword"

    def test_weapon_is_immutable(self):
        weapon = Weapon("Longsword", 70, 8)

        with pytest.raises(AttributeError):
            weapon.damage = 20  # type: ignore[misc]

    def test_out_of_range_values_are_accepted(self):
        weapon = Weapon("Cursed Blade", 250, -3)

        assert weapon.hit_rate == 250
        assert weapon.damage == -3


class TestCombatStats:
    """Test CombatStats defaults and mutation."""

    def test_defaults_are_zero(self):
        stats = CombatStats()

        assert (stats.accuracy, stats.evasion, stats.strength, stats.defense) == (0, 0, 0, 0)

    def test_stats_are_mutable_and_may_be_negative(self):
        stats = CombatStats()
        stats.accuracy = -5
        stats.defense = 12

        assert stats.accuracy == -5
        assert stats.defense == 12


class TestHealth:
    """Test Health clamping and classification."""

    def test_starts_at_max_and_healthy(self):
        health = Health(10)

        assert health.current == 10
        assert health.max == 10
        assert health.check_status() == HealthStatus.HEALTHY

    def test_damage_then_defeat(self):
        health = Health(10)

        assert health.damage(7) == HealthStatus.HURT
        assert health.current == 3
        assert health.damage(7) == HealthStatus.DEFEATED
        assert health.current == 0

    def test_damage_at_or_above_max_defeats(self):
        for amount in (10, 11, 1000):
            health = Health(10)
            assert health.damage(amount) == HealthStatus.DEFEATED
            assert health.current == 0
            assert health.is_defeated

    def test_zero_damage_keeps_status(self):
        health = Health(10)

        assert health.damage(0) == HealthStatus.HEALTHY
        assert health.current == 10

    def test_negative_damage_heals_but_never_above_max(self):
        health = Health(10)
        health.damage(6)

        assert health.damage(-3) == HealthStatus.HURT
        assert health.current == 7
        assert health.damage(-100) == HealthStatus.HEALTHY
        assert health.current == 10

    @pytest.mark.parametrize("amount", [-1000, -11, -1, 0, 1, 5, 9, 10, 11, 1000])
    def test_current_always_within_bounds(self, amount):
        health = Health(10)
        health.damage(3)
        health.damage(amount)

        assert 0 <= health.current <= health.max

    def test_defeated_health_can_be_healed(self):
        health = Health(10)
        health.damage(10)

        assert health.damage(-4) == HealthStatus.HURT
        assert health.current == 4

    def test_check_status_does_not_mutate(self):
        health = Health(10)
        health.damage(4)

        for _ in range(3):
            assert health.check_status() == HealthStatus.HURT
        assert health.current == 6

    def test_zero_max_health_reports_healthy(self):
        health = Health(0)

        assert health.check_status() == HealthStatus.HEALTHY
        assert health.damage(5) == HealthStatus.HEALTHY
        assert health.current == 0

    def test_negative_max_health_is_rejected(self):
        with pytest.raises(ValueError):
            Health(-1)

    def test_repr(self):
        assert repr(Health(10)) == "Health(current=10, max=10)"


class TestCombatant:
    """Test Combatant construction and equipment."""

    def test_new_combatant_defaults(self):
        combatant = Combatant("Alice")

        assert combatant.name == "Alice"
        assert str(combatant) == "Alice"
        assert combatant.health.max == DEFAULT_MAX_HEALTH == 10
        assert combatant.health.current == 10
        assert combatant.stats == CombatStats()
        assert combatant.current_weapon is None
        assert combatant.is_defeated is False

    def test_custom_max_health(self):
        assert Combatant("Brute", max_health=25).health.max == 25

    def test_equip_sets_weapon(self):
        combatant = Combatant("Alice")
        sword = Weapon("Longsword", 70, 8)
        combatant.equip(sword)

        assert combatant.current_weapon is sword

    def test_equip_replaces_previous_weapon(self):
        combatant = Combatant("Alice")
        combatant.equip(Weapon("Longsword", 70, 8))
        dagger = Weapon("Dagger", 85, 4)
        combatant.equip(dagger)

        assert combatant.current_weapon is dagger

    def test_combatants_do_not_share_components(self):
        first = Combatant("Alice")
        second = Combatant("Vim")
        first.stats.strength = 5
        first.health.damage(3)

        assert second.stats.strength == 0
        assert second.health.current == 10

    def test_defeated_combatant_remains_inspectable(self):
        combatant = Combatant("Vim")
        combatant.equip(Weapon("Longsword", 70, 8))
        combatant.health.damage(50)

        assert combatant.is_defeated
        assert combatant.name == "Vim"
        assert combatant.current_weapon is not None
        assert "Vim" in repr(combatant)
