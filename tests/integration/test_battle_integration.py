"""
Integration tests for complete battles.

Tests the roster, dice, turn manager, resolver, event bus and log manager
working together, and the command line entry point on top of them.
"""
import pytest

from skirmish.core.data.game_enums import AttackResult, BattleEndReason, HealthStatus
from skirmish.core.engine.dice import FixedDice, RandomDice, SequenceDice
from skirmish.core.events import AttackResolved, UnitDamaged, UnitDefeated
from skirmish.game.entities.roster import default_roster
from skirmish.game.managers.log_manager import LogManager
from skirmish.game.managers.turn_manager import TurnManager


@pytest.mark.integration
class TestReferenceDuel:
    """The default Alice versus Vim battle with a constant roll of 50."""

    @pytest.fixture
    def duel(self, event_manager):
        alice, vim = default_roster().create_battle_pair()
        battle = TurnManager(alice, vim, FixedDice(50), event_manager=event_manager)
        return alice, vim, battle

    def test_turn_by_turn(self, duel):
        alice, vim, battle = duel

        first = battle.take_turn()
        assert (first.attack_result, first.damage, first.defender_status) == (
            AttackResult.DIRECT_HIT, 8, HealthStatus.HURT
        )
        assert vim.health.current == 2

        second = battle.take_turn()
        assert second.defender_name == "Alice"
        assert alice.health.current == 2

        third = battle.take_turn()
        assert third.defender_status == HealthStatus.DEFEATED
        assert vim.health.current == 0
        assert battle.is_over

    def test_event_stream_matches_records(self, duel, event_manager, event_recorder):
        _, vim, battle = duel
        outcome = battle.run()
        event_manager.process_events()

        resolved = [e.result for e in event_recorder.of_type(AttackResolved)]
        assert resolved == list(outcome.records)
        assert [e.damage for e in event_recorder.of_type(UnitDamaged)] == [8, 8, 8]
        assert [e.unit for e in event_recorder.of_type(UnitDefeated)] == [vim]

    def test_narrated_log(self, duel, event_manager):
        echoed = []
        LogManager(event_manager, echo=echoed.append)
        _, _, battle = duel
        battle.run()
        event_manager.process_events()

        assert echoed == [
            "Battle started: Alice vs Vim",
            "Alice attacks Vim",
            "It's a direct hit!",
            "Vim takes 8 damage.",
            "Vim has 2 hit points remaining.",
            "Vim attacks Alice",
            "It's a direct hit!",
            "Alice takes 8 damage.",
            "Alice has 2 hit points remaining.",
            "Alice attacks Vim",
            "It's a direct hit!",
            "Vim takes 8 damage.",
            "Vim has 0 hit points remaining.",
            "Vim is defeated!",
            "Alice wins the battle!",
        ]


@pytest.mark.integration
class TestRandomBattles:
    """Battles driven by seeded random dice."""

    @pytest.mark.parametrize("seed", range(20))
    def test_every_seeded_battle_ends_in_defeat(self, seed):
        alice, vim = default_roster().create_battle_pair()
        outcome = TurnManager(alice, vim, RandomDice(seed=seed)).run()

        assert outcome.reason == BattleEndReason.DEFEAT
        assert outcome.winner is not None
        assert outcome.loser.is_defeated
        assert not outcome.winner.is_defeated
        # Glancing blows deal 4, direct hits 8: two or three attacks defeat anyone
        assert 3 <= outcome.turns_taken <= 6

    def test_same_seed_same_battle(self):
        outcomes = []
        for _ in range(2):
            alice, vim = default_roster().create_battle_pair()
            outcomes.append(TurnManager(alice, vim, RandomDice(seed=2024)).run())

        assert outcomes[0].records == outcomes[1].records

    def test_scripted_glancing_blows(self):
        alice, vim = default_roster().create_battle_pair()
        battle = TurnManager(alice, vim, SequenceDice([100], cycle=True))

        outcome = battle.run()

        # Three glancing blows of 4 from Alice: 10 -> 6 -> 2 -> 0
        assert outcome.turns_taken == 5
        assert outcome.winner is alice
        assert alice.health.current == 2


def write_fast_config(tmp_path) -> str:
    """A config that runs one turn per update at a high update rate."""
    config = tmp_path / "game.yaml"
    config.write_text(
        "loop:\n  updates_per_second: 1000\n  updates_per_turn: 1\n"
        "assets:\n  splash_image: null\n",
        encoding="utf-8",
    )
    return str(config)


@pytest.mark.integration
class TestCommandLine:
    """Test the main entry point end to end."""

    def test_headless_fixed_roll_run(self, capsys, tmp_path):
        import main

        exit_code = main.main(["--config", write_fast_config(tmp_path), "--headless", "--fixed-roll", "50"])

        output = capsys.readouterr().out
        assert exit_code == 0
        assert "Alice wins the battle!" in output
        assert "Alice won after 3 turns." in output

    def test_bad_roster_path(self, capsys, tmp_path):
        import main

        exit_code = main.main(["--roster", str(tmp_path / "missing.yaml"), "--headless"])

        assert exit_code == 1
        assert "Roster file not found" in capsys.readouterr().out

    def test_describe_outcome_without_battle(self):
        import main

        assert main.describe_outcome(None) == "The battle was abandoned."

    @pytest.mark.parametrize("flag, content", [
        ("--roster", "battle: [alice, vim]\n"),
        ("--roster", "weapons: {longsword: {hit_rate: 70\n"),
        ("--config", "loop: {updates_per_second: 60\n"),
    ])
    def test_malformed_yaml_reports_error(self, capsys, tmp_path, flag, content):
        import main

        path = tmp_path / "broken.yaml"
        path.write_text(content, encoding="utf-8")

        exit_code = main.main([flag, str(path), "--headless", "--fixed-roll", "1"])

        assert exit_code == 1
        assert capsys.readouterr().out.startswith("Error: ")

    def test_save_log_writes_battle_log(self, capsys, tmp_path):
        import main

        log_dir = tmp_path / "logs"
        exit_code = main.main([
            "--config", write_fast_config(tmp_path), "--headless", "--fixed-roll", "50",
            "--save-log", "--log-dir", str(log_dir),
        ])

        assert exit_code == 0
        saved = list(log_dir.iterdir())
        assert len(saved) == 1
        content = saved[0].read_text(encoding="utf-8")
        assert "[BATTLE] Alice wins the battle!" in content
        assert f"Battle log saved to {saved[0]}" in capsys.readouterr().out

    def test_verbose_prints_dice_rolls(self, capsys, tmp_path):
        import main

        exit_code = main.main([
            "--config", write_fast_config(tmp_path), "--headless", "--fixed-roll", "50", "--verbose",
        ])

        output = capsys.readouterr().out
        assert exit_code == 0
        assert "Alice rolled 50 against hit rate 70: DIRECT_HIT" in output
