#!/usr/bin/env python3

import argparse
import sys
from typing import Optional

from skirmish.core.asset_loader import FileAssetLoader
from skirmish.core.config_loader import find_project_root, load_game_config
from skirmish.core.engine.dice import DiceSource, FixedDice, RandomDice
from skirmish.core.events import EventManager, LogSaveRequested
from skirmish.core.input import SimpleInputManager
from skirmish.core.services import ServiceContainer
from skirmish.game.entities.roster import RosterError, default_roster, load_roster
from skirmish.game.game import Game, GameError
from skirmish.game.managers.log_manager import LogLevel, LogManager
from skirmish.game.managers.turn_manager import BattleOutcome, TurnManager
from skirmish.renderers import HeadlessRenderer, TerminalRenderer


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a turn-based skirmish between two combatants")
    parser.add_argument("--config", help="Path to the game config YAML")
    parser.add_argument("--roster", help="Path to a roster YAML (defaults to Alice vs Vim)")
    parser.add_argument("--seed", type=int, help="Seed for the attack dice")
    parser.add_argument(
        "--fixed-roll",
        type=int,
        metavar="N",
        help="Roll N on every attack instead of rolling dice"
    )
    parser.add_argument("--max-turns", type=int, help="Stop the battle after this many turns")
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Do not print frames, only the battle log"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Also print debug messages such as dice rolls"
    )
    parser.add_argument(
        "--save-log",
        action="store_true",
        help="Write the full battle log to a timestamped file when the game ends"
    )
    parser.add_argument("--log-dir", default="logs", help="Directory for saved logs (default: logs)")
    return parser.parse_args(argv)


def describe_outcome(outcome: Optional[BattleOutcome]) -> str:
    if outcome is None:
        return "The battle was abandoned."
    if outcome.winner is not None:
        return f"{outcome.winner.name} won after {outcome.turns_taken} turns."
    return f"No winner after {outcome.turns_taken} turns ({outcome.reason.name.lower()})."


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)

    try:
        config = load_game_config(args.config)
        roster = load_roster(args.roster) if args.roster else default_roster()
        first, second = roster.create_battle_pair()
    except (ValueError, FileNotFoundError, RosterError) as e:
        print(f"Error: {e}")
        return 1

    dice: DiceSource
    if args.fixed_roll is not None:
        dice = FixedDice(args.fixed_roll)
    else:
        seed = args.seed if args.seed is not None else config.seed
        dice = RandomDice(sides=config.dice_sides, seed=seed)

    max_turns = args.max_turns if args.max_turns is not None else config.max_turns

    event_manager = EventManager()
    log_manager = LogManager(event_manager, echo=print, log_dir=args.log_dir)
    event_manager.set_error_callback(log_manager.error)
    if args.verbose:
        log_manager.set_log_level(LogLevel.DEBUG)

    services = ServiceContainer()
    services.register_asset_loader(FileAssetLoader(find_project_root()))
    if args.headless:
        services.register_renderer(HeadlessRenderer(config.renderer, keep_frames=1))
    else:
        services.register_renderer(TerminalRenderer(config.renderer))
    services.register_input_manager(SimpleInputManager())

    battle: Optional[TurnManager] = None
    try:
        battle = TurnManager(first, second, dice, event_manager=event_manager, max_turns=max_turns)
        game = Game(services, config, battle, event_manager)
        outcome = game.run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user")
        return 130
    except (GameError, ValueError) as e:
        print(f"\n\nError: {e}")
        return 1
    finally:
        if args.save_log:
            event_manager.publish(LogSaveRequested(turn=battle.turns_taken if battle else 0))
            event_manager.flush()

    print(describe_outcome(outcome))
    return 0


if __name__ == "__main__":
    sys.exit(main())
