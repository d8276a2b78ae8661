"""
Minefield - command line entry point.

Usage:
    minefield play [--mode {auto,manual}] [--preset NAME] [--rows N] [--cols N]
                   [--mines N | --density D] [--delay S] [--seed N]
    minefield evaluate [--games N] [--preset NAME] [--seed N]
"""
import argparse
import dataclasses
import logging
import sys
from typing import Callable, List, Optional

from .agents import RandomAgent
from .evaluation import Evaluator
from .game.config import GameConfig, PRESETS
from .game.session import GameState, PlayMode, run_game

logger = logging.getLogger(__name__)

LOG_FORMAT = "Minesweeper: %(message)s"
MODE_PROMPT = "Enter your option: \n1. Auto Play\n2. Manual\n Choice: "
MODE_CHOICES = {"1": PlayMode.AUTO, "2": PlayMode.MANUAL}


def configure_logging(verbose: bool = False) -> None:
    """Send log records to the console with the game's prefix."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
    )


def build_config(args: argparse.Namespace) -> GameConfig:
    """Build a GameConfig from a preset and command line overrides."""
    base = PRESETS[args.preset] if args.preset else GameConfig()
    options = {
        "rows": args.rows if args.rows is not None else base.rows,
        "cols": args.cols if args.cols is not None else base.cols,
        "seed": args.seed,
    }
    if args.mines is not None:
        options["num_mines"] = args.mines
    if args.density is not None:
        options["num_mines"] = None
        options["mine_density"] = args.density
    if getattr(args, "delay", None) is not None:
        options["delay"] = args.delay
    return dataclasses.replace(base, **options)


def ask_play_mode(input_fn: Callable[[str], str] = input) -> PlayMode:
    """
    Ask the player to choose auto or manual play.

    Raises:
        ValueError: If the answer is not one of the listed options.
    """
    choice = input_fn(MODE_PROMPT).strip()
    if choice not in MODE_CHOICES:
        raise ValueError(f"Invalid input {choice!r}")
    return MODE_CHOICES[choice]


def play(args: argparse.Namespace) -> int:
    """Play a single game in the console."""
    config = build_config(args)
    mode = PlayMode(args.mode) if args.mode else ask_play_mode()
    result = run_game(config, mode)
    return 0 if result == GameState.WON else 1


def evaluate(args: argparse.Namespace) -> int:
    """Evaluate the random agent over many games."""
    config = build_config(args)
    agent = RandomAgent(config.rows, config.cols, seed=args.seed)
    evaluator = Evaluator(config, num_episodes=args.games, seed=args.seed)

    print(f"\nEvaluating Random over {args.games} games...")
    results = evaluator.evaluate(agent)

    print("Results for Random:")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Avg reward: {results['avg_reward']:.2f}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg revealed: {results['avg_revealed']:.1f} cells")
    return 0


def _add_board_arguments(parser: argparse.ArgumentParser) -> None:
    """Arguments shared by every command that builds a board."""
    parser.add_argument(
        "--preset", choices=sorted(PRESETS), help="Difficulty preset"
    )
    parser.add_argument("--rows", type=int, help="Number of rows")
    parser.add_argument("--cols", type=int, help="Number of columns")
    mines = parser.add_mutually_exclusive_group()
    mines.add_argument("--mines", type=int, help="Exact number of mines")
    mines.add_argument(
        "--density",
        type=float,
        help="Scale applied to a random cell count to pick the mine count",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        description="Minefield - a grid-based mine detection game"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a game")
    play_parser.add_argument(
        "--mode",
        choices=[mode.value for mode in PlayMode],
        help="Auto play or manual input (asked when omitted)",
    )
    play_parser.add_argument(
        "--delay", type=float, default=None, help="Seconds between turns"
    )
    _add_board_arguments(play_parser)

    # Evaluate command
    eval_parser = subparsers.add_parser(
        "evaluate", help="Evaluate the random agent"
    )
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    _add_board_arguments(eval_parser)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    commands = {"play": play, "evaluate": evaluate}
    if args.command not in commands:
        parser.print_help()
        return 0

    try:
        return commands[args.command](args)
    except ValueError as error:
        # InvalidConfiguration and bad menu choices
        logger.error("%s", error)
        return 2
    except (KeyboardInterrupt, EOFError):
        logger.info("Game aborted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
