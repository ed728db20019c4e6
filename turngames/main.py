"""Main entry point for the self-play runner."""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from turngames.config import load_config
from turngames.errors import GameError
from turngames.games.runner import GameRunner
from turngames.logging import GameLogConfig, GameLogger
from turngames.models.result import GameKind
from turngames.utils.logger import GameDisplay, setup_logging

logger = logging.getLogger(__name__)


def generate_log_filename(log_dir: str, kind: GameKind) -> str:
    """Generate log filename with timestamp and game kind.

    Format: {ISO timestamp}_{kind}.jsonl

    Args:
        log_dir: Directory for log files.
        kind: Game being played.

    Returns:
        Full path to log file.
    """
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    return str(Path(log_dir) / f"{timestamp}_{kind.value}.jsonl")


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        description="Play tic-tac-toe or 2048 games between random bots"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-g",
        "--game",
        type=GameKind,
        choices=list(GameKind),
        default=GameKind.TICTACTOE,
        help="Game to play",
    )
    parser.add_argument(
        "-n",
        "--num-games",
        type=int,
        help="Number of games to play (overrides config)",
    )
    parser.add_argument(
        "--board-size",
        type=int,
        help="Tic-tac-toe board size (overrides config)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed (overrides config)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--show-boards",
        action="store_true",
        help="Print the final board of each game",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Directory for game log files (filename auto-generated)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    args = build_parser().parse_args(argv)

    # Load config
    config = load_config(args.config)

    # Apply command-line overrides
    if args.num_games:
        config.runner.num_games = args.num_games
    if args.board_size:
        config.tictactoe.board_size = args.board_size
    if args.seed is not None:
        config.runner.seed = args.seed
    if args.verbose:
        config.logging.level = "DEBUG"
    if args.show_boards:
        config.logging.show_boards = True

    # CLI argument overrides config file
    game_log_enabled = args.game_log is not None or config.game_log.enabled
    game_log_dir = str(args.game_log) if args.game_log else str(Path(config.game_log.output_path).parent)

    setup_logging(config.logging.level)
    display = GameDisplay(show_boards=config.logging.show_boards)

    if game_log_enabled:
        log_path = generate_log_filename(game_log_dir, args.game)
        game_log_config = GameLogConfig(enabled=True, output_path=log_path)
        print(f"Game log: {log_path}")
    else:
        game_log_config = GameLogConfig(enabled=False)

    try:
        with GameLogger(game_log_config) as game_logger:
            runner = GameRunner(config, game_logger)
            runner.set_callbacks(
                on_game_end=lambda result, game: display.print_game_end(result, game.board)
            )

            display.print_session_start(args.game, config.runner.num_games)
            results = runner.run_games(args.game)
            display.print_final_results(results)

        return 0

    except GameError as e:
        logger.error(f"Invalid game setup: {e}")
        return 2
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 1


if __name__ == "__main__":
    sys.exit(main())
