"""Logging utilities and runner output."""

import logging
import sys
from typing import TYPE_CHECKING, Sequence

from turngames.logging.formatters import format_board_text

if TYPE_CHECKING:
    from turngames.models.result import GameKind, GameResult


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


class GameDisplay:
    """Display runner progress to stdout."""

    def __init__(self, show_boards: bool = False):
        """Initialize display.

        Args:
            show_boards: Whether to print the final board of each game
        """
        self.show_boards = show_boards

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 60)

    def print_session_start(self, kind: "GameKind", num_games: int) -> None:
        """Print session header."""
        self.print_separator()
        print(f"{kind.value.upper()}: {num_games} game(s)")
        self.print_separator()

    def print_game_end(
        self,
        result: "GameResult",
        board: Sequence[Sequence[object | None]],
    ) -> None:
        """Print a finished game (and its board if enabled)."""
        print(result)
        if self.show_boards:
            print(format_board_text(board))
            print()

    def print_final_results(self, results: Sequence["GameResult"]) -> None:
        """Print the session tally."""
        self.print_separator()
        print("FINAL RESULTS")
        self.print_separator()

        wins: dict[str, int] = {}
        for result in results:
            if result.winner is not None:
                wins[result.winner] = wins.get(result.winner, 0) + 1

        for rank, (player_id, count) in enumerate(
            sorted(wins.items(), key=lambda x: x[1], reverse=True), 1
        ):
            print(f"  #{rank}: {player_id} - {count} win(s)")

        draws = sum(1 for r in results if r.is_draw)
        losses = len(results) - sum(wins.values()) - draws
        print(f"  Draws: {draws}")
        if losses:
            print(f"  Losses: {losses}")
