"""Game logger for detailed game replay."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Sequence, TextIO

from pydantic import BaseModel

from turngames.models.player import Player
from turngames.models.result import GameKind, GameResult

from .formatters import format_board, format_players


class GameLogConfig(BaseModel):
    """Configuration for game logging."""

    enabled: bool = False
    output_path: str = "game_log.jsonl"


class GameLogger:
    """Logger for detailed game events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    This allows step-by-step replay of the game.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> "GameLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        """Write an event to the log file.

        Args:
            event: Event dictionary to write as JSON.
        """
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_session_start(self, kind: GameKind, num_games: int) -> None:
        """Log session start.

        Args:
            kind: Game being played.
            num_games: Number of games scheduled.
        """
        self._write({
            "type": "session_start",
            "timestamp": datetime.now().isoformat(),
            "game_kind": kind.value,
            "num_games": num_games,
        })

    def log_game_start(
        self,
        game_num: int,
        players: Sequence[Player],
        board: Sequence[Sequence[object | None]],
    ) -> None:
        """Log game start with the initial board.

        Args:
            game_num: Game number.
            players: Players in turn order.
            board: Board right after initialize().
        """
        self._write({
            "type": "game_start",
            "game": game_num,
            "players": format_players(players),
            "board": format_board(board),
        })

    def log_move(
        self,
        game_num: int,
        move_num: int,
        player_id: str,
        action: dict[str, Any],
        board: Sequence[Sequence[object | None]],
    ) -> None:
        """Log a single move.

        Args:
            game_num: Game number.
            move_num: Move number within the game.
            player_id: Player who moved.
            action: Move details (e.g. {"fill": [1, 2]} or {"operate": "left"}).
            board: Board after the move.
        """
        self._write({
            "type": "move",
            "game": game_num,
            "move": move_num,
            "player": player_id,
            "action": action,
            "board": format_board(board),
        })

    def log_game_end(self, result: GameResult) -> None:
        """Log game end with results.

        Args:
            result: Result of the finished game.
        """
        self._write({
            "type": "game_end",
            "game": result.game_number,
            "winner": result.winner,
            "draw": result.is_draw,
            "moves": result.moves,
            "max_number": result.max_number,
        })

    def log_session_end(self, results: Sequence[GameResult]) -> None:
        """Log session end with a win tally.

        Args:
            results: Results of every game in the session.
        """
        wins: dict[str, int] = {}
        for result in results:
            if result.winner is not None:
                wins[result.winner] = wins.get(result.winner, 0) + 1

        self._write({
            "type": "session_end",
            "total_games": len(results),
            "wins": wins,
            "draws": sum(1 for r in results if r.is_draw),
        })
