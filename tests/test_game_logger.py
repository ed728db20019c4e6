"""Tests for game logging."""

import json

from turngames.logging import (
    GameLogConfig,
    GameLogger,
    format_board,
    format_board_text,
    format_cell,
    format_players,
)
from turngames.models.player import Player
from turngames.models.result import GameKind, GameResult


def read_events(path) -> list[dict]:
    with open(path, encoding="utf-8") as f:
        return [json.loads(line) for line in f if line.strip()]


class TestFormatters:
    """Tests for board formatters."""

    def test_format_cell(self):
        """Test single cell formatting."""
        assert format_cell(None) == "."
        assert format_cell("X") == "X"
        assert format_cell(128) == "128"

    def test_format_board(self):
        """Test one string per row."""
        board = [["X", None], [None, "O"]]
        assert format_board(board) == ["X .", ". O"]

    def test_format_board_text_aligned(self):
        """Test that columns are right-aligned to the widest cell."""
        board = [[2, None], [None, 128]]
        assert format_board_text(board) == "  2   .\n  . 128"

    def test_format_players(self):
        """Test player formatting."""
        players = [Player(id="u1", name="Ann", symbol="X")]
        assert format_players(players) == [{"id": "u1", "name": "Ann", "symbol": "X"}]


class TestGameLogger:
    """Tests for GameLogger."""

    def test_disabled_writes_nothing(self, tmp_path):
        """Test that a disabled logger opens no file."""
        path = tmp_path / "log.jsonl"
        with GameLogger(GameLogConfig(enabled=False, output_path=str(path))) as game_logger:
            game_logger.log_session_start(GameKind.TOFE, 1)
        assert not path.exists()

    def test_default_config_disabled(self):
        """Test that no config means logging is off."""
        game_logger = GameLogger()
        assert not game_logger.config.enabled
        game_logger.log_session_start(GameKind.TOFE, 1)

    def test_events_written(self, tmp_path):
        """Test a full session of events."""
        path = tmp_path / "logs" / "log.jsonl"
        players = [Player(id="u0", symbol="X"), Player(id="u1", symbol="O")]
        board = [[None] * 3 for _ in range(3)]
        result = GameResult(game_number=1, kind=GameKind.TICTACTOE, winner="u0", moves=5)

        with GameLogger(GameLogConfig(enabled=True, output_path=str(path))) as game_logger:
            game_logger.log_session_start(GameKind.TICTACTOE, 1)
            game_logger.log_game_start(1, players, board)
            board[1][1] = "X"
            game_logger.log_move(1, 1, "u0", {"fill": [1, 1]}, board)
            game_logger.log_game_end(result)
            game_logger.log_session_end([result])

        events = read_events(path)
        assert [e["type"] for e in events] == [
            "session_start",
            "game_start",
            "move",
            "game_end",
            "session_end",
        ]
        assert events[0]["game_kind"] == "tictactoe"
        assert events[1]["players"][1]["symbol"] == "O"
        assert events[2]["board"] == [". . .", ". X .", ". . ."]
        assert events[2]["action"] == {"fill": [1, 1]}
        assert events[3]["winner"] == "u0"
        assert events[4]["wins"] == {"u0": 1}
        assert events[4]["draws"] == 0

    def test_close_is_idempotent(self, tmp_path):
        """Test closing twice."""
        path = tmp_path / "log.jsonl"
        game_logger = GameLogger(GameLogConfig(enabled=True, output_path=str(path)))
        game_logger.__enter__()
        game_logger.close()
        game_logger.close()
        assert path.exists()
