"""Tic-tac-toe on an N x N board."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from turngames.core.game import DEFAULT_SYMBOLS, Game
from turngames.errors import ConfigurationError, ErrorCode, UsageError
from turngames.models.player import Player, PlayerCountRange

from .strike import check_strike

logger = logging.getLogger(__name__)

MIN_BOARD_SIZE = 2
MAX_BOARD_SIZE = 5


class TicTacToe(Game):
    """Players take turns marking cells; N in a row wins.

    The caller fills a cell for the current player, checks win() and then
    draw(), and advances the turn through player_manager.next().
    """

    def __init__(
        self,
        players: Iterable[Player],
        board_size: int = 3,
        symbols: Sequence[str] = DEFAULT_SYMBOLS,
    ):
        """Initialize game.

        Args:
            players: At least two players, in turn order
            board_size: Side length of the board (2-5)
            symbols: Alphabet players' marks are drawn from

        Raises:
            ConfigurationError: On a bad board size, player count or alphabet
        """
        if not MIN_BOARD_SIZE <= board_size <= MAX_BOARD_SIZE:
            raise ConfigurationError(
                ErrorCode.BOARD_SIZE,
                f"Board size must be between {MIN_BOARD_SIZE} and "
                f"{MAX_BOARD_SIZE}, got {board_size}",
            )

        super().__init__(
            players,
            PlayerCountRange(min=2),
            require_symbol=True,
            symbols=symbols,
        )

        self.board_size = board_size
        self.board: list[list[str | None]] = []
        self._occupied = 0

    @property
    def occupied(self) -> int:
        """Get number of filled cells."""
        return self._occupied

    def initialize(self) -> None:
        super().initialize()
        self.board = [[None] * self.board_size for _ in range(self.board_size)]

    def fill(self, row: int, col: int) -> None:
        """Mark a cell with the current player's symbol.

        Does not advance the turn.

        Raises:
            UsageError: If the cell is out of range or already filled, or
                the game is not running
        """
        self._check_playable()
        self._check_cell(row, col)
        if self.board[row][col] is not None:
            raise UsageError(
                ErrorCode.CELL_OCCUPIED,
                f"Trying to fill board[{row}][{col}] that has already been filled",
            )

        player = self.player_manager.now_player
        self.board[row][col] = player.symbol
        self._occupied += 1
        logger.debug(f"{player} filled ({row}, {col})")

    def win(self, row: int, col: int) -> bool:
        """Check if the move at (row, col) completed a line.

        Still answers after end().

        Raises:
            UsageError: If the game is not initialized or the cell is out
                of range
        """
        if not self._initialized:
            raise UsageError(ErrorCode.NOT_INITIALIZED, "Game has not been initialized")
        self._check_cell(row, col)
        return check_strike(self.board, row, col, self.board_size)

    def draw(self) -> bool:
        """Check if the board is full. Check win() first."""
        return self._occupied == self.board_size**2

    def empty_cells(self) -> list[tuple[int, int]]:
        """Get coordinates of all empty cells, row by row."""
        return [
            (r, c)
            for r in range(self.board_size)
            for c in range(self.board_size)
            if self.board[r][c] is None
        ]

    def _check_cell(self, row: int, col: int) -> None:
        if not (0 <= row < self.board_size and 0 <= col < self.board_size):
            raise UsageError(
                ErrorCode.CELL_OUT_OF_RANGE,
                f"Cell ({row}, {col}) is outside the {self.board_size}x{self.board_size} board",
            )
