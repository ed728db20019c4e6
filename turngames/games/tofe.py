"""2048-style tile merging puzzle."""

from __future__ import annotations

import logging
import math
import random
from collections import deque
from typing import Iterable, Iterator, Sequence

from turngames.core.game import Game
from turngames.errors import ConfigurationError, ErrorCode
from turngames.models.direction import Direction
from turngames.models.player import Player, PlayerCountRange

logger = logging.getLogger(__name__)

BOARD_SIZE = 4
WIN_MAX_NUMBER = 2048

# Spawned exponents are drawn from [MIN_EXPONENT, max(2, log2(max) - 4)]
MIN_EXPONENT = 1
SPAWN_EXPONENT_FLOOR = 2
SPAWN_EXPONENT_OFFSET = 4
SPAWN_SKEW = 6

Cell = tuple[int, int]

# direction -> (primary step, secondary step, origin)
# The primary step walks a line away from the edge tiles move towards,
# the secondary step moves between parallel lines.
DIRECTION_GEOMETRY: dict[Direction, tuple[Cell, Cell, Cell]] = {
    Direction.UP: ((1, 0), (0, 1), (0, 0)),
    Direction.DOWN: ((-1, 0), (0, 1), (BOARD_SIZE - 1, 0)),
    Direction.LEFT: ((0, 1), (1, 0), (0, 0)),
    Direction.RIGHT: ((0, -1), (1, 0), (0, BOARD_SIZE - 1)),
}


def spawn_exponent(uniform: float, max_number: int) -> int:
    """Map a uniform draw to the exponent of a spawned tile.

    The draw is raised to the 6th power so small tiles dominate; the
    upper bound grows with the largest tile on the board.

    Args:
        uniform: Draw from [0, 1)
        max_number: Largest tile placed so far (1 on an empty board)

    Returns:
        Exponent in [1, max(2, log2(max_number) - 4)]
    """
    low = MIN_EXPONENT
    high = max(SPAWN_EXPONENT_FLOOR, (max_number.bit_length() - 1) - SPAWN_EXPONENT_OFFSET)
    mapped = uniform**SPAWN_SKEW
    return math.floor(mapped * (high - low + 1) + low)


def _is_power_of_two(value: int) -> bool:
    return value >= 2 and value & (value - 1) == 0


class Tofe(Game):
    """Single-player 2048 on a 4x4 board.

    Board cells hold None or a power of two. occupied_count and
    max_number are kept up to date at every mutation.
    """

    def __init__(
        self,
        players: Iterable[Player],
        hard_mode: bool = False,
        rng: random.Random | None = None,
    ):
        """Initialize game.

        Args:
            players: Exactly one player
            hard_mode: Reserved for tuning, does not change the rules
            rng: Source of randomness for spawns (module random if omitted)
        """
        super().__init__(players, PlayerCountRange(min=1, max=1))

        self.board_size = BOARD_SIZE
        self.board: list[list[int | None]] = []
        self.hard_mode = hard_mode
        self.rng = rng if rng is not None else random

        self._max_number = 1
        self._occupied_count = 0

    @property
    def max_number(self) -> int:
        """Get the largest tile ever placed (1 before any spawn)."""
        return self._max_number

    @property
    def occupied_count(self) -> int:
        """Get number of non-empty cells."""
        return self._occupied_count

    def initialize(self) -> None:
        super().initialize()
        self.board = [[None] * self.board_size for _ in range(self.board_size)]
        self.generate()
        self.generate()

    def operate(self, direction: Direction) -> bool:
        """Push, merge and push again towards direction.

        Spawns a tile if anything moved or merged.

        Returns:
            False if the move changed nothing (no tile is spawned then)
        """
        self._check_playable()
        direction = Direction(direction)

        success = self._push(direction)
        success = self._merge(direction) or success
        success = self._push(direction) or success

        if success:
            self.generate()
        logger.debug(
            f"operate({direction.value}) -> {success}, "
            f"occupied={self._occupied_count}, max={self._max_number}"
        )
        return success

    def win(self) -> bool:
        """Check if a 2048 tile has been reached."""
        return self._max_number >= WIN_MAX_NUMBER

    def lose(self) -> bool:
        """Check if no move in any direction can succeed."""
        return self._occupied_count >= self.board_size**2 and not self.operable()

    def operable(self) -> bool:
        """Check if any two adjacent cells hold the same tile."""
        for i in range(self.board_size):
            for j in range(self.board_size - 1):
                if self.board[i][j] is not None and self.board[i][j] == self.board[i][j + 1]:
                    return True
                if self.board[j][i] is not None and self.board[j][i] == self.board[j + 1][i]:
                    return True
        return False

    def generate(self) -> None:
        """Spawn a random tile in a random empty cell, if there is one."""
        self._check_playable()
        if self._occupied_count >= self.board_size**2:
            return

        empty_cells = [
            (r, c)
            for r in range(self.board_size)
            for c in range(self.board_size)
            if self.board[r][c] is None
        ]
        row, col = self.rng.choice(empty_cells)
        number = 2 ** spawn_exponent(self.rng.random(), self._max_number)

        self.board[row][col] = number
        self._max_number = max(self._max_number, number)
        self._occupied_count += 1
        logger.debug(f"Spawned {number} at ({row}, {col})")

    def load_board(self, rows: Sequence[Sequence[int | None]]) -> None:
        """Replace the board with a given layout.

        occupied_count is recomputed from the new layout; max_number only
        rises if the layout holds a larger tile.

        Raises:
            ConfigurationError: If the layout is not 4x4 or holds a value
                that is not a power of two >= 2
        """
        self._check_playable()

        if len(rows) != self.board_size or any(len(row) != self.board_size for row in rows):
            raise ConfigurationError(
                ErrorCode.INVALID_BOARD,
                f"Board must be {self.board_size}x{self.board_size}",
            )
        values = [value for row in rows for value in row if value is not None]
        for value in values:
            if not isinstance(value, int) or not _is_power_of_two(value):
                raise ConfigurationError(
                    ErrorCode.INVALID_BOARD,
                    f"Tile {value!r} is not a power of two >= 2",
                )

        self.board = [list(row) for row in rows]
        self._occupied_count = len(values)
        self._max_number = max(self._max_number, *values)

    def _lines(self, direction: Direction) -> Iterator[list[Cell]]:
        """Yield each line of cells, starting at the edge tiles move to."""
        (dr, dc), (row_inc, col_inc), (row_start, col_start) = DIRECTION_GEOMETRY[direction]
        for a in range(self.board_size):
            i, j = row_start + a * row_inc, col_start + a * col_inc
            yield [(i + b * dr, j + b * dc) for b in range(self.board_size)]

    def _push(self, direction: Direction) -> bool:
        success = False
        for line in self._lines(direction):
            empty_slots: deque[Cell] = deque()
            for r, c in line:
                if self.board[r][c] is None:
                    empty_slots.append((r, c))
                elif empty_slots:
                    nr, nc = empty_slots.popleft()
                    self.board[nr][nc] = self.board[r][c]
                    self.board[r][c] = None
                    empty_slots.append((r, c))
                    success = True
        return success

    def _merge(self, direction: Direction) -> bool:
        success = False
        for line in self._lines(direction):
            for (r, c), (nr, nc) in zip(line, line[1:]):
                number = self.board[r][c]
                if number is not None and number == self.board[nr][nc]:
                    number *= 2
                    self.board[r][c] = number
                    self.board[nr][nc] = None
                    self._max_number = max(self._max_number, number)
                    self._occupied_count -= 1
                    success = True
        return success
