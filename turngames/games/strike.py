"""N-in-a-row detection for grid games."""

from typing import Hashable, Sequence

# Horizontal, vertical, main diagonal, anti-diagonal
AXES: tuple[tuple[int, int], ...] = ((0, 1), (1, 0), (1, 1), (1, -1))


def check_strike(
    board: Sequence[Sequence[Hashable | None]],
    row: int,
    col: int,
    length: int | None = None,
) -> bool:
    """Check if the mark at (row, col) completes a line.

    Only the most recent move can create a new line, so this scans the
    four axes through that cell instead of the whole board.

    Args:
        board: Square grid, None for empty cells
        row: Row of the cell just filled
        col: Column of the cell just filled
        length: Run length needed to win (defaults to the board size)

    Returns:
        True if some axis holds `length` contiguous matching marks
    """
    size = len(board)
    length = length or size
    mark = board[row][col]
    if mark is None:
        return False

    for dr, dc in AXES:
        count = 1
        for sign in (1, -1):
            r, c = row + sign * dr, col + sign * dc
            while 0 <= r < size and 0 <= c < size and board[r][c] == mark:
                count += 1
                r, c = r + sign * dr, c + sign * dc
        if count >= length:
            return True

    return False
