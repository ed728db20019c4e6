"""Formatters for game log output."""

from typing import Sequence

from turngames.models.player import Player

# Written for empty cells
EMPTY_CELL = "."


def format_cell(value: object | None) -> str:
    """Format a single board cell.

    Args:
        value: Cell content (symbol, tile number or None).

    Returns:
        The value as a string, or "." for an empty cell.
    """
    if value is None:
        return EMPTY_CELL
    return str(value)


def format_board(board: Sequence[Sequence[object | None]]) -> list[str]:
    """Format a board to one string per row.

    Args:
        board: Grid of cells.

    Returns:
        Rows with cells separated by spaces (e.g. ["X . O", ". X .", ...]).
    """
    return [" ".join(format_cell(value) for value in row) for row in board]


def format_board_text(board: Sequence[Sequence[object | None]]) -> str:
    """Format a board as an aligned multi-line block."""
    cells = [[format_cell(value) for value in row] for row in board]
    width = max((len(cell) for row in cells for cell in row), default=1)
    return "\n".join(" ".join(cell.rjust(width) for cell in row) for row in cells)


def format_players(players: Sequence[Player]) -> list[dict[str, str | None]]:
    """Format players to a list of dicts.

    Args:
        players: Players in turn order.

    Returns:
        One dict per player with id, name and symbol.
    """
    return [{"id": p.id, "name": p.name, "symbol": p.symbol} for p in players]
