"""Game logging module."""

from .formatters import format_board, format_board_text, format_cell, format_players
from .game_logger import GameLogConfig, GameLogger

__all__ = [
    "GameLogConfig",
    "GameLogger",
    "format_board",
    "format_board_text",
    "format_cell",
    "format_players",
]
