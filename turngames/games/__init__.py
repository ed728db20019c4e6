"""Game logic."""

from .runner import GameRunner
from .strike import check_strike
from .tictactoe import TicTacToe
from .tofe import Tofe

__all__ = [
    "GameRunner",
    "TicTacToe",
    "Tofe",
    "check_strike",
]
