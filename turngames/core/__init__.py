"""Turn management shared by every game."""

from .contracts import Trick, TrickGame, TrickType
from .game import DEFAULT_SYMBOLS, Game
from .player_manager import NOT_FOUND, PlayerManager

__all__ = [
    "DEFAULT_SYMBOLS",
    "Game",
    "NOT_FOUND",
    "PlayerManager",
    "Trick",
    "TrickGame",
    "TrickType",
]
