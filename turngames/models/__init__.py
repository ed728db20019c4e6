"""Game models."""

from .direction import Direction
from .player import Player, PlayerCountRange, PlayerStatus
from .result import GameKind, GameResult

__all__ = [
    "Direction",
    "GameKind",
    "GameResult",
    "Player",
    "PlayerCountRange",
    "PlayerStatus",
]
