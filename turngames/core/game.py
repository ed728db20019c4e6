"""Lifecycle shared by every game."""

from __future__ import annotations

import logging
from abc import ABC
from typing import Iterable, Sequence

from turngames.errors import ConfigurationError, ErrorCode, UsageError
from turngames.models.player import Player, PlayerCountRange, PlayerStatus

from .player_manager import PlayerManager

logger = logging.getLogger(__name__)

# Marks handed out to players of symbol-based games, in turn order
DEFAULT_SYMBOLS: tuple[str, ...] = ("X", "O", "A", "B", "C", "D", "E", "F")


class Game(ABC):
    """Base class for all games.

    Concrete games extend initialize() to allocate their board and call
    _check_playable() before every mutating operation.
    """

    def __init__(
        self,
        players: Iterable[Player],
        player_count_range: PlayerCountRange | None = None,
        require_symbol: bool = False,
        symbols: Sequence[str] = DEFAULT_SYMBOLS,
    ):
        """Initialize game.

        Args:
            players: Players in turn order
            player_count_range: Allowed player count
            require_symbol: Assign each player a distinct symbol
            symbols: Symbol alphabet used when require_symbol is set

        Raises:
            ConfigurationError: On a bad player count or too few symbols
        """
        self.player_manager = PlayerManager(players, player_count_range)
        self.require_symbol = require_symbol

        if require_symbol:
            self._assign_symbols(symbols)

        self._initialized = False
        self._ended = False

    @property
    def initialized(self) -> bool:
        """Check if initialize() has been called."""
        return self._initialized

    @property
    def ended(self) -> bool:
        """Check if end() has been called."""
        return self._ended

    @property
    def now_player(self) -> Player:
        """Shortcut for player_manager.now_player."""
        return self.player_manager.now_player

    def initialize(self) -> None:
        """Start the game. Subclasses extend this to set up their state.

        Raises:
            UsageError: If the game was already initialized
        """
        if self._initialized:
            raise UsageError(
                ErrorCode.ALREADY_INITIALIZED,
                f"{type(self).__name__} has already been initialized",
            )
        self._initialized = True

        for player in self.player_manager:
            if player.status == PlayerStatus.WAITING:
                player.status = PlayerStatus.PLAYING

        logger.info(
            f"{type(self).__name__} started with "
            f"{self.player_manager.player_count} player(s)"
        )

    def end(self) -> None:
        """Finish the game.

        Raises:
            UsageError: If the game is not running
        """
        self._check_playable()
        self._ended = True

        for player in self.player_manager:
            if player.status == PlayerStatus.PLAYING:
                player.status = PlayerStatus.IDLE

        logger.info(f"{type(self).__name__} ended")

    def _check_playable(self) -> None:
        """Raise UsageError unless the game is initialized and not ended."""
        if not self._initialized:
            raise UsageError(
                ErrorCode.NOT_INITIALIZED,
                f"{type(self).__name__} has not been initialized",
            )
        if self._ended:
            raise UsageError(
                ErrorCode.ALREADY_ENDED,
                f"{type(self).__name__} has already ended",
            )

    def _assign_symbols(self, symbols: Sequence[str]) -> None:
        count = self.player_manager.player_count
        if len(set(symbols)) < count:
            raise ConfigurationError(
                ErrorCode.SYMBOLS,
                f"Need {count} distinct symbols, only {len(set(symbols))} available",
            )

        unique = list(dict.fromkeys(symbols))
        for player, symbol in zip(self.player_manager, unique):
            player.symbol = symbol
