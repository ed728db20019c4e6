"""Turn order and player status management."""

from __future__ import annotations

import logging
from typing import Iterable

from turngames.errors import ConfigurationError, ErrorCode, UsageError
from turngames.models.player import Player, PlayerCountRange, PlayerStatus

logger = logging.getLogger(__name__)

# Returned by get_index() for unknown ids
NOT_FOUND = -1


class PlayerManager:
    """Ordered, fixed-size set of players with a current-turn cursor.

    Statuses are set by the caller; the manager only guarantees that the
    cursor never rests on a player who has left, unless everybody left.
    """

    def __init__(
        self,
        players: Iterable[Player],
        player_count_range: PlayerCountRange | None = None,
    ):
        """Initialize player manager.

        Args:
            players: Players in turn order
            player_count_range: Allowed player count (any count >= 1 if omitted)

        Raises:
            ConfigurationError: If the player count is outside the range
        """
        self._players: list[Player] = list(players)
        self.player_count_range = player_count_range or PlayerCountRange()

        if not self.player_count_range.contains(len(self._players)):
            raise ConfigurationError(
                ErrorCode.PLAYER_COUNT,
                f"Player count {len(self._players)} is outside the allowed "
                f"range {self.player_count_range}",
            )

        self._cursor = 0

    @property
    def players(self) -> tuple[Player, ...]:
        """Get players in turn order."""
        return tuple(self._players)

    @property
    def player_count(self) -> int:
        """Get number of players (including those who left)."""
        return len(self._players)

    @property
    def active_players(self) -> list[Player]:
        """Get players who have not left."""
        return [p for p in self._players if not p.has_left]

    @property
    def now_player(self) -> Player:
        """Get the player whose turn it is."""
        return self._players[self._cursor]

    @property
    def now_index(self) -> int:
        """Get the index of the player whose turn it is."""
        return self._cursor

    def next(self) -> Player:
        """Advance the cursor to the next player who has not left.

        Wraps around in insertion order. If every player has left the
        cursor stays where it is.

        Returns:
            The new current player
        """
        count = len(self._players)
        for step in range(1, count + 1):
            index = (self._cursor + step) % count
            if not self._players[index].has_left:
                self._cursor = index
                break

        logger.debug(f"Turn passed to {self.now_player}")
        return self.now_player

    def get_index(self, player_id: str) -> int:
        """Find a player's position by external id.

        Args:
            player_id: External player id

        Returns:
            Zero-based index, or NOT_FOUND (-1) for an unknown id
        """
        for index, player in enumerate(self._players):
            if player.id == player_id:
                return index
        return NOT_FOUND

    def set_status(self, index: int, status: PlayerStatus) -> None:
        """Set a player's status.

        Moves the cursor on if the current player leaves.

        Args:
            index: Player index
            status: New status

        Raises:
            UsageError: If index does not name a player (e.g. NOT_FOUND)
        """
        if not 0 <= index < len(self._players):
            raise UsageError(
                ErrorCode.PLAYER_OUT_OF_RANGE,
                f"No player at index {index}",
            )

        player = self._players[index]
        player.status = status
        logger.debug(f"{player} is now {status.value}")

        if index == self._cursor and player.has_left:
            self.next()

    def __iter__(self):
        return iter(self._players)

    def __len__(self) -> int:
        return len(self._players)

    def __str__(self) -> str:
        names = ", ".join(str(p) for p in self._players)
        return f"PlayerManager([{names}], now={self._cursor})"
