"""Error types raised by the game core."""

from enum import IntEnum


class ErrorCode(IntEnum):
    """Error codes carried by GameError."""

    # Configuration errors
    PLAYER_COUNT = 1
    BOARD_SIZE = 2
    SYMBOLS = 3
    INVALID_BOARD = 4

    # Usage errors
    ALREADY_INITIALIZED = 10
    NOT_INITIALIZED = 11
    ALREADY_ENDED = 12
    CELL_OCCUPIED = 13
    CELL_OUT_OF_RANGE = 14
    PLAYER_OUT_OF_RANGE = 15


class GameError(Exception):
    """Base class for errors raised by games."""

    def __init__(self, code: ErrorCode, message: str = ""):
        """Initialize error.

        Args:
            code: Error code
            message: Human readable detail
        """
        self.code = code
        super().__init__(message or code.name)


class ConfigurationError(GameError, ValueError):
    """A game was constructed with invalid options."""


class UsageError(GameError, RuntimeError):
    """A game was driven in an invalid way (caller bug)."""
