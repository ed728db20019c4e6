"""Player model."""

from enum import Enum

from pydantic import BaseModel


class PlayerStatus(str, Enum):
    """Player participation status."""

    WAITING = "waiting"  # Joined, game not started
    PLAYING = "playing"
    IDLE = "idle"  # Missed a turn or game over
    LEFT = "left"  # Terminal, replaces removal


class PlayerCountRange(BaseModel, frozen=True):
    """Allowed number of players (max=None means unbounded)."""

    min: int = 1
    max: int | None = None

    def contains(self, count: int) -> bool:
        """Check if count is within the range."""
        if count < self.min:
            return False
        return self.max is None or count <= self.max

    def __str__(self) -> str:
        if self.max is None:
            return f"{self.min}+"
        if self.min == self.max:
            return str(self.min)
        return f"{self.min}-{self.max}"


class Player(BaseModel):
    """Player state."""

    id: str  # Opaque external id (e.g. chat user id)
    name: str = "Player"
    symbol: str | None = None  # Assigned mark for symbol-based games
    status: PlayerStatus = PlayerStatus.WAITING

    @property
    def has_left(self) -> bool:
        """Check if the player left the game."""
        return self.status == PlayerStatus.LEFT

    def __str__(self) -> str:
        symbol = f" {self.symbol}" if self.symbol else ""
        return f"{self.name}[{self.id}]{symbol}"

    def __repr__(self) -> str:
        return (
            f"Player(id={self.id!r}, name={self.name!r}, "
            f"symbol={self.symbol!r}, status={self.status.name})"
        )
