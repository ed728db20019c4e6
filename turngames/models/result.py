"""Game result model."""

from enum import Enum

from pydantic import BaseModel


class GameKind(str, Enum):
    """Games the runner knows how to play."""

    TICTACTOE = "tictactoe"
    TOFE = "tofe"


class GameResult(BaseModel):
    """Outcome of a single finished game."""

    game_number: int
    kind: GameKind
    winner: str | None = None  # Player id, None on draw/loss
    is_draw: bool = False
    moves: int = 0
    max_number: int | None = None  # Tofe only

    @property
    def has_winner(self) -> bool:
        """Check if somebody won."""
        return self.winner is not None

    def __str__(self) -> str:
        if self.winner is not None:
            outcome = f"won by {self.winner}"
        elif self.is_draw:
            outcome = "draw"
        else:
            outcome = "lost"
        extra = f", max {self.max_number}" if self.max_number is not None else ""
        return f"Game {self.game_number} ({self.kind.value}): {outcome} in {self.moves} moves{extra}"
