"""Integration contract for the trick-based card game engine.

The card engine (trick classification and comparison) lives outside this
package. Front ends drive it through the TrickGame protocol below, the
same way they drive the games in turngames.games.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol, Sequence, runtime_checkable


class TrickType(IntEnum):
    """Category of a played card combination, weakest first."""

    SINGLE = 1
    PAIR = 2
    TRIPLE = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8


@dataclass(frozen=True)
class Trick:
    """A classified card combination."""

    trick_type: TrickType
    rank: int  # Rank used to compare tricks of the same type
    cards: tuple[int, ...]  # Card indices making up the trick


@runtime_checkable
class TrickGame(Protocol):
    """Operations a front end uses on the card engine."""

    @property
    def current_cards(self) -> Sequence[int]:
        """Cards held by the current player."""
        ...

    def cards_to_trick(self, cards: Sequence[int]) -> Trick | None:
        """Classify card indices, None if they form no trick."""
        ...

    def playable(self, trick: Trick) -> bool:
        """Check if trick beats the one on the table."""
        ...

    def play(self, cards: Sequence[int]) -> None:
        """Play cards from the current player's hand."""
        ...

    def pass_turn(self) -> None:
        """Pass instead of playing."""
        ...

    def win(self) -> bool:
        """Check if the current player has emptied their hand."""
        ...
