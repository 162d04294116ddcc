"""Trick (fold) resolution."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from .card import Card, Suit, better
from .deck import Deck
from .enums import Seat, Team
from .exceptions import EmptyTrickError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrickResult:
    """Winner and point total of a resolved trick."""

    card: Card
    seat: Seat
    points: int

    @property
    def team(self) -> Team:
        return self.seat.team


class Trick:
    """One card per player, in play order.

    The trick owns its cards through a ``Deck`` and remembers which seat
    played each of them; the winning seat is looked up from that record.
    """

    def __init__(self) -> None:
        self.deck = Deck("trick")
        self._played_by: dict[Card, Seat] = {}
        self.result: Optional[TrickResult] = None

    # ==================== Queries ====================

    @property
    def requested_suit(self) -> Optional[Suit]:
        """Suit of the first card played, ``None`` while empty."""
        first = self.deck.first()
        return first.suit if first is not None else None

    @property
    def size(self) -> int:
        return self.deck.size

    @property
    def is_empty(self) -> bool:
        return self.deck.is_empty

    def seat_of(self, card: Card) -> Seat:
        return self._played_by[card]

    def plays(self) -> list[tuple[Seat, Card]]:
        return [(self._played_by[card], card) for card in self.deck]

    def current_best(self, trump: Optional[Suit]) -> Optional[Card]:
        """Best card so far, folding left to right; ``None`` on an empty trick."""
        best: Optional[Card] = None
        for card in self.deck:
            best = card if best is None else better(card, best, trump)
        return best

    def points(self, trump: Optional[Suit]) -> int:
        return self.deck.points(trump)

    def resolve(self, trump: Optional[Suit]) -> TrickResult:
        """Winning card, its seat and the trick's total points.

        Depends only on the cards played and ``trump``.

        Raises:
            EmptyTrickError: no card has been played.
        """
        best = self.current_best(trump)
        if best is None:
            raise EmptyTrickError()
        return TrickResult(card=best, seat=self._played_by[best], points=self.points(trump))

    # ==================== Mutation ====================

    def play(self, card: Card, seat: Seat, hand: Deck) -> None:
        """Move ``card`` out of ``hand`` into the trick.

        Raises:
            CardNotFoundError: the hand does not hold the card.
        """
        hand.move_card(card, self.deck)
        self._played_by[card] = seat

    def finalize(self, trump: Optional[Suit]) -> TrickResult:
        self.result = self.resolve(trump)
        logger.debug(
            "Trick %s won by %s with %s (%d pts)",
            self.deck.to_list(), self.result.seat.name, self.result.card, self.result.points,
        )
        return self.result

    def archive(self) -> Trick:
        """Move contents and result into a new trick and reset this one."""
        archived = Trick()
        archived.deck.owner = "archive"
        self.deck.move_all_to(archived.deck)
        archived._played_by = self._played_by
        archived.result = self.result
        self._played_by = {}
        self.result = None
        return archived

    def to_dict(self) -> dict[str, Any]:
        return {
            "requested_suit": self.requested_suit.value if self.requested_suit else None,
            "cards": [{"seat": seat.name, "card": str(card)} for seat, card in self.plays()],
            "winner": self.result.seat.name if self.result else None,
            "points": self.result.points if self.result else None,
        }

    def __str__(self) -> str:
        cards = ", ".join(f"{seat.name}: {card}" for seat, card in self.plays())
        return f"Trick([{cards}])"
