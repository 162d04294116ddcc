"""Deck: an ordered, owned collection of cards.

The same class backs the stock, every hand, the active trick and archived
tricks. Cards only change owner through ``deal_to``, ``move_card`` and
``move_all_to``; each removes from the source before appending to the
destination, so a card is never visible in two decks.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import Any, Optional

from .card import Card, Rank, ScoringTable, Suit
from .exceptions import CardNotFoundError, InsufficientCardsError

logger = logging.getLogger(__name__)


class Deck:
    """Ordered card collection with an owner label.

    Insertion order is meaningful: the first card of a trick deck is the
    card that set the requested suit.
    """

    def __init__(self, owner: Hashable | None = None, cards: Iterable[Card] | None = None):
        """
        Args:
            owner: label of whoever holds this deck (a ``Seat``, ``"stock"``,
                ``"trick"``...). Used for ownership lookups and messages.
            cards: initial content
        """
        self.owner = owner
        self._cards: list[Card] = list(cards) if cards is not None else []

    # ==================== Queries ====================

    @property
    def cards(self) -> tuple[Card, ...]:
        """Read-only snapshot in insertion order."""
        return tuple(self._cards)

    @property
    def size(self) -> int:
        return len(self._cards)

    @property
    def is_empty(self) -> bool:
        return not self._cards

    def contains(self, card: Card) -> bool:
        return card in self._cards

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        # iterate a snapshot so callers may move cards while traversing
        return iter(tuple(self._cards))

    def __getitem__(self, index: int) -> Card:
        return self._cards[index]

    def first(self) -> Optional[Card]:
        return self._cards[0] if self._cards else None

    def cards_of_suit(self, suit: Suit) -> list[Card]:
        return [card for card in self._cards if card.suit == suit]

    def points(self, trump: Optional[Suit]) -> int:
        return sum(card.point_value(trump) for card in self._cards)

    # ==================== Mutation ====================

    def add(self, card: Card) -> None:
        self._cards.append(card)

    def add_all(self, cards: Iterable[Card]) -> None:
        self._cards.extend(cards)

    def clear(self) -> None:
        self._cards.clear()

    def copy_from(self, other: Deck) -> None:
        """Replace the content with references to ``other``'s cards.

        Used for legal-move sets, which point into a hand without owning
        the cards.
        """
        self._cards = list(other._cards)

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Uniform random permutation."""
        (rng or random).shuffle(self._cards)

    def cut(self, index: int) -> None:
        """Cut the pack: the first ``index`` cards go under the rest."""
        if not self._cards:
            return
        index %= len(self._cards)
        self._cards = self._cards[index:] + self._cards[:index]

    def deal_to(self, count: int, other: Deck) -> list[Card]:
        """Move the next ``count`` cards, in order, to ``other``.

        Raises:
            InsufficientCardsError: fewer than ``count`` cards left; nothing
                is moved in that case.
        """
        if count < 0 or count > len(self._cards):
            raise InsufficientCardsError(required=count, available=len(self._cards))
        dealt = self._cards[:count]
        del self._cards[:count]
        other._cards.extend(dealt)
        return dealt

    def move_card(self, card: Card, other: Deck) -> None:
        """Move one card, found by identity, to the end of ``other``.

        Raises:
            CardNotFoundError: the card is not in this deck.
        """
        try:
            index = self._cards.index(card)
        except ValueError:
            raise CardNotFoundError(card=str(card), owner=str(self.owner)) from None
        moved = self._cards.pop(index)
        other._cards.append(moved)

    def move_all_to(self, other: Deck) -> None:
        moved = self._cards
        self._cards = []
        other._cards.extend(moved)

    def sort_by(self, key: Callable[[Card], Any], reverse: bool = False) -> None:
        """Stable in-place sort."""
        self._cards.sort(key=key, reverse=reverse)

    def sort_for_hand(self, trump: Optional[Suit]) -> None:
        """Display order: trump suit first, then suit order; inside a suit
        strongest first (points, then rank)."""
        self._cards.sort(key=lambda card: hand_sort_key(card, trump))

    # ==================== Misc ====================

    def to_list(self) -> list[str]:
        return [str(card) for card in self._cards]

    def __str__(self) -> str:
        return f"Deck({self.owner}: {' '.join(self.to_list())})"

    def __repr__(self) -> str:
        return f"Deck(owner={self.owner!r}, cards={self.to_list()})"


def hand_sort_key(card: Card, trump: Optional[Suit]) -> tuple[int, int, int, int]:
    """Sort key for hand ordering. Has no effect on the rules."""
    trump_first = 0 if card.is_trump(trump) else 1
    return (trump_first, card.suit.order, -card.point_value(trump), -card.rank.value)


def build_belote_deck(scoring: ScoringTable | None = None, owner: Hashable | None = "stock") -> Deck:
    """Create the 32-card pack in suit then rank order.

    Args:
        scoring: point table; the standard Belote table by default
        owner: owner label of the returned deck
    """
    scoring = scoring or ScoringTable.standard()
    deck = Deck(owner)
    for suit in Suit:
        for rank in Rank:
            deck.add(
                Card(
                    suit=suit,
                    rank=rank,
                    points=scoring.points(rank, False),
                    trump_points=scoring.points(rank, True),
                )
            )
    logger.debug("Built pack of %d cards", deck.size)
    return deck
