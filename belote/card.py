"""Card and scoring model.

A Belote pack has 32 cards: four suits, ranks 7 to Ace. Each card carries a
normal and a trump point value, assigned once from a ``ScoringTable`` when the
pack is built.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from i18n import rank_name, suit_name
from i18n import t as _t


class Suit(Enum):
    """Card suit; declaration order is the fixed sort order."""

    SPADES = "spades"
    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"

    @property
    def symbol(self) -> str:
        symbols = {
            Suit.SPADES: "♠",
            Suit.HEARTS: "♥",
            Suit.DIAMONDS: "♦",
            Suit.CLUBS: "♣",
        }
        return symbols[self]

    @property
    def order(self) -> int:
        return _SUIT_ORDER[self]

    @property
    def display_name(self) -> str:
        return suit_name(self.value)

    @classmethod
    def from_string(cls, s: str) -> Suit:
        """Parse ``"S"``/``"♠"``/``"spades"`` style input."""
        mapping = {
            "S": cls.SPADES,
            "H": cls.HEARTS,
            "D": cls.DIAMONDS,
            "C": cls.CLUBS,
            "♠": cls.SPADES,
            "♥": cls.HEARTS,
            "♦": cls.DIAMONDS,
            "♣": cls.CLUBS,
        }
        key = s.strip()
        if key.upper() in mapping:
            return mapping[key.upper()]
        return cls(key.lower())


_SUIT_ORDER = {suit: index for index, suit in enumerate(Suit)}


class Rank(Enum):
    """Card rank; the integer value gives rank order (7 lowest, Ace highest)."""

    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        names = {
            11: "J",
            12: "Q",
            13: "K",
            14: "A",
        }
        return names.get(self.value, str(self.value))

    @property
    def display_name(self) -> str:
        return rank_name(self.name.lower())

    @classmethod
    def from_string(cls, s: str) -> Rank:
        mapping = {
            "7": cls.SEVEN,
            "8": cls.EIGHT,
            "9": cls.NINE,
            "10": cls.TEN,
            "J": cls.JACK,
            "Q": cls.QUEEN,
            "K": cls.KING,
            "A": cls.ACE,
        }
        return mapping[s.strip().upper()]


@dataclass(frozen=True)
class ScoringTable:
    """Rank -> (normal points, trump points).

    Built explicitly and handed to the pack factory; there is no process-wide
    registry.
    """

    normal: dict[Rank, int]
    trump: dict[Rank, int]

    @classmethod
    def standard(cls) -> ScoringTable:
        """Classic Belote values: 62 points per plain suit, 152 with trump."""
        return cls(
            normal={
                Rank.SEVEN: 0,
                Rank.EIGHT: 0,
                Rank.NINE: 0,
                Rank.TEN: 10,
                Rank.JACK: 2,
                Rank.QUEEN: 3,
                Rank.KING: 4,
                Rank.ACE: 11,
            },
            trump={
                Rank.SEVEN: 0,
                Rank.EIGHT: 0,
                Rank.NINE: 14,
                Rank.TEN: 10,
                Rank.JACK: 20,
                Rank.QUEEN: 3,
                Rank.KING: 4,
                Rank.ACE: 11,
            },
        )

    def points(self, rank: Rank, is_trump: bool) -> int:
        table = self.trump if is_trump else self.normal
        return table[rank]

    def total(self, trump: Optional[Suit]) -> int:
        """Points held by a full pack under ``trump``."""
        total = 0
        for suit in Suit:
            for rank in Rank:
                total += self.points(rank, suit == trump)
        return total


@dataclass(frozen=True, slots=True)
class Card:
    """A single card.

    Equality and hashing use ``(suit, rank)`` only; a pack holds every
    identity once so this is also instance identity for a match.

    Attributes:
        suit: card suit
        rank: card rank
        points: value when the suit is not trump
        trump_points: value when the suit is trump
    """

    suit: Suit
    rank: Rank
    points: int = field(default=0, compare=False)
    trump_points: int = field(default=0, compare=False)

    def __str__(self) -> str:
        return f"{self.rank}{self.suit.symbol}"

    def __repr__(self) -> str:
        return f"Card({self.suit.name}, {self.rank.name})"

    def point_value(self, trump: Optional[Suit] = None) -> int:
        """Points of this card under ``trump`` (``None``: no trump known yet)."""
        if trump is not None and self.suit == trump:
            return self.trump_points
        return self.points

    def is_trump(self, trump: Optional[Suit]) -> bool:
        return trump is not None and self.suit == trump

    def display_name(self) -> str:
        """Localized name, e.g. ``"Jack of Hearts"``."""
        return _t("card.display", rank=self.rank.display_name, suit=self.suit.display_name)

    @classmethod
    def from_string(cls, s: str, scoring: ScoringTable | None = None) -> Card:
        """Build a card from ``"JH"``, ``"10S"``, ``"A♦"``.

        Points are filled from ``scoring`` (standard table by default).
        """
        s = s.strip()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")
        rank = Rank.from_string(s[:-1])
        suit = Suit.from_string(s[-1])
        scoring = scoring or ScoringTable.standard()
        return cls(
            suit=suit,
            rank=rank,
            points=scoring.points(rank, False),
            trump_points=scoring.points(rank, True),
        )


def point_value(card: Card, trump: Optional[Suit] = None) -> int:
    return card.point_value(trump)


def better(a: Card, b: Card, trump: Optional[Suit]) -> Card:
    """Return the stronger of two cards.

    Same suit: higher point value wins, equal points fall back to rank order
    (points are not monotonic in rank, e.g. 7 and 8 are both worth 0).
    Different suits: ``a`` wins only if it is trump, otherwise ``b`` is kept.

    Precondition: the cards share a suit or one of them is trump. Two
    unrelated off-suit cards are not comparable and ``b`` is returned by
    convention.
    """
    if a.suit == b.suit:
        a_points = a.point_value(trump)
        b_points = b.point_value(trump)
        if a_points > b_points:
            return a
        if a_points == b_points and a.rank.value > b.rank.value:
            return a
        return b
    if a.is_trump(trump):
        return a
    return b
