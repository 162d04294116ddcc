"""Trump selection placeholder.

Real bidding is not played yet: the first player of the round is recorded as
the bidder and the trump suit is drawn at random. Anything implementing
``TrumpChooser`` can be handed to the engine to replace it.
"""

from __future__ import annotations

import random
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from .card import Suit
from .enums import Seat

if TYPE_CHECKING:
    from .deck import Deck


@dataclass(frozen=True)
class BiddingResult:
    trump: Suit
    bidder: Seat


class TrumpChooser(Protocol):
    """Decides the trump suit and the bidder once hands are dealt."""

    def choose(self, first_player: Seat, hands: Mapping[Seat, Deck]) -> BiddingResult:
        ...


class RandomTrumpChooser:
    """Uniform random suit; the first player is the bidder."""

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    def choose(self, first_player: Seat, hands: Mapping[Seat, Deck]) -> BiddingResult:
        suits = list(Suit)
        trump = suits[self.rng.randrange(len(suits))]
        return BiddingResult(trump=trump, bidder=first_player)


class FixedTrumpChooser:
    """Always the same trump; handy for scripted deals."""

    def __init__(self, trump: Suit, bidder: Seat | None = None):
        self.trump = trump
        self.bidder = bidder

    def choose(self, first_player: Seat, hands: Mapping[Seat, Deck]) -> BiddingResult:
        return BiddingResult(trump=self.trump, bidder=self.bidder if self.bidder is not None else first_player)
