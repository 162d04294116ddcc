"""Legal-move calculator.

The branches below are evaluated in a fixed priority order and the first one
that produces cards decides the result; they are not independent filters.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Optional

from .card import Card, Suit, better
from .deck import Deck
from .enums import Seat, Team
from .trick import Trick


def overtrumps(hand: Deck, best: Card, trump: Optional[Suit]) -> list[Card]:
    """Trumps in ``hand`` that beat ``best``; empty unless ``best`` is itself trump."""
    if not best.is_trump(trump):
        return []
    return [card for card in hand if card.is_trump(trump) and better(card, best, trump) is card]


def legal_cards(
    hand: Deck,
    trick: Trick,
    trump: Optional[Suit],
    acting_team: Team,
    team_of: Callable[[Seat], Team] | None = None,
) -> Deck:
    """Cards of ``hand`` that may be played on ``trick`` now.

    Args:
        hand: the acting player's hand
        trick: the active trick
        trump: trump suit of the round
        acting_team: team of the acting player
        team_of: seat -> team lookup for the current best card's player;
            ``Seat.team`` by default

    Returns:
        A new ``Deck`` (no owner) holding references into ``hand``. Empty
        only when the hand is empty.
    """
    playables = Deck()
    if hand.is_empty:
        return playables

    # leading: anything goes
    requested = trick.requested_suit
    if requested is None:
        playables.copy_from(hand)
        return playables

    best = trick.current_best(trump)
    best_team = (team_of or _seat_team)(trick.seat_of(best))

    following = hand.cards_of_suit(requested)
    trumps = hand.cards_of_suit(trump) if trump is not None else []
    better_trumps = overtrumps(hand, best, trump)

    if following:
        if requested == trump and better_trumps:
            # following in trump: must go over the best trump when able
            playables.add_all(better_trumps)
        else:
            playables.add_all(following)
        return playables

    # no card of the requested suit
    if best_team == acting_team:
        playables.copy_from(hand)
        return playables

    if best.is_trump(trump):
        # unable to go over: any trump, no discard exception
        playables.add_all(better_trumps or trumps)
    else:
        playables.add_all(trumps)

    if playables.is_empty:
        playables.copy_from(hand)
    return playables


def _seat_team(seat: Seat) -> Team:
    return seat.team
