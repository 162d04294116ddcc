"""Shared fixtures.

``scripted_engine`` deals an unshuffled pack with clubs as trump, so every
hand is known in advance (dealer South, West plays first)::

    WEST : 7♠ 8♠ 9♠ J♥ Q♥ J♦ Q♦ K♦
    NORTH: 10♠ J♠ Q♠ K♥ A♥ A♦ 7♣ 8♣
    EAST : K♠ A♠ 7♥ 7♦ 8♦ 9♣ 10♣ J♣
    SOUTH: 8♥ 9♥ 10♥ 9♦ 10♦ Q♣ K♣ A♣
"""

import random

import pytest

from belote import FixedTrumpChooser, GameConfig, GameEngine, PlayerKind, Seat, Suit
from belote.card import Card


class UnshuffledRandom(random.Random):
    """Random source whose shuffle keeps the order."""

    def shuffle(self, x):  # type: ignore[override]
        pass


def make_card(text: str) -> Card:
    return Card.from_string(text)


def play_first_legal(engine: GameEngine) -> Card:
    """Play the first legal card of the turn holder and let the delay run out."""
    player = engine.current_player
    card = player.playable_cards[0]
    engine.play_card(player, card)
    engine.tick(engine.config.after_play_delay)
    return card


@pytest.fixture
def scripted_engine() -> GameEngine:
    config = GameConfig(after_play_delay=0.5, cut_between_rounds=False)
    engine = GameEngine(
        config,
        rng=UnshuffledRandom(0),
        trump_chooser=FixedTrumpChooser(Suit.CLUBS),
    )
    for seat in Seat:
        engine.add_player(seat.name.title(), seat, PlayerKind.HUMAN)
    engine.start_match()
    return engine
