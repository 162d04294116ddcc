"""Random AI strategy: any legal card, uniformly."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from belote.exceptions import NoLegalMovesError

if TYPE_CHECKING:
    from belote.card import Card
    from belote.engine import GameEngine
    from belote.player import Player


class RandomStrategy:
    """Uniform choice among the cached legal cards."""

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    def choose_card(self, player: Player, engine: GameEngine) -> Card:
        playable = player.playable_cards
        if playable.is_empty:
            raise NoLegalMovesError(seat=player.seat.name)
        return playable[self.rng.randrange(playable.size)]
