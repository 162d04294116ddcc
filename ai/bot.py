"""
AI turn controller
Plays as soon as its turn opens, using a pluggable strategy.
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Optional

from .random_strategy import RandomStrategy
from .strategy import PlayStrategy

if TYPE_CHECKING:
    from belote.engine import GameEngine
    from belote.player import Player

logger = logging.getLogger(__name__)


class AIBot:
    """
    Turn controller for automated seats.

    An ``IllegalPlayError`` raised by the engine is not caught here: the
    strategy only ever sees legal cards, so a rejection is a bug.
    """

    def __init__(
        self,
        strategy: Optional[PlayStrategy] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Args:
            strategy: card picker, ``RandomStrategy`` by default
            rng: random source handed to the default strategy
        """
        self.strategy: PlayStrategy = strategy or RandomStrategy(rng)
        self.turns_played: int = 0

    def on_turn_start(self, player: Player, engine: GameEngine) -> None:
        card = self.strategy.choose_card(player, engine)
        logger.debug("%s chooses %s", player.name, card)
        self.turns_played += 1
        engine.play_card(player, card)

    def on_turn_stop(self, player: Player, engine: GameEngine) -> None:
        pass
