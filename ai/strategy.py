"""AI play strategy protocol.

Strategies only pick a card; ``AIBot`` is the thin coordinator that turns the
pick into a play on the engine.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from belote.card import Card
    from belote.engine import GameEngine
    from belote.player import Player


class PlayStrategy(Protocol):
    """Card choice for an automated seat."""

    def choose_card(self, player: Player, engine: GameEngine) -> Card:
        """Pick one of ``player.playable_cards``."""
        ...
