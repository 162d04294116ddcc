"""Players and turn controllers.

A ``Player`` is the same data for every kind of seat; what differs is the
``TurnController`` chosen when the player is created. Human controllers wait
for a play gesture from the view, automated ones (see ``ai.bot``) play as
soon as the turn opens.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional, Protocol

from .deck import Deck
from .enums import Seat, Team
from .exceptions import IllegalPlayError

if TYPE_CHECKING:
    from .card import Card
    from .engine import GameEngine
    from .events import CardSelectionChanged

logger = logging.getLogger(__name__)


class PlayerKind(Enum):
    HUMAN = "human"
    AI = "ai"


class TurnController(Protocol):
    """Per-kind turn behaviour.

    ``on_turn_start`` is called once the player holds turn permission and its
    legal cards are cached; ``on_turn_stop`` when permission is taken away.
    """

    def on_turn_start(self, player: Player, engine: GameEngine) -> None:
        ...

    def on_turn_stop(self, player: Player, engine: GameEngine) -> None:
        ...


class HumanController:
    """Waits for a card to be released outside the hand area."""

    def on_turn_start(self, player: Player, engine: GameEngine) -> None:
        logger.debug("%s to play: %s", player.name, player.playable_cards.to_list())

    def on_turn_stop(self, player: Player, engine: GameEngine) -> None:
        pass

    def on_card_selection(
        self,
        player: Player,
        engine: GameEngine,
        evt: CardSelectionChanged,
    ) -> bool:
        """Turn a selection gesture into a play attempt.

        Returns:
            True if the card was played. A rejected play leaves the game
            untouched; the card goes back to the hand on the view side.
        """
        if not evt.is_play_attempt:
            return False
        try:
            engine.play_card(player, evt.card)
        except IllegalPlayError as e:
            if e.reason == IllegalPlayError.NOT_LEGAL:
                logger.info("Rejected play from %s: %s", player.name, e.message)
            else:
                logger.warning("Rejected play from %s: %s", player.name, e.message)
            return False
        return True


@dataclass(eq=False)
class Player:
    """
    A seat at the table.

    Attributes:
        name: display name
        seat: fixed position, also decides the team
        kind: human or automated
        controller: turn behaviour, fixed at creation
        hand: cards held, owned by the seat
        is_allowed_to_play: turn permission flag
        playable_cards: legal cards for the current turn; empty without
            permission
    """

    name: str
    seat: Seat
    kind: PlayerKind = PlayerKind.AI
    controller: Optional[TurnController] = field(default=None, repr=False)
    hand: Deck = field(init=False, repr=False)
    is_allowed_to_play: bool = False
    playable_cards: Deck = field(default_factory=Deck, repr=False)

    def __post_init__(self):
        self.hand = Deck(owner=self.seat)

    @property
    def team(self) -> Team:
        return self.seat.team

    @property
    def is_human(self) -> bool:
        return self.kind == PlayerKind.HUMAN

    def can_play(self, card: Card) -> bool:
        return self.is_allowed_to_play and card in self.playable_cards

    def grant_turn(self, playable: Deck) -> None:
        self.is_allowed_to_play = True
        self.playable_cards = playable

    def revoke_turn(self) -> None:
        self.is_allowed_to_play = False
        self.playable_cards = Deck()

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "seat": self.seat.name,
            "team": self.team.value,
            "kind": self.kind.value,
            "hand": self.hand.to_list(),
            "is_allowed_to_play": self.is_allowed_to_play,
            "playable_cards": self.playable_cards.to_list(),
        }

    def __str__(self) -> str:
        return f"{self.name} ({self.seat.name})"
