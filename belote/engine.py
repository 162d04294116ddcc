"""
Round and turn state machine.

The engine owns every deck of the match (stock, hands, active trick and the
archived tricks of each team), hands turns to players, waits for one card per
turn, resolves full tricks and scores rounds. It never calls a view: what
happened is queued as notifications and drained by the host, and time only
passes through ``tick(dt)``.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterator
from typing import Any, Optional

from i18n import seat_name
from i18n import t as _t

from .bidding import RandomTrumpChooser, TrumpChooser
from .card import Card, Suit
from .config import GameConfig
from .deck import Deck, build_belote_deck
from .enums import GamePhase, Seat, Team
from .events import (
    CardPlayed,
    CardSelectionChanged,
    EventQueue,
    MatchEnded,
    Notification,
    RoundBoundary,
    RoundScored,
    TrickResolved,
    TurnChanged,
)
from .exceptions import (
    CardNotFoundError,
    ConfigurationError,
    IllegalPlayError,
    InvalidPhaseError,
    NoLegalMovesError,
)
from .legal_moves import legal_cards
from .phase_fsm import PhaseFSM
from .player import HumanController, Player, PlayerKind, TurnController
from .score import RoundResult, ScoreLedger
from .trick import Trick

logger = logging.getLogger(__name__)


class GameEngine:
    """
    Belote engine.

    Usage::

        engine = GameEngine(GameConfig(seed=7))
        engine.setup_default_players(human_seat=None)
        engine.start_match()
        while engine.rounds_scored < 3:
            engine.tick(0.25)
            for event in engine.drain_events():
                ...

    Args:
        config: engine settings, validated on construction
        rng: random source for shuffling, cutting, trump and AI choices;
            seeded from ``config.seed`` when omitted
        trump_chooser: bidding stand-in, random trump by default
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
        trump_chooser: Optional[TrumpChooser] = None,
    ):
        self.config: GameConfig = config or GameConfig()
        self.config.validate()
        self.rng: random.Random = rng or random.Random(self.config.seed)
        self.trump_chooser: TrumpChooser = trump_chooser or RandomTrumpChooser(self.rng)

        # decks
        self.stock: Deck = build_belote_deck(self.config.scoring)
        self.trick: Trick = Trick()
        self.past_tricks: dict[Team, list[Trick]] = {team: [] for team in Team}

        # table
        self.players: dict[Seat, Player] = {}
        self.current_player: Optional[Player] = None

        # round state
        self.round_index: int = -1
        self.rounds_scored: int = 0
        self.dealer: Optional[Seat] = None
        self.first_player: Optional[Seat] = None
        self.bidder: Optional[Seat] = None
        self.trump: Optional[Suit] = None
        self.last_trick_team: Optional[Team] = None
        self.last_result: Optional[RoundResult] = None
        self._tricks_resolved: int = 0

        # post-play delay, ``None`` when idle
        self._countdown: Optional[float] = None

        self.ledger: ScoreLedger = ScoreLedger(self.config.last_trick_bonus)
        self.events: EventQueue = EventQueue()
        self.fsm: PhaseFSM = PhaseFSM()

    # ==================== Table setup ====================

    def add_player(
        self,
        name: str,
        seat: Seat,
        kind: PlayerKind = PlayerKind.AI,
        controller: Optional[TurnController] = None,
    ) -> Player:
        """
        Seat a player. Only allowed before the match starts.

        Args:
            name: display name
            seat: table position, must be free
            kind: human or automated
            controller: turn behaviour; by default a ``HumanController`` for
                humans and an ``ai.AIBot`` sharing the engine's random source
                for automated players

        Raises:
            InvalidPhaseError: the match has started
            ConfigurationError: the seat is taken
        """
        if self.fsm.current != GamePhase.IDLE:
            raise InvalidPhaseError(
                current_phase=self.fsm.current.name,
                expected_phase=GamePhase.IDLE.name,
            )
        if seat in self.players:
            raise ConfigurationError(f"Seat {seat.name} is already taken", config_key="players")

        if controller is None:
            if kind == PlayerKind.HUMAN:
                controller = HumanController()
            else:
                from ai.bot import AIBot
                controller = AIBot(rng=self.rng)

        player = Player(name=name, seat=seat, kind=kind, controller=controller)
        self.players[seat] = player
        logger.debug("Seated %s as %s", player, kind.value)
        return player

    def setup_default_players(self, human_seat: Optional[Seat] = Seat.SOUTH) -> list[Player]:
        """Fill the four seats; ``human_seat=None`` makes an all-AI table."""
        for seat in Seat:
            kind = PlayerKind.HUMAN if seat == human_seat else PlayerKind.AI
            self.add_player(seat_name(seat.name.lower()), seat, kind)
        return self.seated_players()

    def seated_players(self) -> list[Player]:
        """Players in seat order."""
        return [self.players[seat] for seat in Seat if seat in self.players]

    def player_at(self, seat: Seat) -> Player:
        return self.players[seat]

    # ==================== Match / round flow ====================

    def start_match(self) -> None:
        """Shuffle the stock once and deal the first round.

        Raises:
            InvalidPhaseError: the match has already started
            ConfigurationError: the table is not full
        """
        if self.fsm.current != GamePhase.IDLE:
            raise InvalidPhaseError(
                message=_t("exc.match_started"),
                current_phase=self.fsm.current.name,
                expected_phase=GamePhase.IDLE.name,
            )
        if len(self.players) != self.config.player_count:
            raise ConfigurationError(
                f"{self.config.player_count} players are required, {len(self.players)} seated",
                config_key="player_count",
            )
        self.stock.shuffle(self.rng)
        logger.info("Match started: %s", ", ".join(str(p) for p in self.seated_players()))
        self.start_round()

    def start_round(self) -> None:
        """
        Deal a new round and open its first turn.

        The dealer moves one seat clockwise (seat 0 deals the first round)
        and the seat left of the dealer plays first. Cards are dealt in the
        blocks of ``config.dealing_plan``, each block to every seat in turn
        starting with the first player.

        Raises:
            ConfigurationError: the stock cannot cover the dealing plan;
                raised before any card moves
        """
        required = self.config.cards_per_player * len(self.players)
        if required > self.stock.size:
            raise ConfigurationError(
                f"Dealing plan {self.config.dealing_plan} needs {required} cards, "
                f"stock holds {self.stock.size}",
                config_key="dealing_plan",
            )

        self.fsm.transition(GamePhase.DEALING)
        self.round_index += 1
        self.dealer = Seat.SOUTH if self.dealer is None else self.dealer.left
        self.first_player = self.dealer.left
        self.trump = None
        self.last_trick_team = None
        self._tricks_resolved = 0

        if self.round_index > 0 and self.config.cut_between_rounds and self.stock.size > 1:
            self.stock.cut(self.rng.randrange(1, self.stock.size))

        order = self._seats_from(self.first_player)
        for block in self.config.dealing_plan:
            for seat in order:
                self.stock.deal_to(block, self.players[seat].hand)

        for player in self.seated_players():
            player.hand.sort_for_hand(None)

        bidding = self.trump_chooser.choose(
            self.first_player,
            {seat: player.hand for seat, player in self.players.items()},
        )
        self.bidder = bidding.bidder
        self._apply_trump(bidding.trump)

        logger.info(
            "Round %d: dealer=%s first=%s trump=%s bidder=%s",
            self.round_index, self.dealer.name, self.first_player.name,
            self.trump.name, self.bidder.name,
        )
        self.events.push(RoundBoundary(starting=True, round_index=self.round_index))
        self.open_turn(self.players[self.first_player])

    def set_trump(self, suit: Suit) -> None:
        """
        Change the trump of the running round.

        Hands are resorted and the legal cards of the turn holder are
        recomputed.

        Raises:
            InvalidPhaseError: no round is running, or a trick of this round
                has already been resolved
        """
        if self.round_index < 0 or self.fsm.current not in (
            GamePhase.DEALING, GamePhase.TURN_ACTIVE, GamePhase.TURN_RESOLVING,
        ):
            raise InvalidPhaseError(current_phase=self.fsm.current.name)
        if self._tricks_resolved > 0:
            raise InvalidPhaseError(
                message=_t("exc.trump_locked"),
                current_phase=self.fsm.current.name,
            )
        self._apply_trump(suit)
        holder = self.current_player
        if holder is not None and holder.is_allowed_to_play:
            holder.grant_turn(self._legal_cards_for(holder))
        logger.info("Trump set to %s", suit.name)

    def open_turn(self, player: Player) -> None:
        """
        Give the turn to ``player``.

        Raises:
            NoLegalMovesError: the player has nothing to play; the turn
                holder is left unchanged
        """
        playable = self._legal_cards_for(player)
        if playable.is_empty:
            raise NoLegalMovesError(seat=player.seat.name)

        previous = self.current_player
        if previous is not None:
            previous.revoke_turn()
            if previous.controller is not None:
                previous.controller.on_turn_stop(previous, self)

        self.fsm.transition(GamePhase.TURN_ACTIVE)
        player.grant_turn(playable)
        self.current_player = player
        logger.debug("Turn: %s, playable %s", player, playable.to_list())
        self.events.push(
            TurnChanged(current=player.seat, previous=previous.seat if previous else None)
        )
        if player.controller is not None:
            player.controller.on_turn_start(player, self)

    def play_card(self, player: Player, card: Card) -> None:
        """
        Move ``card`` from ``player``'s hand into the active trick.

        Every check runs before anything moves.

        Raises:
            IllegalPlayError: a previous play is still pending, it is not the
                player's turn, or the card is not among the legal cards
        """
        if self._countdown is not None:
            raise IllegalPlayError(
                reason=IllegalPlayError.PLAY_PENDING, card=str(card), seat=player.seat.name,
            )
        if (
            not self.fsm.can_play_card()
            or not player.is_allowed_to_play
            or player is not self.current_player
        ):
            raise IllegalPlayError(
                reason=IllegalPlayError.NOT_YOUR_TURN, card=str(card), seat=player.seat.name,
            )
        if not player.can_play(card):
            raise IllegalPlayError(
                reason=IllegalPlayError.NOT_LEGAL, card=str(card), seat=player.seat.name,
            )

        self.trick.play(card, player.seat, player.hand)
        player.revoke_turn()
        logger.debug("%s played %s", player, card)
        self.events.push(CardPlayed(card=card, seat=player.seat))

        self.fsm.transition(GamePhase.TURN_RESOLVING)
        self._countdown = self.config.after_play_delay

    def tick(self, dt: float) -> None:
        """Advance time by ``dt`` seconds; fires the post-play delay once it runs out."""
        if self._countdown is None or self.fsm.is_finished:
            return
        self._countdown -= dt
        if self._countdown <= 0:
            self._countdown = None
            self._after_play_delay_elapsed()

    def _after_play_delay_elapsed(self) -> None:
        if self.trick.size < len(self.players):
            self.open_turn(self.players[self.current_player.seat.left])
            return

        result = self.trick.finalize(self.trump)
        self.ledger.record_trick(result.team, result.points)
        self.last_trick_team = result.team
        self.past_tricks[result.team].append(self.trick.archive())
        self._tricks_resolved += 1
        self.events.push(
            TrickResolved(winner=result.seat, team=result.team, card=result.card, points=result.points)
        )

        winner = self.players[result.seat]
        if winner.hand.is_empty:
            self.end_round()
            self.start_round()
        else:
            self.open_turn(winner)

    def end_round(self) -> RoundResult:
        """
        Score the round and return every card to the stock.

        Archived tricks go back in the order they were won, first team
        before second. The round is judged against the bidder's team.

        Raises:
            InvalidPhaseError: a card is still in a hand or in the trick, or
                a play is pending
        """
        if (
            self._countdown is not None
            or not self.trick.is_empty
            or any(not player.hand.is_empty for player in self.seated_players())
        ):
            raise InvalidPhaseError(
                message=_t("exc.round_in_progress"),
                current_phase=self.fsm.current.name,
            )
        self.fsm.transition(GamePhase.ROUND_SCORING)
        self._release_turn()

        for team in Team:
            for trick in self.past_tricks[team]:
                trick.deck.move_all_to(self.stock)
            self.past_tricks[team].clear()
        for player in self.seated_players():
            player.hand.move_all_to(self.stock)

        result = self.ledger.finalize_round(self.bidder.team, self.last_trick_team)
        self.last_result = result
        self.rounds_scored += 1
        self.events.push(RoundScored(round_index=self.round_index, result=result))
        self.events.push(RoundBoundary(starting=False, round_index=self.round_index))
        return result

    def end_match(self) -> None:
        """Stop the match; nothing is played or scored afterwards."""
        self.fsm.end_match()
        self._countdown = None
        self._release_turn()
        logger.info(
            "Match ended after %d round(s): %s",
            self.rounds_scored, self.ledger.to_dict()["match"],
        )
        self.events.push(MatchEnded())

    def run_headless_match(self, rounds: int, dt: float = 0.25, max_ticks: int = 100_000) -> dict[str, Any]:
        """
        Drive an automated match until ``rounds`` rounds are scored.

        Args:
            rounds: rounds to play
            dt: seconds per tick
            max_ticks: safety stop for tables that never play (a human seat)

        Notifications are drained and discarded every tick; only the event
        history keeps the latest ones.

        Returns:
            summary dict of the match
        """
        if self.fsm.current == GamePhase.IDLE:
            self.start_match()
        events = len(self.events.drain())
        ticks = 0
        while self.rounds_scored < rounds and ticks < max_ticks:
            self.tick(dt)
            ticks += 1
            events += len(self.events.drain())
        if not self.fsm.is_finished:
            self.end_match()
        events += len(self.events.drain())
        return {
            "rounds": self.rounds_scored,
            "ticks": ticks,
            "events": events,
            "finished": self.rounds_scored >= rounds,
            "score": self.ledger.to_dict()["match"],
        }

    # ==================== Inbound gestures ====================

    def handle_selection(self, evt: CardSelectionChanged) -> bool:
        """
        Route a selection gesture from the view to the human holding the card.

        Returns:
            True if it resulted in a play.
        """
        for player in self.seated_players():
            if player.is_human and evt.card in player.hand:
                controller = player.controller
                if isinstance(controller, HumanController):
                    return controller.on_card_selection(player, self, evt)
                return False
        logger.debug("Selection of %s ignored: not in a human hand", evt.card)
        return False

    # ==================== Queries ====================

    @property
    def phase(self) -> GamePhase:
        return self.fsm.current

    @property
    def play_pending(self) -> bool:
        return self._countdown is not None

    def drain_events(self) -> list[Notification]:
        return self.events.drain()

    def iter_decks(self) -> Iterator[Deck]:
        """Every deck of the match: stock, hands, active trick, archived tricks."""
        yield self.stock
        for player in self.seated_players():
            yield player.hand
        yield self.trick.deck
        for team in Team:
            for trick in self.past_tricks[team]:
                yield trick.deck

    def locate(self, card: Card) -> Deck:
        """
        Deck currently holding ``card``.

        Raises:
            CardNotFoundError: no deck holds it
        """
        for deck in self.iter_decks():
            if card in deck:
                return deck
        raise CardNotFoundError(card=str(card), owner="match")

    def card_count(self) -> int:
        return sum(deck.size for deck in self.iter_decks())

    def to_dict(self) -> dict[str, Any]:
        return {
            "phase": self.phase.value,
            "round_index": self.round_index,
            "dealer": self.dealer.name if self.dealer else None,
            "first_player": self.first_player.name if self.first_player else None,
            "bidder": self.bidder.name if self.bidder else None,
            "trump": self.trump.value if self.trump else None,
            "current_player": self.current_player.seat.name if self.current_player else None,
            "trick": self.trick.to_dict(),
            "stock": self.stock.size,
            "score": self.ledger.to_dict(),
            "players": [player.to_dict() for player in self.seated_players()],
        }

    # ==================== Internals ====================

    def _apply_trump(self, suit: Suit) -> None:
        self.trump = suit
        for player in self.seated_players():
            player.hand.sort_for_hand(suit)

    def _legal_cards_for(self, player: Player) -> Deck:
        return legal_cards(
            player.hand,
            self.trick,
            self.trump,
            player.team,
            team_of=lambda seat: self.players[seat].team,
        )

    def _release_turn(self) -> None:
        player = self.current_player
        if player is None:
            return
        player.revoke_turn()
        if player.controller is not None:
            player.controller.on_turn_stop(player, self)
        self.current_player = None

    def _seats_from(self, first: Seat) -> list[Seat]:
        order = [first]
        while len(order) < len(self.players):
            order.append(order[-1].left)
        return order

    def __repr__(self) -> str:
        return (
            f"GameEngine(phase={self.phase.name}, round={self.round_index}, "
            f"trump={self.trump.name if self.trump else None})"
        )

