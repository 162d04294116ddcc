"""Tests for belote.player: player state and the human controller."""

import logging

from belote import CardSelectionChanged, GamePhase, PlayerKind, Seat, Team
from belote.deck import Deck
from belote.player import HumanController, Player

from conftest import make_card as _c


class TestPlayer:
    def test_hand_owned_by_seat(self):
        player = Player(name="East", seat=Seat.EAST)
        assert player.hand.owner == Seat.EAST
        assert player.hand.is_empty
        assert player.team == Team.TEAM2
        assert player.kind == PlayerKind.AI

    def test_turn_permission(self):
        player = Player(name="South", seat=Seat.SOUTH, kind=PlayerKind.HUMAN)
        card = _c("AS")
        player.hand.add(card)
        assert not player.can_play(card)

        player.grant_turn(Deck(cards=[card]))
        assert player.is_allowed_to_play
        assert player.can_play(card)
        assert not player.can_play(_c("KS"))

        player.revoke_turn()
        assert not player.is_allowed_to_play
        assert player.playable_cards.is_empty
        assert not player.can_play(card)

    def test_players_are_distinct(self):
        assert Player(name="A", seat=Seat.SOUTH) != Player(name="A", seat=Seat.SOUTH)

    def test_to_dict(self):
        player = Player(name="North", seat=Seat.NORTH, kind=PlayerKind.HUMAN)
        data = player.to_dict()
        assert data["seat"] == "NORTH"
        assert data["team"] == "team1"
        assert data["kind"] == "human"
        assert data["hand"] == []


class TestHumanSelection:
    def test_held_card_is_not_played(self, scripted_engine):
        engine = scripted_engine
        evt = CardSelectionChanged(_c("7S"), is_selected=True, released_outside_hand=True)
        assert engine.handle_selection(evt) is False
        assert _c("7S") in engine.player_at(Seat.WEST).hand

    def test_release_inside_hand_is_not_played(self, scripted_engine):
        engine = scripted_engine
        evt = CardSelectionChanged(_c("7S"), is_selected=False, released_outside_hand=False)
        assert engine.handle_selection(evt) is False
        assert engine.trick.is_empty

    def test_release_outside_plays(self, scripted_engine):
        engine = scripted_engine
        evt = CardSelectionChanged(_c("7S"), is_selected=False, released_outside_hand=True)
        assert engine.handle_selection(evt) is True
        assert engine.trick.deck.cards == (_c("7S"),)
        assert engine.phase == GamePhase.TURN_RESOLVING

    def test_rejected_play_is_logged_and_harmless(self, scripted_engine, caplog):
        engine = scripted_engine
        evt = CardSelectionChanged(_c("8H"), is_selected=False, released_outside_hand=True)
        with caplog.at_level(logging.WARNING, logger="belote.player"):
            assert engine.handle_selection(evt) is False
        assert "Rejected play" in caplog.text
        assert _c("8H") in engine.player_at(Seat.SOUTH).hand
        assert engine.current_player.seat == Seat.WEST

    def test_illegal_card_rejected(self, scripted_engine, caplog):
        engine = scripted_engine
        engine.play_card(engine.player_at(Seat.WEST), _c("7S"))
        engine.tick(0.5)
        evt = CardSelectionChanged(_c("KH"), is_selected=False, released_outside_hand=True)
        with caplog.at_level(logging.INFO, logger="belote.player"):
            assert engine.handle_selection(evt) is False
        assert "not a legal card" in caplog.text
        assert engine.player_at(Seat.NORTH).is_allowed_to_play

    def test_card_outside_human_hands_ignored(self, scripted_engine):
        engine = scripted_engine
        engine.play_card(engine.player_at(Seat.WEST), _c("7S"))
        evt = CardSelectionChanged(_c("7S"), is_selected=False, released_outside_hand=True)
        assert engine.handle_selection(evt) is False

    def test_controller_directly(self, scripted_engine):
        engine = scripted_engine
        west = engine.player_at(Seat.WEST)
        controller = HumanController()
        evt = CardSelectionChanged(_c("8S"), is_selected=False, released_outside_hand=True)
        assert controller.on_card_selection(west, engine, evt) is True
        assert engine.trick.seat_of(_c("8S")) == Seat.WEST
