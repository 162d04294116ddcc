"""Tests for belote.events: notification values and the outbound queue."""

from belote.card import Card
from belote.enums import Seat
from belote.events import (
    CardPlayed,
    CardSelectionChanged,
    EventQueue,
    EventType,
    MatchEnded,
    RoundBoundary,
    TurnChanged,
)


class TestNotifications:
    def test_event_types(self):
        assert RoundBoundary(starting=True).event_type == EventType.ROUND_BOUNDARY
        assert TurnChanged(current=Seat.WEST).event_type == EventType.TURN_CHANGED
        assert MatchEnded().event_type == EventType.MATCH_ENDED

    def test_value_equality(self):
        card = Card.from_string("AS")
        assert CardPlayed(card, Seat.NORTH) == CardPlayed(Card.from_string("AS"), Seat.NORTH)

    def test_turn_changed_defaults(self):
        evt = TurnChanged(current=Seat.WEST)
        assert evt.previous is None

    def test_selection_play_attempt(self):
        card = Card.from_string("AS")
        assert CardSelectionChanged(card, is_selected=False, released_outside_hand=True).is_play_attempt
        assert not CardSelectionChanged(card, is_selected=True, released_outside_hand=True).is_play_attempt
        assert not CardSelectionChanged(card, is_selected=False).is_play_attempt


class TestEventQueue:
    def test_drain_in_order(self):
        queue = EventQueue()
        queue.push(RoundBoundary(starting=True))
        queue.push(TurnChanged(current=Seat.WEST))
        events = queue.drain()
        assert [e.event_type for e in events] == [EventType.ROUND_BOUNDARY, EventType.TURN_CHANGED]
        assert len(queue) == 0
        assert queue.drain() == []

    def test_pending_does_not_remove(self):
        queue = EventQueue()
        queue.push(MatchEnded())
        assert queue.pending() == [MatchEnded()]
        assert len(queue) == 1

    def test_history_is_bounded(self):
        queue = EventQueue(max_history=3)
        for i in range(5):
            queue.push(RoundBoundary(starting=True, round_index=i))
        queue.drain()
        history = queue.get_history(10)
        assert [e.round_index for e in history] == [2, 3, 4]

    def test_clear(self):
        queue = EventQueue()
        queue.push(MatchEnded())
        queue.clear()
        assert len(queue) == 0
        assert queue.get_history() == []
