"""Engine notifications and the outbound event queue.

The engine does not call listeners. It appends plain value notifications to
an ``EventQueue`` and the host drains the queue once per tick, so what
happened is inspected in order instead of through callbacks.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, ClassVar, Optional, Union

from .enums import Seat, Team

if TYPE_CHECKING:
    from .card import Card
    from .score import RoundResult

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Notification kinds."""

    # outbound
    ROUND_BOUNDARY = auto()
    TURN_CHANGED = auto()
    CARD_PLAYED = auto()
    TRICK_RESOLVED = auto()
    ROUND_SCORED = auto()
    MATCH_ENDED = auto()

    # inbound, from an interactive view
    CARD_SELECTION_CHANGED = auto()


@dataclass(frozen=True)
class RoundBoundary:
    """Emitted when a round starts (``starting=True``) and when it ends."""

    event_type: ClassVar[EventType] = EventType.ROUND_BOUNDARY
    starting: bool
    round_index: int = 0


@dataclass(frozen=True)
class TurnChanged:
    event_type: ClassVar[EventType] = EventType.TURN_CHANGED
    current: Seat
    previous: Optional[Seat] = None


@dataclass(frozen=True)
class CardPlayed:
    """A card reached the active trick."""

    event_type: ClassVar[EventType] = EventType.CARD_PLAYED
    card: Card
    seat: Seat


@dataclass(frozen=True)
class TrickResolved:
    event_type: ClassVar[EventType] = EventType.TRICK_RESOLVED
    winner: Seat
    team: Team
    card: Card
    points: int


@dataclass(frozen=True)
class RoundScored:
    event_type: ClassVar[EventType] = EventType.ROUND_SCORED
    round_index: int
    result: RoundResult


@dataclass(frozen=True)
class MatchEnded:
    event_type: ClassVar[EventType] = EventType.MATCH_ENDED


@dataclass(frozen=True)
class CardSelectionChanged:
    """Inbound gesture from the view layer.

    Attributes:
        card: card under the pointer
        is_selected: True while held, False on release
        released_outside_hand: the view's answer to "is the card outside the
            hand's resting area"; a release there is a play attempt
    """

    event_type: ClassVar[EventType] = EventType.CARD_SELECTION_CHANGED
    card: Card
    is_selected: bool
    released_outside_hand: bool = False

    @property
    def is_play_attempt(self) -> bool:
        return not self.is_selected and self.released_outside_hand


Notification = Union[
    RoundBoundary, TurnChanged, CardPlayed, TrickResolved, RoundScored, MatchEnded,
]


class EventQueue:
    """FIFO of outbound notifications plus a bounded history."""

    def __init__(self, max_history: int = 200):
        self._pending: deque[Notification] = deque()
        self._history: deque[Notification] = deque(maxlen=max_history)

    def push(self, event: Notification) -> None:
        self._pending.append(event)
        self._history.append(event)
        logger.debug("Event queued: %s", event)

    def drain(self) -> list[Notification]:
        """Return and remove every pending notification, oldest first."""
        events = list(self._pending)
        self._pending.clear()
        return events

    def pending(self) -> list[Notification]:
        return list(self._pending)

    def get_history(self, count: int = 10) -> list[Notification]:
        return list(self._history)[-count:]

    def clear(self) -> None:
        self._pending.clear()
        self._history.clear()

    def __len__(self) -> int:
        return len(self._pending)
