"""Engine phase, seat and team enums.

Kept apart from ``engine.py`` so ``phase_fsm``, ``player`` and ``score`` can
import them without going through the engine.
"""

from __future__ import annotations

from enum import Enum


class GamePhase(Enum):
    """Engine lifecycle phase."""

    IDLE = "idle"  # created, match not started
    DEALING = "dealing"
    TURN_ACTIVE = "turn_active"  # someone holds the turn
    TURN_RESOLVING = "turn_resolving"  # post-play delay running
    ROUND_SCORING = "round_scoring"
    MATCH_ENDED = "match_ended"


class Team(Enum):
    TEAM1 = "team1"
    TEAM2 = "team2"

    @property
    def other(self) -> Team:
        return Team.TEAM2 if self is Team.TEAM1 else Team.TEAM1


class Seat(Enum):
    """Table positions in clockwise order."""

    SOUTH = 0
    WEST = 1
    NORTH = 2
    EAST = 3

    @property
    def team(self) -> Team:
        """South/North play together against West/East."""
        return Team.TEAM1 if self.value % 2 == 0 else Team.TEAM2

    @property
    def left(self) -> Seat:
        """Next seat clockwise."""
        return Seat((self.value + 1) % len(Seat))

    @property
    def partner(self) -> Seat:
        return Seat((self.value + 2) % len(Seat))
