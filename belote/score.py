"""Score ledger: match totals plus a per-round accumulator."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from .enums import Team

logger = logging.getLogger(__name__)

DEFAULT_LAST_TRICK_BONUS = 10


@dataclass(frozen=True)
class RoundResult:
    """Outcome of one round.

    Attributes:
        round_points: points each team collected in tricks this round
        winner: team whose round points were credited
        bonus_team: team that won the last trick (received the bonus)
        bonus: bonus amount credited to ``bonus_team``
        is_tie: both teams had equal round points (``winner`` is then the
            reference team)
    """

    round_points: dict[Team, int]
    winner: Team
    bonus_team: Optional[Team]
    bonus: int
    is_tie: bool

    @property
    def total_points(self) -> int:
        return sum(self.round_points.values())


class ScoreLedger:
    """Per-team totals.

    The round accumulator is filled by ``record_trick`` and fully consumed
    by ``finalize_round``, which leaves it at zero.
    """

    def __init__(self, last_trick_bonus: int = DEFAULT_LAST_TRICK_BONUS):
        self.last_trick_bonus = last_trick_bonus
        self._match: dict[Team, int] = {team: 0 for team in Team}
        self._round: dict[Team, int] = {team: 0 for team in Team}

    def match_score(self, team: Team) -> int:
        return self._match[team]

    def round_score(self, team: Team) -> int:
        return self._round[team]

    def record_trick(self, team: Team, points: int) -> None:
        self._round[team] += points

    def leading_team(self, reference_team: Team) -> Team:
        """Team ahead this round; the reference team keeps ties."""
        other = reference_team.other
        if self._round[other] > self._round[reference_team]:
            return other
        return reference_team

    def finalize_round(self, reference_team: Team, last_trick_team: Optional[Team]) -> RoundResult:
        """Credit the round and reset the accumulator.

        Args:
            reference_team: team the round is judged against (the bidder's)
            last_trick_team: team that won the final trick, if any

        Returns:
            the round outcome, including the points recorded this round
        """
        round_points = dict(self._round)
        winner = self.leading_team(reference_team)
        is_tie = round_points[Team.TEAM1] == round_points[Team.TEAM2]

        self._match[winner] += round_points[winner]
        bonus = 0
        if last_trick_team is not None:
            bonus = self.last_trick_bonus
            self._match[last_trick_team] += bonus

        for team in Team:
            self._round[team] = 0

        result = RoundResult(
            round_points=round_points,
            winner=winner,
            bonus_team=last_trick_team,
            bonus=bonus,
            is_tie=is_tie,
        )
        logger.info(
            "Round scored: %s | winner=%s tie=%s bonus=%s | match %s",
            {team.name: pts for team, pts in round_points.items()},
            winner.name,
            is_tie,
            last_trick_team.name if last_trick_team else None,
            {team.name: pts for team, pts in self._match.items()},
        )
        return result

    def reset(self) -> None:
        for team in Team:
            self._match[team] = 0
            self._round[team] = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "match": {team.value: pts for team, pts in self._match.items()},
            "round": {team.value: pts for team, pts in self._round.items()},
        }
