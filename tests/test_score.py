"""Tests for belote.score.ScoreLedger."""

from belote.enums import Team
from belote.score import ScoreLedger


class TestScoreLedger:
    def test_initial_zero(self):
        ledger = ScoreLedger()
        for team in Team:
            assert ledger.match_score(team) == 0
            assert ledger.round_score(team) == 0

    def test_record_trick_accumulates(self):
        ledger = ScoreLedger()
        ledger.record_trick(Team.TEAM1, 20)
        ledger.record_trick(Team.TEAM1, 5)
        ledger.record_trick(Team.TEAM2, 7)
        assert ledger.round_score(Team.TEAM1) == 25
        assert ledger.round_score(Team.TEAM2) == 7

    def test_winner_takes_round_points(self):
        ledger = ScoreLedger(last_trick_bonus=10)
        ledger.record_trick(Team.TEAM1, 100)
        ledger.record_trick(Team.TEAM2, 52)
        result = ledger.finalize_round(Team.TEAM2, last_trick_team=Team.TEAM2)

        assert result.winner == Team.TEAM1
        assert not result.is_tie
        assert ledger.match_score(Team.TEAM1) == 100
        assert ledger.match_score(Team.TEAM2) == 10

    def test_bonus_to_last_trick_team(self):
        ledger = ScoreLedger(last_trick_bonus=10)
        ledger.record_trick(Team.TEAM1, 90)
        ledger.record_trick(Team.TEAM2, 62)
        result = ledger.finalize_round(Team.TEAM1, last_trick_team=Team.TEAM1)

        assert result.bonus_team == Team.TEAM1
        assert result.bonus == 10
        assert ledger.match_score(Team.TEAM1) == 100
        assert ledger.match_score(Team.TEAM2) == 0

    def test_tie_goes_to_reference_team(self):
        ledger = ScoreLedger()
        ledger.record_trick(Team.TEAM1, 76)
        ledger.record_trick(Team.TEAM2, 76)
        result = ledger.finalize_round(Team.TEAM2, last_trick_team=None)

        assert result.is_tie
        assert result.winner == Team.TEAM2
        assert result.bonus == 0
        assert ledger.match_score(Team.TEAM2) == 76
        assert ledger.match_score(Team.TEAM1) == 0

    def test_round_accumulators_reset(self):
        ledger = ScoreLedger()
        ledger.record_trick(Team.TEAM1, 30)
        ledger.record_trick(Team.TEAM2, 40)
        result = ledger.finalize_round(Team.TEAM1, Team.TEAM2)

        assert result.round_points == {Team.TEAM1: 30, Team.TEAM2: 40}
        assert result.total_points == 70
        assert ledger.round_score(Team.TEAM1) == 0
        assert ledger.round_score(Team.TEAM2) == 0

    def test_match_totals_accumulate_over_rounds(self):
        ledger = ScoreLedger(last_trick_bonus=10)
        ledger.record_trick(Team.TEAM1, 100)
        ledger.finalize_round(Team.TEAM1, Team.TEAM1)
        ledger.record_trick(Team.TEAM2, 100)
        ledger.finalize_round(Team.TEAM1, Team.TEAM2)
        assert ledger.match_score(Team.TEAM1) == 110
        assert ledger.match_score(Team.TEAM2) == 110

    def test_reset(self):
        ledger = ScoreLedger()
        ledger.record_trick(Team.TEAM1, 30)
        ledger.finalize_round(Team.TEAM1, Team.TEAM1)
        ledger.record_trick(Team.TEAM2, 5)
        ledger.reset()
        assert ledger.to_dict() == {
            "match": {"team1": 0, "team2": 0},
            "round": {"team1": 0, "team2": 0},
        }
