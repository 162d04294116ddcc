"""
Automated match tests
Plays full all-AI matches and checks that the game flow never breaks its
invariants.
"""

import pytest

from belote import (
    CardPlayed,
    GameConfig,
    GameEngine,
    GamePhase,
    RoundBoundary,
    RoundScored,
    Team,
    TrickResolved,
)


class AutoBattleSimulator:
    """Drives an all-AI engine one tick at a time and records what it sees."""

    def __init__(self, seed: int, rounds: int = 3, cut: bool = True):
        self.rounds = rounds
        self.engine = GameEngine(
            GameConfig(after_play_delay=0.5, cut_between_rounds=cut, seed=seed)
        )
        self.engine.setup_default_players(human_seat=None)
        self.events = []
        self.errors: list[str] = []

    def _check(self) -> None:
        count = self.engine.card_count()
        if count != 32:
            self.errors.append(f"card count {count} after {len(self.events)} events")

    def run(self, max_ticks: int = 10_000) -> None:
        self.engine.start_match()
        self.events.extend(self.engine.drain_events())
        ticks = 0
        while self.engine.rounds_scored < self.rounds and ticks < max_ticks:
            self.engine.tick(0.5)
            ticks += 1
            self.events.extend(self.engine.drain_events())
            self._check()
        self.engine.end_match()
        self.events.extend(self.engine.drain_events())


@pytest.mark.parametrize("seed", [1, 7, 42, 2024])
class TestAutoBattle:
    def test_match_completes(self, seed):
        sim = AutoBattleSimulator(seed)
        sim.run()
        assert sim.errors == []
        assert sim.engine.rounds_scored == 3
        assert sim.engine.phase == GamePhase.MATCH_ENDED

    def test_plays_and_tricks_per_round(self, seed):
        sim = AutoBattleSimulator(seed, rounds=2)
        sim.run()
        plays = [e for e in sim.events if isinstance(e, CardPlayed)]
        tricks = [e for e in sim.events if isinstance(e, TrickResolved)]
        # the third round has started (and its first card was played) when the match ends
        assert len(tricks) == 16
        assert 64 <= len(plays) <= 65

    def test_every_card_played_once_per_round(self, seed):
        sim = AutoBattleSimulator(seed, rounds=1)
        sim.run()
        first_round = []
        for event in sim.events:
            if isinstance(event, RoundBoundary) and not event.starting:
                break
            if isinstance(event, CardPlayed):
                first_round.append(event.card)
        assert len(first_round) == 32
        assert len(set(first_round)) == 32

    def test_round_scores_add_up(self, seed):
        sim = AutoBattleSimulator(seed)
        sim.run()
        scored = [e for e in sim.events if isinstance(e, RoundScored)]
        assert len(scored) == 3

        expected = {team: 0 for team in Team}
        trick_points = 0
        for event in sim.events:
            if isinstance(event, TrickResolved):
                trick_points += event.points
            elif isinstance(event, RoundScored):
                result = event.result
                assert result.total_points == trick_points
                assert result.total_points == 152
                expected[result.winner] += result.round_points[result.winner]
                expected[result.bonus_team] += result.bonus
                trick_points = 0
        assert {team: sim.engine.ledger.match_score(team) for team in Team} == expected

    def test_headless_summary(self, seed):
        engine = GameEngine(GameConfig(after_play_delay=0.0, seed=seed))
        engine.setup_default_players(human_seat=None)
        summary = engine.run_headless_match(rounds=2, dt=0.0)
        assert summary["finished"]
        assert summary["rounds"] == 2
        assert summary["score"] == engine.ledger.to_dict()["match"]
        assert summary["events"] > 0
        assert len(engine.events) == 0


class TestHumanTableStalls:
    def test_max_ticks_stops_a_waiting_table(self):
        engine = GameEngine(GameConfig(seed=3))
        engine.setup_default_players()
        summary = engine.run_headless_match(rounds=1, dt=0.5, max_ticks=200)
        assert not summary["finished"]
        assert summary["ticks"] == 200
        assert engine.phase == GamePhase.MATCH_ENDED


class TestHost:
    def test_main_runs_a_match(self, tmp_path, monkeypatch, capsys):
        import main

        monkeypatch.setenv("BELOTE_LOG_FILE", str(tmp_path / "belote.log"))
        assert main.main(["--rounds", "1", "--seed", "9", "--delay", "0", "--tick", "0.1"]) == 0
        out = capsys.readouterr().out
        assert "North-South" in out
        assert "East-West" in out

    def test_main_rejects_bad_locale(self, tmp_path, monkeypatch):
        import main

        monkeypatch.setenv("BELOTE_LOG_FILE", str(tmp_path / "belote.log"))
        assert main.main(["--rounds", "1", "--locale", "xx_XX"]) == 1
