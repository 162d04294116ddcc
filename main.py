"""
Belote - headless host
Plays an all-AI match on a fixed tick and prints every round with rich.

Usage:
    python main.py --rounds 3 --seed 42
    python main.py --locale fr_FR --log-level DEBUG
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from rich.box import ROUNDED
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from belote import GameConfig, GameEngine, GameError, RoundScored, Team
from belote.events import Notification, RoundBoundary
from i18n import set_locale, suit_name, team_name
from i18n import t as _t
from logging_config import setup_logging

logger = logging.getLogger(__name__)


class BeloteHost:
    """Drives a ``GameEngine`` with ticks and renders its notifications."""

    def __init__(self, engine: GameEngine, console: Optional[Console] = None, tick: float = 0.25):
        self.engine = engine
        self.console = console or Console(highlight=False)
        self.tick = tick
        self._round_headers: dict[int, str] = {}

    def run(self, rounds: int, max_ticks: int = 100_000) -> None:
        self.console.print(Panel(_t("host.title"), box=ROUNDED, style="bold green"))
        self.engine.start_match()
        self._render(self.engine.drain_events())

        ticks = 0
        while self.engine.rounds_scored < rounds and ticks < max_ticks:
            self.engine.tick(self.tick)
            ticks += 1
            self._render(self.engine.drain_events())

        self.engine.end_match()
        self._render(self.engine.drain_events())
        self._render_final()

    # ==================== Rendering ====================

    def _render(self, events: list[Notification]) -> None:
        for event in events:
            if isinstance(event, RoundBoundary) and event.starting:
                # trump and dealer are only known while the round runs
                self._round_headers[event.round_index] = _t(
                    "host.round_title",
                    index=event.round_index + 1,
                    trump=suit_name(self.engine.trump.value),
                    dealer=self.engine.players[self.engine.dealer].name,
                )
            elif isinstance(event, RoundScored):
                self._render_round(event)

    def _render_round(self, event: RoundScored) -> None:
        result = event.result
        table = Table(title=self._round_headers.get(event.round_index), box=ROUNDED)
        table.add_column(_t("host.col_team"), style="bold")
        table.add_column(_t("host.col_round"), justify="right")
        table.add_column(_t("host.col_bonus"), justify="right")
        table.add_column(_t("host.col_total"), justify="right", style="cyan")
        for team in Team:
            bonus = result.bonus if result.bonus_team == team else 0
            table.add_row(
                team_name(team.value),
                str(result.round_points[team]),
                str(bonus) if bonus else "-",
                str(self.engine.ledger.match_score(team)),
            )
        self.console.print(table)
        key = "host.round_tie" if result.is_tie else "host.round_winner"
        self.console.print(_t(key, team=team_name(result.winner.value)))

    def _render_final(self) -> None:
        table = Table(title=_t("host.final", rounds=self.engine.rounds_scored), box=ROUNDED)
        table.add_column(_t("host.col_team"), style="bold")
        table.add_column(_t("host.col_total"), justify="right", style="cyan")
        for team in Team:
            table.add_row(team_name(team.value), str(self.engine.ledger.match_score(team)))
        self.console.print(table)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Belote headless match")
    parser.add_argument("--rounds", type=int, default=3, help="rounds to play")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--delay", type=float, default=None, help="seconds between a play and its resolution")
    parser.add_argument("--tick", type=float, default=0.25, help="seconds per engine tick")
    parser.add_argument("--log-level", default="INFO", help="file log level")
    parser.add_argument("--locale", default="en_US", help="en_US or fr_FR")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Program entry"""
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level, enable_console=False)

    overrides = {}
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.delay is not None:
        overrides["after_play_delay"] = args.delay

    try:
        set_locale(args.locale)
        engine = GameEngine(GameConfig.from_env(**overrides))
        engine.setup_default_players(human_seat=None)
        BeloteHost(engine, tick=args.tick).run(args.rounds)
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt - exiting")
        return 0
    except (GameError, ValueError) as e:
        logger.exception("Match aborted")
        Console(stderr=True).print(f"[red]{e}[/red]")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
