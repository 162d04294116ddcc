"""Engine configuration.

A ``GameConfig`` is built by the host and handed to the engine; nothing in
the core reads process-wide settings. ``GameConfig.from_env()`` is the opt-in
way to override values from the environment:

- BELOTE_AFTER_PLAY_DELAY: seconds between a play and its resolution
- BELOTE_LAST_TRICK_BONUS: bonus for the last trick of a round
- BELOTE_CUT: cut the stock before each deal after the first (true/false)
- BELOTE_SEED: seed of the engine's random source
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from typing import Optional

from .card import ScoringTable
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

PACK_SIZE = 32


def _get_env_float(key: str, default: float) -> float:
    value = os.environ.get(key)
    if value is not None:
        try:
            return float(value)
        except ValueError:
            logger.warning("Ignoring %s=%r: not a float", key, value)
    return default


def _get_env_int(key: str, default: Optional[int]) -> Optional[int]:
    value = os.environ.get(key)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            logger.warning("Ignoring %s=%r: not an int", key, value)
    return default


def _get_env_bool(key: str, default: bool) -> bool:
    value = os.environ.get(key, "").lower()
    if value in ("true", "1", "yes", "on"):
        return True
    elif value in ("false", "0", "no", "off"):
        return False
    return default


@dataclass(frozen=True)
class GameConfig:
    """Immutable engine settings.

    Attributes:
        player_count: seats at the table
        dealing_plan: block sizes dealt to every seat, in order
        after_play_delay: seconds the engine waits after a play before
            advancing (lets a view settle; not a rule)
        last_trick_bonus: points for winning the final trick of a round
        cut_between_rounds: cut the stock at a random point before each deal
            after the first
        seed: seed for the engine's random source, ``None`` for entropy
        scoring: point table used to build the pack
    """

    # ==================== Table ====================
    player_count: int = 4
    dealing_plan: tuple[int, ...] = (3, 2, 3)

    # ==================== Timing ====================
    after_play_delay: float = 1.0

    # ==================== Scoring ====================
    last_trick_bonus: int = 10
    scoring: ScoringTable = field(default_factory=ScoringTable.standard)

    # ==================== Randomness ====================
    cut_between_rounds: bool = True
    seed: Optional[int] = None

    @property
    def cards_per_player(self) -> int:
        return sum(self.dealing_plan)

    @classmethod
    def from_env(cls, **overrides) -> GameConfig:
        """Defaults, then environment, then ``overrides``."""
        defaults = cls()
        config = cls(
            after_play_delay=_get_env_float("BELOTE_AFTER_PLAY_DELAY", defaults.after_play_delay),
            last_trick_bonus=_get_env_int("BELOTE_LAST_TRICK_BONUS", defaults.last_trick_bonus),
            cut_between_rounds=_get_env_bool("BELOTE_CUT", defaults.cut_between_rounds),
            seed=_get_env_int("BELOTE_SEED", defaults.seed),
        )
        return replace(config, **overrides) if overrides else config

    def validate(self) -> None:
        """Reject settings the engine cannot play with.

        The dealing plan itself is checked against the stock when a round
        starts.

        Raises:
            ConfigurationError: on the first invalid value
        """
        if self.player_count != 4:
            raise ConfigurationError(
                f"Belote is played by 4 players, got {self.player_count}",
                config_key="player_count",
            )
        if not self.dealing_plan or any(block <= 0 for block in self.dealing_plan):
            raise ConfigurationError(
                f"Dealing blocks must be positive, got {self.dealing_plan}",
                config_key="dealing_plan",
            )
        if self.after_play_delay < 0:
            raise ConfigurationError(
                f"after_play_delay must be >= 0, got {self.after_play_delay}",
                config_key="after_play_delay",
            )
        if self.last_trick_bonus < 0:
            raise ConfigurationError(
                f"last_trick_bonus must be >= 0, got {self.last_trick_bonus}",
                config_key="last_trick_bonus",
            )
