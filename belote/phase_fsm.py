"""Engine phase state machine.

Validates every lifecycle transition of the engine, e.g. a trick cannot be
scored without going through the post-play delay first.
"""

from __future__ import annotations

import logging

from i18n import t as _t

from .enums import GamePhase
from .exceptions import InvalidPhaseError

logger = logging.getLogger(__name__)

# current phase -> phases it may move to
VALID_TRANSITIONS: dict[GamePhase, set[GamePhase]] = {
    GamePhase.IDLE: {GamePhase.DEALING},
    GamePhase.DEALING: {GamePhase.TURN_ACTIVE},
    GamePhase.TURN_ACTIVE: {GamePhase.TURN_RESOLVING},
    GamePhase.TURN_RESOLVING: {GamePhase.TURN_ACTIVE, GamePhase.ROUND_SCORING},
    GamePhase.ROUND_SCORING: {GamePhase.DEALING},
    GamePhase.MATCH_ENDED: set(),
}


class InvalidPhaseTransition(InvalidPhaseError):
    """Raised on a transition missing from ``VALID_TRANSITIONS``."""

    def __init__(
        self,
        current_phase: GamePhase,
        target_phase: GamePhase,
    ):
        message = _t("exc.invalid_transition", current=current_phase.name, target=target_phase.name)
        super().__init__(
            message=message,
            current_phase=current_phase.name,
            expected_phase=target_phase.name,
        )
        self.from_phase = current_phase
        self.to_phase = target_phase


class PhaseFSM:
    """Holds the current phase and checks transitions.

    Usage::

        fsm = PhaseFSM()
        fsm.transition(GamePhase.DEALING)        # OK: IDLE -> DEALING
        fsm.transition(GamePhase.ROUND_SCORING)  # raises InvalidPhaseTransition

    ``MATCH_ENDED`` is reachable from any live phase through ``end_match``.
    """

    def __init__(self) -> None:
        self._phase: GamePhase = GamePhase.IDLE

    @property
    def current(self) -> GamePhase:
        return self._phase

    def transition(self, target: GamePhase) -> None:
        """Move to ``target``.

        Raises:
            InvalidPhaseTransition: the move is not allowed from the current phase
        """
        valid = VALID_TRANSITIONS.get(self._phase, set())
        if target not in valid:
            raise InvalidPhaseTransition(self._phase, target)
        logger.debug("Phase transition: %s → %s", self._phase.name, target.name)
        self._phase = target

    def can_transition(self, target: GamePhase) -> bool:
        return target in VALID_TRANSITIONS.get(self._phase, set())

    def can_play_card(self) -> bool:
        return self._phase == GamePhase.TURN_ACTIVE

    def end_match(self) -> None:
        """Terminal move, allowed from every phase except ``MATCH_ENDED`` itself."""
        if self._phase == GamePhase.MATCH_ENDED:
            raise InvalidPhaseTransition(self._phase, GamePhase.MATCH_ENDED)
        logger.debug("Phase transition: %s → %s", self._phase.name, GamePhase.MATCH_ENDED.name)
        self._phase = GamePhase.MATCH_ENDED

    @property
    def is_finished(self) -> bool:
        return self._phase == GamePhase.MATCH_ENDED
