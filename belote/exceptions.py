"""Engine exceptions.

Recoverable player errors (``IllegalPlayError``) are separated from invariant
violations (``CardNotFoundError``, ``EmptyTrickError``, ``NoLegalMovesError``,
``InsufficientCardsError``); the latter indicate a bug in the engine and must
never be swallowed.
"""

from __future__ import annotations

from typing import Any

from i18n import t as _t


class GameError(Exception):
    """Base class of every engine error.

    Carries a human readable message plus a ``details`` dict so hosts can
    log or display structured context.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """
        Args:
            message: error message
            details: optional extra context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# ==================== Play errors ====================


class IllegalPlayError(GameError):
    """A card was offered that the acting player may not play now.

    Raised before any state is touched; the caller can reject the gesture
    and carry on.
    """

    NOT_YOUR_TURN = "not_your_turn"
    NOT_LEGAL = "not_legal"
    PLAY_PENDING = "play_pending"

    def __init__(
        self,
        message: str | None = None,
        reason: str | None = None,
        card: str | None = None,
        seat: str | None = None,
    ):
        if message is None:
            if reason is not None:
                message = _t(f"exc.illegal_play.{reason}", card=card, seat=seat)
            else:
                message = _t("exc.illegal_play")
        details = {}
        if reason:
            details["reason"] = reason
        if card:
            details["card"] = card
        if seat:
            details["seat"] = seat
        super().__init__(message, details)
        self.reason = reason
        self.card = card
        self.seat = seat


# ==================== Card / invariant errors ====================


class InsufficientCardsError(GameError):
    """A deck was asked for more cards than it holds."""

    def __init__(
        self,
        message: str | None = None,
        required: int = 0,
        available: int = 0,
    ):
        if message is None:
            message = _t("exc.insufficient_cards", required=required, available=available)
        details = {
            "required": required,
            "available": available,
        }
        super().__init__(message, details)
        self.required = required
        self.available = available


class CardNotFoundError(GameError):
    """A card was moved out of a deck that does not hold it."""

    def __init__(
        self,
        message: str | None = None,
        card: str | None = None,
        owner: str | None = None,
    ):
        if message is None:
            message = _t("exc.card_not_found", card=card, owner=owner)
        details = {}
        if card:
            details["card"] = card
        if owner:
            details["owner"] = owner
        super().__init__(message, details)
        self.card = card
        self.owner = owner


class EmptyTrickError(GameError):
    """Resolution was requested on a trick with no card."""

    def __init__(self, message: str | None = None):
        if message is None:
            message = _t("exc.empty_trick")
        super().__init__(message)


class NoLegalMovesError(GameError):
    """A turn was opened for a player with nothing to play.

    Unreachable when the round-end check runs correctly.
    """

    def __init__(self, message: str | None = None, seat: str | None = None):
        if message is None:
            message = _t("exc.no_legal_moves", seat=seat)
        details = {}
        if seat:
            details["seat"] = seat
        super().__init__(message, details)
        self.seat = seat


# ==================== Game state errors ====================


class GameStateError(GameError):
    """The engine is in a state that does not allow the operation."""

    def __init__(
        self,
        message: str | None = None,
        current_state: str | None = None,
        expected_state: str | None = None,
    ):
        if message is None:
            message = _t("exc.game_state")
        details = {}
        if current_state:
            details["current_state"] = current_state
        if expected_state:
            details["expected_state"] = expected_state
        super().__init__(message, details)
        self.current_state = current_state
        self.expected_state = expected_state


class InvalidPhaseError(GameStateError):
    """Operation attempted in the wrong engine phase."""

    def __init__(
        self,
        message: str | None = None,
        current_phase: str | None = None,
        expected_phase: str | None = None,
    ):
        if message is None:
            message = _t("exc.invalid_phase")
        super().__init__(message, current_phase, expected_phase)
        self.current_phase = current_phase
        self.expected_phase = expected_phase


# ==================== Configuration errors ====================


class ConfigurationError(GameError):
    """The configuration cannot be played, e.g. the dealing plan exceeds the stock.

    Fatal for the round being started; surfaced to the host.
    """

    def __init__(self, message: str | None = None, config_key: str | None = None):
        if message is None:
            message = _t("exc.config_error")
        details = {}
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, details)
        self.config_key = config_key
