"""Lightweight i18n layer, no external dependencies.

Usage::

    from i18n import t, set_locale

    set_locale("fr_FR")
    print(t("exc.illegal_play"))

    # domain helpers
    from i18n import suit_name, rank_name
    print(suit_name("hearts"))   # -> "Hearts" / "Cœur"
    print(rank_name("jack"))     # -> "Jack" / "Valet"
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

_DEFAULT_LOCALE = "en_US"

_locale: str = _DEFAULT_LOCALE
_tables: dict[str, dict[str, str]] = {}


def _load_table(locale: str) -> dict[str, str]:
    """Load a translation table on demand."""
    if locale == "en_US":
        from .en_US import STRINGS
    elif locale == "fr_FR":
        from .fr_FR import STRINGS
    else:
        raise ValueError(f"Unsupported locale: {locale}")
    return STRINGS


def set_locale(locale: str) -> None:
    """Switch the current locale."""
    global _locale
    # preload so an invalid locale fails here and not on first lookup
    if locale not in _tables:
        _tables[locale] = _load_table(locale)
    _locale = locale


def get_locale() -> str:
    return _locale


def get_available_locales() -> list[str]:
    return ["en_US", "fr_FR"]


def t(key: str, **kwargs: object) -> str:
    """Translate ``key`` in the current locale.

    Missing keys fall back to en_US; if still missing the bracketed key is
    returned so the gap is visible instead of raising.

    Args:
        key: translation key such as ``"exc.illegal_play"``.
        **kwargs: ``str.format`` parameters.
    """
    if _locale not in _tables:
        _tables[_locale] = _load_table(_locale)

    template = _tables[_locale].get(key)

    if template is None and _locale != _DEFAULT_LOCALE:
        if _DEFAULT_LOCALE not in _tables:
            _tables[_DEFAULT_LOCALE] = _load_table(_DEFAULT_LOCALE)
        template = _tables[_DEFAULT_LOCALE].get(key)
        if template is not None:
            logger.debug("i18n fallback: '%s' not in %s, using %s", key, _locale, _DEFAULT_LOCALE)

    if template is None:
        logger.warning("i18n missing key: '%s' (lang=%s)", key, _locale)
        return f"[{key}]"

    if kwargs:
        try:
            return template.format_map(kwargs)
        except KeyError as e:
            logger.warning("i18n format error: key='%s', missing=%s", key, e)
            return template
    return template


_ = t


# ── domain helpers ──


def _is_missing(key: str, result: str) -> bool:
    return result == f"[{key}]"


def suit_name(value: str) -> str:
    """Localized suit name; ``value`` is the ``Suit`` enum value, e.g. ``"hearts"``."""
    key = f"suit.{value}"
    result = t(key)
    return result if not _is_missing(key, result) else value


def rank_name(value: str) -> str:
    """Localized rank name; ``value`` is the lowercase ``Rank`` member name."""
    key = f"rank.{value}"
    result = t(key)
    return result if not _is_missing(key, result) else value


def team_name(value: str) -> str:
    key = f"team.{value}"
    result = t(key)
    return result if not _is_missing(key, result) else value


def seat_name(value: str) -> str:
    key = f"seat.{value}"
    result = t(key)
    return result if not _is_missing(key, result) else value
