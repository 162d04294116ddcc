"""Tests for the i18n module."""

import pytest

import i18n as i18n_mod
from belote.card import Card
from i18n import (
    get_available_locales,
    get_locale,
    rank_name,
    seat_name,
    set_locale,
    suit_name,
    t,
    team_name,
)


@pytest.fixture(autouse=True)
def _reset_locale():
    """Reset locale to en_US after each test."""
    yield
    set_locale("en_US")


class TestSetLocale:
    def test_default_locale(self):
        assert get_locale() == "en_US"

    def test_switch_to_fr(self):
        set_locale("fr_FR")
        assert get_locale() == "fr_FR"

    def test_invalid_locale(self):
        with pytest.raises(ValueError, match="Unsupported locale"):
            set_locale("ja_JP")
        assert get_locale() == "en_US"

    def test_available_locales(self):
        assert get_available_locales() == ["en_US", "fr_FR"]


class TestTranslation:
    def test_basic_key(self):
        assert t("exc.empty_trick") == "Cannot resolve an empty trick"

    def test_format(self):
        msg = t("exc.insufficient_cards", required=8, available=3)
        assert msg == "Not enough cards: 8 required, 3 available"

    def test_missing_key(self):
        assert t("no.such.key") == "[no.such.key]"

    def test_missing_format_arg_returns_template(self):
        assert t("exc.no_legal_moves", other=1) == "{seat} has no legal card to play"

    def test_fallback_to_default_locale(self, monkeypatch):
        set_locale("fr_FR")
        monkeypatch.setitem(i18n_mod._tables, "fr_FR", {})
        assert t("exc.empty_trick") == "Cannot resolve an empty trick"

    def test_underscore_alias(self):
        assert i18n_mod._ is t

    def test_locales_share_keys(self):
        from i18n.en_US import STRINGS as EN
        from i18n.fr_FR import STRINGS as FR
        assert set(EN) == set(FR)


class TestDomainHelpers:
    def test_names_en(self):
        assert suit_name("hearts") == "Hearts"
        assert rank_name("jack") == "Jack"
        assert team_name("team1") == "North-South"
        assert seat_name("east") == "East"

    def test_names_fr(self):
        set_locale("fr_FR")
        assert suit_name("hearts") == "Cœur"
        assert rank_name("jack") == "Valet"
        assert team_name("team1") == "Nord-Sud"

    def test_unknown_value_passes_through(self):
        assert suit_name("stars") == "stars"

    def test_card_display_name(self):
        card = Card.from_string("JH")
        assert card.display_name() == "Jack of Hearts"
        set_locale("fr_FR")
        assert card.display_name() == "Valet de Cœur"
