"""Tests for CLDR ordinal categories and ordinal suffixes."""

from __future__ import annotations

import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ldmlformat.runtime.ordinal_rules import ordinal_suffix, select_ordinal_category
from tests.helpers.stub_localizer import english_suffix


class TestSelectOrdinalCategory:
    """Test select_ordinal_category()."""

    @pytest.mark.parametrize(
        ("n", "category"),
        [(1, "one"), (2, "two"), (3, "few"), (4, "other"), (11, "other"), (12, "other"),
         (13, "other"), (21, "one"), (22, "two"), (23, "few"), (101, "one"), (111, "other")],
    )
    def test_english(self, n: int, category: str) -> None:
        """English ordinal categories, including the teens."""
        assert select_ordinal_category(n, "en_US") == category

    def test_bcp47_codes_accepted(self) -> None:
        """Hyphenated locale codes work."""
        assert select_ordinal_category(2, "en-GB") == "two"

    def test_unknown_locale_is_other(self) -> None:
        """Unparseable locales put every number in "other"."""
        assert select_ordinal_category(1, "xx_INVALID") == "other"


class TestOrdinalSuffix:
    """Test ordinal_suffix()."""

    @pytest.mark.parametrize(
        ("n", "suffix"),
        [(1, "st"), (2, "nd"), (3, "rd"), (4, "th"), (11, "th"), (12, "th"), (13, "th"),
         (21, "st"), (22, "nd"), (23, "rd"), (31, "st"), (94, "th"), (0, "th")],
    )
    def test_english(self, n: int, suffix: str) -> None:
        """English suffixes for 0-31 and beyond."""
        assert ordinal_suffix(n, "en-US") == suffix

    @given(n=st.integers(min_value=0, max_value=10_000))
    def test_english_matches_reference_rule(self, n: int) -> None:
        """CLDR categories reproduce the familiar st/nd/rd/th rule."""
        assert ordinal_suffix(n, "en_US") == english_suffix(n)

    @pytest.mark.parametrize(
        ("locale", "n", "suffix"),
        [
            ("fr_FR", 1, "er"),
            ("fr_FR", 2, "e"),
            ("de_DE", 3, "."),
            ("lv_LV", 4, "."),
            ("es_ES", 5, "º"),
            ("it_IT", 8, "º"),
            ("nl_NL", 6, "e"),
            ("sv_SE", 1, ":a"),
            ("sv_SE", 2, ":a"),
            ("sv_SE", 3, ":e"),
            ("sv_SE", 11, ":e"),
        ],
    )
    def test_other_languages(self, locale: str, n: int, suffix: str) -> None:
        """Languages with known numeric ordinal suffixes."""
        assert ordinal_suffix(n, locale) == suffix

    def test_missing_language_returns_none(self, caplog: pytest.LogCaptureFixture) -> None:
        """Languages without suffix data return None and log at debug level."""
        with caplog.at_level(logging.DEBUG, logger="ldmlformat.runtime.ordinal_rules"):
            assert ordinal_suffix(4, "ja_JP") is None
        assert "No ordinal suffix" in caplog.text
