"""Tests for locale_utils.py: normalization and Babel display names.

Python 3.13+.
"""

from __future__ import annotations

import logging

import pytest
from babel.core import UnknownLocaleError

from localegen.locale_utils import describe_locale, get_babel_locale, normalize_locale


class TestNormalizeLocale:
    @pytest.mark.parametrize(
        ("code", "expected"),
        [("en-US", "en_US"), (" pt-BR ", "pt_BR"), ("en", "en"), ("de_AT", "de_AT")],
    )
    def test_normalize(self, code: str, expected: str) -> None:
        assert normalize_locale(code) == expected


class TestGetBabelLocale:
    def test_parses_bcp47(self) -> None:
        locale = get_babel_locale("pt-BR")
        assert locale.language == "pt"
        assert locale.territory == "BR"

    def test_cached(self) -> None:
        assert get_babel_locale("fr") is get_babel_locale("fr")

    def test_unknown(self) -> None:
        with pytest.raises(UnknownLocaleError):
            get_babel_locale("xx")


class TestDescribeLocale:
    def test_known_locale(self) -> None:
        assert describe_locale("pt-BR") == "Portuguese (Brazil)"
        assert describe_locale("de") == "German"

    def test_display_locale(self) -> None:
        assert describe_locale("de", display_locale="de") == "Deutsch"

    def test_unknown_locale_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="localegen.locale_utils"):
            assert describe_locale("xx-unknown") is None
        assert "xx-unknown" in caplog.text
