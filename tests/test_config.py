"""Tests for configuration helpers."""

import logging

from zebra_browser_print.config import normalize_url, parse_timeout


class TestParseTimeout:
    """Test ZEBRA_BROWSER_PRINT_TIMEOUT parsing."""

    def test_unset(self):
        assert parse_timeout(None) is None
        assert parse_timeout("") is None

    def test_numeric(self):
        assert parse_timeout("2.5") == 2.5
        assert parse_timeout("10") == 10.0

    def test_non_numeric_falls_back_to_none(self, caplog):
        with caplog.at_level(logging.WARNING, logger="zebra_browser_print.config"):
            assert parse_timeout("abc") is None
        assert "non-numeric" in caplog.text


class TestNormalizeUrl:
    """Test base address normalization."""

    def test_appends_separator(self):
        assert normalize_url("http://x") == "http://x/"

    def test_keeps_single_separator(self):
        assert normalize_url("http://x/") == "http://x/"
