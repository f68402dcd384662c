"""Unit tests for free-text point entry."""

import pytest

from pytensile.core.samples import Sample
from pytensile.parsing.entry import parse_number, parse_sample


class TestParseNumber:
    @pytest.mark.parametrize("text,expected", [
        ("200", 200.0), (" 0.002 ", 0.002), ("-15.5", -15.5), ("1e3", 1000.0)
    ])
    def test_valid_numbers(self, text, expected):
        assert parse_number(text) == expected

    @pytest.mark.parametrize("text", [None, "", "   ", "abc", "12abc", "nan", "inf", "-Infinity"])
    def test_rejected_text(self, text):
        assert parse_number(text) is None


class TestParseSample:
    def test_stress_then_strain(self):
        assert parse_sample("450", "0.01") == Sample(strain=0.01, stress=450.0)

    def test_missing_field_rejected(self):
        assert parse_sample("450", "") is None
        assert parse_sample("", "0.01") is None

    def test_rejection_logs_warning(self, caplog):
        with caplog.at_level("WARNING", logger="pytensile.parsing.entry"):
            assert parse_sample("x", "0.01") is None
        assert "Point not added" in caplog.text
