"""Tests for size formatting."""

import pytest

from treemirror import bytes_to_mb, thousand_separator


class TestThousandSeparator:
    @pytest.mark.parametrize("digits,expected", [
        ("0", "0"),
        ("100", "100"),
        ("1000", "1 000"),
        ("123456", "123 456"),
        ("1234567", "1 234 567"),
        ("10000000000", "10 000 000 000"),
    ])
    def test_grouping(self, digits, expected):
        assert thousand_separator(digits) == expected

    def test_custom_separator(self):
        assert thousand_separator("10000000000", "'") == "10'000'000'000"


class TestBytesToMB:
    def test_below_one_mb(self):
        assert bytes_to_mb(999_999) == "0"

    def test_truncates(self):
        assert bytes_to_mb(1_999_999) == "1"

    def test_grouped(self):
        assert bytes_to_mb(1_234_000_000_000) == "1 234 000"
