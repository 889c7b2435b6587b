"""Tests for built-in transforms."""

from decimal import Decimal

import pytest

from rulecheck.actions import clear, lower, trim, upper
from rulecheck.exceptions import WrongTypeError


class TestTextActions:
    """Test trim, lower and upper."""

    def test_trim(self):
        assert trim("  abc \n") == "abc"

    def test_lower(self):
        assert lower("AbC") == "abc"

    def test_upper(self):
        assert upper("AbC") == "ABC"

    @pytest.mark.parametrize("action", [trim, lower, upper])
    def test_non_text_raises(self, action):
        with pytest.raises(WrongTypeError):
            action(5)


class TestClear:
    """Test clear."""

    @pytest.mark.parametrize("value, expected", [
        ("abc", ""),
        (42, 0),
        (-1.5, 0.0),
        (Decimal("9.5"), Decimal(0)),
    ])
    def test_resets_text_and_numbers(self, value, expected):
        assert clear(value) == expected

    @pytest.mark.parametrize("value", [[1, 2], {"a": 1}, None, True])
    def test_leaves_other_values(self, value):
        assert clear(value) is value
