"""Tests for value kinds, size and emptiness."""

from collections import OrderedDict
from decimal import Decimal
from fractions import Fraction

import pytest

from rulecheck.exceptions import WrongTypeError
from rulecheck.metrics import Measured, ValueKind, is_empty, kind_of, measure, size


class TestKindOf:
    """Test kind_of()."""

    @pytest.mark.parametrize("value, kind", [
        ("abc", ValueKind.TEXT),
        ("", ValueKind.TEXT),
        ([1, 2], ValueKind.SEQUENCE),
        ((1,), ValueKind.SEQUENCE),
        ({1, 2}, ValueKind.SEQUENCE),
        (frozenset(), ValueKind.SEQUENCE),
        (b"raw", ValueKind.SEQUENCE),
        (bytearray(b"x"), ValueKind.SEQUENCE),
        ({"a": 1}, ValueKind.MAPPING),
        (OrderedDict(), ValueKind.MAPPING),
        (7, ValueKind.INTEGER),
        (-3, ValueKind.INTEGER),
        (1.5, ValueKind.FLOAT),
        (Decimal("2.5"), ValueKind.FLOAT),
        (Fraction(1, 3), ValueKind.FLOAT),
        (None, ValueKind.NONE),
        (True, ValueKind.OTHER),
        (object(), ValueKind.OTHER),
    ])
    def test_classification(self, value, kind):
        assert kind_of(value) == kind


class TestSize:
    """Test size()."""

    def test_text_counts_characters_not_bytes(self):
        assert size("Привет") == 6
        assert size("호랑이") == 3

    def test_collections_count_elements(self):
        assert size([1, 2, 3]) == 3
        assert size({"a": 1, "b": 2}) == 2
        assert size(()) == 0

    def test_numbers_are_their_own_size(self):
        assert size(-4) == -4
        assert size(2.5) == 2.5
        assert size(Decimal("3")) == Decimal("3")

    @pytest.mark.parametrize("value", [None, True, object()])
    def test_unsupported_kinds_raise(self, value):
        with pytest.raises(WrongTypeError):
            size(value)

    def test_accepts_measured_values(self):
        assert size(measure("abcd")) == 4


class TestIsEmpty:
    """Test is_empty()."""

    @pytest.mark.parametrize("value", ["", [], {}, (), set(), 0, 0.0, Decimal(0), None])
    def test_empty_values(self, value):
        assert is_empty(value)

    @pytest.mark.parametrize("value", [" ", "abc", [0], {"a": None}, 1, -0.5, False, True, object()])
    def test_non_empty_values(self, value):
        assert not is_empty(value)


class TestMeasure:
    """Test measure()."""

    def test_wraps_value_with_kind(self):
        measured = measure("abc")

        assert measured == Measured("abc", ValueKind.TEXT)
        assert measured.is_text
        assert measured.is_sized
        assert not measured.is_numeric

    def test_is_idempotent(self):
        measured = measure(5)

        assert measure(measured) is measured
