"""Tests for size, range and membership validators."""

import pytest

from rulecheck.exceptions import RuleParameterError, WrongTypeError
from rulecheck.metrics import measure
from rulecheck.validators.size import (
    empty,
    greater_than,
    in_list,
    length,
    less_than,
    max_size,
    min_size,
    not_in_list,
)


class TestEmpty:
    """Test the empty validator."""

    @pytest.mark.parametrize("value", ["", [], {}, 0, None])
    def test_passes(self, value):
        assert empty(value) is None

    def test_fails(self):
        failure = empty("x")

        assert failure.rule == "empty"
        assert failure.message == "must be empty"


class TestMinMax:
    """Test min and max."""

    def test_min_on_text_length(self):
        assert min_size("abc", "3") is None
        assert min_size("ab", "3").message == "must be greater or equal of 3"

    def test_min_counts_characters(self):
        assert min_size("Привет", "6") is None

    def test_min_on_numbers(self):
        assert min_size(10, "10") is None
        assert min_size(9.5, "10") is not None

    def test_max_on_collections(self):
        assert max_size([1, 2], "2") is None
        assert max_size({"a": 1, "b": 2, "c": 3}, "2").message == "must be lower or equal of 2"

    def test_accepts_measured_values(self):
        assert min_size(measure("abc"), "3") is None

    def test_rejects_none(self):
        with pytest.raises(WrongTypeError):
            min_size(None, "1")

    def test_rejects_bool(self):
        with pytest.raises(WrongTypeError):
            max_size(True, "1")

    def test_non_numeric_param(self):
        with pytest.raises(RuleParameterError):
            min_size("abc", "three")

    def test_missing_param(self):
        with pytest.raises(RuleParameterError):
            max_size("abc")


class TestStrictComparisons:
    """Test gt and lt."""

    def test_gt(self):
        assert greater_than(5, "4") is None
        assert greater_than(4, "4").message == "must be greater than 4"

    def test_lt(self):
        assert less_than("abc", "4") is None
        assert less_than("abcd", "4") is not None

    def test_negative_limits(self):
        assert greater_than(-1, "-2") is None


class TestLength:
    """Test len."""

    def test_exact_length(self):
        assert length("abc", "3") is None
        assert length(("a", "b"), "2") is None
        assert length("ab", "3").message == "must have length 3"

    def test_numbers_have_no_length(self):
        with pytest.raises(WrongTypeError):
            length(3, "3")


class TestMembership:
    """Test in and not_in."""

    def test_text_compares_strings(self):
        assert in_list("b", "a", "b") is None
        assert in_list("B", "a", "b") is not None

    def test_numbers_compare_as_floats(self):
        assert in_list(2, "1", "2.0") is None
        assert in_list(2.5, "2.5") is None

    def test_unparseable_params_are_skipped(self):
        assert in_list(3, "x", "4") is not None
        assert in_list(4, "x", "4") is None

    def test_message_lists_first_param(self):
        assert in_list("c", "a", "b").message == "must be in a"

    def test_not_in(self):
        assert not_in_list("c", "a", "b") is None
        assert not_in_list("a", "a", "b").rule == "not_in"

    def test_integers_beyond_float_range(self):
        big = 10 ** 400

        assert in_list(big, "1", "2") is not None
        assert in_list(big, "x", str(big)) is None
        assert not_in_list(big, "1", "1e400") is None

    def test_integer_matches_float_text(self):
        assert in_list(3, "3.0") is None

    def test_rejects_collections(self):
        with pytest.raises(WrongTypeError):
            in_list(["a"], "a")
