"""Tests for mapping key validators."""

import pytest

from rulecheck.exceptions import WrongTypeError
from rulecheck.validators.structure import has_keys, has_only_keys


class TestHasKeys:
    """Test has_keys."""

    def test_subset_passes(self):
        assert has_keys({"a": 1, "b": 2}, "a") is None
        assert has_keys({"a": 1, "b": 2}, "a", "b") is None

    def test_missing_key_fails(self):
        failure = has_keys({"a": 1}, "a", "b")

        assert failure.rule == "has_keys"
        assert failure.message == "must have keys a"

    def test_only_string_keys_count(self):
        assert has_keys({1: "x", "a": 2}, "a") is None
        assert has_keys({1: "x"}, "1") is not None

    def test_no_params_passes(self):
        assert has_keys({"a": 1}) is None

    def test_non_mapping_raises(self):
        with pytest.raises(WrongTypeError):
            has_keys(["a"], "a")


class TestHasOnlyKeys:
    """Test has_only_keys."""

    def test_exact_keys_pass(self):
        assert has_only_keys({"a": 1, "b": 2}, "b", "a") is None

    def test_extra_key_fails(self):
        assert has_only_keys({"a": 1, "b": 2}, "a") is not None

    def test_missing_key_fails(self):
        assert has_only_keys({"a": 1}, "a", "b") is not None

    def test_same_size_different_keys_fail(self):
        assert has_only_keys({"a": 1, "c": 2}, "a", "b") is not None
