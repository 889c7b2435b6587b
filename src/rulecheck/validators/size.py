"""Size, range and membership validators.

Sizes come from ``rulecheck.metrics``: text and collections compare by
length, numbers by value.
"""

import numbers
import operator
from collections.abc import Callable
from typing import Any

from ..messages import error_message
from ..metrics import ValueKind, is_empty, size
from ..results import Failure
from .helpers import expect, number_param

SIZED = (ValueKind.TEXT, ValueKind.SEQUENCE, ValueKind.MAPPING)
NUMERIC = (ValueKind.INTEGER, ValueKind.FLOAT)


def _compare_size(rule: str, compare: Callable[[Any, float], bool], value: Any, params: tuple) -> Failure | None:
    measured = expect(value, rule, *SIZED, *NUMERIC)
    limit = number_param(rule, params)
    if not compare(size(measured), limit):
        return error_message(rule, *params)
    return None


def empty(value: Any, *params: Any) -> Failure | None:
    """Value must be empty: zero length, zero or None."""
    if not is_empty(value):
        return error_message("empty")
    return None


def min_size(value: Any, *params: Any) -> Failure | None:
    return _compare_size("min", operator.ge, value, params)


def max_size(value: Any, *params: Any) -> Failure | None:
    return _compare_size("max", operator.le, value, params)


def greater_than(value: Any, *params: Any) -> Failure | None:
    return _compare_size("gt", operator.gt, value, params)


def less_than(value: Any, *params: Any) -> Failure | None:
    return _compare_size("lt", operator.lt, value, params)


def length(value: Any, *params: Any) -> Failure | None:
    """Text or collection must have exactly the given length."""
    measured = expect(value, "len", *SIZED)
    if len(measured.raw) != number_param("len", params):
        return error_message("len", *params)
    return None


def _as_float(item: Any) -> float | None:
    try:
        return float(str(item))
    except ValueError:
        return None


def _same_number(number: Any, item: Any) -> bool:
    text = str(item)
    if isinstance(number, numbers.Integral):
        # Integers compare exactly; they may lie beyond float range
        try:
            return number == int(text)
        except ValueError:
            pass
    parsed = _as_float(text)
    if parsed is None:
        return False
    try:
        return float(number) == parsed
    except OverflowError:
        return False


def _contained(rule: str, value: Any, params: tuple) -> bool:
    measured = expect(value, rule, ValueKind.TEXT, *NUMERIC)
    if measured.is_text:
        return any(measured.raw == str(item) for item in params)
    return any(_same_number(measured.raw, item) for item in params)


def in_list(value: Any, *params: Any) -> Failure | None:
    """Value must equal one of the params.

    Text compares as exact strings, numbers compare as floats.
    """
    if not _contained("in", value, params):
        return error_message("in", *params)
    return None


def not_in_list(value: Any, *params: Any) -> Failure | None:
    if _contained("not_in", value, params):
        return error_message("not_in", *params)
    return None
