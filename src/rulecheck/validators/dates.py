"""Date and time validators.

The first parameter of every date rule is a layout (see
``rulecheck.utils.dates``). Comparison rules take a second parameter that
is either a relative placeholder (``today``, ``-1D``, ...) or a literal
date in the same layout.
"""

import operator
from collections.abc import Callable
from datetime import datetime
from typing import Any

from ..results import Failure
from ..utils.dates import format_date, get_date, parse_date
from .helpers import check_text, param

TIME_LAYOUT = "15:04:05"

COMPARATORS: dict[str, Callable[[datetime, datetime], bool]] = {
    "date_gte": operator.ge,
    "date_lte": operator.le,
    "date_gt": operator.gt,
    "date_lt": operator.lt,
}


def _parses(text: str, layout: str) -> bool:
    try:
        parse_date(text, layout)
    except ValueError:
        return False
    return True


def resolve_boundary(target: str, layout: str) -> datetime | None:
    """Turn a placeholder or literal date into a moment at layout precision."""
    try:
        relative = get_date(target)
    except (ValueError, OverflowError):
        relative = None

    try:
        if relative is not None:
            # Round trip through the layout so both sides share its precision
            return parse_date(format_date(relative, layout), layout)
        return parse_date(target, layout)
    except ValueError:
        return None


def date(value: Any, *params: Any) -> Failure | None:
    """Value must be a date in the given layout."""
    layout = str(param("date", params))
    return check_text("date", value, params, lambda text: _parses(text, layout))


def time(value: Any, *params: Any) -> Failure | None:
    """Value must be a time of day in HH:MM:SS form."""
    return check_text("time", value, (), lambda text: _parses(text, TIME_LAYOUT))


def _compare_dates(rule: str, value: Any, params: tuple) -> Failure | None:
    layout = str(param(rule, params, 0))
    target = str(param(rule, params, 1))
    compare = COMPARATORS[rule]

    def predicate(text: str) -> bool:
        try:
            moment = parse_date(text, layout)
        except ValueError:
            return False
        boundary = resolve_boundary(target, layout)
        return boundary is not None and compare(moment, boundary)

    return check_text(rule, value, params, predicate)


def date_gte(value: Any, *params: Any) -> Failure | None:
    return _compare_dates("date_gte", value, params)


def date_lte(value: Any, *params: Any) -> Failure | None:
    return _compare_dates("date_lte", value, params)


def date_gt(value: Any, *params: Any) -> Failure | None:
    return _compare_dates("date_gt", value, params)


def date_lt(value: Any, *params: Any) -> Failure | None:
    return _compare_dates("date_lt", value, params)
