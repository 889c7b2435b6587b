"""Shared plumbing for the built-in validators.

Every built-in accepts either a ``Measured`` value or a raw one and
rejects kinds it does not support with ``WrongTypeError``.
"""

import re
from collections.abc import Callable, Collection, Sequence
from functools import lru_cache
from typing import Any

from ..exceptions import RuleParameterError, WrongTypeError
from ..messages import error_message
from ..metrics import Measured, ValueKind, measure
from ..results import Failure


def expect(value: Any, rule: str, *kinds: ValueKind) -> Measured:
    """Measure the value and make sure its kind is one of ``kinds``."""
    measured = measure(value)
    if measured.kind not in kinds:
        raise WrongTypeError(measured.raw, rule)
    return measured


def expect_text(value: Any, rule: str) -> str:
    return expect(value, rule, ValueKind.TEXT).raw


def param(rule: str, params: Sequence[Any], index: int = 0) -> Any:
    """Return one positional parameter of a clause."""
    if len(params) <= index:
        raise RuleParameterError(rule, f"expected at least {index + 1} parameter(s)", tuple(params))
    return params[index]


def number_param(rule: str, params: Sequence[Any], index: int = 0) -> float:
    """Return a clause parameter as a number."""
    raw = param(rule, params, index)
    try:
        return float(str(raw))
    except ValueError:
        raise RuleParameterError(rule, f"parameter {raw!r} is not a number", tuple(params)) from None


@lru_cache(maxsize=256)
def compile_pattern(pattern: str, flags: int = 0) -> re.Pattern:
    return re.compile(pattern, flags)


def check_text(rule: str, value: Any, params: Sequence[Any], predicate: Callable[[str], bool]) -> Failure | None:
    """Run a predicate over a text value."""
    if not predicate(expect_text(value, rule)):
        return error_message(rule, *params)
    return None


def check_pattern(rule: str, value: Any, pattern: re.Pattern, params: Sequence[Any] = ()) -> Failure | None:
    """Require the whole text value to match a pattern."""
    return check_text(rule, value, params, lambda text: pattern.fullmatch(text) is not None)


def check_code(rule: str, value: Any, length: int, codes: Collection[str]) -> Failure | None:
    """Require an exact length and membership in a reference table."""
    text = expect_text(value, rule)
    if len(text) != length or text not in codes:
        return error_message(rule)
    return None
