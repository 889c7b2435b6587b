"""Built-in value transforms applied before validation."""

from decimal import Decimal
from typing import Any

from .exceptions import WrongTypeError
from .metrics import ValueKind, kind_of


def _text(value: Any, rule: str) -> str:
    if not isinstance(value, str):
        raise WrongTypeError(value, rule)
    return value


def trim(value: Any) -> str:
    """Strip leading and trailing whitespace."""
    return _text(value, "trim").strip()


def lower(value: Any) -> str:
    return _text(value, "lower").lower()


def upper(value: Any) -> str:
    return _text(value, "upper").upper()


def clear(value: Any) -> Any:
    """Reset text to ``""`` and numbers to zero; leave other values alone."""
    kind = kind_of(value)
    if kind == ValueKind.TEXT:
        return ""
    if kind == ValueKind.INTEGER:
        return 0
    if kind == ValueKind.FLOAT:
        return Decimal(0) if isinstance(value, Decimal) else 0.0
    return value


DEFAULT_ACTIONS = {
    "trim": trim,
    "lower": lower,
    "upper": upper,
    "clear": clear,
}
