"""Uniform size and emptiness for heterogeneous values.

Every value is classified into one of a small, closed set of kinds.
Size and emptiness are defined per kind; asking for the size of a kind
outside the table is a hard error.
"""

import numbers
from collections.abc import Mapping, Sequence, Set
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

from .exceptions import WrongTypeError


class ValueKind(str, Enum):
    """Value categories understood by the built-in validators."""
    TEXT = "text"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    INTEGER = "integer"
    FLOAT = "float"
    NONE = "none"
    OTHER = "other"


SIZED_KINDS = frozenset({ValueKind.TEXT, ValueKind.SEQUENCE, ValueKind.MAPPING})
NUMERIC_KINDS = frozenset({ValueKind.INTEGER, ValueKind.FLOAT})


def kind_of(value: Any) -> ValueKind:
    """Classify a value into its ValueKind."""
    if value is None:
        return ValueKind.NONE
    if isinstance(value, str):
        return ValueKind.TEXT
    # bool is an int subclass but has no magnitude of its own
    if isinstance(value, bool):
        return ValueKind.OTHER
    if isinstance(value, numbers.Integral):
        return ValueKind.INTEGER
    if isinstance(value, (numbers.Real, Decimal)):
        return ValueKind.FLOAT
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, (Sequence, Set, bytes, bytearray)):
        return ValueKind.SEQUENCE
    return ValueKind.OTHER


@dataclass(frozen=True)
class Measured:
    """A value paired with its kind.

    This is the normalized representation handed to built-in validators.
    """
    raw: Any
    kind: ValueKind

    @property
    def is_text(self) -> bool:
        return self.kind == ValueKind.TEXT

    @property
    def is_numeric(self) -> bool:
        return self.kind in NUMERIC_KINDS

    @property
    def is_sized(self) -> bool:
        return self.kind in SIZED_KINDS


def measure(value: Any) -> Measured:
    """Wrap a value in its normalized representation (idempotent)."""
    if isinstance(value, Measured):
        return value
    return Measured(value, kind_of(value))


def size(value: Any) -> int | float | Decimal:
    """Return the length of text and collections, or the number itself.

    Text length counts characters, not encoded bytes.

    Raises:
        WrongTypeError: for None, bool and any kind outside the table
    """
    measured = measure(value)
    if measured.is_sized:
        return len(measured.raw)
    if measured.is_numeric:
        return measured.raw
    raise WrongTypeError(measured.raw)


def is_empty(value: Any) -> bool:
    """Return True when the value counts as empty.

    Text and collections are empty at zero length, numbers at zero and
    None always. Any other kind is never empty.
    """
    measured = measure(value)
    if measured.kind == ValueKind.NONE:
        return True
    if measured.is_sized:
        return len(measured.raw) == 0
    if measured.is_numeric:
        return measured.raw == 0
    return False
