"""Validation of single values and whole records."""

from .engine import by, prepare_rules, run_plan, transform, validate_value
from .record import (
    DEFAULT_TAG,
    FieldDescriptor,
    combine_tags,
    get_default_tag,
    inspect_record,
    set_default_tag,
    validate_record,
)

__all__ = [
    "validate_value",
    "validate_record",
    "prepare_rules",
    "run_plan",
    "by",
    "transform",
    "inspect_record",
    "combine_tags",
    "FieldDescriptor",
    "DEFAULT_TAG",
    "set_default_tag",
    "get_default_tag",
]
