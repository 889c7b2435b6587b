"""Key validators for mappings. Only string keys are considered."""

from typing import Any

from ..messages import error_message
from ..metrics import ValueKind
from ..results import Failure
from .helpers import expect


def _has_keys(mapping: Any, params: tuple) -> bool:
    if len(mapping) < len(params):
        return False
    keys = {key for key in mapping if isinstance(key, str)}
    return all(str(name) in keys for name in params)


def has_keys(value: Any, *params: Any) -> Failure | None:
    """Mapping must contain every key named in params, possibly more."""
    mapping = expect(value, "has_keys", ValueKind.MAPPING).raw
    if not _has_keys(mapping, params):
        return error_message("has_keys", *params)
    return None


def has_only_keys(value: Any, *params: Any) -> Failure | None:
    """Mapping keys must be exactly the keys named in params."""
    mapping = expect(value, "has_only_keys", ValueKind.MAPPING).raw
    if len(mapping) != len(params) or not _has_keys(mapping, params):
        return error_message("has_only_keys", *params)
    return None
