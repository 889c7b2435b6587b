"""Validation of every field of a structured record.

Records are dataclass or pydantic model instances. Each field's rule
specification is read from its tags: dataclass ``field(metadata=...)``
or pydantic ``Field(json_schema_extra=...)``.

    @dataclass
    class Signup:
        email: str = field(metadata={"valid": "required|email"})
        age: int = field(default=0, metadata={"valid": "min:18"})

    errors = validate_record(Signup(email="nope"))
"""

import dataclasses
import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from ..exceptions import RecordTypeError
from ..results import ErrorMap
from ..rules.parser import RULE_SEPARATOR
from .engine import validate_value

logger = logging.getLogger(__name__)

DEFAULT_TAG = "valid"

_default_tag = DEFAULT_TAG


def set_default_tag(name: str) -> None:
    """Change the tag read when no tag names are given. Not thread safe."""
    global _default_tag
    _default_tag = name


def get_default_tag() -> str:
    return _default_tag


@dataclass(frozen=True)
class FieldDescriptor:
    """One record field with its value and combined rule specification."""
    name: str
    value: Any
    rule_spec: str


def _dataclass_fields(record: Any) -> Iterator[tuple[str, Any, Mapping[str, Any]]]:
    for item in dataclasses.fields(record):
        yield item.name, getattr(record, item.name), item.metadata


def _model_fields(record: BaseModel) -> Iterator[tuple[str, Any, Mapping[str, Any]]]:
    for name, info in type(record).model_fields.items():
        extra = info.json_schema_extra if isinstance(info.json_schema_extra, Mapping) else {}
        yield name, getattr(record, name), extra


def _record_fields(record: Any) -> Iterator[tuple[str, Any, Mapping[str, Any]]]:
    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        return _dataclass_fields(record)
    if isinstance(record, BaseModel):
        return _model_fields(record)
    raise RecordTypeError(record)


def combine_tags(tags: Mapping[str, Any], names: tuple[str, ...]) -> str:
    """Join the non-empty values of the named tags with ``|``, in order."""
    values = [str(tags.get(name) or "") for name in names]
    return RULE_SEPARATOR.join(value for value in values if value)


def inspect_record(record: Any, *tags: str) -> list[FieldDescriptor]:
    """List the record's fields with their rule specifications.

    Raises:
        RecordTypeError: if record is not a dataclass or pydantic model instance
    """
    names = tags or (_default_tag,)
    return [
        FieldDescriptor(name, value, combine_tags(field_tags, names))
        for name, value, field_tags in _record_fields(record)
    ]


def validate_record(record: Any, *tags: str) -> ErrorMap:
    """Validate every field; only fields with failures appear in the result."""
    errors = ErrorMap()
    fields = inspect_record(record, *tags)

    for descriptor in fields:
        field_errors = validate_value(descriptor.value, descriptor.rule_spec)
        if not field_errors.empty():
            errors[descriptor.name] = field_errors

    logger.debug(f"Validated {len(fields)} fields of {type(record).__name__}: {len(errors)} failed")
    return errors
