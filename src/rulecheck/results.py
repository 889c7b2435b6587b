"""Failure descriptions and their list/map containers."""

import json
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Failure:
    """A single validation failure produced by one rule."""
    rule: str
    message: str
    params: tuple[Any, ...] = field(default_factory=tuple)

    def __str__(self) -> str:
        return self.message


class ErrorList(list):
    """Ordered failures for one value. Empty means the value passed."""

    def empty(self) -> bool:
        """Check that no failure was recorded."""
        return len(self) == 0

    def messages(self) -> list[str]:
        return [str(failure) for failure in self]

    def to_json(self) -> str:
        """Return the failures as a JSON array of message strings."""
        return json.dumps(self.messages(), ensure_ascii=False, separators=(",", ":"))


class ErrorMap(dict):
    """Failures per record field. Only fields that failed are stored."""

    def empty(self) -> bool:
        """Check that every stored list is empty."""
        return all(errors.empty() for errors in self.values())

    def to_dict(self) -> dict[str, list[str]]:
        return {name: errors.messages() for name, errors in self.items()}

    def to_json(self) -> str:
        """Return the failures as a JSON object of field → message array."""
        return json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":"))
