"""Filesystem probes. These block the caller while the OS answers."""

from pathlib import Path
from typing import Any

from ..results import Failure
from .helpers import check_text


def _exists(text: str) -> bool:
    if text == "":
        return False
    try:
        return Path(text).exists()
    except (OSError, ValueError):
        # Overlong names and embedded NUL bytes cannot name an existing path
        return False


def file_exists(value: Any, *params: Any) -> Failure | None:
    return check_text("file_exists", value, (), _exists)
