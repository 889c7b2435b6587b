"""Format validators over text values.

Pattern validators match the whole text, never a substring.
"""

import json
import re
from typing import Any
from urllib.parse import urlsplit

from ..exceptions import RuleParameterError
from ..results import Failure
from .helpers import check_pattern, check_text, compile_pattern, param

ALPHA_PATTERN = re.compile(r"[a-zA-Z]+")
ALPHA_NUMERIC_PATTERN = re.compile(r"[a-zA-Z0-9]+")
ALPHA_UNDER_PATTERN = re.compile(r"[a-zA-Z_]+")
ALPHA_DASH_PATTERN = re.compile(r"[a-zA-Z-]+")
INT_PATTERN = re.compile(r"[-+]?[0-9]+")
FLOAT_PATTERN = re.compile(r"[0-9]+\.[0-9]+")
EMAIL_PATTERN = re.compile(
    r"(?:[a-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[a-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r'|"(?:[\x01-\x08\x0b\x0c\x0e-\x1f\x21\x23-\x5b\x5d-\x7f]|\\[\x01-\x09\x0b\x0c\x0e-\x7f])*")'
    r"@(?:(?:[a-z0-9](?:[a-z0-9-]*[a-z0-9])?\.)+[a-z0-9](?:[a-z0-9-]*[a-z0-9])?"
    r"|\[(?:(?:25[0-5]|2[0-4][0-9]|1[0-9][0-9]|[1-9]?[0-9])\.){3}"
    r"(?:25[0-5]|2[0-4][0-9]|1[0-9][0-9]|[1-9]?[0-9]|[a-z0-9-]*[a-z0-9]:"
    r"(?:[\x01-\x08\x0b\x0c\x0e-\x1f\x21-\x5a\x53-\x7f]|\\[\x01-\x09\x0b\x0c\x0e-\x7f])+)\])",
    re.IGNORECASE,
)

ACCEPTED_VALUES = frozenset({"yes", "on", "1", "y", "true"})
PASSWORD_MIN_LENGTH = 8


def email(value: Any, *params: Any) -> Failure | None:
    return check_pattern("email", value, EMAIL_PATTERN)


def _is_url(text: str) -> bool:
    if any(char.isspace() for char in text):
        return False
    try:
        parts = urlsplit(text)
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.netloc)


def url(value: Any, *params: Any) -> Failure | None:
    """Value must be an absolute URL with a scheme and a host."""
    return check_text("url", value, (), _is_url)


def accepted(value: Any, *params: Any) -> Failure | None:
    """Value must be one of yes, on, 1, y, true (case sensitive)."""
    return check_text("accepted", value, (), lambda text: text in ACCEPTED_VALUES)


def alpha(value: Any, *params: Any) -> Failure | None:
    return check_pattern("alpha", value, ALPHA_PATTERN)


def alpha_numeric(value: Any, *params: Any) -> Failure | None:
    return check_pattern("alpha_numeric", value, ALPHA_NUMERIC_PATTERN)


def alpha_under(value: Any, *params: Any) -> Failure | None:
    return check_pattern("alpha_under", value, ALPHA_UNDER_PATTERN)


def alpha_dash(value: Any, *params: Any) -> Failure | None:
    return check_pattern("alpha_dash", value, ALPHA_DASH_PATTERN)


def ascii_only(value: Any, *params: Any) -> Failure | None:
    """Value must be non-empty and contain only ASCII characters."""
    return check_text("ascii", value, (), lambda text: text != "" and text.isascii())


def integer(value: Any, *params: Any) -> Failure | None:
    return check_pattern("int", value, INT_PATTERN)


def decimal(value: Any, *params: Any) -> Failure | None:
    return check_pattern("float", value, FLOAT_PATTERN)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _is_json(text: str) -> bool:
    try:
        json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return False
    return True


def json_text(value: Any, *params: Any) -> Failure | None:
    return check_text("json", value, (), _is_json)


def upper_case(value: Any, *params: Any) -> Failure | None:
    return check_text("upper_case", value, (), lambda text: text == text.upper())


def lower_case(value: Any, *params: Any) -> Failure | None:
    return check_text("lower_case", value, (), lambda text: text == text.lower())


def _is_strong_password(text: str) -> bool:
    if len(text) < PASSWORD_MIN_LENGTH:
        return False
    has_lower = any("a" <= char <= "z" for char in text)
    has_upper = any("A" <= char <= "Z" for char in text)
    has_digit = any("0" <= char <= "9" for char in text)
    return has_lower and has_upper and has_digit


def password(value: Any, *params: Any) -> Failure | None:
    """At least 8 characters with a lower case letter, an upper case letter and a digit."""
    return check_text("password", value, (), _is_strong_password)


def regex(value: Any, *params: Any) -> Failure | None:
    """Value must fully match the pattern given as the only parameter."""
    pattern = str(param("regex", params))
    try:
        compiled = compile_pattern(pattern)
    except re.error as e:
        raise RuleParameterError("regex", f"invalid pattern {pattern!r}: {e}", params) from e
    return check_pattern("regex", value, compiled, params)


def contains(value: Any, *params: Any) -> Failure | None:
    needle = str(param("contains", params))
    return check_text("contains", value, params, lambda text: needle in text)


def has_prefix(value: Any, *params: Any) -> Failure | None:
    prefix = str(param("has_prefix", params))
    return check_text("has_prefix", value, params, lambda text: text.startswith(prefix))


def has_suffix(value: Any, *params: Any) -> Failure | None:
    suffix = str(param("has_suffix", params))
    return check_text("has_suffix", value, params, lambda text: text.endswith(suffix))
