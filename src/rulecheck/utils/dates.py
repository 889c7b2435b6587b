"""Date layouts and relative date placeholders.

Layouts are written against the reference time ``Mon Jan 2 15:04:05 MST 2006``
(for example ``02-01-2006`` is day-month-year). A layout containing ``%``
is used as a ``strptime`` format unchanged.

Zero-padded tokens demand their full digit count when parsing: ``02``
accepts ``05`` but not ``5``, as the reference-time rules require.
strptime layouts keep strptime's looser widths.

Placeholders resolve relative to the current local time:

    now        current date and time
    today      current date at 00:00:00
    yesterday  previous date at 00:00:00
    tomorrow   next date at 00:00:00
    -18Y -3h +22s
               current date and time shifted by signed amounts of
               years (Y), months (M), days (D), hours (h), minutes (m)
               and seconds (s); tokens can be combined
"""

import re
from collections.abc import Iterator
from datetime import datetime, timedelta
from enum import Enum
from functools import lru_cache


class DatePlaceholder(str, Enum):
    """Named relative dates."""
    NOW = "now"
    TODAY = "today"
    YESTERDAY = "yesterday"
    TOMORROW = "tomorrow"


# Reference-time chunks and their strptime directives, longest first
LAYOUT_TOKENS = {
    "January": "%B",
    "Jan": "%b",
    "Monday": "%A",
    "Mon": "%a",
    "MST": "%Z",
    "2006": "%Y",
    "Z07:00": "%z",
    "-07:00": "%z",
    "Z0700": "%z",
    "-0700": "%z",
    "002": "%j",
    "_2": "%d",
    "15": "%H",
    "01": "%m",
    "02": "%d",
    "03": "%I",
    "04": "%M",
    "05": "%S",
    "06": "%y",
    "PM": "%p",
    "pm": "%p",
    "1": "%m",
    "2": "%d",
    "3": "%I",
    "4": "%M",
    "5": "%S",
}

# Digits each numeric token accepts when parsing; zero-padded ones are fixed width
TOKEN_WIDTHS = {
    "2006": r"[0-9]{4}",
    "002": r"[0-9]{3}",
    "01": r"[0-9]{2}",
    "02": r"[0-9]{2}",
    "03": r"[0-9]{2}",
    "04": r"[0-9]{2}",
    "05": r"[0-9]{2}",
    "06": r"[0-9]{2}",
    "15": r"[0-9]{1,2}",
    "_2": r"[ 0-9]?[0-9]",
    "1": r"[0-9]{1,2}",
    "2": r"[0-9]{1,2}",
    "3": r"[0-9]{1,2}",
    "4": r"[0-9]{1,2}",
    "5": r"[0-9]{1,2}",
}

_FRACTION = r"[.,](?:0+|9+)(?![0-9])"
_LAYOUT_PATTERN = re.compile("|".join([_FRACTION] + [re.escape(token) for token in LAYOUT_TOKENS]))
_MODIFIER_PATTERN = re.compile(r"([-+]?\d+)([YMDhms])")
MAX_MODIFIERS = 6


def _scan_layout(layout: str) -> Iterator[tuple[str, str]]:
    """Yield ``(literal, token)`` pairs; the final token is empty."""
    position = 0
    for match in _LAYOUT_PATTERN.finditer(layout):
        yield layout[position:match.start()], match.group(0)
        position = match.end()
    yield layout[position:], ""


@lru_cache(maxsize=256)
def layout_to_format(layout: str) -> str:
    """Translate a reference-time layout into a strptime format."""
    if "%" in layout:
        return layout

    parts = []
    for literal, token in _scan_layout(layout):
        parts.append(literal)
        if not token:
            continue
        if token[0] in ".,":
            parts.append(token[0] + "%f")
        else:
            parts.append(LAYOUT_TOKENS[token])
    return "".join(parts)


@lru_cache(maxsize=256)
def layout_to_pattern(layout: str) -> re.Pattern | None:
    """Build a pattern that checks digit counts for a reference-time layout.

    strptime accepts ``5`` for ``%d``; the layout token ``02`` does not.
    Returns None for strptime layouts, which are not width checked.
    """
    if "%" in layout:
        return None

    parts = []
    for literal, token in _scan_layout(layout):
        parts.append(re.escape(literal))
        if not token:
            continue
        if token[0] in ".,":
            digits = r"[0-9]+" if token[1] == "9" else rf"[0-9]{{{len(token) - 1}}}"
            parts.append(re.escape(token[0]) + digits)
        else:
            parts.append(TOKEN_WIDTHS.get(token, r".+?"))
    return re.compile("".join(parts))


def parse_date(value: str, layout: str) -> datetime:
    """Parse text with a layout.

    Raises:
        ValueError: if the text does not fit the layout
    """
    pattern = layout_to_pattern(layout)
    if pattern is not None and pattern.fullmatch(value) is None:
        raise ValueError(f"{value!r} does not match layout {layout!r}")
    return datetime.strptime(value, layout_to_format(layout))


def format_date(moment: datetime, layout: str) -> str:
    return moment.strftime(layout_to_format(layout))


def add_date(moment: datetime, years: int = 0, months: int = 0, days: int = 0) -> datetime:
    """Shift a moment by calendar amounts, normalizing overflowing days.

    January 31 plus one month lands in March, the same way a calendar
    "add date" operation carries surplus days into the next month.
    """
    month_index = moment.month - 1 + months
    year = moment.year + years + month_index // 12
    month = month_index % 12 + 1
    first_of_month = moment.replace(year=year, month=month, day=1)
    return first_of_month + timedelta(days=moment.day - 1 + days)


def parse_date_modifiers(text: str) -> dict[str, int]:
    """Parse modifier expressions like ``-18Y +3h 22s``.

    Raises:
        ValueError: if no modifier token is present
    """
    modifiers = {"Y": 0, "M": 0, "D": 0, "h": 0, "m": 0, "s": 0}

    matches = _MODIFIER_PATTERN.findall(text)[:MAX_MODIFIERS]
    if not matches:
        raise ValueError("modifiers not found")

    for amount, unit in matches:
        modifiers[unit] = int(amount)
    return modifiers


def _midnight(moment: datetime) -> datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def get_date(placeholder: str, now: datetime | None = None) -> datetime:
    """Resolve a placeholder to a moment relative to now.

    Raises:
        ValueError: if the text is neither a named placeholder nor a
            modifier expression
    """
    if now is None:
        now = datetime.now().astimezone()

    if placeholder == DatePlaceholder.NOW:
        return now
    if placeholder == DatePlaceholder.TODAY:
        return _midnight(now)
    if placeholder == DatePlaceholder.YESTERDAY:
        return _midnight(add_date(now, days=-1))
    if placeholder == DatePlaceholder.TOMORROW:
        return _midnight(add_date(now, days=1))

    try:
        modifiers = parse_date_modifiers(placeholder)
    except ValueError:
        raise ValueError(f"placeholder not exists: {placeholder}") from None

    moment = add_date(now, modifiers["Y"], modifiers["M"], modifiers["D"])
    return moment + timedelta(hours=modifiers["h"], minutes=modifiers["m"], seconds=modifiers["s"])
