"""Time-related utility functions."""

import re
from datetime import datetime, time, timezone

from dateutil import parser

# An hour with minutes, or an hour with an am/pm marker. Bare numbers and
# dates would otherwise be read by dateutil as calendar fields.
WALL_CLOCK_PATTERN = re.compile(
    r"\d{1,2}(?::\d{2}){1,2}\s*(?:[ap]m)?|\d{1,2}\s*[ap]m",
    re.IGNORECASE,
)


def utc_now() -> datetime:
    """Return current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


def local_now() -> datetime:
    """Return the local wall-clock time as a naive datetime."""
    return datetime.now()


def parse_wall_clock(value) -> time:
    """
    Parse a wall-clock time from various formats.
    Supports: "08:00", "8:00 AM", "8am", "22:00:00", or a time instance.
    """
    if isinstance(value, time):
        return value.replace(second=0, microsecond=0, tzinfo=None)

    text = str(value).strip() if value is not None else ""
    if not text:
        raise ValueError("Empty time value")
    if not WALL_CLOCK_PATTERN.fullmatch(text):
        raise ValueError(f"Invalid time: {value!r}")

    try:
        parsed = parser.parse(text, default=datetime(2000, 1, 1))
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Invalid time: {value!r}") from e

    return parsed.time().replace(second=0, microsecond=0)


def format_wall_clock(value: time) -> str:
    """Format a time as HH:MM 24-hour."""
    return f"{value.hour:02d}:{value.minute:02d}"
