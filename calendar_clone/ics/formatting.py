"""Value encodings shared by the ICS encoder and decoder."""

import re
from datetime import date, datetime, time, timezone

from calendar_clone.models.event import EventDate, InvalidDate, coerce_event_date

# Basic-format UTC timestamp, e.g. 20250101T093000Z (the Z is optional on input)
_BASIC_TIMESTAMP = re.compile(r"(\d{4})(\d{2})(\d{2})T(\d{2})(\d{2})(\d{2})Z?")


def escape_text(text: str) -> str:
    """Escape a TEXT value: newlines first, then commas, then semicolons."""
    return text.replace("\n", "\\n").replace(",", "\\,").replace(";", "\\;")


def unescape_text(text: str) -> str:
    """Reverse comma and semicolon escapes.

    An escaped newline (backslash followed by "n") is left as written.
    """
    return text.replace("\\,", ",").replace("\\;", ";")


def _as_utc(value: EventDate) -> datetime:
    if isinstance(value, InvalidDate):
        raise ValueError(f"Cannot format invalid date {value.raw!r}")
    if not isinstance(value, datetime):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_utc_timestamp(value: EventDate) -> str:
    """Format as YYYYMMDDTHHMMSSZ (sub-second precision is dropped).

    Raises:
        ValueError: If value is an InvalidDate
    """
    return _as_utc(value).strftime("%Y%m%dT%H%M%SZ")


def format_date_value(value: EventDate) -> str:
    """Format the UTC calendar date as YYYYMMDD.

    Raises:
        ValueError: If value is an InvalidDate
    """
    return _as_utc(value).strftime("%Y%m%d")


def parse_timestamp(value: str) -> datetime | InvalidDate:
    """Parse a basic-format timestamp into an aware UTC datetime.

    The first YYYYMMDDTHHMMSS[Z] run is rewritten to ISO 8601 before
    parsing. Anything that still does not parse yields InvalidDate.
    """
    iso = _BASIC_TIMESTAMP.sub(r"\1-\2-\3T\4:\5:\6Z", value, count=1)
    try:
        parsed = datetime.fromisoformat(iso)
    except ValueError:
        return InvalidDate(value)
    return coerce_event_date(parsed)


def parse_date_value(value: str) -> date | InvalidDate:
    """Parse the leading YYYYMMDD of a DATE value."""
    try:
        return date.fromisoformat(f"{value[0:4]}-{value[4:6]}-{value[6:8]}")
    except ValueError:
        return InvalidDate(value)
