"""Date utilities for contriview.

The aggregation core only ever sees ``datetime.date`` values handed to it by
the caller. Reading the clock happens here, at the edge, and only on behalf
of the CLI.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

__all__ = [
    "ISO_DATE_FORMAT",
    "format_iso_date",
    "get_current_date",
    "is_valid_timezone",
    "parse_iso_date",
]

ISO_DATE_FORMAT = "%Y-%m-%d"
_ISO_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_iso_date(value: str) -> date:
    """Parse an ISO-8601 calendar date (``YYYY-MM-DD``).

    Parameters
    ----------
    value
        Date text, e.g. ``"2019-01-26"``

    Returns
    -------
    date
        Parsed calendar date

    Raises
    ------
    ValueError
        If the text is not a zero-padded ``YYYY-MM-DD`` calendar date
    """
    if not _ISO_DATE_PATTERN.fullmatch(value):
        raise ValueError(f"Not a YYYY-MM-DD date: {value!r}")
    return date.fromisoformat(value)


def format_iso_date(value: date) -> str:
    """Format a date as ``YYYY-MM-DD``."""
    return value.strftime(ISO_DATE_FORMAT)


def is_valid_timezone(timezone_name: str) -> bool:
    """Check whether ``timezone_name`` is a known IANA timezone."""
    try:
        ZoneInfo(timezone_name)
    except (ZoneInfoNotFoundError, ValueError):
        return False
    return True


def get_current_date(tz: ZoneInfo | str | None = None) -> date:
    """Get today's date in the given timezone.

    Parameters
    ----------
    tz
        Timezone (ZoneInfo, timezone name string, or None for UTC)

    Returns
    -------
    date
        Current calendar date in that timezone
    """
    if tz is None:
        tz = ZoneInfo("UTC")
    elif isinstance(tz, str):
        tz = ZoneInfo(tz)

    return datetime.now(tz).date()
