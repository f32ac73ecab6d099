"""Aggregation windows over a daily series.

Calendar windows (today, month, year) are half-open date ranges around the
reference date. The week window is positional: the last seven records in
document order, regardless of which dates they carry.
"""

from __future__ import annotations

from datetime import date, timedelta
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..heatmap.parser import DailyRecord

__all__ = [
    "TRAILING_WEEK_RECORDS",
    "AggregationWindow",
    "compute_day_bounds",
    "compute_month_bounds",
    "compute_year_bounds",
    "select_window",
    "window_bounds",
]

TRAILING_WEEK_RECORDS = 7


class AggregationWindow(str, Enum):
    """Named windows a series can be summed over."""

    TODAY = "today"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    ALL_TIME = "all_time"


def compute_day_bounds(reference_date: date) -> tuple[date, date]:
    """Return ``[reference_date, next day)``."""
    return reference_date, reference_date + timedelta(days=1)


def compute_month_bounds(reference_date: date) -> tuple[date, date]:
    """Compute bounds of the calendar month containing a date.

    Parameters
    ----------
    reference_date
        Any date in the month

    Returns
    -------
    tuple[date, date]
        (first day of month, first day of next month)
    """
    start = reference_date.replace(day=1)

    if reference_date.month == 12:
        end = date(reference_date.year + 1, 1, 1)
    else:
        end = date(reference_date.year, reference_date.month + 1, 1)

    return start, end


def compute_year_bounds(reference_date: date) -> tuple[date, date]:
    """Return ``[Jan 1, Jan 1 of next year)`` for the reference date's year."""
    return date(reference_date.year, 1, 1), date(reference_date.year + 1, 1, 1)


def window_bounds(window: AggregationWindow, reference_date: date) -> tuple[date, date] | None:
    """Calendar bounds of a window.

    Parameters
    ----------
    window
        Window to resolve
    reference_date
        Date the window is anchored to

    Returns
    -------
    tuple[date, date] | None
        Half-open ``(start, end)`` range, or None for positional windows
        (``WEEK`` and ``ALL_TIME``) that have no calendar extent
    """
    window = AggregationWindow(window)

    if window is AggregationWindow.TODAY:
        return compute_day_bounds(reference_date)
    elif window is AggregationWindow.MONTH:
        return compute_month_bounds(reference_date)
    elif window is AggregationWindow.YEAR:
        return compute_year_bounds(reference_date)
    return None


def select_window(
    series: Sequence[DailyRecord],
    window: AggregationWindow,
    reference_date: date,
) -> list[DailyRecord]:
    """Select the records of a series that fall inside a window.

    ``TODAY`` selects at most one record: the first whose date equals the
    reference date.
    """
    window = AggregationWindow(window)

    if window is AggregationWindow.ALL_TIME:
        return list(series)

    if window is AggregationWindow.WEEK:
        return list(series[-TRAILING_WEEK_RECORDS:])

    if window is AggregationWindow.TODAY:
        start, end = compute_day_bounds(reference_date)
    elif window is AggregationWindow.MONTH:
        start, end = compute_month_bounds(reference_date)
    else:
        start, end = compute_year_bounds(reference_date)

    selected = [record for record in series if start <= record.date < end]

    if window is AggregationWindow.TODAY:
        return selected[:1]
    return selected
