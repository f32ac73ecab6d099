"""Window sums over a daily series.

Every window is computed by its own scan of the series; no window depends on
another's result.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any

from .time_windows import AggregationWindow, select_window

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import date

    from ..heatmap.parser import DailyRecord

__all__ = [
    "WindowSums",
    "aggregate",
    "sum_window",
]


@dataclass(frozen=True)
class WindowSums:
    """Sum of counts per aggregation window.

    Attributes
    ----------
    today : int
        Count recorded on the reference date (0 if none)
    week : int
        Sum of the last seven records in document order
    month : int
        Sum over the reference date's calendar month
    year : int
        Sum over the reference date's calendar year
    all_time : int
        Sum over the whole series
    """

    today: int = 0
    week: int = 0
    month: int = 0
    year: int = 0
    all_time: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


def sum_window(
    series: Sequence[DailyRecord],
    window: AggregationWindow,
    reference_date: date,
) -> int:
    """Sum the counts of the records inside one window.

    Parameters
    ----------
    series
        Daily records in document order
    window
        Window to sum over
    reference_date
        Date calendar windows are anchored to

    Returns
    -------
    int
        Non-negative sum; 0 for an empty selection
    """
    return sum(record.count for record in select_window(series, window, reference_date))


def aggregate(series: Sequence[DailyRecord], reference_date: date) -> WindowSums:
    """Compute all five window sums for a series.

    Windows are evaluated in the order all-time, week, year, month, today.
    """
    all_time = sum_window(series, AggregationWindow.ALL_TIME, reference_date)
    week = sum_window(series, AggregationWindow.WEEK, reference_date)
    year = sum_window(series, AggregationWindow.YEAR, reference_date)
    month = sum_window(series, AggregationWindow.MONTH, reference_date)
    today = sum_window(series, AggregationWindow.TODAY, reference_date)

    return WindowSums(
        today=today,
        week=week,
        month=month,
        year=year,
        all_time=all_time,
    )
