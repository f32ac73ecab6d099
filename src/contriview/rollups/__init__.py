"""Window aggregation and the contribution view."""

from .aggregator import WindowSums, aggregate, sum_window
from .time_windows import (
    TRAILING_WEEK_RECORDS,
    AggregationWindow,
    compute_day_bounds,
    compute_month_bounds,
    compute_year_bounds,
    select_window,
    window_bounds,
)
from .view import DAYS_PER_WEEK, DAYS_PER_YEAR, VIEW_FIELDS, ContributionView, build

__all__ = [
    # Time windows
    "AggregationWindow",
    "TRAILING_WEEK_RECORDS",
    "compute_day_bounds",
    "compute_month_bounds",
    "compute_year_bounds",
    "select_window",
    "window_bounds",
    # Aggregation
    "WindowSums",
    "aggregate",
    "sum_window",
    # View
    "ContributionView",
    "DAYS_PER_WEEK",
    "DAYS_PER_YEAR",
    "VIEW_FIELDS",
    "build",
]
