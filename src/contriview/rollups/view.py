"""Contribution view: window sums plus derived averages.

The rendered form is a fixed ``label: value`` layout, one field per line, in
the order of ``VIEW_FIELDS``. Callers parse it, so labels and order are stable.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

from ..heatmap.parser import DEFAULT_MARKUP, HeatmapMarkup, extract
from ..observability.loguru_config import timing_context
from .aggregator import WindowSums, aggregate

if TYPE_CHECKING:
    from datetime import date

__all__ = [
    "DAYS_PER_WEEK",
    "DAYS_PER_YEAR",
    "VIEW_FIELDS",
    "ContributionView",
    "build",
]

DAYS_PER_WEEK = 7
# Leap years are not accounted for.
DAYS_PER_YEAR = 365


@dataclass(frozen=True)
class ContributionView:
    """Immutable summary of a contributions heatmap as of one date.

    The default instance (every field zero) is what an empty document yields.
    """

    today_contributions: int = 0
    week_contributions: int = 0
    month_contributions: int = 0
    year_contributions: int = 0
    sum_contributions: int = 0
    week_ave: int = 0
    month_ave: int = 0
    sum_ave: int = 0

    @classmethod
    def from_sums(cls, sums: WindowSums, reference_date: date) -> ContributionView:
        """Derive the view from window sums.

        Averages use floor division: ``week / 7``, ``month / day-of-month``
        and ``all_time / 365``.
        """
        return cls(
            today_contributions=sums.today,
            week_contributions=sums.week,
            month_contributions=sums.month,
            year_contributions=sums.year,
            sum_contributions=sums.all_time,
            week_ave=sums.week // DAYS_PER_WEEK,
            month_ave=sums.month // reference_date.day,
            sum_ave=sums.all_time // DAYS_PER_YEAR,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to an ordered dictionary of the rendered fields."""
        return {name: getattr(self, name) for name in VIEW_FIELDS}

    def render(self) -> str:
        """Render as ``label: value`` lines."""
        return "\n".join(f"{name}: {value}" for name, value in self.to_dict().items())

    def __str__(self) -> str:
        return self.render()


VIEW_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(ContributionView))


def build(
    html: str,
    reference_date: date,
    markup: HeatmapMarkup = DEFAULT_MARKUP,
) -> ContributionView:
    """Build the contribution view of a heatmap document.

    Parameters
    ----------
    html
        Heatmap markup
    reference_date
        "As of" date anchoring the today, month and year windows
    markup
        Selector and attribute names of per-day nodes

    Returns
    -------
    ContributionView
        Fully populated view

    Raises
    ------
    MissingRequiredFieldError
        If a per-day node has no count attribute
    """
    with timing_context("build_view", component="view", reference_date=str(reference_date)) as ctx:
        series = extract(html, markup)
        view = ContributionView.from_sums(aggregate(series, reference_date), reference_date)
        ctx["records"] = len(series)
        ctx["sum_contributions"] = view.sum_contributions

    return view
