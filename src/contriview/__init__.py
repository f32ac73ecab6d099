"""contriview: summarize contributions heatmaps by time window.

Typical use::

    from datetime import date
    from contriview import build

    view = build(html, date(2019, 1, 26))
    print(view.render())
"""

__version__ = "0.1.0"

from loguru import logger

from .heatmap.parser import DailyRecord, HeatmapMarkup, MissingRequiredFieldError, extract, extract_one
from .rollups.aggregator import WindowSums, aggregate
from .rollups.time_windows import AggregationWindow
from .rollups.view import ContributionView, build

# Silent as a library; configure_loguru() turns logging on
logger.disable("contriview")

__all__ = [
    "AggregationWindow",
    "ContributionView",
    "DailyRecord",
    "HeatmapMarkup",
    "MissingRequiredFieldError",
    "WindowSums",
    "__version__",
    "aggregate",
    "build",
    "extract",
    "extract_one",
]
