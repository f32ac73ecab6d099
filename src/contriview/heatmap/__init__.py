"""Heatmap document parsing."""

from .parser import (
    DEFAULT_MARKUP,
    DailyRecord,
    HeatmapMarkup,
    MissingRequiredFieldError,
    extract,
    extract_one,
    parse_count,
)

__all__ = [
    "DEFAULT_MARKUP",
    "DailyRecord",
    "HeatmapMarkup",
    "MissingRequiredFieldError",
    "extract",
    "extract_one",
    "parse_count",
]
