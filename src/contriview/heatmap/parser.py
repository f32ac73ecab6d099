"""Per-day record extraction from contributions heatmap markup.

A heatmap document is a grid of per-day nodes, each carrying the day's date
and activity count as attributes, e.g.::

    <rect class="day" data-count="3" data-date="2019-01-26"></rect>

Nodes are returned in document order, which for the heatmap is chronological.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from bs4 import BeautifulSoup

from ..core.time import parse_iso_date
from ..observability.loguru_config import get_logger

if TYPE_CHECKING:
    from datetime import date

    from bs4 import Tag

__all__ = [
    "DEFAULT_MARKUP",
    "DailyRecord",
    "HeatmapMarkup",
    "MissingRequiredFieldError",
    "extract",
    "extract_one",
    "parse_count",
]

log = get_logger("parser")


class MissingRequiredFieldError(Exception):
    """Raised when a located per-day node lacks its count attribute.

    An unparsable count is treated as zero activity; an absent one means the
    node cannot be turned into a record at all.
    """

    def __init__(self, field: str, node_date: str | None = None) -> None:
        self.field = field
        self.node_date = node_date
        super().__init__(f"Per-day node {node_date!r} is missing required attribute {field!r}")


@dataclass(frozen=True)
class HeatmapMarkup:
    """Where per-day data lives in the markup.

    Attributes
    ----------
    node_selector : str
        CSS selector matching one node per day
    date_attribute : str
        Attribute holding the ISO-8601 date
    count_attribute : str
        Attribute holding the activity count
    """

    node_selector: str = "rect[data-date]"
    date_attribute: str = "data-date"
    count_attribute: str = "data-count"


DEFAULT_MARKUP = HeatmapMarkup()


@dataclass(frozen=True)
class DailyRecord:
    """One day's activity count."""

    date: date
    count: int


def parse_count(raw: str) -> int:
    """Parse a count attribute, mapping anything but a non-negative integer to 0.

    A single leading ``+`` is accepted.

    >>> parse_count("12")
    12
    >>> parse_count("+5")
    5
    >>> parse_count("n/a")
    0
    """
    digits = raw[1:] if raw.startswith("+") else raw
    if not (digits.isascii() and digits.isdigit()):
        return 0
    try:
        return int(digits)
    except ValueError:
        # Beyond the interpreter's integer string-conversion limit
        return 0


def _locate_nodes(document: str, markup: HeatmapMarkup) -> list[Tag]:
    soup = BeautifulSoup(document, "html.parser")
    return soup.select(markup.node_selector)


def _read_count(node: Tag, markup: HeatmapMarkup, date_text: str | None) -> int:
    raw = node.get(markup.count_attribute)
    if raw is None:
        raise MissingRequiredFieldError(markup.count_attribute, date_text)
    return parse_count(str(raw))


def _read_date(node: Tag, markup: HeatmapMarkup) -> date | None:
    date_text = node.get(markup.date_attribute)
    if date_text is None:
        return None
    try:
        return parse_iso_date(str(date_text))
    except ValueError:
        return None


def extract(document: str, markup: HeatmapMarkup = DEFAULT_MARKUP) -> list[DailyRecord]:
    """Extract every per-day record from a heatmap document.

    Parameters
    ----------
    document
        Markup text
    markup
        Selector and attribute names of per-day nodes

    Returns
    -------
    list[DailyRecord]
        Records in document order; empty if no node matches

    Raises
    ------
    MissingRequiredFieldError
        If a located node has no count attribute
    """
    records: list[DailyRecord] = []

    for node in _locate_nodes(document, markup):
        date_text = node.get(markup.date_attribute)
        count = _read_count(node, markup, date_text)

        day = _read_date(node, markup)
        if day is None:
            log.warning("Skipping per-day node with invalid date {date_text!r}", date_text=date_text)
            continue

        records.append(DailyRecord(date=day, count=count))

    log.debug("Extracted {total} per-day records", total=len(records))
    return records


def extract_one(document: str, day: date, markup: HeatmapMarkup = DEFAULT_MARKUP) -> int | None:
    """Look up the count recorded for a single date.

    Only the first node whose date equals ``day`` is inspected; other nodes
    are not required to be complete.

    Returns
    -------
    int | None
        The count, or None if the document has no node for ``day``

    Raises
    ------
    MissingRequiredFieldError
        If the matching node has no count attribute
    """
    for node in _locate_nodes(document, markup):
        if _read_date(node, markup) == day:
            return _read_count(node, markup, node.get(markup.date_attribute))
    return None
