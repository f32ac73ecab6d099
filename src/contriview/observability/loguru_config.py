"""Loguru configuration for contriview.

Console output goes to stderr so that rendered views on stdout stay clean.
An optional JSON-lines file sink captures the same records in serialized form.
"""

from __future__ import annotations

import sys
import time
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from loguru import logger

if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path

__all__ = [
    "configure_loguru",
    "get_logger",
    "timing_context",
]

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def configure_loguru(
    *,
    level: str = "WARNING",
    log_file: Path | None = None,
    enable_console: bool = True,
) -> None:
    """Configure loguru sinks.

    Parameters
    ----------
    level
        Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_file
        Optional path of a JSON-lines log file
    enable_console
        Enable colored stderr output

    Example
    -------
    >>> from contriview.observability.loguru_config import configure_loguru
    >>> configure_loguru(level="DEBUG")
    """
    logger.remove()
    logger.enable("contriview")

    if enable_console:
        logger.add(
            sys.stderr,
            format=CONSOLE_FORMAT,
            level=level,
            colorize=True,
            backtrace=True,
            diagnose=False,
        )

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            format="{message}",
            level=level,
            serialize=True,
            backtrace=True,
            diagnose=False,
        )

    logger.debug("Loguru configured", level=level, log_file=str(log_file) if log_file else None)


def get_logger(component: str = "contriview") -> Any:
    """Get logger instance bound to a component.

    Parameters
    ----------
    component
        Component name (parser, aggregator, view, github, cli)

    Returns
    -------
    Logger
        Loguru logger bound to component
    """
    return logger.bind(component=component)


@contextmanager
def timing_context(
    operation: str,
    *,
    component: str = "contriview",
    **metadata: Any,
) -> Generator[dict[str, Any], None, None]:
    """Time an operation and log its start and end at DEBUG level.

    Yields
    ------
    dict
        Context dictionary; entries added to it are logged with the end record

    Example
    -------
    >>> with timing_context("build_view", component="view") as ctx:
    ...     view = build(html, reference_date)
    ...     ctx["sum_contributions"] = view.sum_contributions
    """
    start_ns = time.perf_counter_ns()
    context: dict[str, Any] = dict(metadata)
    bound = logger.bind(component=component, timing=True, operation=operation)

    bound.debug(f"START: {operation}", phase="start", **metadata)

    try:
        yield context
    finally:
        duration_ns = time.perf_counter_ns() - start_ns
        bound.debug(
            f"END: {operation}",
            phase="end",
            duration_ms=duration_ns / 1_000_000,
            duration_ns=duration_ns,
            **context,
        )
