"""Observability module for contriview.

Provides loguru configuration and timing instrumentation.
"""

from .loguru_config import (
                      configure_loguru,
                      get_logger,
                      timing_context,
)

__all__ = [
    "configure_loguru",
    "get_logger",
    "timing_context",
]
