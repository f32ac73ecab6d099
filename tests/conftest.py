"""Shared pytest configuration for the test suite."""

from __future__ import annotations

import os
from datetime import date
from pathlib import Path

import pytest
from loguru import logger

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"

# Reference date the canonical heatmap was captured on.
SAMPLE_DATE = date(2019, 1, 26)


@pytest.fixture
def sample_html_path() -> Path:
    return FIXTURES_DIR / "contributions_2019-01-26.html"


@pytest.fixture
def sample_html(sample_html_path: Path) -> str:
    """Canonical 53-week heatmap ending on 2019-01-26."""
    return sample_html_path.read_text(encoding="utf-8")


@pytest.fixture
def sample_date() -> date:
    return SAMPLE_DATE


@pytest.fixture
def log_messages():
    """Capture loguru messages emitted during a test."""
    messages: list[str] = []
    logger.enable("contriview")
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
    logger.disable("contriview")


@pytest.fixture(autouse=True)
def clean_env(tmp_path, monkeypatch):
    """Isolate tests from CONTRIVIEW_* variables, a local .env and cached settings."""
    for var in [k for k in os.environ if k.startswith("CONTRIVIEW_")]:
        monkeypatch.delenv(var)

    monkeypatch.chdir(tmp_path)

    import contriview.config.settings as settings_module

    monkeypatch.setattr(settings_module, "_settings", None)

    yield

    # CLI runs reconfigure loguru against captured streams
    logger.remove()
    logger.disable("contriview")
