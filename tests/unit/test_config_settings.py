"""Tests for configuration management."""

import os
from pathlib import Path

import pytest

from contriview.config.settings import (
    ConfigError,
    Settings,
    get_settings,
    load_env_file,
    load_settings,
)
from contriview.heatmap.parser import HeatmapMarkup


def test_settings_defaults():
    """A fresh checkout needs no configuration."""
    settings = Settings()

    assert settings.base_url == "https://github.com"
    assert settings.timeout_seconds == 10.0
    assert settings.default_timezone == "UTC"
    assert settings.log_level == "WARNING"
    assert settings.log_file is None
    assert settings.markup() == HeatmapMarkup()


def test_settings_with_string_log_file():
    settings = Settings(log_file="logs/contriview.jsonl")

    assert settings.log_file == Path("logs/contriview.jsonl")


def test_settings_normalizes_log_level():
    assert Settings(log_level="debug").log_level == "DEBUG"


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"timeout_seconds": 0}, "CONTRIVIEW_TIMEOUT"),
        ({"default_timezone": "Mars/Olympus_Mons"}, "CONTRIVIEW_DEFAULT_TZ"),
        ({"log_level": "LOUD"}, "CONTRIVIEW_LOG_LEVEL"),
        ({"base_url": ""}, "CONTRIVIEW_BASE_URL"),
        ({"day_selector": ""}, "CONTRIVIEW_DAY_SELECTOR"),
        ({"count_attribute": ""}, "CONTRIVIEW_COUNT_ATTR"),
    ],
)
def test_invalid_settings_name_the_variable(kwargs, message):
    with pytest.raises(ConfigError, match=message):
        Settings(**kwargs)


def test_load_env_file(tmp_path, monkeypatch):
    env_file = tmp_path / "custom.env"
    env_file.write_text(
        """
# comment
CONTRIVIEW_DEFAULT_TZ=Asia/Tokyo
CONTRIVIEW_LOG_LEVEL="DEBUG"
CONTRIVIEW_BASE_URL='https://example.test'
"""
    )
    for var in ("CONTRIVIEW_DEFAULT_TZ", "CONTRIVIEW_LOG_LEVEL", "CONTRIVIEW_BASE_URL"):
        monkeypatch.setenv(var, "")

    load_env_file(env_file)

    assert os.environ["CONTRIVIEW_DEFAULT_TZ"] == "Asia/Tokyo"
    assert os.environ["CONTRIVIEW_LOG_LEVEL"] == "DEBUG"
    assert os.environ["CONTRIVIEW_BASE_URL"] == "https://example.test"


def test_from_env(monkeypatch):
    monkeypatch.setenv("CONTRIVIEW_BASE_URL", "https://ghe.example.test/")
    monkeypatch.setenv("CONTRIVIEW_TIMEOUT", "2.5")
    monkeypatch.setenv("CONTRIVIEW_DAY_SELECTOR", "td.ContributionCalendar-day")
    monkeypatch.setenv("CONTRIVIEW_COUNT_ATTR", "data-total")

    settings = Settings.from_env()

    assert settings.base_url == "https://ghe.example.test"
    assert settings.timeout_seconds == 2.5
    assert settings.markup() == HeatmapMarkup(
        node_selector="td.ContributionCalendar-day",
        date_attribute="data-date",
        count_attribute="data-total",
    )


def test_from_env_reads_dotenv_in_cwd(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("CONTRIVIEW_DEFAULT_TZ=Europe/Brussels\n")
    monkeypatch.setenv("CONTRIVIEW_DEFAULT_TZ", "")

    assert Settings.from_env().default_timezone == "Europe/Brussels"


def test_from_env_invalid_timeout(monkeypatch):
    monkeypatch.setenv("CONTRIVIEW_TIMEOUT", "soon")

    with pytest.raises(ConfigError, match="Invalid configuration"):
        Settings.from_env()


def test_from_env_log_file(monkeypatch, tmp_path):
    monkeypatch.setenv("CONTRIVIEW_LOG_FILE", str(tmp_path / "run.jsonl"))

    assert Settings.from_env().log_file == tmp_path / "run.jsonl"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_load_settings_replaces_cache(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("CONTRIVIEW_LOG_LEVEL", "INFO")

    reloaded = load_settings()

    assert reloaded is not first
    assert reloaded.log_level == "INFO"
    assert get_settings() is reloaded
