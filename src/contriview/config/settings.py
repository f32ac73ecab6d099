"""Centralized configuration for contriview.

Loads configuration from an optional .env file and the environment and
provides typed access to settings. Every variable has a default, so a fresh
checkout runs without any configuration.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from ..core.time import is_valid_timezone
from ..heatmap.parser import HeatmapMarkup

__all__ = [
    "ConfigError",
    "Settings",
    "get_settings",
    "load_env_file",
    "load_settings",
]

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    """Raised when configuration is invalid."""

    pass


@dataclass
class Settings:
    """Settings for fetching and parsing contributions heatmaps.

    Attributes
    ----------
    base_url : str
        Site serving ``/users/<name>/contributions``
    timeout_seconds : float
        HTTP timeout for the fetcher
    default_timezone : str
        Timezone used to determine "today" when no date is given
    log_level : str
        Logging level
    log_file : Path | None
        Optional JSON-lines log file
    day_selector : str
        CSS selector for per-day nodes
    date_attribute : str
        Attribute holding a node's date
    count_attribute : str
        Attribute holding a node's count
    """

    base_url: str = "https://github.com"
    timeout_seconds: float = 10.0
    default_timezone: str = "UTC"

    # Logging
    log_level: str = "WARNING"
    log_file: Path | None = None

    # Heatmap markup
    day_selector: str = "rect[data-date]"
    date_attribute: str = "data-date"
    count_attribute: str = "data-count"

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.log_file and isinstance(self.log_file, str):
            self.log_file = Path(self.log_file)

        self.log_level = self.log_level.upper()

        if not self.base_url:
            raise ConfigError("CONTRIVIEW_BASE_URL must not be empty")

        if self.timeout_seconds <= 0:
            raise ConfigError(f"CONTRIVIEW_TIMEOUT must be positive, got {self.timeout_seconds}")

        if not is_valid_timezone(self.default_timezone):
            raise ConfigError(
                f"CONTRIVIEW_DEFAULT_TZ is not a known timezone: {self.default_timezone!r} "
                "(use an IANA name such as Europe/Brussels)"
            )

        if self.log_level not in LOG_LEVELS:
            raise ConfigError(
                f"CONTRIVIEW_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}"
            )

        for env_name, value in (
            ("CONTRIVIEW_DAY_SELECTOR", self.day_selector),
            ("CONTRIVIEW_DATE_ATTR", self.date_attribute),
            ("CONTRIVIEW_COUNT_ATTR", self.count_attribute),
        ):
            if not value:
                raise ConfigError(f"{env_name} must not be empty")

    def markup(self) -> HeatmapMarkup:
        """Per-day node description for the parser."""
        return HeatmapMarkup(
            node_selector=self.day_selector,
            date_attribute=self.date_attribute,
            count_attribute=self.count_attribute,
        )

    @classmethod
    def from_env(cls, env_file: Path | str | None = None) -> Settings:
        """Load settings from environment.

        Loads from .env file if present, then reads ``CONTRIVIEW_*`` variables.

        Parameters
        ----------
        env_file
            Path to .env file (default: .env in current directory)

        Returns
        -------
        Settings
            Loaded settings

        Raises
        ------
        ConfigError
            If settings are invalid
        """
        if env_file is None:
            env_file = Path(".env")
        if isinstance(env_file, str):
            env_file = Path(env_file)

        if env_file.exists():
            load_env_file(env_file)

        try:
            return cls(
                base_url=os.environ.get("CONTRIVIEW_BASE_URL", "https://github.com").rstrip("/"),
                timeout_seconds=float(os.environ.get("CONTRIVIEW_TIMEOUT", "10.0")),
                default_timezone=os.environ.get("CONTRIVIEW_DEFAULT_TZ", "UTC"),
                # Logging
                log_level=os.environ.get("CONTRIVIEW_LOG_LEVEL", "WARNING"),
                log_file=Path(os.environ["CONTRIVIEW_LOG_FILE"]) if "CONTRIVIEW_LOG_FILE" in os.environ else None,
                # Heatmap markup
                day_selector=os.environ.get("CONTRIVIEW_DAY_SELECTOR", "rect[data-date]"),
                date_attribute=os.environ.get("CONTRIVIEW_DATE_ATTR", "data-date"),
                count_attribute=os.environ.get("CONTRIVIEW_COUNT_ATTR", "data-count"),
            )

        except ValueError as exc:
            raise ConfigError(f"Invalid configuration: {exc}") from exc


def load_env_file(env_file: Path) -> None:
    """Load environment variables from .env file.

    Parameters
    ----------
    env_file
        Path to .env file
    """
    with open(env_file, encoding="utf-8") as f:
        for line in f:
            line = line.strip()

            # Skip comments and empty lines
            if not line or line.startswith("#"):
                continue

            if "=" in line:
                key, value = line.split("=", 1)
                key = key.strip()
                value = value.strip()

                # Remove quotes
                if (value.startswith('"') and value.endswith('"')) or (value.startswith("'") and value.endswith("'")):
                    value = value[1:-1]

                os.environ[key] = value


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the cached settings instance, loading it on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def load_settings(env_file: Path | str | None = None) -> Settings:
    """Reload settings from the environment and replace the cached instance."""
    global _settings
    _settings = Settings.from_env(env_file)
    return _settings
