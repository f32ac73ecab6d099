"""Common CLI utilities: stable exit codes, JSON output and error mapping."""

from __future__ import annotations

import json
from enum import IntEnum
from typing import Any

import click

from ..adapters.github.client import FetchError
from ..config.settings import ConfigError
from ..heatmap.parser import MissingRequiredFieldError
from ..observability.loguru_config import get_logger

__all__ = ["ExitCode", "emit", "exit_code_for", "handle_cli_error"]

log = get_logger("cli")


class ExitCode(IntEnum):
    """Stable exit codes for the contriview CLI."""

    SUCCESS = 0  # Successful execution
    USAGE_ERROR = 2  # Bad arguments (click's own code)
    PARSE_ERROR = 4  # Per-day node missing a required attribute
    FETCH_ERROR = 5  # Network or HTTP failure
    CONFIG_ERROR = 6  # Configuration error
    UNKNOWN_ERROR = 7  # Unknown/unexpected error


def exit_code_for(exc: Exception) -> ExitCode:
    """Map an exception to its exit code."""
    if isinstance(exc, MissingRequiredFieldError):
        return ExitCode.PARSE_ERROR
    if isinstance(exc, FetchError):
        return ExitCode.FETCH_ERROR
    if isinstance(exc, ConfigError):
        return ExitCode.CONFIG_ERROR
    return ExitCode.UNKNOWN_ERROR


def emit(data: dict[str, Any] | str, *, json_output: bool = False) -> None:
    """Print a result in JSON or human-readable form."""
    if json_output:
        click.echo(json.dumps(data, ensure_ascii=False, indent=2))
    elif isinstance(data, dict):
        for key, value in data.items():
            click.echo(f"{key}: {value}")
    else:
        click.echo(data)


def handle_cli_error(exc: Exception, *, json_output: bool = False) -> ExitCode:
    """Report an error on the appropriate stream and return its exit code."""
    exit_code = exit_code_for(exc)

    if exit_code is ExitCode.UNKNOWN_ERROR:
        log.opt(exception=exc).error("Unexpected error: {error}", error=str(exc))
    else:
        log.debug("Command failed: {error}", error=str(exc), exit_code=int(exit_code))

    if json_output:
        emit(
            {
                "status": "error",
                "error": str(exc),
                "error_type": type(exc).__name__,
                "exit_code": int(exit_code),
            },
            json_output=True,
        )
    else:
        click.echo(f"❌ {exc}", err=True)

    return exit_code
