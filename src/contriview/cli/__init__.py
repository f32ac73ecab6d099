"""Command-line interface."""

from .summary import cli, main

__all__ = ["cli", "main"]
