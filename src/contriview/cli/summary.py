#!/usr/bin/env python3
"""contriview command: summarize a user's contributions heatmap."""

from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

import click

from .. import __version__
from ..adapters.github.client import GitHubContributionsClient
from ..config.settings import get_settings
from ..core.time import format_iso_date, get_current_date, parse_iso_date
from ..observability.loguru_config import configure_loguru
from ..rollups.view import build
from .cli_common import ExitCode, emit, handle_cli_error

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
EPILOG = """
Examples:
  contriview octocat                  # as of today
  contriview octocat -d 2019-01-26    # as of a given date
  contriview octocat -f page.html     # read a saved heatmap instead of fetching
  contriview octocat --json
""".strip()


def _parse_date_option(ctx: click.Context, param: click.Parameter, value: str | None) -> date | None:
    if value is None:
        return None
    try:
        return parse_iso_date(value)
    except ValueError:
        raise click.BadParameter(f"{value!r} is not a YYYY-MM-DD date") from None


def _validate_username(ctx: click.Context, param: click.Parameter, value: str) -> str:
    username = value.strip()
    if not username:
        raise click.BadParameter("must not be empty")
    return username


@click.command(
    context_settings=CONTEXT_SETTINGS,
    help="Show today/week/month/year/all-time contribution counts of USERNAME.",
    epilog=EPILOG,
)
@click.argument("username", callback=_validate_username)
@click.option(
    "--date",
    "-d",
    "reference_date",
    callback=_parse_date_option,
    metavar="YYYY-MM-DD",
    help="Reference date (default: today in the configured timezone)",
)
@click.option(
    "--file",
    "-f",
    "document_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read the heatmap from a local file instead of fetching it",
)
@click.option("--json", "json_output", is_flag=True, help="Output as JSON (machine-readable)")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.version_option(__version__, prog_name="contriview")
@click.pass_context
def cli(
    ctx: click.Context,
    username: str,
    reference_date: date | None,
    document_file: Path | None,
    json_output: bool,
    verbose: bool,
) -> int:
    """Fetch (or read) a heatmap and print its contribution view."""
    exit_code = run(username, reference_date, document_file, json_output=json_output, verbose=verbose)
    if exit_code != ExitCode.SUCCESS:
        ctx.exit(int(exit_code))
    return int(exit_code)


def run(
    username: str,
    reference_date: date | None,
    document_file: Path | None,
    *,
    json_output: bool = False,
    verbose: bool = False,
) -> ExitCode:
    """Execute the command and return its exit code."""
    try:
        settings = get_settings()
        configure_loguru(level="DEBUG" if verbose else settings.log_level, log_file=settings.log_file)

        if reference_date is None:
            reference_date = get_current_date(settings.default_timezone)

        if document_file is not None:
            html = document_file.read_text(encoding="utf-8")
        else:
            html = GitHubContributionsClient.from_settings(settings).fetch_contributions(username)

        view = build(html, reference_date, settings.markup())

    except Exception as exc:
        return handle_cli_error(exc, json_output=json_output)

    if json_output:
        emit(
            {
                "username": username,
                "date": format_iso_date(reference_date),
                "view": view.to_dict(),
            },
            json_output=True,
        )
    else:
        emit(view.render())

    return ExitCode.SUCCESS


def main(args: list[str] | None = None) -> int:
    """Main entry point."""
    if args is None:
        args = sys.argv[1:]

    try:
        return cli.main(args=list(args), prog_name="contriview", standalone_mode=False) or 0
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except SystemExit as exc:
        return int(exc.code) if exc.code is not None else 0


if __name__ == "__main__":
    sys.exit(main())
