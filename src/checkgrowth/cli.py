"""Command-line interface for check-growth."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .errors import DirectoryNotFound, GrowthError
from .report import GrowthReporter


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr, with checkgrowth at DEBUG level when verbose."""
    logging.basicConfig(format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    logging.getLogger("checkgrowth").setLevel(logging.DEBUG if verbose else logging.WARNING)


@click.group(invoke_without_command=True)
@click.option("--verbose", "-v", is_flag=True, help="Log debug details to stderr.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Compare file sizes in ./out against ./emots.

    Without a command, prints the growth report for the default directories.
    """
    configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        ctx.invoke(report)


@cli.command()
@click.option(
    "--reference",
    "reference_dir",
    type=click.Path(path_type=Path),
    default=None,
    help="Reference directory (default: $CHECK_GROWTH_REFERENCE_DIR or emots).",
)
@click.option(
    "--target",
    "target_dir",
    type=click.Path(path_type=Path),
    default=None,
    help="Target directory (default: $CHECK_GROWTH_TARGET_DIR or out).",
)
@click.option(
    "--strict/--lenient",
    default=None,
    help="Abort on the first file that cannot be measured instead of printing '-'.",
)
def report(
    reference_dir: Optional[Path] = None,
    target_dir: Optional[Path] = None,
    strict: Optional[bool] = None,
) -> None:
    """Print a tab-separated report of file sizes before and after."""
    reporter = GrowthReporter(reference_dir, target_dir, strict)
    try:
        warnings = reporter.write(click.echo)
    except DirectoryNotFound as e:
        click.echo(f"Error reading target directory: {e}", err=True)
        raise click.ClickException(str(e))
    except GrowthError as e:
        click.echo(f"Error building report: {e}", err=True)
        raise click.ClickException(str(e))

    for warning in warnings:
        click.echo(f"Warning: {warning}, reported as '-'", err=True)


@cli.command()
def version() -> None:
    """Display the check-growth version."""
    click.echo(__version__)
