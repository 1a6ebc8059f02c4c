"""Mini README: Entry point CLI for the personal expense tracker.

This script exposes a Typer CLI. ``run`` starts the interactive numbered
menu; ``list``, ``analyse`` and ``monthly`` print a single screen and exit,
which is handy for scripting. Settings come from ``EXPENSE_TRACKER_*``
environment variables and can be overridden per invocation.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from expense_tracker.analytics import analyse, monthly_report
from expense_tracker.configuration import get_settings
from expense_tracker.finance import parse_year_month
from expense_tracker.interface import (
    ExpenseConsole,
    render_analysis,
    render_expenses,
    render_monthly_report,
)
from expense_tracker.logging_utils import configure_root_logger
from expense_tracker.storage import ExpenseStore, ScanResult

cli = typer.Typer(help="Record personal expenses and analyse where the money goes.")

DATA_FILE_OPTION = typer.Option(None, "--data-file", help="Backing file to use instead of the configured one.")
VERBOSE_OPTION = typer.Option(False, "--verbose", help="Log debugging details to stderr.")


def _build_store(data_file: Optional[Path], verbose: bool) -> ExpenseStore:
    """Resolve settings, configure logging and open a store handle."""

    settings = get_settings()
    configure_root_logger("DEBUG" if verbose else settings.log_level)
    return ExpenseStore(
        data_file or settings.data_file,
        delimiter=settings.delimiter,
        encoding=settings.encoding,
    )


def _read_or_exit(store: ExpenseStore) -> ScanResult:
    scan = store.read_all()
    for rejected in scan.rejected:
        typer.echo(f"Skipped line {rejected.line_number}: {rejected.reason}", err=True)
    if not scan.ok:
        typer.echo(f"Error: {scan.error.message}", err=True)
        raise typer.Exit(code=1)
    return scan


@cli.command()
def run(
    data_file: Optional[Path] = DATA_FILE_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Start the interactive expense menu."""

    store = _build_store(data_file, verbose)
    console = ExpenseConsole(store, currency_label=get_settings().currency_label)
    raise typer.Exit(code=console.run())


@cli.command("list")
def list_expenses(
    data_file: Optional[Path] = DATA_FILE_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Print every recorded expense in file order."""

    scan = _read_or_exit(_build_store(data_file, verbose))
    for line in render_expenses(scan.expenses, get_settings().currency_label):
        typer.echo(line)


@cli.command("analyse")
def analyse_expenses(
    data_file: Optional[Path] = DATA_FILE_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Print totals, category breakdown and the monthly trend."""

    scan = _read_or_exit(_build_store(data_file, verbose))
    for line in render_analysis(analyse(scan.expenses), get_settings().currency_label):
        typer.echo(line)


@cli.command()
def monthly(
    month: str = typer.Argument(..., help="Month to report on, as YYYY-MM."),
    data_file: Optional[Path] = DATA_FILE_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Print the category totals for a single month."""

    year_month = parse_year_month(month)
    if not year_month.ok:
        typer.echo(f"Error: {year_month.error.message}", err=True)
        raise typer.Exit(code=2)
    scan = _read_or_exit(_build_store(data_file, verbose))
    report = monthly_report(scan.expenses, year_month.value)
    for line in render_monthly_report(report, get_settings().currency_label):
        typer.echo(line)


if __name__ == "__main__":
    cli()
