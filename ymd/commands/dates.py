"""Date commands: check, today, add, diff and range."""

import logging
import sys
from typing import NoReturn

from rich.console import Console
from rich.table import Table

from ymd.config import Settings, load_settings
from ymd.domain.ranges import count_days_inclusive, day_generator, difference_in_days, difference_in_months
from ymd.domain.ymd import Ymd
from ymd.errors import FormatError, InvalidDateError, YmdError

console = Console()
logger = logging.getLogger(__name__)


def fail(message: str) -> NoReturn:
    """Print an error and exit with status 1."""
    console.print(f"[red]{message}[/red]", style="bold")
    sys.exit(1)


def settings_or_exit() -> Settings:
    """Load settings, exiting with an error message if they are invalid."""
    try:
        return load_settings()
    except ValueError as e:
        fail(f"Configuration error: {e}")


def describe_check(value: str) -> tuple[bool, str]:
    """Classify a candidate date string.

    Returns:
        Tuple of (ok, reason) where reason is shown to the user.
    """
    try:
        parsed = Ymd.parse(value)
    except FormatError:
        return False, "wrong format, expected YYYY-MM-DD"
    except InvalidDateError:
        return False, "not a real date"
    return True, parsed.format("%A %d %B %Y")


def check_command(values: list[str]) -> None:
    """Report whether each value is a valid date."""
    table = Table(title="Date check")
    table.add_column("Value", style="cyan")
    table.add_column("Status", justify="center")
    table.add_column("Detail")

    failures = 0
    for value in values:
        ok, reason = describe_check(value)
        if not ok:
            failures += 1
        status = "[green]✓[/green]" if ok else "[red]✗[/red]"
        table.add_row(value, status, reason)

    console.print(table)
    logger.debug("Checked %d values, %d invalid", len(values), failures)

    if failures:
        sys.exit(1)


def today_command(zone: str | None = None) -> None:
    """Print today's date."""
    settings = settings_or_exit()
    try:
        console.print(Ymd.today(zone or settings.zone).value)
    except YmdError as e:
        fail(e.message)


def add_command(value: str, days: int = 0, months: int = 0) -> None:
    """Print a date moved by months, then days."""
    try:
        result = Ymd.parse(value).add_months(months).add_days(days)
    except YmdError as e:
        fail(e.message)
    console.print(result.value)


def diff_command(start: str, end: str) -> None:
    """Show the distance between two dates."""
    try:
        days = difference_in_days(start, end)
        months = difference_in_months(start, end)
        inclusive = count_days_inclusive(start, end) if days >= 0 else None
    except YmdError as e:
        fail(e.message)

    table = Table(title=f"{start} → {end}")
    table.add_column("Measure", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Days", str(days))
    table.add_row("Months", str(months))
    table.add_row("Days (inclusive)", str(inclusive) if inclusive is not None else "[dim]-[/dim]")
    console.print(table)


def range_command(start: str, end: str, pattern: str | None = None) -> None:
    """Print every date from start to end, one per line."""
    try:
        days = day_generator(start, end)
    except YmdError as e:
        fail(e.message)

    count = 0
    for day in days:
        console.print(day.format(pattern) if pattern else day.value, highlight=False)
        count += 1

    if count == 0:
        console.print("[yellow]No dates in range[/yellow]")
