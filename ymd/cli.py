"""CLI entry point for ymd."""

import typer

from ymd.commands.admin import init_command
from ymd.commands.calendar import calendar_command
from ymd.commands.dates import add_command, check_command, diff_command, range_command, today_command
from ymd.log import configure_logging

app = typer.Typer(
    name="ymd",
    help="Calendar dates without time zones",
    add_completion=False,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging on stderr"),
    log_json: bool = typer.Option(False, "--log-json", help="Log as JSON lines"),
) -> None:
    """Calendar dates without time zones."""
    configure_logging(verbose=verbose, log_json=log_json)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Create the ymd configuration file."""
    init_command(force)


@app.command()
def check(
    values: list[str] = typer.Argument(..., help="Dates to check (YYYY-MM-DD)"),
) -> None:
    """Check whether your values are real dates in YYYY-MM-DD format."""
    check_command(values)


@app.command()
def today(
    zone: str = typer.Option(None, "--zone", "-z", help="Time zone: local, utc or an IANA name (overrides config)"),
) -> None:
    """Show today's date in your time zone."""
    today_command(zone)


@app.command()
def add(
    value: str,
    days: int = typer.Option(0, "--days", "-d", help="Days to add (negative to subtract)"),
    months: int = typer.Option(0, "--months", "-m", help="Months to add, applied before days"),
) -> None:
    """Move a date by a number of months and days."""
    add_command(value, days, months)


@app.command()
def diff(
    start: str,
    end: str,
) -> None:
    """Show the days and months between two dates."""
    diff_command(start, end)


@app.command(name="range")
def date_range(
    start: str,
    end: str,
    pattern: str = typer.Option(None, "--format", help="strftime pattern for each date (e.g. '%a %d %b')"),
) -> None:
    """List every date between two dates, inclusive."""
    range_command(start, end, pattern)


@app.command()
def calendar(
    month: str = typer.Option(None, "--month", help="Month to show (YYYY-MM, default: current month)"),
    week_start: str = typer.Option(
        None, "--week-start", "-w", help="First day of the week: 0-6 or a name like monday (overrides config)"
    ),
    zone: str = typer.Option(None, "--zone", "-z", help="Time zone used for today (overrides config)"),
) -> None:
    """Show a month as a calendar grid."""
    calendar_command(month, week_start, zone)


if __name__ == "__main__":
    app()
