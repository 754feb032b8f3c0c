"""Calendar command: show a month as a grid of weeks."""

import logging

from rich.console import Console
from rich.table import Table

from ymd.commands.dates import fail, settings_or_exit
from ymd.config import parse_week_start
from ymd.dates import current_month, format_month_label, parse_month
from ymd.domain.models import DayOfWeek, Month
from ymd.domain.ymd import Ymd
from ymd.errors import YmdError

console = Console()
logger = logging.getLogger(__name__)


def weekday_headers(week_start: DayOfWeek) -> list[str]:
    """Short weekday names in column order, starting at week_start."""
    return [DayOfWeek((week_start + i) % 7).name[:2].title() for i in range(7)]


def format_cell(day: Ymd, month: Ymd, today: Ymd) -> str:
    """Format one grid cell: padding days dimmed, today highlighted."""
    text = str(day.day)
    if day == today:
        return f"[bold reverse]{text}[/bold reverse]"
    if (day.year, day.month_index) != (month.year, month.month_index):
        return f"[dim]{text}[/dim]"
    return text


def build_calendar_table(month: Ymd, week_start: DayOfWeek, today: Ymd) -> Table:
    """Build a rich table for the calendar view of a month."""
    table = Table(title=format_month_label(month))
    for header in weekday_headers(week_start):
        table.add_column(header, justify="right")

    for week in month.calendar_weeks_for_month(week_start):
        table.add_row(*(format_cell(day, month, today) for day in week))

    return table


def calendar_command(
    month: str | None = None,
    week_start: str | None = None,
    zone: str | None = None,
) -> None:
    """Print the calendar grid for a month (default: the current month)."""
    settings = settings_or_exit()

    try:
        start_day = parse_week_start(week_start) if week_start is not None else settings.week_start
    except ValueError as e:
        fail(str(e))

    try:
        today = Ymd.today(zone or settings.zone)
        first = parse_month(Month(month) if month else current_month(zone or settings.zone))
        logger.debug("Rendering %s with weeks starting %s", first.value, start_day.name)
        table = build_calendar_table(first, start_day, today)
    except YmdError as e:
        fail(e.message)

    console.print(table)
