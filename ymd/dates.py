"""Month utilities for ymd.

Pure functions for month ranges and labels.
"""

from ymd.clock import LOCAL, Clock, Zone
from ymd.domain.models import Month
from ymd.domain.ymd import Ymd


def parse_month(month: Month) -> Ymd:
    """Get the first day of a month.

    Args:
        month: Month in YYYY-MM format.

    Returns:
        First day of the month.

    Raises:
        ValueError: If month is not a real YYYY-MM month.
    """
    return Ymd.parse(f"{month}-01")


def format_month_label(ymd: Ymd) -> str:
    """Human-readable month of a date (e.g., "January 2025")."""
    return ymd.format("%B %Y")


def month_range(month: Month) -> tuple[Ymd, Ymd, str]:
    """Calculate date range and label for a month.

    Args:
        month: Month in YYYY-MM format.

    Returns:
        Tuple of (since, until, label) where:
        - since: First day of month
        - until: First day of next month
        - label: Human-readable month (e.g., "January 2025")
    """
    since = parse_month(month)
    until = since.add_months(1)
    return since, until, format_month_label(since)


def current_month(zone: Zone = LOCAL, clock: Clock | None = None) -> Month:
    """Current month in a zone, in YYYY-MM format."""
    return Month(Ymd.today(zone, clock).value[:7])
