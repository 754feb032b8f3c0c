"""Domain type definitions for ymd.

These types provide semantic clarity and help with type checking:
- DateString: Calendar date in YYYY-MM-DD format
- Month: Month in YYYY-MM format
- DayOfWeek: Day of the week, Sunday first
"""

from enum import IntEnum
from typing import NewType

# DateString is always in YYYY-MM-DD format (e.g., "2025-01-31")
DateString = NewType("DateString", str)

# Month is always in YYYY-MM format (e.g., "2025-01")
Month = NewType("Month", str)


class DayOfWeek(IntEnum):
    """Day of the week, numbered 0 (Sunday) to 6 (Saturday)."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    def preceding(self) -> "DayOfWeek":
        """Day before this one, wrapping Sunday back to Saturday."""
        return DayOfWeek((self + 6) % 7)
