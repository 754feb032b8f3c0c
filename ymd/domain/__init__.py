"""Domain models and types for ymd.

This package contains the functional core:
- Pure functions with no side effects
- Immutable values
- Easy to test
- Clock and zone access isolated in ymd.clock
"""

from ymd.domain.models import DateString, DayOfWeek, Month
from ymd.domain.ymd import DateLike, DateSpan, Ymd, to_ymd

__all__ = ["DateLike", "DateSpan", "DateString", "DayOfWeek", "Month", "Ymd", "to_ymd"]
