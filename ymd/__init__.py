"""Calendar dates without time zones.

Basic usage::

    from ymd import Ymd, DayOfWeek, day_array

    d = Ymd.parse("2023-01-31")
    d.add_months(1).value                           # "2023-02-28"
    d.start_of_week(DayOfWeek.MONDAY).value         # "2023-01-30"
    [x.value for x in day_array("2025-01-30", d.add_days(700))][:2]
"""

from ymd.domain.models import DateString, DayOfWeek, Month
from ymd.domain.ranges import (
    compare_asc,
    compare_desc,
    count_days_inclusive,
    day_array,
    day_generator,
    difference_in_days,
    difference_in_months,
)
from ymd.domain.ymd import (
    DateLike,
    DateSpan,
    Ymd,
    build,
    format,
    is_valid,
    parse,
    to_canonical_string,
    to_ymd,
    today,
)
from ymd.errors import FormatError, InvalidDateError, RangeOrderError, YmdError, ZoneError

__version__ = "0.1.0"

__all__ = [
    "DateLike",
    "DateSpan",
    "DateString",
    "DayOfWeek",
    "FormatError",
    "InvalidDateError",
    "Month",
    "RangeOrderError",
    "Ymd",
    "YmdError",
    "ZoneError",
    "build",
    "compare_asc",
    "compare_desc",
    "count_days_inclusive",
    "day_array",
    "day_generator",
    "difference_in_days",
    "difference_in_months",
    "format",
    "is_valid",
    "parse",
    "to_canonical_string",
    "to_ymd",
    "today",
]
