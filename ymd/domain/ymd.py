"""The Ymd calendar date value type.

A Ymd is a year, a zero-indexed month and a day of month with no time of
day and no zone. It is created from the canonical YYYY-MM-DD string (or
from components that are rendered to that string first), so every route
into the type shares one validity check. All operations return new values.
"""

import calendar
import re
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date, datetime, timedelta
from typing import Union

from ymd.clock import LOCAL, UTC, Clock, Zone, format_date, midnight, now, resolve_zone
from ymd.domain.models import DateString, DayOfWeek
from ymd.errors import FormatError, InvalidDateError

YYYY_MM_DD = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

DAYS_PER_WEEK = 7


def _pad(value: int) -> str:
    return f"{value:02d}"


def _check(text: object) -> date:
    """Validate a canonical date string.

    Raises:
        FormatError: If text is not a YYYY-MM-DD string.
        InvalidDateError: If text is well formed but not a real date.
    """
    if not isinstance(text, str) or not YYYY_MM_DD.fullmatch(text):
        raise FormatError("Invalid date format. Expected yyyy-MM-dd", {"value": text})

    year, month, day = (int(part) for part in text.split("-"))
    try:
        return date(year, month, day)
    except ValueError as e:
        raise InvalidDateError(f"Invalid date: {text}", {"value": text}) from e


def _require_year_in_range(year: int) -> None:
    if not MINYEAR <= year <= MAXYEAR:
        raise InvalidDateError(
            f"Year {year} is outside {MINYEAR}..{MAXYEAR}",
            {"year": year},
        )


@dataclass(frozen=True)
class DateSpan:
    """Inclusive span of calendar dates."""

    start: "Ymd"
    end: "Ymd"


@dataclass(frozen=True, order=True)
class Ymd:
    """Immutable calendar date.

    Attributes:
        year: Year, 1 to 9999.
        month_index: Month, 0 (January) to 11 (December).
        day: Day of month, starting at 1.
    """

    year: int
    month_index: int
    day: int

    def __post_init__(self) -> None:
        for field in (self.year, self.month_index, self.day):
            if not isinstance(field, int) or isinstance(field, bool):
                raise FormatError("Date components must be integers", {"value": field})
        _check(self.value)

    @classmethod
    def parse(cls, text: str) -> "Ymd":
        """Parse a YYYY-MM-DD string.

        Args:
            text: Date in YYYY-MM-DD format.

        Returns:
            The parsed date.

        Raises:
            FormatError: If text does not have the YYYY-MM-DD shape.
            InvalidDateError: If text is not a real calendar date (e.g., 2024-02-30).
        """
        parsed = _check(text)
        return cls(parsed.year, parsed.month - 1, parsed.day)

    @classmethod
    def build(cls, year: int, month_index: int, day: int) -> "Ymd":
        """Build a date from components, validating them as a YYYY-MM-DD string."""
        return cls.parse(f"{year:04d}-{_pad(month_index + 1)}-{_pad(day)}")

    @staticmethod
    def is_valid(text: str) -> bool:
        """Check whether text is a real date in canonical form.

        Strings that the calendar would roll over into a different date
        (like 2024-02-30) are not valid.
        """
        try:
            return Ymd.parse(text).value == text
        except (FormatError, InvalidDateError):
            return False

    @classmethod
    def today(cls, zone: Zone = LOCAL, clock: Clock | None = None) -> "Ymd":
        """Get the current calendar date in a zone.

        Args:
            zone: "local", "utc" or an IANA zone name.
            clock: Optional clock to read instead of the system clock.
        """
        return cls.from_datetime(now(zone, clock))

    @classmethod
    def from_date(cls, value: date) -> "Ymd":
        return cls(value.year, value.month - 1, value.day)

    @classmethod
    def from_datetime(cls, value: datetime, zone: Zone | None = None) -> "Ymd":
        """Extract the calendar date of a point in time.

        Args:
            value: Point in time. Naive values are read as local time when
                a zone is given.
            zone: Zone to read the date in. None takes the datetime's own
                fields as they are.
        """
        if zone is not None:
            value = value.astimezone(resolve_zone(zone))
        return cls(value.year, value.month - 1, value.day)

    @classmethod
    def from_date_as_local(cls, value: datetime) -> "Ymd":
        """Extract the date using the caller's local zone.

        At 17:37 on 11 July in Los Angeles this is 2025-07-11 even though
        it is already 12 July in UTC.
        """
        return cls.from_datetime(value, LOCAL)

    @classmethod
    def from_date_as_utc(cls, value: datetime) -> "Ymd":
        """Extract the date using UTC.

        At 17:37 on 11 July in Los Angeles this is 2025-07-12.
        """
        return cls.from_datetime(value, UTC)

    @property
    def value(self) -> DateString:
        """Canonical YYYY-MM-DD string."""
        return DateString(f"{self.year:04d}-{_pad(self.month_index + 1)}-{_pad(self.day)}")

    def __str__(self) -> str:
        return self.value

    def to_date(self) -> date:
        return date(self.year, self.month_index + 1, self.day)

    def midnight(self, zone: Zone = LOCAL) -> datetime:
        """Start of this date in a zone, as an aware datetime."""
        return midnight(self, zone)

    def format(self, pattern: str, zone: Zone = UTC) -> str:
        """Format with a strftime pattern (e.g., "%A %d %B %Y")."""
        return format_date(self, pattern, zone)

    def is_after(self, other: "DateLike") -> bool:
        return self > to_ymd(other)

    def is_on_or_after(self, other: "DateLike") -> bool:
        return self >= to_ymd(other)

    def is_before(self, other: "DateLike") -> bool:
        return self < to_ymd(other)

    def is_on_or_before(self, other: "DateLike") -> bool:
        return self <= to_ymd(other)

    def is_same(self, other: "DateLike") -> bool:
        return self == to_ymd(other)

    def add_days(self, days: int) -> "Ymd":
        """Move by whole calendar days.

        This is ordinal date arithmetic, not a multiple of 24 hours, so a
        day added across a DST change still lands on the next date.

        Raises:
            InvalidDateError: If the result falls outside years 1..9999.
        """
        try:
            shifted = self.to_date() + timedelta(days=days)
        except OverflowError as e:
            raise InvalidDateError(
                f"{self.value} plus {days} days is out of range",
                {"value": self.value, "days": days},
            ) from e
        return Ymd.from_date(shifted)

    def add_months(self, months: int) -> "Ymd":
        """Move by whole calendar months.

        The day of month is clamped to the last day of the target month,
        so 2023-01-31 plus one month is 2023-02-28.

        Raises:
            InvalidDateError: If the result falls outside years 1..9999.
        """
        year, month_index = divmod(self.year * 12 + self.month_index + months, 12)
        _require_year_in_range(year)
        last_day = calendar.monthrange(year, month_index + 1)[1]
        return Ymd.build(year, month_index, min(self.day, last_day))

    @property
    def day_of_week(self) -> DayOfWeek:
        """Day of the week, 0 (Sunday) to 6 (Saturday)."""
        return DayOfWeek(self.midnight(UTC).isoweekday() % DAYS_PER_WEEK)

    def previous_occurrence_of_weekday(self, weekday: int) -> "Ymd":
        """Nearest earlier date on the given weekday, never this date itself."""
        offset = (self.day_of_week - DayOfWeek(weekday)) % DAYS_PER_WEEK
        return self.add_days(-(offset or DAYS_PER_WEEK))

    def current_or_previous_occurrence_of_weekday(self, weekday: int) -> "Ymd":
        if self.day_of_week == DayOfWeek(weekday):
            return self
        return self.previous_occurrence_of_weekday(weekday)

    def next_occurrence_of_weekday(self, weekday: int) -> "Ymd":
        """Nearest later date on the given weekday, never this date itself."""
        offset = (DayOfWeek(weekday) - self.day_of_week) % DAYS_PER_WEEK
        return self.add_days(offset or DAYS_PER_WEEK)

    def current_or_next_occurrence_of_weekday(self, weekday: int) -> "Ymd":
        if self.day_of_week == DayOfWeek(weekday):
            return self
        return self.next_occurrence_of_weekday(weekday)

    def start_of_week(self, week_start_day: int) -> "Ymd":
        return self.current_or_previous_occurrence_of_weekday(week_start_day)

    def end_of_week(self, week_start_day: int) -> "Ymd":
        return self.current_or_next_occurrence_of_weekday(DayOfWeek(week_start_day).preceding())

    def start_of_month(self) -> "Ymd":
        return Ymd.build(self.year, self.month_index, 1)

    def end_of_month(self) -> "Ymd":
        """Last day of the month (the day before the next month starts)."""
        return Ymd.build(self.year, self.month_index, calendar.monthrange(self.year, self.month_index + 1)[1])

    def calendar_month_date_range(self, week_start_day: int) -> DateSpan:
        """Span of a month calendar view, padded out to whole weeks.

        Args:
            week_start_day: Weekday shown in the first column.

        Returns:
            DateSpan from the first day of the first week to the last day
            of the last week.
        """
        start = self.start_of_month().start_of_week(week_start_day)
        end = self.end_of_month().end_of_week(week_start_day)
        return DateSpan(start=start, end=end)

    def calendar_weeks_for_month(self, week_start_day: int) -> list[list["Ymd"]]:
        """Weeks of a month calendar view, each a list of 7 dates in order."""
        span = self.calendar_month_date_range(week_start_day)
        days = list(span.start.iter_days_until(span.end))
        return [days[i : i + DAYS_PER_WEEK] for i in range(0, len(days), DAYS_PER_WEEK)]

    def iter_days_until(self, end: "Ymd") -> Iterator["Ymd"]:
        """Lazily yield every date from this one to end, inclusive.

        Yields nothing when end is before this date.
        """
        current = self
        while current <= end:
            yield current
            if current == end:
                return
            current = current.add_days(1)


DateLike = Union[Ymd, str]


def to_ymd(value: DateLike) -> Ymd:
    """Normalize a Ymd or YYYY-MM-DD string to a Ymd."""
    if isinstance(value, Ymd):
        return value
    return Ymd.parse(value)


parse = Ymd.parse
build = Ymd.build
is_valid = Ymd.is_valid
today = Ymd.today


def to_canonical_string(value: Ymd) -> DateString:
    return value.value


def format(value: Ymd, pattern: str, zone: Zone = UTC) -> str:  # noqa: A001
    """Format a date with a strftime pattern, rendered at midnight in zone.

    Shadows the builtin format() in modules that star-import ymd; prefer
    ymd.format or Ymd.format there.
    """
    return value.format(pattern, zone)
