"""Pure functions over pairs of calendar dates.

Every function accepts either a Ymd or a YYYY-MM-DD string for each
endpoint. Strings are parsed once on entry.
"""

from collections.abc import Iterator

from ymd.domain.ymd import DateLike, Ymd, to_ymd
from ymd.errors import RangeOrderError


def difference_in_days(start: DateLike, end: DateLike) -> int:
    """Calculate the signed number of days from start to end.

    Args:
        start: First date.
        end: Second date.

    Returns:
        Days such that start.add_days(result) == end (negative if end is earlier).
    """
    return to_ymd(end).to_date().toordinal() - to_ymd(start).to_date().toordinal()


def difference_in_months(start: DateLike, end: DateLike) -> int:
    """Calculate the signed number of whole calendar months from start to end.

    A month is complete once the day of month is reached again, or the
    end date is the last day of a shorter month. This is the largest m
    with earlier.add_months(m) <= later.

    Examples:
        2025-01-01 to 2025-01-31 is 0, to 2025-02-01 is 1, to 2025-02-02 is 1.
        2025-01-31 to 2025-02-28 is 1.
    """
    first, second = to_ymd(start), to_ymd(end)
    sign = 1
    if second < first:
        first, second = second, first
        sign = -1

    months = (second.year - first.year) * 12 + (second.month_index - first.month_index)
    if second.day < first.day and second != second.end_of_month():
        months -= 1
    return sign * months


def count_days_inclusive(start: DateLike, end: DateLike) -> int:
    """Count the days in a range, both ends included.

    Raises:
        RangeOrderError: If start is after end.
    """
    first, last = to_ymd(start), to_ymd(end)
    if first > last:
        raise RangeOrderError(
            f"Range start {first} is after range end {last}",
            start=first.value,
            end=last.value,
        )
    return difference_in_days(first, last) + 1


def compare_asc(a: DateLike, b: DateLike) -> int:
    """Three-way comparator for ascending sorts (use with functools.cmp_to_key).

    Returns:
        Days from b to a: negative if a is earlier, 0 if equal, positive if later.
    """
    return difference_in_days(b, a)


def compare_desc(a: DateLike, b: DateLike) -> int:
    """Three-way comparator for descending sorts."""
    return -compare_asc(a, b)


def day_generator(start: DateLike, end: DateLike) -> Iterator[Ymd]:
    """Lazily yield every date from start to end, inclusive.

    Each call returns a fresh iterator. Nothing is yielded when start is
    after end.
    """
    return to_ymd(start).iter_days_until(to_ymd(end))


def day_array(start: DateLike, end: DateLike) -> list[Ymd]:
    """List every date from start to end, inclusive (empty if start is after end)."""
    return list(day_generator(start, end))
