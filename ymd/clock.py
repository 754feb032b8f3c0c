"""Bridge to the datetime and zoneinfo modules.

Everything that needs a point in time rather than a calendar date goes
through here: resolving zone names, reading the current instant, building
midnight of a date in a zone, and strftime formatting.
"""

from collections.abc import Callable
from datetime import MINYEAR, datetime, timedelta, timezone, tzinfo
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ymd.errors import ZoneError

if TYPE_CHECKING:
    from ymd.domain.ymd import Ymd

# "local" or None means the system zone; "utc" means UTC; anything else is an IANA name
Zone = str | tzinfo | None

# Returns the current instant; should be timezone-aware
Clock = Callable[[], datetime]

LOCAL = "local"
UTC = "utc"


def resolve_zone(zone: Zone) -> tzinfo | None:
    """Resolve a zone identifier to a tzinfo.

    Args:
        zone: "local", "utc", an IANA zone name, a tzinfo, or None.

    Returns:
        The tzinfo to use, or None for the system local zone.

    Raises:
        ZoneError: If the zone is not a name or the name is not known.
    """
    if zone is None or isinstance(zone, tzinfo):
        return zone
    if not isinstance(zone, str):
        raise ZoneError(f"Time zone must be a name, got {zone!r}", {"zone": zone})

    name = zone.strip()
    if name.lower() == LOCAL:
        return None
    if name.lower() == UTC:
        return timezone.utc

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ZoneError(f"Unknown time zone: {zone!r}", {"zone": zone}) from e


def now(zone: Zone = LOCAL, clock: Clock | None = None) -> datetime:
    """Get the current instant as seen in a zone.

    Args:
        zone: Zone to express the instant in.
        clock: Optional clock to read instead of the system clock.

    Returns:
        Timezone-aware datetime.
    """
    instant = clock() if clock is not None else datetime.now(timezone.utc)
    return instant.astimezone(resolve_zone(zone))


def midnight(ymd: "Ymd", zone: Zone = LOCAL) -> datetime:
    """Get the start of a calendar date in a zone.

    Args:
        ymd: Calendar date.
        zone: Zone whose wall clock midnight is wanted.

    Returns:
        Timezone-aware datetime at 00:00 local time on the date.
    """
    tz = resolve_zone(zone)
    wall = datetime(ymd.year, ymd.month_index + 1, ymd.day)
    if tz is None:
        try:
            return wall.astimezone()
        except (OverflowError, ValueError, OSError):
            # 0001-01-01 and 9999-12-31 can fall outside datetime once shifted to UTC;
            # borrow the local offset from two days further inside the range
            inward = timedelta(days=2 if ymd.year == MINYEAR else -2)
            return wall.replace(tzinfo=(wall + inward).astimezone().tzinfo)
    return wall.replace(tzinfo=tz)


def format_date(ymd: "Ymd", pattern: str, zone: Zone = UTC) -> str:
    """Format a calendar date with a strftime pattern.

    The date is rendered as its midnight in the given zone, so zone
    directives like %Z and %z reflect that zone.

    Args:
        ymd: Calendar date.
        pattern: strftime pattern (e.g., "%d %B %Y").
        zone: Zone used for the midnight point in time.

    Returns:
        Formatted string.
    """
    return midnight(ymd, zone).strftime(pattern)
