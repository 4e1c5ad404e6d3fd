"""
Business calendar utilities for close of business date stamping.

Only weekends are excluded; holidays are not modeled.
"""

from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from txfeed.exceptions import CalendarError, ConfigurationError
from txfeed.utils.clock import Clock

SATURDAY = 5

Zone = Union[str, tzinfo]


def resolve_zone(zone: Zone) -> tzinfo:
    """Turn an IANA zone name (or tzinfo) into a tzinfo instance."""
    if isinstance(zone, tzinfo):
        return zone
    try:
        return ZoneInfo(zone)
    except (ZoneInfoNotFoundError, ValueError, TypeError) as e:
        raise ConfigurationError(
            "TXFEED_TIMEZONE", f"unknown timezone {zone!r}", original_exception=e
        )


def is_business_day(day: date) -> bool:
    """Monday through Friday."""
    return day.weekday() < SATURDAY


def previous_business_day(now: datetime, zone: Zone) -> str:
    """
    Compute the business day before ``now`` as seen in ``zone``.

    Args:
        now: Reference instant; naive values are interpreted as UTC
        zone: IANA timezone name or tzinfo

    Returns:
        The previous Monday-Friday date as ``YYYY-MM-DD``
    """
    if not isinstance(now, datetime):
        raise CalendarError("Reference instant must be a datetime", now=now)

    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    local_day = now.astimezone(resolve_zone(zone)).date()
    day = local_day - timedelta(days=1)
    while not is_business_day(day):
        day -= timedelta(days=1)

    return day.isoformat()


class BusinessCalendar:
    """Previous-business-day calculator bound to a single timezone."""

    def __init__(self, zone: Zone):
        self.zone = resolve_zone(zone)

    def previous_business_day(self, now: datetime) -> str:
        return previous_business_day(now, self.zone)

    def close_of_business_date(self, clock: Clock) -> str:
        """Close of business date for the clock's current instant."""
        return self.previous_business_day(clock.now())
