from txfeed.utils.business_calendar import (
    BusinessCalendar,
    is_business_day,
    previous_business_day,
    resolve_zone,
)
from txfeed.utils.clock import Clock, FixedClock, SystemClock

__all__ = [
    "BusinessCalendar",
    "Clock",
    "FixedClock",
    "SystemClock",
    "is_business_day",
    "previous_business_day",
    "resolve_zone",
]
