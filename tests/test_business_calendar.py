"""
Test suite for the business calendar.
"""

from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from txfeed.exceptions import CalendarError, ConfigurationError, SystemException
from txfeed.utils import (
    BusinessCalendar,
    FixedClock,
    is_business_day,
    previous_business_day,
)

UTC = "UTC"


def _utc(year, month, day, hour=12):
    return datetime(year, month, day, hour, tzinfo=timezone.utc)


class TestPreviousBusinessDay:
    """Weekday and weekend handling."""

    def test_midweek_returns_previous_day(self):
        """Wednesday 2025-04-23 -> Tuesday 2025-04-22."""
        assert previous_business_day(_utc(2025, 4, 23), UTC) == "2025-04-22"

    def test_tuesday_returns_monday(self):
        assert previous_business_day(_utc(2025, 4, 22), UTC) == "2025-04-21"

    def test_monday_returns_previous_friday(self):
        assert previous_business_day(_utc(2025, 4, 21), UTC) == "2025-04-18"

    def test_saturday_returns_friday(self):
        assert previous_business_day(_utc(2025, 4, 26), UTC) == "2025-04-25"

    def test_sunday_returns_friday(self):
        assert previous_business_day(_utc(2025, 4, 27), UTC) == "2025-04-25"

    def test_result_is_always_a_weekday(self):
        """Two full weeks: every result is Mon-Fri and strictly before now."""
        start = _utc(2025, 3, 1)
        for offset in range(14):
            now = start + timedelta(days=offset)
            result = date.fromisoformat(previous_business_day(now, UTC))
            assert is_business_day(result)
            assert result < now.date()
            assert (now.date() - result).days <= 3

    def test_crosses_month_and_year_boundaries(self):
        # Thursday 2026-01-01 -> Wednesday 2025-12-31
        assert previous_business_day(_utc(2026, 1, 1), UTC) == "2025-12-31"
        # Monday 2025-09-01 -> Friday 2025-08-29
        assert previous_business_day(_utc(2025, 9, 1), UTC) == "2025-08-29"


class TestTimezoneHandling:
    """The local date in the requested zone drives the result."""

    def test_zone_shifts_local_date(self):
        # 02:00 UTC Tuesday is still Monday evening in New York
        now = datetime(2025, 4, 22, 2, 0, tzinfo=timezone.utc)

        assert previous_business_day(now, "UTC") == "2025-04-21"
        assert previous_business_day(now, "America/New_York") == "2025-04-18"

    def test_accepts_tzinfo_instance(self):
        now = _utc(2025, 4, 23)
        assert previous_business_day(now, ZoneInfo("Europe/London")) == "2025-04-22"

    def test_naive_datetime_is_treated_as_utc(self):
        naive = datetime(2025, 4, 22, 2, 0)
        aware = naive.replace(tzinfo=timezone.utc)

        assert previous_business_day(naive, "America/New_York") == previous_business_day(
            aware, "America/New_York"
        )

    def test_unknown_zone_is_a_configuration_error(self):
        with pytest.raises(ConfigurationError) as exc_info:
            previous_business_day(_utc(2025, 4, 23), "Mars/Olympus_Mons")

        assert isinstance(exc_info.value, SystemException)
        assert exc_info.value.code == "SYS_4001"
        assert exc_info.value.details == {"setting": "TXFEED_TIMEZONE"}

    def test_non_datetime_is_rejected(self):
        with pytest.raises(CalendarError):
            previous_business_day(date(2025, 4, 23), UTC)


class TestBusinessCalendar:
    """Calendar bound to a zone and driven by a clock."""

    def test_close_of_business_date_uses_clock(self):
        calendar = BusinessCalendar("America/New_York")
        clock = FixedClock(_utc(2025, 4, 23, 15))

        assert calendar.close_of_business_date(clock) == "2025-04-22"

    def test_result_is_deterministic_for_frozen_clock(self):
        calendar = BusinessCalendar(UTC)
        clock = FixedClock(_utc(2025, 4, 21))

        results = {calendar.close_of_business_date(clock) for _ in range(5)}
        assert results == {"2025-04-18"}

    def test_invalid_zone_fails_at_construction(self):
        with pytest.raises(ConfigurationError):
            BusinessCalendar("Not/AZone")
