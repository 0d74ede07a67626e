"""Tests for calendar keys and the calendar policy."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from datetime import date, datetime

from models.calendar import CalendarPolicy, ISO_POLICY
from engine.date_keys import (
    format_day_key,
    parse_day_key,
    format_month_key,
    format_week_key,
    start_of_week,
)
from engine.periods import week_range, month_range


class TestDayKeys:
    def test_format_datetime_ignores_time(self):
        assert format_day_key(datetime(2024, 3, 9, 23, 59)) == "2024-03-09"

    def test_parse_round_trip(self):
        assert parse_day_key("2024-03-09") == date(2024, 3, 9)

    def test_parse_invalid(self):
        with pytest.raises(ValueError):
            parse_day_key("2024-13-01")
        with pytest.raises(TypeError):
            parse_day_key(None)

    def test_month_key(self):
        assert format_month_key(date(2024, 3, 9)) == "2024-03"


class TestWeekKeys:
    def test_default_week_starts_sunday(self):
        policy = CalendarPolicy()
        assert start_of_week(date(2024, 1, 10), policy) == date(2024, 1, 7)
        assert format_week_key(date(2024, 1, 6), policy) == "2024-W01"
        assert format_week_key(date(2024, 1, 7), policy) == "2024-W02"

    def test_default_year_end_belongs_to_next_week_year(self):
        assert format_week_key(date(2023, 12, 31), CalendarPolicy()) == "2024-W01"

    def test_iso_weeks(self):
        assert format_week_key(date(2024, 1, 1), ISO_POLICY) == "2024-W01"
        assert format_week_key(date(2023, 12, 31), ISO_POLICY) == "2023-W52"
        assert format_week_key(date(2021, 1, 1), ISO_POLICY) == "2020-W53"

    def test_iso_matches_isocalendar(self):
        for day in [date(2019, 12, 30), date(2020, 6, 15), date(2026, 1, 1), date(2027, 1, 3)]:
            year, week, _ = day.isocalendar()
            assert format_week_key(day, ISO_POLICY) == f"{year}-W{week:02d}"


class TestCalendarPolicy:
    def test_from_config_overrides(self):
        policy = CalendarPolicy.from_config({"first_weekday": 0, "weekend_days": [4, 5]})
        assert policy.first_weekday == 0
        assert policy.first_week_min_days == 1
        assert policy.is_weekend(date(2024, 1, 5))       # Friday
        assert not policy.is_weekend(date(2024, 1, 7))   # Sunday

    def test_from_config_defaults(self):
        assert CalendarPolicy.from_config(None) == CalendarPolicy()

    def test_invalid_values(self):
        with pytest.raises(ValueError):
            CalendarPolicy(first_weekday=7)
        with pytest.raises(ValueError):
            CalendarPolicy(first_week_min_days=0)
        with pytest.raises(ValueError):
            CalendarPolicy(weekend_days=frozenset({9}))


class TestPeriodRanges:
    def test_week_range(self):
        start, end = week_range(date(2024, 1, 10))
        assert start == datetime(2024, 1, 7, 0, 0)
        assert end.date() == date(2024, 1, 13)
        assert (end.hour, end.minute) == (23, 59)

    def test_month_range_leap_year(self):
        start, end = month_range(date(2024, 2, 15))
        assert start == datetime(2024, 2, 1)
        assert end.date() == date(2024, 2, 29)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
