"""Calendar-derived grouping keys for daily, weekly and monthly buckets."""

from datetime import date, datetime, timedelta
from typing import Union

from models.calendar import CalendarPolicy
from config.defaults import DAY_KEY_FORMAT, MONTH_KEY_FORMAT


def format_day_key(value: Union[date, datetime]) -> str:
    """'YYYY-MM-DD' for the calendar date of ``value`` in its own clock."""
    if isinstance(value, datetime):
        value = value.date()
    return value.strftime(DAY_KEY_FORMAT)


def parse_day_key(key: Union[str, date]) -> date:
    """Inverse of format_day_key. Raises ValueError/TypeError on bad input."""
    if isinstance(key, datetime):
        return key.date()
    if isinstance(key, date):
        return key
    return datetime.strptime(key, DAY_KEY_FORMAT).date()


def format_month_key(day: date) -> str:
    return day.strftime(MONTH_KEY_FORMAT)


def start_of_week(day: date, policy: CalendarPolicy) -> date:
    return day - timedelta(days=(day.weekday() - policy.first_weekday) % 7)


def _first_week_start(year: int, policy: CalendarPolicy) -> date:
    return start_of_week(date(year, 1, policy.first_week_min_days), policy)


def week_year(day: date, policy: CalendarPolicy) -> int:
    """Week-numbering year: may differ from day.year around New Year."""
    year = day.year
    if day >= _first_week_start(year + 1, policy):
        return year + 1
    if day >= _first_week_start(year, policy):
        return year
    return year - 1


def week_number(day: date, policy: CalendarPolicy) -> int:
    year_start = _first_week_start(week_year(day, policy), policy)
    return (start_of_week(day, policy) - year_start).days // 7 + 1


def format_week_key(day: date, policy: CalendarPolicy) -> str:
    """'YYYY-Www' using the policy's week start and week-1 rule."""
    return f"{week_year(day, policy)}-W{week_number(day, policy):02d}"
