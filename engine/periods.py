"""Inclusive datetime bounds for the reporting periods offered in the dashboard."""

import calendar
from datetime import date, datetime, time, timedelta
from typing import Optional, Tuple

from models.calendar import CalendarPolicy
from engine.date_keys import start_of_week


def day_bounds(first: date, last: date) -> Tuple[datetime, datetime]:
    """Start of ``first`` through the last microsecond of ``last``."""
    return datetime.combine(first, time.min), datetime.combine(last, time.max)


def week_range(anchor: date, policy: Optional[CalendarPolicy] = None) -> Tuple[datetime, datetime]:
    policy = policy or CalendarPolicy()
    first = start_of_week(anchor, policy)
    return day_bounds(first, first + timedelta(days=6))


def month_range(anchor: date) -> Tuple[datetime, datetime]:
    last_day = calendar.monthrange(anchor.year, anchor.month)[1]
    return day_bounds(anchor.replace(day=1), anchor.replace(day=last_day))
