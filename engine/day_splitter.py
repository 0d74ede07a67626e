"""Split a stay that crosses midnight into per-day minute contributions."""

from datetime import datetime, time, timedelta
from typing import Dict

from config.defaults import MINUTES_PER_DAY
from engine.date_keys import format_day_key


def _minutes_between(start: datetime, end: datetime) -> int:
    return max(0, round((end - start).total_seconds() / 60))


def _midnight_after(moment: datetime) -> datetime:
    next_day = moment.date() + timedelta(days=1)
    return datetime.combine(next_day, time.min, tzinfo=moment.tzinfo)


def _midnight_of(moment: datetime) -> datetime:
    return datetime.combine(moment.date(), time.min, tzinfo=moment.tzinfo)


def split_stay_by_days(check_in: datetime, check_out: datetime) -> Dict[str, int]:
    """Map of day key -> minutes present for one stay.

    Midnight boundaries are taken in the timestamps' own clock. Full days in
    the middle of a stay count 1440 minutes. A check-out exactly at midnight
    adds nothing to its own day.
    """
    first_day = check_in.date()
    last_day = check_out.date()

    if first_day >= last_day:
        return {format_day_key(first_day): _minutes_between(check_in, check_out)}

    result = {format_day_key(first_day): _minutes_between(check_in, _midnight_after(check_in))}

    day = first_day + timedelta(days=1)
    while day < last_day:
        result[format_day_key(day)] = MINUTES_PER_DAY
        day += timedelta(days=1)

    last_minutes = _minutes_between(_midnight_of(check_out), check_out)
    if last_minutes > 0:
        result[format_day_key(last_day)] = last_minutes

    return result
