"""Period rollup: daily, weekly, monthly, weekday/weekend and overall stats."""

import logging
from datetime import date, datetime
from typing import Callable, Dict, List, Mapping, Optional, Set

from models.calendar import CalendarPolicy
from models.event import Event
from models.stats import PeriodStats, Stats
from engine.aggregator import build_daily_minutes
from engine.date_keys import format_month_key, format_week_key, parse_day_key

logger = logging.getLogger(__name__)


def _group_days(
    daily_minutes: Mapping[str, float],
    bucket_of: Callable[[date], str],
    bucket_label: str,
) -> Dict[str, Stats]:
    """Sum minutes and count distinct days per bucket.

    Day keys that cannot be parsed are logged and left out of the bucket.
    """
    totals: Dict[str, float] = {}
    days: Dict[str, Set[str]] = {}
    for day_key, minutes in daily_minutes.items():
        try:
            bucket = bucket_of(parse_day_key(day_key))
        except (TypeError, ValueError, OverflowError) as e:
            logger.warning("Skipping day key %r in %s rollup: %s", day_key, bucket_label, e)
            continue
        totals[bucket] = totals.get(bucket, 0) + minutes
        days.setdefault(bucket, set()).add(day_key)

    return {
        bucket: Stats.from_total(total, len(days[bucket]))
        for bucket, total in totals.items()
    }


def rollup_daily_minutes(
    daily_minutes: Mapping[str, float],
    policy: Optional[CalendarPolicy] = None,
) -> PeriodStats:
    """Build PeriodStats from a day-key -> minutes mapping."""
    policy = policy or CalendarPolicy()

    daily = {
        day_key: Stats(total_time=minutes, average_time=minutes, days_present=1)
        for day_key, minutes in daily_minutes.items()
    }
    weekly = _group_days(daily_minutes, lambda d: format_week_key(d, policy), "weekly")
    monthly = _group_days(daily_minutes, format_month_key, "monthly")
    partitions = _group_days(
        daily_minutes,
        lambda d: "weekend" if policy.is_weekend(d) else "weekday",
        "weekday/weekend",
    )

    return PeriodStats(
        daily=daily,
        weekly=weekly,
        monthly=monthly,
        weekday=partitions.get("weekday", Stats()),
        weekend=partitions.get("weekend", Stats()),
        total=Stats.from_total(sum(daily_minutes.values()), len(daily_minutes)),
    )


def calculate_period_stats(
    events: List[Event],
    start: datetime,
    end: datetime,
    policy: Optional[CalendarPolicy] = None,
    member_id: Optional[str] = None,
) -> PeriodStats:
    """PeriodStats for check-outs with ``start <= timestamp <= end``.

    Check-ins are looked up across all events given, so a stay that began
    before ``start`` still splits over the days it covered.
    """
    if not events:
        return PeriodStats()
    daily_minutes = build_daily_minutes(
        events,
        member_id=member_id,
        check_out_filter=lambda e: start <= e.timestamp <= end,
    )
    return rollup_daily_minutes(daily_minutes, policy)

