"""Daily aggregation: fold stays and unmatched check-outs into minutes per day."""

import logging
from functools import reduce
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from models.event import Event
from models.stats import Stats
from engine.date_keys import format_day_key
from engine.day_splitter import split_stay_by_days
from engine.intervals import reconstruct_pairs

logger = logging.getLogger(__name__)

DailyMinutes = Dict[str, float]


def merge_contribution(daily: DailyMinutes, contribution: Mapping[str, float]) -> DailyMinutes:
    """Return a new mapping with ``contribution`` added day by day."""
    merged = dict(daily)
    for day, minutes in contribution.items():
        merged[day] = merged.get(day, 0) + max(0, minutes)
    return merged


def contribution_for(pair: Tuple[Event, Optional[Event]]) -> Dict[str, float]:
    """Minutes per day for one check-out and its matched check-in (if any)."""
    check_out, check_in = pair
    if check_in is not None:
        return split_stay_by_days(check_in.timestamp, check_out.timestamp)
    # No preceding check-in: the recorded duration lands on the check-out day.
    return {format_day_key(check_out.timestamp): check_out.duration or 0}


def build_daily_minutes(
    events: Iterable[Event],
    member_id: Optional[str] = None,
    check_out_filter=None,
) -> DailyMinutes:
    """Minutes present per day for all members, or one when ``member_id`` is set.

    ``check_out_filter`` restricts which check-outs contribute; check-ins are
    still searched across every event passed in.
    """
    if member_id is not None:
        events = [e for e in events if e.member_id == member_id]
    pairs = reconstruct_pairs(events)
    if check_out_filter is not None:
        pairs = [p for p in pairs if check_out_filter(p[0])]

    daily = reduce(merge_contribution, map(contribution_for, pairs), {})
    logger.debug("Aggregated %d check-outs into %d days", len(pairs), len(daily))
    return daily


def summarize(daily: Mapping[str, float]) -> Stats:
    return Stats.from_total(sum(daily.values()), len(daily))


def calculate_stats(events: List[Event], member_id: Optional[str] = None) -> Stats:
    """Total / average minutes and days present over the given events."""
    if not events:
        return Stats()
    return summarize(build_daily_minutes(events, member_id))


def calculate_member_stats(events: List[Event]) -> Dict[str, Stats]:
    """Stats per member, in first-seen member order."""
    members: Dict[str, List[Event]] = {}
    for event in events:
        members.setdefault(event.member_id, []).append(event)
    return {member_id: calculate_stats(member_events) for member_id, member_events in members.items()}
