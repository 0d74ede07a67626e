"""Record keeping over an in-memory event list.

Every function returns new values; the input list and its events are never
mutated. Check-out durations are computed at write time from the member's
latest check-in, which is the value the aggregation engine later trusts.
"""

import dataclasses
import logging
import uuid
from datetime import datetime, timedelta
from typing import List, Optional, Tuple

from models.event import Event
from config.defaults import (
    CHECK_IN_TYPE, CHECK_OUT_TYPE, EVENT_TYPES,
    RECENT_RECORDS_DAYS, PERIOD_FETCH_MARGIN_DAYS,
)
from engine.date_keys import format_month_key

logger = logging.getLogger(__name__)


class RecordNotFoundError(KeyError):
    """Raised when a record id is not present in the event list."""


def _check_type(event_type: str):
    if event_type not in EVENT_TYPES:
        raise ValueError(f"Unknown event type: {event_type!r}. Use one of {EVENT_TYPES}.")


def active_events(events: List[Event]) -> List[Event]:
    """Drop soft-deleted events."""
    return [e for e in events if not e.deleted]


def get_last_in_record(events: List[Event], member_id: str) -> Optional[Event]:
    """Most recent non-deleted check-in for the member."""
    check_ins = [
        e for e in active_events(events)
        if e.member_id == member_id and e.type == CHECK_IN_TYPE
    ]
    if not check_ins:
        return None
    return max(check_ins, key=lambda e: e.timestamp)


def compute_checkout_duration(last_in: Optional[Event], out_timestamp: datetime) -> Tuple[int, bool]:
    """(duration in whole minutes, crosses_days) for a check-out."""
    if last_in is None:
        return 0, False
    minutes = round((out_timestamp - last_in.timestamp).total_seconds() / 60)
    crosses_days = last_in.timestamp.date() != out_timestamp.date()
    return max(0, minutes), crosses_days


def add_record(
    events: List[Event],
    member_id: str,
    event_type: str,
    timestamp: Optional[datetime] = None,
) -> Tuple[Event, List[Event]]:
    """Create a check-in or check-out; returns (new event, new event list)."""
    _check_type(event_type)
    timestamp = timestamp or datetime.now()

    record = Event(
        id=uuid.uuid4().hex,
        member_id=member_id,
        type=event_type,
        timestamp=timestamp,
    )

    if event_type == CHECK_OUT_TYPE:
        last_in = get_last_in_record(events, member_id)
        duration, crosses_days = compute_checkout_duration(last_in, timestamp)
        record.duration = duration
        record.crosses_days = crosses_days
        if last_in is not None:
            record.in_timestamp = last_in.timestamp
        else:
            logger.warning("Check-out for %s has no previous check-in; duration set to 0", member_id)

    logger.debug("Added %s record %s for %s at %s", event_type, record.id, member_id, timestamp)
    return record, list(events) + [record]


def _replace_record(events: List[Event], record_id: str, **changes) -> List[Event]:
    updated = []
    found = False
    for e in events:
        if e.id == record_id:
            e = dataclasses.replace(e, **changes)
            found = True
        updated.append(e)
    if not found:
        raise RecordNotFoundError(record_id)
    return updated


def delete_record(events: List[Event], record_id: str) -> List[Event]:
    """Soft delete: the record stays in the list flagged ``deleted``."""
    logger.debug("Soft-deleting record %s", record_id)
    return _replace_record(events, record_id, deleted=True)


def update_record(
    events: List[Event],
    record_id: str,
    event_type: Optional[str] = None,
    timestamp: Optional[datetime] = None,
    duration: Optional[float] = None,
) -> List[Event]:
    """Change type, timestamp or duration; arguments left as None are kept."""
    changes = {}
    if event_type:
        _check_type(event_type)
        changes["type"] = event_type
    if timestamp:
        changes["timestamp"] = timestamp
    if duration is not None:
        changes["duration"] = duration
    return _replace_record(events, record_id, **changes)


def get_recent_records(
    events: List[Event],
    member_id: str,
    days: int = RECENT_RECORDS_DAYS,
    now: Optional[datetime] = None,
) -> List[Event]:
    """Non-deleted events from the last ``days`` days, newest first."""
    now = now or datetime.now()
    since = now - timedelta(days=days)
    recent = [
        e for e in active_events(events)
        if e.member_id == member_id and e.timestamp >= since
    ]
    return sorted(recent, key=lambda e: e.timestamp, reverse=True)


def get_records_for_period(
    events: List[Event],
    member_id: str,
    start: datetime,
    end: datetime,
) -> List[Event]:
    """Non-deleted events with ``start <= timestamp <= end``, oldest first."""
    in_period = [
        e for e in active_events(events)
        if e.member_id == member_id and start <= e.timestamp <= end
    ]
    return sorted(in_period, key=lambda e: e.timestamp)


def month_partitions(start: datetime, end: datetime) -> List[str]:
    """'YYYY-MM' keys covering the period widened by the fetch margin."""
    margin = timedelta(days=PERIOD_FETCH_MARGIN_DAYS)
    first = (start - margin).date().replace(day=1)
    last = (end + margin).date().replace(day=1)

    keys = []
    month = first
    while month <= last:
        keys.append(format_month_key(month))
        if month.month == 12:
            month = month.replace(year=month.year + 1, month=1)
        else:
            month = month.replace(month=month.month + 1)
    return keys
