"""Tests for record keeping over event lists."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from datetime import datetime

from models.event import Event
from engine.records import (
    RecordNotFoundError,
    active_events,
    add_record,
    compute_checkout_duration,
    delete_record,
    get_last_in_record,
    get_recent_records,
    get_records_for_period,
    month_partitions,
    update_record,
)


def make_event(event_id, event_type, ts, member="m1", duration=None, deleted=False):
    return Event(event_id, member, event_type, ts, duration, deleted)


class TestLastInRecord:
    def test_latest_check_in(self):
        events = [
            make_event("i1", "in", datetime(2024, 1, 1, 9)),
            make_event("i2", "in", datetime(2024, 1, 2, 9)),
            make_event("i3", "in", datetime(2024, 1, 3, 9), member="other"),
        ]
        assert get_last_in_record(events, "m1").id == "i2"

    def test_deleted_ignored(self):
        events = [
            make_event("i1", "in", datetime(2024, 1, 1, 9)),
            make_event("i2", "in", datetime(2024, 1, 2, 9), deleted=True),
        ]
        assert get_last_in_record(events, "m1").id == "i1"

    def test_none_when_missing(self):
        assert get_last_in_record([], "m1") is None


class TestComputeCheckoutDuration:
    def test_rounded_minutes(self):
        last_in = make_event("i1", "in", datetime(2024, 1, 1, 9, 0, 0))
        assert compute_checkout_duration(last_in, datetime(2024, 1, 1, 10, 30, 40)) == (91, False)

    def test_clamped_at_zero(self):
        last_in = make_event("i1", "in", datetime(2024, 1, 1, 9, 0))
        assert compute_checkout_duration(last_in, datetime(2024, 1, 1, 8, 0)) == (0, False)

    def test_crosses_days(self):
        last_in = make_event("i1", "in", datetime(2024, 1, 1, 22, 0))
        assert compute_checkout_duration(last_in, datetime(2024, 1, 2, 1, 0)) == (180, True)

    def test_no_check_in(self):
        assert compute_checkout_duration(None, datetime(2024, 1, 1, 8, 0)) == (0, False)


class TestAddRecord:
    def test_check_in(self):
        record, events = add_record([], "m1", "in", datetime(2024, 1, 1, 9))
        assert record.type == "in"
        assert record.duration is None
        assert events == [record]

    def test_check_out_computes_duration(self):
        existing = [make_event("i1", "in", datetime(2024, 1, 1, 9))]
        record, events = add_record(existing, "m1", "out", datetime(2024, 1, 1, 10, 30))
        assert record.duration == 90
        assert record.in_timestamp == datetime(2024, 1, 1, 9)
        assert record.crosses_days is False
        assert len(events) == 2
        assert len(existing) == 1

    def test_check_out_without_check_in(self):
        record, _ = add_record([], "m1", "out", datetime(2024, 1, 1, 10))
        assert record.duration == 0
        assert record.in_timestamp is None

    def test_unknown_type(self):
        with pytest.raises(ValueError):
            add_record([], "m1", "lunch", datetime(2024, 1, 1, 10))

    def test_ids_unique(self):
        first, events = add_record([], "m1", "in", datetime(2024, 1, 1, 9))
        second, _ = add_record(events, "m1", "in", datetime(2024, 1, 1, 9))
        assert first.id != second.id


class TestDeleteAndUpdate:
    def test_soft_delete(self):
        events = [make_event("i1", "in", datetime(2024, 1, 1, 9))]
        updated = delete_record(events, "i1")
        assert updated[0].deleted is True
        assert events[0].deleted is False
        assert active_events(updated) == []

    def test_delete_unknown(self):
        with pytest.raises(RecordNotFoundError):
            delete_record([], "missing")

    def test_update_fields(self):
        events = [make_event("o1", "out", datetime(2024, 1, 1, 9), duration=10)]
        updated = update_record(events, "o1", duration=25, timestamp=datetime(2024, 1, 1, 9, 15))
        assert updated[0].duration == 25
        assert updated[0].timestamp == datetime(2024, 1, 1, 9, 15)
        assert updated[0].type == "out"

    def test_update_invalid_type(self):
        events = [make_event("o1", "out", datetime(2024, 1, 1, 9))]
        with pytest.raises(ValueError):
            update_record(events, "o1", event_type="break")


class TestQueries:
    def test_recent_records_newest_first(self):
        now = datetime(2024, 1, 10, 12)
        events = [
            make_event("old", "in", datetime(2024, 1, 1, 9)),
            make_event("a", "in", datetime(2024, 1, 8, 9)),
            make_event("b", "out", datetime(2024, 1, 8, 17), duration=480),
            make_event("c", "in", datetime(2024, 1, 9, 9), deleted=True),
        ]
        recent = get_recent_records(events, "m1", days=7, now=now)
        assert [e.id for e in recent] == ["b", "a"]

    def test_records_for_period_oldest_first(self):
        events = [
            make_event("b", "out", datetime(2024, 1, 15, 17), duration=480),
            make_event("a", "in", datetime(2024, 1, 15, 9)),
            make_event("x", "in", datetime(2024, 2, 1, 9)),
        ]
        result = get_records_for_period(events, "m1", datetime(2024, 1, 1), datetime(2024, 1, 31, 23, 59))
        assert [e.id for e in result] == ["a", "b"]

    def test_month_partitions_widened(self):
        keys = month_partitions(datetime(2024, 1, 1), datetime(2024, 2, 29))
        assert keys == ["2023-12", "2024-01", "2024-02", "2024-03"]

    def test_month_partitions_single_month(self):
        assert month_partitions(datetime(2024, 5, 10), datetime(2024, 5, 20)) == ["2024-05"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
