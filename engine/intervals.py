"""Interval reconstruction: pair each check-out with its preceding check-in."""

from collections import OrderedDict
from typing import Dict, Iterable, List, Optional, Tuple

from models.event import Event, StayInterval


def find_matching_check_in(check_ins: List[Event], check_out: Event) -> Optional[Event]:
    """Latest check-in strictly before the check-out, or None.

    Each check-out is matched independently, so one check-in can close
    several check-outs. On equal timestamps the first-seen check-in wins.
    """
    match = None
    for candidate in check_ins:
        if candidate.timestamp >= check_out.timestamp:
            continue
        if match is None or candidate.timestamp > match.timestamp:
            match = candidate
    return match


def group_by_member(events: Iterable[Event]) -> Dict[str, List[Event]]:
    """Split events per member, keeping input order inside each group."""
    groups: Dict[str, List[Event]] = OrderedDict()
    for event in events:
        groups.setdefault(event.member_id, []).append(event)
    return groups


def pair_member_events(events: List[Event]) -> List[Tuple[Event, Optional[Event]]]:
    """(check_out, matched check_in or None) for one member's events.

    Check-outs without a recorded duration are dropped: the stored duration
    is the signal that a stay actually took place.
    """
    check_ins = [e for e in events if e.is_check_in]
    pairs = []
    for check_out in events:
        if not check_out.is_check_out or not check_out.duration:
            continue
        pairs.append((check_out, find_matching_check_in(check_ins, check_out)))
    return pairs


def reconstruct_pairs(events: Iterable[Event]) -> List[Tuple[Event, Optional[Event]]]:
    """Pair check-outs for every member in ``events``; members never cross-match."""
    pairs = []
    for member_events in group_by_member(events).values():
        pairs.extend(pair_member_events(member_events))
    return pairs


def reconstruct_intervals(events: Iterable[Event]) -> List[StayInterval]:
    """Matched stays only; unmatched check-outs are left out."""
    return [
        StayInterval(member_id=out.member_id, check_in=matched.timestamp, check_out=out.timestamp)
        for out, matched in reconstruct_pairs(events)
        if matched is not None
    ]
