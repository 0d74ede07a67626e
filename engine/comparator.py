"""Rank members by accumulated time."""

from typing import Dict, List, Mapping, Optional

from models.stats import Stats


def compare_members_stats(
    members_stats: Mapping[str, Stats],
    names: Optional[Mapping[str, str]] = None,
) -> List[Dict]:
    """[{name, total_time}] by descending total; ties keep input order."""
    names = names or {}
    rows = [
        {"name": names.get(member_id, member_id), "total_time": stats.total_time}
        for member_id, stats in members_stats.items()
    ]
    return sorted(rows, key=lambda r: r["total_time"], reverse=True)
