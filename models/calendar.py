from dataclasses import dataclass, field
from datetime import date
from typing import FrozenSet, Optional

from config.defaults import (
    DEFAULT_FIRST_WEEKDAY, DEFAULT_FIRST_WEEK_MIN_DAYS, DEFAULT_WEEKEND_DAYS,
)


@dataclass(frozen=True)
class CalendarPolicy:
    """Week and weekend boundaries used when rolling days up.

    Weekdays follow ``date.weekday()``: 0 is Monday, 6 is Sunday.
    ``first_week_min_days`` is the January day that week 1 must contain
    (1 for "the week with Jan 1st", 4 for ISO 8601).
    """
    first_weekday: int = DEFAULT_FIRST_WEEKDAY
    first_week_min_days: int = DEFAULT_FIRST_WEEK_MIN_DAYS
    weekend_days: FrozenSet[int] = field(default_factory=lambda: frozenset(DEFAULT_WEEKEND_DAYS))

    def __post_init__(self):
        if not 0 <= self.first_weekday <= 6:
            raise ValueError(f"first_weekday must be 0-6, got {self.first_weekday}")
        if not 1 <= self.first_week_min_days <= 7:
            raise ValueError(f"first_week_min_days must be 1-7, got {self.first_week_min_days}")
        if any(not 0 <= d <= 6 for d in self.weekend_days):
            raise ValueError(f"weekend_days must be weekdays 0-6, got {sorted(self.weekend_days)}")

    @classmethod
    def from_config(cls, calendar_config: Optional[dict] = None) -> "CalendarPolicy":
        cfg = calendar_config or {}
        return cls(
            first_weekday=cfg.get("first_weekday", DEFAULT_FIRST_WEEKDAY),
            first_week_min_days=cfg.get("first_week_min_days", DEFAULT_FIRST_WEEK_MIN_DAYS),
            weekend_days=frozenset(cfg.get("weekend_days", DEFAULT_WEEKEND_DAYS)),
        )

    def is_weekend(self, day: date) -> bool:
        return day.weekday() in self.weekend_days


ISO_POLICY = CalendarPolicy(first_weekday=0, first_week_min_days=4, weekend_days=frozenset({5, 6}))
