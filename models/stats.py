from dataclasses import dataclass, field
from typing import Dict


@dataclass
class Stats:
    total_time: float = 0      # Minutes
    average_time: float = 0    # Minutes per present day
    days_present: int = 0

    @classmethod
    def from_total(cls, total_time: float, days_present: int) -> "Stats":
        average = total_time / days_present if days_present > 0 else 0
        return cls(total_time=total_time, average_time=average, days_present=days_present)


@dataclass
class PeriodStats:
    daily: Dict[str, Stats] = field(default_factory=dict)     # "YYYY-MM-DD"
    weekly: Dict[str, Stats] = field(default_factory=dict)    # "YYYY-Www"
    monthly: Dict[str, Stats] = field(default_factory=dict)   # "YYYY-MM"
    weekday: Stats = field(default_factory=Stats)
    weekend: Stats = field(default_factory=Stats)
    total: Stats = field(default_factory=Stats)
