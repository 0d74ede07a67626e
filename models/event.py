from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from config.defaults import CHECK_IN_TYPE, CHECK_OUT_TYPE


CHECK_IN = CHECK_IN_TYPE
CHECK_OUT = CHECK_OUT_TYPE


@dataclass
class Event:
    id: str
    member_id: str
    type: str                          # "in" or "out"
    timestamp: datetime
    duration: Optional[float] = None   # Minutes, written on check-out
    deleted: bool = False              # Soft-delete flag
    in_timestamp: Optional[datetime] = None
    crosses_days: bool = False

    @property
    def is_check_in(self) -> bool:
        return self.type == CHECK_IN

    @property
    def is_check_out(self) -> bool:
        return self.type == CHECK_OUT


@dataclass
class StayInterval:
    """A check-in matched with the check-out that closes it."""
    member_id: str
    check_in: datetime
    check_out: datetime

    @property
    def elapsed_minutes(self) -> float:
        return (self.check_out - self.check_in).total_seconds() / 60
