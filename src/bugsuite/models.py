from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class BugState(str, Enum):
    OPEN = "open"
    CLOSED = "closed"


_RANGE_DAYS = {
    "PAST_DAY": 1,
    "PAST_WEEK": 7,
    "PAST_MONTH": 30,
}


class TimeRange(str, Enum):
    """Named recency window used when filtering bugs."""

    PAST_DAY = "pastDay"
    PAST_WEEK = "pastWeek"
    PAST_MONTH = "pastMonth"

    @property
    def days(self) -> int:
        return _RANGE_DAYS[self.name]

    @classmethod
    def from_name(cls, name: str) -> TimeRange:
        """Resolve ``pastWeek`` style names as well as member names (``PAST_WEEK``)."""
        lookup = name.strip()
        for member in cls:
            if lookup == member.value or lookup.upper() == member.name:
                return member
        raise ValueError(f"Unknown time range: {name!r}")


@dataclass(frozen=True)
class Bug:
    """Immutable bug record: state, point in time and free-form comment."""

    state: BugState
    timestamp: datetime
    comment: str

    def __post_init__(self) -> None:
        # Naive timestamps are taken as local time; stored as UTC.
        object.__setattr__(self, "timestamp", self.timestamp.astimezone(timezone.utc))

    @classmethod
    def from_json_string(cls, text: str) -> Bug:
        from .parser import parse_bug  # noqa: PLC0415

        return parse_bug(text)

    def to_dict(self) -> dict[str, Any]:
        return {
            "state": self.state.value,
            "timestamp": self.timestamp.timestamp(),
            "comment": self.comment,
        }


__all__ = ["Bug", "BugState", "TimeRange"]
