from __future__ import annotations

from collections.abc import Iterable, Iterator
from datetime import datetime, timedelta, timezone

from .models import Bug, BugState, TimeRange

_HOUR = timedelta(hours=1)


def elapsed_days(timestamp: datetime, now: datetime) -> float:
    """Day distance between ``now`` and ``timestamp`` on hour granularity.

    Whole hours from ``now`` to ``timestamp`` (truncated toward zero), plus
    one, over 24, absolute. The extra hour is long-standing behaviour: a bug
    filed 26 hours ago scores ``|(-26 + 1) / 24|``, about 1.04 days.
    """
    hours = int((timestamp - now) / _HOUR)
    return abs((hours + 1) / 24)


class BugStore:
    """Fixed, ordered collection of bugs answering state/recency queries."""

    def __init__(self, bugs: Iterable[Bug]) -> None:
        self._bugs: tuple[Bug, ...] = tuple(bugs)

    @property
    def bugs(self) -> tuple[Bug, ...]:
        return self._bugs

    def __len__(self) -> int:
        return len(self._bugs)

    def __iter__(self) -> Iterator[Bug]:
        return iter(self._bugs)

    def find_bugs(
        self, state: BugState, time_range: TimeRange, *, now: datetime | None = None
    ) -> list[Bug]:
        # Naive values are taken as local time, matching Bug.
        reference = (now or datetime.now()).astimezone(timezone.utc)
        threshold = time_range.days
        return [
            bug
            for bug in self._bugs
            if bug.state == state and elapsed_days(bug.timestamp, reference) <= threshold
        ]


__all__ = ["BugStore", "elapsed_days"]
