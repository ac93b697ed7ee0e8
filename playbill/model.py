# playbill/model.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Tuple

MIN_MS = 60_000

BLOCKER = "blocker"
CANDIDATE = "candidate"
CATEGORIES = (BLOCKER, CANDIDATE)


@dataclass(frozen=True)
class Interval:
    """A time-bound calendar item (UTC epoch milliseconds, half-open).

    `category` is fixed at construction: blockers are user-owned busy slots,
    candidates are show representations belonging to one play (`group_id`).
    Build instances through `playbill.interval.make_blocker` /
    `make_candidate`, which enforce `start_ms < end_ms`.
    """

    id: str
    start_ms: int
    end_ms: int
    category: str
    group_id: Optional[str] = None
    title: str = ""

    @property
    def is_blocker(self) -> bool:
        return self.category == BLOCKER

    @property
    def is_candidate(self) -> bool:
        return self.category == CANDIDATE

    @property
    def duration_min(self) -> int:
        return int((self.end_ms - self.start_ms) // MIN_MS)


SCHEDULE_KINDS = ("daily", "daily-except", "every-other-day", "specific-days")


@dataclass(frozen=True)
class SchedulePattern:
    kind: str
    except_day: Optional[int] = None    # daily-except, 0=Sunday
    start_offset: int = 0               # every-other-day, 0|1
    days: Tuple[int, ...] = ()          # specific-days


@dataclass(frozen=True)
class Play:
    id: str
    title: str
    duration_min: int
    start_hour: int
    start_minute: int
    schedule: SchedulePattern


@dataclass(frozen=True)
class LayoutAssignment:
    interval_id: str
    lane: int
    total_lanes: int
    cluster: int = 0


@dataclass(frozen=True)
class DayLayout:
    day: str                                # YYYY-MM-DD in the bucketing tz
    assignments: Tuple[LayoutAssignment, ...]
    max_lanes: int = 1


@dataclass(frozen=True)
class VisibilityResult:
    visible: FrozenSet[str]
    hidden: FrozenSet[str]
    order: Tuple[str, ...] = ()             # candidate ids in input order

    def visible_ids(self) -> List[str]:
        return [i for i in self.order if i in self.visible]

    def hidden_ids(self) -> List[str]:
        return [i for i in self.order if i in self.hidden]


@dataclass(frozen=True)
class SelectionState:
    """Caller-owned selection snapshot. Never mutated; toggles return a copy."""

    favorites: FrozenSet[str] = frozenset()
    chosen: FrozenSet[str] = frozenset()
    show_only_chosen: bool = False


@dataclass(frozen=True)
class CalendarPlan:
    visibility: VisibilityResult
    days: Tuple[DayLayout, ...]
    intervals_by_id: Dict[str, Interval] = field(default_factory=dict)


__all__ = [
    "BLOCKER",
    "CANDIDATE",
    "CATEGORIES",
    "SCHEDULE_KINDS",
    "Interval",
    "SchedulePattern",
    "Play",
    "LayoutAssignment",
    "DayLayout",
    "VisibilityResult",
    "SelectionState",
    "CalendarPlan",
]
