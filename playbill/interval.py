# playbill/interval.py
from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from .errors import DuplicateIntervalError, IntervalValidationError
from .model import BLOCKER, CANDIDATE, CATEGORIES, Interval


def overlaps(a: Interval, b: Interval) -> bool:
    # Half-open: touching endpoints do not overlap.
    return a.start_ms < b.end_ms and b.start_ms < a.end_ms


def layout_sort_key(iv: Interval) -> Tuple[int, int, str]:
    """start asc, end desc (longer first), then id for a stable total order."""
    return (iv.start_ms, -iv.end_ms, iv.id)


def _is_ms(v: object) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def make_interval(
    *,
    id: str,
    start_ms: int,
    end_ms: int,
    category: str,
    group_id: Optional[str] = None,
    title: str = "",
) -> Interval:
    if not isinstance(id, str) or not id.strip():
        raise IntervalValidationError(f"interval id must be a non-empty string; got {id!r}")
    if not _is_ms(start_ms) or not _is_ms(end_ms):
        raise IntervalValidationError(f"interval {id}: start_ms/end_ms must be int epoch ms")
    if start_ms >= end_ms:
        raise IntervalValidationError(f"interval {id}: start_ms must be < end_ms ({start_ms} >= {end_ms})")
    if category not in CATEGORIES:
        raise IntervalValidationError(f"interval {id}: category must be one of {CATEGORIES}; got {category!r}")
    if category == CANDIDATE:
        if not isinstance(group_id, str) or not group_id.strip():
            raise IntervalValidationError(f"candidate {id}: group_id must be a non-empty string")
    else:
        group_id = None
    return Interval(
        id=id,
        start_ms=int(start_ms),
        end_ms=int(end_ms),
        category=category,
        group_id=group_id,
        title=str(title or ""),
    )


def make_blocker(id: str, start_ms: int, end_ms: int, title: str = "") -> Interval:
    return make_interval(id=id, start_ms=start_ms, end_ms=end_ms, category=BLOCKER, title=title)


def make_candidate(id: str, start_ms: int, end_ms: int, group_id: str, title: str = "") -> Interval:
    return make_interval(
        id=id, start_ms=start_ms, end_ms=end_ms, category=CANDIDATE, group_id=group_id, title=title
    )


def ensure_unique_ids(intervals: Iterable[Interval]) -> None:
    seen: set[str] = set()
    for iv in intervals:
        if iv.id in seen:
            raise DuplicateIntervalError(iv.id)
        seen.add(iv.id)


def ensure_category(intervals: Iterable[Interval], category: str, *, label: str) -> None:
    for iv in intervals:
        if iv.category != category:
            raise IntervalValidationError(
                f"{label}: interval {iv.id} has category {iv.category!r}, expected {category!r}"
            )


def conflicting_intervals(target: Interval, others: Sequence[Interval]) -> List[Interval]:
    """All intervals in `others` (other than `target` itself) overlapping `target`."""
    return [iv for iv in others if iv.id != target.id and overlaps(target, iv)]


__all__ = [
    "overlaps",
    "layout_sort_key",
    "make_interval",
    "make_blocker",
    "make_candidate",
    "ensure_unique_ids",
    "ensure_category",
    "conflicting_intervals",
]
