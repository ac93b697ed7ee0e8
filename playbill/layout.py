# playbill/layout.py
"""Lane layout for calendar items.

Items of one day are sorted, split into clusters of transitively overlapping
items, and each cluster is packed first-fit into lanes. Every member of a
cluster reports the cluster's lane count as `total_lanes`, so a view can give
all of them the same width (or height, in the horizontal view).

First-fit is greedy and does not always reach the minimum lane count. The
output is what the views and golden fixtures expect; do not replace it with an
optimal colouring.
"""

from __future__ import annotations

import datetime as dt
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .interval import ensure_unique_ids, layout_sort_key
from .model import DayLayout, Interval, LayoutAssignment
from .util.tz import day_key_from_ms, resolve_tz


def cluster_intervals(sorted_intervals: Sequence[Interval]) -> List[List[Interval]]:
    """Split a layout-sorted sequence into overlap clusters.

    An item opens a new cluster when it starts at or after the latest end seen
    in the current cluster (half-open, so touching items are separate).
    """
    groups: List[List[Interval]] = []
    cur: List[Interval] = []
    max_end = 0
    for iv in sorted_intervals:
        if cur and iv.start_ms < max_end:
            cur.append(iv)
            max_end = max(max_end, iv.end_ms)
            continue
        if cur:
            groups.append(cur)
        cur = [iv]
        max_end = iv.end_ms
    if cur:
        groups.append(cur)
    return groups


def pack_lanes(cluster: Sequence[Interval]) -> Tuple[List[Tuple[Interval, int]], int]:
    """First-fit lane packing; returns ((interval, lane) pairs, lane count)."""
    lanes: List[int] = []  # end_ms of the last item placed in each lane
    placed: List[Tuple[Interval, int]] = []
    for iv in cluster:
        lane_index = -1
        for i, lane_end in enumerate(lanes):
            if lane_end <= iv.start_ms:
                lane_index = i
                break
        if lane_index < 0:
            lane_index = len(lanes)
            lanes.append(iv.end_ms)
        else:
            lanes[lane_index] = iv.end_ms
        placed.append((iv, lane_index))
    return placed, len(lanes)


def compute_layout(intervals: Iterable[Interval]) -> List[LayoutAssignment]:
    """Assign (lane, total_lanes) to every interval of a single timeline.

    Callers pre-filter to one day; the engine has no notion of day boundaries.
    Raises DuplicateIntervalError when an id appears twice.
    """
    items = list(intervals)
    if not items:
        return []
    ensure_unique_ids(items)

    out: List[LayoutAssignment] = []
    for cluster_id, group in enumerate(cluster_intervals(sorted(items, key=layout_sort_key))):
        placed, total = pack_lanes(group)
        for iv, lane in placed:
            out.append(LayoutAssignment(interval_id=iv.id, lane=lane, total_lanes=total, cluster=cluster_id))
    return out


def layout_by_id(intervals: Iterable[Interval]) -> Dict[str, Tuple[int, int]]:
    return {a.interval_id: (a.lane, a.total_lanes) for a in compute_layout(intervals)}


def group_by_day(intervals: Iterable[Interval], tz: Optional[dt.tzinfo] = None) -> Dict[str, List[Interval]]:
    """Bucket intervals by the local calendar day of their start."""
    tzinfo = tz if tz is not None else resolve_tz("local")
    groups: Dict[str, List[Interval]] = {}
    for iv in intervals:
        groups.setdefault(day_key_from_ms(iv.start_ms, tzinfo), []).append(iv)
    return groups


def layout_by_day(intervals: Iterable[Interval], tz: Optional[dt.tzinfo] = None) -> List[DayLayout]:
    """Run compute_layout once per local day; days in ascending order."""
    items = list(intervals)
    ensure_unique_ids(items)

    days: List[DayLayout] = []
    for day, arr in sorted(group_by_day(items, tz).items()):
        assignments = tuple(compute_layout(arr))
        max_lanes = max((a.total_lanes for a in assignments), default=1)
        days.append(DayLayout(day=day, assignments=assignments, max_lanes=max_lanes))
    return days


__all__ = [
    "cluster_intervals",
    "pack_lanes",
    "compute_layout",
    "layout_by_id",
    "group_by_day",
    "layout_by_day",
]
