# playbill/plan.py
from __future__ import annotations

import datetime as dt
from typing import Iterable, List, Optional, Tuple

from .interval import ensure_unique_ids
from .layout import layout_by_day
from .model import CalendarPlan, Interval, SelectionState
from .visibility import representations_in_range, resolve_for_state


def build_calendar_plan(
    candidates: Iterable[Interval],
    blockers: Iterable[Interval],
    state: SelectionState,
    *,
    tz: Optional[dt.tzinfo] = None,
    window: Optional[Tuple[int, int]] = None,
) -> CalendarPlan:
    """Compute what each calendar day shows and where.

    candidates -> (window filter) -> visibility -> merge with blockers ->
    per-day lane layout. Blockers are never filtered; they are always laid out
    next to the visible shows of their day.
    """
    reps: List[Interval] = list(candidates)
    busy: List[Interval] = list(blockers)
    if window is not None:
        reps = representations_in_range(reps, window[0], window[1])

    visibility = resolve_for_state(reps, state, busy)
    shown = [iv for iv in reps if iv.id in visibility.visible]

    merged = busy + shown
    ensure_unique_ids(merged)
    days = layout_by_day(merged, tz)

    return CalendarPlan(
        visibility=visibility,
        days=tuple(days),
        intervals_by_id={iv.id: iv for iv in merged},
    )


__all__ = ["build_calendar_plan"]
