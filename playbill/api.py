"""playbill.api

Stable *library* entrypoint for playbill.

Policy:
  - Only names listed in __all__ are considered public API.
  - Everything else is internal and may change without notice.
"""

from __future__ import annotations

from playbill.errors import (
    DuplicateIntervalError,
    IntervalValidationError,
    PlaybillError,
    PlayValidationError,
    StateValidationError,
    UnknownIntervalError,
)
from playbill.interval import conflicting_intervals, make_blocker, make_candidate, overlaps
from playbill.io import load_intervals, load_plays, load_state, plan_to_dict
from playbill.layout import compute_layout, layout_by_day
from playbill.model import (
    CalendarPlan,
    DayLayout,
    Interval,
    LayoutAssignment,
    Play,
    SchedulePattern,
    SelectionState,
    VisibilityResult,
)
from playbill.plan import build_calendar_plan
from playbill.schedule import FESTIVAL_END, FESTIVAL_START, expand_plays, make_play, make_schedule_pattern
from playbill.selection import empty_selection, set_show_only_chosen, toggle_chosen, toggle_favorite
from playbill.visibility import representations_in_range, resolve_for_state, resolve_visibility


# --- Public API exports (locked by contract tests) ------------------------
# Keep changes intentional and reviewable.
# Prefer append-only unless you are intentionally reshaping the public surface.
_PUBLIC_EXPORTS = (
    "CalendarPlan",
    "DayLayout",
    "DuplicateIntervalError",
    "FESTIVAL_END",
    "FESTIVAL_START",
    "Interval",
    "IntervalValidationError",
    "LayoutAssignment",
    "Play",
    "PlayValidationError",
    "PlaybillError",
    "SchedulePattern",
    "SelectionState",
    "StateValidationError",
    "UnknownIntervalError",
    "VisibilityResult",
    "build_calendar_plan",
    "compute_layout",
    "conflicting_intervals",
    "empty_selection",
    "expand_plays",
    "layout_by_day",
    "load_intervals",
    "load_plays",
    "load_state",
    "make_blocker",
    "make_candidate",
    "make_play",
    "make_schedule_pattern",
    "overlaps",
    "plan_to_dict",
    "representations_in_range",
    "resolve_for_state",
    "resolve_visibility",
    "set_show_only_chosen",
    "toggle_chosen",
    "toggle_favorite",
)

__all__ = [n for n in _PUBLIC_EXPORTS if n in globals()]
# --- /Public API exports --------------------------------------------------
