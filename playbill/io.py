"""JSON I/O for plays, intervals, selection state and results."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Union

try:
    import orjson  # type: ignore
except Exception:  # pragma: no cover
    orjson = None  # type: ignore

from .errors import PlayValidationError
from .interval import make_interval
from .model import CalendarPlan, Interval, LayoutAssignment, Play, SelectionState, VisibilityResult
from .schedule import make_play, make_schedule_pattern
from .validate import assert_valid_intervals, assert_valid_state

JsonPath = Union[str, Path]


def read_json(path: JsonPath) -> Any:
    p = Path(path)
    return json.loads(p.read_text(encoding="utf-8", errors="replace"))


def dumps_json(obj: Any, *, pretty: bool = False) -> str:
    if orjson is not None:
        opt = orjson.OPT_INDENT_2 if pretty else 0
        return orjson.dumps(obj, option=opt).decode("utf-8")
    if pretty:
        return json.dumps(obj, ensure_ascii=False, indent=2)
    return json.dumps(obj, ensure_ascii=False, separators=(",", ":"))


def write_json(path: JsonPath, obj: Any, *, pretty: bool = False) -> Path:
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(dumps_json(obj, pretty=pretty) + "\n", encoding="utf-8", newline="\n")
    return out_path


# --- plays ------------------------------------------------------------------

def play_from_dict(raw: Any, *, where: str = "play") -> Play:
    """Parse one play in the festival data format.

    Expected format:
      {"id": "p1", "title": "Hamlet", "duration": 90,
       "startTime": {"hour": 14, "minute": 30},
       "schedule": {"type": "daily-except", "exceptDay": 1}}
    """
    if not isinstance(raw, dict):
        raise PlayValidationError(f"{where} must be an object")
    st = raw.get("startTime")
    if not isinstance(st, dict):
        raise PlayValidationError(f"{where}.startTime must be an object with hour/minute")
    sched = raw.get("schedule")
    if not isinstance(sched, dict):
        raise PlayValidationError(f"{where}.schedule must be an object with a type")

    days = sched.get("days", [])
    if not isinstance(days, list):
        raise PlayValidationError(f"{where}.schedule.days must be a list")
    pattern = make_schedule_pattern(
        str(sched.get("type") or ""),
        except_day=sched.get("exceptDay"),
        start_offset=sched.get("startOffset", 0),
        days=days,
    )
    return make_play(
        id=raw.get("id"),
        title=raw.get("title") or "",
        duration_min=raw.get("duration"),
        start_hour=st.get("hour"),
        start_minute=st.get("minute"),
        schedule=pattern,
    )


def plays_from_json(obj: Any) -> List[Play]:
    items = obj.get("plays") if isinstance(obj, dict) else obj
    if not isinstance(items, list):
        raise PlayValidationError("plays document must be a list or an object with a 'plays' list")
    return [play_from_dict(raw, where=f"plays[{i}]") for i, raw in enumerate(items)]


def load_plays(path: JsonPath) -> List[Play]:
    return plays_from_json(read_json(path))


# --- intervals --------------------------------------------------------------

def intervals_from_json(obj: Any, *, label: str = "intervals") -> List[Interval]:
    assert_valid_intervals(obj, label=label)
    return [
        make_interval(
            id=raw["id"],
            start_ms=raw["start_ms"],
            end_ms=raw["end_ms"],
            category=raw["category"],
            group_id=raw.get("group_id"),
            title=raw.get("title") or "",
        )
        for raw in obj
    ]


def load_intervals(path: JsonPath, *, label: str = "intervals") -> List[Interval]:
    return intervals_from_json(read_json(path), label=label)


def interval_to_dict(iv: Interval) -> Dict[str, Any]:
    d: Dict[str, Any] = {
        "id": iv.id,
        "start_ms": iv.start_ms,
        "end_ms": iv.end_ms,
        "category": iv.category,
    }
    if iv.group_id is not None:
        d["group_id"] = iv.group_id
    if iv.title:
        d["title"] = iv.title
    return d


# --- selection state --------------------------------------------------------

def state_from_json(obj: Any) -> SelectionState:
    """Expected format: {"favorites": [...], "chosen": [...], "show_only_chosen": false}"""
    assert_valid_state(obj)
    return SelectionState(
        favorites=frozenset(obj.get("favorites", [])),
        chosen=frozenset(obj.get("chosen", [])),
        show_only_chosen=bool(obj.get("show_only_chosen", False)),
    )


def load_state(path: JsonPath) -> SelectionState:
    return state_from_json(read_json(path))


def state_to_dict(state: SelectionState) -> Dict[str, Any]:
    return {
        "favorites": sorted(state.favorites),
        "chosen": sorted(state.chosen),
        "show_only_chosen": bool(state.show_only_chosen),
    }


# --- results ----------------------------------------------------------------

def layout_to_list(assignments: Iterable[LayoutAssignment]) -> List[Dict[str, Any]]:
    return [{"id": a.interval_id, "lane": a.lane, "total_lanes": a.total_lanes} for a in assignments]


def visibility_to_dict(result: VisibilityResult) -> Dict[str, List[str]]:
    return {"visible": sorted(result.visible), "hidden": sorted(result.hidden)}


def plan_to_dict(plan: CalendarPlan) -> Dict[str, Any]:
    days = []
    for d in plan.days:
        items = []
        for a in d.assignments:
            iv = plan.intervals_by_id[a.interval_id]
            row = interval_to_dict(iv)
            row.update({"lane": a.lane, "total_lanes": a.total_lanes, "cluster": a.cluster})
            items.append(row)
        days.append({"day": d.day, "max_lanes": d.max_lanes, "items": items})
    return {"visibility": visibility_to_dict(plan.visibility), "days": days}


__all__ = [
    "read_json",
    "dumps_json",
    "write_json",
    "play_from_dict",
    "plays_from_json",
    "load_plays",
    "intervals_from_json",
    "load_intervals",
    "interval_to_dict",
    "state_from_json",
    "load_state",
    "state_to_dict",
    "layout_to_list",
    "visibility_to_dict",
    "plan_to_dict",
]
