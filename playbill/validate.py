"""Input validation helpers (library-facing).

`validate_*` collect every problem as a human-readable string; `assert_*`
raise the first one as a typed error.
"""

from __future__ import annotations

from typing import Any, List

from .errors import IntervalValidationError, StateValidationError
from .model import CANDIDATE, CATEGORIES


def _require(cond: bool, msg: str, errs: List[str]) -> None:
    if not cond:
        errs.append(msg)


def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def validate_intervals(items: Any, *, label: str = "intervals") -> List[str]:
    if not isinstance(items, list):
        return [f"{label} must be a list"]

    errs: List[str] = []
    seen: set[str] = set()
    for i, raw in enumerate(items):
        where = f"{label}[{i}]"
        if not isinstance(raw, dict):
            errs.append(f"{where} must be an object")
            continue

        iid = raw.get("id")
        if not isinstance(iid, str) or not iid.strip():
            errs.append(f"{where}.id must be non-empty string")
        elif iid in seen:
            errs.append(f"{where}.id duplicates an earlier id: {iid!r}")
        else:
            seen.add(iid)

        s = raw.get("start_ms")
        e = raw.get("end_ms")
        _require(_is_int(s), f"{where}.start_ms must be int epoch ms", errs)
        _require(_is_int(e), f"{where}.end_ms must be int epoch ms", errs)
        if _is_int(s) and _is_int(e):
            _require(s < e, f"{where}: start_ms must be < end_ms ({s} >= {e})", errs)

        cat = raw.get("category")
        _require(cat in CATEGORIES, f"{where}.category must be one of {list(CATEGORIES)}", errs)
        if cat == CANDIDATE:
            gid = raw.get("group_id")
            _require(
                isinstance(gid, str) and bool(gid.strip()),
                f"{where}.group_id must be non-empty string for candidates",
                errs,
            )
        title = raw.get("title")
        if title is not None:
            _require(isinstance(title, str), f"{where}.title must be string", errs)

    return errs


def assert_valid_intervals(items: Any, *, label: str = "intervals") -> None:
    errs = validate_intervals(items, label=label)
    if errs:
        raise IntervalValidationError(errs[0])


def validate_state(obj: Any, *, label: str = "state") -> List[str]:
    if not isinstance(obj, dict):
        return [f"{label} must be an object"]

    errs: List[str] = []
    for key in ("favorites", "chosen"):
        v = obj.get(key, [])
        if not isinstance(v, list):
            errs.append(f"{label}.{key} must be a list")
            continue
        for j, x in enumerate(v):
            _require(isinstance(x, str) and bool(x), f"{label}.{key}[{j}] must be non-empty string", errs)
    flag = obj.get("show_only_chosen", False)
    _require(isinstance(flag, bool), f"{label}.show_only_chosen must be bool", errs)
    return errs


def assert_valid_state(obj: Any, *, label: str = "state") -> None:
    errs = validate_state(obj, label=label)
    if errs:
        raise StateValidationError(errs[0])


__all__ = [
    "validate_intervals",
    "assert_valid_intervals",
    "validate_state",
    "assert_valid_state",
]
