# playbill/schedule.py
"""Expansion of play definitions into dated representations.

Each play runs at a fixed wall-clock time on the days its pattern selects.
The output is the flat candidate list the visibility and layout code consume:
ids `rep-0001`, `rep-0002`, ... in generation order (play by play, day by
day), sorted by start afterwards.
"""

from __future__ import annotations

import datetime as dt
from typing import Iterable, List, Optional, Sequence

from .errors import PlayValidationError
from .interval import make_candidate
from .model import MIN_MS, SCHEDULE_KINDS, Interval, Play, SchedulePattern
from .util.console import eprint, obs_enabled
from .util.tz import resolve_tz, wall_clock_epoch_ms, weekday_sunday0

FESTIVAL_START = dt.date(2026, 7, 1)
FESTIVAL_END = dt.date(2026, 7, 31)

MAX_DURATION_MIN = 1440


def _is_int(v: object) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def _check_weekday(v: object, label: str) -> int:
    if not _is_int(v) or not (0 <= v <= 6):  # type: ignore[operator]
        raise PlayValidationError(f"{label} must be a weekday 0-6 (0=Sunday); got {v!r}")
    return int(v)  # type: ignore[arg-type]


def make_schedule_pattern(
    kind: str,
    *,
    except_day: Optional[int] = None,
    start_offset: int = 0,
    days: Iterable[int] = (),
) -> SchedulePattern:
    if kind not in SCHEDULE_KINDS:
        raise PlayValidationError(f"schedule type must be one of {SCHEDULE_KINDS}; got {kind!r}")
    if kind == "daily-except":
        return SchedulePattern(kind=kind, except_day=_check_weekday(except_day, "exceptDay"))
    if kind == "every-other-day":
        if start_offset not in (0, 1) or isinstance(start_offset, bool):
            raise PlayValidationError(f"startOffset must be 0 or 1; got {start_offset!r}")
        return SchedulePattern(kind=kind, start_offset=int(start_offset))
    if kind == "specific-days":
        ds = tuple(sorted({_check_weekday(d, "days[]") for d in days}))
        return SchedulePattern(kind=kind, days=ds)
    return SchedulePattern(kind=kind)


def make_play(
    *,
    id: str,
    title: str,
    duration_min: int,
    start_hour: int,
    start_minute: int,
    schedule: SchedulePattern,
) -> Play:
    if not isinstance(id, str) or not id.strip():
        raise PlayValidationError(f"play id must be a non-empty string; got {id!r}")
    if not _is_int(duration_min) or not (1 <= duration_min < MAX_DURATION_MIN):
        raise PlayValidationError(f"play {id}: duration must be an int in [1, {MAX_DURATION_MIN}); got {duration_min!r}")
    if not _is_int(start_hour) or not (0 <= start_hour <= 23):
        raise PlayValidationError(f"play {id}: startTime.hour must be 0-23; got {start_hour!r}")
    if not _is_int(start_minute) or not (0 <= start_minute <= 59):
        raise PlayValidationError(f"play {id}: startTime.minute must be 0-59; got {start_minute!r}")
    if not isinstance(schedule, SchedulePattern):
        raise PlayValidationError(f"play {id}: schedule must be a SchedulePattern")
    return Play(
        id=id,
        title=str(title or ""),
        duration_min=int(duration_min),
        start_hour=int(start_hour),
        start_minute=int(start_minute),
        schedule=schedule,
    )


def matches_schedule(day: dt.date, pattern: SchedulePattern, range_start: dt.date) -> bool:
    weekday = weekday_sunday0(day)
    if pattern.kind == "daily":
        return True
    if pattern.kind == "daily-except":
        return weekday != pattern.except_day
    if pattern.kind == "every-other-day":
        return (day - range_start).days % 2 == pattern.start_offset
    if pattern.kind == "specific-days":
        return weekday in pattern.days
    return False


def _iter_days(start: dt.date, end: dt.date) -> Iterable[dt.date]:
    d = start
    while d <= end:
        yield d
        d += dt.timedelta(days=1)


def expand_plays(
    plays: Sequence[Play],
    *,
    start_date: dt.date = FESTIVAL_START,
    end_date: dt.date = FESTIVAL_END,
    tz: str | None = "local",
) -> List[Interval]:
    """One candidate per (play, matching day) in [start_date, end_date]."""
    if end_date < start_date:
        raise ValueError(f"end_date {end_date.isoformat()} is before start_date {start_date.isoformat()}")
    tzinfo = resolve_tz(tz)

    seen_plays: set[str] = set()
    reps: List[Interval] = []
    rep_no = 1
    for play in plays:
        if play.id in seen_plays:
            raise PlayValidationError(f"duplicate play id: {play.id!r}")
        seen_plays.add(play.id)

        for day in _iter_days(start_date, end_date):
            if not matches_schedule(day, play.schedule, start_date):
                continue
            start_ms = wall_clock_epoch_ms(day, play.start_hour, play.start_minute, tzinfo)
            reps.append(
                make_candidate(
                    id=f"rep-{rep_no:04d}",
                    start_ms=start_ms,
                    end_ms=start_ms + play.duration_min * MIN_MS,
                    group_id=play.id,
                    title=play.title,
                )
            )
            rep_no += 1

    reps.sort(key=lambda iv: iv.start_ms)

    if obs_enabled():
        eprint(
            f"[playbill.schedule] INFO: expanded plays={len(seen_plays)} reps={len(reps)} "
            f"range={start_date.isoformat()}..{end_date.isoformat()}"
        )
    return reps


__all__ = [
    "FESTIVAL_START",
    "FESTIVAL_END",
    "make_schedule_pattern",
    "make_play",
    "matches_schedule",
    "expand_plays",
]
