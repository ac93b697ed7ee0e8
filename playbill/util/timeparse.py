# playbill/util/timeparse.py
from __future__ import annotations

import datetime as dt
from typing import Tuple

from .tz import midnight_epoch_ms as _midnight_epoch_ms
from .tz import resolve_tz


def parse_date_yyyy_mm_dd(s: str) -> dt.date:
    return dt.datetime.strptime(s.strip(), "%Y-%m-%d").date()


def day_window_ms(start: dt.date, end: dt.date, tz: str | None = "local") -> Tuple[int, int]:
    """Half-open [start-midnight, day-after-end-midnight) window in epoch ms.

    Both `start` and `end` days are fully covered.
    """
    if end < start:
        raise ValueError(f"window end {end.isoformat()} is before start {start.isoformat()}")
    tzinfo = resolve_tz(tz)
    return _midnight_epoch_ms(start, tzinfo), _midnight_epoch_ms(end + dt.timedelta(days=1), tzinfo)
