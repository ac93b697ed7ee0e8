# playbill/util/tz.py
from __future__ import annotations

import datetime as dt
import os
import re
import time
from typing import Optional
from zoneinfo import ZoneInfo

_OFFSET_RE = re.compile(r"^([+-])(\d{2}):?(\d{2})$")
_EPOCH = dt.datetime(1970, 1, 1)


class _SystemLocalTime(dt.tzinfo):
    """The machine's wall clock, following its DST rules date by date.

    Offsets are looked up per instant through the C library, so a July date
    and a December date get their own offsets whatever the current season.
    """

    def _stamp(self, d: dt.datetime) -> float:
        naive = d.replace(tzinfo=None)
        return time.mktime(naive.timetuple()) + naive.microsecond / 1e6

    def utcoffset(self, d: Optional[dt.datetime]) -> dt.timedelta:
        if d is None:
            return dt.timedelta(seconds=-time.timezone)
        return dt.timedelta(seconds=time.localtime(self._stamp(d)).tm_gmtoff)

    def dst(self, d: Optional[dt.datetime]) -> dt.timedelta:
        if d is None or time.localtime(self._stamp(d)).tm_isdst <= 0:
            return dt.timedelta(0)
        return self.utcoffset(d) - dt.timedelta(seconds=-time.timezone)

    def tzname(self, d: Optional[dt.datetime]) -> str:
        if d is None:
            return time.tzname[0]
        return time.localtime(self._stamp(d)).tm_zone

    def fromutc(self, d: dt.datetime) -> dt.datetime:
        secs = (d.replace(tzinfo=None) - _EPOCH).total_seconds()
        return dt.datetime.fromtimestamp(secs).replace(tzinfo=self)

    def __repr__(self) -> str:
        return "LOCAL"


LOCAL = _SystemLocalTime()


def normalize_tz_name(name: Optional[str]) -> str:
    """Normalize a timezone identifier.

    Supported forms:
      - None/"" -> "local"
      - "local" / "system" -> "local" (the machine's wall clock)
      - "UTC" / "Z" / "GMT" -> "UTC"
      - IANA names, e.g. "Europe/Paris"
      - Fixed offsets: "+02:00", "+0200", "-05:00"
    """
    if name is None:
        return "local"
    s = str(name).strip()
    if not s:
        return "local"

    low = s.lower()
    if low in {"local", "system", "native"}:
        return "local"
    if low in {"utc", "z", "gmt", "utc0", "utc+0"}:
        return "UTC"
    return s


def default_tz_name() -> str:
    return normalize_tz_name(os.getenv("PLAYBILL_TZ", "local"))


def resolve_tz(name: Optional[str]) -> dt.tzinfo:
    """Resolve a timezone name into a tzinfo.

    Raises ValueError for invalid timezone identifiers.
    """
    tz_name = normalize_tz_name(name)

    if tz_name == "UTC":
        return dt.timezone.utc

    if tz_name == "local":
        return LOCAL

    m = _OFFSET_RE.match(tz_name)
    if m:
        sign_s, hh_s, mm_s = m.groups()
        hh = int(hh_s)
        mm = int(mm_s)
        if hh > 23 or mm > 59:
            raise ValueError(f"Invalid timezone offset: {tz_name!r}")
        sign = 1 if sign_s == "+" else -1
        return dt.timezone(dt.timedelta(minutes=sign * (hh * 60 + mm)))

    try:
        return ZoneInfo(tz_name)
    except Exception as ex:
        raise ValueError(f"Invalid timezone identifier: {tz_name!r}") from ex


def wall_clock_epoch_ms(d: dt.date, hour: int, minute: int, tz: dt.tzinfo) -> int:
    """Epoch ms for the wall-clock time `hour:minute` on date `d` in `tz`."""
    aware = dt.datetime(d.year, d.month, d.day, int(hour), int(minute), 0, tzinfo=tz)
    return int(aware.timestamp() * 1000)


def midnight_epoch_ms(d: dt.date, tz: dt.tzinfo) -> int:
    return wall_clock_epoch_ms(d, 0, 0, tz)


def day_key_from_ms(ms: int, tz: dt.tzinfo) -> str:
    return dt.datetime.fromtimestamp(int(ms) / 1000.0, tz=tz).date().isoformat()


def weekday_sunday0(d: dt.date) -> int:
    # date.weekday() is Monday=0; schedules count from Sunday=0.
    return (d.weekday() + 1) % 7
