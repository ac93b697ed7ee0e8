from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .io import dumps_json, load_intervals, load_plays, load_state, plan_to_dict, write_json
from .errors import PlaybillError
from .model import BLOCKER, SelectionState
from .interval import ensure_category
from .plan import build_calendar_plan
from .schedule import FESTIVAL_END, FESTIVAL_START, expand_plays
from .util.timeparse import day_window_ms, parse_date_yyyy_mm_dd
from .util.tz import default_tz_name, normalize_tz_name, resolve_tz


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="playbill",
        description="Expand festival plays, resolve visible shows and lay out each calendar day as JSON.",
    )
    ap.add_argument("--plays", required=True, help="Plays JSON ({\"plays\": [...]} or a bare list)")
    ap.add_argument("--blockers", default=None, help="Blocker intervals JSON list (default: none)")
    ap.add_argument("--state", default=None, help="Selection state JSON (default: nothing favorited or chosen)")
    ap.add_argument("--start", default=FESTIVAL_START.isoformat(), help="First day YYYY-MM-DD (default: festival start)")
    ap.add_argument("--end", default=FESTIVAL_END.isoformat(), help="Last day YYYY-MM-DD, inclusive (default: festival end)")
    ap.add_argument(
        "--tz",
        default=default_tz_name(),
        help="Wall-clock timezone for show times and day boundaries (default: env PLAYBILL_TZ or 'local')",
    )
    ap.add_argument("--out", default=None, help="Output JSON path (default: stdout)")
    ap.add_argument("--pretty", action="store_true", help="Pretty JSON output")
    args = ap.parse_args(argv)

    tz_name = normalize_tz_name(args.tz)
    try:
        tzinfo = resolve_tz(tz_name)
    except ValueError as e:
        raise SystemExit(f"Invalid --tz value: {e}")

    try:
        start_date = parse_date_yyyy_mm_dd(args.start)
        end_date = parse_date_yyyy_mm_dd(args.end)
        window = day_window_ms(start_date, end_date, tz_name)
    except ValueError as e:
        raise SystemExit(f"Invalid date range: {e}")

    try:
        plays = load_plays(Path(args.plays))
    except Exception as e:
        raise SystemExit(f"Failed to load plays: {e}")

    blockers = []
    if args.blockers:
        try:
            blockers = load_intervals(Path(args.blockers), label="blockers")
            ensure_category(blockers, BLOCKER, label="blockers")
        except Exception as e:
            raise SystemExit(f"Failed to load blockers: {e}")

    state = SelectionState()
    if args.state:
        try:
            state = load_state(Path(args.state))
        except Exception as e:
            raise SystemExit(f"Failed to load state: {e}")

    try:
        candidates = expand_plays(plays, start_date=start_date, end_date=end_date, tz=tz_name)
        plan = build_calendar_plan(candidates, blockers, state, tz=tzinfo, window=window)
    except PlaybillError as e:
        raise SystemExit(f"Failed to build plan: {e}")
    out = plan_to_dict(plan)

    if args.out:
        out_path = write_json(args.out, out, pretty=args.pretty)
        print(f"[playbill] OK: wrote {out_path} days={len(plan.days)} visible={len(plan.visibility.visible)}", file=sys.stderr)
    else:
        print(dumps_json(out, pretty=args.pretty))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
