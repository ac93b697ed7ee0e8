#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from playbill.errors import PlaybillError
from playbill.io import dumps_json, intervals_from_json, layout_to_list, read_json, write_json
from playbill.layout import compute_layout


def _die(msg: str, rc: int = 2) -> int:
    print(f"[playbill-layout] ERROR: {msg}", file=sys.stderr)
    return rc


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="playbill-layout",
        description="Assign lanes to one day's intervals: {intervals: [...]} -> [{id, lane, total_lanes}].",
    )
    ap.add_argument("--in", dest="in_json", required=True, help="Input JSON: a list of intervals or {\"intervals\": [...]}")
    ap.add_argument("--out", default=None, help="Output JSON path (default: stdout)")
    ap.add_argument("--pretty", action="store_true", help="Pretty JSON output")
    ns = ap.parse_args(argv)

    p = Path(ns.in_json)
    if not p.exists():
        return _die(f"Missing JSON file: {p}")
    try:
        obj = read_json(p)
    except Exception as e:
        return _die(f"Failed to parse JSON: {p} ({e})")

    raw = obj.get("intervals") if isinstance(obj, dict) else obj
    try:
        intervals = intervals_from_json(raw)
        out = layout_to_list(compute_layout(intervals))
    except PlaybillError as e:
        return _die(f"Layout failed: {e}", rc=3)

    if ns.out:
        out_path = write_json(ns.out, out, pretty=ns.pretty)
        print(f"[playbill-layout] OK: wrote {out_path}", file=sys.stderr)
    else:
        print(dumps_json(out, pretty=ns.pretty))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
