#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from playbill.errors import PlaybillError
from playbill.io import dumps_json, intervals_from_json, read_json, state_from_json, visibility_to_dict, write_json
from playbill.visibility import resolve_for_state


def _die(msg: str, rc: int = 2) -> int:
    print(f"[playbill-visibility] ERROR: {msg}", file=sys.stderr)
    return rc


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="playbill-visibility",
        description="Resolve visible/hidden candidates: {candidates, favorites, chosen, blockers} -> {visible, hidden}.",
    )
    ap.add_argument("--in", dest="in_json", required=True, help="Request JSON path")
    ap.add_argument("--out", default=None, help="Output JSON path (default: stdout)")
    ap.add_argument("--pretty", action="store_true", help="Pretty JSON output")
    ns = ap.parse_args(argv)

    p = Path(ns.in_json)
    if not p.exists():
        return _die(f"Missing JSON file: {p}")
    try:
        req = read_json(p)
    except Exception as e:
        return _die(f"Failed to parse JSON: {p} ({e})")
    if not isinstance(req, dict):
        return _die(f"request must be an object/dict; got {type(req).__name__}", rc=3)

    try:
        candidates = intervals_from_json(req.get("candidates", []), label="candidates")
        blockers = intervals_from_json(req.get("blockers", []), label="blockers")
        state = state_from_json(
            {
                "favorites": req.get("favorites", []),
                "chosen": req.get("chosen", []),
                "show_only_chosen": req.get("show_only_chosen", False),
            }
        )
        out = visibility_to_dict(resolve_for_state(candidates, state, blockers))
    except PlaybillError as e:
        return _die(f"Resolve failed: {e}", rc=3)

    if ns.out:
        out_path = write_json(ns.out, out, pretty=ns.pretty)
        print(f"[playbill-visibility] OK: wrote {out_path}", file=sys.stderr)
    else:
        print(dumps_json(out, pretty=ns.pretty))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
