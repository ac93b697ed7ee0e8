from __future__ import annotations

import json
import unittest
from pathlib import Path

from playbill.errors import IntervalValidationError, PlayValidationError, StateValidationError
from playbill.interval import make_blocker, make_candidate
from playbill.io import (
    dumps_json,
    intervals_from_json,
    interval_to_dict,
    load_plays,
    plays_from_json,
    state_from_json,
    state_to_dict,
)
from playbill.validate import validate_intervals, validate_state

REPO_ROOT = Path(__file__).resolve().parents[1]
PLAYS = REPO_ROOT / "tests" / "fixtures" / "festival_plays.json"


class TestPlaysIoContract(unittest.TestCase):
    def test_load_fixture_plays(self) -> None:
        plays = load_plays(PLAYS)
        self.assertEqual([p.id for p in plays], ["play-hamlet", "play-lear", "play-medea", "play-godot"])
        hamlet = plays[0]
        self.assertEqual((hamlet.start_hour, hamlet.start_minute, hamlet.duration_min), (14, 30, 90))
        self.assertEqual(hamlet.schedule.kind, "daily-except")
        self.assertEqual(hamlet.schedule.except_day, 1)
        self.assertEqual(plays[2].schedule.days, (3, 4, 5))
        self.assertEqual(plays[1].schedule.start_offset, 0)

    def test_bare_list_accepted(self) -> None:
        raw = json.loads(PLAYS.read_text(encoding="utf-8"))["plays"]
        self.assertEqual(len(plays_from_json(raw)), 4)

    def test_bad_plays_rejected(self) -> None:
        good = {"id": "p", "title": "P", "duration": 60, "startTime": {"hour": 9, "minute": 0}, "schedule": {"type": "daily"}}
        with self.assertRaises(PlayValidationError):
            plays_from_json({"plays": "nope"})
        with self.assertRaises(PlayValidationError):
            plays_from_json([dict(good, startTime=None)])
        with self.assertRaises(PlayValidationError):
            plays_from_json([dict(good, duration="60")])
        with self.assertRaises(PlayValidationError):
            plays_from_json([dict(good, schedule={"type": "specific-days", "days": [9]})])


class TestIntervalIoContract(unittest.TestCase):
    def test_intervals_from_json(self) -> None:
        raw = [
            {"id": "b1", "start_ms": 0, "end_ms": 60000, "category": "blocker", "title": "Lunch"},
            {"id": "r1", "start_ms": 0, "end_ms": 60000, "category": "candidate", "group_id": "p1"},
        ]
        ivs = intervals_from_json(raw)
        self.assertTrue(ivs[0].is_blocker)
        self.assertIsNone(ivs[0].group_id)
        self.assertEqual(ivs[1].group_id, "p1")
        self.assertEqual([interval_to_dict(iv) for iv in ivs], raw)

    def test_validation_collects_all_errors(self) -> None:
        raw = [
            {"id": "a", "start_ms": 10, "end_ms": 10, "category": "blocker"},
            {"id": "a", "start_ms": 0, "end_ms": 5, "category": "candidate"},
            {"id": "", "start_ms": True, "end_ms": 5, "category": "show"},
            "junk",
        ]
        errs = validate_intervals(raw)
        joined = "\n".join(errs)
        self.assertIn("intervals[0]: start_ms must be < end_ms", joined)
        self.assertIn("intervals[1].id duplicates", joined)
        self.assertIn("intervals[1].group_id must be non-empty string", joined)
        self.assertIn("intervals[2].id must be non-empty string", joined)
        self.assertIn("intervals[2].start_ms must be int", joined)
        self.assertIn("intervals[2].category must be one of", joined)
        self.assertIn("intervals[3] must be an object", joined)

        with self.assertRaises(IntervalValidationError):
            intervals_from_json(raw)
        self.assertEqual(validate_intervals({"id": "x"}), ["intervals must be a list"])

    def test_constructors_fail_fast(self) -> None:
        with self.assertRaises(IntervalValidationError):
            make_blocker("b", 100, 100)
        with self.assertRaises(IntervalValidationError):
            make_blocker("b", 200, 100)
        with self.assertRaises(IntervalValidationError):
            make_candidate("r", 0, 100, group_id="")
        with self.assertRaises(ValueError):
            make_blocker("", 0, 100)


class TestStateIoContract(unittest.TestCase):
    def test_state_roundtrip(self) -> None:
        raw = {"favorites": ["p2", "p1"], "chosen": ["rep-0001"], "show_only_chosen": True}
        state = state_from_json(raw)
        self.assertEqual(state.favorites, frozenset({"p1", "p2"}))
        self.assertTrue(state.show_only_chosen)
        self.assertEqual(state_to_dict(state), {"favorites": ["p1", "p2"], "chosen": ["rep-0001"], "show_only_chosen": True})

    def test_state_defaults_and_errors(self) -> None:
        state = state_from_json({})
        self.assertEqual(state.favorites, frozenset())
        self.assertFalse(state.show_only_chosen)
        self.assertEqual(validate_state([]), ["state must be an object"])
        with self.assertRaises(StateValidationError):
            state_from_json({"chosen": "rep-0001"})
        with self.assertRaises(StateValidationError):
            state_from_json({"show_only_chosen": "yes"})


class TestJsonDumpContract(unittest.TestCase):
    def test_dumps_json_compact_and_pretty(self) -> None:
        obj = {"visible": ["a"], "hidden": []}
        self.assertEqual(json.loads(dumps_json(obj)), obj)
        self.assertNotIn("\n", dumps_json(obj))
        self.assertIn("\n", dumps_json(obj, pretty=True))


if __name__ == "__main__":
    unittest.main(verbosity=2)
