from __future__ import annotations

import datetime as dt
import unittest

from _helpers import BASE, H, blk, rep

from playbill.io import plan_to_dict
from playbill.layout import layout_by_day
from playbill.model import SelectionState
from playbill.plan import build_calendar_plan

UTC = dt.timezone.utc


class TestCalendarPlanContract(unittest.TestCase):
    def test_blockers_and_visible_shows_laid_out_per_day(self) -> None:
        reps = [
            rep("h1", "hamlet", (14, 30), (16, 0), day=1),
            rep("l1", "lear", (15, 0), (16, 15), day=1),
            rep("g1", "godot", (10, 0), (10, 45), day=1),
            rep("h2", "hamlet", (14, 30), (16, 0), day=2),
        ]
        busy = [blk("lunch", (12, 0), (13, 30), day=1), blk("call", (15, 30), (16, 30), day=2)]
        state = SelectionState(favorites=frozenset({"hamlet", "lear"}))

        plan = build_calendar_plan(reps, busy, state, tz=UTC)

        self.assertEqual(plan.visibility.visible, frozenset({"h1", "l1"}))
        self.assertEqual(plan.visibility.hidden, frozenset({"h2"}))
        self.assertEqual([d.day for d in plan.days], ["2026-07-01", "2026-07-02"])

        day1 = {a.interval_id: (a.lane, a.total_lanes) for a in plan.days[0].assignments}
        self.assertEqual(day1, {"lunch": (0, 1), "h1": (0, 2), "l1": (1, 2)})
        self.assertEqual(plan.days[0].max_lanes, 2)

        day2 = {a.interval_id: (a.lane, a.total_lanes) for a in plan.days[1].assignments}
        self.assertEqual(day2, {"call": (0, 1)})
        self.assertEqual(plan.days[1].max_lanes, 1)

    def test_chosen_conflicts_disappear_from_layout(self) -> None:
        reps = [
            rep("h1", "hamlet", (14, 30), (16, 0), day=1),
            rep("l1", "lear", (15, 0), (16, 15), day=1),
        ]
        state = SelectionState(favorites=frozenset({"hamlet", "lear"}), chosen=frozenset({"h1"}))
        plan = build_calendar_plan(reps, [], state, tz=UTC)
        self.assertEqual(len(plan.days), 1)
        self.assertEqual([(a.interval_id, a.lane, a.total_lanes) for a in plan.days[0].assignments], [("h1", 0, 1)])

    def test_window_filters_candidates_not_blockers(self) -> None:
        reps = [rep("a", "p", (10, 0), (11, 0), day=1), rep("b", "p", (10, 0), (11, 0), day=3)]
        busy = [blk("x", (9, 0), (9, 30), day=3)]
        state = SelectionState(favorites=frozenset({"p"}), chosen=frozenset({"b"}))

        plan = build_calendar_plan(reps, busy, state, tz=UTC, window=(BASE, BASE + 48 * H))
        # "b" is outside the window, so its chosen entry is inert and "a" stays visible
        self.assertEqual(plan.visibility.visible, frozenset({"a"}))
        self.assertEqual(plan.visibility.hidden, frozenset())
        self.assertEqual([d.day for d in plan.days], ["2026-07-01", "2026-07-03"])

    def test_plan_to_dict_shape(self) -> None:
        reps = [rep("h1", "hamlet", (14, 30), (16, 0), day=1)]
        plan = build_calendar_plan(reps, [], SelectionState(favorites=frozenset({"hamlet"})), tz=UTC)
        out = plan_to_dict(plan)
        self.assertEqual(out["visibility"], {"visible": ["h1"], "hidden": []})
        item = out["days"][0]["items"][0]
        self.assertEqual(item["id"], "h1")
        self.assertEqual(item["group_id"], "hamlet")
        self.assertEqual((item["lane"], item["total_lanes"]), (0, 1))

    def test_layout_by_day_respects_timezone(self) -> None:
        # 23:30 UTC on July 1 is already July 2 in Paris.
        late = blk("late", (23, 30), (23, 45), day=1)
        paris = layout_by_day([late], tz=dt.timezone(dt.timedelta(hours=2)))
        self.assertEqual(paris[0].day, "2026-07-02")
        self.assertEqual(layout_by_day([late], tz=UTC)[0].day, "2026-07-01")
        self.assertEqual(layout_by_day([], tz=UTC), [])


if __name__ == "__main__":
    unittest.main(verbosity=2)
