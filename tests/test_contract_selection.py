from __future__ import annotations

import unittest

from _helpers import rep

from playbill.errors import UnknownIntervalError
from playbill.model import SelectionState
from playbill.selection import empty_selection, set_show_only_chosen, toggle_chosen, toggle_favorite
from playbill.visibility import resolve_for_state


class TestSelectionContract(unittest.TestCase):
    def setUp(self) -> None:
        self.reps = [
            rep("h1", "hamlet", (14, 0), (15, 30), day=1),
            rep("h2", "hamlet", (14, 0), (15, 30), day=2),
            rep("l1", "lear", (15, 0), (16, 0), day=1),
            rep("m1", "medea", (16, 0), (17, 0), day=1),
        ]

    def test_toggle_favorite_returns_new_snapshot(self) -> None:
        s0 = empty_selection()
        s1 = toggle_favorite(s0, "hamlet")
        s2 = toggle_favorite(s1, "hamlet")
        self.assertEqual(s0.favorites, frozenset())
        self.assertEqual(s1.favorites, frozenset({"hamlet"}))
        self.assertEqual(s2.favorites, frozenset())

    def test_toggle_chosen_adds_and_removes(self) -> None:
        s1 = toggle_chosen(empty_selection(), "m1", self.reps)
        self.assertEqual(s1.chosen, frozenset({"m1"}))
        s2 = toggle_chosen(s1, "m1", self.reps)
        self.assertEqual(s2.chosen, frozenset())

    def test_choosing_evicts_same_play(self) -> None:
        s = toggle_chosen(empty_selection(), "h1", self.reps)
        s = toggle_chosen(s, "h2", self.reps)
        self.assertEqual(s.chosen, frozenset({"h2"}))

    def test_choosing_evicts_overlapping(self) -> None:
        s = toggle_chosen(empty_selection(), "h1", self.reps)
        s = toggle_chosen(s, "m1", self.reps)
        self.assertEqual(s.chosen, frozenset({"h1", "m1"}))
        s = toggle_chosen(s, "l1", self.reps)
        # l1 overlaps h1 (15:00-15:30) but only touches m1 (16:00)
        self.assertEqual(s.chosen, frozenset({"l1", "m1"}))

    def test_choosing_unknown_raises_but_unchoosing_stale_is_fine(self) -> None:
        with self.assertRaises(UnknownIntervalError):
            toggle_chosen(empty_selection(), "rep-9999", self.reps)
        with self.assertRaises(KeyError):
            toggle_chosen(empty_selection(), "rep-9999", self.reps)

        stale = SelectionState(chosen=frozenset({"rep-9999"}))
        self.assertEqual(toggle_chosen(stale, "rep-9999", self.reps).chosen, frozenset())

    def test_show_only_chosen_flag(self) -> None:
        s = set_show_only_chosen(empty_selection(), True)
        self.assertTrue(s.show_only_chosen)
        self.assertFalse(set_show_only_chosen(s, False).show_only_chosen)

    def test_toggle_flow_feeds_resolver(self) -> None:
        s = empty_selection()
        for play in ("hamlet", "lear", "medea"):
            s = toggle_favorite(s, play)
        s = toggle_chosen(s, "h1", self.reps)

        res = resolve_for_state(self.reps, s)
        self.assertEqual(res.hidden, frozenset({"h2", "l1"}))
        self.assertEqual(res.visible, frozenset({"h1", "m1"}))


if __name__ == "__main__":
    unittest.main(verbosity=2)
