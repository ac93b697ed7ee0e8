# playbill/selection.py
from __future__ import annotations

from dataclasses import replace
from typing import Dict, Iterable

from .errors import UnknownIntervalError
from .interval import overlaps
from .model import Interval, SelectionState
from .util.console import eprint, obs_enabled


def empty_selection() -> SelectionState:
    return SelectionState()


def toggle_favorite(state: SelectionState, group_id: str) -> SelectionState:
    if group_id in state.favorites:
        return replace(state, favorites=state.favorites - {group_id})
    return replace(state, favorites=state.favorites | {group_id})


def set_show_only_chosen(state: SelectionState, flag: bool) -> SelectionState:
    return replace(state, show_only_chosen=bool(flag))


def toggle_chosen(state: SelectionState, interval_id: str, candidates: Iterable[Interval]) -> SelectionState:
    """Choose or un-choose one representation.

    Choosing evicts every currently chosen representation of the same play or
    overlapping the new one, so the returned `chosen` set never holds two
    conflicting ids. Raises UnknownIntervalError when choosing an id that is
    not among `candidates`; un-choosing a stale id always succeeds.
    """
    if interval_id in state.chosen:
        return replace(state, chosen=state.chosen - {interval_id})

    by_id: Dict[str, Interval] = {iv.id: iv for iv in candidates}
    target = by_id.get(interval_id)
    if target is None:
        raise UnknownIntervalError(interval_id)

    evicted = set()
    for cid in state.chosen:
        other = by_id.get(cid)
        if other is None:
            continue
        if other.group_id == target.group_id or overlaps(other, target):
            evicted.add(cid)

    if evicted and obs_enabled():
        eprint(f"[playbill.selection] INFO: choosing {interval_id} evicts {sorted(evicted)}")

    return replace(state, chosen=(state.chosen - evicted) | {interval_id})


__all__ = [
    "empty_selection",
    "toggle_favorite",
    "toggle_chosen",
    "set_show_only_chosen",
]
