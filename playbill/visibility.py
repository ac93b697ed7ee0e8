# playbill/visibility.py
from __future__ import annotations

from typing import AbstractSet, Iterable, List, Sequence, Set

from .interval import conflicting_intervals, ensure_category, ensure_unique_ids, overlaps
from .model import BLOCKER, CANDIDATE, Interval, SelectionState, VisibilityResult
from .util.console import eprint, obs_enabled


def representations_in_range(candidates: Iterable[Interval], start_ms: int, end_ms: int) -> List[Interval]:
    """Candidates whose start lies in the half-open window [start_ms, end_ms)."""
    return [iv for iv in candidates if start_ms <= iv.start_ms < end_ms]


def hidden_candidates(
    candidates: Sequence[Interval],
    chosen: AbstractSet[str],
    blockers: Sequence[Interval],
) -> Set[str]:
    """
    Candidates suppressed by conflicts, in rule order (the set only grows):
      1) other representations of a chosen play
      2) representations overlapping a chosen one (chosen ones are exempt)
      3) unchosen representations overlapping a blocker
    Chosen ids that are not among `candidates` are ignored.
    """
    hidden: Set[str] = set()
    chosen_reps = [iv for iv in candidates if iv.id in chosen]

    for rep in chosen_reps:
        for iv in candidates:
            if iv.group_id == rep.group_id and iv.id != rep.id and iv.id not in chosen:
                hidden.add(iv.id)

    for rep in chosen_reps:
        for iv in conflicting_intervals(rep, candidates):
            if iv.id not in chosen:
                hidden.add(iv.id)

    for iv in candidates:
        if iv.id in hidden or iv.id in chosen:
            continue
        if any(overlaps(iv, b) for b in blockers):
            hidden.add(iv.id)

    return hidden


def resolve_visibility(
    candidates: Iterable[Interval],
    favorites: Iterable[str],
    chosen: Iterable[str],
    blockers: Iterable[Interval] = (),
    *,
    show_only_chosen: bool = False,
) -> VisibilityResult:
    """Derive which candidate representations are shown.

    A candidate is visible when its play is a favorite, it is not hidden (or
    is chosen itself), and, in show-only-chosen mode, it is chosen. `hidden`
    reports conflict suppression only; unfavorited candidates are simply not
    visible.
    """
    reps = list(candidates)
    busy = list(blockers)
    ensure_category(reps, CANDIDATE, label="candidates")
    ensure_category(busy, BLOCKER, label="blockers")
    ensure_unique_ids(reps)

    fav = frozenset(favorites)
    chosen_set = frozenset(chosen)

    if obs_enabled():
        known = {iv.id for iv in reps}
        stale = sorted(chosen_set - known)
        if stale:
            eprint(f"[playbill.visibility] INFO: ignoring chosen ids outside candidates count={len(stale)} ids={stale[:5]}")

    hidden = hidden_candidates(reps, chosen_set, busy)

    visible: Set[str] = set()
    for iv in reps:
        is_chosen = iv.id in chosen_set
        if iv.group_id not in fav:
            continue
        if show_only_chosen and not is_chosen:
            continue
        if iv.id in hidden and not is_chosen:
            continue
        visible.add(iv.id)

    return VisibilityResult(
        visible=frozenset(visible),
        hidden=frozenset(hidden),
        order=tuple(iv.id for iv in reps),
    )


def resolve_for_state(
    candidates: Iterable[Interval],
    state: SelectionState,
    blockers: Iterable[Interval] = (),
) -> VisibilityResult:
    return resolve_visibility(
        candidates,
        state.favorites,
        state.chosen,
        blockers,
        show_only_chosen=state.show_only_chosen,
    )


__all__ = [
    "representations_in_range",
    "hidden_candidates",
    "resolve_visibility",
    "resolve_for_state",
]
