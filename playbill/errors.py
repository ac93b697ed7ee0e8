# playbill/errors.py
from __future__ import annotations


class PlaybillError(Exception):
    """Base class for errors raised by playbill."""


class IntervalValidationError(PlaybillError, ValueError):
    """Raised when an interval is malformed (start >= end, bad id, wrong category)."""


class DuplicateIntervalError(PlaybillError, ValueError):
    """Raised when one input list carries the same interval id twice."""

    def __init__(self, interval_id: str) -> None:
        super().__init__(f"duplicate interval id: {interval_id!r}")
        self.interval_id = interval_id


class PlayValidationError(PlaybillError, ValueError):
    """Raised when a play definition cannot be expanded."""


class StateValidationError(PlaybillError, ValueError):
    """Raised when a selection state document is malformed."""


class UnknownIntervalError(PlaybillError, KeyError):
    """Raised when a selection toggle names an interval that is not a known candidate."""

    def __init__(self, interval_id: str) -> None:
        super().__init__(interval_id)
        self.interval_id = interval_id

    def __str__(self) -> str:
        return f"unknown candidate interval: {self.interval_id!r}"


__all__ = [
    "PlaybillError",
    "IntervalValidationError",
    "DuplicateIntervalError",
    "PlayValidationError",
    "StateValidationError",
    "UnknownIntervalError",
]
