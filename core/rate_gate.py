"""
RateGate — centralises all cooldown state so gesture classes
don't need to track time themselves.

Time is always supplied by the caller (the frame timestamp), never read here.
"""
from __future__ import annotations
from typing import Dict

from domain.enums import ActionKind


class RateGate:
    """
    Per-action cooldown tracker.

    Usage
    -----
    gate = RateGate()
    if gate.try_fire(ActionKind.PLACE, now_ms, 35):
        ...  # fire the action
    """

    def __init__(self) -> None:
        self._last: Dict[ActionKind, float] = {}

    def try_fire(self, action: ActionKind, now: float, min_interval_ms: float) -> bool:
        """
        Return True (and record `now`) if at least `min_interval_ms` elapsed
        since the last accepted firing of this action. State is untouched
        on refusal.
        """
        last = self._last.get(action)
        if last is None or now - last >= min_interval_ms:
            self._last[action] = now
            return True
        return False

    def reset(self, action: ActionKind) -> None:
        """Force-reset a specific cooldown (next call to try_fire() will succeed)."""
        self._last.pop(action, None)

    def reset_all(self) -> None:
        self._last.clear()
