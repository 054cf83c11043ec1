"""
ClearGesture — hold an OK sign to wipe the whole grid.
"""
from __future__ import annotations
from typing import List

from core.rate_gate import RateGate
from core.voxel_store import VoxelGridStore
from domain.enums import ActionKind, GestureEvent
from domain.models import FrameContext
from gestures.base import Gesture


class ClearGesture(Gesture):
    NAME = "CLEAR"

    def __init__(self, store: VoxelGridStore, gate: RateGate, cooldown_ms: float) -> None:
        self._store    = store
        self._gate     = gate
        self._cooldown = cooldown_ms

    def detect(self, ctx: FrameContext) -> List[GestureEvent]:
        hand = ctx.primary
        if hand is None or not hand.state.ok_sign:
            return []
        if not self._gate.try_fire(ActionKind.CLEAR, ctx.timestamp, self._cooldown):
            return []
        if not self._store.clear():
            return []
        return [GestureEvent.CLEARED]

    def reset(self) -> None:
        self._gate.reset(ActionKind.CLEAR)
