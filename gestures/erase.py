"""
EraseGesture — left fist + right index pointing erases the cell under the
right fingertip. While the combo is held no single-hand gesture runs.
"""
from __future__ import annotations
import logging
from typing import List, Optional

from core.coordinate_mapper import CoordinateMapper
from core.rate_gate import RateGate
from core.voxel_store import VoxelGridStore
from domain.enums import ActionKind, GestureEvent
from domain.models import ClassifiedHand, FrameContext
from gestures.base import Gesture

logger = logging.getLogger(__name__)


class EraseGesture(Gesture):
    NAME = "ERASE"

    def __init__(
        self,
        store: VoxelGridStore,
        mapper: CoordinateMapper,
        gate: RateGate,
        cooldown_ms: float,
    ) -> None:
        self._store    = store
        self._mapper   = mapper
        self._gate     = gate
        self._cooldown = cooldown_ms

    @staticmethod
    def pointer_hand(ctx: FrameContext) -> Optional[ClassifiedHand]:
        """The right hand when erase-mode is active, else None."""
        left, right = ctx.left, ctx.right
        if left is None or right is None:
            return None
        if left.state.fist and right.state.pointing:
            return right
        return None

    def detect(self, ctx: FrameContext) -> List[GestureEvent]:
        hand = self.pointer_hand(ctx)
        if hand is None:
            return []

        if not self._gate.try_fire(ActionKind.ERASE, ctx.timestamp, self._cooldown):
            return []

        cell = self._mapper.to_grid(*hand.index_tip)
        if not self._store.remove(cell):
            return []
        logger.debug("Erased voxel at %s", tuple(cell))
        return [GestureEvent.VOXEL_ERASED]

    def reset(self) -> None:
        self._gate.reset(ActionKind.ERASE)
