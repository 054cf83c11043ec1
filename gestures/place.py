"""
PlaceGesture — pinch to drop a voxel under the index fingertip.
"""
from __future__ import annotations
import logging
from typing import List

from core.coordinate_mapper import CoordinateMapper
from core.rate_gate import RateGate
from core.voxel_store import VoxelGridStore
from domain.enums import ActionKind, GestureEvent
from domain.models import FrameContext
from gestures.base import Gesture

logger = logging.getLogger(__name__)


class PlaceGesture(Gesture):
    NAME = "PLACE"

    def __init__(
        self,
        store: VoxelGridStore,
        mapper: CoordinateMapper,
        gate: RateGate,
        cooldown_ms: float,
        ok_sign_reserved: bool = False,
    ) -> None:
        self._store    = store
        self._mapper   = mapper
        self._gate     = gate
        self._cooldown = cooldown_ms
        # when the OK sign clears the grid it must not also draw
        self._ok_sign_reserved = ok_sign_reserved

    def detect(self, ctx: FrameContext) -> List[GestureEvent]:
        hand = ctx.primary
        if hand is None:
            return []

        state = hand.state
        # a tight fist can satisfy the pinch distance by accident
        if not state.pinching or state.fist:
            return []
        if self._ok_sign_reserved and state.ok_sign:
            return []

        if not self._gate.try_fire(ActionKind.PLACE, ctx.timestamp, self._cooldown):
            return []

        cell = self._mapper.to_grid(*hand.index_tip)
        if not self._store.add(cell):
            return []
        logger.debug("Placed voxel at %s", tuple(cell))
        return [GestureEvent.VOXEL_PLACED]

    def reset(self) -> None:
        self._gate.reset(ActionKind.PLACE)
