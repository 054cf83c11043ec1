"""
DragGesture — hold a fist and move it to translate the whole drawing.

The palm landmark (0) is tracked in grid-relative units; the offset is only
baked into the voxel set on the frame the fist opens.
"""
from __future__ import annotations
import logging
from typing import List

from core.coordinate_mapper import CoordinateMapper
from core.voxel_store import VoxelGridStore
from domain.enums import GestureEvent
from domain.models import FrameContext
from gestures.base import Gesture

logger = logging.getLogger(__name__)


class DragGesture(Gesture):
    NAME = "DRAG"

    def __init__(self, store: VoxelGridStore, mapper: CoordinateMapper) -> None:
        self._store  = store
        self._mapper = mapper
        self._active = False

    @property
    def active(self) -> bool:
        """True while the primary hand is holding a fist."""
        return self._active

    def detect(self, ctx: FrameContext) -> List[GestureEvent]:
        hand = ctx.primary
        if hand is None or not hand.state.fist:
            self._active = False
            return self._release()

        self._active = True
        position = self._mapper.to_relative(*hand.palm)

        if not self._store.is_dragging:
            self._store.drag_begin(position)
            logger.debug("Drag started at (%.3f, %.3f)", *position)
            return [GestureEvent.DRAG_STARTED]

        self._store.drag_update(position)
        return [GestureEvent.DRAG_MOVED]

    def abandon(self) -> List[GestureEvent]:
        """Interrupted drag (hand lost): drop the session without baking."""
        self._active = False
        if not self._store.is_dragging:
            return []
        self._store.drag_discard()
        logger.info("Drag abandoned")
        return [GestureEvent.DRAG_ABANDONED]

    def reset(self) -> None:
        self.abandon()

    # ------------------------------------------------------------------
    def _release(self) -> List[GestureEvent]:
        if not self._store.is_dragging:
            return []
        if len(self._store) == 0:
            # nothing to bake
            self._store.drag_discard()
            return [GestureEvent.DRAG_ABANDONED]
        self._store.drag_commit()
        return [GestureEvent.DRAG_COMMITTED]
