"""
FrameController — orchestrates classification and every gesture detector
once per detector frame.

Design decisions:
  - Store, mapper and rate gate are injected, never created here.
  - Erase-mode is arbitrated first and short-circuits single-hand gestures.
  - Each gesture receives a FrameContext value object.
  - Capabilities (drag / erase / clear) come from GestureMode, so the
    single-hand and two-hand variants share one state machine.
"""
from __future__ import annotations
import logging
from typing import List, Optional, Sequence

from core.coordinate_mapper import CoordinateMapper
from core.landmark_classifier import LandmarkClassifier, is_well_formed
from core.rate_gate import RateGate
from core.voxel_store import VoxelGridStore
from domain.enums import GestureEvent, Handedness
from domain.models import (
    ClassifiedHand, FrameContext, FrameData, GestureMode, GestureState, Point2D, UiFlags,
)
from gestures.clear import ClearGesture
from gestures.drag import DragGesture
from gestures.erase import EraseGesture
from gestures.place import PlaceGesture

logger = logging.getLogger(__name__)


def select_primary(hands: Sequence[ClassifiedHand]) -> Optional[ClassifiedHand]:
    """
    Right-tagged hand first, then any hand not tagged Left, then whatever
    is there. Malformed hands are never selected.
    """
    hands = [hand for hand in hands if hand.valid]
    for hand in hands:
        if hand.handedness == Handedness.RIGHT:
            return hand
    for hand in hands:
        if hand.handedness != Handedness.LEFT:
            return hand
    return hands[0] if hands else None


class FrameController:
    """
    The single entry point for per-frame gesture processing.

    Usage
    -----
    controller = FrameController(classifier, mapper, store, gate, mode, ...)
    events     = controller.process(frame_data)

    Parameters
    ----------
    classifier : LandmarkClassifier
    mapper : CoordinateMapper
    store : VoxelGridStore
        Mutated only from process().
    gate : RateGate
        Cooldown tracker shared by place / erase / clear.
    mode : GestureMode
        Which gestures are enabled.
    place_cooldown_ms, erase_cooldown_ms, clear_cooldown_ms : float
    """

    def __init__(
        self,
        classifier: LandmarkClassifier,
        mapper: CoordinateMapper,
        store: VoxelGridStore,
        gate: RateGate,
        mode: GestureMode,
        place_cooldown_ms: float,
        erase_cooldown_ms: float,
        clear_cooldown_ms: float,
    ) -> None:
        self._classifier = classifier

        # ---- two-hand gesture (highest priority) ----------------------
        self._erase = EraseGesture(store, mapper, gate, erase_cooldown_ms) if mode.has_erase else None

        # ---- single-hand gestures, in evaluation order ----------------
        self._drag  = DragGesture(store, mapper) if mode.has_drag else None
        self._place = PlaceGesture(store, mapper, gate, place_cooldown_ms,
                                   ok_sign_reserved=mode.has_clear)
        self._clear = ClearGesture(store, gate, clear_cooldown_ms) if mode.has_clear else None

        self._pointer: Point2D = (0.5, 0.5)
        self._flags = UiFlags()

    # ------------------------------------------------------------------
    @property
    def pointer(self) -> Point2D:
        """Last primary index-tip position in normalised display coordinates."""
        return self._pointer

    @property
    def flags(self) -> UiFlags:
        return self._flags

    # ------------------------------------------------------------------
    def classify(self, frame: FrameData) -> FrameContext:
        hands = []
        for sample in frame.hands:
            if is_well_formed(sample.landmarks):
                hands.append(ClassifiedHand(sample, self._classifier.classify(sample.landmarks)))
            else:
                logger.debug("Ignoring malformed %s hand", sample.handedness.value)
                hands.append(ClassifiedHand(sample, GestureState(), valid=False))
        return FrameContext(hands=hands, timestamp=frame.timestamp,
                            primary=select_primary(hands))

    def process(self, frame: FrameData) -> List[GestureEvent]:
        """
        Process one frame and return all triggered events.

        Ordering:
        1. Classify every hand, pick the primary one.
        2. No usable hand — abandon any live drag, clear transient flags.
        3. Erase-mode     — left fist + right point; short-circuits.
        4. Single-hand    — drag, then place, then clear.
        """
        ctx = self.classify(frame)
        primary = ctx.primary

        # 2. No usable hand (none detected, or all malformed)
        if primary is None:
            events = self._drag.abandon() if self._drag is not None else []
            self._flags = UiFlags()
            return events

        self._pointer = primary.index_tip

        # 3. Erase-mode
        if self._erase is not None and EraseGesture.pointer_hand(ctx) is not None:
            self._flags = UiFlags(erasing=True)
            return self._erase.detect(ctx)

        # 4. Single-hand gestures
        events: List[GestureEvent] = []
        if self._drag is not None:
            events.extend(self._drag.detect(ctx))
        events.extend(self._place.detect(ctx))
        if self._clear is not None:
            events.extend(self._clear.detect(ctx))

        self._flags = UiFlags(
            pinching=primary.state.pinching,
            dragging=self._drag is not None and self._drag.active,
        )
        if events:
            logger.debug("Frame @%.0fms → %s", ctx.timestamp, [e.value for e in events])
        return events

    def reset_all(self) -> None:
        """Force-reset every gesture detector (e.g. on session stop)."""
        for gesture in (self._erase, self._drag, self._place, self._clear):
            if gesture is not None:
                logger.debug("Resetting %s", gesture.NAME)
                gesture.reset()
        self._flags = UiFlags()
