"""
GestureSession — owns one painting session's in-memory state.

Replaces a module-level "already started" flag: the caller holds the
session, start() / stop() are idempotent, and stop() discards the store,
the drag session and every cooldown. Nothing is persisted.
"""
from __future__ import annotations
import dataclasses
import logging
from typing import List, Optional, Sequence

from app.config import AppConfig, default_config
from core.coordinate_mapper import CoordinateMapper
from core.frame_controller import FrameController
from core.landmark_classifier import LandmarkClassifier
from core.rate_gate import RateGate
from core.voxel_store import VoxelGridStore
from domain.enums import GestureEvent, SessionStatus
from domain.models import FrameData, HandSample, RenderSnapshot
from utils.clock import Clock, monotonic_ms

logger = logging.getLogger(__name__)


class GestureSession:
    """
    Parameters
    ----------
    config : AppConfig
        Validated once here; fixed for the session.
    clock : Callable[[], float]
        Monotonic milliseconds, used when a frame arrives without a
        timestamp. Inject a fake in tests.
    """

    def __init__(self, config: AppConfig = default_config, clock: Clock = monotonic_ms) -> None:
        self._config = config.validate()
        self._clock  = clock
        self._status = SessionStatus.IDLE
        self._store:      Optional[VoxelGridStore]  = None
        self._controller: Optional[FrameController] = None

    # ------------------------------------------------------------------
    # lifetime
    # ------------------------------------------------------------------
    @property
    def started(self) -> bool:
        return self._controller is not None

    @property
    def status(self) -> SessionStatus:
        return self._status

    def set_status(self, status: SessionStatus) -> None:
        if status != self._status:
            logger.info("[STATUS] %s → %s", self._status.value, status.value)
            self._status = status

    def start(self) -> bool:
        """Build fresh state. Returns False if the session was already running."""
        if self.started:
            return False
        cfg = self._config
        mapper = CoordinateMapper(cfg.grid_w, cfg.grid_h, cfg.inset_x, cfg.inset_y)
        self._store = VoxelGridStore(cfg.grid_w, cfg.grid_h)
        self._controller = FrameController(
            classifier=LandmarkClassifier(cfg.pinch_threshold, cfg.thumb_tuck_threshold),
            mapper=mapper,
            store=self._store,
            gate=RateGate(),
            mode=cfg.mode,
            place_cooldown_ms=cfg.place_cooldown_ms,
            erase_cooldown_ms=cfg.erase_cooldown_ms,
            clear_cooldown_ms=cfg.clear_cooldown_ms,
        )
        self.set_status(SessionStatus.READY)
        return True

    def stop(self) -> bool:
        """Discard all session state. Returns False if nothing was running."""
        if not self.started:
            return False
        self._controller.reset_all()
        self._controller = None
        self._store = None
        self.set_status(SessionStatus.STOPPED)
        return True

    def fail(self, status: SessionStatus) -> None:
        """An upstream collaborator failed; the state machine stays down."""
        self.stop()
        self.set_status(status)

    def __enter__(self) -> "GestureSession":
        self.start()
        return self

    def __exit__(self, *_) -> None:
        self.stop()

    # ------------------------------------------------------------------
    # per-frame
    # ------------------------------------------------------------------
    def on_frame(self, hands: Sequence[HandSample], timestamp: Optional[float] = None) -> List[GestureEvent]:
        """
        Feed one detector frame. Must not be called re-entrantly.
        Ignored (returns []) while the session is not started.
        """
        if self._controller is None:
            return []
        now = self._clock() if timestamp is None else timestamp
        return self._controller.process(FrameData(hands=list(hands), timestamp=now))

    def snapshot(self) -> RenderSnapshot:
        """Immutable view for the renderer; compare `version` to skip redraws."""
        if self._controller is None or self._store is None:
            return RenderSnapshot(voxels=frozenset(), version=0,
                                  drag_offset=(0.0, 0.0), pointer=(0.5, 0.5))
        return RenderSnapshot(
            voxels=self._store.voxels,
            version=self._store.version,
            drag_offset=self._store.drag_offset,
            pointer=self._controller.pointer,
            flags=dataclasses.replace(self._controller.flags, ready=True),
        )
