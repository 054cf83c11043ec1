"""
Gesture — one voxel action driven by the classified frame.

A detector reads a FrameContext (classified hands, the primary hand and
the frame timestamp in ms) and is the only code that mutates the
VoxelGridStore for its action. Rate limiting goes through the shared
RateGate with the frame timestamp, so detectors never read a clock.
Hands with valid=False never reach a detector through ctx.primary or
ctx.tagged().

detect() returns the GestureEvents for store changes that actually
happened; reset() drops any per-detector state (cooldown, drag session)
when the session stops.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List

from domain.enums import GestureEvent
from domain.models import FrameContext


class Gesture(ABC):
    """One voxel action: place, erase, clear or drag."""

    # Used in log lines
    NAME: str = "GESTURE"

    @abstractmethod
    def detect(self, ctx: FrameContext) -> List[GestureEvent]:
        """
        Apply this action to the store if the frame calls for it.

        Parameters
        ----------
        ctx : FrameContext
            Only well-formed hands are reachable through ctx.primary,
            ctx.left and ctx.right.

        Returns
        -------
        list[GestureEvent]
            What this action did this frame; empty when it did nothing.
        """

    @abstractmethod
    def reset(self) -> None:
        """Drop cooldown and drag state. Called from FrameController.reset_all()."""
