"""
VoxelGridStore — the authoritative sparse set of occupied cells plus the
in-progress drag offset.

Every mutating operation returns True when it "changed" something the
renderer has to redraw; each such change also bumps `version`.
"""
from __future__ import annotations
import logging
import math
from typing import FrozenSet, Iterator, Optional, Set

from domain.models import GridCoordinate, Point2D

logger = logging.getLogger(__name__)

_ZERO: Point2D = (0.0, 0.0)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


class VoxelGridStore:
    """
    Parameters
    ----------
    grid_w, grid_h : int
        Bounds used when a committed drag pushes cells off the grid.
    """

    def __init__(self, grid_w: int, grid_h: int) -> None:
        self._grid_w = grid_w
        self._grid_h = grid_h
        self._voxels: Set[GridCoordinate] = set()
        self._anchor: Optional[Point2D] = None
        self._offset: Point2D = _ZERO
        self._version = 0

    # ------------------------------------------------------------------
    # read side
    # ------------------------------------------------------------------
    @property
    def version(self) -> int:
        return self._version

    @property
    def voxels(self) -> FrozenSet[GridCoordinate]:
        return frozenset(self._voxels)

    @property
    def drag_offset(self) -> Point2D:
        """Accumulated, not yet committed, offset in grid-relative units."""
        return self._offset

    @property
    def is_dragging(self) -> bool:
        return self._anchor is not None

    def __len__(self) -> int:
        return len(self._voxels)

    def __contains__(self, coord) -> bool:
        return tuple(coord) in self._voxels

    def __iter__(self) -> Iterator[GridCoordinate]:
        return iter(frozenset(self._voxels))

    # ------------------------------------------------------------------
    # membership
    # ------------------------------------------------------------------
    def add(self, coord) -> bool:
        coord = GridCoordinate(*coord)
        if coord in self._voxels:
            return False
        self._voxels.add(coord)
        return self._changed()

    def remove(self, coord) -> bool:
        coord = GridCoordinate(*coord)
        if coord not in self._voxels:
            return False
        self._voxels.discard(coord)
        return self._changed()

    def clear(self) -> bool:
        if not self._voxels:
            return False
        count = len(self._voxels)
        self._voxels.clear()
        logger.info("Cleared %d voxels", count)
        return self._changed()

    # ------------------------------------------------------------------
    # drag
    # ------------------------------------------------------------------
    def drag_begin(self, anchor_rel: Point2D) -> None:
        """Record the anchor. Voxels are untouched; no double-begin guard."""
        self._anchor = (anchor_rel[0], anchor_rel[1])

    def drag_update(self, current_rel: Point2D) -> bool:
        """
        Add the frame-to-frame delta to the offset and move the anchor,
        so deltas are incremental rather than measured from the first anchor.
        """
        if self._anchor is None:
            return False
        dx = current_rel[0] - self._anchor[0]
        dy = current_rel[1] - self._anchor[1]
        self._offset = (self._offset[0] + dx, self._offset[1] + dy)
        self._anchor = (current_rel[0], current_rel[1])
        return self._changed()

    def drag_commit(self) -> bool:
        """
        Bake the offset into the voxel set. Cells shifted outside the grid
        are dropped for good.
        """
        if self._anchor is None:
            return False

        dx = _round_half_up(self._offset[0] * self._grid_w)
        dy = _round_half_up(self._offset[1] * self._grid_h)

        if dx != 0 or dy != 0:
            before = len(self._voxels)
            self._voxels = {
                GridCoordinate(gx + dx, gy + dy)
                for gx, gy in self._voxels
                if 0 <= gx + dx < self._grid_w and 0 <= gy + dy < self._grid_h
            }
            logger.info("Drag committed by (%d, %d); %d voxels dropped off-grid",
                        dx, dy, before - len(self._voxels))

        self._anchor = None
        self._offset = _ZERO
        return self._changed()

    def drag_discard(self) -> bool:
        """Abandon the session without baking. Changed iff a preview was visible."""
        had_offset = self._offset != _ZERO
        self._anchor = None
        self._offset = _ZERO
        return self._changed() if had_offset else False

    # ------------------------------------------------------------------
    def _changed(self) -> bool:
        self._version += 1
        return True
