"""
CoordinateMapper — normalised display position → clamped grid cell.
"""
from __future__ import annotations
import math

from domain.models import GridCoordinate, Point2D
from utils.geometry import clamp

# (0.82 - 0.18) / 0.64 evaluates to 0.9999999999999998; snap such values
# onto the cell boundary before flooring.
_CELL_EPSILON_DIGITS = 9


def _floor_cell(value: float) -> int:
    return math.floor(round(value, _CELL_EPSILON_DIGITS))


class CoordinateMapper:
    """
    Parameters
    ----------
    grid_w, grid_h : int
        Grid dimensions in cells.
    inset_x, inset_y : float
        Fractional margin on each side of the visible grid, in (0, 0.5).
    """

    def __init__(self, grid_w: int, grid_h: int, inset_x: float, inset_y: float) -> None:
        if grid_w < 1 or grid_h < 1:
            raise ValueError(f"Grid must be at least 1x1, got {grid_w}x{grid_h}")
        if not (0.0 < inset_x < 0.5 and 0.0 < inset_y < 0.5):
            raise ValueError(f"Insets must lie in (0, 0.5), got ({inset_x}, {inset_y})")
        self.grid_w  = grid_w
        self.grid_h  = grid_h
        self.inset_x = inset_x
        self.inset_y = inset_y

    def to_relative(self, px: float, py: float) -> Point2D:
        """Rescale the inset sub-rectangle to [0, 1]. Not clamped."""
        return (
            (px - self.inset_x) / (1 - 2 * self.inset_x),
            (py - self.inset_y) / (1 - 2 * self.inset_y),
        )

    def to_grid(self, px: float, py: float) -> GridCoordinate:
        """
        Forward quantisation only. A pointer outside the visible grid maps
        to the nearest edge cell instead of being rejected.
        """
        rel_x, rel_y = self.to_relative(px, py)
        rel_x, rel_y = clamp(rel_x), clamp(rel_y)
        return GridCoordinate(
            _floor_cell(rel_x * (self.grid_w - 1)),
            _floor_cell(rel_y * (self.grid_h - 1)),
        )
