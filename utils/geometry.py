"""
Pure geometric utility functions.
No imports from the rest of the project.
"""
from __future__ import annotations
import math
from typing import Sequence, Tuple

Point2D = Tuple[float, float]


def dist(a: Sequence[float], b: Sequence[float]) -> float:
    """Euclidean distance between two points, using x and y only."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def mirror_x(point: Sequence[float]) -> Tuple[float, ...]:
    """Flip a normalised point horizontally (selfie view)."""
    return (1.0 - point[0],) + tuple(point[1:])
