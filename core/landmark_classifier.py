"""
LandmarkClassifier — pure geometric rules over one hand's 21 landmarks.
No model, no buffer, no memory across frames.

Every predicate uses only relative x/y comparisons or a single Euclidean
distance on the normalised image plane, so thresholds are resolution
independent.
"""
from __future__ import annotations
import logging

import numpy as np

from domain.models import GestureState, LandmarkList
from utils.constants import (
    INDEX, INDEX_MCP, MIDDLE, NUM_LANDMARKS, PINKY, RING,
    THUMB_IP, THUMB_TIP, INDEX_TIP,
    PINCH_THRESHOLD, THUMB_TUCK_THRESHOLD,
)
from utils.geometry import dist

logger = logging.getLogger(__name__)

_NO_GESTURE = GestureState()


# ---- validation -----------------------------------------------------------
def is_well_formed(lm) -> bool:
    """21 points, each with at least finite x and y."""
    try:
        arr = np.asarray(lm, dtype=float)
    except (TypeError, ValueError):
        return False
    if arr.ndim != 2 or arr.shape[0] != NUM_LANDMARKS or arr.shape[1] < 2:
        return False
    return bool(np.isfinite(arr[:, :2]).all())


# ---- predicates -----------------------------------------------------------
def finger_extended(lm: LandmarkList, tip: int, pip: int) -> bool:
    # image y grows downwards, so an extended finger has the smaller y
    return lm[tip][1] < lm[pip][1]


def finger_curled(lm: LandmarkList, tip: int, pip: int) -> bool:
    return lm[tip][1] > lm[pip][1]


def pinch(lm: LandmarkList, threshold: float = PINCH_THRESHOLD) -> bool:
    return dist(lm[THUMB_TIP], lm[INDEX_TIP]) < threshold


def thumb_tucked(lm: LandmarkList, threshold: float = THUMB_TUCK_THRESHOLD) -> bool:
    """Across the palm (tip past the IP joint) or alongside it (near index base)."""
    return (lm[THUMB_TIP][0] > lm[THUMB_IP][0]
            or dist(lm[THUMB_TIP], lm[INDEX_MCP]) < threshold)


def fist(lm: LandmarkList, thumb_threshold: float = THUMB_TUCK_THRESHOLD) -> bool:
    return (all(finger_curled(lm, *finger) for finger in (INDEX, MIDDLE, RING, PINKY))
            and thumb_tucked(lm, thumb_threshold))


def pointing(lm: LandmarkList) -> bool:
    return (finger_extended(lm, *INDEX)
            and all(finger_curled(lm, *finger) for finger in (MIDDLE, RING, PINKY)))


def ok_sign(lm: LandmarkList, threshold: float = PINCH_THRESHOLD) -> bool:
    return (pinch(lm, threshold)
            and all(finger_extended(lm, *finger) for finger in (MIDDLE, RING, PINKY)))


# ---- classifier -----------------------------------------------------------
class LandmarkClassifier:
    """
    Evaluates every predicate for one hand.

    Parameters
    ----------
    pinch_threshold : float
        Max thumb-tip ↔ index-tip distance that counts as a pinch.
    thumb_tuck_threshold : float
        Max thumb-tip ↔ index-MCP distance that counts as a tucked thumb.
    """

    def __init__(
        self,
        pinch_threshold: float = PINCH_THRESHOLD,
        thumb_tuck_threshold: float = THUMB_TUCK_THRESHOLD,
    ) -> None:
        self._pinch = pinch_threshold
        self._thumb = thumb_tuck_threshold

    def classify(self, lm: LandmarkList) -> GestureState:
        """
        Returns a GestureState. A corrupt detector frame (wrong point count,
        NaN coordinate, …) degrades to all-False instead of raising.
        """
        if not is_well_formed(lm):
            logger.debug("Ignoring malformed landmark set")
            return _NO_GESTURE

        return GestureState(
            pinching=pinch(lm, self._pinch),
            fist=fist(lm, self._thumb),
            pointing=pointing(lm),
            ok_sign=ok_sign(lm, self._pinch),
        )
