"""
HandTracker — encapsulates all MediaPipe logic.
The rest of the application never imports mediapipe directly.
"""
from __future__ import annotations
from typing import Any, List

import cv2
import mediapipe as mp

from domain.enums import Handedness
from domain.models import HandSample
from utils.geometry import mirror_x


class HandTracker:
    """
    Runs MediaPipe Hands on a BGR frame and returns one HandSample per
    detected hand: 21 normalised (x, y, z) points, mirrored so they line up
    with a selfie-view display, tagged with MediaPipe's handedness label.

    Parameters
    ----------
    max_num_hands : int
    min_detection_confidence : float
    min_tracking_confidence : float
    """

    def __init__(
        self,
        max_num_hands: int = 2,
        min_detection_confidence: float = 0.5,
        min_tracking_confidence: float = 0.5,
    ) -> None:
        self._mp_hands = mp.solutions.hands
        self._hands    = self._mp_hands.Hands(
            static_image_mode=False,
            max_num_hands=max_num_hands,
            min_detection_confidence=min_detection_confidence,
            min_tracking_confidence=min_tracking_confidence,
        )

    # ------------------------------------------------------------------
    def process(self, frame: Any) -> List[HandSample]:
        """
        Parameters
        ----------
        frame : np.ndarray
            Un-mirrored BGR frame from OpenCV.
        """
        rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        results = self._hands.process(rgb)

        if not results.multi_hand_landmarks:
            return []

        labels = results.multi_handedness or []
        samples: List[HandSample] = []
        for i, hand_landmarks in enumerate(results.multi_hand_landmarks):
            points = tuple(mirror_x((lm.x, lm.y, lm.z)) for lm in hand_landmarks.landmark)
            label = labels[i].classification[0].label if i < len(labels) else None
            samples.append(HandSample(points, Handedness.from_label(label)))
        return samples

    def release(self) -> None:
        self._hands.close()
