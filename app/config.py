from __future__ import annotations
from dataclasses import dataclass, field

from domain.models import GestureMode
from utils import constants as C


@dataclass(frozen=True)
class AppConfig:
    """
    Central configuration injected into all components.
    Fixed for the lifetime of a session; build a new one to change it.
    """
    # ---- camera / tracker ----------------------------------------------
    camera_device: int = 0
    fps_limit: int = 30
    max_num_hands: int = 2
    min_detection_confidence: float = 0.5
    min_tracking_confidence: float = 0.5

    # ---- grid ------------------------------------------------------------
    grid_w: int = C.GRID_W
    grid_h: int = C.GRID_H
    inset_x: float = C.INSET_X       # fractional margin on each side
    inset_y: float = C.INSET_Y

    # ---- classifier ------------------------------------------------------
    pinch_threshold: float = C.PINCH_THRESHOLD
    thumb_tuck_threshold: float = C.THUMB_TUCK_THRESHOLD

    # ---- cooldowns (ms) --------------------------------------------------
    place_cooldown_ms: float = C.PLACE_COOLDOWN_MS
    erase_cooldown_ms: float = C.ERASE_COOLDOWN_MS
    clear_cooldown_ms: float = C.CLEAR_COOLDOWN_MS

    # ---- capabilities ----------------------------------------------------
    mode: GestureMode = field(default_factory=GestureMode.two_hand)

    def validate(self) -> "AppConfig":
        """Raise ValueError on values the pipeline cannot work with."""
        if self.fps_limit <= 0:
            raise ValueError(f"fps_limit must be positive, got {self.fps_limit}")
        if self.max_num_hands < 1:
            raise ValueError(f"max_num_hands must be at least 1, got {self.max_num_hands}")
        for name in ("min_detection_confidence", "min_tracking_confidence"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must lie in [0, 1], got {value}")
        if self.grid_w < 1 or self.grid_h < 1:
            raise ValueError(f"Grid must be at least 1x1, got {self.grid_w}x{self.grid_h}")
        for name in ("inset_x", "inset_y"):
            value = getattr(self, name)
            if not 0.0 < value < 0.5:
                raise ValueError(f"{name} must lie in (0, 0.5), got {value}")
        for name in ("pinch_threshold", "thumb_tuck_threshold",
                     "place_cooldown_ms", "erase_cooldown_ms", "clear_cooldown_ms"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")
        return self


# Default singleton; override with dataclasses.replace in tests.
default_config = AppConfig()
