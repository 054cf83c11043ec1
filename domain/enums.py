from enum import Enum


class Handedness(str, Enum):
    """Handedness label attached to a detected hand (already mirrored)."""
    LEFT    = "Left"
    RIGHT   = "Right"
    UNKNOWN = "Unknown"

    @classmethod
    def from_label(cls, label) -> "Handedness":
        for member in cls:
            if member.value == label:
                return member
        return cls.UNKNOWN


class ActionKind(str, Enum):
    """Rate-limited actions, one cooldown timestamp each."""
    PLACE = "PLACE"
    ERASE = "ERASE"
    CLEAR = "CLEAR"


class GestureEvent(str, Enum):
    """Events emitted by gesture detectors."""
    VOXEL_PLACED   = "VOXEL_PLACED"
    VOXEL_ERASED   = "VOXEL_ERASED"
    DRAG_STARTED   = "DRAG_STARTED"
    DRAG_MOVED     = "DRAG_MOVED"
    DRAG_COMMITTED = "DRAG_COMMITTED"
    DRAG_ABANDONED = "DRAG_ABANDONED"
    CLEARED        = "CLEARED"


class SessionStatus(str, Enum):
    """Status string shown by the UI layer."""
    IDLE           = "Idle"
    REQUESTING     = "Requesting camera…"
    LOADING_MODEL  = "Loading hand model…"
    READY          = "READY"
    CAMERA_BLOCKED = "Camera blocked"
    ERROR          = "Error starting"
    STOPPED        = "Stopped"
