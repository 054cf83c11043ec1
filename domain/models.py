from __future__ import annotations
from dataclasses import dataclass, field
from typing import FrozenSet, List, NamedTuple, Optional, Sequence, Tuple

from domain.enums import Handedness
from utils.constants import INDEX_TIP, WRIST

# Type aliases
Landmark3D = Tuple[float, float, float]
LandmarkList = Sequence[Landmark3D]       # 21 points, x/y normalised to [0, 1]
Point2D = Tuple[float, float]


class GridCoordinate(NamedTuple):
    """One addressable cell of the voxel grid."""
    gx: int
    gy: int


@dataclass(frozen=True)
class HandSample:
    """One detected hand for one frame, as delivered by the tracker."""
    landmarks: LandmarkList
    handedness: Handedness = Handedness.UNKNOWN


@dataclass(frozen=True)
class GestureState:
    """
    Boolean predicates for a single hand, derived from the current frame only.
    Pinching is evaluated independently of fist / pointing.
    """
    pinching: bool = False
    fist: bool = False
    pointing: bool = False
    ok_sign: bool = False


@dataclass(frozen=True)
class ClassifiedHand:
    """
    A hand plus its predicates. `valid` is False for malformed landmark
    lists; such a hand never drives the pointer or any gesture, and its
    index_tip / palm must not be read.
    """
    sample: HandSample
    state: GestureState
    valid: bool = True

    @property
    def handedness(self) -> Handedness:
        return self.sample.handedness

    @property
    def index_tip(self) -> Point2D:
        x, y = self.sample.landmarks[INDEX_TIP][:2]
        return (x, y)

    @property
    def palm(self) -> Point2D:
        x, y = self.sample.landmarks[WRIST][:2]
        return (x, y)


@dataclass(frozen=True)
class GestureMode:
    """
    Capability set of the state machine.

    two_hand()    — fist drag + left-fist/right-point erase
    single_hand() — OK sign clears the grid
    """
    has_drag: bool = True
    has_erase: bool = True
    has_clear: bool = False

    @classmethod
    def two_hand(cls) -> "GestureMode":
        return cls(has_drag=True, has_erase=True, has_clear=False)

    @classmethod
    def single_hand(cls) -> "GestureMode":
        return cls(has_drag=False, has_erase=False, has_clear=True)

    @classmethod
    def from_name(cls, name: str) -> "GestureMode":
        presets = {"two_hand": cls.two_hand, "single_hand": cls.single_hand}
        try:
            return presets[name]()
        except KeyError:
            raise ValueError(f"Unknown gesture mode {name!r}") from None


@dataclass
class FrameData:
    """Hands detected in one frame plus its monotonic timestamp (ms)."""
    hands: List[HandSample]
    timestamp: float


@dataclass
class FrameContext:
    """
    A frame after classification.
    Passed to every gesture detector instead of individual arguments.
    """
    hands: List[ClassifiedHand]
    timestamp: float
    primary: Optional[ClassifiedHand] = None

    # ---- convenience accessors ----------------------------------------
    def tagged(self, handedness: Handedness) -> Optional[ClassifiedHand]:
        """First well-formed hand carrying this tag."""
        for hand in self.hands:
            if hand.valid and hand.handedness == handedness:
                return hand
        return None

    @property
    def left(self) -> Optional[ClassifiedHand]:
        return self.tagged(Handedness.LEFT)

    @property
    def right(self) -> Optional[ClassifiedHand]:
        return self.tagged(Handedness.RIGHT)


@dataclass(frozen=True)
class UiFlags:
    pinching: bool = False
    dragging: bool = False
    erasing: bool = False
    ready: bool = False


@dataclass(frozen=True)
class RenderSnapshot:
    """Read-only view handed to the renderer once per frame."""
    voxels: FrozenSet[GridCoordinate]
    version: int
    drag_offset: Point2D
    pointer: Point2D
    flags: UiFlags = field(default_factory=UiFlags)
