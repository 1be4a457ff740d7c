"""
Type definitions for the hand pointer system.
"""
import math
from dataclasses import dataclass, fields
from typing import ClassVar, Dict, NamedTuple, Optional, Protocol, Sequence, Tuple, Union, runtime_checkable


NUM_LANDMARKS = 21

# MediaPipe Hands landmark indices used by the classifier
WRIST = 0
THUMB_TIP = 4
INDEX_MCP = 5
INDEX_TIP = 8
MIDDLE_MCP = 9
MIDDLE_TIP = 12


class Point3D(NamedTuple):
    """Normalized landmark position in [0..1] (z is depth-like)."""
    x: float
    y: float
    z: float = 0.0


@dataclass(frozen=True)
class HandLandmarks:
    """Snapshot of one hand's 21 landmarks for a single frame."""
    points: Tuple[Point3D, ...]

    def __post_init__(self):
        if len(self.points) != NUM_LANDMARKS:
            raise ValueError(f"Expected {NUM_LANDMARKS} landmarks, got {len(self.points)}")

    @classmethod
    def from_points(cls, points: Optional[Sequence[Sequence[float]]]) -> Optional["HandLandmarks"]:
        """
        Build a frame from raw (x, y[, z]) sequences.

        Args:
            points: Raw landmark coordinates, or None

        Returns:
            HandLandmarks, or None if the input is missing or malformed
            (malformed input is treated as "no hand")
        """
        try:
            if points is None or len(points) != NUM_LANDMARKS:
                return None
        except TypeError:
            return None

        converted = []
        for p in points:
            try:
                if len(p) not in (2, 3):
                    return None
                coords = [float(c) for c in p]
            except (TypeError, ValueError):
                return None
            if not all(math.isfinite(c) for c in coords):
                return None
            converted.append(Point3D(*coords))

        return cls(points=tuple(converted))

    @property
    def wrist(self) -> Point3D:
        return self.points[WRIST]

    @property
    def thumb_tip(self) -> Point3D:
        return self.points[THUMB_TIP]

    @property
    def index_mcp(self) -> Point3D:
        return self.points[INDEX_MCP]

    @property
    def index_tip(self) -> Point3D:
        return self.points[INDEX_TIP]

    @property
    def middle_mcp(self) -> Point3D:
        return self.points[MIDDLE_MCP]

    @property
    def middle_tip(self) -> Point3D:
        return self.points[MIDDLE_TIP]


# None means no hand was detected in the frame
LandmarkFrame = Optional[HandLandmarks]


class _Event:
    """Shared serialization for gesture events."""
    type: ClassVar[str]

    def to_dict(self) -> Dict[str, Union[str, float]]:
        data: Dict[str, Union[str, float]] = {"type": self.type}
        for f in fields(self):
            data[f.name] = getattr(self, f.name)
        return data


@dataclass(frozen=True)
class MoveEvent(_Event):
    """Cursor moved to a mirrored index-tip position."""
    type: ClassVar[str] = "move"
    x: float
    y: float


@dataclass(frozen=True)
class ClickEvent(_Event):
    """Short pinch released outside the click cooldown."""
    type: ClassVar[str] = "click"
    x: float
    y: float


@dataclass(frozen=True)
class LongPressEvent(_Event):
    """Pinch held past the long-press time."""
    type: ClassVar[str] = "long-press"
    x: float
    y: float


@dataclass(frozen=True)
class ScrollEvent(_Event):
    """Palm moved vertically while index and middle fingers are straight."""
    type: ClassVar[str] = "scroll"
    dy: float


@dataclass(frozen=True)
class NoHandEvent(_Event):
    """Hand left the camera view."""
    type: ClassVar[str] = "no-hand"


GestureEvent = Union[MoveEvent, ClickEvent, LongPressEvent, ScrollEvent, NoHandEvent]


@runtime_checkable
class GestureSinkProto(Protocol):
    """Abstract protocol for sinks that act on gesture events."""

    def on_gesture(self, event: GestureEvent) -> None:
        """Handle one gesture event. Called synchronously, in frame order."""
        ...
