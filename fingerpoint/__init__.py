"""
FingerPoint hand pointer control

Turns MediaPipe hand landmarks into pointer events: cursor movement,
pinch click, long press, two-finger scroll and hand loss.
"""

__version__ = "0.1.0"

from .types import (
    Point3D,
    HandLandmarks,
    LandmarkFrame,
    MoveEvent,
    ClickEvent,
    LongPressEvent,
    ScrollEvent,
    NoHandEvent,
    GestureEvent,
    GestureSinkProto,
)
from .config import load_config, Cfg, GestureConfig
from .controller_mock import MockController
from .gestures import ClassifierState, GestureClassifier, GestureController

__all__ = [
    "Point3D",
    "HandLandmarks",
    "LandmarkFrame",
    "MoveEvent",
    "ClickEvent",
    "LongPressEvent",
    "ScrollEvent",
    "NoHandEvent",
    "GestureEvent",
    "GestureSinkProto",
    "load_config",
    "Cfg",
    "GestureConfig",
    "MockController",
    "ClassifierState",
    "GestureClassifier",
    "GestureController",
]
