"""
Landmark geometry helpers used by the gesture classifier.
"""
import math

from .types import HandLandmarks, Point3D


def distance_3d(a: Point3D, b: Point3D) -> float:
    """Euclidean distance over x, y and z."""
    return math.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2 + (a.z - b.z) ** 2)


def distance_2d(a: Point3D, b: Point3D) -> float:
    """Euclidean distance in the image plane (z ignored)."""
    return math.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2)


def pinch_distance(hand: HandLandmarks) -> float:
    """Distance between index tip and thumb tip."""
    return distance_3d(hand.index_tip, hand.thumb_tip)


def is_finger_straight(tip: Point3D, mcp: Point3D, palm: Point3D, ratio: float = 1.2) -> bool:
    """
    Check whether a finger is extended rather than curled.

    Args:
        tip: Finger tip landmark
        mcp: Base knuckle landmark of the same finger
        palm: Wrist landmark
        ratio: How much further than the knuckle the tip must be from the palm

    Returns:
        True if the tip is more than ``ratio`` times the knuckle's distance from the palm
    """
    return distance_2d(tip, palm) > distance_2d(mcp, palm) * ratio
