"""
Test cases for landmark types and geometry helpers.
"""
import unittest

from fingerpoint.geometry import distance_2d, distance_3d, is_finger_straight, pinch_distance
from fingerpoint.types import (
    ClickEvent,
    HandLandmarks,
    NoHandEvent,
    Point3D,
    ScrollEvent,
)


class TestHandLandmarks(unittest.TestCase):
    """Test frame validation."""

    def test_from_points_accepts_21_points(self):
        hand = HandLandmarks.from_points([(0.1 * (i % 10), 0.5, 0.0) for i in range(21)])

        self.assertIsNotNone(hand)
        self.assertEqual(len(hand.points), 21)
        self.assertEqual(hand.index_tip, Point3D(0.8, 0.5, 0.0))

    def test_from_points_pads_missing_depth(self):
        hand = HandLandmarks.from_points([(0.5, 0.5)] * 21)
        self.assertEqual(hand.wrist.z, 0.0)

    def test_malformed_input_is_no_hand(self):
        self.assertIsNone(HandLandmarks.from_points(None))
        self.assertIsNone(HandLandmarks.from_points([(0.5, 0.5, 0.0)] * 20))
        self.assertIsNone(HandLandmarks.from_points([(0.5,)] * 21))
        self.assertIsNone(HandLandmarks.from_points([(0.5, "a", 0.0)] * 21))
        self.assertIsNone(HandLandmarks.from_points([(0.5, float("nan"), 0.0)] * 21))

    def test_non_sequence_entries_are_no_hand(self):
        points = [(0.5, 0.5, 0.0)] * 21
        points[3] = None
        self.assertIsNone(HandLandmarks.from_points(points))

        points[3] = 7
        self.assertIsNone(HandLandmarks.from_points(points))

        self.assertIsNone(HandLandmarks.from_points(42))

    def test_direct_construction_validates_count(self):
        with self.assertRaises(ValueError):
            HandLandmarks(points=(Point3D(0.5, 0.5, 0.0),) * 5)


class TestGeometry(unittest.TestCase):
    """Test distance and straightness helpers."""

    def test_distance_3d_includes_depth(self):
        a = Point3D(0.0, 0.0, 0.0)
        b = Point3D(0.3, 0.0, 0.4)
        self.assertAlmostEqual(distance_3d(a, b), 0.5)
        self.assertAlmostEqual(distance_2d(a, b), 0.3)

    def test_pinch_distance(self):
        points = [(0.5, 0.5, 0.0)] * 21
        points[4] = (0.5, 0.5, 0.0)
        points[8] = (0.53, 0.54, 0.0)
        hand = HandLandmarks.from_points(points)

        self.assertAlmostEqual(pinch_distance(hand), 0.05)

    def test_straight_finger(self):
        palm = Point3D(0.5, 0.8)
        mcp = Point3D(0.5, 0.7)
        self.assertTrue(is_finger_straight(Point3D(0.5, 0.5), mcp, palm))
        self.assertFalse(is_finger_straight(Point3D(0.5, 0.75), mcp, palm))

    def test_straightness_ignores_depth(self):
        palm = Point3D(0.5, 0.8, 0.0)
        mcp = Point3D(0.5, 0.7, 0.0)
        tip = Point3D(0.5, 0.75, 0.9)
        self.assertFalse(is_finger_straight(tip, mcp, palm))


class TestEvents(unittest.TestCase):
    """Test event serialization."""

    def test_to_dict_uses_event_names(self):
        self.assertEqual(ClickEvent(x=0.25, y=0.5).to_dict(), {"type": "click", "x": 0.25, "y": 0.5})
        self.assertEqual(ScrollEvent(dy=-0.02).to_dict(), {"type": "scroll", "dy": -0.02})
        self.assertEqual(NoHandEvent().to_dict(), {"type": "no-hand"})


if __name__ == '__main__':
    unittest.main()
