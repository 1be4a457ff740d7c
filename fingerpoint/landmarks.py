"""
Hand landmark detection using MediaPipe.
"""
import cv2
import mediapipe as mp
import numpy as np
from typing import Optional, Tuple

from .types import HandLandmarks, LandmarkFrame


class HandsTracker:
    """Hand landmark tracker using MediaPipe Hands."""

    def __init__(self, max_num_hands: int = 1, min_detection_conf: float = 0.5, min_tracking_conf: float = 0.5):
        """
        Initialize the hands tracker.

        Args:
            max_num_hands: Maximum number of hands to detect (only the first is used)
            min_detection_conf: Minimum confidence for hand detection
            min_tracking_conf: Minimum confidence for hand tracking
        """
        self.mp_hands = mp.solutions.hands
        self.hands = self.mp_hands.Hands(
            static_image_mode=False,
            max_num_hands=max_num_hands,
            min_detection_confidence=min_detection_conf,
            min_tracking_confidence=min_tracking_conf
        )

    def process(self, frame_bgr: np.ndarray) -> LandmarkFrame:
        """
        Process a frame and return hand landmarks.

        Args:
            frame_bgr: Input frame in BGR format

        Returns:
            Landmarks of the first detected hand, or None if no usable hand was found
        """
        # Convert BGR to RGB for MediaPipe
        frame_rgb = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)
        results = self.hands.process(frame_rgb)

        if not results.multi_hand_landmarks:
            return None

        hand_landmarks = results.multi_hand_landmarks[0]
        return HandLandmarks.from_points(
            [(lm.x, lm.y, lm.z) for lm in hand_landmarks.landmark]
        )

    def close(self) -> None:
        """Release the MediaPipe graph."""
        self.hands.close()


def draw_landmarks(frame: np.ndarray, landmarks: HandLandmarks) -> np.ndarray:
    """
    Draw hand landmarks on the frame.

    Args:
        frame: Input frame
        landmarks: Hand landmarks in [0..1] range

    Returns:
        Frame with landmarks drawn
    """
    height, width = frame.shape[:2]

    for i, point in enumerate(landmarks.points):
        px = int(point.x * width)
        py = int(point.y * height)
        cv2.circle(frame, (px, py), 3, (0, 255, 0), -1)
        cv2.putText(frame, str(i), (px + 5, py - 5), cv2.FONT_HERSHEY_SIMPLEX, 0.3, (255, 255, 255), 1)

    return frame


def draw_cursor(frame: np.ndarray, cursor: Tuple[float, float], pressed: bool = False) -> np.ndarray:
    """Draw the pointer at mirrored cursor coordinates on an unmirrored frame."""
    height, width = frame.shape[:2]
    x, y = cursor
    # Cursor x is mirrored relative to the camera image
    px = int((1.0 - x) * width)
    py = int(y * height)
    color = (0, 0, 255) if pressed else (255, 128, 0)
    cv2.circle(frame, (px, py), 10, color, 2)
    return frame
