"""
Main application for hand pointer control.
"""
import argparse
import logging
import time
from typing import List, Optional

import cv2

from .config import Cfg, load_config
from .controller_mock import MockController
from .gestures import GestureController
from .landmarks import HandsTracker, draw_cursor, draw_landmarks
from .types import GestureEvent

logger = logging.getLogger(__name__)


class GestureRecognitionApp:
    """Main application class for hand pointer control."""

    def __init__(self, config_path: Optional[str] = None, config: Optional[Cfg] = None):
        """Initialize the application with a loaded config, or load one from config_path."""
        self.config = config if config is not None else load_config(config_path)

        # Open the camera first so a failure leaves nothing else to release
        self.cap = cv2.VideoCapture(self.config.camera.index)
        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, self.config.camera.width)
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self.config.camera.height)
        self.cap.set(cv2.CAP_PROP_FPS, self.config.camera.fps)

        if not self.cap.isOpened():
            raise RuntimeError(f"Failed to open camera {self.config.camera.index}")

        self.tracker = HandsTracker(
            max_num_hands=self.config.mediapipe.max_num_hands,
            min_detection_conf=self.config.mediapipe.min_detection_confidence,
            min_tracking_conf=self.config.mediapipe.min_tracking_confidence
        )

        self.sink = MockController(self.config.controller)
        self.controller = GestureController(
            self.sink,
            cfg=self.config.gestures,
            enabled=False
        )
        if self.config.controller.enabled_on_start:
            self.controller.enable()

    def run(self) -> None:
        """Run the main application loop."""
        logger.info("Starting %s", self.config.display.window_name)
        logger.info("Pinch = click, hold pinch = long press, two fingers + move = scroll")
        logger.info("Press 't' to toggle control, 'q' to quit")

        try:
            while True:
                ret, frame = self.cap.read()
                if not ret:
                    logger.error("Failed to read frame from camera")
                    break

                landmarks = self.tracker.process(frame)
                events = self.controller.handle_frame(landmarks, time.monotonic() * 1000.0)

                if landmarks is not None and self.config.display.show_landmarks:
                    frame = draw_landmarks(frame, landmarks)
                if self.config.display.show_cursor and self.sink.cursor is not None:
                    frame = draw_cursor(frame, self.sink.cursor, self.controller.classifier.state.pinching)

                self._draw_status(frame, landmarks is not None, events)
                cv2.imshow(self.config.display.window_name, frame)

                key = cv2.waitKey(1) & 0xFF
                if key == ord('q'):
                    break
                if key == ord('t'):
                    self.controller.toggle()
        finally:
            self.close()

    def _draw_status(self, frame, hand_present: bool, events: List[GestureEvent]) -> None:
        """Overlay control state and the latest non-move events."""
        control_text = "Control: ON" if self.controller.enabled else "Control: OFF"
        hand_text = "Hand detected" if hand_present else "No hand detected"
        actions = ", ".join(e.type for e in events if e.type != "move")

        cv2.putText(frame, control_text, (10, 30), cv2.FONT_HERSHEY_SIMPLEX, 0.7,
                    (0, 255, 0) if self.controller.enabled else (0, 0, 255), 2)
        cv2.putText(frame, hand_text, (10, 60), cv2.FONT_HERSHEY_SIMPLEX, 0.5, (255, 255, 255), 1)
        if actions:
            cv2.putText(frame, actions, (10, 90), cv2.FONT_HERSHEY_SIMPLEX, 0.6, (0, 255, 255), 2)
        cv2.putText(frame, "'t' toggle, 'q' quit", (10, frame.shape[0] - 20),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.5, (255, 255, 255), 1)

    def close(self) -> None:
        """Release camera, tracker and windows."""
        if self.cap.isOpened():
            self.cap.release()
        self.tracker.close()
        cv2.destroyAllWindows()


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the application."""
    parser = argparse.ArgumentParser(description="Control a pointer with hand gestures")
    parser.add_argument("--config", help="Path to a YAML config file")
    parser.add_argument("--log-level", help="Override the configured log level")
    args = parser.parse_args(argv)

    config = load_config(args.config)
    level = args.log_level or config.logging.level
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )

    try:
        app = GestureRecognitionApp(config=config)
        app.run()
    except KeyboardInterrupt:
        logger.info("Application interrupted by user")


if __name__ == "__main__":
    main()
