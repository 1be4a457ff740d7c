"""
Gesture recognition classes that convert hand landmarks into pointer events.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional

from .config import GestureConfig
from .geometry import is_finger_straight, pinch_distance
from .types import (
    ClickEvent,
    GestureEvent,
    GestureSinkProto,
    HandLandmarks,
    LandmarkFrame,
    LongPressEvent,
    MoveEvent,
    NoHandEvent,
    ScrollEvent,
)

logger = logging.getLogger(__name__)


@dataclass
class ClassifierState:
    """Temporal state carried between frames. Timestamps are in milliseconds."""
    pinching: bool = False
    pinch_start: Optional[float] = None
    long_press_fired: bool = False
    last_click_time: Optional[float] = None
    scrolling: bool = False
    last_palm_y: Optional[float] = None

    def reset_pinch(self) -> None:
        """End the current pinch episode."""
        self.pinching = False
        self.pinch_start = None
        self.long_press_fired = False

    def reset_scroll(self) -> None:
        """Leave two-finger scroll mode."""
        self.scrolling = False
        self.last_palm_y = None


class GestureClassifier:
    """
    Converts one landmark frame at a time into pointer events.

    Features:
    - Cursor tracking from the mirrored index fingertip
    - Pinch click with cooldown
    - Long press on a held pinch (fires once per pinch)
    - Two-finger scroll from vertical palm motion, suppressed while pinching
    - Full reset when the hand is lost (click cooldown survives)
    """

    def __init__(self, cfg: Optional[GestureConfig] = None):
        """Initialize classifier with gesture thresholds."""
        self.cfg = cfg if cfg is not None else GestureConfig()
        self._state = ClassifierState()

    @property
    def state(self) -> ClassifierState:
        return self._state

    def reset(self) -> None:
        """Return to the startup state, forgetting the click cooldown too."""
        self._state = ClassifierState()

    def release(self) -> None:
        """End any pinch or scroll in progress. The click cooldown is kept."""
        self._state.reset_pinch()
        self._state.reset_scroll()

    def process_frame(self, landmarks: LandmarkFrame, t_now: float) -> List[GestureEvent]:
        """
        Process a frame and return the events it produces, in order.

        Args:
            landmarks: Hand landmarks (None if no hand detected)
            t_now: Current timestamp in milliseconds, non-decreasing between calls

        Returns:
            Events for this frame: a move first, then at most one click or
            long press, then at most one scroll. A single no-hand event if
            no hand is present.
        """
        state = self._state

        if landmarks is None:
            self.release()
            return [NoHandEvent()]

        x = 1.0 - landmarks.index_tip.x
        y = landmarks.index_tip.y
        events: List[GestureEvent] = [MoveEvent(x=x, y=y)]

        pinch_event = self._update_pinch(landmarks, t_now, x, y)
        if pinch_event is not None:
            events.append(pinch_event)

        scroll_event = self._update_scroll(landmarks)
        if scroll_event is not None:
            events.append(scroll_event)

        return events

    def _update_pinch(self, landmarks: HandLandmarks, t_now: float,
                      x: float, y: float) -> Optional[GestureEvent]:
        """Advance the pinch state machine and return a click or long press."""
        state = self._state
        long_press_ms = self.cfg.long_press_ms

        if pinch_distance(landmarks) < self.cfg.touch_radius:
            if not state.pinching:
                state.pinching = True
                state.pinch_start = t_now
                logger.debug("Pinch started at %.0fms", t_now)
                return None

            if not state.long_press_fired and self._elapsed(state.pinch_start, t_now) > long_press_ms:
                state.long_press_fired = True
                logger.debug("Long press at (%.3f, %.3f)", x, y)
                return LongPressEvent(x=x, y=y)
            return None

        if not state.pinching:
            return None

        # Pinch released
        event: Optional[GestureEvent] = None
        duration = self._elapsed(state.pinch_start, t_now)
        # A release at exactly long_press_ms still counts as a click
        if not state.long_press_fired and duration <= long_press_ms:
            if (state.last_click_time is None or
                    self._elapsed(state.last_click_time, t_now) > self.cfg.click_cooldown_ms):
                state.last_click_time = t_now
                logger.debug("Click at (%.3f, %.3f) after %.0fms pinch", x, y, duration)
                event = ClickEvent(x=x, y=y)
            else:
                logger.debug("Click suppressed by cooldown")

        state.reset_pinch()
        return event

    def _update_scroll(self, landmarks: HandLandmarks) -> Optional[ScrollEvent]:
        """Track palm height while index and middle fingers are straight."""
        state = self._state
        ratio = self.cfg.straight_ratio
        palm = landmarks.wrist

        index_straight = is_finger_straight(landmarks.index_tip, landmarks.index_mcp, palm, ratio)
        middle_straight = is_finger_straight(landmarks.middle_tip, landmarks.middle_mcp, palm, ratio)

        if not (index_straight and middle_straight and not state.pinching):
            state.reset_scroll()
            return None

        if not state.scrolling:
            # Baseline frame, nothing to compare against yet
            state.scrolling = True
            state.last_palm_y = palm.y
            logger.debug("Scroll armed at palm y=%.3f", palm.y)
            return None

        delta = palm.y - state.last_palm_y
        if abs(delta) > self.cfg.scroll_delta_threshold:
            state.last_palm_y = palm.y
            return ScrollEvent(dy=delta)
        return None

    @staticmethod
    def _elapsed(since: float, t_now: float) -> float:
        """Milliseconds since ``since``, clamped at zero for clocks that step back."""
        return max(0.0, t_now - since)


class GestureController:
    """
    Coordinates the classifier with an event sink behind an on/off toggle.
    """

    def __init__(self, sink: GestureSinkProto, cfg: Optional[GestureConfig] = None,
                 classifier: Optional[GestureClassifier] = None, enabled: bool = False):
        """
        Initialize controller; frames are ignored until enabled.

        Args:
            sink: Receives every event in frame order
            cfg: Gesture thresholds for a new classifier
            classifier: Existing classifier to drive (carries its own thresholds,
                so it cannot be combined with cfg)
            enabled: Whether to start enabled
        """
        if cfg is not None and classifier is not None:
            raise ValueError("Pass either cfg or classifier, not both")
        self.sink = sink
        self.classifier = classifier if classifier is not None else GestureClassifier(cfg)
        self.enabled = enabled

    def enable(self) -> None:
        """Start classifying frames, dropping any pinch or scroll left from before."""
        if not self.enabled:
            self.classifier.release()
            self.enabled = True
            logger.info("Gesture control enabled")

    def disable(self) -> None:
        """Stop classifying frames."""
        if self.enabled:
            self.enabled = False
            logger.info("Gesture control disabled")

    def toggle(self) -> bool:
        """Flip the enabled flag and return the new value."""
        if self.enabled:
            self.disable()
        else:
            self.enable()
        return self.enabled

    def handle_frame(self, landmarks: LandmarkFrame, t_now: float) -> List[GestureEvent]:
        """
        Classify a frame and deliver its events to the sink.

        Args:
            landmarks: Hand landmarks (None if no hand detected)
            t_now: Current timestamp in milliseconds

        Returns:
            The events delivered, empty while disabled
        """
        if not self.enabled:
            return []

        events = self.classifier.process_frame(landmarks, t_now)
        for event in events:
            self.sink.on_gesture(event)
        return events
