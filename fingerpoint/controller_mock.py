"""
Mock controller implementation for testing gesture events.
"""
import logging
from collections import Counter
from typing import List, Optional, Tuple

from .config import ControllerConfig
from .types import (
    ClickEvent,
    GestureEvent,
    LongPressEvent,
    MoveEvent,
    NoHandEvent,
    ScrollEvent,
)

logger = logging.getLogger(__name__)


class MockController:
    """Mock controller that logs actions instead of executing them."""

    def __init__(self, cfg: Optional[ControllerConfig] = None):
        """Initialize the mock controller."""
        self.cfg = cfg if cfg is not None else ControllerConfig()
        self.counts: Counter = Counter()
        self.history: List[GestureEvent] = []
        self.cursor: Optional[Tuple[float, float]] = None
        self.menu_open = False
        self.scrolled_px = 0

    def on_gesture(self, event: GestureEvent) -> None:
        """Record an event and log the action it would trigger."""
        self.counts[event.type] += 1
        self.history.append(event)

        if isinstance(event, MoveEvent):
            self.cursor = (event.x, event.y)
        elif isinstance(event, ClickEvent):
            px, py = self.to_pixels(event.x, event.y)
            logger.info("[MockController] Click at (%d, %d) (call #%d)", px, py, self.counts[event.type])
        elif isinstance(event, LongPressEvent):
            self.menu_open = True
            logger.info("[MockController] Long press, menu opened")
        elif isinstance(event, ScrollEvent):
            dy_px = self.scroll_pixels(event.dy)
            self.scrolled_px += dy_px
            logger.info("[MockController] Scroll: dy_px=%d (call #%d)", dy_px, self.counts[event.type])
        elif isinstance(event, NoHandEvent):
            self.cursor = None

    def to_pixels(self, x: float, y: float) -> Tuple[int, int]:
        """Convert cursor fractions to viewport pixels."""
        return int(x * self.cfg.viewport_width), int(y * self.cfg.viewport_height)

    def scroll_pixels(self, dy: float) -> int:
        """Convert a palm delta to a viewport scroll amount."""
        return int(dy * self.cfg.viewport_height * self.cfg.scroll_gain)

    def reset_counters(self) -> None:
        """Reset action counters for testing."""
        self.counts.clear()
        self.history.clear()
        self.cursor = None
        self.menu_open = False
        self.scrolled_px = 0
