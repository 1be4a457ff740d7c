"""
Integration test to verify all components can be imported and work together.
"""
import sys

from fingerpoint.config import load_config
from fingerpoint.controller_mock import MockController
from fingerpoint.gestures import GestureController
from fingerpoint.types import GestureSinkProto, HandLandmarks


def _hand(pinch: bool) -> HandLandmarks:
    points = [(0.5, 0.6, 0.0)] * 21
    points[5] = (0.45, 0.5, 0.0)
    points[8] = (0.45, 0.55, 0.0)
    points[9] = (0.5, 0.5, 0.0)
    points[12] = (0.5, 0.55, 0.0)
    points[4] = (0.46 if pinch else 0.5, 0.55, 0.0)
    return HandLandmarks.from_points(points)


def test_integration():
    """Test that config, controller, classifier and sink work together."""
    print("Testing integration of hand pointer components...")

    config = load_config()
    print(f"✓ Config loaded: camera {config.camera.width}x{config.camera.height} @ {config.camera.fps}fps")

    sink = MockController(config.controller)
    assert isinstance(sink, GestureSinkProto)
    print("✓ MockController implements GestureSinkProto")

    controller = GestureController(sink, cfg=config.gestures)
    controller.enable()

    frames = [(_hand(True), 0), (_hand(True), 200), (_hand(False), 400), (None, 500)]
    for landmarks, t_ms in frames:
        controller.handle_frame(landmarks, t_ms)

    kinds = [event.type for event in sink.history]
    assert kinds == ["move", "move", "move", "click", "no-hand"], kinds
    print(f"✓ Event stream: {kinds}")

    print("\n🎉 All integration tests passed!")


if __name__ == "__main__":
    try:
        test_integration()
    except AssertionError as e:
        print(f"✗ Integration test failed: {e}")
        sys.exit(1)
