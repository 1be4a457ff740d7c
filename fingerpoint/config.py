"""
Configuration management for the hand pointer system.
"""
import yaml
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass, field


@dataclass
class CameraConfig:
    """Camera configuration settings."""
    index: int
    width: int
    height: int
    fps: int


@dataclass
class MediaPipeConfig:
    """MediaPipe Hands configuration settings."""
    max_num_hands: int
    min_detection_confidence: float
    min_tracking_confidence: float


@dataclass
class GestureConfig:
    """Pinch, long-press and scroll thresholds."""
    touch_radius: float = 0.03
    click_cooldown_ms: float = 800
    long_press_ms: float = 1500
    scroll_delta_threshold: float = 0.01
    straight_ratio: float = 1.2


@dataclass
class ControllerConfig:
    """Event sink settings."""
    enabled_on_start: bool = False
    scroll_gain: float = 2.0  # viewport heights per unit of palm dy
    viewport_width: int = 1920
    viewport_height: int = 1080


@dataclass
class DisplayConfig:
    """Display configuration settings."""
    show_landmarks: bool
    show_cursor: bool
    window_name: str


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"


@dataclass
class Cfg:
    """Main configuration class."""
    camera: CameraConfig
    mediapipe: MediaPipeConfig
    gestures: GestureConfig
    display: DisplayConfig
    controller: ControllerConfig = field(default_factory=ControllerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def default_config_path() -> Path:
    """Location of config.default.yaml in the project root."""
    return Path(__file__).parent.parent / "config.default.yaml"


def load_config(path: Optional[str] = None) -> Cfg:
    """
    Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses config.default.yaml

    Returns:
        Configuration object with all settings
    """
    config_path = Path(path) if path is not None else default_config_path()
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        data = yaml.safe_load(f) or {}

    return _dict_to_config(data)


def _dict_to_config(data: Dict[str, Any]) -> Cfg:
    """Convert dictionary to configuration object."""
    camera_data = data['camera']
    camera = CameraConfig(
        index=camera_data['index'],
        width=camera_data['width'],
        height=camera_data['height'],
        fps=camera_data['fps']
    )

    mp_data = data['mediapipe']
    mediapipe = MediaPipeConfig(
        max_num_hands=mp_data['max_num_hands'],
        min_detection_confidence=mp_data['min_detection_confidence'],
        min_tracking_confidence=mp_data['min_tracking_confidence']
    )

    # Thresholds default to the stock gesture policy when omitted
    defaults = GestureConfig()
    gestures_data = data.get('gestures') or {}
    gestures = GestureConfig(
        touch_radius=gestures_data.get('touch_radius', defaults.touch_radius),
        click_cooldown_ms=gestures_data.get('click_cooldown_ms', defaults.click_cooldown_ms),
        long_press_ms=gestures_data.get('long_press_ms', defaults.long_press_ms),
        scroll_delta_threshold=gestures_data.get('scroll_delta_threshold', defaults.scroll_delta_threshold),
        straight_ratio=gestures_data.get('straight_ratio', defaults.straight_ratio)
    )

    ctrl_defaults = ControllerConfig()
    ctrl_data = data.get('controller') or {}
    controller = ControllerConfig(
        enabled_on_start=ctrl_data.get('enabled_on_start', ctrl_defaults.enabled_on_start),
        scroll_gain=ctrl_data.get('scroll_gain', ctrl_defaults.scroll_gain),
        viewport_width=ctrl_data.get('viewport_width', ctrl_defaults.viewport_width),
        viewport_height=ctrl_data.get('viewport_height', ctrl_defaults.viewport_height)
    )

    display_data = data['display']
    display = DisplayConfig(
        show_landmarks=display_data['show_landmarks'],
        show_cursor=display_data['show_cursor'],
        window_name=display_data['window_name']
    )

    logging_data = data.get('logging') or {}
    logging_cfg = LoggingConfig(level=logging_data.get('level', LoggingConfig.level))

    return Cfg(
        camera=camera,
        mediapipe=mediapipe,
        gestures=gestures,
        display=display,
        controller=controller,
        logging=logging_cfg
    )
