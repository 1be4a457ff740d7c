"""
Test cases for application startup without a real camera.
"""
import unittest
from unittest import mock

from fingerpoint import main as app_main
from fingerpoint.config import Cfg, load_config


class TestGestureRecognitionApp(unittest.TestCase):
    """Test camera and tracker setup."""

    def setUp(self):
        self.config = load_config()

    @mock.patch("fingerpoint.main.HandsTracker")
    @mock.patch("fingerpoint.main.cv2.VideoCapture")
    def test_camera_failure_builds_no_tracker(self, video_capture, hands_tracker):
        video_capture.return_value.isOpened.return_value = False

        with self.assertRaises(RuntimeError):
            app_main.GestureRecognitionApp(config=self.config)
        hands_tracker.assert_not_called()

    @mock.patch("fingerpoint.main.HandsTracker")
    @mock.patch("fingerpoint.main.cv2.VideoCapture")
    def test_uses_given_config(self, video_capture, hands_tracker):
        video_capture.return_value.isOpened.return_value = True

        app = app_main.GestureRecognitionApp(config=self.config)

        self.assertIs(app.config, self.config)
        video_capture.assert_called_once_with(self.config.camera.index)
        hands_tracker.assert_called_once()
        self.assertFalse(app.controller.enabled)


class TestMain(unittest.TestCase):
    """Test the command line entry point."""

    @mock.patch("fingerpoint.main.GestureRecognitionApp")
    @mock.patch("fingerpoint.main.load_config", wraps=load_config)
    def test_config_loaded_once(self, loader, app_cls):
        app_main.main([])

        loader.assert_called_once_with(None)
        app_cls.assert_called_once()
        self.assertIsInstance(app_cls.call_args.kwargs["config"], Cfg)
        app_cls.return_value.run.assert_called_once()


if __name__ == '__main__':
    unittest.main()
