import types
import unittest
from unittest import mock

from app import main
from core.session import GestureSession
from domain.enums import SessionStatus


class FakeCamera:
    instances = []

    def __init__(self, device=0, fps_limit=30, fail=False):
        if fail:
            raise RuntimeError(f"Cannot open camera device {device}")
        self.released = False
        FakeCamera.instances.append(self)

    def read(self):
        return None

    def release(self):
        self.released = True

    def __enter__(self):
        return self

    def __exit__(self, *_):
        self.release()


class BrokenCamera(FakeCamera):
    def __init__(self, device=0, fps_limit=30):
        super().__init__(device, fps_limit, fail=True)


class BrokenTracker:
    def __init__(self, **_):
        raise AttributeError("module 'mediapipe' has no attribute 'solutions'")


def module(name, **attrs):
    mod = types.ModuleType(name)
    for key, value in attrs.items():
        setattr(mod, key, value)
    return mod


class TestStartupFailures(unittest.TestCase):
    def setUp(self):
        FakeCamera.instances = []
        self.sessions = []
        sessions = self.sessions

        class RecordingSession(GestureSession):
            def __init__(self, *args, **kwargs):
                super().__init__(*args, **kwargs)
                sessions.append(self)

        patcher = mock.patch.object(main, "GestureSession", RecordingSession)
        patcher.start()
        self.addCleanup(patcher.stop)

    def run_with(self, **modules):
        with mock.patch.dict("sys.modules", modules), \
                self.assertLogs("app.main", level="ERROR"):
            return main.run()

    def test_blocked_camera(self):
        code = self.run_with(**{"core.camera": module("core.camera", Camera=BrokenCamera)})
        self.assertEqual(code, 1)
        self.assertEqual(self.sessions[0].status, SessionStatus.CAMERA_BLOCKED)

    def test_model_error_releases_camera(self):
        code = self.run_with(**{
            "core.camera": module("core.camera", Camera=FakeCamera),
            "core.hand_tracker": module("core.hand_tracker", HandTracker=BrokenTracker),
        })
        self.assertEqual(code, 1)
        self.assertEqual(self.sessions[0].status, SessionStatus.ERROR)
        self.assertFalse(self.sessions[0].started)
        self.assertTrue(FakeCamera.instances[0].released)

    def test_missing_tracker_module_releases_camera(self):
        # a None entry makes the import itself raise ImportError
        code = self.run_with(**{
            "core.camera": module("core.camera", Camera=FakeCamera),
            "core.hand_tracker": None,
        })
        self.assertEqual(code, 1)
        self.assertEqual(self.sessions[0].status, SessionStatus.ERROR)
        self.assertTrue(FakeCamera.instances[0].released)


if __name__ == '__main__':
    unittest.main()
