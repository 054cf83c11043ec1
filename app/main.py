"""
main.py — Application entry point.

    Camera → HandTracker → GestureSession (classifier → controller → store)
          → RenderSnapshot → OpenCVUI

Camera and model are acquired before the frame loop starts; if either
fails the session is never started and the failure becomes its status.
"""
from __future__ import annotations
import argparse
import dataclasses
import logging
from typing import List, Optional

from app.config import AppConfig, default_config
from core.session import GestureSession
from domain.enums import SessionStatus
from domain.models import GestureMode

logger = logging.getLogger(__name__)


def run(config: AppConfig = default_config) -> int:
    # OpenCV / MediaPipe are only needed by the live pipeline
    from core.camera import Camera

    session = GestureSession(config)
    logger.info("Grid %dx%d, mode %s", config.grid_w, config.grid_h, config.mode)

    session.set_status(SessionStatus.REQUESTING)
    try:
        camera = Camera(config.camera_device, config.fps_limit)
    except RuntimeError as exc:
        logger.error("Camera unavailable: %s", exc)
        session.fail(SessionStatus.CAMERA_BLOCKED)
        return 1

    # the camera is released on every path from here on
    with camera:
        session.set_status(SessionStatus.LOADING_MODEL)
        try:
            from core.hand_tracker import HandTracker
            tracker = HandTracker(
                max_num_hands=config.max_num_hands,
                min_detection_confidence=config.min_detection_confidence,
                min_tracking_confidence=config.min_tracking_confidence,
            )
        except Exception:
            logger.exception("Hand model failed to load")
            session.fail(SessionStatus.ERROR)
            return 1

        from app.ui import OpenCVUI
        ui = OpenCVUI(config)
        session.start()
        last_version = -1

        try:
            while True:
                frame = camera.read()
                if frame is None:
                    logger.warning("Empty frame, stopping")
                    break

                hands = tracker.process(frame)
                for event in session.on_frame(hands):
                    logger.info("[EVENT] %s", event.value)

                snapshot = session.snapshot()
                if snapshot.version != last_version:
                    logger.debug("Voxels v%d: %d cells", snapshot.version, len(snapshot.voxels))
                    last_version = snapshot.version
                ui.render(frame, snapshot, session.status)

                if ui.should_quit():
                    break
        finally:
            session.stop()
            tracker.release()
            ui.close()
    logger.info("Application closed cleanly")
    return 0


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Paint voxels on a grid with hand gestures.")
    parser.add_argument("--mode", choices=["two_hand", "single_hand"], default="two_hand",
                        help="two_hand: drag + erase; single_hand: OK sign clears")
    parser.add_argument("--camera", type=int, default=default_config.camera_device,
                        help="OpenCV camera index")
    parser.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = dataclasses.replace(
        default_config,
        camera_device=args.camera,
        mode=GestureMode.from_name(args.mode),
    )
    return run(config)


if __name__ == "__main__":
    raise SystemExit(main())
