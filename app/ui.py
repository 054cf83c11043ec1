"""
OpenCVUI — flat debug overlay for the voxel grid.

Reads a RenderSnapshot and never touches the store. The pipeline never
calls cv2 drawing functions directly; it delegates to this class.
"""
from __future__ import annotations
from typing import Any

import cv2

from app.config import AppConfig
from domain.enums import SessionStatus
from domain.models import RenderSnapshot

_GRID_COLOR    = (224, 216, 105)
_VOXEL_FILL    = (255, 229, 0)
_VOXEL_EDGE    = (255, 255, 170)
_POINTER_COLOR = (255, 207, 0)
_TEXT_COLOR    = (255, 255, 255)

_HELP = {
    (True, True, False):  "Fist=drag | L-fist+R-point=erase",
    (False, False, True): "Pinch=draw | OK=clear",
}


def status_text(snapshot: RenderSnapshot, status: SessionStatus) -> str:
    flags = snapshot.flags
    if not flags.ready:
        return status.value
    if flags.erasing:
        return "ERASING"
    if flags.dragging:
        return "DRAGGING (fist)"
    if flags.pinching:
        return "DRAWING (pinch)"
    return SessionStatus.READY.value


class OpenCVUI:
    """Mirrors the frame, draws grid / voxels / pointer / HUD and shows it."""

    def __init__(self, config: AppConfig, window_name: str = "Gesture Voxel Painter") -> None:
        self._cfg  = config
        self._name = window_name
        mode = config.mode
        self._help = _HELP.get((mode.has_drag, mode.has_erase, mode.has_clear), "")

    def render(self, frame: Any, snapshot: RenderSnapshot, status: SessionStatus) -> None:
        cfg = self._cfg
        frame = cv2.flip(frame, 1)
        h, w = frame.shape[:2]

        left, top = cfg.inset_x * w, cfg.inset_y * h
        inner_w, inner_h = w - 2 * left, h - 2 * top
        cell_w, cell_h = inner_w / cfg.grid_w, inner_h / cfg.grid_h

        # Grid
        for i in range(cfg.grid_w + 1):
            x = int(left + i * cell_w)
            cv2.line(frame, (x, int(top)), (x, int(top + inner_h)), _GRID_COLOR, 1)
        for j in range(cfg.grid_h + 1):
            y = int(top + j * cell_h)
            cv2.line(frame, (int(left), y), (int(left + inner_w), y), _GRID_COLOR, 1)

        # Voxels, translated by the live (uncommitted) drag offset
        off_x = snapshot.drag_offset[0] * inner_w
        off_y = snapshot.drag_offset[1] * inner_h
        for gx, gy in snapshot.voxels:
            x0 = int(left + gx * cell_w + off_x)
            y0 = int(top + gy * cell_h + off_y)
            x1, y1 = int(x0 + cell_w), int(y0 + cell_h)
            cv2.rectangle(frame, (x0, y0), (x1, y1), _VOXEL_FILL, -1)
            cv2.rectangle(frame, (x0, y0), (x1, y1), _VOXEL_EDGE, 1)

        # Pointer glow
        if snapshot.flags.ready:
            px, py = snapshot.pointer
            radius = 12 if snapshot.flags.pinching else 9
            cv2.circle(frame, (int(px * w), int(py * h)), radius, _POINTER_COLOR, -1)

        # HUD
        cv2.putText(frame, status_text(snapshot, status),
                    (14, 30), cv2.FONT_HERSHEY_SIMPLEX, 0.7, _TEXT_COLOR, 2)
        if self._help:
            cv2.putText(frame, self._help,
                        (14, h - 20), cv2.FONT_HERSHEY_SIMPLEX, 0.5, _TEXT_COLOR, 1)

        cv2.imshow(self._name, frame)

    def should_quit(self) -> bool:
        """Returns True if the user pressed ESC."""
        return (cv2.waitKey(1) & 0xFF) == 27

    def close(self) -> None:
        cv2.destroyAllWindows()
