# -*- coding: utf-8 -*-
"""Single-photo webcam capture with graceful fallback when OpenCV is missing."""

from __future__ import annotations

import logging
import sys
import threading
from typing import Any

try:  # Optional runtime dependency for webcam capture
    import cv2  # type: ignore[import-not-found]
except Exception:  # pragma: no cover - depends on local environment
    cv2 = None  # type: ignore[assignment]

logger = logging.getLogger(__name__)

_CAMERA_INIT_LOCK = threading.RLock()

# Frames read and dropped while the sensor adjusts exposure.
WARMUP_FRAMES = 5


def _open_camera(camera_index: int) -> Any:
    """Open a VideoCapture, using DShow on Windows, protected by a lock."""
    acquired = _CAMERA_INIT_LOCK.acquire(timeout=5.0)
    if not acquired:
        logger.error("Timeout retrieving global camera lock for camera %s", camera_index)
        return None
    try:
        if sys.platform == "win32":
            logger.debug("Using cv2.CAP_DSHOW for Camera %s to avoid MSMF freeze", camera_index)
            return cv2.VideoCapture(camera_index, cv2.CAP_DSHOW)
        return cv2.VideoCapture(camera_index)
    finally:
        _CAMERA_INIT_LOCK.release()


class PhotoCapture:
    """Take one photo and return it as PNG bytes.

    ``capture()`` returns None when no photo was taken: OpenCV missing, no
    camera, or a failed read. None is a normal outcome, not an error.
    """

    def __init__(self, camera_index: int = 0, warmup_frames: int = WARMUP_FRAMES) -> None:
        self.camera_index = int(camera_index)
        self.warmup_frames = max(0, int(warmup_frames))
        self.last_error = ""

    @staticmethod
    def capabilities() -> dict[str, bool]:
        return {"opencv_available": cv2 is not None}

    def capture(self) -> bytes | None:
        self.last_error = ""
        if cv2 is None:
            self.last_error = "OpenCV is not installed."
            logger.warning("PhotoCapture: %s", self.last_error)
            return None

        capture = _open_camera(self.camera_index)
        if capture is None or not capture.isOpened():
            self.last_error = f"Camera {self.camera_index} is not available."
            logger.warning("PhotoCapture: %s", self.last_error)
            if capture is not None:
                capture.release()
            return None

        try:
            frame = None
            for _ in range(self.warmup_frames + 1):
                ok, candidate = capture.read()
                if ok:
                    frame = candidate
            if frame is None:
                self.last_error = f"Camera {self.camera_index} returned no frame."
                logger.warning("PhotoCapture: %s", self.last_error)
                return None
            ok, encoded = cv2.imencode(".png", frame)
            if not ok:
                self.last_error = "Failed to encode frame as PNG."
                logger.error("PhotoCapture: %s", self.last_error)
                return None
            data = encoded.tobytes()
            logger.info("PhotoCapture: captured %d bytes from camera %s", len(data), self.camera_index)
            return data
        finally:
            capture.release()
