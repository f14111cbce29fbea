# -*- coding: utf-8 -*-
"""Worker classes for asynchronous background processing."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal

from imagebound.pipeline.capture import PhotoCapture

logger = logging.getLogger(__name__)


class CaptureWorker(QObject):
    """Take a photo off the GUI thread; emits the PNG bytes or None."""
    finished = pyqtSignal(object)
    error = pyqtSignal(str)

    def __init__(self, capture: PhotoCapture) -> None:
        super().__init__()
        self.capture = capture

    def run(self) -> None:
        try:
            logger.info("CaptureWorker: capturing from camera %s", self.capture.camera_index)
            self.finished.emit(self.capture.capture())
        except Exception as e:
            logger.exception("CaptureWorker: capture failed")
            self.error.emit(str(e))
