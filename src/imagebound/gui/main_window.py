# -*- coding: utf-8 -*-
"""Main window: status label, image preview, rotate and capture buttons."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QThread, Qt
from PyQt6.QtGui import QKeyEvent, QPixmap
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from imagebound.constants import APP_NAME, APP_VERSION
from imagebound.core.image_cache import ImageHandle
from imagebound.gui.view_model import MainViewModel
from imagebound.gui.workers import CaptureWorker
from imagebound.pipeline.capture import PhotoCapture

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Single-page view bound to a MainViewModel."""

    def __init__(self, view_model: MainViewModel, capture: PhotoCapture, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.view_model = view_model
        self.capture = capture
        self._active_threads: list[QThread] = []

        self.setWindowTitle(f"{APP_NAME} v{APP_VERSION}")
        self.resize(480, 640)

        self._build_ui()
        self.view_model.status_text_changed.connect(self.info_label.setText)
        self.view_model.image_changed.connect(self._show_image)

    def _build_ui(self) -> None:
        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(16)

        self.info_label = QLabel("")
        self.info_label.setObjectName("infoLabel")
        self.info_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self.image_label = QLabel("No image")
        self.image_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.image_label.setMinimumSize(200, 200)
        self.image_label.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

        buttons = QHBoxLayout()
        self.rotate_button = QPushButton("Rotate Color")
        self.rotate_button.clicked.connect(self.on_rotate_color)
        self.capture_button = QPushButton("Take Photo")
        self.capture_button.clicked.connect(self.on_take_photo)
        buttons.addWidget(self.rotate_button)
        buttons.addWidget(self.capture_button)

        layout.addWidget(self.info_label)
        layout.addWidget(self.image_label, 1)
        layout.addLayout(buttons)
        self.setCentralWidget(central)

    def load(self) -> None:
        self.view_model.load()
        # Signals only fire on change; sync the initial state explicitly.
        self.info_label.setText(self.view_model.status_text)
        self._show_image(self.view_model.image)

    def on_rotate_color(self) -> None:
        self.view_model.rotate()

    def on_take_photo(self) -> None:
        self._active_threads = [t for t in self._active_threads if t.isRunning()]
        self.capture_button.setEnabled(False)

        thread = QThread(self)
        worker = CaptureWorker(self.capture)
        worker.moveToThread(thread)

        thread.started.connect(worker.run)
        worker.finished.connect(self._on_photo_captured)
        worker.error.connect(self._on_capture_error)

        worker.finished.connect(thread.quit)
        worker.error.connect(thread.quit)
        thread.finished.connect(worker.deleteLater)
        thread.finished.connect(thread.deleteLater)

        self._active_threads.append(thread)
        thread.start()

    def _on_photo_captured(self, data: object) -> None:
        self.capture_button.setEnabled(True)
        if not self.view_model.on_photo_captured(data):  # type: ignore[arg-type]
            self.statusBar().showMessage(self.capture.last_error or "No photo taken.", 4000)

    def _on_capture_error(self, message: str) -> None:
        self.capture_button.setEnabled(True)
        QMessageBox.warning(self, APP_NAME, f"Photo capture failed:\n{message}")

    def _show_image(self, handle: ImageHandle | None) -> None:
        if handle is None:
            self.image_label.setPixmap(QPixmap())
            self.image_label.setText("No image")
            return
        pixmap = QPixmap()
        if not pixmap.loadFromData(handle.data):
            logger.warning("Could not decode image from %s", handle.path)
            self.image_label.setText("Unreadable image")
            return
        scaled = pixmap.scaled(
            self.image_label.size(),
            Qt.AspectRatioMode.KeepAspectRatio,
            Qt.TransformationMode.SmoothTransformation,
        )
        self.image_label.setPixmap(scaled)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        # Back navigation is disabled; the app has a single page.
        if event.key() in (Qt.Key.Key_Escape, Qt.Key.Key_Back):
            event.accept()
            return
        super().keyPressEvent(event)
