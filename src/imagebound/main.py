# -*- coding: utf-8 -*-
"""Application entry point."""

from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path

from PyQt6.QtCore import QTimer
from PyQt6.QtWidgets import QApplication, QMessageBox

from imagebound.config import load_settings
from imagebound.constants import APP_NAME
from imagebound.core.config_store import ConfigStore
from imagebound.core.image_cache import ImageCache
from imagebound.core.paths import PathResolver
from imagebound.core.resources import ResourceStore
from imagebound.gui.main_window import MainWindow
from imagebound.gui.view_model import MainViewModel
from imagebound.pipeline.capture import PhotoCapture
from imagebound.utils.logger import setup_session_logging


def global_exception_handler(exc_type, exc_value, exc_traceback):
    """Log fatal errors and keep a copy of the last crash on disk."""
    error_msg = "".join(traceback.format_exception(exc_type, exc_value, exc_traceback))
    logging.getLogger().critical("FATAL CRASH:\n%s", error_msg)

    crash_path = Path.cwd() / "logs" / "LAST_CRASH.log"
    crash_path.parent.mkdir(parents=True, exist_ok=True)
    crash_path.write_text(error_msg, encoding="utf-8")

    if QApplication.instance():
        QMessageBox.critical(None, "Application Crash", f"A fatal error occurred.\nDetails saved to: {crash_path}")

    sys.__excepthook__(exc_type, exc_value, exc_traceback)


def main() -> int:
    """Start the GUI application."""
    session_log_path = setup_session_logging(Path.cwd(), APP_NAME)
    sys.excepthook = global_exception_handler
    logger = logging.getLogger(__name__)
    app = QApplication(sys.argv)
    if session_log_path is not None:
        logger.info("Session log file: %s", session_log_path)

    settings = load_settings()
    paths = PathResolver.from_settings(settings)
    logger.info("Config dir: %s, cache dir: %s", paths.config_dir, paths.cache_dir)

    store = ConfigStore(paths, ResourceStore())
    view_model = MainViewModel(store, ImageCache())
    window = MainWindow(view_model, PhotoCapture(settings.camera_index))
    window.show()
    QTimer.singleShot(0, window.load)

    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
