# -*- coding: utf-8 -*-
"""Tests for the main window wiring."""

from __future__ import annotations

import pytest

pytest.importorskip("PyQt6")

from PyQt6.QtCore import QEvent, Qt
from PyQt6.QtGui import QKeyEvent

from imagebound.core.image_cache import ImageCache
from imagebound.gui.main_window import MainWindow
from imagebound.gui.view_model import MainViewModel
from imagebound.pipeline.capture import PhotoCapture


@pytest.fixture
def window(qt_app, store):
    win = MainWindow(MainViewModel(store, ImageCache()), PhotoCapture(camera_index=0))
    yield win
    win.close()


def test_load_populates_label_and_image(window: MainWindow) -> None:
    window.load()
    assert window.info_label.text() == "Expecting Red"
    assert not window.image_label.pixmap().isNull()


def test_rotate_button_updates_label(window: MainWindow) -> None:
    window.load()
    window.rotate_button.click()
    assert window.info_label.text() == "Expecting Green"


def test_captured_photo_updates_label(window: MainWindow, png_bytes: bytes) -> None:
    window.load()
    window._on_photo_captured(png_bytes)
    assert window.info_label.text() == "Expecting Photo"
    assert window.capture_button.isEnabled()


def test_escape_is_swallowed(window: MainWindow) -> None:
    event = QKeyEvent(QEvent.Type.KeyPress, Qt.Key.Key_Escape, Qt.KeyboardModifier.NoModifier)
    window.keyPressEvent(event)
    assert event.isAccepted()
