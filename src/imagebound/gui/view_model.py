# -*- coding: utf-8 -*-
"""Observable view model binding capture and rotation to the config store."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import BinaryIO, Union

from PyQt6.QtCore import QObject, pyqtSignal

from imagebound.constants import STATUS_EXPECTING_COLOR, STATUS_EXPECTING_PHOTO
from imagebound.core.config_store import ConfigStore
from imagebound.core.image_cache import ImageCache, ImageHandle

logger = logging.getLogger(__name__)

CaptureResult = Union[bytes, bytearray, memoryview, BinaryIO, None]


def _read_all(result: CaptureResult) -> bytes:
    """Buffer a capture result fully in memory and release its stream."""
    if result is None:
        return b""
    if isinstance(result, (bytes, bytearray, memoryview)):
        return bytes(result)
    buffer = io.BytesIO()
    with result:
        while True:
            chunk = result.read(64 * 1024)
            if not chunk:
                break
            buffer.write(chunk)
    return buffer.getvalue()


class MainViewModel(QObject):
    """Expose the status text and the displayed image as observable fields."""

    status_text_changed = pyqtSignal(str)
    image_changed = pyqtSignal(object)

    def __init__(self, store: ConfigStore, cache: ImageCache | None = None, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self.cache = cache or ImageCache()
        self._status_text = ""
        self._image: ImageHandle | None = None

    @property
    def status_text(self) -> str:
        return self._status_text

    @property
    def image(self) -> ImageHandle | None:
        return self._image

    def load(self) -> None:
        self.store.load()
        self._refresh()

    def rotate(self) -> None:
        color = self.store.rotate()
        self.store.set_is_photo(False)
        logger.info("Rotated fallback image to %s", color.name)
        # Own writes can land within the same mtime tick.
        self.cache.invalidate(self.store.fixed_photo_path)
        self._refresh()

    def on_photo_captured(self, result: CaptureResult) -> bool:
        """Store a captured photo. Returns False when the capture was empty."""
        data = _read_all(result)
        if not data:
            logger.info("Photo capture returned nothing; keeping current state")
            return False
        self.store.write_photo(data)
        self.store.set_is_photo(True)
        self.cache.invalidate(self.store.fixed_photo_path)
        self._refresh()
        return True

    def _refresh(self) -> None:
        config = self.store.config
        if config.is_photo:
            self._set_status_text(STATUS_EXPECTING_PHOTO)
        else:
            self._set_status_text(STATUS_EXPECTING_COLOR.format(color=config.color_rotation.name))
        self._set_image(self.store.fixed_photo_path)

    def _set_status_text(self, text: str) -> None:
        if text == self._status_text:
            return
        self._status_text = text
        self.status_text_changed.emit(text)

    def _set_image(self, path: Path) -> None:
        handle, changed = self.cache.resolve_changed(path)
        if handle is None:
            if self._image is not None:
                self._image = None
                self.image_changed.emit(None)
            return
        if changed or handle is not self._image:
            self._image = handle
            self.image_changed.emit(handle)
