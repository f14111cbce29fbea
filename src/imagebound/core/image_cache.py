# -*- coding: utf-8 -*-
"""File-change-aware cache of displayable images."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from pathlib import Path

from PIL import Image

from imagebound.utils.file_utils import file_mtime_ns

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImageHandle:
    """In-memory image bytes plus the source file's modification time."""

    path: Path
    data: bytes = field(repr=False)
    mtime_ns: int

    def to_pil(self) -> Image.Image:
        image = Image.open(io.BytesIO(self.data))
        image.load()
        return image

    def size(self) -> tuple[int, int]:
        with Image.open(io.BytesIO(self.data)) as image:
            return image.size


class ImageCache:
    """Re-read an image file only when its modification time changes.

    Staleness is decided by ``st_mtime_ns``. Filesystems with coarse
    timestamps can hide a rewrite that lands within the same tick.
    """

    def __init__(self) -> None:
        self._handles: dict[Path, ImageHandle] = {}
        self.read_count = 0

    def resolve(self, path: str | Path | None) -> ImageHandle | None:
        handle, _ = self.resolve_changed(path)
        return handle

    def resolve_changed(self, path: str | Path | None) -> tuple[ImageHandle | None, bool]:
        """Return ``(handle, changed)``; ``changed`` is True after a fresh read."""
        if not path:
            return None, False
        file_path = Path(path)
        mtime_ns = file_mtime_ns(file_path)
        if mtime_ns is None or not file_path.is_file():
            self._handles.pop(file_path, None)
            return None, False

        cached = self._handles.get(file_path)
        if cached is not None and cached.mtime_ns == mtime_ns:
            return cached, False

        data = file_path.read_bytes()
        self.read_count += 1
        handle = ImageHandle(path=file_path, data=data, mtime_ns=mtime_ns)
        self._handles[file_path] = handle
        logger.debug("Loaded %d bytes from %s (mtime_ns=%s)", len(data), file_path, mtime_ns)
        return handle, True

    def invalidate(self, path: str | Path | None = None) -> None:
        if path is None:
            self._handles.clear()
        else:
            self._handles.pop(Path(path), None)
