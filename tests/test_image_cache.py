# -*- coding: utf-8 -*-
"""Tests for the modification-time based image cache."""

from __future__ import annotations

import os
from pathlib import Path

from imagebound.core.image_cache import ImageCache


def _bump_mtime(path: Path) -> None:
    stat = path.stat()
    os.utime(path, ns=(stat.st_atime_ns, stat.st_mtime_ns + 1_000_000_000))


def test_resolve_returns_none_for_empty_or_missing_path(tmp_path: Path) -> None:
    cache = ImageCache()
    assert cache.resolve("") is None
    assert cache.resolve(None) is None
    assert cache.resolve(tmp_path / "missing.png") is None
    assert cache.read_count == 0


def test_resolve_returns_none_for_directory(tmp_path: Path) -> None:
    assert ImageCache().resolve(tmp_path) is None


def test_resolve_reads_file_once_while_unchanged(tmp_path: Path, png_bytes: bytes) -> None:
    image_path = tmp_path / "photo.png"
    image_path.write_bytes(png_bytes)
    cache = ImageCache()

    first, first_changed = cache.resolve_changed(image_path)
    second, second_changed = cache.resolve_changed(image_path)

    assert first is second
    assert first is not None and first.data == png_bytes
    assert (first_changed, second_changed) == (True, False)
    assert cache.read_count == 1


def test_resolve_rereads_after_external_overwrite(tmp_path: Path, png_bytes: bytes) -> None:
    image_path = tmp_path / "photo.png"
    image_path.write_bytes(png_bytes)
    cache = ImageCache()
    first = cache.resolve(image_path)

    image_path.write_bytes(b"new image bytes")
    _bump_mtime(image_path)
    second = cache.resolve(image_path)

    assert second is not first
    assert second is not None and second.data == b"new image bytes"
    assert second.mtime_ns == image_path.stat().st_mtime_ns
    assert cache.read_count == 2


def test_deleted_file_drops_cached_handle(tmp_path: Path, png_bytes: bytes) -> None:
    image_path = tmp_path / "photo.png"
    image_path.write_bytes(png_bytes)
    cache = ImageCache()
    cache.resolve(image_path)

    image_path.unlink()
    assert cache.resolve(image_path) is None


def test_invalidate_forces_reread(tmp_path: Path, png_bytes: bytes) -> None:
    image_path = tmp_path / "photo.png"
    image_path.write_bytes(png_bytes)
    cache = ImageCache()
    cache.resolve(image_path)

    cache.invalidate(image_path)
    cache.resolve(image_path)
    cache.invalidate()
    cache.resolve(image_path)
    assert cache.read_count == 3


def test_handle_decodes_with_pillow(tmp_path: Path, png_bytes: bytes) -> None:
    image_path = tmp_path / "photo.png"
    image_path.write_bytes(png_bytes)
    handle = ImageCache().resolve(image_path)

    assert handle is not None
    assert handle.size() == (1, 1)
    assert handle.to_pil().format == "PNG"
