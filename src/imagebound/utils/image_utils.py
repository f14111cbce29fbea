# -*- coding: utf-8 -*-
"""Image byte checks."""

from __future__ import annotations


PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def is_png_bytes(data: bytes) -> bool:
    """Return True if bytes look like a PNG file."""
    return data.startswith(PNG_SIGNATURE)
