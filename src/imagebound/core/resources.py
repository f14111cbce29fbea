# -*- coding: utf-8 -*-
"""Bundled fallback images shipped as package data."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path, PurePosixPath

from imagebound.constants import ASSET_DISPLAY_DIR
from imagebound.models.color_rotation import ColorRotation

logger = logging.getLogger(__name__)

RESOURCE_DIR = Path(__file__).resolve().parents[1] / "resources"


class ResourceNotFoundError(FileNotFoundError):
    """Raised when a color has no matching bundled image."""


def resource_key(color: ColorRotation) -> str:
    return f"{color.name}.png".lower()


def _match(names: Iterable[str], key: str) -> str:
    matches = [name for name in names if name.lower().endswith(key)]
    if not matches:
        raise ResourceNotFoundError(f"Embedded resource not found: {key}")
    if len(matches) > 1:
        raise ResourceNotFoundError(f"Embedded resource is ambiguous: {key} matches {sorted(matches)}")
    return matches[0]


class ResourceStore:
    """Resolve each ColorRotation to exactly one bundled PNG.

    The color-to-resource mapping is built and validated when the store is
    created, so a missing or duplicated asset fails at startup instead of on
    the first rotation.
    """

    def __init__(self, root: str | Path = RESOURCE_DIR, mapping: Mapping[ColorRotation, str] | None = None) -> None:
        self._root = Path(root)
        if mapping is None:
            available = self.names()
            mapping = {color: _match(available, resource_key(color)) for color in ColorRotation}
        self._mapping = dict(mapping)
        self.validate()

    def names(self) -> list[str]:
        """Return the names of the bundled assets."""
        if not self._root.is_dir():
            return []
        return sorted(entry.name for entry in self._root.iterdir() if entry.is_file() and entry.name.lower().endswith(".png"))

    def validate(self) -> None:
        available = set(self.names())
        for color in ColorRotation:
            name = self._mapping.get(color)
            if name is None:
                raise ResourceNotFoundError(f"No resource mapped for color {color.name}")
            if name not in available:
                raise ResourceNotFoundError(f"Embedded resource not found: {name} in {self._root}")
        logger.debug("Validated %d bundled color resources in %s", len(self._mapping), self._root)

    def find(self, color: ColorRotation) -> str:
        try:
            return self._mapping[color]
        except KeyError:
            raise ResourceNotFoundError(f"No resource mapped for color {color.name}") from None

    def read_bytes(self, color: ColorRotation) -> bytes:
        """Return the image bytes for a color."""
        name = self.find(color)
        entry = self._root / name
        if not entry.is_file():
            raise ResourceNotFoundError(f"Embedded resource not found: {name}")
        return entry.read_bytes()

    def asset_path(self, color: ColorRotation) -> str:
        """Relative display path of the asset, e.g. ``Resources/Images/red.png``."""
        return str(PurePosixPath(*ASSET_DISPLAY_DIR, resource_key(color)))
