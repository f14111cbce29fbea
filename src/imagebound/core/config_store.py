# -*- coding: utf-8 -*-
"""Self-saving, change-notifying configuration store."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from imagebound.core.paths import PathResolver
from imagebound.core.resources import ResourceStore
from imagebound.models.color_rotation import ColorRotation
from imagebound.models.config import Config
from imagebound.utils.file_utils import read_json_file, write_bytes_file, write_json_file
from imagebound.utils.image_utils import is_png_bytes

logger = logging.getLogger(__name__)

ChangeCallback = Callable[[str], None]

# Keys written by older builds of the app.
_LEGACY_KEYS = {"colorRotation": "ColorRotationValue", "isPhoto": "IsPhoto"}


class ConfigError(ValueError):
    """Raised when a persisted config cannot be turned into a Config."""


def config_to_dict(config: Config) -> dict[str, Any]:
    """Return the persisted subset of a config."""
    return {"colorRotation": config.color_rotation.name, "isPhoto": config.is_photo}


def _lookup(data: dict[str, Any], key: str) -> Any:
    if key in data:
        return data[key]
    return data.get(_LEGACY_KEYS[key])


def config_from_dict(data: dict[str, Any]) -> tuple[ColorRotation, bool]:
    """Parse persisted fields. Missing fields take their defaults."""
    if not isinstance(data, dict):
        raise ConfigError("config root is not an object")

    raw_color = _lookup(data, "colorRotation")
    if raw_color is None:
        color = ColorRotation.Red
    elif isinstance(raw_color, str):
        try:
            color = ColorRotation.from_name(raw_color)
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc
    elif isinstance(raw_color, int) and not isinstance(raw_color, bool):
        try:
            color = ColorRotation(raw_color)
        except ValueError:
            raise ConfigError(f"Unknown color rotation value: {raw_color}") from None
    else:
        raise ConfigError(f"colorRotation must be a name, got {type(raw_color).__name__}")

    raw_photo = _lookup(data, "isPhoto")
    if raw_photo is None:
        is_photo = False
    elif isinstance(raw_photo, bool):
        is_photo = raw_photo
    else:
        raise ConfigError(f"isPhoto must be a boolean, got {type(raw_photo).__name__}")
    return color, is_photo


class ConfigStore:
    """Own the process's single Config and keep it on disk.

    Every effective change to ``color_rotation`` or ``is_photo`` outside of
    ``load()`` notifies subscribers and rewrites the config file. A color
    change also copies the matching bundled image into the fixed photo path.
    """

    def __init__(self, paths: PathResolver, resources: ResourceStore) -> None:
        self._resources = resources
        self._config: Config | None = None
        self._listeners: list[ChangeCallback] = []
        self.config_file_path: Path = paths.config_file_path()
        self.fixed_photo_path: Path = paths.fixed_photo_path()

    @property
    def config(self) -> Config:
        if self._config is None:
            raise RuntimeError("ConfigStore.load() must be called first")
        return self._config

    @property
    def color_rotation(self) -> ColorRotation:
        return self.config.color_rotation

    @property
    def is_photo(self) -> bool:
        return self.config.is_photo

    @property
    def is_loading(self) -> bool:
        return self._config is None or self._config.is_loading

    def subscribe(self, callback: ChangeCallback) -> None:
        if callback not in self._listeners:
            self._listeners.append(callback)

    def unsubscribe(self, callback: ChangeCallback) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def load(self) -> Config:
        """Load the config file, falling back to a fresh default config.

        The instance is created on the first call and refreshed in place on
        later calls. A missing or unreadable file never raises.
        """
        if self._config is None:
            self._config = Config()
        config = self._config
        config.is_loading = True

        parsed: tuple[ColorRotation, bool] | None = None
        try:
            if self.config_file_path.exists():
                try:
                    parsed = config_from_dict(read_json_file(self.config_file_path))
                except (OSError, ValueError) as exc:
                    logger.warning("ADVISORY: Load failure will fall back to new config. (%s)", exc)

            if parsed is not None:
                color, is_photo = parsed
                self.set_color_rotation(color)
                self.set_is_photo(is_photo)
            else:
                # New install or failed load.
                self.set_color_rotation(ColorRotation.Red)
                self.set_is_photo(False)
                self.save()
        finally:
            config.is_loading = False

        if parsed is None:
            self._materialize(config.color_rotation)
            logger.info("Created default config at %s", self.config_file_path)
        else:
            if not config.is_photo and not self.fixed_photo_path.exists():
                self._materialize(config.color_rotation)
            logger.info("Loaded config from %s: %s", self.config_file_path, config_to_dict(config))
        return config

    def set_color_rotation(self, value: ColorRotation) -> None:
        config = self.config
        if config.color_rotation == value:
            return
        if config.is_loading:
            config.color_rotation = value
            return
        # Field changes only once the image matches it.
        self._materialize(value)
        config.color_rotation = value
        self._on_changed("color_rotation")

    def set_is_photo(self, value: bool) -> None:
        config = self.config
        if config.is_photo == value:
            return
        config.is_photo = value
        if config.is_loading:
            return
        self._on_changed("is_photo")

    def rotate(self) -> ColorRotation:
        """Advance to the next color and persist."""
        self.set_color_rotation(self.config.color_rotation.next())
        self.save()
        return self.config.color_rotation

    def save(self) -> Path:
        path = write_json_file(self.config_file_path, config_to_dict(self.config))
        logger.debug("Saved config to %s", path)
        return path

    def write_photo(self, data: bytes) -> Path:
        """Overwrite the fixed photo path with captured image bytes."""
        if not is_png_bytes(data):
            logger.warning("Captured photo is not PNG data; writing %d bytes as-is", len(data))
        path = write_bytes_file(self.fixed_photo_path, data)
        logger.debug("Wrote %d photo bytes to %s", len(data), path)
        return path

    def _materialize(self, color: ColorRotation) -> None:
        data = self._resources.read_bytes(color)
        write_bytes_file(self.fixed_photo_path, data)
        logger.debug("Materialized %s into %s", self._resources.find(color), self.fixed_photo_path)

    def _on_changed(self, name: str) -> None:
        for callback in list(self._listeners):
            callback(name)
        self.save()
