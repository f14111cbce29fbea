# -*- coding: utf-8 -*-
"""Platform directories for the config file and the image cache slot."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from platformdirs import PlatformDirs

from imagebound.config import AppSettings
from imagebound.constants import APP_AUTHOR, APP_NAME, CONFIG_FILE_NAME, FIXED_PHOTO_FILE_NAME
from imagebound.utils.file_utils import ensure_dir


@dataclass(frozen=True)
class PathResolver:
    """Resolve the config directory and the cache directory."""

    config_dir: Path
    cache_dir: Path

    @classmethod
    def default(cls) -> PathResolver:
        dirs = PlatformDirs(APP_NAME, APP_AUTHOR)
        return cls(config_dir=dirs.user_data_path, cache_dir=dirs.user_cache_path)

    @classmethod
    def from_settings(cls, settings: AppSettings) -> PathResolver:
        """Apply directory overrides on top of the platform defaults."""
        base = cls.default()
        return cls(
            config_dir=settings.config_dir or base.config_dir,
            cache_dir=settings.cache_dir or base.cache_dir,
        )

    def config_file_path(self) -> Path:
        return ensure_dir(self.config_dir) / CONFIG_FILE_NAME

    def fixed_photo_path(self) -> Path:
        return ensure_dir(self.cache_dir) / FIXED_PHOTO_FILE_NAME
