# -*- coding: utf-8 -*-
"""Runtime settings from the environment and an optional .env file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from imagebound.constants import ENV_CACHE_DIR, ENV_CAMERA_INDEX, ENV_CONFIG_DIR


class SettingsError(ValueError):
    """Raised when runtime settings are invalid."""


@dataclass(frozen=True)
class AppSettings:
    """Overrides for directories and the capture device."""

    config_dir: Path | None = None
    cache_dir: Path | None = None
    camera_index: int = 0


def _load_env_file(env_path: Path) -> dict[str, str]:
    """Load a simple .env file (KEY=VALUE)."""
    values: dict[str, str] = {}
    if not env_path.exists():
        return values

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue
        if (value.startswith('"') and value.endswith('"')) or (
            value.startswith("'") and value.endswith("'")
        ):
            value = value[1:-1]
        values[key] = value
    return values


def _optional_dir(raw: str | None) -> Path | None:
    raw = (raw or "").strip()
    return Path(raw).expanduser() if raw else None


def load_settings(env_file: str | Path | None = None, environ: dict[str, str] | None = None) -> AppSettings:
    """Merge the .env file and the process environment (environment wins)."""
    values = _load_env_file(Path(env_file or Path.cwd() / ".env"))
    values.update(os.environ if environ is None else environ)

    raw_index = str(values.get(ENV_CAMERA_INDEX, "0")).strip() or "0"
    try:
        camera_index = int(raw_index)
    except ValueError:
        raise SettingsError(f"{ENV_CAMERA_INDEX} must be an integer, got {raw_index!r}") from None
    if camera_index < 0:
        raise SettingsError(f"{ENV_CAMERA_INDEX} must not be negative")

    return AppSettings(
        config_dir=_optional_dir(values.get(ENV_CONFIG_DIR)),
        cache_dir=_optional_dir(values.get(ENV_CACHE_DIR)),
        camera_index=camera_index,
    )
