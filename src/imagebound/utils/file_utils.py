# -*- coding: utf-8 -*-
"""File helpers with UTF-8 defaults."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any


def ensure_dir(path: str | Path) -> Path:
    """Create a directory if it does not exist."""
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def read_json_file(path: str | Path) -> dict[str, Any]:
    """Read a JSON file."""
    file_path = Path(path)
    with file_path.open("r", encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, dict):
        raise ValueError(f"Expected JSON object in {file_path}")
    return data


def write_json_file(path: str | Path, data: dict[str, Any]) -> Path:
    """Write JSON with indentation, replacing the target atomically."""
    file_path = Path(path)
    ensure_dir(file_path.parent)
    tmp_path = file_path.with_name(file_path.name + ".tmp")
    try:
        with tmp_path.open("w", encoding="utf-8") as handle:
            json.dump(data, handle, indent=2, ensure_ascii=True)
            handle.write("\n")
        os.replace(tmp_path, file_path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
    return file_path


def write_bytes_file(path: str | Path, data: bytes) -> Path:
    """Overwrite a binary file in place."""
    file_path = Path(path)
    ensure_dir(file_path.parent)
    file_path.write_bytes(data)
    return file_path


def file_mtime_ns(path: str | Path) -> int | None:
    """Return the modification time in nanoseconds, or None if missing."""
    try:
        return Path(path).stat().st_mtime_ns
    except FileNotFoundError:
        return None
