# -*- coding: utf-8 -*-
"""Persisted configuration data model."""

from __future__ import annotations

from dataclasses import dataclass

from imagebound.models.color_rotation import ColorRotation


@dataclass
class Config:
    """Settings-and-state object owned by a ConfigStore.

    Only ``color_rotation`` and ``is_photo`` are persisted. ``is_loading`` is
    true while the store builds or deserializes the instance.
    """

    color_rotation: ColorRotation = ColorRotation.Red
    is_photo: bool = False
    is_loading: bool = True
