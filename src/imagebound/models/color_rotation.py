# -*- coding: utf-8 -*-
"""Fallback color selector."""

from __future__ import annotations

from enum import Enum


class ColorRotation(Enum):
    """Bundled fallback images, in rotation order."""

    Red = 0
    Green = 1
    Yellow = 2
    Blue = 3

    def next(self) -> ColorRotation:
        members = list(type(self))
        return members[(members.index(self) + 1) % len(members)]

    @classmethod
    def from_name(cls, name: str) -> ColorRotation:
        """Look up a member by its persisted name."""
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"Unknown color rotation: {name!r}") from None
