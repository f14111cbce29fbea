# -*- coding: utf-8 -*-
"""Tests for bundled fallback image lookup."""

from __future__ import annotations

import pytest

from imagebound.core.resources import ResourceNotFoundError, ResourceStore, resource_key
from imagebound.models.color_rotation import ColorRotation
from imagebound.utils.image_utils import is_png_bytes


def test_every_color_has_a_bundled_png(resources: ResourceStore) -> None:
    for color in ColorRotation:
        assert resources.find(color) == resource_key(color)
        assert is_png_bytes(resources.read_bytes(color))


def test_resource_key_is_lowercase_name() -> None:
    assert resource_key(ColorRotation.Yellow) == "yellow.png"


def test_names_lists_bundled_assets(resources: ResourceStore) -> None:
    assert resources.names() == ["blue.png", "green.png", "red.png", "yellow.png"]


def test_asset_path_points_into_resources_images(resources: ResourceStore) -> None:
    assert resources.asset_path(ColorRotation.Blue) == "Resources/Images/blue.png"


def test_mapping_to_missing_asset_fails_at_construction() -> None:
    mapping = {color: resource_key(color) for color in ColorRotation}
    mapping[ColorRotation.Green] = "teal.png"
    with pytest.raises(ResourceNotFoundError):
        ResourceStore(mapping=mapping)


def test_incomplete_mapping_fails_at_construction() -> None:
    mapping = {ColorRotation.Red: "red.png"}
    with pytest.raises(ResourceNotFoundError):
        ResourceStore(mapping=mapping)


def test_color_rotation_cycle_wraps() -> None:
    assert ColorRotation.Blue.next() is ColorRotation.Red
    assert ColorRotation.Red.next() is ColorRotation.Green


def test_color_rotation_from_unknown_name_raises() -> None:
    with pytest.raises(ValueError):
        ColorRotation.from_name("Purple")


def test_directory_missing_a_color_fails_at_construction(tmp_path, resources: ResourceStore) -> None:
    for color in (ColorRotation.Red, ColorRotation.Green, ColorRotation.Blue):
        (tmp_path / resource_key(color)).write_bytes(resources.read_bytes(color))
    with pytest.raises(ResourceNotFoundError, match="yellow.png"):
        ResourceStore(root=tmp_path)


def test_suffix_match_is_case_insensitive(tmp_path, resources: ResourceStore) -> None:
    for color in ColorRotation:
        (tmp_path / f"Images.{color.name}.PNG").write_bytes(resources.read_bytes(color))
    store = ResourceStore(root=tmp_path)
    assert store.find(ColorRotation.Yellow) == "Images.Yellow.PNG"
    assert store.read_bytes(ColorRotation.Yellow) == resources.read_bytes(ColorRotation.Yellow)


def test_ambiguous_match_fails_at_construction(tmp_path, resources: ResourceStore) -> None:
    for color in ColorRotation:
        (tmp_path / resource_key(color)).write_bytes(resources.read_bytes(color))
    (tmp_path / "dark-red.png").write_bytes(resources.read_bytes(ColorRotation.Red))
    with pytest.raises(ResourceNotFoundError, match="ambiguous"):
        ResourceStore(root=tmp_path)
