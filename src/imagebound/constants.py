# -*- coding: utf-8 -*-
"""Application constants."""

APP_NAME = "image-bound"
APP_AUTHOR = "IVSoftware"
APP_VERSION = "0.1.0"

CONFIG_FILE_NAME = "config-for-test.json"
# Single cache slot for the displayed image, overwritten in place.
FIXED_PHOTO_FILE_NAME = "kqeah1iq.yih"

ASSET_DISPLAY_DIR = ("Resources", "Images")

STATUS_EXPECTING_PHOTO = "Expecting Photo"
STATUS_EXPECTING_COLOR = "Expecting {color}"

ENV_CONFIG_DIR = "IMAGEBOUND_CONFIG_DIR"
ENV_CACHE_DIR = "IMAGEBOUND_CACHE_DIR"
ENV_CAMERA_INDEX = "IMAGEBOUND_CAMERA_INDEX"
