"""Shared fixtures: in-memory photos with known EXIF metadata."""

from typing import Any, Dict

import pytest

from photos import (
    BODY_SERIAL_NUMBER,
    EXPOSURE_TIME,
    F_NUMBER,
    FOCAL_LENGTH,
    FOCAL_LENGTH_IN_35MM_FILM,
    ISO_SPEED_RATINGS,
    LENS_MAKE,
    LENS_MODEL,
    MAKE,
    MODEL,
    make_image_bytes,
)


@pytest.fixture
def camera_jpeg() -> bytes:
    """JPEG shot at 23mm (35mm eq.), f/2.8, 1/200s, ISO 200."""
    return make_image_bytes(
        base_tags={
            MAKE: "FUJIFILM",
            MODEL: "X100V",
        },
        exif_tags={
            EXPOSURE_TIME: 0.005,
            F_NUMBER: 2.8,
            ISO_SPEED_RATINGS: 200,
            FOCAL_LENGTH: 23,
            FOCAL_LENGTH_IN_35MM_FILM: 35,
            LENS_MAKE: "FUJIFILM",
            LENS_MODEL: "23mm F2",
            BODY_SERIAL_NUMBER: "SN12345",
        },
    )


@pytest.fixture
def plain_jpeg() -> bytes:
    """JPEG with no EXIF metadata at all."""
    return make_image_bytes()


@pytest.fixture
def camera_properties() -> Dict[str, Any]:
    """Decoded properties mapping for a typical camera photo."""
    return {
        "PixelWidth": 6000,
        "PixelHeight": 4000,
        "{TIFF}": {
            "Make": "Canon",
            "Model": "EOS R5",
        },
        "{Exif}": {
            "LensMake": "Canon",
            "LensModel": "RF24-70mm F2.8 L IS USM",
            "FocalLength": 50,
            "FocalLengthIn35mmFilm": 50,
            "FNumber": 2.8,
            "ShutterSpeedValue": 7.643856,
            "ExposureTime": 0.005,
            "ISOSpeedRatings": [400, 400],
        },
    }


@pytest.fixture
def isolated_home(tmp_path, monkeypatch):
    """Point the home and working directories at an empty temp directory."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)
    return tmp_path
