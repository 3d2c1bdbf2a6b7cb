"""Tests for typed metadata lookups."""

import pytest

from exiframe.metadata import keys
from exiframe.metadata.keys import MetadataKey
from exiframe.metadata.parser import ImageMetadataParser
from exiframe.metadata.values import as_int


def test_parse_fields_from_groups(camera_properties):
    parser = ImageMetadataParser(camera_properties)

    assert parser.parse(keys.CAMERA_MAKER) == "Canon"
    assert parser.parse(keys.CAMERA_MODEL) == "EOS R5"
    assert parser.parse(keys.LENS_MAKER) == "Canon"
    assert parser.parse(keys.LENS_MODEL) == "RF24-70mm F2.8 L IS USM"
    assert parser.parse(keys.FOCAL_LENGTH) == 50
    assert parser.parse(keys.FOCAL_LENGTH_IN_35MM_FILM) == 50
    assert parser.parse(keys.F_NUMBER) == pytest.approx(2.8)
    assert parser.parse(keys.SHUTTER_SPEED) == pytest.approx(7.643856)
    assert parser.parse(keys.EXPOSURE_TIME) == pytest.approx(0.005)
    assert parser.parse(keys.ISO_SPEED_RATINGS) == [400, 400]


def test_top_level_key():
    parser = ImageMetadataParser({"PixelWidth": 6000})
    pixel_width = MetadataKey("PixelWidth", as_int)
    assert parser.parse(pixel_width) == 6000


def test_missing_group_yields_none():
    parser = ImageMetadataParser({"{Exif}": {"FNumber": 2.8}})
    assert parser.parse(keys.CAMERA_MAKER) is None


def test_group_that_is_not_a_mapping_yields_none():
    parser = ImageMetadataParser({"{TIFF}": "Canon", "{Exif}": ["FNumber"]})
    assert parser.parse(keys.CAMERA_MAKER) is None
    assert parser.parse(keys.F_NUMBER) is None


def test_missing_key_yields_none(camera_properties):
    del camera_properties["{Exif}"]["LensModel"]
    parser = ImageMetadataParser(camera_properties)
    assert parser.parse(keys.LENS_MODEL) is None
    # Other fields are unaffected
    assert parser.parse(keys.LENS_MAKER) == "Canon"


@pytest.mark.parametrize("field, value", [
    ("FocalLength", "50"),
    ("FocalLength", 50.5),
    ("FNumber", "2.8"),
    ("ExposureTime", "1/200"),
    ("ISOSpeedRatings", 400),
    ("ISOSpeedRatings", ["400"]),
    ("LensModel", 12345),
])
def test_wrong_type_yields_none(camera_properties, field, value):
    camera_properties["{Exif}"][field] = value
    parser = ImageMetadataParser(camera_properties)
    key = next(k for k in keys.ALL_KEYS.values() if k.key_name == field)
    assert parser.parse(key) is None


def test_empty_iso_list_is_not_missing(camera_properties):
    camera_properties["{Exif}"]["ISOSpeedRatings"] = []
    parser = ImageMetadataParser(camera_properties)
    assert parser.parse(keys.ISO_SPEED_RATINGS) == []

    del camera_properties["{Exif}"]["ISOSpeedRatings"]
    assert parser.parse(keys.ISO_SPEED_RATINGS) is None


def test_create_from_image_bytes(camera_jpeg):
    parser = ImageMetadataParser.create(camera_jpeg)
    assert parser is not None
    assert parser.parse(keys.CAMERA_MODEL) == "X100V"
    assert parser.parse(keys.LENS_MODEL) == "23mm F2"


@pytest.mark.parametrize("data", [b"", b"not an image"])
def test_create_from_undecodable_bytes_returns_none(data):
    assert ImageMetadataParser.create(data) is None
