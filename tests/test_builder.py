"""Tests for building ExifData records."""

import pytest

from exiframe.metadata.fraction import Fraction
from exiframe.metadata.parser import ImageMetadataParser
from exiframe.processing.builder import ExifData, build_exif_data
from exiframe.processing.formatter import format_shutter_speed


def test_build_from_camera_jpeg(camera_jpeg):
    exif = build_exif_data(camera_jpeg)

    assert exif.image_data == camera_jpeg
    assert exif.camera_maker == "FUJIFILM"
    assert exif.camera_model == "X100V"
    assert exif.lens_model == "23mm F2"
    assert exif.focal_length == 23
    assert exif.focal_length_in_35mm_film == 35
    assert exif.f_number == pytest.approx(2.8)
    assert exif.exposure_time == Fraction(1, 200)
    assert exif.iso == 200
    assert format_shutter_speed(exif) == "1/200s"


def test_build_without_metadata(plain_jpeg):
    exif = build_exif_data(plain_jpeg)
    assert exif == ExifData(image_data=plain_jpeg)


def test_build_from_undecodable_bytes():
    assert build_exif_data(b"definitely not a photo") is None


def test_build_with_parser(camera_properties):
    parser = ImageMetadataParser(camera_properties)
    exif = build_exif_data(b"raw", parser=parser)

    assert exif.image_data == b"raw"
    assert exif.camera_maker == "Canon"
    assert exif.lens_model == "RF24-70mm F2.8 L IS USM"
    assert exif.exposure_time == Fraction(1, 200)
    # First of several ISO values
    assert exif.iso == 400


def test_empty_iso_list_gives_no_iso(camera_properties):
    camera_properties["{Exif}"]["ISOSpeedRatings"] = []
    exif = build_exif_data(b"raw", parser=ImageMetadataParser(camera_properties))
    assert exif.iso is None


def test_fields_are_independent(camera_properties):
    """A missing or mistyped field never affects the others."""
    del camera_properties["{TIFF}"]
    camera_properties["{Exif}"]["FocalLength"] = "50mm"
    exif = build_exif_data(b"raw", parser=ImageMetadataParser(camera_properties))

    assert exif.camera_maker is None
    assert exif.camera_model is None
    assert exif.focal_length is None
    assert exif.focal_length_in_35mm_film == 50
    assert exif.lens_model == "RF24-70mm F2.8 L IS USM"


@pytest.mark.parametrize("exposure_time", [-0.01, float("nan"), float("inf")])
def test_invalid_exposure_time_is_dropped(camera_properties, exposure_time):
    camera_properties["{Exif}"]["ExposureTime"] = exposure_time
    exif = build_exif_data(b"raw", parser=ImageMetadataParser(camera_properties))

    assert exif.exposure_time is None
    assert exif.f_number == pytest.approx(2.8)


def test_integer_exposure_time(camera_properties):
    camera_properties["{Exif}"]["ExposureTime"] = 2
    exif = build_exif_data(b"raw", parser=ImageMetadataParser(camera_properties))
    assert exif.exposure_time == Fraction(2, 1)


def test_record_is_immutable(camera_jpeg):
    exif = build_exif_data(camera_jpeg)
    with pytest.raises(AttributeError):
        exif.iso = 800


def test_to_dict(camera_properties):
    exif = build_exif_data(b"raw", parser=ImageMetadataParser(camera_properties))
    assert exif.to_dict() == {
        "camera_maker": "Canon",
        "camera_model": "EOS R5",
        "lens_model": "RF24-70mm F2.8 L IS USM",
        "focal_length": 50,
        "focal_length_in_35mm_film": 50,
        "f_number": 2.8,
        "exposure_time": "1/200",
        "iso": 400,
    }
