"""Catalog of the image metadata fields read by ExiFrame.

Each field is a ``MetadataKey`` naming the raw tag as it appears in the
decoded properties mapping, the group it lives in, and the accessor used to
read it. A wrong key name silently yields an absent field, so these names are
checked against Pillow's tag tables in the test suite.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from exiframe.metadata.values import as_float, as_int, as_int_list, as_string

T = TypeVar("T")


class ImageProperty:
    """Top-level keys of a decoded image properties mapping."""
    PIXEL_WIDTH = "PixelWidth"
    PIXEL_HEIGHT = "PixelHeight"
    DPI_WIDTH = "DPIWidth"
    DPI_HEIGHT = "DPIHeight"
    ORIENTATION = "Orientation"
    COLOR_MODEL = "ColorModel"
    PROFILE_NAME = "ProfileName"
    EXIF = "{Exif}"
    EXIF_AUX = "{ExifAux}"
    TIFF = "{TIFF}"
    GPS = "{GPS}"


@dataclass(frozen=True)
class MetadataDictionaryKey:
    """Name of a nested group in the properties mapping."""
    key_name: str


@dataclass(frozen=True)
class MetadataKey(Generic[T]):
    """Where a value lives in the properties mapping and how to read it.

    Attributes:
        key_name: Raw tag name inside the target mapping
        accessor: Returns the value as T, or None on a type mismatch
        parent_dictionary_key: Group holding the tag (None for top level)
    """
    key_name: str
    accessor: Callable[[Any], Optional[T]]
    parent_dictionary_key: Optional[MetadataDictionaryKey] = None


class MetadataDictionary:
    """Groups that hold the fields below."""
    EXIF = MetadataDictionaryKey(ImageProperty.EXIF)
    AUXILIARY_EXIF = MetadataDictionaryKey(ImageProperty.EXIF_AUX)
    TIFF = MetadataDictionaryKey(ImageProperty.TIFF)


# Lens information
LENS_MAKER: MetadataKey[str] = MetadataKey(
    "LensMake", as_string, MetadataDictionary.EXIF
)
LENS_MODEL: MetadataKey[str] = MetadataKey(
    "LensModel", as_string, MetadataDictionary.EXIF
)

# Camera information
CAMERA_MAKER: MetadataKey[str] = MetadataKey(
    "Make", as_string, MetadataDictionary.TIFF
)
CAMERA_MODEL: MetadataKey[str] = MetadataKey(
    "Model", as_string, MetadataDictionary.TIFF
)

# Camera settings
FOCAL_LENGTH: MetadataKey[int] = MetadataKey(
    "FocalLength", as_int, MetadataDictionary.EXIF
)
FOCAL_LENGTH_IN_35MM_FILM: MetadataKey[int] = MetadataKey(
    "FocalLengthIn35mmFilm", as_int, MetadataDictionary.EXIF
)
F_NUMBER: MetadataKey[float] = MetadataKey(
    "FNumber", as_float, MetadataDictionary.EXIF
)
# APEX value, log2 of the inverse exposure time
SHUTTER_SPEED: MetadataKey[float] = MetadataKey(
    "ShutterSpeedValue", as_float, MetadataDictionary.EXIF
)
EXPOSURE_TIME: MetadataKey[float] = MetadataKey(
    "ExposureTime", as_float, MetadataDictionary.EXIF
)
ISO_SPEED_RATINGS: MetadataKey[List[int]] = MetadataKey(
    "ISOSpeedRatings", as_int_list, MetadataDictionary.EXIF
)

ALL_KEYS: Dict[str, MetadataKey] = {
    "lens_maker": LENS_MAKER,
    "lens_model": LENS_MODEL,
    "camera_maker": CAMERA_MAKER,
    "camera_model": CAMERA_MODEL,
    "focal_length": FOCAL_LENGTH,
    "focal_length_in_35mm_film": FOCAL_LENGTH_IN_35MM_FILM,
    "f_number": F_NUMBER,
    "shutter_speed": SHUTTER_SPEED,
    "exposure_time": EXPOSURE_TIME,
    "iso_speed_ratings": ISO_SPEED_RATINGS,
}
