"""Decode image bytes into a nested image properties mapping.

The mapping mirrors the layout image frameworks expose for a decoded image:
a few top-level properties (pixel size, DPI, orientation, color model) plus
one nested mapping per metadata group, keyed by standard tag names::

    {
        "PixelWidth": 6000,
        "PixelHeight": 4000,
        "{TIFF}": {"Make": "FUJIFILM", "Model": "X-T5", ...},
        "{Exif}": {"ExposureTime": 0.005, "ISOSpeedRatings": [200], ...},
        "{ExifAux}": {"SerialNumber": "...", ...},
        "{GPS}": {...},
    }
"""

import logging
import math
from io import BytesIO
from typing import Any, Dict, Optional

from PIL import Image, ImageCms
from PIL.ExifTags import GPSTAGS, IFD, TAGS
from PIL.TiffImagePlugin import IFDRational

from exiframe.metadata.keys import ImageProperty

# Register HEIF/HEIC support if available
try:
    from pillow_heif import register_heif_opener
    register_heif_opener()
    HEIC_SUPPORT = True
except ImportError:
    HEIC_SUPPORT = False

logger = logging.getLogger(__name__)

# Tag IDs that point at sub-IFDs rather than holding values
_IFD_POINTERS = {int(IFD.Exif), int(IFD.GPSInfo), int(IFD.Interop)}

# Exif IFD tags that are also grouped under {ExifAux}, with their group names
_AUX_TAG_NAMES = {
    "BodySerialNumber": "SerialNumber",
    "LensSpecification": "LensInfo",
    "LensSerialNumber": "LensSerialNumber",
    "CameraOwnerName": "OwnerName",
}

# Orientation tag in the base IFD
_ORIENTATION_TAG = 0x0112


def _normalize_value(value: Any) -> Any:
    """Convert a raw Pillow tag value into a plain Python value.

    Rationals become ``int`` when integral and ``float`` otherwise, strings
    lose trailing NUL padding, tuples become lists. Returns None for values
    that cannot be represented (e.g. a zero-denominator rational).
    """
    if isinstance(value, IFDRational):
        if value.denominator == 0:
            return None
        number = float(value)
        if not math.isfinite(number):
            return None
        return int(number) if number.is_integer() else number
    if isinstance(value, str):
        return value.rstrip("\x00").strip()
    if isinstance(value, (tuple, list)):
        items = [_normalize_value(item) for item in value]
        return [item for item in items if item is not None]
    return value


def _named_tags(tags: Dict[int, Any], names: Dict[int, str]) -> Dict[str, Any]:
    """Map tag IDs to names, dropping unknown tags and nested IFDs."""
    result: Dict[str, Any] = {}
    for tag_id, value in tags.items():
        if tag_id in _IFD_POINTERS or isinstance(value, dict):
            continue
        name = names.get(tag_id)
        if not name:
            continue
        normalized = _normalize_value(value)
        if normalized is not None:
            result[name] = normalized
    return result


def _profile_name(img: Image.Image) -> Optional[str]:
    """Return the embedded ICC profile description, if any."""
    icc_profile = img.info.get("icc_profile")
    if not icc_profile:
        return None
    try:
        profile = ImageCms.ImageCmsProfile(BytesIO(icc_profile))
        return ImageCms.getProfileDescription(profile).strip() or None
    except (ImageCms.PyCMSError, OSError, ValueError) as e:
        logger.debug(f"Could not read ICC profile description: {e}")
        return None


def _exif_groups(img: Image.Image) -> Dict[str, Any]:
    """Build the {TIFF}, {Exif}, {ExifAux} and {GPS} groups of an image."""
    groups: Dict[str, Any] = {}

    exif = img.getexif()
    if not exif:
        logger.debug("No EXIF data found in image")
        return groups

    tiff = _named_tags(dict(exif.items()), TAGS)
    if tiff:
        groups[ImageProperty.TIFF] = tiff

    exif_ifd = _named_tags(exif.get_ifd(IFD.Exif), TAGS)
    iso = exif_ifd.get("ISOSpeedRatings")
    if isinstance(iso, int):
        exif_ifd["ISOSpeedRatings"] = [iso]
    if exif_ifd:
        groups[ImageProperty.EXIF] = exif_ifd

    aux = {
        aux_name: exif_ifd[tag_name]
        for tag_name, aux_name in _AUX_TAG_NAMES.items()
        if tag_name in exif_ifd
    }
    if aux:
        groups[ImageProperty.EXIF_AUX] = aux

    gps = _named_tags(exif.get_ifd(IFD.GPSInfo), GPSTAGS)
    if gps:
        groups[ImageProperty.GPS] = gps

    orientation = exif.get(_ORIENTATION_TAG)
    if isinstance(orientation, int):
        groups[ImageProperty.ORIENTATION] = orientation

    return groups


def decode_image_properties(data: bytes) -> Optional[Dict[str, Any]]:
    """Decode image bytes and return its properties mapping.

    Supports every format Pillow can open, plus HEIC/HEIF when pillow-heif
    is installed.

    Args:
        data: Raw bytes of an image file

    Returns:
        Properties mapping, or None if the bytes are not a decodable image

    Examples:
        >>> properties = decode_image_properties(open("photo.jpg", "rb").read())
        >>> properties["{TIFF}"]["Make"]
        'FUJIFILM'
    """
    if not data:
        logger.debug("No image data to decode")
        return None

    try:
        with Image.open(BytesIO(data)) as img:
            properties: Dict[str, Any] = {
                ImageProperty.PIXEL_WIDTH: img.width,
                ImageProperty.PIXEL_HEIGHT: img.height,
                ImageProperty.COLOR_MODEL: img.mode,
            }

            dpi = img.info.get("dpi")
            if isinstance(dpi, tuple) and len(dpi) == 2:
                properties[ImageProperty.DPI_WIDTH] = _normalize_value(dpi[0])
                properties[ImageProperty.DPI_HEIGHT] = _normalize_value(dpi[1])

            profile_name = _profile_name(img)
            if profile_name:
                properties[ImageProperty.PROFILE_NAME] = profile_name

            try:
                properties.update(_exif_groups(img))
            except Exception as e:
                # Damaged metadata still leaves a usable image
                logger.warning(f"Error reading EXIF metadata: {e}")
    except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as e:
        logger.debug(f"Could not decode image data ({len(data)} bytes): {e}")
        return None

    logger.debug(
        f"Decoded {properties[ImageProperty.PIXEL_WIDTH]}x"
        f"{properties[ImageProperty.PIXEL_HEIGHT]} image with "
        f"{len(properties)} properties"
    )
    return properties
