"""Build the ExifData record shown on a framed photo."""

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

from exiframe.metadata import keys
from exiframe.metadata.fraction import Fraction
from exiframe.metadata.parser import ImageMetadataParser

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExifData:
    """Camera and capture settings extracted from one photo.

    Every field is independently optional. A record is never modified after
    construction; selecting another photo replaces it.

    Attributes:
        image_data: Raw bytes of the photo
        camera_maker: Camera manufacturer
        camera_model: Camera model name
        lens_model: Lens model name
        focal_length: Focal length in mm
        focal_length_in_35mm_film: 35mm-equivalent focal length in mm
        f_number: Aperture f-number
        exposure_time: Exposure time as a fraction of a second
        iso: ISO speed
    """
    image_data: Optional[bytes] = None
    camera_maker: Optional[str] = None
    camera_model: Optional[str] = None
    lens_model: Optional[str] = None
    focal_length: Optional[int] = None
    focal_length_in_35mm_film: Optional[int] = None
    f_number: Optional[float] = None
    exposure_time: Optional[Fraction] = None
    iso: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization (without image bytes)."""
        return {
            "camera_maker": self.camera_maker,
            "camera_model": self.camera_model,
            "lens_model": self.lens_model,
            "focal_length": self.focal_length,
            "focal_length_in_35mm_film": self.focal_length_in_35mm_film,
            "f_number": self.f_number,
            "exposure_time": (
                self.exposure_time.fractional_expression
                if self.exposure_time else None
            ),
            "iso": self.iso,
        }


def _exposure_fraction(exposure_time: Optional[float]) -> Optional[Fraction]:
    """Convert an exposure time in seconds, dropping invalid values."""
    if exposure_time is None:
        return None
    if not math.isfinite(exposure_time) or exposure_time < 0:
        logger.warning(f"Ignoring invalid exposure time: {exposure_time}")
        return None
    return Fraction.from_decimal(exposure_time)


def build_exif_data(
    image_data: bytes,
    parser: Optional[ImageMetadataParser] = None
) -> Optional[ExifData]:
    """Extract the displayed metadata fields from a photo.

    Args:
        image_data: Raw bytes of the photo
        parser: Parser to use instead of decoding image_data (optional)

    Returns:
        ExifData record, or None if the image could not be decoded

    Examples:
        >>> exif = build_exif_data(open("photo.jpg", "rb").read())
        >>> exif.exposure_time.fractional_expression
        '1/200'
    """
    if parser is None:
        parser = ImageMetadataParser.create(image_data)
    if parser is None:
        logger.info("Could not decode image; no metadata record")
        return None

    iso_speed_ratings = parser.parse(keys.ISO_SPEED_RATINGS)

    exif = ExifData(
        image_data=image_data,
        camera_maker=parser.parse(keys.CAMERA_MAKER),
        camera_model=parser.parse(keys.CAMERA_MODEL),
        lens_model=parser.parse(keys.LENS_MODEL),
        focal_length=parser.parse(keys.FOCAL_LENGTH),
        focal_length_in_35mm_film=parser.parse(keys.FOCAL_LENGTH_IN_35MM_FILM),
        f_number=parser.parse(keys.F_NUMBER),
        exposure_time=_exposure_fraction(parser.parse(keys.EXPOSURE_TIME)),
        iso=iso_speed_ratings[0] if iso_speed_ratings else None,
    )

    logger.debug(f"Built metadata record: {exif.to_dict()}")
    return exif
