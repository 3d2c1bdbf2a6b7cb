"""Display strings for the metadata overlay of a framed photo."""

from dataclasses import dataclass
from typing import Dict, List, Optional

from exiframe.processing.builder import ExifData

UNKNOWN_MAKER = "Unknown Maker"
UNKNOWN_CAMERA = "Unknown Camera"
UNKNOWN_LENS = "Unknown Lens"


def format_camera_maker(exif: Optional[ExifData]) -> str:
    if exif and exif.camera_maker is not None:
        return exif.camera_maker
    return UNKNOWN_MAKER


def format_camera_model(exif: Optional[ExifData]) -> str:
    if exif and exif.camera_model is not None:
        return exif.camera_model
    return UNKNOWN_CAMERA


def format_lens_model(exif: Optional[ExifData]) -> str:
    if exif and exif.lens_model is not None:
        return exif.lens_model
    return UNKNOWN_LENS


def format_focal_length(
    exif: Optional[ExifData],
    show_focal_length_in_35mm_film: bool = False
) -> str:
    """Return the focal length, e.g. ``"23mm"``.

    Args:
        exif: Metadata record (None if no record)
        show_focal_length_in_35mm_film: Show the 35mm-equivalent value

    Returns:
        Focal length string, ``"0mm"`` when unknown
    """
    focal_length = None
    if exif:
        if show_focal_length_in_35mm_film:
            focal_length = exif.focal_length_in_35mm_film
        else:
            focal_length = exif.focal_length
    return f"{focal_length if focal_length is not None else 0}mm"


def format_f_number(exif: Optional[ExifData]) -> str:
    """Return the aperture with one decimal place, e.g. ``"f/2.8"``."""
    f_number = exif.f_number if exif and exif.f_number is not None else 0.0
    return f"f/{f_number:.1f}"


def format_shutter_speed(exif: Optional[ExifData]) -> str:
    """Return the exposure time as a fraction, e.g. ``"1/200s"``."""
    if exif and exif.exposure_time is not None:
        return f"{exif.exposure_time.fractional_expression}s"
    return "0s"


def format_iso(exif: Optional[ExifData]) -> str:
    iso = exif.iso if exif and exif.iso is not None else 0
    return f"ISO{iso}"


@dataclass(frozen=True)
class OverlayText:
    """All overlay strings for one record and display mode."""
    camera_maker: str
    camera_model: str
    lens_model: str
    focal_length: str
    f_number: str
    shutter_speed: str
    iso: str

    @property
    def lines(self) -> List[str]:
        """Overlay text grouped into the three lines drawn under the photo."""
        return [
            f"{self.camera_maker} {self.camera_model}",
            self.lens_model,
            f"{self.focal_length} {self.f_number} {self.shutter_speed} {self.iso}",
        ]

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        return {
            "camera_maker": self.camera_maker,
            "camera_model": self.camera_model,
            "lens_model": self.lens_model,
            "focal_length": self.focal_length,
            "f_number": self.f_number,
            "shutter_speed": self.shutter_speed,
            "iso": self.iso,
        }


def format_overlay(
    exif: Optional[ExifData],
    show_focal_length_in_35mm_film: bool = False
) -> OverlayText:
    """Format every overlay string for a record.

    Args:
        exif: Metadata record (None if no record)
        show_focal_length_in_35mm_film: Show the 35mm-equivalent focal length

    Returns:
        OverlayText with defaults substituted for absent fields
    """
    return OverlayText(
        camera_maker=format_camera_maker(exif),
        camera_model=format_camera_model(exif),
        lens_model=format_lens_model(exif),
        focal_length=format_focal_length(exif, show_focal_length_in_35mm_film),
        f_number=format_f_number(exif),
        shutter_speed=format_shutter_speed(exif),
        iso=format_iso(exif),
    )
