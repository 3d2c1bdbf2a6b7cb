"""Processing module: metadata records and overlay formatting."""

from .builder import ExifData, build_exif_data
from .formatter import OverlayText, format_overlay

__all__ = ["ExifData", "build_exif_data", "OverlayText", "format_overlay"]
