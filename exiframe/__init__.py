"""ExiFrame - framed photos with their camera settings.

Extracts camera, lens and exposure metadata from a photo and renders the
photo on a card with that metadata printed underneath, ready to share.
"""

from exiframe._version import __version__, __version_info__
from exiframe.config import ConfigManager
from exiframe.metadata import Fraction, ImageMetadataParser
from exiframe.processing import ExifData, build_exif_data, format_overlay
from exiframe.render import FrameRenderer
from exiframe.session import FrameSession

__license__ = "MIT"
__all__ = [
    "__version__",
    "__version_info__",
    "ConfigManager",
    "Fraction",
    "ImageMetadataParser",
    "ExifData",
    "build_exif_data",
    "format_overlay",
    "FrameRenderer",
    "FrameSession",
]
