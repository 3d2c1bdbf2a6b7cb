"""Metadata extraction: decoding, key registry, typed lookups and fractions."""

from exiframe.metadata import keys
from exiframe.metadata.decoder import decode_image_properties, HEIC_SUPPORT
from exiframe.metadata.fraction import Fraction
from exiframe.metadata.keys import MetadataKey, MetadataDictionaryKey, ImageProperty
from exiframe.metadata.parser import ImageMetadataParser

__all__ = [
    "keys",
    "decode_image_properties",
    "HEIC_SUPPORT",
    "Fraction",
    "MetadataKey",
    "MetadataDictionaryKey",
    "ImageProperty",
    "ImageMetadataParser",
]
