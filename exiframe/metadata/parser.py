"""Typed lookups into a decoded image properties mapping."""

import logging
from typing import Any, Dict, Optional, TypeVar

from exiframe.metadata.decoder import decode_image_properties
from exiframe.metadata.keys import MetadataKey
from exiframe.metadata.values import as_mapping

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ImageMetadataParser:
    """Reads individual metadata fields from an image's properties.

    Attributes:
        properties: Top-level properties mapping of the decoded image

    Examples:
        >>> parser = ImageMetadataParser.create(image_bytes)
        >>> if parser:
        ...     print(parser.parse(keys.CAMERA_MODEL))
        'X-T5'
    """

    def __init__(self, properties: Dict[str, Any]):
        """Initialize parser from an already decoded properties mapping.

        Args:
            properties: Top-level properties mapping
        """
        self.properties = properties

    @classmethod
    def create(cls, data: bytes) -> Optional["ImageMetadataParser"]:
        """Decode image bytes and create a parser for them.

        Args:
            data: Raw bytes of an image file

        Returns:
            Parser instance, or None if the bytes could not be decoded or
            produced no properties
        """
        properties = decode_image_properties(data)
        if not properties:
            return None
        return cls(properties)

    def parse(self, key: MetadataKey[T]) -> Optional[T]:
        """Look up a field and return it with the key's expected type.

        A missing group, a group that is not a mapping, a missing tag and a
        tag of the wrong type all yield None.

        Args:
            key: Registry entry describing the field

        Returns:
            Typed value, or None if absent or of an incompatible type
        """
        target = self._target_dictionary(key)
        if key.key_name not in target:
            logger.debug(f"Metadata field not present: {key.key_name}")
            return None

        raw_value = target[key.key_name]
        value = key.accessor(raw_value)
        if value is None:
            logger.debug(
                f"Metadata field {key.key_name} has unexpected type "
                f"{type(raw_value).__name__}"
            )
        return value

    def _target_dictionary(self, key: MetadataKey) -> Dict[str, Any]:
        """Resolve the mapping that should hold the key."""
        if key.parent_dictionary_key is None:
            return self.properties
        group = self.properties.get(key.parent_dictionary_key.key_name)
        return as_mapping(group) or {}

    def __repr__(self) -> str:
        """Return string representation of parser."""
        return f"<ImageMetadataParser {len(self.properties)} properties>"
