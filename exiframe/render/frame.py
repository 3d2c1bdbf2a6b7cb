"""Compose a photo and its metadata overlay into a shareable framed image."""

import logging
from io import BytesIO
from typing import List, Optional, Tuple

from PIL import Image, ImageColor, ImageDraw, ImageFont, ImageOps

from exiframe.config import ConfigManager
from exiframe.exceptions import RenderError
from exiframe.processing.builder import ExifData
from exiframe.processing.formatter import format_overlay

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ("PNG", "JPEG")


class FrameRenderer:
    """Renders the framed card: photo on top, three overlay lines below.

    The card has a solid background with ``margin`` pixels around the content
    and between the photo and the text. When there is no photo to show, a
    square placeholder is drawn in its place.

    Attributes:
        margin: Padding in pixels around and between photo and text
        background_color: Card background color
        text_color: Overlay text color
        font_size: Overlay font size in points
        line_spacing: Extra pixels between text lines
        max_image_width: Photos wider than this are scaled down
        placeholder_size: Edge length of the placeholder square
        placeholder_color: Fill color of the placeholder square

    Examples:
        >>> renderer = FrameRenderer(margin=24)
        >>> image = renderer.render(exif, show_focal_length_in_35mm_film=True)
        >>> png_bytes = renderer.export(image)
    """

    def __init__(
        self,
        margin: int = 16,
        background_color: str = "white",
        text_color: str = "black",
        font_path: Optional[str] = None,
        font_size: int = 14,
        line_spacing: int = 4,
        max_image_width: int = 1080,
        placeholder_size: int = 320,
        placeholder_color: str = "black",
    ) -> None:
        """Initialize frame renderer.

        Raises:
            RenderError: If a color name is not recognized
        """
        for color in (background_color, text_color, placeholder_color):
            try:
                ImageColor.getrgb(color)
            except ValueError as e:
                raise RenderError(f"Invalid color: {color!r}") from e

        self.margin = margin
        self.background_color = background_color
        self.text_color = text_color
        self.font_path = font_path
        self.font_size = font_size
        self.line_spacing = line_spacing
        self.max_image_width = max_image_width
        self.placeholder_size = placeholder_size
        self.placeholder_color = placeholder_color
        self._font: Optional[ImageFont.ImageFont] = None

    @classmethod
    def from_config(cls, config: ConfigManager) -> "FrameRenderer":
        """Create a renderer from the ``frame`` configuration section."""
        return cls(
            margin=config.get("frame.margin", 16),
            background_color=config.get("frame.background_color", "white"),
            text_color=config.get("frame.text_color", "black"),
            font_path=config.get("frame.font_path") or None,
            font_size=config.get("frame.font_size", 14),
            line_spacing=config.get("frame.line_spacing", 4),
            max_image_width=config.get("frame.max_image_width", 1080),
            placeholder_size=config.get("frame.placeholder_size", 320),
            placeholder_color=config.get("frame.placeholder_color", "black"),
        )

    @property
    def font(self) -> ImageFont.ImageFont:
        """Get or load the overlay font."""
        if self._font is None:
            if self.font_path:
                try:
                    self._font = ImageFont.truetype(self.font_path, self.font_size)
                except OSError as e:
                    logger.warning(
                        f"Could not load font {self.font_path}: {e}, "
                        f"using default font"
                    )
            if self._font is None:
                self._font = ImageFont.load_default()
        return self._font

    def placeholder(self) -> Image.Image:
        """Return the square drawn when there is no photo."""
        return Image.new(
            "RGB",
            (self.placeholder_size, self.placeholder_size),
            self.placeholder_color,
        )

    def load_photo(self, exif: Optional[ExifData]) -> Image.Image:
        """Decode the record's photo, upright and scaled to fit.

        Args:
            exif: Metadata record (None if no record)

        Returns:
            RGB photo, or the placeholder if there is nothing to decode
        """
        if not exif or not exif.image_data:
            return self.placeholder()

        try:
            with Image.open(BytesIO(exif.image_data)) as img:
                photo = ImageOps.exif_transpose(img).convert("RGB")
        except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as e:
            logger.warning(f"Could not decode photo for rendering: {e}")
            return self.placeholder()

        if photo.width > self.max_image_width:
            height = max(1, round(photo.height * self.max_image_width / photo.width))
            photo = photo.resize(
                (self.max_image_width, height), Image.Resampling.LANCZOS
            )
        return photo

    def _measure(self, lines: List[str]) -> List[Tuple[int, int, int, int]]:
        """Return the bounding box of each text line."""
        draw = ImageDraw.Draw(Image.new("RGB", (1, 1)))
        return [draw.textbbox((0, 0), line, font=self.font) for line in lines]

    def render(
        self,
        exif: Optional[ExifData],
        show_focal_length_in_35mm_film: bool = False
    ) -> Image.Image:
        """Compose the framed image for a record.

        Args:
            exif: Metadata record (None if no record)
            show_focal_length_in_35mm_film: Show the 35mm-equivalent focal length

        Returns:
            Framed RGB image
        """
        photo = self.load_photo(exif)
        lines = format_overlay(exif, show_focal_length_in_35mm_film).lines
        boxes = self._measure(lines)

        text_widths = [box[2] - box[0] for box in boxes]
        text_heights = [box[3] - box[1] for box in boxes]
        text_height = sum(text_heights) + self.line_spacing * (len(lines) - 1)
        content_width = max([photo.width] + text_widths)

        canvas = Image.new(
            "RGB",
            (
                content_width + 2 * self.margin,
                photo.height + text_height + 3 * self.margin,
            ),
            self.background_color,
        )
        canvas.paste(
            photo,
            (self.margin + (content_width - photo.width) // 2, self.margin),
        )

        draw = ImageDraw.Draw(canvas)
        y = 2 * self.margin + photo.height
        for line, box, width, height in zip(lines, boxes, text_widths, text_heights):
            x = self.margin + (content_width - width) // 2
            draw.text(
                (x - box[0], y - box[1]),
                line,
                fill=self.text_color,
                font=self.font,
            )
            y += height + self.line_spacing

        logger.debug(f"Rendered framed image {canvas.width}x{canvas.height}")
        return canvas

    def export(self, image: Image.Image, image_format: str = "PNG") -> bytes:
        """Encode a rendered image for sharing.

        Args:
            image: Rendered image
            image_format: "PNG" or "JPEG"

        Returns:
            Encoded image bytes

        Raises:
            RenderError: If the format is unsupported or encoding fails
        """
        image_format = image_format.upper()
        if image_format == "JPG":
            image_format = "JPEG"
        if image_format not in EXPORT_FORMATS:
            raise RenderError(
                f"Unsupported export format: {image_format} "
                f"(expected one of {', '.join(EXPORT_FORMATS)})"
            )

        buffer = BytesIO()
        try:
            image.save(buffer, format=image_format)
        except (OSError, ValueError) as e:
            raise RenderError(f"Failed to encode {image_format} image: {e}") from e
        return buffer.getvalue()
