"""Photo selection session: background parsing and the current record."""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, List, Optional

from PIL import Image

from exiframe.config import ConfigManager
from exiframe.processing.builder import ExifData, build_exif_data
from exiframe.processing.formatter import OverlayText, format_overlay
from exiframe.render.frame import FrameRenderer

logger = logging.getLogger(__name__)

SessionListener = Callable[["FrameSession"], None]


class FrameSession:
    """Holds the current metadata record and display mode for one user.

    Each call to ``select`` parses the photo on a worker thread. Selections
    are numbered; a parse result is only kept if no newer selection was made
    while it ran, so the current record always belongs to the most recently
    selected photo, regardless of which parse finishes last.

    Listeners registered with ``add_listener`` are called whenever the record
    or the 35mm display flag changes, which is when the framed image should
    be rendered again.

    Attributes:
        renderer: Renderer used by ``render``

    Examples:
        >>> with FrameSession() as session:
        ...     session.select(photo_bytes).result()
        ...     session.show_focal_length_in_35mm_film = True
        ...     session.render().save("framed.png")
    """

    def __init__(
        self,
        renderer: Optional[FrameRenderer] = None,
        show_focal_length_in_35mm_film: bool = False,
        max_workers: int = 2,
    ) -> None:
        """Initialize session.

        Args:
            renderer: Renderer for framed images (default settings if omitted)
            show_focal_length_in_35mm_film: Initial display mode
            max_workers: Number of parse worker threads
        """
        self.renderer = renderer or FrameRenderer()
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="exiframe-parse",
        )
        self._lock = threading.Lock()
        self._generation = 0
        self._exif: Optional[ExifData] = None
        self._show_focal_length_in_35mm_film = show_focal_length_in_35mm_film
        self._listeners: List[SessionListener] = []

    @classmethod
    def from_config(cls, config: ConfigManager) -> "FrameSession":
        """Create a session from configuration."""
        return cls(
            renderer=FrameRenderer.from_config(config),
            show_focal_length_in_35mm_film=config.get(
                "frame.show_focal_length_in_35mm_film", False
            ),
            max_workers=config.get("session.max_workers", 2),
        )

    @property
    def exif(self) -> Optional[ExifData]:
        """Record of the most recently selected photo (None if no record)."""
        with self._lock:
            return self._exif

    @property
    def generation(self) -> int:
        """Number of selections made so far."""
        with self._lock:
            return self._generation

    @property
    def show_focal_length_in_35mm_film(self) -> bool:
        return self._show_focal_length_in_35mm_film

    @show_focal_length_in_35mm_film.setter
    def show_focal_length_in_35mm_film(self, value: bool) -> None:
        if value == self._show_focal_length_in_35mm_film:
            return
        self._show_focal_length_in_35mm_film = value
        self._notify()

    def add_listener(self, listener: SessionListener) -> None:
        """Register a callback for record and display mode changes."""
        self._listeners.append(listener)

    def select(self, image_data: Optional[bytes]) -> "Future[Optional[ExifData]]":
        """Start parsing a newly selected photo.

        Args:
            image_data: Raw bytes of the photo (None clears the record)

        Returns:
            Future resolving to this selection's record. The record only
            becomes the session's current record if no newer selection was
            made in the meantime.
        """
        with self._lock:
            self._generation += 1
            generation = self._generation
        logger.debug(f"Photo selection {generation} started")
        return self._executor.submit(self._parse, generation, image_data)

    def _parse(
        self,
        generation: int,
        image_data: Optional[bytes]
    ) -> Optional[ExifData]:
        """Parse one selection and publish it if still current."""
        exif = None
        if image_data:
            try:
                exif = build_exif_data(image_data)
            except Exception as e:
                logger.error(
                    f"Unexpected error parsing selection {generation}: {e}",
                    exc_info=True
                )

        with self._lock:
            current = generation == self._generation
            if current:
                self._exif = exif

        if current:
            logger.debug(f"Photo selection {generation} published")
            self._notify()
        else:
            logger.debug(
                f"Discarding result of selection {generation}; "
                f"a newer photo was selected"
            )
        return exif

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception as e:
                logger.error(f"Session listener failed: {e}", exc_info=True)

    def overlay(self) -> OverlayText:
        """Overlay strings for the current record and display mode."""
        return format_overlay(self.exif, self.show_focal_length_in_35mm_film)

    def render(self) -> Image.Image:
        """Render the framed image for the current record and display mode."""
        return self.renderer.render(self.exif, self.show_focal_length_in_35mm_film)

    def close(self) -> None:
        """Wait for running parses and stop the worker threads."""
        self._executor.shutdown(wait=True)

    def __enter__(self) -> "FrameSession":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def __repr__(self) -> str:
        """Return string representation of session."""
        return (
            f"<FrameSession selections={self.generation} "
            f"has_record={self.exif is not None}>"
        )
