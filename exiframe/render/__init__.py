"""Rendering of framed images."""

from .frame import FrameRenderer, EXPORT_FORMATS

__all__ = ["FrameRenderer", "EXPORT_FORMATS"]
