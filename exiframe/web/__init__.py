"""Web API for ExiFrame.

This module provides a small local HTTP API that extracts metadata from
uploaded photos and returns framed images.
"""

from .app import create_app

__all__ = ["create_app"]
