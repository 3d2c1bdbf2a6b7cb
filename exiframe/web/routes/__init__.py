"""Route blueprints for the ExiFrame web API."""

from .api import api_bp

__all__ = ["api_bp"]
