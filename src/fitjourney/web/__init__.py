"""Web API for fitjourney."""

from .app import create_app

__all__ = ["create_app"]
