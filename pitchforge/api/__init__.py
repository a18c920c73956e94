"""API module - HTTP transport over the pitch service."""

from pitchforge.api.routes import router

__all__ = ["router"]
