"""Core module - Configuration, errors and record storage."""

from pitchforge.core.config import get_settings, Settings
from pitchforge.core.exceptions import (
    PitchForgeError,
    ValidationError,
    InvalidTransitionError,
    NotFoundError,
)
from pitchforge.core.repository import Repository, InMemoryRepository

__all__ = [
    "get_settings",
    "Settings",
    "PitchForgeError",
    "ValidationError",
    "InvalidTransitionError",
    "NotFoundError",
    "Repository",
    "InMemoryRepository",
]
