"""PitchForge - case study relevance scoring and solution pitch composition."""

__version__ = "1.0.0"
