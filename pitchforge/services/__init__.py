"""Services module - Workflow orchestration over the scoring core."""

from pitchforge.services.pitch_service import PitchService, get_pitch_service
from pitchforge.services.stats import case_study_stats, pitch_stats

__all__ = [
    "PitchService",
    "get_pitch_service",
    "case_study_stats",
    "pitch_stats",
]
