"""Models package - All Pydantic models organized by domain."""

from pitchforge.models.enums import BriefStatus, PitchStatus, PitchAction
from pitchforge.models.brief import ProjectBrief, validate_brief
from pitchforge.models.case_study import CaseStudy, Interval, ScoreBreakdown, ScoredCaseStudy
from pitchforge.models.pitch import SolutionPitch
from pitchforge.models.results import CaseStudyStats, PitchStats

__all__ = [
    # Enums
    "BriefStatus",
    "PitchStatus",
    "PitchAction",
    # Brief models
    "ProjectBrief",
    "validate_brief",
    # Case study models
    "CaseStudy",
    "Interval",
    "ScoreBreakdown",
    "ScoredCaseStudy",
    # Pitch models
    "SolutionPitch",
    # Result models
    "CaseStudyStats",
    "PitchStats",
]
