"""Aggregate result models returned by the service layer."""

from typing import Dict, Optional

from pydantic import BaseModel, Field


class CaseStudyStats(BaseModel):
    """Overview of the case study library."""
    total: int = Field(0, description="Number of case studies")
    by_industry: Dict[str, int] = Field(
        default_factory=dict,
        description="Case study count per industry"
    )
    average_relevance_score: int = Field(
        0,
        ge=0,
        le=100,
        description="Mean score against brief_id (0 when no brief given)"
    )
    brief_id: Optional[str] = Field(None, description="Brief the average was computed for")


class PitchStats(BaseModel):
    """Pitch counts per review status."""
    total: int = Field(0, description="Number of pitches")
    draft: int = Field(0, description="Pitches in draft")
    submitted: int = Field(0, description="Pitches awaiting review")
    approved: int = Field(0, description="Approved pitches")
    rejected: int = Field(0, description="Rejected pitches")
