"""Case study models - past engagements and their per-brief scores."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class Interval(BaseModel):
    """Numeric range parsed from free text. ``min > max`` is kept as written."""
    min: int = Field(0, description="First number found in the text")
    max: int = Field(0, description="Second number found in the text")


class CaseStudy(BaseModel):
    """A previously completed engagement used as evidence of experience."""
    id: Optional[str] = Field(None, description="Record ID")
    title: str = Field(..., description="Case study title")
    industry: str = Field(..., description="Industry of the engagement")
    description: str = Field("", description="What was built")
    tags: List[str] = Field(default_factory=list, description="Short topic tags")
    outcome: str = Field("", description="Measured result of the engagement")
    budget: str = Field("", description="Free-text budget range")
    timeline: str = Field("", description="Free-text timeline range")
    relevance_score: int = Field(
        0,
        ge=0,
        le=100,
        description="Last computed score; only meaningful for the brief it was scored against"
    )

    created_at: Optional[datetime] = Field(None, description="Record creation time")
    updated_at: Optional[datetime] = Field(None, description="Last update time")


class ScoreBreakdown(BaseModel):
    """The four sub-scores behind a relevance score."""
    industry: float = Field(..., ge=0.0, le=1.0, description="Industry match (0 or 1)")
    budget: float = Field(..., ge=0.0, le=1.0, description="Budget overlap (0 or 1)")
    timeline: float = Field(..., ge=0.0, le=1.0, description="Timeline overlap (0 or 1)")
    content: float = Field(..., ge=0.0, le=1.0, description="Objective word overlap ratio")
    total: int = Field(..., ge=0, le=100, description="Weighted score 0-100")


class ScoredCaseStudy(CaseStudy):
    """A case study with a score freshly computed against one brief."""
    breakdown: Optional[ScoreBreakdown] = Field(
        None,
        description="Sub-scores that produced relevance_score"
    )

    @classmethod
    def from_case_study(cls, case_study: CaseStudy, breakdown: ScoreBreakdown) -> "ScoredCaseStudy":
        data = case_study.model_dump(exclude={"relevance_score", "breakdown"})
        return cls(**data, relevance_score=breakdown.total, breakdown=breakdown)
