"""Solution pitch model."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field

from pitchforge.models.enums import PitchStatus


class SolutionPitch(BaseModel):
    """Composed proposal document plus its review metadata."""
    id: Optional[str] = Field(None, description="Record ID")
    brief_id: Optional[str] = Field(None, description="Brief the pitch answers")
    title: str = Field(..., description="Pitch title")
    content: str = Field(..., description="Proposal document in Markdown")
    status: PitchStatus = Field(PitchStatus.DRAFT, description="Review status")
    case_study_ids: List[str] = Field(
        default_factory=list,
        description="Cited case studies, in citation order"
    )
    version: int = Field(1, ge=1, description="Incremented on every saved edit")

    feedback: Optional[str] = Field(None, description="Latest reviewer comment")
    created_by: Optional[EmailStr] = Field(None, description="Authoring team member")
    client_email: Optional[EmailStr] = Field(None, description="Customer the pitch is for")

    created_at: datetime = Field(..., description="Record creation time")
    updated_at: datetime = Field(..., description="Last update time")
