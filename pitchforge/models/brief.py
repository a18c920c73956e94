"""Project brief model - the customer's structured request."""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, EmailStr, Field
from pydantic import ValidationError as PydanticValidationError

from pitchforge.core.exceptions import ValidationError
from pitchforge.models.enums import BriefStatus


class ProjectBrief(BaseModel):
    """Structured project brief submitted by a customer."""
    id: Optional[str] = Field(None, description="Record ID")
    title: str = Field(..., description="Project title")
    industry: str = Field(..., description="Customer industry (open set)")
    budget: str = Field(..., description="Free-text budget range, e.g. '$50,000 - $100,000'")
    objectives: str = Field(..., description="Project objectives, one per line")
    timeline: str = Field(..., description="Free-text timeline range, e.g. '3-4 months'")
    client_details: str = Field(..., description="Client context")

    status: BriefStatus = Field(BriefStatus.SUBMITTED, description="Workflow status")
    submitted_by: Optional[EmailStr] = Field(None, description="Submitting customer")
    assigned_to: Optional[EmailStr] = Field(None, description="Assigned team member")

    created_at: Optional[datetime] = Field(None, description="Record creation time")
    updated_at: Optional[datetime] = Field(None, description="Last update time")


def validate_brief(data: Dict[str, Any]) -> ProjectBrief:
    """
    Build a ProjectBrief from a raw mapping.

    Args:
        data: Brief fields as supplied by the record store

    Returns:
        Validated ProjectBrief

    Raises:
        ValidationError: If required fields are missing or malformed
    """
    try:
        return ProjectBrief(**data)
    except PydanticValidationError as e:
        fields = sorted({".".join(str(part) for part in err["loc"]) for err in e.errors()})
        raise ValidationError(f"Invalid project brief: {', '.join(fields)}") from e
