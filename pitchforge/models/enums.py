"""Enumeration types for briefs and pitches."""

from enum import Enum


class BriefStatus(str, Enum):
    """Progress of a customer brief through the workflow."""
    SUBMITTED = "submitted"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    APPROVED = "approved"
    REJECTED = "rejected"


class PitchStatus(str, Enum):
    """Review state of a solution pitch."""
    DRAFT = "draft"
    SUBMITTED = "submitted"
    APPROVED = "approved"
    REJECTED = "rejected"


class PitchAction(str, Enum):
    """Operator actions that move a pitch between statuses."""
    SUBMIT = "submit"
    APPROVE = "approve"
    REJECT = "reject"
    REVISE = "revise"
