"""Pitch status state machine and the edit/save versioning contract."""

import logging
from datetime import datetime, timezone
from typing import Dict, Optional, Tuple, Union

from pitchforge.core.exceptions import InvalidTransitionError, ValidationError
from pitchforge.models import PitchAction, PitchStatus, SolutionPitch

logger = logging.getLogger(__name__)

# (current status, action) -> next status. Anything missing is illegal.
TRANSITIONS: Dict[Tuple[PitchStatus, PitchAction], PitchStatus] = {
    (PitchStatus.DRAFT, PitchAction.SUBMIT): PitchStatus.SUBMITTED,
    (PitchStatus.SUBMITTED, PitchAction.APPROVE): PitchStatus.APPROVED,
    (PitchStatus.SUBMITTED, PitchAction.REJECT): PitchStatus.REJECTED,
    (PitchStatus.APPROVED, PitchAction.REVISE): PitchStatus.DRAFT,
    (PitchStatus.REJECTED, PitchAction.REVISE): PitchStatus.DRAFT,
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def can_transition(status: PitchStatus, action: Union[PitchAction, str]) -> bool:
    """True if ``action`` is allowed from ``status``."""
    try:
        action = PitchAction(action)
    except ValueError:
        return False
    return (PitchStatus(status), action) in TRANSITIONS


def apply_action(
    pitch: SolutionPitch,
    action: Union[PitchAction, str],
    feedback: Optional[str] = None,
    now: Optional[datetime] = None,
) -> SolutionPitch:
    """
    Move a pitch to its next status.

    Rejecting requires feedback; approving takes optional feedback.
    Version and cited case studies are left unchanged.

    Args:
        pitch: Pitch to transition
        action: submit, approve, reject or revise
        feedback: Reviewer comment
        now: Update timestamp (defaults to current UTC time)

    Returns:
        New SolutionPitch with the updated status

    Raises:
        InvalidTransitionError: If the action is not allowed from the current status
        ValidationError: If a rejection has no feedback
    """
    try:
        action = PitchAction(action)
    except ValueError:
        raise InvalidTransitionError(pitch.status.value, str(action)) from None

    next_status = TRANSITIONS.get((pitch.status, action))
    if next_status is None:
        raise InvalidTransitionError(pitch.status.value, action.value)

    if action == PitchAction.REJECT and not (feedback or "").strip():
        raise ValidationError("Feedback is required when rejecting a pitch")

    update = {"status": next_status, "updated_at": now or _utcnow()}
    if feedback is not None and feedback.strip():
        update["feedback"] = feedback.strip()

    logger.debug(f"Pitch {pitch.id}: {pitch.status.value} --{action.value}--> {next_status.value}")
    return pitch.model_copy(update=update)


def save_edit(
    pitch: SolutionPitch,
    title: Optional[str] = None,
    content: Optional[str] = None,
    now: Optional[datetime] = None,
) -> SolutionPitch:
    """
    Save an edited title and/or content as a new version.

    Scoring is not re-run; ``case_study_ids`` stays as recorded at creation.

    Args:
        pitch: Pitch being edited
        title: New title, or None to keep the current one
        content: New content, or None to keep the current one
        now: Update timestamp (defaults to current UTC time)

    Returns:
        New SolutionPitch with version + 1

    Raises:
        ValidationError: If nothing is edited, or the new title or content is blank
    """
    if title is None and content is None:
        raise ValidationError("An edit must supply a new title or content")

    update = {"version": pitch.version + 1, "updated_at": now or _utcnow()}

    if title is not None:
        if not title.strip():
            raise ValidationError("Pitch title cannot be empty")
        update["title"] = title
    if content is not None:
        if not content.strip():
            raise ValidationError("Pitch content cannot be empty")
        update["content"] = content

    return pitch.model_copy(update=update)
