"""Pitch Service - Orchestrates repositories and the scoring/composition core."""

import logging
import random
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pitchforge.core.config import Settings, get_settings
from pitchforge.core.exceptions import ValidationError
from pitchforge.core.repository import InMemoryRepository, Repository
from pitchforge.models import (
    CaseStudy,
    CaseStudyStats,
    PitchAction,
    PitchStats,
    ProjectBrief,
    ScoredCaseStudy,
    SolutionPitch,
    validate_brief,
)
from pitchforge.pitch.composer import PitchComposer
from pitchforge.pitch.export import render_html
from pitchforge.pitch.lifecycle import apply_action, save_edit
from pitchforge.scoring.ranking import rank
from pitchforge.services.stats import case_study_stats, pitch_stats

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PitchService:
    """
    Single entry point for recommendation and pitch workflows.

    Loads records from the injected repositories, hands them to the pure
    core as explicit arguments and saves what comes back. Transports (HTTP
    routes, UI handlers) call this service rather than the core directly.
    """

    def __init__(
        self,
        briefs: Optional[Repository[ProjectBrief]] = None,
        case_studies: Optional[Repository[CaseStudy]] = None,
        pitches: Optional[Repository[SolutionPitch]] = None,
        settings: Optional[Settings] = None,
        rng: Optional[random.Random] = None,
    ):
        self.settings = settings or get_settings()
        self.briefs = briefs if briefs is not None else InMemoryRepository("Project brief")
        self.case_studies = case_studies if case_studies is not None else InMemoryRepository("Case study")
        self.pitches = pitches if pitches is not None else InMemoryRepository("Solution pitch")

        if rng is None and self.settings.TITLE_SEED is not None:
            rng = random.Random(self.settings.TITLE_SEED)

        self.composer = PitchComposer(
            rng=rng,
            threshold=self.settings.INCLUSION_THRESHOLD,
            max_cited=self.settings.MAX_CITED_CASE_STUDIES,
        )

    # ===========================================
    # Briefs & Case Studies
    # ===========================================

    def create_brief(self, data: Dict[str, Any]) -> ProjectBrief:
        """Validate and store a project brief."""
        brief = validate_brief(data)
        now = _utcnow()
        brief = brief.model_copy(update={"created_at": brief.created_at or now, "updated_at": now})
        brief = self.briefs.save(brief)
        logger.info(f"Stored project brief {brief.id}: {brief.title}")
        return brief

    def get_brief(self, brief_id: str) -> ProjectBrief:
        return self.briefs.get(brief_id)

    def add_case_study(self, case_study: CaseStudy) -> CaseStudy:
        """Store a case study. Any supplied relevance score is kept only as a cache."""
        now = _utcnow()
        case_study = case_study.model_copy(
            update={"created_at": case_study.created_at or now, "updated_at": now}
        )
        case_study = self.case_studies.save(case_study)
        logger.info(f"Stored case study {case_study.id}: {case_study.title}")
        return case_study

    def list_case_studies(self) -> List[CaseStudy]:
        return self.case_studies.list()

    def _load_case_studies(self) -> List[CaseStudy]:
        case_studies = self.case_studies.list()
        if len(case_studies) > self.settings.MAX_CASE_STUDIES:
            logger.warning(
                f"Refusing to score {len(case_studies)} case studies "
                f"(limit {self.settings.MAX_CASE_STUDIES})"
            )
            raise ValidationError(
                f"Too many case studies to score: {len(case_studies)} > {self.settings.MAX_CASE_STUDIES}"
            )
        return case_studies

    # ===========================================
    # Recommendations
    # ===========================================

    def recommend(self, brief_id: str, limit: Optional[int] = None) -> List[ScoredCaseStudy]:
        """
        Rank the case study library against a brief.

        Args:
            brief_id: Brief to score against
            limit: Number of results (defaults to RECOMMENDATION_LIMIT)

        Returns:
            Scored case studies, best first
        """
        brief = self.briefs.get(brief_id)
        limit = self.settings.RECOMMENDATION_LIMIT if limit is None else limit
        if limit < 1:
            raise ValidationError("Recommendation limit must be at least 1")

        ranked = rank(brief, self._load_case_studies(), limit)
        logger.info(f"Recommended {len(ranked)} case studies for brief {brief_id}")
        return ranked

    # ===========================================
    # Pitches
    # ===========================================

    def generate_pitch(self, brief_id: str, created_by: Optional[str] = None) -> SolutionPitch:
        """
        Rank case studies for a brief, compose a draft pitch and store it.

        Args:
            brief_id: Brief the pitch answers
            created_by: Authoring team member email

        Returns:
            Stored SolutionPitch
        """
        brief = self.briefs.get(brief_id)
        ranked = rank(brief, self._load_case_studies(), self.settings.PITCH_CANDIDATE_LIMIT)

        pitch = self.composer.compose(brief, ranked)
        if created_by:
            pitch = pitch.model_copy(update={"created_by": created_by})

        pitch = self.pitches.save(pitch)
        logger.info(
            f"Generated pitch {pitch.id} for brief {brief_id} "
            f"citing {pitch.case_study_ids or 'no case studies'}"
        )
        return pitch

    def get_pitch(self, pitch_id: str) -> SolutionPitch:
        return self.pitches.get(pitch_id)

    def list_pitches(self) -> List[SolutionPitch]:
        return self.pitches.list()

    def edit_pitch(
        self,
        pitch_id: str,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> SolutionPitch:
        """Save an edit as a new version; cited case studies stay frozen."""
        pitch = save_edit(self.pitches.get(pitch_id), title=title, content=content)
        pitch = self.pitches.save(pitch)
        logger.info(f"Saved pitch {pitch_id} as version {pitch.version}")
        return pitch

    def transition_pitch(
        self,
        pitch_id: str,
        action: PitchAction,
        feedback: Optional[str] = None,
    ) -> SolutionPitch:
        """Apply a lifecycle action (submit, approve, reject, revise)."""
        current = self.pitches.get(pitch_id)
        try:
            pitch = apply_action(current, action, feedback=feedback)
        except ValidationError as e:
            logger.warning(f"Pitch {pitch_id} transition refused: {e}")
            raise

        pitch = self.pitches.save(pitch)
        logger.info(f"Pitch {pitch_id} is now {pitch.status.value}")
        return pitch

    def export_pitch(self, pitch_id: str) -> str:
        """Render a stored pitch as an HTML document."""
        return render_html(self.pitches.get(pitch_id))

    # ===========================================
    # Statistics
    # ===========================================

    def case_study_stats(self, brief_id: Optional[str] = None) -> CaseStudyStats:
        brief = self.briefs.get(brief_id) if brief_id else None
        return case_study_stats(self._load_case_studies(), brief)

    def pitch_stats(self) -> PitchStats:
        return pitch_stats(self.pitches.list())


# ===========================================
# Singleton Instance
# ===========================================

_pitch_service: Optional[PitchService] = None


def get_pitch_service() -> PitchService:
    """Return the process-wide service, created on first use."""
    global _pitch_service
    if _pitch_service is None:
        _pitch_service = PitchService()
    return _pitch_service
