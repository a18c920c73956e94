"""Pitch composition - renders a proposal document from a brief and ranked case studies."""

import logging
import random
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence

from pitchforge.models import CaseStudy, PitchStatus, ProjectBrief, SolutionPitch
from pitchforge.pitch.templates import (
    DEFAULT_TECH_STACK,
    DEFAULT_TITLE_KEYWORDS,
    INDUSTRY_TECH_STACK,
    INDUSTRY_TITLE_KEYWORDS,
    SECTIONS,
    load_section_templates,
)
from pitchforge.scoring.ranking import INCLUSION_THRESHOLD, MAX_CITED, rank, select_for_pitch

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PitchComposer:
    """
    Composes SolutionPitch records.

    Everything except the title keyword draw is deterministic. The draw
    uses ``rng``, so passing ``random.Random(seed)`` pins the title.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        threshold: int = INCLUSION_THRESHOLD,
        max_cited: int = MAX_CITED,
    ):
        self.rng = rng or random.Random()
        self.threshold = threshold
        self.max_cited = max_cited
        self._templates = load_section_templates()

    # ===========================================
    # Title
    # ===========================================

    def generate_title(self, brief: ProjectBrief) -> str:
        """Format "{keyword} {title} Solution" with an industry keyword."""
        keywords = INDUSTRY_TITLE_KEYWORDS.get(brief.industry, DEFAULT_TITLE_KEYWORDS)
        keyword = self.rng.choice(keywords)
        return f"{keyword} {brief.title} Solution"

    # ===========================================
    # Sections
    # ===========================================

    def render_sections(self, brief: ProjectBrief, case_studies: Sequence[CaseStudy]) -> Dict[str, str]:
        """
        Render all eight sections.

        Args:
            brief: Project brief to interpolate
            case_studies: Case studies to cite (already filtered)

        Returns:
            Section key -> rendered Markdown, in document order
        """
        context = {
            "brief": brief,
            "objectives": [line.strip() for line in brief.objectives.split("\n") if line.strip()],
            "case_studies": list(case_studies),
            "lead_study": case_studies[0] if case_studies else None,
            "tech_stack": INDUSTRY_TECH_STACK.get(brief.industry, DEFAULT_TECH_STACK),
        }

        return {
            key: self._templates[key].render(heading=heading, **context).strip()
            for key, heading in SECTIONS
        }

    def render_content(self, brief: ProjectBrief, case_studies: Sequence[CaseStudy]) -> str:
        """Join the rendered sections with a blank line between each."""
        return "\n\n".join(self.render_sections(brief, case_studies).values())

    # ===========================================
    # Composition
    # ===========================================

    def compose(
        self,
        brief: ProjectBrief,
        ranked_case_studies: Sequence[CaseStudy],
        now: Optional[datetime] = None,
    ) -> SolutionPitch:
        """
        Build a draft pitch citing the best qualifying case studies.

        Every entry is rescored against ``brief`` first, so a cached
        ``relevance_score`` from another brief never decides a citation.
        Correctly ranked input keeps its order.

        Args:
            brief: Project brief the pitch answers
            ranked_case_studies: Case studies in rank order
            now: Creation timestamp (defaults to current UTC time)

        Returns:
            SolutionPitch in draft status at version 1
        """
        rescored = rank(brief, ranked_case_studies, len(ranked_case_studies))
        selected: List[CaseStudy] = select_for_pitch(
            rescored,
            threshold=self.threshold,
            max_items=self.max_cited,
        )
        timestamp = now or _utcnow()

        pitch = SolutionPitch(
            brief_id=brief.id,
            title=self.generate_title(brief),
            content=self.render_content(brief, selected),
            status=PitchStatus.DRAFT,
            case_study_ids=[study.id for study in selected if study.id],
            version=1,
            client_email=brief.submitted_by,
            created_at=timestamp,
            updated_at=timestamp,
        )

        logger.debug(
            f"Composed pitch {pitch.title!r} citing {len(selected)} of "
            f"{len(ranked_case_studies)} ranked case studies"
        )
        return pitch


def compose(
    brief: ProjectBrief,
    ranked_case_studies: Sequence[CaseStudy],
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
) -> SolutionPitch:
    """Compose a pitch with the default threshold (60) and citation cap (2)."""
    return PitchComposer(rng=rng).compose(brief, ranked_case_studies, now=now)
