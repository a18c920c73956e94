"""Aggregate statistics over case studies and pitches."""

from collections import Counter
from typing import Iterable, Optional, Sequence

from pitchforge.models import CaseStudy, CaseStudyStats, PitchStats, PitchStatus, ProjectBrief, SolutionPitch
from pitchforge.scoring.similarity import score


def case_study_stats(case_studies: Sequence[CaseStudy], brief: Optional[ProjectBrief] = None) -> CaseStudyStats:
    """
    Summarize the case study library.

    The average relevance is computed fresh against ``brief``; stored
    scores belong to whatever brief was scored last and are ignored.
    """
    by_industry = Counter(study.industry for study in case_studies)

    average = 0
    if brief is not None and case_studies:
        total = sum(score(brief, study) for study in case_studies)
        average = int(total / len(case_studies) + 0.5)

    return CaseStudyStats(
        total=len(case_studies),
        by_industry=dict(by_industry),
        average_relevance_score=average,
        brief_id=brief.id if brief is not None else None,
    )


def pitch_stats(pitches: Iterable[SolutionPitch]) -> PitchStats:
    """Count pitches per review status."""
    counts = Counter(pitch.status for pitch in pitches)
    return PitchStats(
        total=sum(counts.values()),
        draft=counts[PitchStatus.DRAFT],
        submitted=counts[PitchStatus.SUBMITTED],
        approved=counts[PitchStatus.APPROVED],
        rejected=counts[PitchStatus.REJECTED],
    )
