"""Ranking and threshold selection of scored case studies."""

import logging
from typing import Iterable, List

from pitchforge.models.brief import ProjectBrief
from pitchforge.models.case_study import CaseStudy, ScoredCaseStudy
from pitchforge.scoring.similarity import score_breakdown

logger = logging.getLogger(__name__)

INCLUSION_THRESHOLD = 60
MAX_CITED = 2


def rank(brief: ProjectBrief, case_studies: Iterable[CaseStudy], limit: int) -> List[ScoredCaseStudy]:
    """
    Score every case study against ``brief`` and return the best ``limit``.

    Sorting is stable: equal scores keep the order of the input collection.
    The input is never mutated; scored copies are returned.

    Args:
        brief: Project brief to rank against
        case_studies: Candidate case studies
        limit: Maximum number of entries returned

    Returns:
        Scored case studies, highest score first
    """
    scored = [
        ScoredCaseStudy.from_case_study(case_study, score_breakdown(brief, case_study))
        for case_study in case_studies
    ]

    if limit <= 0:
        return []

    # sorted() is stable, so ties keep input order
    ranked = sorted(scored, key=lambda item: item.relevance_score, reverse=True)[:limit]

    logger.debug(
        f"Ranked {len(scored)} case studies for {brief.title!r}: "
        f"{[item.relevance_score for item in ranked]}"
    )
    return ranked


def select_for_pitch(
    ranked: Iterable[ScoredCaseStudy],
    threshold: int = INCLUSION_THRESHOLD,
    max_items: int = MAX_CITED,
) -> List[ScoredCaseStudy]:
    """
    Keep ranked entries scoring at least ``threshold``, up to ``max_items``.

    Args:
        ranked: Case studies already in rank order
        threshold: Minimum relevance score for inclusion
        max_items: Cap on the number of entries kept

    Returns:
        The qualifying prefix, in rank order
    """
    qualifying = [item for item in ranked if item.relevance_score >= threshold]
    return qualifying[:max(0, max_items)]
