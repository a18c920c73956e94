"""Brief-to-case-study relevance scoring.

Four weighted sub-scores, weights summing to 1.0:

    1. industry  (0.30) - case-insensitive industry equality
    2. budget    (0.25) - parsed budget ranges overlap
    3. timeline  (0.20) - parsed timeline ranges overlap
    4. content   (0.25) - share of objective words found in description/tags

Final score = round(sum(weight * sub) / sum(weight) * 100), an int in [0, 100].
"""

import logging
import math
from typing import Dict, Iterable, List

from pitchforge.models.brief import ProjectBrief
from pitchforge.models.case_study import CaseStudy, ScoreBreakdown
from pitchforge.scoring.intervals import overlaps, parse_budget, parse_timeline

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Sub-score weights
# ---------------------------------------------------------------------------
WEIGHTS: Dict[str, float] = {
    "industry": 0.30,
    "budget": 0.25,
    "timeline": 0.20,
    "content": 0.25,
}


def tokenize(text: str) -> List[str]:
    """Lower-case and split on whitespace. Punctuation stays attached."""
    return (text or "").lower().split()


def industry_match(brief: ProjectBrief, case_study: CaseStudy) -> float:
    return 1.0 if (brief.industry or "").lower() == (case_study.industry or "").lower() else 0.0


def budget_match(brief: ProjectBrief, case_study: CaseStudy) -> float:
    return 1.0 if overlaps(parse_budget(brief.budget), parse_budget(case_study.budget)) else 0.0


def timeline_match(brief: ProjectBrief, case_study: CaseStudy) -> float:
    return 1.0 if overlaps(parse_timeline(brief.timeline), parse_timeline(case_study.timeline)) else 0.0


def content_similarity(objectives: str, description: str, tags: Iterable[str]) -> float:
    """
    Fraction of objective tokens that appear verbatim in the description
    tokens or the lower-cased tag set.

    Args:
        objectives: Brief objectives text
        description: Case study description
        tags: Case study tags

    Returns:
        Ratio in [0, 1]; 0 when objectives has no tokens
    """
    brief_words = tokenize(objectives)
    if not brief_words:
        return 0.0

    case_words = set(tokenize(description))
    tag_words = {(tag or "").lower() for tag in tags}

    matches = sum(1 for word in brief_words if word in case_words or word in tag_words)
    return matches / len(brief_words)


def score_breakdown(brief: ProjectBrief, case_study: CaseStudy) -> ScoreBreakdown:
    """
    Compute every sub-score and the weighted total for one pair.

    Args:
        brief: Project brief to score against
        case_study: Candidate case study

    Returns:
        ScoreBreakdown with the four sub-scores and integer total
    """
    subscores = {
        "industry": industry_match(brief, case_study),
        "budget": budget_match(brief, case_study),
        "timeline": timeline_match(brief, case_study),
        "content": content_similarity(brief.objectives, case_study.description, case_study.tags),
    }

    weighted = sum(WEIGHTS[name] * value for name, value in subscores.items())
    total_weight = sum(WEIGHTS[name] for name in subscores)
    ratio = weighted / total_weight if total_weight else 0.0

    # Half-up rounding; scores are never negative
    total = int(math.floor(ratio * 100 + 0.5))
    total = max(0, min(100, total))

    logger.debug(
        f"Scored case study {case_study.id or case_study.title!r}: {total} "
        f"(industry={subscores['industry']}, budget={subscores['budget']}, "
        f"timeline={subscores['timeline']}, content={subscores['content']:.2f})"
    )

    return ScoreBreakdown(total=total, **subscores)


def score(brief: ProjectBrief, case_study: CaseStudy) -> int:
    """Relevance of ``case_study`` to ``brief`` as an integer 0-100."""
    return score_breakdown(brief, case_study).total
