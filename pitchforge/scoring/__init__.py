"""Scoring module - Interval parsing, relevance scoring and ranking."""

from pitchforge.scoring.intervals import parse_interval, parse_budget, parse_timeline, overlaps
from pitchforge.scoring.similarity import WEIGHTS, score, score_breakdown, content_similarity
from pitchforge.scoring.ranking import INCLUSION_THRESHOLD, MAX_CITED, rank, select_for_pitch

__all__ = [
    "parse_interval",
    "parse_budget",
    "parse_timeline",
    "overlaps",
    "WEIGHTS",
    "score",
    "score_breakdown",
    "content_similarity",
    "INCLUSION_THRESHOLD",
    "MAX_CITED",
    "rank",
    "select_for_pitch",
]
