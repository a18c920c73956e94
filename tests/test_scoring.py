"""Tests for interval parsing, relevance scoring and ranking."""

import pytest

from pitchforge.models import CaseStudy, Interval, ProjectBrief
from pitchforge.scoring import (
    WEIGHTS,
    content_similarity,
    overlaps,
    parse_budget,
    parse_interval,
    parse_timeline,
    rank,
    score,
    score_breakdown,
    select_for_pitch,
)


class TestIntervalParser:
    """Tests for parse_interval and its budget/timeline variants."""

    def test_budget_range(self):
        assert parse_interval("$25,000 - $50,000") == Interval(min=25000, max=50000)

    def test_no_numbers(self):
        assert parse_interval("no numbers here") == Interval(min=0, max=0)

    def test_single_number_is_sentinel(self):
        assert parse_budget("$250,000+") == Interval(min=0, max=0)

    def test_descending_range_is_kept(self):
        result = parse_interval("100 - 50")
        assert result.min == 100
        assert result.max == 50

    def test_only_first_two_numbers_used(self):
        assert parse_timeline("2-3 months, review at 6") == Interval(min=2, max=3)

    def test_timeline_range(self):
        assert parse_timeline("3-4 months") == Interval(min=3, max=4)

    @pytest.mark.parametrize("value", [None, 42, "", "   ", ",,, -"])
    def test_malformed_input_never_raises(self, value):
        assert parse_interval(value) == Interval(min=0, max=0)

    def test_overlap_rules(self):
        assert overlaps(Interval(min=3, max=4), Interval(min=4, max=6))
        assert not overlaps(Interval(min=3, max=4), Interval(min=5, max=6))
        assert overlaps(Interval(min=0, max=0), Interval(min=0, max=0))


class TestSimilarityScorer:
    """Tests for score and score_breakdown."""

    def test_weights_sum_to_one(self):
        assert sum(WEIGHTS.values()) == pytest.approx(1.0)

    def test_full_match_scores_100(self, brief, matching_case_study):
        assert score(brief, matching_case_study) == 100

    def test_no_match_scores_0(self, brief, unrelated_case_study):
        breakdown = score_breakdown(brief, unrelated_case_study)
        assert breakdown.total == 0
        assert breakdown.content == 0.0

    def test_industry_is_case_insensitive(self, brief, partial_case_study):
        breakdown = score_breakdown(brief, partial_case_study)
        assert breakdown.industry == 1.0
        assert breakdown.budget == 1.0
        assert breakdown.timeline == 0.0
        assert breakdown.total == 55

    def test_content_ratio(self, brief):
        case_study = CaseStudy(
            title="Catalog work",
            industry="Retail",
            description="a product catalog rebuild",
            budget="$1 - $2",
            timeline="20-30 weeks",
        )
        # "product" and "catalog" out of five objective words
        breakdown = score_breakdown(brief, case_study)
        assert breakdown.content == pytest.approx(0.4)
        assert breakdown.total == 10

    def test_tags_count_as_content(self, brief):
        case_study = CaseStudy(title="Tags", industry="Other", tags=["User", "Catalog"])
        assert content_similarity(brief.objectives, case_study.description, case_study.tags) == pytest.approx(0.4)

    def test_punctuation_is_not_stripped(self):
        assert content_similarity("catalog.", "", ["catalog"]) == 0.0

    def test_empty_objectives_guarded(self, brief, matching_case_study):
        empty = brief.model_copy(update={"objectives": ""})
        breakdown = score_breakdown(empty, matching_case_study)
        assert breakdown.content == 0.0
        assert breakdown.total == 75

    def test_missing_case_budget_overlaps_zero_interval(self, brief, matching_case_study):
        open_brief = brief.model_copy(update={"budget": "$250,000+"})
        no_budget = matching_case_study.model_copy(update={"budget": ""})
        assert score_breakdown(open_brief, no_budget).budget == 1.0

    def test_score_is_deterministic(self, brief, partial_case_study):
        assert score(brief, partial_case_study) == score(brief, partial_case_study)

    @pytest.mark.parametrize("budget,timeline,objectives", [
        ("garbage", "soon", "!!!"),
        ("$1,000,000 - $10", "18-1 months", "user user user"),
        ("", "", "   "),
    ])
    def test_score_bounded_integer(self, matching_case_study, budget, timeline, objectives):
        odd_brief = ProjectBrief(
            title="Odd",
            industry="Technology",
            budget=budget,
            objectives=objectives,
            timeline=timeline,
            client_details="",
        )
        result = score(odd_brief, matching_case_study)
        assert isinstance(result, int)
        assert 0 <= result <= 100


class TestRanker:
    """Tests for rank and select_for_pitch."""

    def test_sorted_descending(self, brief, case_studies):
        ranked = rank(brief, case_studies, limit=3)
        assert [item.id for item in ranked] == ["cs-match", "cs-partial", "cs-none"]
        assert [item.relevance_score for item in ranked] == [100, 55, 0]

    def test_limit_truncates(self, brief, case_studies):
        assert len(rank(brief, case_studies, limit=2)) == 2
        assert rank(brief, case_studies, limit=0) == []

    def test_ties_keep_input_order(self, brief, matching_case_study):
        first = matching_case_study.model_copy(update={"id": "a"})
        second = matching_case_study.model_copy(update={"id": "b"})

        assert [item.id for item in rank(brief, [first, second], limit=5)] == ["a", "b"]
        assert [item.id for item in rank(brief, [second, first], limit=5)] == ["b", "a"]

    def test_input_not_mutated(self, brief, case_studies):
        stale = case_studies[0].model_copy(update={"relevance_score": 95})
        library = [stale] + case_studies[1:]
        snapshot = [item.model_copy(deep=True) for item in library]

        rank(brief, library, limit=3)

        assert library == snapshot
        assert library[0].relevance_score == 95

    def test_stale_score_is_replaced(self, brief, unrelated_case_study):
        stale = unrelated_case_study.model_copy(update={"relevance_score": 95})
        assert rank(brief, [stale], limit=1)[0].relevance_score == 0

    def test_empty_collection(self, brief):
        assert rank(brief, [], limit=3) == []

    def test_select_for_pitch_threshold_and_cap(self, brief, matching_case_study):
        ranked = rank(brief, [matching_case_study.model_copy(update={"id": str(i)}) for i in range(4)], limit=4)
        assert [item.id for item in select_for_pitch(ranked)] == ["0", "1"]

        low = [item.model_copy(update={"relevance_score": 59}) for item in ranked]
        assert select_for_pitch(low) == []
