"""Tests for score-tier version selection."""

import pytest
from pydantic import ValidationError

from cuecards.answers.versions import available_scores, find_version, score_sort_key
from cuecards.schemas import AnswerVersion, SampleAnswer


def make_qa(*scores: str) -> SampleAnswer:
    return SampleAnswer(
        question="Q?",
        versions=[AnswerVersion(score=s, answer=f"answer at {s}") for s in scores],
    )


class TestFindVersion:

    def test_returns_matching_version(self):
        qa = make_qa("6.0", "7.0", "8.0")
        version = find_version(qa.versions, "7.0")
        assert version is not None
        assert version.answer == "answer at 7.0"

    def test_absent_score_is_not_found(self):
        qa = make_qa("6.0", "7.0", "8.0")
        assert find_version(qa.versions, "6.5") is None

    def test_labels_compared_as_written(self):
        qa = make_qa("7")
        assert find_version(qa.versions, "7.0") is None

    def test_no_versions(self):
        assert find_version([], "6.5") is None


class TestAvailableScores:

    def test_union_is_deduplicated_and_sorted(self):
        assert available_scores([make_qa("6", "7"), make_qa("6", "8")]) == ["6", "7", "8"]

    def test_numeric_not_lexicographic(self):
        scores = available_scores([make_qa("60", "7", "6.5"), make_qa("6", "10")])
        assert scores == ["6", "6.5", "7", "10", "60"]

    def test_non_numeric_labels_sort_last(self):
        scores = available_scores([make_qa("native", "7", "band-5")])
        assert scores == ["7", "band-5", "native"]

    def test_empty_card(self):
        assert available_scores([]) == []

    def test_sort_key_nan_is_non_numeric(self):
        assert score_sort_key("nan")[0] == 1


class TestUniqueScores:

    def test_duplicate_score_in_one_question_rejected(self):
        with pytest.raises(ValidationError):
            make_qa("6.5", "6.5")

    def test_same_score_in_different_questions_allowed(self):
        assert available_scores([make_qa("6.5"), make_qa("6.5")]) == ["6.5"]
