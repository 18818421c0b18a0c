import time

import pytest

from resume_scorer import analyze, score
from resume_scorer.schemas.score_result import ScoreCategory, SpecializationType
from resume_scorer.scoring.engine import score_analysis
from resume_scorer.scoring.scorer import CATEGORY_CEILINGS
from resume_scorer.scoring.suggestions import EMPTY_CONTENT_SUGGESTION


@pytest.mark.parametrize("text", ["", None, "   \n  "])
def test_zero_signal_input(text):
    result = score(text)
    assert result.base_score == 5  # school heuristic 2 + academic 1 + major 2
    assert result.total_score == result.base_score
    assert result.specializations == ()
    assert len(result.job_recommendations) == 1
    assert list(result.suggestions) == [EMPTY_CONTENT_SUGGESTION]


def test_non_string_input_is_coerced():
    assert score(12345).base_score >= 0


@pytest.mark.parametrize("fixture", ["chinese_resume", "english_resume"])
def test_result_invariants(fixture, request):
    result = score(request.getfixturevalue(fixture))
    assert 0 <= result.base_score <= 100
    assert result.total_score >= result.base_score
    assert result.total_score == pytest.approx(result.base_score + result.specialization_bonus)
    assert list(result.category_scores) == list(ScoreCategory)
    for category, cat_score in result.category_scores.items():
        assert 0 <= cat_score.total <= CATEGORY_CEILINGS[category]
    assert 1 <= len(result.job_recommendations) <= 4
    assert result.suggestions


def test_rescoring_is_deterministic(chinese_resume):
    assert score(chinese_resume).model_dump_json() == score(chinese_resume).model_dump_json()


def test_chinese_resume(chinese_resume):
    result = score(chinese_resume)
    assert result.analysis.education.school_score == 12
    assert result.category(ScoreCategory.BASIC_INFO).total == 10
    assert result.category(ScoreCategory.EDUCATION).total == 25
    assert SpecializationType.DATA in {s.type for s in result.specializations}


def test_english_resume(english_resume):
    result = score(english_resume)
    assert result.analysis.education.school_score == 15
    assert result.analysis.education.gpa == pytest.approx(3.9)
    assert result.category(ScoreCategory.EDUCATION).total == 30
    assert result.top_recommendations(1)[0].category == "Software Engineer"


def test_score_analysis_matches_score(english_resume):
    assert score_analysis(analyze(english_resume)) == score(english_resume)


def test_long_adversarial_input_scores_quickly():
    start = time.perf_counter()
    result = score("1 " * 25000)
    assert time.perf_counter() - start < 10.0
    assert 0 <= result.total_score
