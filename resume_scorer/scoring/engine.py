"""Scoring entry point: analyze, score categories, add bonuses, recommend, advise."""

from typing import Optional

from resume_scorer.analyzers.pipeline import analyze
from resume_scorer.schemas.analysis import AnalysisResult
from resume_scorer.schemas.score_result import ScoreResult
from resume_scorer.scoring.recommender import recommend_jobs
from resume_scorer.scoring.scorer import compute_base_score, score_categories
from resume_scorer.scoring.specialization import (
    attach_display_bonuses,
    detect_specializations,
    total_bonus,
)
from resume_scorer.scoring.suggestions import generate_suggestions
from resume_scorer.utils.logger import get_logger

logger = get_logger(__name__)


def score_analysis(analysis: AnalysisResult) -> ScoreResult:
    """Score an existing analysis. Pure: the same analysis always gives the same result."""
    categories = score_categories(analysis)
    base = compute_base_score(categories)
    specializations = detect_specializations(analysis)
    bonus = total_bonus(specializations)
    result = ScoreResult(
        base_score=base,
        specialization_bonus=bonus,
        total_score=round(base + bonus, 2),
        category_scores=attach_display_bonuses(categories, specializations),
        analysis=analysis,
        specializations=tuple(specializations),
        suggestions=tuple(generate_suggestions(categories, analysis)),
        job_recommendations=tuple(recommend_jobs(analysis, specializations)),
    )
    logger.debug(
        "Scored resume: base=%s bonus=%s total=%s specializations=%s",
        result.base_score,
        result.specialization_bonus,
        result.total_score,
        [s.type.value for s in result.specializations],
    )
    return result


def score(text: Optional[str]) -> ScoreResult:
    """
    Score résumé text. Total: any input, including None or empty text, yields a
    complete ScoreResult with defaults in place of missing signals.
    """
    if not isinstance(text, str):
        text = "" if text is None else str(text)
    return score_analysis(analyze(text))
