"""Rubric scoring, specialization bonuses, job recommendations and suggestions."""

from .engine import score, score_analysis
from .recommender import recommend_jobs
from .scorer import score_categories
from .specialization import detect_specializations
from .suggestions import generate_suggestions

__all__ = [
    "detect_specializations",
    "generate_suggestions",
    "recommend_jobs",
    "score",
    "score_analysis",
    "score_categories",
]
