"""Rule-based résumé scoring: analysis, rubric scores, bonuses, job fit and advice."""

from resume_scorer.analyzers.pipeline import analyze
from resume_scorer.scoring.engine import score

__all__ = ["analyze", "score"]
