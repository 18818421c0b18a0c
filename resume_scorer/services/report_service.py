"""Plain-text and JSON exports of a score result."""

from datetime import date, datetime
from typing import List, Optional

from resume_scorer.schemas.score_result import ScoreCategory, ScoreResult

REPORT_TITLE = "Resume Analysis Report"

CATEGORY_LABELS = {
    ScoreCategory.BASIC_INFO: "Basic information",
    ScoreCategory.EDUCATION: "Education",
    ScoreCategory.SKILLS: "Skills",
    ScoreCategory.EXPERIENCE: "Experience",
    ScoreCategory.ACHIEVEMENTS: "Achievements",
}


def _fmt(value: float) -> str:
    """12.0 -> '12', 12.5 -> '12.5'."""
    return f"{value:g}"


def generate_report(result: ScoreResult, generated_at: Optional[datetime] = None) -> str:
    """Human-readable report: totals, category breakdown, bonuses, jobs, suggestions."""
    generated_at = generated_at or datetime.now()
    lines: List[str] = [
        REPORT_TITLE,
        "=" * len(REPORT_TITLE),
        f"Generated: {generated_at.strftime('%Y-%m-%d %H:%M:%S')}",
        f"Total score: {_fmt(result.total_score)}",
        f"Base score: {_fmt(result.base_score)} / 100",
        f"Specialization bonus: +{result.specialization_bonus}",
        "",
        "Category scores",
        "---------------",
    ]
    for category, cat_score in result.category_scores.items():
        label = CATEGORY_LABELS.get(category, category.value)
        line = f"{label}: {_fmt(cat_score.total)} / {_fmt(cat_score.maximum)} ({cat_score.percentage}%)"
        if cat_score.bonus:
            line += f" +{_fmt(cat_score.bonus)} bonus"
        lines.append(line)

    if result.specializations:
        lines += ["", "Specializations", "---------------"]
        for specialization in result.specializations:
            lines.append(f"{specialization.type.value}: level {specialization.level}, +{specialization.bonus}")

    lines += ["", "Recommended jobs", "----------------"]
    for job in result.job_recommendations:
        reasons = f" ({'; '.join(job.reasons)})" if job.reasons else ""
        lines.append(f"{job.category}: {job.match}%{reasons}")

    lines += ["", "Suggestions", "-----------"]
    lines += [f"{i}. {text}" for i, text in enumerate(result.suggestions, 1)]
    return "\n".join(lines) + "\n"


def export_json(result: ScoreResult) -> str:
    return result.model_dump_json(indent=2)


def report_filename(day: Optional[date] = None, extension: str = "txt") -> str:
    """report_YYYY-MM-DD.<extension>"""
    day = day or date.today()
    return f"report_{day.isoformat()}.{extension}"
