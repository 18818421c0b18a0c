"""Five-category rubric: weighted, capped sub-scores per category."""

from types import MappingProxyType
from typing import Dict, Iterable, Tuple

from resume_scorer.schemas.analysis import AnalysisResult, SkillCategory
from resume_scorer.schemas.score_result import CategoryScore, ScoreCategory
from resume_scorer.utils.helpers import clamp

MAX_BASE_SCORE = 100

CATEGORY_CEILINGS = MappingProxyType({
    ScoreCategory.BASIC_INFO: 10,
    ScoreCategory.EDUCATION: 30,
    ScoreCategory.SKILLS: 25,
    ScoreCategory.EXPERIENCE: 25,
    ScoreCategory.ACHIEVEMENTS: 10,
})

# Skill sub-items: points per matched keyword, cap. Office skills are not scored.
SKILL_WEIGHTS = MappingProxyType({
    SkillCategory.PROGRAMMING: (1.5, 8),
    SkillCategory.DESIGN: (1.5, 5),
    SkillCategory.DATA: (1.5, 5),
    SkillCategory.ENGINEERING: (1.5, 4),
    SkillCategory.BUSINESS: (0.5, 2),
    SkillCategory.LANGUAGE: (0.3, 1),
})

# GPA floor -> academic points, checked top-down.
GPA_TIERS = ((3.8, 8), (3.5, 6), (3.0, 4))
GPA_PRESENT_POINTS = 2
GPA_ABSENT_POINTS = 1
ACADEMIC_MAX = 8


def _sub(raw: float, cap: float) -> Tuple[float, float]:
    return round(clamp(raw, 0, cap), 2), cap


def build_category(category: ScoreCategory, items: Iterable[Tuple[str, Tuple[float, float]]]) -> CategoryScore:
    """Sum (sub-score, cap) pairs and clamp the total to the category ceiling."""
    scores: Dict[str, float] = {}
    caps: Dict[str, float] = {}
    for name, (value, cap) in items:
        scores[name] = value
        caps[name] = cap
    ceiling = CATEGORY_CEILINGS[category]
    total = round(clamp(sum(scores.values()), 0, ceiling), 2)
    return CategoryScore(total=total, maximum=ceiling, items=scores, item_max=caps)


def score_basic_info(analysis: AnalysisResult) -> CategoryScore:
    return build_category(ScoreCategory.BASIC_INFO, [
        ("name", _sub(3 if analysis.has_name else 0, 3)),
        ("phone", _sub(3 if analysis.has_phone else 0, 3)),
        ("email", _sub(3 if analysis.has_email else 0, 3)),
        ("address", _sub(1 if analysis.has_address else 0, 1)),
    ])


def academic_points(gpa: float) -> int:
    for floor, points in GPA_TIERS:
        if gpa >= floor:
            return points
    return GPA_PRESENT_POINTS if gpa > 0 else GPA_ABSENT_POINTS


def score_education(analysis: AnalysisResult) -> CategoryScore:
    edu = analysis.education
    return build_category(ScoreCategory.EDUCATION, [
        ("school", _sub(edu.school_score, 15)),
        ("academic", _sub(academic_points(edu.gpa), ACADEMIC_MAX)),
        ("major", _sub(7 if edu.major_relevant else 2, 7)),
    ])


def score_skills(analysis: AnalysisResult) -> CategoryScore:
    skills = analysis.skills
    return build_category(ScoreCategory.SKILLS, [
        (category.value, _sub(skills.count(category) * weight, cap))
        for category, (weight, cap) in SKILL_WEIGHTS.items()
    ])


def score_experience(analysis: AnalysisResult) -> CategoryScore:
    exp = analysis.experience
    quality = sum((exp.has_employer, exp.has_duration, exp.has_outcome))
    return build_category(ScoreCategory.EXPERIENCE, [
        ("internship", _sub(exp.internship_count * 5, 15)),
        ("project", _sub(exp.project_count * 2, 7)),
        ("quality", _sub(quality, 3)),
    ])


def score_achievements(analysis: AnalysisResult) -> CategoryScore:
    ach = analysis.achievements
    return build_category(ScoreCategory.ACHIEVEMENTS, [
        ("scholarship", _sub(ach.scholarship_count * 1.5, 3)),
        ("competition", _sub(ach.competition_count * 2, 4)),
        ("certificate", _sub(ach.certificate_count * 0.5, 2)),
        ("leadership", _sub(1 if ach.has_leadership else 0, 1)),
    ])


_CATEGORY_SCORERS = (
    (ScoreCategory.BASIC_INFO, score_basic_info),
    (ScoreCategory.EDUCATION, score_education),
    (ScoreCategory.SKILLS, score_skills),
    (ScoreCategory.EXPERIENCE, score_experience),
    (ScoreCategory.ACHIEVEMENTS, score_achievements),
)


def score_categories(analysis: AnalysisResult) -> Dict[ScoreCategory, CategoryScore]:
    """All five category scores, in display order."""
    return {category: scorer(analysis) for category, scorer in _CATEGORY_SCORERS}


def compute_base_score(categories: Dict[ScoreCategory, CategoryScore]) -> float:
    return round(clamp(sum(c.total for c in categories.values()), 0, MAX_BASE_SCORE), 2)
