"""Specialization bonuses: uncapped points on top of the 100-point base."""

from typing import Dict, List

from resume_scorer.schemas.analysis import AnalysisResult, SkillCategory
from resume_scorer.schemas.score_result import (
    CategoryScore,
    ScoreCategory,
    Specialization,
    SpecializationType,
)

# type -> (skill category, minimum count, count offset, bonus cap)
SKILL_SPECIALIZATIONS = (
    (SpecializationType.PROGRAMMING, SkillCategory.PROGRAMMING, 5, 3, 8),
    (SpecializationType.DATA, SkillCategory.DATA, 3, 2, 6),
    (SpecializationType.DESIGN, SkillCategory.DESIGN, 3, 2, 6),
    (SpecializationType.ENGINEERING, SkillCategory.ENGINEERING, 3, 2, 6),
)
ACADEMIC_MIN_COMPETITIONS = 3
ACADEMIC_MIN_SCHOLARSHIPS = 2
ACADEMIC_BONUS = 5
PRACTICAL_MIN_PROJECTS = 4
PRACTICAL_MIN_INTERNSHIPS = 3
PRACTICAL_BONUS = 4

# Category a specialization bonus is displayed with.
DISPLAY_CATEGORY = {
    SpecializationType.PROGRAMMING: ScoreCategory.SKILLS,
    SpecializationType.DATA: ScoreCategory.SKILLS,
    SpecializationType.DESIGN: ScoreCategory.SKILLS,
    SpecializationType.ENGINEERING: ScoreCategory.SKILLS,
    SpecializationType.ACADEMIC: ScoreCategory.ACHIEVEMENTS,
    SpecializationType.PRACTICAL: ScoreCategory.EXPERIENCE,
}


def detect_specializations(analysis: AnalysisResult) -> List[Specialization]:
    """Every triggered specialization; several may fire at once."""
    found: List[Specialization] = []
    for kind, category, minimum, offset, cap in SKILL_SPECIALIZATIONS:
        count = analysis.skills.count(category)
        if count >= minimum:
            found.append(Specialization(type=kind, level=count, bonus=min(count - offset, cap)))

    ach = analysis.achievements
    if ach.competition_count >= ACADEMIC_MIN_COMPETITIONS or ach.scholarship_count >= ACADEMIC_MIN_SCHOLARSHIPS:
        found.append(Specialization(
            type=SpecializationType.ACADEMIC,
            level=ach.competition_count + ach.scholarship_count,
            bonus=ACADEMIC_BONUS,
        ))

    exp = analysis.experience
    if exp.project_count >= PRACTICAL_MIN_PROJECTS or exp.internship_count >= PRACTICAL_MIN_INTERNSHIPS:
        found.append(Specialization(
            type=SpecializationType.PRACTICAL,
            level=exp.project_count + exp.internship_count,
            bonus=PRACTICAL_BONUS,
        ))
    return found


def total_bonus(specializations: List[Specialization]) -> int:
    return sum(s.bonus for s in specializations)


def attach_display_bonuses(
    categories: Dict[ScoreCategory, CategoryScore],
    specializations: List[Specialization],
) -> Dict[ScoreCategory, CategoryScore]:
    """Copy of categories with bonuses shown alongside; capped totals are untouched."""
    bonus_by_category: Dict[ScoreCategory, int] = {}
    for specialization in specializations:
        category = DISPLAY_CATEGORY[specialization.type]
        bonus_by_category[category] = bonus_by_category.get(category, 0) + specialization.bonus
    return {
        category: score.model_copy(update={"bonus": bonus_by_category[category]})
        if category in bonus_by_category else score
        for category, score in categories.items()
    }
