from conftest import skill_profile

from resume_scorer.schemas.analysis import Achievements, AnalysisResult, Experience
from resume_scorer.schemas.score_result import ScoreCategory, SpecializationType
from resume_scorer.scoring.engine import score_analysis
from resume_scorer.scoring.scorer import score_categories
from resume_scorer.scoring.specialization import (
    attach_display_bonuses,
    detect_specializations,
    total_bonus,
)


def test_programming_and_data_stack():
    analysis = AnalysisResult(skills=skill_profile(programming=7, data=5))
    found = detect_specializations(analysis)
    assert [(s.type, s.level, s.bonus) for s in found] == [
        (SpecializationType.PROGRAMMING, 7, 4),
        (SpecializationType.DATA, 5, 3),
    ]
    assert total_bonus(found) == 7

    result = score_analysis(analysis)
    assert result.specialization_bonus == 7
    assert result.total_score == result.base_score + 7


def test_thresholds():
    assert detect_specializations(AnalysisResult(skills=skill_profile(programming=4))) == []
    assert detect_specializations(AnalysisResult(skills=skill_profile(design=2))) == []
    (specialization,) = detect_specializations(AnalysisResult(skills=skill_profile(engineering=3)))
    assert (specialization.type, specialization.bonus) == (SpecializationType.ENGINEERING, 1)


def test_skill_bonus_caps():
    found = detect_specializations(AnalysisResult(skills=skill_profile(programming=20, design=20)))
    assert [s.bonus for s in found] == [8, 6]


def test_academic_and_practical():
    academic = AnalysisResult(achievements=Achievements(competition_count=3))
    assert [(s.type, s.bonus) for s in detect_specializations(academic)] == [(SpecializationType.ACADEMIC, 5)]

    scholar = AnalysisResult(achievements=Achievements(scholarship_count=2, competition_count=1))
    (specialization,) = detect_specializations(scholar)
    assert specialization.level == 3

    practical = AnalysisResult(experience=Experience(internship_count=3))
    assert [(s.type, s.bonus) for s in detect_specializations(practical)] == [(SpecializationType.PRACTICAL, 4)]


def test_order_and_stacking(strong_analysis):
    found = detect_specializations(strong_analysis)
    assert [s.type for s in found] == [
        SpecializationType.PROGRAMMING,
        SpecializationType.DATA,
        SpecializationType.DESIGN,
        SpecializationType.ENGINEERING,
        SpecializationType.ACADEMIC,
        SpecializationType.PRACTICAL,
    ]
    assert total_bonus(found) == 7 + 3 + 3 + 3 + 5 + 4


def test_display_bonuses_leave_totals_alone(strong_analysis):
    categories = score_categories(strong_analysis)
    shown = attach_display_bonuses(categories, detect_specializations(strong_analysis))
    assert shown[ScoreCategory.SKILLS].bonus == 16
    assert shown[ScoreCategory.ACHIEVEMENTS].bonus == 5
    assert shown[ScoreCategory.EXPERIENCE].bonus == 4
    assert shown[ScoreCategory.BASIC_INFO].bonus == 0
    for category, score in shown.items():
        assert score.total == categories[category].total
    assert shown[ScoreCategory.SKILLS].display_total == 25 + 16
