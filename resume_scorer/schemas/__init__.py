"""Schema exports."""

from .analysis import (
    Achievements,
    AnalysisResult,
    DegreeLevel,
    DegreeMention,
    Education,
    Experience,
    SkillCategory,
    SkillProfile,
)
from .parsed_file import ParsedFile
from .score_result import (
    CategoryScore,
    JobRecommendation,
    ScoreCategory,
    ScoreResult,
    Specialization,
    SpecializationType,
)

__all__ = [
    "Achievements",
    "AnalysisResult",
    "CategoryScore",
    "DegreeLevel",
    "DegreeMention",
    "Education",
    "Experience",
    "JobRecommendation",
    "ParsedFile",
    "ScoreCategory",
    "ScoreResult",
    "SkillCategory",
    "SkillProfile",
    "Specialization",
    "SpecializationType",
]
