"""Score records produced by the scoring engine."""

from enum import Enum
from typing import Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field

from resume_scorer.schemas.analysis import AnalysisResult


class ScoreCategory(str, Enum):
    """The five rubric buckets, in display order."""

    BASIC_INFO = "basic_info"
    EDUCATION = "education"
    SKILLS = "skills"
    EXPERIENCE = "experience"
    ACHIEVEMENTS = "achievements"


class SpecializationType(str, Enum):
    PROGRAMMING = "programming"
    DATA = "data"
    DESIGN = "design"
    ENGINEERING = "engineering"
    ACADEMIC = "academic"
    PRACTICAL = "practical"


class CategoryScore(BaseModel):
    """One rubric bucket: capped total plus its sub-item breakdown."""

    model_config = ConfigDict(frozen=True)

    total: float = Field(..., ge=0, description="Sum of sub-scores, capped at maximum")
    maximum: float = Field(..., ge=0, description="Category ceiling")
    items: Dict[str, float] = Field(default_factory=dict, description="Sub-item -> sub-score")
    item_max: Dict[str, float] = Field(default_factory=dict, description="Sub-item -> cap")
    bonus: float = Field(default=0, ge=0, description="Specialization bonus shown with this bucket")

    @property
    def display_total(self) -> float:
        return self.total + self.bonus

    @property
    def percentage(self) -> float:
        if self.maximum <= 0:
            return 0.0
        return round(100.0 * self.total / self.maximum, 1)


class Specialization(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: SpecializationType
    level: int = Field(..., ge=0, description="Strength of the underlying signal")
    bonus: int = Field(..., ge=0, description="Points added on top of the capped base score")


class JobRecommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str = Field(..., description="Job category / title")
    match: int = Field(..., ge=0, le=100, description="Match percentage")
    reasons: Tuple[str, ...] = Field(default=(), description="Why this job was suggested")


class ScoreResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_score: float = Field(..., ge=0, le=100)
    specialization_bonus: int = Field(default=0, ge=0)
    total_score: float = Field(..., ge=0, description="base_score + specialization_bonus; may exceed 100")
    category_scores: Dict[ScoreCategory, CategoryScore]
    analysis: AnalysisResult
    specializations: Tuple[Specialization, ...] = ()
    suggestions: Tuple[str, ...] = ()
    job_recommendations: Tuple[JobRecommendation, ...] = ()

    def category(self, category: ScoreCategory) -> CategoryScore:
        return self.category_scores[category]

    @property
    def category_totals(self) -> Dict[ScoreCategory, float]:
        return {cat: score.total for cat, score in self.category_scores.items()}

    def top_recommendations(self, n: int = 4) -> List[JobRecommendation]:
        return list(self.job_recommendations[:n])
