"""Signals extracted from résumé text by the analyzers."""

from enum import Enum
from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


class DegreeLevel(str, Enum):
    """Degree level, declared in ascending order."""

    UNKNOWN = "unknown"
    ASSOCIATE = "associate"
    BACHELOR = "bachelor"
    MASTER = "master"
    PHD = "phd"

    @property
    def rank(self) -> int:
        return list(DegreeLevel).index(self)


class SkillCategory(str, Enum):
    PROGRAMMING = "programming"
    DESIGN = "design"
    DATA = "data"
    BUSINESS = "business"
    LANGUAGE = "language"
    OFFICE = "office"
    ENGINEERING = "engineering"


class DegreeMention(BaseModel):
    """One institution + degree pair found in the text."""

    model_config = ConfigDict(frozen=True)

    institution: str = Field(..., description="Institution name as written in the text")
    level: DegreeLevel = Field(default=DegreeLevel.UNKNOWN, description="Degree level")
    span: str = Field(default="", description="Matched text the mention was read from")
    tier_score: int = Field(default=0, ge=0, le=15, description="Prestige tier score of the institution")


class Education(BaseModel):
    model_config = ConfigDict(frozen=True)

    school_score: int = Field(default=0, ge=0, le=15, description="Composite institution score")
    gpa: float = Field(default=0.0, ge=0.0, le=4.0, description="GPA on a 4.0 scale, 0 if absent")
    major_relevant: bool = Field(default=False, description="Text mentions an in-demand major")
    degrees: Tuple[DegreeMention, ...] = Field(
        default=(), description="Degree mentions ordered by level ascending"
    )

    @property
    def has_gpa(self) -> bool:
        return self.gpa > 0

    @property
    def highest_level(self) -> DegreeLevel:
        return self.degrees[-1].level if self.degrees else DegreeLevel.UNKNOWN


class SkillProfile(BaseModel):
    """Matched keywords per skill category, in lexicon order."""

    model_config = ConfigDict(frozen=True)

    matches: Dict[SkillCategory, Tuple[str, ...]] = Field(default_factory=dict)

    @field_validator("matches")
    @classmethod
    def _no_duplicates(cls, value: Dict[SkillCategory, Tuple[str, ...]]):
        for category, keywords in value.items():
            if len(set(keywords)) != len(keywords):
                raise ValueError(f"duplicate keywords in category {category.value}")
        return value

    def count(self, category: SkillCategory) -> int:
        return len(self.matches.get(category, ()))

    @computed_field
    @property
    def total(self) -> int:
        return sum(len(keywords) for keywords in self.matches.values())


class Experience(BaseModel):
    """Counts are raw textual mentions, not verified events."""

    model_config = ConfigDict(frozen=True)

    internship_count: int = Field(default=0, ge=0)
    project_count: int = Field(default=0, ge=0)
    has_employer: bool = False
    has_duration: bool = False
    has_outcome: bool = False


class Achievements(BaseModel):
    model_config = ConfigDict(frozen=True)

    scholarship_count: int = Field(default=0, ge=0)
    competition_count: int = Field(default=0, ge=0)
    certificate_count: int = Field(default=0, ge=0)
    award_count: int = Field(default=0, ge=0)
    has_leadership: bool = False


class AnalysisResult(BaseModel):
    """Immutable snapshot of every signal extracted in one scoring run."""

    model_config = ConfigDict(frozen=True)

    has_name: bool = False
    has_phone: bool = False
    has_email: bool = False
    has_address: bool = False
    education: Education = Field(default_factory=Education)
    skills: SkillProfile = Field(default_factory=SkillProfile)
    experience: Experience = Field(default_factory=Experience)
    achievements: Achievements = Field(default_factory=Achievements)
    text_length: int = Field(default=0, ge=0, description="Length of the normalized text")
    is_complete: bool = Field(default=False, description="Enough résumé sections were found")

    @property
    def is_empty(self) -> bool:
        """True when nothing at all was detected in the text."""
        exp = self.experience
        ach = self.achievements
        return not any((
            self.has_name, self.has_phone, self.has_email, self.has_address,
            self.education.degrees, self.education.has_gpa, self.education.major_relevant,
            self.skills.total,
            exp.internship_count, exp.project_count,
            exp.has_employer, exp.has_duration, exp.has_outcome,
            ach.scholarship_count, ach.competition_count, ach.certificate_count,
            ach.award_count, ach.has_leadership,
        ))
