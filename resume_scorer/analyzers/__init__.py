"""Text analyzers: normalizer, contact fields, education, skills, experience, achievements."""

from .achievements import analyze_achievements
from .education import analyze_education, institution_score, lookup_institution
from .experience import analyze_experience
from .fields import extract_contact_fields
from .normalizer import normalize_text
from .pipeline import analyze
from .skills import analyze_skills

__all__ = [
    "analyze",
    "analyze_achievements",
    "analyze_education",
    "analyze_experience",
    "analyze_skills",
    "extract_contact_fields",
    "institution_score",
    "lookup_institution",
    "normalize_text",
]
