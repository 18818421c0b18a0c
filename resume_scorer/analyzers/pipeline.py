"""Run every analyzer over normalized text and freeze the result."""

from typing import Optional

from resume_scorer.analyzers.achievements import analyze_achievements
from resume_scorer.analyzers.education import analyze_education
from resume_scorer.analyzers.experience import analyze_experience
from resume_scorer.analyzers.fields import extract_contact_fields, is_structurally_complete
from resume_scorer.analyzers.normalizer import normalize_text
from resume_scorer.analyzers.skills import analyze_skills
from resume_scorer.schemas.analysis import AnalysisResult


def analyze(text: Optional[str]) -> AnalysisResult:
    """
    Extract all signals from raw résumé text. The analyzers are independent of
    each other and only read the normalized text. Never raises.
    """
    normalized = normalize_text(text)
    fields = extract_contact_fields(normalized)
    return AnalysisResult(
        has_name=fields.has_name,
        has_phone=fields.has_phone,
        has_email=fields.has_email,
        has_address=fields.has_address,
        education=analyze_education(normalized),
        skills=analyze_skills(normalized),
        experience=analyze_experience(normalized),
        achievements=analyze_achievements(normalized),
        text_length=len(normalized),
        is_complete=is_structurally_complete(normalized),
    )
