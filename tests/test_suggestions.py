from resume_scorer.schemas.analysis import AnalysisResult, Education
from resume_scorer.scoring.scorer import score_categories
from resume_scorer.scoring.suggestions import (
    EMPTY_CONTENT_SUGGESTION,
    INSTITUTION_SUGGESTION,
    POSITIVE_SUGGESTION,
    generate_suggestions,
)


def _suggest(analysis):
    return generate_suggestions(score_categories(analysis), analysis)


def test_zero_signal_gets_single_fallback():
    assert _suggest(AnalysisResult()) == [EMPTY_CONTENT_SUGGESTION]


def test_missing_contact_field_advice():
    analysis = AnalysisResult(has_name=True, has_email=True, has_address=True)
    suggestions = _suggest(analysis)
    assert "phone" in suggestions[0].lower()
    assert not any("email" in s.lower() and s.startswith("Add") for s in suggestions)


def test_category_order():
    analysis = AnalysisResult(has_email=True)
    suggestions = _suggest(analysis)
    # basic info (three missing fields), education, skills, experience, achievements
    assert len(suggestions) == 7
    assert suggestions[0].startswith("Add your full name")
    assert suggestions[3].startswith("Strengthen the education section")
    assert suggestions[-1].startswith("Add scholarships")


def test_institution_note_for_top_schools(strong_analysis):
    assert _suggest(strong_analysis) == [INSTITUTION_SUGGESTION]


def test_positive_fallback(strong_analysis):
    analysis = strong_analysis.model_copy(
        update={"education": Education(school_score=12, gpa=3.9, major_relevant=True)}
    )
    assert _suggest(analysis) == [POSITIVE_SUGGESTION]
