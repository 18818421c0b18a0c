"""Ordered improvement advice derived from category totals."""

from typing import Dict, List

from resume_scorer.schemas.analysis import AnalysisResult
from resume_scorer.schemas.score_result import CategoryScore, ScoreCategory

# Category -> total below which its advice is given
SUGGESTION_THRESHOLDS = (
    (ScoreCategory.BASIC_INFO, 8),
    (ScoreCategory.EDUCATION, 20),
    (ScoreCategory.SKILLS, 15),
    (ScoreCategory.EXPERIENCE, 15),
    (ScoreCategory.ACHIEVEMENTS, 5),
)
INSTITUTION_BONUS_MIN = 13

EMPTY_CONTENT_SUGGESTION = (
    "No recognisable résumé content was found. Provide more content: contact details, "
    "education, skills, experience and achievements."
)
INSTITUTION_SUGGESTION = (
    "Leverage your institution's reputation: place your education section near the top "
    "and target employers that recruit from your school."
)
POSITIVE_SUGGESTION = (
    "Your résumé is well rounded. Keep tailoring it to each application and quantify "
    "recent results."
)

_MISSING_FIELD_ADVICE = (
    ("has_name", "Add your full name at the top of the résumé."),
    ("has_phone", "Add a phone number recruiters can reach you on."),
    ("has_email", "Add a professional email address."),
    ("has_address", "Add your city or address so employers know where you are based."),
)

_CATEGORY_ADVICE = {
    ScoreCategory.EDUCATION: (
        "Strengthen the education section: state your institution, degree and major "
        "clearly, and include your GPA if it is 3.0 or higher."
    ),
    ScoreCategory.SKILLS: (
        "List more concrete skills (languages, tools, frameworks) that match the jobs "
        "you are applying for."
    ),
    ScoreCategory.EXPERIENCE: (
        "Describe internships and projects with employer names, dates and measurable "
        "outcomes."
    ),
    ScoreCategory.ACHIEVEMENTS: (
        "Add scholarships, competition results, certificates or leadership roles."
    ),
}


def _advice_for(category: ScoreCategory, analysis: AnalysisResult) -> List[str]:
    if category is ScoreCategory.BASIC_INFO:
        return [text for attr, text in _MISSING_FIELD_ADVICE if not getattr(analysis, attr)]
    return [_CATEGORY_ADVICE[category]]


def generate_suggestions(categories: Dict[ScoreCategory, CategoryScore], analysis: AnalysisResult) -> List[str]:
    """
    Advice in category order, then the institution note, then a positive fallback
    when nothing else applies. A résumé with no detected signal gets only the
    empty-content advice.
    """
    if analysis.is_empty:
        return [EMPTY_CONTENT_SUGGESTION]

    suggestions: List[str] = []
    for category, threshold in SUGGESTION_THRESHOLDS:
        score = categories.get(category)
        if score is not None and score.total < threshold:
            suggestions.extend(_advice_for(category, analysis))

    if analysis.education.school_score >= INSTITUTION_BONUS_MIN:
        suggestions.append(INSTITUTION_SUGGESTION)
    if not suggestions:
        suggestions.append(POSITIVE_SUGGESTION)
    return suggestions
