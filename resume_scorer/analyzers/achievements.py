"""Scholarship, competition, certificate and award counts; leadership flag."""

import re

from resume_scorer.analyzers.experience import count_mentions
from resume_scorer.lexicon import (
    AWARD_PATTERN,
    CERTIFICATE_PATTERN,
    COMPETITION_PATTERN,
    LEADERSHIP_PATTERN,
    SCHOLARSHIP_PATTERN,
)
from resume_scorer.schemas.analysis import Achievements

_SCHOLARSHIP = re.compile(SCHOLARSHIP_PATTERN)
_COMPETITION = re.compile(COMPETITION_PATTERN)
_CERTIFICATE = re.compile(CERTIFICATE_PATTERN)
_AWARD = re.compile(AWARD_PATTERN)
_LEADERSHIP = re.compile(LEADERSHIP_PATTERN)


def analyze_achievements(text: str) -> Achievements:
    text = text or ""
    return Achievements(
        scholarship_count=count_mentions(_SCHOLARSHIP, text),
        competition_count=count_mentions(_COMPETITION, text),
        certificate_count=count_mentions(_CERTIFICATE, text),
        award_count=count_mentions(_AWARD, text),
        has_leadership=bool(_LEADERSHIP.search(text)),
    )
