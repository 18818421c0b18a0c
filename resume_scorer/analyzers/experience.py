"""Internship / project mention counts and experience-quality flags."""

import re

from resume_scorer.lexicon import (
    DURATION_PATTERNS,
    EMPLOYER_PATTERN,
    INTERNSHIP_PATTERN,
    KNOWN_EMPLOYERS,
    OUTCOME_PATTERN,
    PROJECT_PATTERN,
)
from resume_scorer.schemas.analysis import Experience

_INTERNSHIP = re.compile(INTERNSHIP_PATTERN)
_PROJECT = re.compile(PROJECT_PATTERN)
_EMPLOYER = re.compile(EMPLOYER_PATTERN)
_DURATIONS = tuple(re.compile(p) for p in DURATION_PATTERNS)
_OUTCOME = re.compile(OUTCOME_PATTERN)

# Latin names only match whole words ("intel" is not "intelligence").
_LATIN_EMPLOYERS = re.compile(
    r"(?<![a-z0-9])(?:"
    + "|".join(re.escape(name) for name in KNOWN_EMPLOYERS if name.isascii())
    + r")(?![a-z0-9])"
)
_CJK_EMPLOYERS = tuple(name for name in KNOWN_EMPLOYERS if not name.isascii())


def count_mentions(pattern: re.Pattern, text: str) -> int:
    return sum(1 for _ in pattern.finditer(text or ""))


def has_employer(text: str) -> bool:
    if _EMPLOYER.search(text) or any(name in text for name in _CJK_EMPLOYERS):
        return True
    return bool(_LATIN_EMPLOYERS.search(text.lower()))


def analyze_experience(text: str) -> Experience:
    # Counts are raw mentions; repeating "project" inflates them.
    text = text or ""
    return Experience(
        internship_count=count_mentions(_INTERNSHIP, text),
        project_count=count_mentions(_PROJECT, text),
        has_employer=has_employer(text),
        has_duration=any(p.search(text) for p in _DURATIONS),
        has_outcome=bool(_OUTCOME.search(text)),
    )
