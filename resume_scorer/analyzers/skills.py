"""Skill detection against the categorized skill lexicon."""

import re
from functools import lru_cache
from typing import Dict, List, Tuple

from resume_scorer.lexicon import SHORT_KEYWORD_LENGTH, SKILL_LEXICON, WORD_BOUNDARY_KEYWORDS
from resume_scorer.schemas.analysis import SkillCategory, SkillProfile

_PUNCT_AND_SPACE = re.compile(r"[\s\W_]+")
_FUZZY_STRIP = re.compile(r"[\s\-_.]+")
MIN_REVERSE_FUZZY_LENGTH = 3


def _is_ascii(text: str) -> bool:
    return all(ord(ch) < 128 for ch in text)


def _needs_word_boundary(keyword: str) -> bool:
    if not _is_ascii(keyword):
        return False
    alnum = re.sub(r"[^a-z0-9]", "", keyword)
    return keyword in WORD_BOUNDARY_KEYWORDS or len(alnum) <= SHORT_KEYWORD_LENGTH


@lru_cache(maxsize=None)
def _boundary_pattern(keyword: str) -> re.Pattern:
    return re.compile(r"(?<![a-z0-9])" + re.escape(keyword) + r"(?![a-z0-9+#])")


def _fuzzy_contains(text_key: str, keyword_key: str) -> bool:
    """Either residual contains the other; the keyword side must not dwarf the text."""
    if not text_key or not keyword_key:
        return False
    if keyword_key in text_key:
        return True
    return (
        len(text_key) >= MIN_REVERSE_FUZZY_LENGTH
        and len(text_key) * 2 > len(keyword_key)
        and text_key in keyword_key
    )


def keyword_matches(keyword: str, lowered: str, fuzzy_text: str) -> bool:
    """
    Test one lowercase keyword against lowercased text: direct substring,
    substring with the keyword's spaces/punctuation removed, then symmetric
    fuzzy containment. Short or ambiguous Latin keywords only match whole words.
    """
    if _needs_word_boundary(keyword):
        return bool(_boundary_pattern(keyword).search(lowered))
    if keyword in lowered:
        return True
    compact = _PUNCT_AND_SPACE.sub("", keyword)
    if compact and compact in lowered:
        return True
    return _fuzzy_contains(fuzzy_text, _FUZZY_STRIP.sub("", keyword))


def match_skills(text: str) -> Dict[SkillCategory, Tuple[str, ...]]:
    lowered = (text or "").lower()
    fuzzy_text = _FUZZY_STRIP.sub("", lowered)
    matches: Dict[SkillCategory, Tuple[str, ...]] = {}
    for category in SkillCategory:
        found: List[str] = []
        for keyword in SKILL_LEXICON.get(category, ()):
            if keyword not in found and keyword_matches(keyword, lowered, fuzzy_text):
                found.append(keyword)
        matches[category] = tuple(found)
    return matches


def analyze_skills(text: str) -> SkillProfile:
    return SkillProfile(matches=match_skills(text))
