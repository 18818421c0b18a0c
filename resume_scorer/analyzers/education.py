"""Education analysis: degree mentions, institution tiers, school score, GPA."""

import re
from typing import Iterable, List, NamedTuple, Optional, Tuple

from resume_scorer.lexicon import (
    DEGREE_KEYWORDS,
    ELITE_MARKER_PATTERNS,
    GPA_LABEL_PATTERN,
    GRADUATE_LEVELS,
    HEURISTIC_ELITE_SCORE,
    HEURISTIC_GENERIC_SCORE,
    HEURISTIC_SUB_BACHELOR_SCORE,
    HEURISTIC_UNKNOWN_SCORE,
    INSTITUTION_STOPWORDS,
    INSTITUTION_SUFFIXES_ZH,
    RANKED_INSTITUTIONS,
    RELEVANT_MAJORS,
    SUB_BACHELOR_MARKER_PATTERNS,
    UNDERGRADUATE_LEVELS,
    UNIVERSITY_SHAPE_PATTERN,
    YEAR_RANGE_PATTERN,
)
from resume_scorer.schemas.analysis import DegreeLevel, DegreeMention, Education
from resume_scorer.utils.helpers import clamp, deduplicate_by, round_half_up

MAX_SCHOOL_SCORE = 15
MIN_RESIDUAL_LENGTH = 2
CONTEXT_WINDOW = 60  # chars on each side searched for heuristic markers
GPA_SCALE_THRESHOLD = 5.0
GPA_SCALE_DIVISOR = 25.0
MAX_GPA = 4.0

# ---------------------------------------------------------------------------
# Institution name normalization and tier lookup
# ---------------------------------------------------------------------------

_CJK = re.compile(r"[\u4e00-\u9fff]")
_NAME_PREFIX = re.compile(r"^(?:毕业于|就读于|毕业院校|学校|院校|本科|硕士|博士|[:：\s])+")


def _is_cjk(text: str) -> bool:
    return bool(_CJK.search(text))


def institution_residual(name: str) -> str:
    """
    Strip generic suffixes so "清华大学" and "清华" (or "Stanford University" and
    "Stanford") compare equal. Latin residuals keep single spaces between words.
    """
    if not name:
        return ""
    lowered = name.strip().lower()
    if _is_cjk(lowered):
        residual = lowered
        for suffix in INSTITUTION_SUFFIXES_ZH:
            residual = residual.replace(suffix, "")
        return re.sub(r"\s+", "", residual)
    words = re.findall(r"[a-z0-9]+", lowered)
    return " ".join(w for w in words if w not in INSTITUTION_STOPWORDS)


def _residual_length(residual: str) -> int:
    return len(residual.replace(" ", ""))


def _contains(container: str, part: str) -> bool:
    """Substring test; Latin residuals must align on word boundaries."""
    if _is_cjk(container) or _is_cjk(part):
        return part in container
    return f" {part} " in f" {container} "


class _IndexEntry(NamedTuple):
    residual: str
    score: int
    name: str
    lowered: str
    of_form: bool


def _of_form(lowered: str) -> bool:
    return lowered.startswith("university of")


_INSTITUTION_INDEX: Tuple[_IndexEntry, ...] = tuple(
    _IndexEntry(institution_residual(name), score, name, name.lower(), _of_form(name.lower()))
    for name, score in RANKED_INSTITUTIONS
    if _residual_length(institution_residual(name)) >= MIN_RESIDUAL_LENGTH
)


def _match_key(entry: _IndexEntry, query: str, lowered: str, order: int):
    if entry.residual == query:
        return (0, 0, order)
    if _is_cjk(lowered) != _is_cjk(entry.lowered):
        return None
    if _is_cjk(lowered):
        # Full names only, so 北京交通大学 does not collapse onto 北京大学 via
        # "北京" and 湖北大学 does not hit the alias 北大.
        if not entry.lowered.endswith(INSTITUTION_SUFFIXES_ZH):
            return None
        if entry.lowered in lowered:
            return (1, -len(entry.lowered), order)
        if lowered in entry.lowered:
            return (2, len(entry.lowered), order)
        return None
    # "University of X" names only contain other "University of" names.
    if entry.of_form != _of_form(lowered):
        return None
    if _contains(query, entry.residual):
        return (1, -len(entry.residual), order)
    if _contains(entry.residual, query):
        return (2, len(entry.residual), order)
    return None


def lookup_institution(name: str) -> Optional[Tuple[str, int]]:
    """
    Find the tier-table entry for an institution name.
    Returns (canonical name, tier score) or None. The most specific entry wins:
    an exact residual, then the longest table name contained in the name,
    then the shortest table name containing it.
    """
    query = institution_residual(name)
    if _residual_length(query) < MIN_RESIDUAL_LENGTH:
        return None
    lowered = name.strip().lower()
    best = None
    best_key = None
    for order, entry in enumerate(_INSTITUTION_INDEX):
        key = _match_key(entry, query, lowered, order)
        if key is not None and (best_key is None or key < best_key):
            best, best_key = (entry.name, entry.score), key
    return best


def _any_pattern(patterns: Iterable[str], text: str) -> bool:
    return any(re.search(p, text) for p in patterns)


def heuristic_institution_score(name: str, context: str = "") -> int:
    """Score an institution that is not in the tier table."""
    combined = f"{name} {context}"
    if _any_pattern(ELITE_MARKER_PATTERNS, combined):
        return HEURISTIC_ELITE_SCORE
    if _any_pattern(SUB_BACHELOR_MARKER_PATTERNS, combined):
        return HEURISTIC_SUB_BACHELOR_SCORE
    if re.search(UNIVERSITY_SHAPE_PATTERN, name or combined):
        return HEURISTIC_GENERIC_SCORE
    return HEURISTIC_UNKNOWN_SCORE


def institution_score(name: str, context: str = "") -> int:
    """Tier score for a named institution, falling back to the heuristic."""
    found = lookup_institution(name)
    if found:
        return found[1]
    return heuristic_institution_score(name, context)


# ---------------------------------------------------------------------------
# Degree mention extraction
# ---------------------------------------------------------------------------

def _degree_alternation(levels: Iterable[DegreeLevel]) -> str:
    return "|".join(
        f"(?P<{level.value}_{i}>{pattern})"
        for level in levels
        for i, pattern in enumerate(DEGREE_KEYWORDS[level])
    )


_ALL_LEVELS = (DegreeLevel.PHD, DegreeLevel.MASTER, DegreeLevel.BACHELOR, DegreeLevel.ASSOCIATE)
_DEGREE_ANY = re.compile(_degree_alternation(_ALL_LEVELS))

_INSTITUTION = (
    r"(?P<inst>[\u4e00-\u9fff]{2,12}?(?:大学|学院)"
    r"|University[ \t]+of[ \t]+[A-Z][\w&'.-]*(?:,?[ \t]+(?:of|at|[A-Z][\w&'.-]*)){0,3}"
    r"|(?:[A-Z][\w&'.-]*[ \t]+){1,5}(?:University|College|Institute[ \t]+of[ \t]+Technology))"
)
# Up to 40 chars (one line break allowed) that do not run into another
# university name or degree keyword, so a degree binds to the nearest school.
_GAP_STOP = r"大学|University|" + "|".join(
    pattern for level in _ALL_LEVELS for pattern in DEGREE_KEYWORDS[level]
)
_GAP = r"(?:(?!" + _GAP_STOP + r")(?:[^\n]|\n(?!\n))){0,40}?"

# Passes in decreasing specificity.
_EXTRACTION_PASSES = (
    re.compile(_INSTITUTION + _GAP + r"(?P<degree>" + _degree_alternation(UNDERGRADUATE_LEVELS) + ")"),
    re.compile(_INSTITUTION + _GAP + r"(?P<degree>" + _degree_alternation(GRADUATE_LEVELS) + ")"),
    re.compile(
        r"(?:" + YEAR_RANGE_PATTERN + r")" + r"[^\n]{0,20}?" + _INSTITUTION + _GAP
        + r"(?P<degree>" + _degree_alternation(_ALL_LEVELS) + ")"
    ),
)


def degree_level_of(text: str) -> DegreeLevel:
    """Level of the first degree keyword in text, UNKNOWN if none."""
    m = _DEGREE_ANY.search(text or "")
    if not m or not m.lastgroup:
        return DegreeLevel.UNKNOWN
    return DegreeLevel(m.lastgroup.rsplit("_", 1)[0])


def _clean_institution(name: str) -> str:
    return _NAME_PREFIX.sub("", name.strip()).strip(" ,")


def _context(text: str, start: int, end: int) -> str:
    return text[max(0, start - CONTEXT_WINDOW):end + CONTEXT_WINDOW]


def _structured_mentions(text: str) -> List[DegreeMention]:
    mentions: List[DegreeMention] = []
    for pattern in _EXTRACTION_PASSES:
        for m in pattern.finditer(text):
            institution = _clean_institution(m.group("inst"))
            if _residual_length(institution_residual(institution)) < MIN_RESIDUAL_LENGTH:
                continue
            mentions.append(
                DegreeMention(
                    institution=institution,
                    level=degree_level_of(m.group("degree")),
                    span=m.group(0),
                    tier_score=institution_score(institution, _context(text, m.start(), m.end())),
                )
            )
    return deduplicate_by(
        mentions, key=lambda d: (institution_residual(d.institution), d.level)
    )


def _scan_pattern(name: str) -> re.Pattern:
    if _is_cjk(name):
        return re.compile(re.escape(name))
    return re.compile(r"(?<![A-Za-z0-9])" + re.escape(name) + r"(?![A-Za-z0-9])", re.IGNORECASE)


# Full names only; short CJK aliases would hit inside other names (东北大学 / 北大).
_SCANNABLE = tuple(
    (name, score, _scan_pattern(name))
    for name, score in sorted(RANKED_INSTITUTIONS, key=lambda item: -len(item[0]))
    if not _is_cjk(name) or name.endswith(INSTITUTION_SUFFIXES_ZH)
)


def _nearest_degree_level(text: str, position: int) -> DegreeLevel:
    best_level = DegreeLevel.BACHELOR
    best_distance = None
    for m in _DEGREE_ANY.finditer(text):
        distance = abs(m.start() - position)
        if best_distance is None or distance < best_distance:
            best_level = DegreeLevel(m.lastgroup.rsplit("_", 1)[0])
            best_distance = distance
    return best_level


def _fallback_mentions(text: str) -> List[DegreeMention]:
    """Scan for known institution names anywhere; infer level from nearby keywords."""
    taken: List[Tuple[int, int]] = []
    found: List[Tuple[int, DegreeMention]] = []
    for name, score, pattern in _SCANNABLE:
        for m in pattern.finditer(text):
            if any(m.start() < end and start < m.end() for start, end in taken):
                continue
            taken.append((m.start(), m.end()))
            found.append((
                m.start(),
                DegreeMention(
                    institution=m.group(0),
                    level=_nearest_degree_level(text, m.start()),
                    span=m.group(0),
                    tier_score=score,
                ),
            ))
            break
    found.sort(key=lambda item: item[0])
    return deduplicate_by(
        (mention for _, mention in found),
        key=lambda d: (institution_residual(d.institution), d.level),
    )


def extract_degree_mentions(text: str) -> List[DegreeMention]:
    """Degree mentions ordered by level ascending (stable for equal levels)."""
    if not text:
        return []
    mentions = _structured_mentions(text) or _fallback_mentions(text)
    return sorted(mentions, key=lambda d: d.level.rank)


# ---------------------------------------------------------------------------
# Scores
# ---------------------------------------------------------------------------

def compute_school_score(degrees: List[DegreeMention], text: str = "") -> int:
    """
    Zero mentions: heuristic on the raw text. One mention: its tier score.
    Two or more: half first-degree tier plus half highest-degree tier.
    """
    if not degrees:
        score = heuristic_institution_score("", text)
    elif len(degrees) == 1:
        score = degrees[0].tier_score
    else:
        ordered = sorted(degrees, key=lambda d: d.level.rank)
        score = round_half_up(ordered[0].tier_score * 0.5 + ordered[-1].tier_score * 0.5)
    return int(clamp(score, 0, MAX_SCHOOL_SCORE))


def extract_gpa(text: str) -> float:
    """
    First number after a GPA label, on a 4.0 scale. Values above 5 are assumed
    to be on a 100-point scale and divided by 25 (an approximation).
    """
    m = re.search(GPA_LABEL_PATTERN, text or "")
    if not m:
        return 0.0
    value = float(m.group(1))
    if value > GPA_SCALE_THRESHOLD:
        value = value / GPA_SCALE_DIVISOR
    return round(clamp(value, 0.0, MAX_GPA), 2)


def has_relevant_major(text: str) -> bool:
    lowered = (text or "").lower()
    return any(major in lowered for major in RELEVANT_MAJORS)


def analyze_education(text: str) -> Education:
    degrees = extract_degree_mentions(text)
    return Education(
        school_score=compute_school_score(degrees, text),
        gpa=extract_gpa(text),
        major_relevant=has_relevant_major(text),
        degrees=tuple(degrees),
    )
