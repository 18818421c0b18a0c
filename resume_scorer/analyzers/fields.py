"""Contact-field presence detection.

Each field has an ordered list of independent matchers. A matcher takes the
normalized text and returns the matched string or None; the first hit wins.
"""

import re
from typing import Callable, Dict, NamedTuple, Optional, Tuple

from resume_scorer.lexicon import MIN_SECTIONS_FOR_COMPLETE, RESUME_TITLE_LINES, SECTION_HEADINGS
from resume_scorer.utils.helpers import EMAIL_PATTERN

Matcher = Callable[[str], Optional[str]]


class ContactFields(NamedTuple):
    has_name: bool
    has_phone: bool
    has_email: bool
    has_address: bool


def _regex_matcher(pattern: str, flags: int = 0) -> Matcher:
    compiled = re.compile(pattern, flags)

    def match(text: str) -> Optional[str]:
        m = compiled.search(text)
        return m.group(0) if m else None

    return match


_CJK_NAME_LINE = re.compile(r"^[\u4e00-\u9fff]{2,4}$")
_LATIN_NAME_LINE = re.compile(r"^[A-Z][a-zA-Z'.-]+(?:\s+[A-Z][a-zA-Z'.-]+){1,3}$")


def _name_from_leading_lines(text: str, lines_to_check: int = 3) -> Optional[str]:
    """A short name-shaped line near the top of the document (skipping 'Resume' titles)."""
    checked = 0
    for line in text.split("\n"):
        line = line.strip()
        if not line or line.lower() in RESUME_TITLE_LINES:
            continue
        if _CJK_NAME_LINE.match(line.replace(" ", "")) or _LATIN_NAME_LINE.match(line):
            return line
        checked += 1
        if checked >= lines_to_check:
            break
    return None


FIELD_MATCHERS: Dict[str, Tuple[Matcher, ...]] = {
    "name": (
        _regex_matcher(r"(?:姓\s*名|(?i:\bname\b))\s*[:：]\s*\S+"),
        _name_from_leading_lines,
    ),
    "phone": (
        _regex_matcher(r"(?<!\d)(?:\+?86[-\s]?)?1[3-9]\d(?:[-\s]?\d{4}){2}(?!\d)"),
        _regex_matcher(
            r"(?:电话|手机|(?i:\b(?:phone|tel|mobile|cell)\b))\s*[:：]?\s*\+?[\d(][\d\s()\-]{6,}\d"
        ),
        _regex_matcher(r"(?<!\d)\+\d{1,3}[\s-]?\(?\d{1,4}\)?(?:[\s-]?\d{2,4}){2,4}(?!\d)"),
        _regex_matcher(r"(?<!\d)\(?\d{3}\)?[\s.-]\d{3}[\s.-]\d{4}(?!\d)"),
    ),
    "email": (
        _regex_matcher(EMAIL_PATTERN),
    ),
    "address": (
        _regex_matcher(r"(?:地址|住址|现居|所在地|居住地|(?i:\b(?:address|location)\b))\s*[:：]"),
        _regex_matcher(r"[\u4e00-\u9fff]{2,}(?:省|市)[\u4e00-\u9fff]{1,}(?:市|区|县|路|街)"),
        # Abbreviated suffixes must end the address ("Dr. Smith" is not a street).
        _regex_matcher(
            r"\b\d{1,6}[ \t]+(?:[A-Za-z0-9.'-]{1,30}[ \t]+){1,4}?"
            r"(?:(?:street|road|avenue|boulevard|lane|drive)\b"
            r"|(?:st|rd|ave|blvd|ln|dr)\.?(?=[ \t]*(?:,|$)))",
            re.IGNORECASE | re.MULTILINE,
        ),
        _regex_matcher(r"\b[A-Z][a-zA-Z]+,\s*[A-Z]{2}\s+\d{5}\b"),
    ),
}


def find_field(text: str, field: str) -> Optional[str]:
    """Run the field's matchers in order; return the first match or None."""
    for matcher in FIELD_MATCHERS.get(field, ()):
        found = matcher(text)
        if found:
            return found
    return None


def extract_contact_fields(text: str) -> ContactFields:
    if not text:
        return ContactFields(False, False, False, False)
    return ContactFields(
        has_name=find_field(text, "name") is not None,
        has_phone=find_field(text, "phone") is not None,
        has_email=find_field(text, "email") is not None,
        has_address=find_field(text, "address") is not None,
    )


def count_sections(text: str) -> int:
    """Number of distinct résumé section kinds whose heading words appear."""
    lowered = text.lower()
    return sum(
        1 for words in SECTION_HEADINGS.values()
        if any(word in lowered for word in words)
    )


def is_structurally_complete(text: str) -> bool:
    return count_sections(text) >= MIN_SECTIONS_FOR_COMPLETE
