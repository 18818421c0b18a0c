"""Canonical text form shared by the analyzers and the document extractor."""

import re
import unicodedata
from typing import Optional

from resume_scorer.config import MAX_INPUT_CHARS


def _normalize_unicode(text: str) -> str:
    """Normalize unicode (NFC) and map full-width spaces to ASCII."""
    if not text:
        return ""
    return unicodedata.normalize("NFC", text).replace("　", " ").replace("\xa0", " ")


def normalize_text(text: Optional[str], max_chars: Optional[int] = None) -> str:
    """
    Collapse whitespace into canonical form: unified newlines, single spaces,
    trimmed lines, at most one blank line in a row.
    Input longer than max_chars (default MAX_INPUT_CHARS) is truncated.
    Never raises; None or non-string input becomes "".
    """
    if not isinstance(text, str) or not text.strip():
        return ""
    limit = MAX_INPUT_CHARS if max_chars is None else max_chars

    t = _normalize_unicode(text)
    if len(t) > limit:
        t = t[:limit]
    t = t.replace("\r\n", "\n").replace("\r", "\n")
    t = re.sub(r"[ \t\f\v]+", " ", t)
    t = "\n".join(line.strip() for line in t.split("\n"))
    t = re.sub(r"\n{3,}", "\n\n", t)
    return t.strip()
