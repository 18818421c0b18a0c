"""Pre-extraction upload checks and the post-extraction résumé plausibility check."""

from pathlib import PurePath
from typing import Optional

from resume_scorer.config import MAX_UPLOAD_BYTES, MIN_RESUME_KEYWORDS, SUPPORTED_EXTENSIONS
from resume_scorer.cv_pipeline.errors import EmptyFileError, FileTooLargeError, UnsupportedFormatError
from resume_scorer.lexicon import RESUME_KEYWORDS
from resume_scorer.utils.helpers import format_file_size
from resume_scorer.utils.logger import get_logger

logger = get_logger(__name__)


def file_extension(filename: str) -> str:
    return PurePath((filename or "").strip()).suffix.lower()


def validate_upload(file_bytes: Optional[bytes], filename: str, max_bytes: int = MAX_UPLOAD_BYTES) -> str:
    """
    Reject empty, oversized and unsupported uploads before any parser runs.
    Returns the lowercased extension.
    """
    if not file_bytes:
        logger.warning("Rejected empty upload: %s", filename)
        raise EmptyFileError(filename=filename)
    if len(file_bytes) > max_bytes:
        logger.warning("Rejected oversized upload: %s (%s bytes)", filename, len(file_bytes))
        raise FileTooLargeError(
            f"The file is too large ({format_file_size(len(file_bytes))}). "
            f"The limit is {format_file_size(max_bytes)}.",
            filename=filename,
        )
    ext = file_extension(filename)
    if ext not in SUPPORTED_EXTENSIONS:
        logger.warning("Unsupported file type: %s", filename)
        raise UnsupportedFormatError(filename=filename)
    return ext


def count_resume_keywords(text: str) -> int:
    lowered = (text or "").lower()
    return sum(1 for keyword in RESUME_KEYWORDS if keyword.lower() in lowered)


def is_resume_like(text: str, min_keywords: int = MIN_RESUME_KEYWORDS) -> bool:
    """True when the text mentions enough typical résumé vocabulary."""
    return count_resume_keywords(text) >= min_keywords
