"""Extract raw text from uploaded résumé files (PDF, DOCX). In-memory only."""

from io import BytesIO

import pdfplumber
from docx import Document

from resume_scorer.analyzers.normalizer import normalize_text
from resume_scorer.config import MIN_EXTRACTED_CHARS, PDF_MAX_PAGES
from resume_scorer.cv_pipeline.errors import (
    CorruptedFileError,
    EncryptedFileError,
    ExtractionError,
    InsufficientContentError,
    NotAResumeError,
)
from resume_scorer.cv_pipeline.validation import is_resume_like, validate_upload
from resume_scorer.utils.logger import get_logger

logger = get_logger(__name__)

_ENCRYPTION_HINTS = ("password", "encrypt")


def _translate_parser_error(exc: Exception, filename: str) -> ExtractionError:
    """Map a third-party parser failure onto a user-facing error."""
    detail = f"{type(exc).__name__} {exc}".lower()
    if any(hint in detail for hint in _ENCRYPTION_HINTS):
        return EncryptedFileError(filename=filename)
    return CorruptedFileError(filename=filename)


def _extract_pdf(bytes_io: BytesIO, max_pages: int = PDF_MAX_PAGES) -> str:
    """Extract text from the first `max_pages` pages using pdfplumber."""
    with pdfplumber.open(bytes_io) as pdf:
        parts = []
        for page in pdf.pages[:max_pages]:
            ptext = page.extract_text()
            if ptext:
                parts.append(ptext)
        if len(pdf.pages) > max_pages:
            logger.info("PDF has %s pages; read the first %s", len(pdf.pages), max_pages)
        return "\n\n".join(parts)


def _extract_docx(bytes_io: BytesIO) -> str:
    """Extract paragraph and table text using python-docx."""
    doc = Document(bytes_io)
    parts = [p.text for p in doc.paragraphs if p.text.strip()]
    for table in doc.tables:
        for row in table.rows:
            cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
            if cells:
                parts.append(" ".join(dict.fromkeys(cells)))
    return "\n\n".join(parts)


def extract_text_from_file(file_bytes: bytes, filename: str) -> str:
    """
    Extract and clean text from an uploaded résumé file (PDF or DOCX).
    File is read from bytes in memory; no disk write.
    Raises an ExtractionError subclass when the file is rejected or unreadable.
    """
    ext = validate_upload(file_bytes, filename)
    bio = BytesIO(file_bytes)
    try:
        raw = _extract_pdf(bio) if ext == ".pdf" else _extract_docx(bio)
    except Exception as e:
        logger.exception("%s extraction failed for %s: %s", ext.lstrip(".").upper(), filename, e)
        raise _translate_parser_error(e, filename) from e

    text = normalize_text(raw)
    if len(text) < MIN_EXTRACTED_CHARS:
        logger.warning("Too little text extracted from %s (%s chars)", filename, len(text))
        raise InsufficientContentError(filename=filename)
    return text


def parse_file(file_bytes: bytes, filename: str) -> str:
    """Extract text and check that it reads like a résumé."""
    text = extract_text_from_file(file_bytes, filename)
    if not is_resume_like(text):
        logger.warning("Rejected %s: content does not look like a resume", filename)
        raise NotAResumeError(filename=filename)
    return text
