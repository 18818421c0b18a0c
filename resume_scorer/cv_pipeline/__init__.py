"""Résumé upload pipeline: validation, text extraction (PDF/DOCX), batch parsing."""

from .batch import parse_files_concurrent, parse_multiple_files
from .errors import (
    CorruptedFileError,
    EmptyFileError,
    EncryptedFileError,
    ExtractionError,
    FileTooLargeError,
    InsufficientContentError,
    NotAResumeError,
    UnsupportedFormatError,
)
from .text_extractor import extract_text_from_file, parse_file
from .validation import is_resume_like, validate_upload

__all__ = [
    "CorruptedFileError",
    "EmptyFileError",
    "EncryptedFileError",
    "ExtractionError",
    "FileTooLargeError",
    "InsufficientContentError",
    "NotAResumeError",
    "UnsupportedFormatError",
    "extract_text_from_file",
    "is_resume_like",
    "parse_file",
    "parse_files_concurrent",
    "parse_multiple_files",
    "validate_upload",
]
