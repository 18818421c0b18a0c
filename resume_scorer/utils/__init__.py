"""Utility exports."""

from .helpers import (
    clamp,
    deduplicate_by,
    extract_emails,
    format_file_size,
    round_half_up,
)
from .logger import get_logger

__all__ = [
    "get_logger",
    "clamp",
    "deduplicate_by",
    "extract_emails",
    "format_file_size",
    "round_half_up",
]
