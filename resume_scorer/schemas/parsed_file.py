"""Outcome of parsing one uploaded file."""

from typing import Optional

from pydantic import BaseModel, Field

from resume_scorer.schemas.score_result import ScoreResult


class ParsedFile(BaseModel):
    """Per-file record from batch parsing; exactly one of text/error is set."""

    filename: str = Field(..., description="Uploaded file name")
    size: int = Field(default=0, ge=0, description="File size in bytes")
    size_formatted: str = Field(default="0 B", description="Human-readable size")
    success: bool = Field(..., description="True if text was extracted and passed the résumé check")
    text: Optional[str] = Field(default=None, description="Extracted text")
    error: Optional[str] = Field(default=None, description="User-facing error message")
    result: Optional[ScoreResult] = Field(default=None, description="Score, when scoring was requested")
