"""Configuration loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "")
    try:
        return int(raw) if raw.strip() else default
    except ValueError:
        return default


LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# Upload / extraction limits
MAX_UPLOAD_BYTES: int = _int_env("MAX_UPLOAD_BYTES", 10 * 1024 * 1024)
PDF_MAX_PAGES: int = _int_env("PDF_MAX_PAGES", 10)
SUPPORTED_EXTENSIONS: tuple = (".pdf", ".docx")

# Content gates (enforced by the extractor and the UI, never by the scoring core)
MIN_EXTRACTED_CHARS: int = _int_env("MIN_EXTRACTED_CHARS", 10)
MIN_RESUME_CHARS: int = _int_env("MIN_RESUME_CHARS", 50)
MIN_RESUME_KEYWORDS: int = _int_env("MIN_RESUME_KEYWORDS", 3)

# Upper bound on text handed to the regex scanners
MAX_INPUT_CHARS: int = _int_env("MAX_INPUT_CHARS", 50000)

# Concurrency
BATCH_CONCURRENCY: int = _int_env("BATCH_CONCURRENCY", 3)  # Max files parsed and scored at once
