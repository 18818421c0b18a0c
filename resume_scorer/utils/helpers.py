"""Helper utilities for the resume scorer."""

import math
import re
from typing import Callable, Hashable, Iterable, List, TypeVar

T = TypeVar("T")

EMAIL_PATTERN = r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"


def extract_emails(text: str) -> List[str]:
    """Extract email addresses from text using regex."""
    if not text:
        return []
    return list(dict.fromkeys(re.findall(EMAIL_PATTERN, text)))


def round_half_up(value: float) -> int:
    """Round .5 away from zero (round() in Python rounds half to even)."""
    return int(math.floor(value + 0.5)) if value >= 0 else -int(math.floor(-value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


def deduplicate_by(items: Iterable[T], key: Callable[[T], Hashable]) -> List[T]:
    """Keep the first item for each key, preserving order."""
    seen: set = set()
    result: List[T] = []
    for item in items:
        k = key(item)
        if k not in seen:
            seen.add(k)
            result.append(item)
    return result


def format_file_size(size: int) -> str:
    """Human-readable byte size, e.g. 1536 -> '1.5 KB'."""
    if size <= 0:
        return "0 B"
    units = ["B", "KB", "MB", "GB"]
    i = 0
    while i < len(units) - 1 and size >= 1024 ** (i + 1):
        i += 1
    value = round(size / (1024 ** i), 2)
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text} {units[i]}"
