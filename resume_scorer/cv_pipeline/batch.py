"""Parse (and optionally score) several uploaded files, one record per file."""

import asyncio
from typing import Iterable, List, Tuple

from resume_scorer.config import BATCH_CONCURRENCY
from resume_scorer.cv_pipeline.errors import ExtractionError
from resume_scorer.cv_pipeline.text_extractor import parse_file
from resume_scorer.schemas.parsed_file import ParsedFile
from resume_scorer.scoring.engine import score
from resume_scorer.utils.helpers import format_file_size
from resume_scorer.utils.logger import get_logger

logger = get_logger(__name__)

UploadedFile = Tuple[str, bytes]


def _parse_one(filename: str, file_bytes: bytes, score_result: bool) -> ParsedFile:
    size = len(file_bytes or b"")
    info = {"filename": filename, "size": size, "size_formatted": format_file_size(size)}
    try:
        text = parse_file(file_bytes, filename)
    except ExtractionError as e:
        return ParsedFile(**info, success=False, error=e.message)
    result = score(text) if score_result else None
    return ParsedFile(**info, success=True, text=text, result=result)


def parse_multiple_files(files: Iterable[UploadedFile], score_results: bool = False) -> List[ParsedFile]:
    """
    Parse (filename, bytes) pairs in order. A failing file yields an error
    record and never stops the rest of the batch.
    """
    results = [_parse_one(name, data, score_results) for name, data in files]
    failed = sum(1 for r in results if not r.success)
    if failed:
        logger.info("Parsed %s files, %s failed", len(results), failed)
    return results


async def parse_files_concurrent(
    files: Iterable[UploadedFile],
    max_concurrent: int = BATCH_CONCURRENCY,
    score_results: bool = True,
) -> List[ParsedFile]:
    """Parse files off the event loop with a concurrency limit. Order follows input."""
    sem = asyncio.Semaphore(max(1, max_concurrent))

    async def parse_with_sem(name: str, data: bytes) -> ParsedFile:
        async with sem:
            return await asyncio.to_thread(_parse_one, name, data, score_results)

    return list(await asyncio.gather(*[parse_with_sem(name, data) for name, data in files]))
