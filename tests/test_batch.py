import asyncio

from resume_scorer.cv_pipeline.batch import parse_files_concurrent, parse_multiple_files
from resume_scorer.cv_pipeline.errors import EmptyFileError, UnsupportedFormatError


def _files(resume_docx):
    return [
        ("cv.docx", resume_docx),
        ("notes.txt", b"plain text"),
        ("empty.pdf", b""),
    ]


def test_sequential_batch_keeps_order_and_isolates_failures(resume_docx):
    results = parse_multiple_files(_files(resume_docx))
    assert [r.filename for r in results] == ["cv.docx", "notes.txt", "empty.pdf"]
    assert [r.success for r in results] == [True, False, False]

    ok, unsupported, empty = results
    assert "John Smith" in ok.text
    assert ok.error is None
    assert ok.result is None
    assert ok.size == len(resume_docx)
    assert unsupported.error == UnsupportedFormatError.default_message
    assert unsupported.text is None
    assert empty.error == EmptyFileError.default_message
    assert empty.size_formatted == "0 B"


def test_sequential_batch_can_score(resume_docx):
    (ok,) = parse_multiple_files([("cv.docx", resume_docx)], score_results=True)
    assert ok.result is not None
    assert ok.result.total_score >= ok.result.base_score


def test_concurrent_batch(resume_docx):
    results = asyncio.run(parse_files_concurrent(_files(resume_docx), max_concurrent=2))
    assert [r.filename for r in results] == ["cv.docx", "notes.txt", "empty.pdf"]
    assert [r.success for r in results] == [True, False, False]
    assert results[0].result is not None
    assert results[1].result is None


def test_concurrent_batch_empty_input():
    assert asyncio.run(parse_files_concurrent([])) == []
