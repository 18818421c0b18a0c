import pytest
from conftest import docx_bytes

from resume_scorer.cv_pipeline.errors import (
    CorruptedFileError,
    EmptyFileError,
    EncryptedFileError,
    ExtractionError,
    FileTooLargeError,
    InsufficientContentError,
    NotAResumeError,
    UnsupportedFormatError,
)
from resume_scorer.cv_pipeline.text_extractor import (
    _translate_parser_error,
    extract_text_from_file,
    parse_file,
)
from resume_scorer.cv_pipeline.validation import validate_upload


def test_docx_paragraphs_and_tables(resume_docx):
    text = extract_text_from_file(resume_docx, "cv.docx")
    assert "University of Michigan" in text
    assert "Skills Python, SQL, Docker" in text
    assert "\n\n\n" not in text


def test_parse_file_accepts_resume(resume_docx):
    assert "John Smith" in parse_file(resume_docx, "CV.DOCX")


def test_parse_file_rejects_non_resume():
    data = docx_bytes(["The quick brown fox jumps over the lazy dog."])
    assert extract_text_from_file(data, "fox.docx")
    with pytest.raises(NotAResumeError):
        parse_file(data, "fox.docx")


def test_too_little_text():
    with pytest.raises(InsufficientContentError):
        extract_text_from_file(docx_bytes(["Hi"]), "short.docx")


def test_empty_file():
    with pytest.raises(EmptyFileError):
        extract_text_from_file(b"", "cv.pdf")


def test_unsupported_extension():
    with pytest.raises(UnsupportedFormatError):
        extract_text_from_file(b"plain text", "cv.txt")


def test_oversized_file():
    with pytest.raises(FileTooLargeError) as excinfo:
        validate_upload(b"x" * 11, "cv.pdf", max_bytes=10)
    assert "11 B" in excinfo.value.message


def test_corrupt_docx():
    with pytest.raises(CorruptedFileError):
        extract_text_from_file(b"this is not a zip archive", "cv.docx")


def test_corrupt_pdf():
    with pytest.raises(ExtractionError) as excinfo:
        extract_text_from_file(b"this is not a pdf", "cv.pdf")
    assert not isinstance(excinfo.value, EncryptedFileError)


def test_parser_error_translation():
    assert isinstance(
        _translate_parser_error(Exception("No /Root object! - Is this really a PDF?"), "a.pdf"),
        CorruptedFileError,
    )
    assert isinstance(_translate_parser_error(Exception("PDF is encrypted"), "a.pdf"), EncryptedFileError)
    assert isinstance(_translate_parser_error(ValueError("bad password"), "a.pdf"), EncryptedFileError)


def test_errors_carry_user_message_and_filename():
    err = UnsupportedFormatError(filename="cv.txt")
    assert err.message == UnsupportedFormatError.default_message
    assert err.filename == "cv.txt"
    assert str(err) == err.message
