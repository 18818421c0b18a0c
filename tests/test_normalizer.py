import pytest

from resume_scorer.analyzers.normalizer import normalize_text


@pytest.mark.parametrize("value", [None, "", "   \n\t ", 123, b"bytes"])
def test_non_text_becomes_empty(value):
    assert normalize_text(value) == ""


def test_unifies_newlines_and_collapses_spaces():
    assert normalize_text("a\r\nb\rc") == "a\nb\nc"
    assert normalize_text("a  \t  b") == "a b"
    assert normalize_text("  line one  \n   line two ") == "line one\nline two"


def test_limits_blank_lines():
    assert normalize_text("x\n\n\n\n\ny") == "x\n\ny"
    assert normalize_text("x\n \n \ny") == "x\n\ny"


def test_full_width_and_nbsp_spaces():
    assert normalize_text("张　伟") == "张 伟"
    assert normalize_text("a\xa0b") == "a b"


def test_truncates_long_input():
    assert normalize_text("a" * 100, max_chars=10) == "a" * 10


def test_idempotent(chinese_resume, english_resume):
    for text in (chinese_resume, english_resume):
        once = normalize_text(text)
        assert normalize_text(once) == once
