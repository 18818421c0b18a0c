import time

from resume_scorer.analyzers.fields import (
    count_sections,
    extract_contact_fields,
    find_field,
    is_structurally_complete,
)
from resume_scorer.analyzers.normalizer import normalize_text


def test_chinese_contact_fields(chinese_resume):
    fields = extract_contact_fields(normalize_text(chinese_resume))
    assert fields.has_name
    assert fields.has_phone
    assert fields.has_email
    assert fields.has_address


def test_english_contact_fields(english_resume):
    fields = extract_contact_fields(normalize_text(english_resume))
    assert all(fields)


def test_empty_text_has_no_fields():
    assert not any(extract_contact_fields(""))


def test_phone_formats():
    assert find_field("手机 13912345678", "phone")
    assert find_field("Tel: (415) 555-0134", "phone")
    assert find_field("call 415-555-0134 today", "phone")
    assert find_field("no numbers here", "phone") is None


def test_name_skips_resume_title():
    assert find_field("Resume\nJohn Smith\nSoftware engineer", "name") == "John Smith"
    assert find_field("简历\n李娜\n求职意向", "name") == "李娜"
    assert find_field("姓名：王芳", "name")


def test_name_not_found_in_prose():
    assert find_field("i am looking for a job in software. please call me.", "name") is None


def test_address_patterns():
    assert find_field("现居：上海", "address")
    assert find_field("浙江省杭州市西湖区", "address")
    assert find_field("Lives at 42 Main Street", "address")
    assert find_field("Austin, TX 78701", "address")


def test_section_count(chinese_resume):
    assert count_sections(chinese_resume) >= 3
    assert is_structurally_complete(chinese_resume)
    assert not is_structurally_complete("hello world")


def test_address_requires_street_shape():
    assert find_field("42 Main St., Apt 5", "address")
    assert find_field("1600 Pennsylvania Ave", "address")
    assert find_field("worked with 3 teams under Dr. Smith", "address") is None
    assert find_field("led 2 releases at St. Jude", "address") is None


def test_long_digit_runs_scan_quickly():
    text = "1 " * 25000
    start = time.perf_counter()
    assert find_field(text, "address") is None
    assert time.perf_counter() - start < 1.0
