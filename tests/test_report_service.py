import json
from datetime import date, datetime

from resume_scorer import score
from resume_scorer.services.report_service import (
    CATEGORY_LABELS,
    export_json,
    generate_report,
    report_filename,
)


def test_text_report(english_resume):
    result = score(english_resume)
    report = generate_report(result, generated_at=datetime(2024, 1, 2, 3, 4, 5))
    lines = report.splitlines()
    assert lines[0] == "Resume Analysis Report"
    assert "Generated: 2024-01-02 03:04:05" in lines
    assert f"Total score: {result.total_score:g}" in lines
    for label in CATEGORY_LABELS.values():
        assert any(line.startswith(f"{label}: ") for line in lines)
    for job in result.job_recommendations:
        assert any(line.startswith(f"{job.category}: {job.match}%") for line in lines)
    assert f"1. {result.suggestions[0]}" in lines


def test_report_lists_specializations(chinese_resume):
    report = generate_report(score(chinese_resume))
    assert "Specializations" in report
    assert "data: level 3, +1" in report


def test_report_for_empty_input():
    report = generate_report(score(""))
    assert "Specializations" not in report
    assert "Entry-level Generalist: 60%" in report


def test_json_export(chinese_resume):
    result = score(chinese_resume)
    payload = json.loads(export_json(result))
    assert payload["total_score"] == result.total_score
    assert set(payload["category_scores"]) == {"basic_info", "education", "skills", "experience", "achievements"}
    assert payload["analysis"]["education"]["school_score"] == 12


def test_report_filename():
    assert report_filename(date(2024, 5, 1)) == "report_2024-05-01.txt"
    assert report_filename(date(2024, 5, 1), extension="json") == "report_2024-05-01.json"
