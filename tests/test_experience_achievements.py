from resume_scorer.analyzers.achievements import analyze_achievements
from resume_scorer.analyzers.experience import analyze_experience


def test_english_experience_flags():
    exp = analyze_experience(
        "Internship at Acme Corp, Jun 2020 - Aug 2020. Improved throughput by 20%."
    )
    assert exp.internship_count == 1
    assert exp.has_employer
    assert exp.has_duration
    assert exp.has_outcome


def test_chinese_experience(chinese_resume):
    exp = analyze_experience(chinese_resume)
    assert exp.internship_count == 2
    assert exp.project_count == 1
    assert exp.has_employer
    assert exp.has_duration
    assert exp.has_outcome


def test_counts_are_raw_mentions():
    assert analyze_experience("项目 project Projects").project_count == 3


def test_known_employer_without_suffix():
    exp = analyze_experience("在腾讯实习三个月")
    assert exp.has_employer
    assert exp.internship_count == 1


def test_empty_experience():
    exp = analyze_experience("")
    assert exp.internship_count == 0
    assert exp.project_count == 0
    assert not (exp.has_employer or exp.has_duration or exp.has_outcome)


def test_chinese_achievements(chinese_resume):
    ach = analyze_achievements(chinese_resume)
    assert ach.scholarship_count == 1
    assert ach.competition_count == 1
    # the 获奖情况 heading plus 一等奖
    assert ach.award_count == 2
    assert ach.has_leadership


def test_english_achievements(english_resume):
    ach = analyze_achievements(english_resume)
    assert ach.scholarship_count == 1
    assert ach.competition_count == 1
    assert ach.certificate_count == 2
    assert ach.has_leadership


def test_empty_achievements():
    ach = analyze_achievements("")
    assert ach.scholarship_count == ach.competition_count == ach.certificate_count == ach.award_count == 0
    assert not ach.has_leadership


def test_latin_employers_match_whole_words():
    exp = analyze_experience("Research interests: artificial intelligence, metadata management")
    assert not exp.has_employer
    assert not analyze_experience("Likes pineapple").has_employer
    assert analyze_experience("Software intern at Intel, 2021").has_employer
