from io import BytesIO

import pytest
from docx import Document

from resume_scorer.schemas.analysis import (
    Achievements,
    AnalysisResult,
    Education,
    Experience,
    SkillCategory,
    SkillProfile,
)

CHINESE_RESUME = """个人简历
张伟
电话：138-1234-5678
邮箱：zhangwei@example.com
地址：北京市海淀区

教育背景
2015-2019 清华大学 计算机科学与技术 本科
2019-2022 北京邮电大学 计算机 硕士
GPA：3.7

专业技能
Python、Java、C++、MySQL、机器学习、数据分析、英语

实习经历
2021.06-2021.09 腾讯科技有限公司 后端开发实习生
负责推荐系统项目，接口响应时间降低30%

获奖情况
国家奖学金；全国大学生数学建模竞赛一等奖
学生会主席
"""

ENGLISH_RESUME = """Jane Doe
Email: jane.doe@example.com | Phone: +1 415-555-0134
Address: San Francisco, CA 94105

Education
Stanford University, Bachelor of Science in Computer Science, 2016 - 2020
GPA: 3.9/4.0

Skills
Python, Java, JavaScript, TypeScript, React, Docker, Git, SQL, Pandas, Tableau, Figma, English, Excel

Experience
Software Engineering Intern, Google Inc., Jun 2019 - Aug 2019
Built a data pipeline that reduced report latency by 40%.

Projects
Project: Campus course planner web app used by 2,000 students.

Awards
Dean's Scholarship 2018; 1st prize, ACM programming contest; AWS Certified Cloud Practitioner certificate
President of the Computer Science Club
"""


@pytest.fixture
def chinese_resume() -> str:
    return CHINESE_RESUME


@pytest.fixture
def english_resume() -> str:
    return ENGLISH_RESUME


def skill_profile(**counts: int) -> SkillProfile:
    """SkillProfile with `n` distinct placeholder keywords per named category."""
    return SkillProfile(matches={
        SkillCategory(name): tuple(f"{name}-{i}" for i in range(n))
        for name, n in counts.items()
    })


def make_analysis(**overrides) -> AnalysisResult:
    return AnalysisResult(**overrides)


@pytest.fixture
def strong_analysis() -> AnalysisResult:
    """Every category at or near its ceiling."""
    return AnalysisResult(
        has_name=True,
        has_phone=True,
        has_email=True,
        has_address=True,
        education=Education(school_score=15, gpa=3.9, major_relevant=True),
        skills=skill_profile(programming=10, design=5, data=5, engineering=5, business=5, language=5),
        experience=Experience(
            internship_count=4, project_count=5, has_employer=True, has_duration=True, has_outcome=True
        ),
        achievements=Achievements(
            scholarship_count=3, competition_count=3, certificate_count=4, award_count=2, has_leadership=True
        ),
        text_length=2000,
        is_complete=True,
    )


def docx_bytes(paragraphs, table_rows=None) -> bytes:
    """Build a .docx file in memory."""
    doc = Document()
    for text in paragraphs:
        doc.add_paragraph(text)
    if table_rows:
        table = doc.add_table(rows=len(table_rows), cols=len(table_rows[0]))
        for r, row in enumerate(table_rows):
            for c, value in enumerate(row):
                table.cell(r, c).text = value
    buf = BytesIO()
    doc.save(buf)
    return buf.getvalue()


@pytest.fixture
def resume_docx() -> bytes:
    return docx_bytes(
        [
            "John Smith",
            "Email: john.smith@example.com",
            "Education",
            "University of Michigan, Bachelor of Science in Computer Science",
            "Experience",
            "Software intern at Acme Corp, built internal tools in Python",
        ],
        table_rows=[["Skills", "Python, SQL, Docker"]],
    )
