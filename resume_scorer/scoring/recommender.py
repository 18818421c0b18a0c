"""
Job-category recommendations.

Each rule looks at the analysis independently and may propose one entry.
Entries are deduplicated by category (first proposal wins), stably sorted by
match descending and cut to the top MAX_RECOMMENDATIONS.
"""

from typing import List, Optional, Tuple

from resume_scorer.schemas.analysis import AnalysisResult, DegreeLevel, SkillCategory
from resume_scorer.schemas.score_result import JobRecommendation, Specialization, SpecializationType
from resume_scorer.utils.helpers import deduplicate_by

MAX_RECOMMENDATIONS = 4

# skill category -> (job, base match, per-skill step, ceiling, minimum skill count)
SKILL_JOB_RULES = (
    (SkillCategory.PROGRAMMING, "Software Engineer", 75, 3, 95, 1),
    (SkillCategory.DATA, "Data Analyst", 70, 4, 92, 1),
    (SkillCategory.DESIGN, "UI/UX Designer", 70, 5, 90, 1),
    (SkillCategory.ENGINEERING, "Hardware Engineer", 68, 4, 88, 1),
    (SkillCategory.BUSINESS, "Business Analyst", 65, 4, 85, 1),
    (SkillCategory.OFFICE, "Administrative Specialist", 55, 3, 75, 2),
    (SkillCategory.LANGUAGE, "International Business Specialist", 60, 5, 80, 2),
)

# specialization -> (minimum level, job, match)
SPECIALIZATION_JOB_RULES = {
    SpecializationType.PROGRAMMING: (6, "Senior Software Engineer", 90),
    SpecializationType.DATA: (5, "Data Scientist", 88),
    SpecializationType.DESIGN: (5, "Senior Product Designer", 86),
    SpecializationType.ENGINEERING: (5, "Embedded Systems Engineer", 86),
    SpecializationType.ACADEMIC: (3, "R&D Engineer", 87),
    SpecializationType.PRACTICAL: (5, "Project Manager", 84),
}

RESEARCH_JOB = "Research Assistant"
RESEARCH_BASE_MATCH = 55
RESEARCH_STEP = 5
RESEARCH_CEILING = 90
# Only top-tier schools count toward the research track; tiers 11-12 fall back to TOP_SCHOOL_FALLBACK.
RESEARCH_SCHOOL_MIN = 13

TOP_SCHOOL_FALLBACK = ("Management Trainee", 70, "Strong institutional background")
ENTRY_LEVEL_FALLBACK = ("Entry-level Generalist", 60, "Broad entry-level fit")
TOP_SCHOOL_FALLBACK_MIN = 11


def _skill_recommendations(analysis: AnalysisResult) -> List[JobRecommendation]:
    jobs = []
    for category, job, base, step, ceiling, minimum in SKILL_JOB_RULES:
        count = analysis.skills.count(category)
        if count < minimum:
            continue
        reason = f"{count} {category.value} skill(s): {', '.join(analysis.skills.matches.get(category, ()))}"
        jobs.append(JobRecommendation(category=job, match=min(base + step * count, ceiling), reasons=(reason,)))
    return jobs


def academic_orientation(analysis: AnalysisResult) -> Tuple[int, Tuple[str, ...]]:
    """Points toward a research track, with one reason per contributing signal."""
    edu = analysis.education
    ach = analysis.achievements
    points = 0
    reasons: List[str] = []

    level = edu.highest_level
    if level is DegreeLevel.PHD:
        points += 3
        reasons.append("Doctoral degree")
    elif level is DegreeLevel.MASTER:
        points += 2
        reasons.append("Master's degree")

    if edu.school_score >= RESEARCH_SCHOOL_MIN:
        points += 2
        reasons.append("Top-tier institution")

    if edu.gpa >= 3.5:
        points += 2
        reasons.append(f"High GPA ({edu.gpa})")
    elif edu.gpa >= 3.0:
        points += 1
        reasons.append(f"Solid GPA ({edu.gpa})")

    if ach.competition_count > 0:
        points += 1
        reasons.append("Competition results")
    if ach.scholarship_count > 0:
        points += 1
        reasons.append("Scholarships")
    return points, tuple(reasons)


def _research_recommendation(analysis: AnalysisResult) -> Optional[JobRecommendation]:
    points, reasons = academic_orientation(analysis)
    if points <= 0:
        return None
    match = min(RESEARCH_BASE_MATCH + RESEARCH_STEP * points, RESEARCH_CEILING)
    return JobRecommendation(category=RESEARCH_JOB, match=match, reasons=reasons)


def _specialization_recommendations(specializations: List[Specialization]) -> List[JobRecommendation]:
    jobs = []
    for specialization in specializations:
        minimum, job, match = SPECIALIZATION_JOB_RULES[specialization.type]
        if specialization.level >= minimum:
            jobs.append(JobRecommendation(
                category=job,
                match=match,
                reasons=(f"Strong {specialization.type.value} specialization (level {specialization.level})",),
            ))
    return jobs


def _fallback(analysis: AnalysisResult) -> JobRecommendation:
    if analysis.education.school_score >= TOP_SCHOOL_FALLBACK_MIN:
        job, match, reason = TOP_SCHOOL_FALLBACK
    else:
        job, match, reason = ENTRY_LEVEL_FALLBACK
    return JobRecommendation(category=job, match=match, reasons=(reason,))


def recommend_jobs(analysis: AnalysisResult, specializations: List[Specialization]) -> List[JobRecommendation]:
    candidates = _skill_recommendations(analysis)
    research = _research_recommendation(analysis)
    if research is not None:
        candidates.append(research)
    candidates.extend(_specialization_recommendations(specializations))
    if not candidates:
        return [_fallback(analysis)]

    unique = deduplicate_by(candidates, key=lambda job: job.category)
    # sorted() is stable, ties keep rule order
    ranked = sorted(unique, key=lambda job: job.match, reverse=True)
    return ranked[:MAX_RECOMMENDATIONS]
