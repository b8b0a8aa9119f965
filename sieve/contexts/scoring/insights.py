"""
Insights and completeness scoring for a parsed CV.

Both functions read only the CVRecord (and optionally a MatchResult), never
the raw text.
"""

from typing import Optional

from sieve.contexts.intake.cv_data_structure import CVRecord
from sieve.contexts.scoring.score_data_structure import Insight, InsightType, MatchResult
from sieve.utils.text_processing import round_half_up

# Contact fields counted for insights and completeness
CONTACT_FIELDS = ("name", "email", "phone")

# Value a UI form shows for an empty field; treated as missing
PLACEHOLDER_VALUE = "Not provided"

MIN_SKILLS = 5
LOW_MATCH_SCORE = 50

# Completeness weights
CONTACT_POINTS = 20
SUMMARY_POINTS = 15
SUMMARY_MIN_LENGTH = 50
POINTS_PER_EXPERIENCE = 10
MAX_EXPERIENCE_POINTS = 30
POINTS_PER_SKILL = 2
MAX_SKILL_POINTS = 20
POINTS_PER_EDUCATION = 7.5
MAX_EDUCATION_POINTS = 15


def missing_contact_fields(record: CVRecord) -> list[str]:
    """Names of empty (or placeholder) contact fields, in CONTACT_FIELDS order."""
    info = record.personal_info
    return [
        name
        for name in CONTACT_FIELDS
        if not getattr(info, name) or getattr(info, name) == PLACEHOLDER_VALUE
    ]


def generate_insights(record: CVRecord, match: Optional[MatchResult] = None) -> list[Insight]:
    """
    Typed observations about a CV, at most one per category.

    Args:
        record: Parsed CV
        match: Keyword match against a job description, if one was given

    Returns:
        Insights in a fixed order: contact, skills, experience, job match
    """
    insights = []

    missing = missing_contact_fields(record)
    if missing:
        insights.append(
            Insight(
                type=InsightType.WARNING,
                title="Incomplete Contact Information",
                message=f"Missing: {', '.join(missing)}. Complete contact info is essential.",
            )
        )

    if len(record.skills) < MIN_SKILLS:
        insights.append(
            Insight(
                type=InsightType.SUGGESTION,
                title="Expand Your Skills Section",
                message="Consider adding more relevant skills to improve your CV's impact.",
            )
        )

    if not record.experience:
        insights.append(
            Insight(
                type=InsightType.CRITICAL,
                title="No Work Experience Found",
                message="Add your work experience to make your CV more compelling.",
            )
        )

    if match is not None and match.match_score < LOW_MATCH_SCORE:
        insights.append(
            Insight(
                type=InsightType.IMPROVEMENT,
                title="Low Job Match Score",
                message="Consider tailoring your CV more closely to the job requirements.",
            )
        )

    return insights


def calculate_completeness_score(record: CVRecord) -> int:
    """
    How complete a CV is, from 0 to 100.

    Weights:
    - contact details: 20, pro-rated over name/email/phone
    - summary longer than 50 characters: 15
    - experience: 10 per entry, at most 30
    - skills: 2 per skill, at most 20
    - education: 7.5 per entry, at most 15

    Example:
        >>> calculate_completeness_score(CVRecord())
        0
    """
    present = len(CONTACT_FIELDS) - len(missing_contact_fields(record))
    score = present / len(CONTACT_FIELDS) * CONTACT_POINTS

    if len(record.summary) > SUMMARY_MIN_LENGTH:
        score += SUMMARY_POINTS

    score += min(len(record.experience) * POINTS_PER_EXPERIENCE, MAX_EXPERIENCE_POINTS)
    score += min(len(record.skills) * POINTS_PER_SKILL, MAX_SKILL_POINTS)
    score += min(len(record.education) * POINTS_PER_EDUCATION, MAX_EDUCATION_POINTS)

    return min(round_half_up(score), 100)
