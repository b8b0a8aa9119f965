"""
Job-independent CV scoring.

Used when no job description is supplied:
- calculate_ats_score(): presence of contact details, standard section words
  and professional buzzwords an Applicant Tracking System scans for
- score_sections(): weighted presence of the five core CV sections
- looks_like_cv(): whether text reads like a CV at all
- general_suggestions(): fixes for missing CVRecord fields
- section_suggestions(): fixes for section words missing from the raw text

All checks are case-insensitive substring tests over the raw text.
"""

import re

from sieve.contexts.intake.cv_data_structure import CVRecord
from sieve.contexts.scoring.score_data_structure import SectionPresence, SectionScore

# Buzzwords rewarded by calculate_ats_score()
ATS_KEYWORDS = (
    "leadership",
    "management",
    "project management",
    "team leadership",
    "communication",
    "collaboration",
    "problem solving",
    "analytical",
    "strategic",
    "innovative",
    "results-driven",
    "data analysis",
    "software development",
    "programming",
    "database",
    "cloud",
    "agile",
    "scrum",
    "devops",
    "machine learning",
    "artificial intelligence",
)

# Section words worth ATS_SECTION_POINTS each
ATS_SECTION_WORDS = ("experience", "education", "skills")

ATS_PHONE = re.compile(r"\d{3}[-.]?\d{3}[-.]?\d{4}")

ATS_FIELD_POINTS = 10
ATS_KEYWORD_POINTS = 5
ATS_KEYWORD_CAP = 40

# At least CV_MARKER_THRESHOLD of these must appear for text to count as a CV
CV_MARKERS = (
    "experience",
    "education",
    "skills",
    "projects",
    "certificates",
    "awards",
    "resume",
    "curriculum vitae",
    "objective",
    "summary",
    "work history",
    "cv",
    "employment",
    "contact",
    "referees",
    "qualifications",
    "achievements",
)
CV_MARKER_THRESHOLD = 3

SECTION_WEIGHTS = {
    "experience": 30,
    "education": 20,
    "skills": 25,
    "contact": 10,
    "achievements": 15,
}

SECTION_KEYWORDS = {
    "education": (
        "education",
        "degree",
        "university",
        "school",
        "college",
        "phd",
        "bachelor",
        "master",
        "diploma",
        "certificate",
    ),
    "experience": (
        "experience",
        "work",
        "role",
        "position",
        "employment",
        "job",
        "intern",
        "career",
        "professional",
    ),
    "skills": (
        "skills",
        "technical",
        "proficiency",
        "programming",
        "languages",
        "expertise",
        "competencies",
        "capabilities",
    ),
    "contact": (
        "contact",
        "email",
        "phone",
        "address",
        "location",
        "linkedin",
        "github",
        "portfolio",
        "website",
    ),
    "achievements": (
        "achievements",
        "awards",
        "accomplishments",
        "projects",
        "certifications",
        "honors",
        "recognition",
    ),
}

MIN_SKILLS = 5
MIN_EXPERIENCE_ENTRIES = 2

# Suggestion per section word missing from the text, in reporting order
SECTION_SUGGESTIONS = (
    ("experience", "Add work experience section"),
    ("education", "Add education section"),
    ("skills", "Add skills section"),
)
CONTACT_SUGGESTION = "Add contact information"
SHORT_CV_SUGGESTION = "Consider adding more details to your CV"
MIN_CV_LENGTH = 500


def calculate_ats_score(
    cv_text: str, keywords: tuple = ATS_KEYWORDS, ceiling: int = 90
) -> int:
    """
    Score how ATS-friendly a CV is, without a job description.

    Points:
    - 10 for "email" or an "@"
    - 10 for a ddd-ddd-dddd style phone number
    - 10 each for "experience", "education", "skills"
    - 5 per buzzword present, at most 40

    Args:
        cv_text: Plain résumé text
        keywords: Buzzword vocabulary
        ceiling: Highest score reported

    Returns:
        Integer score in [0, ceiling]
    """
    lowered = cv_text.lower()
    score = 0

    if "email" in lowered or "@" in cv_text:
        score += ATS_FIELD_POINTS
    if ATS_PHONE.search(cv_text):
        score += ATS_FIELD_POINTS
    score += ATS_FIELD_POINTS * sum(1 for word in ATS_SECTION_WORDS if word in lowered)

    keyword_hits = sum(1 for keyword in keywords if keyword in lowered)
    score += min(keyword_hits * ATS_KEYWORD_POINTS, ATS_KEYWORD_CAP)

    return min(score, ceiling)


def score_sections(
    cv_text: str,
    weights: dict[str, int] = SECTION_WEIGHTS,
    section_keywords: dict[str, tuple] = SECTION_KEYWORDS,
) -> SectionScore:
    """
    Weighted presence of the core CV sections.

    A section counts as present when any of its keywords appears anywhere in
    the text, not only in a header.

    Args:
        cv_text: Plain résumé text
        weights: Points per section
        section_keywords: Keywords signalling each section

    Returns:
        SectionScore with a per-section breakdown
    """
    lowered = cv_text.lower()
    sections = {}
    for name, keywords in section_keywords.items():
        weight = weights.get(name, 0)
        present = any(keyword in lowered for keyword in keywords)
        sections[name] = SectionPresence(
            present=present, score=weight if present else 0, weight=weight
        )

    return SectionScore(
        total_score=sum(row.score for row in sections.values()),
        max_possible_score=sum(weights.values()),
        sections=sections,
    )


def looks_like_cv(text: str, markers: tuple = CV_MARKERS) -> bool:
    """True if at least three CV marker words appear in the text."""
    lowered = text.lower()
    return sum(1 for marker in markers if marker in lowered) >= CV_MARKER_THRESHOLD


def general_suggestions(record: CVRecord) -> list[str]:
    """
    Suggestions for fields a CVRecord is missing or thin on.

    Args:
        record: Parsed CV

    Returns:
        Suggestions in a fixed order (email, phone, skills, summary, experience)
    """
    suggestions = []
    info = record.personal_info

    if not info.email:
        suggestions.append("Add a professional email address")
    if not info.phone:
        suggestions.append("Include your phone number")
    if len(record.skills) < MIN_SKILLS:
        suggestions.append("Add more relevant technical skills")
    if not record.summary:
        suggestions.append("Include a professional summary or objective statement")
    if len(record.experience) < MIN_EXPERIENCE_ENTRIES:
        suggestions.append("Add more work experience details")

    return suggestions


def section_suggestions(cv_text: str, min_length: int = MIN_CV_LENGTH) -> list[str]:
    """
    Suggestions for standard sections the raw text never mentions.

    Looks for the words "experience", "education" and "skills", an "@" or the
    word "email", and flags text shorter than min_length characters.

    Example:
        >>> section_suggestions("Jane Doe, jane@x.com, Skills: Python")
        ['Add work experience section', 'Add education section', 'Consider adding more details to your CV']
    """
    lowered = cv_text.lower()
    suggestions = [message for word, message in SECTION_SUGGESTIONS if word not in lowered]

    if "@" not in cv_text and "email" not in lowered:
        suggestions.append(CONTACT_SUGGESTION)
    if len(cv_text) < min_length:
        suggestions.append(SHORT_CV_SUGGESTION)

    return suggestions
