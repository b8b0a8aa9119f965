"""
Field extractors for the Intake context.

Pure functions that pull one field out of résumé text. A miss is never an
error: every extractor returns "" or [] when nothing matches.
"""

import re

from sieve.contexts.intake.extraction_patterns import ContactPatterns, find_duration
from sieve.contexts.intake.section_patterns import is_references_line, starts_non_skill_section
from sieve.utils.text_processing import dedupe_preserving_order, strip_bullet

# Filler words that survive comma splitting but are never skills
SKILL_STOPWORDS = frozenset(
    {
        "and",
        "or",
        "the",
        "with",
        "using",
        "including",
        "available",
        "upon",
        "request",
        "referees",
    }
)

# "Skills: Python, Go" / "Tools: Docker" label at the start of a line
SKILL_LABEL = re.compile(r"^(?:skills?|technologies|tools)\s*:\s*", re.IGNORECASE)

SKILL_DELIMITERS = re.compile(r"[,;|•]")

MAX_SKILL_LENGTH = 60


# Known skills looked for anywhere in the text when a CV has no Skills section.
# Matching ignores case; the spelling here is the one reported.
SKILL_KEYWORDS = (
    "JavaScript",
    "Python",
    "Java",
    "React",
    "Node.js",
    "SQL",
    "MongoDB",
    "AWS",
    "Docker",
    "Kubernetes",
    "Git",
    "Agile",
    "Scrum",
    "Leadership",
    "Project Management",
    "Data Analysis",
    "Machine Learning",
    "AI",
    "HTML",
    "CSS",
    "TypeScript",
    "Angular",
    "Vue",
    "PHP",
    "C#",
    "C++",
    "Ruby",
    "Go",
    "Rust",
    "Swift",
    "Kotlin",
    "Scala",
    "MATLAB",
    "Tableau",
    "Power BI",
    "Excel",
    "PowerPoint",
    "Photoshop",
    "Illustrator",
    "Figma",
    "Sketch",
    "InVision",
    "Zeplin",
)


# =============================================================================
# CONTACT DETAILS
# =============================================================================


def extract_email(text: str) -> str:
    """First email address in text, or ""."""
    match = ContactPatterns.EMAIL.search(text)
    return match.group(0) if match else ""


def extract_phone(text: str) -> str:
    """
    First phone-like digit run in text, or "".

    The pattern is permissive, so a date range such as "2019 - 2021" can be
    returned when no real number precedes it.
    """
    match = ContactPatterns.PHONE.search(text)
    return match.group(0).strip() if match else ""


def extract_linkedin(text: str) -> str:
    """First linkedin.com/in/ profile URL in text, or ""."""
    match = ContactPatterns.LINKEDIN.search(text)
    return match.group(0) if match else ""


def extract_name(text: str) -> str:
    """Candidate name: the first non-empty line of the document."""
    for line in text.split("\n"):
        if line.strip():
            return line.strip()
    return ""


def extract_duration(text: str) -> str:
    """
    First employment date range in text, or "".

    Example:
        >>> extract_duration("Engineer | Acme | Jan 2020 - Present")
        'Jan 2020 - Present'
    """
    match = find_duration(text)
    return match.group(0) if match else ""


# =============================================================================
# SECTION BODIES
# =============================================================================


def extract_skills(
    section: str,
    stopwords: frozenset = SKILL_STOPWORDS,
    max_skills: int = 30,
) -> list[str]:
    """
    Split a Skills section body into individual skills.

    Each line loses its bullet and any "Skills:"/"Technologies:"/"Tools:"
    label, then is split on commas, semicolons, pipes and "•". Reading stops
    at a references line or at a header for a section that never lists skills
    (Interests, Hobbies, Awards, ...).

    Args:
        section: Skills section body from locate_section()
        stopwords: Lowercase fragments to discard
        max_skills: Maximum number of skills returned

    Returns:
        Unique skills in first-seen order (case-sensitive), at most max_skills

    Example:
        >>> extract_skills("• Python, Go; SQL\\nTools: Docker | Git")
        ['Python', 'Go', 'SQL', 'Docker', 'Git']
    """
    if not section:
        return []

    fragments = []
    for line in section.split("\n"):
        if not line.strip():
            continue
        if is_references_line(line) or starts_non_skill_section(line):
            break

        line = SKILL_LABEL.sub("", strip_bullet(line))
        for fragment in SKILL_DELIMITERS.split(line):
            fragment = fragment.strip()
            if len(fragment) <= 1 or len(fragment) >= MAX_SKILL_LENGTH:
                continue
            if fragment.lower() in stopwords:
                continue
            fragments.append(fragment)

    return dedupe_preserving_order(fragments)[:max_skills]


def extract_summary(section: str) -> str:
    """Summary section body as a single line: non-empty lines joined by spaces."""
    return " ".join(line.strip() for line in section.split("\n") if line.strip())


def _known_skill_pattern(skill: str) -> re.Pattern:
    # Word edges that also respect "+", "#" and "." so "C" never matches inside "C++"
    return re.compile(rf"(?<![\w+#.]){re.escape(skill)}(?![\w+#]|\.\w)", re.IGNORECASE)


def detect_known_skills(
    text: str, vocabulary: tuple = SKILL_KEYWORDS, max_skills: int = 30
) -> list[str]:
    """
    Known skills mentioned anywhere in text, as whole words.

    Args:
        text: Whole résumé text
        vocabulary: Skill names to look for, in reporting order
        max_skills: Maximum number of skills returned

    Returns:
        Vocabulary entries found, in vocabulary order, at most max_skills

    Example:
        >>> detect_known_skills("Built services in Go and Node.js on AWS")
        ['Node.js', 'AWS', 'Go']
    """
    if not text:
        return []
    found = [skill for skill in vocabulary if _known_skill_pattern(skill).search(text)]
    return found[:max_skills]
