"""
Pattern matching for résumé section identification.

This module provides header vocabularies, alias lists and terminator patterns
used to locate named sections (Skills, Experience, ...) in plain résumé text.

Pattern classes follow the convention from extraction_patterns.py:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns
"""

import re
from dataclasses import dataclass

# =============================================================================
# SECTION ALIASES (ordered fallbacks per target section)
# =============================================================================


@dataclass(frozen=True)
class SectionAliases:
    """
    Header aliases for each section the parser extracts.

    Order matters: the locator uses the first alias found anywhere in the
    document, so the most common spelling goes first.
    """

    SKILLS: tuple = ("skills", "technical skills", "core competencies")
    EXPERIENCE: tuple = (
        "experience",
        "work experience",
        "employment",
        "professional experience",
    )
    EDUCATION: tuple = ("education", "academic background")
    SUMMARY: tuple = ("summary", "objective", "profile", "about")


# Canonical section name -> aliases, for locating every standard section at once
STANDARD_SECTIONS = {
    "summary": SectionAliases.SUMMARY,
    "skills": SectionAliases.SKILLS,
    "experience": SectionAliases.EXPERIENCE,
    "education": SectionAliases.EDUCATION,
}

# =============================================================================
# SECTION BOUNDARIES
# =============================================================================

# Single-word header names that end the section being accumulated
SECTION_HEADER_NAMES = (
    "personal",
    "contact",
    "summary",
    "objective",
    "profile",
    "experience",
    "work",
    "employment",
    "education",
    "skills",
    "technical",
    "certifications",
    "projects",
    "awards",
    "languages",
    "interests",
    "hobbies",
    "publications",
    "volunteer",
)

# Multi-word headers seen in real résumés; these end a section the same way
EXTENDED_HEADER_NAMES = (
    "personal information",
    "personal details",
    "contact information",
    "contact details",
    "professional summary",
    "career objective",
    "about me",
    "work experience",
    "work history",
    "professional experience",
    "employment history",
    "technical skills",
    "core competencies",
    "academic background",
    "certificates",
    "achievements",
)

KNOWN_SECTION_HEADERS = frozenset(
    SECTION_HEADER_NAMES
    + EXTENDED_HEADER_NAMES
    + tuple(alias for aliases in STANDARD_SECTIONS.values() for alias in aliases)
)

# Sections that never contain skills; a line starting with one ends the skills list
NON_SKILL_SECTION_PREFIXES = (
    "interests",
    "hobbies",
    "publications",
    "volunteer",
    "awards",
    "certifications",
)

# Headers longer than this are treated as body text
MAX_HEADER_LENGTH = 50


@dataclass(frozen=True)
class ReferencesPatterns:
    """
    Patterns for the references block.

    References always come last in a résumé and carry no extractable content,
    so a matching line ends whichever section is being read.
    """

    # "References", "Referees", "Reference:", "Referees: on request"
    HEADER: re.Pattern = re.compile(r"^(?:references?|referees?)(?::.*)?$", re.IGNORECASE)

    PHRASES: tuple = ("available upon request", "references available")


@dataclass(frozen=True)
class InlineHeaderPatterns:
    """
    Patterns for headers that carry content on the same line.

    Examples:
    - "Skills: Python, Go, SQL"
    - "Summary - Backend engineer building APIs"
    - "Technical Skills: Docker"
    """

    # Colon, or a dash with whitespace before it ("skills-based" is not a header)
    SEPARATOR: str = r"(?::|\s+[-–—])\s*"

    # Leading words up to the separator, e.g. "work experience" in "Work Experience: ..."
    LEADING_HEADER: re.Pattern = re.compile(r"^([a-z][a-z ]*?)\s*(?::|\s+[-–—])\s*\S")


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def normalize_header(line: str) -> str:
    """
    Normalize a candidate header line for matching.

    Args:
        line: Raw line from résumé text

    Returns:
        Lowercase, stripped line with internal whitespace collapsed and a
        trailing colon removed
    """
    normalized = re.sub(r"\s+", " ", line.strip().lower())
    return normalized.rstrip(":").strip()


def is_references_line(line: str) -> bool:
    """
    Check whether a line starts the references block.

    Args:
        line: Raw line from résumé text

    Returns:
        True for "References"/"Referees" headers and "available upon request" lines
    """
    stripped = line.strip()
    if ReferencesPatterns.HEADER.match(stripped):
        return True
    lowered = stripped.lower()
    return any(phrase in lowered for phrase in ReferencesPatterns.PHRASES)


def is_section_header(line: str, vocabulary: frozenset = KNOWN_SECTION_HEADERS) -> bool:
    """
    Check whether a line is exactly a known section header.

    Args:
        line: Raw line from résumé text
        vocabulary: Header names to accept (defaults to KNOWN_SECTION_HEADERS)

    Returns:
        True if the short line equals a header name
    """
    stripped = line.strip()
    if not stripped or len(stripped) >= MAX_HEADER_LENGTH:
        return False
    return normalize_header(stripped) in vocabulary


def is_inline_section_header(line: str, vocabulary: frozenset = KNOWN_SECTION_HEADERS) -> bool:
    """
    Check whether a line is a known header followed by content.

    Example:
        >>> is_inline_section_header("Skills: Python, Go")
        True
    """
    match = InlineHeaderPatterns.LEADING_HEADER.match(normalize_header(line))
    return bool(match) and match.group(1).strip() in vocabulary


def inline_section_text(line: str, alias: str) -> str:
    """
    Text following "alias:" (or "alias -") on a header line.

    Args:
        line: Header line found for the alias
        alias: Lowercase header alias

    Returns:
        Stripped text after the separator, or "" if the header stands alone
    """
    match = re.search(
        rf"\b{re.escape(alias)}{InlineHeaderPatterns.SEPARATOR}(.+)$", line, re.IGNORECASE
    )
    return match.group(1).strip() if match else ""


def matches_alias(line: str, alias: str) -> bool:
    """
    Check whether a line is a header for the given alias.

    A line matches when it is the alias, starts with "alias:" or "alias ",
    or contains the alias and is short enough to be a header.

    Args:
        line: Raw line from résumé text
        alias: Lowercase header alias (e.g., "work experience")

    Returns:
        True if the line introduces the aliased section
    """
    lowered = line.strip().lower()
    if not lowered:
        return False
    if lowered == alias or lowered.startswith(alias + ":") or lowered.startswith(alias + " "):
        return True
    return alias in lowered and len(lowered) < MAX_HEADER_LENGTH


def starts_non_skill_section(line: str) -> bool:
    """Check whether a line opens a section that never lists skills."""
    lowered = line.strip().lower()
    return lowered.startswith(NON_SKILL_SECTION_PREFIXES)
