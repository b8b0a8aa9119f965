"""
Reusable patterns and constants for résumé field extraction.

This module provides the regex patterns used by the field extractors and the
entry walkers: contact details, date ranges, graduation years and the
separators used to split "Title | Company" style lines.

Pattern classes follow the convention from section_patterns.py:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns
"""

import re
from dataclasses import dataclass

# =============================================================================
# CONTACT PATTERNS
# =============================================================================


@dataclass(frozen=True)
class ContactPatterns:
    """
    Regex patterns for contact details.

    These are deliberately permissive. PHONE in particular also matches
    date ranges like "2019 - 2021"; callers tolerate false positives.
    """

    EMAIL: re.Pattern = re.compile(r"[\w.-]+@[\w.-]+\.\w{2,}")

    # At least 10 characters of digits/spaces/parens/hyphens, digit at both ends.
    # Horizontal whitespace only, so a match never spans lines.
    PHONE: re.Pattern = re.compile(r"\+?\(?\d[\d \t()\-]{8,}\d")

    LINKEDIN: re.Pattern = re.compile(
        r"(?:https?://)?(?:www\.)?linkedin\.com/in/[\w-]+", re.IGNORECASE
    )


# =============================================================================
# DATE RANGE PATTERNS
# =============================================================================

# Full or abbreviated month name only, so "Marketing" never reads as "Mar"
_MONTH = (
    r"(?:jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?|aug(?:ust)?"
    r"|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)\.?"
)
_PRESENT = r"(?:present|current|now)"
# Hyphen, en dash, em dash, or the word "to"
_RANGE_SEP = r"(?:\s*[-–—]\s*|\s+to\s+)"


@dataclass(frozen=True)
class DurationPatterns:
    """
    Regex patterns for employment date ranges, most specific first.

    Examples matched:
    - "Jan 2020 - Dec 2023", "March 2019 to June 2021"
    - "Sep 2021 – Present"
    - "2018-2020", "2018 to 2020"
    - "2021 - Present"
    - "01/2020 - 12/2023"
    - "06/2022 - Present"
    """

    MONTH_RANGE: re.Pattern = re.compile(
        rf"\b{_MONTH}\s+\d{{4}}{_RANGE_SEP}{_MONTH}\s+\d{{4}}\b", re.IGNORECASE
    )
    MONTH_TO_PRESENT: re.Pattern = re.compile(
        rf"\b{_MONTH}\s+\d{{4}}{_RANGE_SEP}{_PRESENT}\b", re.IGNORECASE
    )
    # (?<!/) keeps "06/2022 - Present" for the numeric patterns below
    YEAR_RANGE: re.Pattern = re.compile(
        rf"\b(?<!/)\d{{4}}{_RANGE_SEP}\d{{4}}\b", re.IGNORECASE
    )
    YEAR_TO_PRESENT: re.Pattern = re.compile(
        rf"\b(?<!/)\d{{4}}{_RANGE_SEP}{_PRESENT}\b", re.IGNORECASE
    )
    NUMERIC_RANGE: re.Pattern = re.compile(
        rf"\b\d{{1,2}}/\d{{4}}{_RANGE_SEP}\d{{1,2}}/\d{{4}}\b", re.IGNORECASE
    )
    NUMERIC_TO_PRESENT: re.Pattern = re.compile(
        rf"\b\d{{1,2}}/\d{{4}}{_RANGE_SEP}{_PRESENT}\b", re.IGNORECASE
    )


# Tried in this order; first hit wins
DURATION_PATTERNS = [
    DurationPatterns.MONTH_RANGE,
    DurationPatterns.MONTH_TO_PRESENT,
    DurationPatterns.YEAR_RANGE,
    DurationPatterns.YEAR_TO_PRESENT,
    DurationPatterns.NUMERIC_RANGE,
    DurationPatterns.NUMERIC_TO_PRESENT,
]


# =============================================================================
# ENTRY LINE PATTERNS
# =============================================================================


@dataclass(frozen=True)
class EntryPatterns:
    """
    Regex patterns for splitting experience and education header lines.
    """

    # Graduation year (1900-2099)
    YEAR: re.Pattern = re.compile(r"\b(?:19|20)\d{2}\b")

    # "Engineer | Acme", "Engineer @ Acme", "Engineer, Acme Corp"
    # Commas only split when an uppercase letter follows ("Austin, TX" stays split
    # too; the heuristic accepts that)
    TITLE_COMPANY_SEPARATOR: re.Pattern = re.compile(r"\s*[|@]\s*|,\s*(?=[A-Z])")

    # "BS Computer Science, MIT" or "BS | MIT" - any comma splits education lines
    DEGREE_INSTITUTION_SEPARATOR: re.Pattern = re.compile(r"\s*[|@,]\s*")

    # Punctuation left dangling once a date range is cut out of a line
    DANGLING_SEPARATORS: str = " \t|@,;:-–—()[]"

    # A remainder still holding "|" or "@" is a complete entry line of its own
    ENTRY_FIELD_SEPARATOR: re.Pattern = re.compile(r"[|@]")

    # A line ending like a sentence is description text, not a header
    SENTENCE_END: re.Pattern = re.compile(r"[.!?;]$")


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def find_duration(text: str) -> re.Match | None:
    """
    Find the first date range in text, trying patterns in priority order.

    Args:
        text: Text to search

    Returns:
        Match object for the highest-priority pattern that hits, or None
    """
    for pattern in DURATION_PATTERNS:
        match = pattern.search(text)
        if match:
            return match
    return None


def remove_span(text: str, match: re.Match, separators: str) -> str:
    """
    Cut a matched span out of text and trim separators around the seam.

    Args:
        text: Original text the match was found in
        match: Match whose span is removed
        separators: Characters to strip from the remaining text's ends

    Returns:
        Text with the span removed, e.g. "Engineer | Acme | 2020 - 2022" -> "Engineer | Acme"
    """
    before = text[: match.start()].rstrip(separators)
    after = text[match.end() :].lstrip(separators)
    if before and after:
        return f"{before} | {after}"
    return (before or after).strip(separators)
