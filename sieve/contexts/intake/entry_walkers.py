"""
Entry walkers for the Intake context.

Turn an Experience or Education section body into a list of entries. Each
walker is an explicit state machine over the section's non-empty lines:

    NoCurrentEntry --(entry trigger)--> BuildingEntry
    BuildingEntry  --(entry trigger)--> finalize, BuildingEntry
    BuildingEntry  --(other line)-----> BuildingEntry (description grows)
    end of input   -------------------> finalize

After a trigger line, up to LOOKAHEAD_LINES following lines may be consumed
to fill fields the trigger line did not carry:

    Software Engineer        <- trigger: title
    Acme Corp                <- lookahead: company
    2020 - 2022              <- lookahead: duration
    • Built data pipelines   <- description
"""

import re
from dataclasses import dataclass, field

from sieve.contexts.intake.cv_data_structure import EducationEntry, ExperienceEntry
from sieve.contexts.intake.extraction_patterns import EntryPatterns, find_duration, remove_span
from sieve.contexts.intake.section_patterns import is_references_line
from sieve.utils.text_processing import is_bullet, strip_bullet

LOOKAHEAD_LINES = 2

# Lines this long are prose, not a title or company line
MAX_HEADING_LENGTH = 100
MIN_TITLE_LENGTH = 5
MIN_DEGREE_LENGTH = 6


# =============================================================================
# WALKER STATES
# =============================================================================


@dataclass(frozen=True)
class NoCurrentEntry:
    """Walker state before the first entry trigger."""


@dataclass
class BuildingEntry:
    """Walker state while an experience entry is being accumulated."""

    title: str = ""
    company: str = ""
    duration: str = ""
    description_lines: list[str] = field(default_factory=list)

    def finalize(self) -> ExperienceEntry:
        return ExperienceEntry(
            title=self.title,
            company=self.company,
            duration=self.duration,
            description=" ".join(strip_bullet(line) for line in self.description_lines),
        )


@dataclass
class BuildingEducation:
    """Walker state while an education entry is being accumulated."""

    degree: str = ""
    institution: str = ""
    year: str = ""

    def finalize(self) -> EducationEntry:
        return EducationEntry(degree=self.degree, institution=self.institution, year=self.year)


# =============================================================================
# LINE CLASSIFICATION
# =============================================================================


def content_lines(section: str) -> list[str]:
    """Stripped non-empty lines of a section body, cut at a references line."""
    lines = []
    for line in section.split("\n"):
        line = line.strip()
        if not line:
            continue
        if is_references_line(line):
            break
        lines.append(line)
    return lines


def looks_like_heading(line: str) -> bool:
    """
    Short, non-bullet line that does not read like a sentence.

    Sentences end in ".", "!", "?" or ";", and continuation text starts lowercase.
    """
    return (
        len(line) < MAX_HEADING_LENGTH
        and not is_bullet(line)
        and not EntryPatterns.SENTENCE_END.search(line)
        and not line[:1].islower()
    )


def looks_like_title(line: str) -> bool:
    """Heading-like line long enough to be a job title (5 to 99 characters)."""
    return len(line) >= MIN_TITLE_LENGTH and looks_like_heading(line)


def looks_like_degree(line: str) -> bool:
    """Line longer than 5 characters that is not a bullet."""
    return len(line) >= MIN_DEGREE_LENGTH and not is_bullet(line)


def split_fields(text: str, separator: re.Pattern) -> list[str]:
    """Split on separator, dropping empty parts."""
    return [part.strip() for part in separator.split(text) if part.strip()]


# =============================================================================
# EXPERIENCE
# =============================================================================


def _start_experience(line: str, duration: re.Match | None) -> BuildingEntry:
    """Build the entry opened by a trigger line."""
    if duration is None:
        return BuildingEntry(title=strip_bullet(line))

    remainder = strip_bullet(remove_span(line, duration, EntryPatterns.DANGLING_SEPARATORS))
    parts = split_fields(remainder, EntryPatterns.TITLE_COMPANY_SEPARATOR)
    return BuildingEntry(
        title=parts[0] if parts else "",
        company=parts[1] if len(parts) > 1 else "",
        duration=duration.group(0),
    )


def _fill_experience(lines: list[str], index: int, entry: BuildingEntry) -> int:
    """
    Consume up to LOOKAHEAD_LINES lines that complete the entry.

    A date line whose remainder still splits into title and company
    ("Senior Engineer | Beta | 2018 - 2019") is the next entry, not a fill.

    Returns:
        Index of the first line not consumed
    """
    for _ in range(LOOKAHEAD_LINES):
        if index >= len(lines):
            break
        line = lines[index]
        duration = find_duration(line)

        if duration and not entry.duration:
            remainder = remove_span(line, duration, EntryPatterns.DANGLING_SEPARATORS)
            if EntryPatterns.ENTRY_FIELD_SEPARATOR.search(remainder):
                break
            entry.duration = duration.group(0)
            if remainder and not entry.company:
                entry.company = remainder
        elif not duration and not entry.company and looks_like_heading(line):
            entry.company = line
        else:
            break
        index += 1

    return index


def walk_experience(section: str, max_entries: int = 5) -> list[ExperienceEntry]:
    """
    Walk an Experience section body into job entries.

    A line starts a new entry when it carries a date range or looks like a
    title. A trigger line with a date range is split into title and company
    around "|", "@" or a comma before a capital letter. Every other line
    becomes description text of the current entry and is dropped before the
    first entry.

    Args:
        section: Experience section body from locate_section()
        max_entries: Maximum number of entries returned

    Returns:
        Entries in source order

    Example:
        >>> walk_experience("Engineer | Acme | 2020 - 2022\\n• Built APIs")[0].company
        'Acme'
    """
    lines = content_lines(section)
    entries: list[ExperienceEntry] = []
    state: NoCurrentEntry | BuildingEntry = NoCurrentEntry()

    index = 0
    while index < len(lines):
        line = lines[index]
        duration = find_duration(line)

        if duration or looks_like_title(line):
            if isinstance(state, BuildingEntry):
                entries.append(state.finalize())
                if len(entries) >= max_entries:
                    return entries
            state = _start_experience(line, duration)
            index = _fill_experience(lines, index + 1, state)
            continue

        if isinstance(state, BuildingEntry):
            state.description_lines.append(line)
        index += 1

    if isinstance(state, BuildingEntry) and len(entries) < max_entries:
        entries.append(state.finalize())

    return entries


# =============================================================================
# EDUCATION
# =============================================================================


def _take_year(line: str) -> tuple[str, str]:
    """
    Split a line into (year, remaining text).

    The first 1900-2099 year is the year. When it sits inside a date range the
    whole range is cut from the text.
    """
    year = EntryPatterns.YEAR.search(line)
    if not year:
        return "", line

    span = find_duration(line)
    if not span or not (span.start() <= year.start() < span.end()):
        span = year
    return year.group(0), remove_span(line, span, EntryPatterns.DANGLING_SEPARATORS)


def _start_education(line: str) -> BuildingEducation:
    year, remainder = _take_year(line)
    parts = split_fields(remainder, EntryPatterns.DEGREE_INSTITUTION_SEPARATOR)
    return BuildingEducation(
        degree=parts[0] if parts else "",
        institution=parts[1] if len(parts) > 1 else "",
        year=year,
    )


def _fill_education(lines: list[str], index: int, entry: BuildingEducation) -> int:
    """Consume up to LOOKAHEAD_LINES lines holding a missing year or institution."""
    for _ in range(LOOKAHEAD_LINES):
        if index >= len(lines):
            break
        line = lines[index]
        year, remainder = _take_year(line)

        if year and not entry.year:
            entry.year = year
            if remainder and not entry.institution:
                entry.institution = remainder
        elif not year and not entry.institution and looks_like_heading(line):
            entry.institution = line
        else:
            break
        index += 1

    return index


def walk_education(section: str, max_entries: int = 3) -> list[EducationEntry]:
    """
    Walk an Education section body into degree entries.

    Every line longer than 5 characters that is not a bullet opens a new
    entry; its year is cut out and the rest split on "|", "@" or "," into
    degree and institution. Short follow-up lines fill a missing institution
    or year.

    Args:
        section: Education section body from locate_section()
        max_entries: Maximum number of entries returned

    Returns:
        Entries in source order
    """
    lines = content_lines(section)
    entries: list[EducationEntry] = []
    state: NoCurrentEntry | BuildingEducation = NoCurrentEntry()

    index = 0
    while index < len(lines):
        line = lines[index]

        if looks_like_degree(line):
            if isinstance(state, BuildingEducation):
                entries.append(state.finalize())
                if len(entries) >= max_entries:
                    return entries
            state = _start_education(line)
            index = _fill_education(lines, index + 1, state)
            continue

        index += 1

    if isinstance(state, BuildingEducation) and len(entries) < max_entries:
        entries.append(state.finalize())

    return entries
