"""
Section location for the Intake context.

Finds the slice of résumé text that belongs to a named section, given ordered
header aliases, and the point where the next section begins.

Text after "Header:" on the header line itself ("Skills: Python, Go") is the
first line of the body.

A section body ends at:
- a references terminator ("References", "Referees", "... available upon request"),
  which also discards everything after it
- a short line that is exactly another known section header
- a known header followed by content on the same line ("Education: BSc, 2015")
"""

from sieve.contexts.intake.section_patterns import (
    KNOWN_SECTION_HEADERS,
    STANDARD_SECTIONS,
    inline_section_text,
    is_inline_section_header,
    is_references_line,
    is_section_header,
    matches_alias,
)


def _is_strong_header(line: str, alias: str) -> bool:
    """Line is the alias itself or starts with "alias:" / "alias "."""
    lowered = line.strip().lower()
    return lowered == alias or lowered.startswith(alias + ":") or lowered.startswith(alias + " ")


def find_header(lines: list[str], header_aliases: list[str] | tuple) -> tuple[int, str] | None:
    """
    Find the header line for the first alias present, and that alias.

    Aliases are tried in order. For each alias, a line that is (or starts with)
    the alias wins over a short line that merely contains it, so "EXPERIENCE"
    beats an earlier "5 years of experience" summary line.

    Args:
        lines: Document lines
        header_aliases: Ordered fallback aliases (e.g., ["experience", "employment"])

    Returns:
        (line index, lowercase alias) of the header, or None if no alias is found
    """
    for alias in header_aliases:
        alias = alias.lower()
        for index, line in enumerate(lines):
            if _is_strong_header(line, alias):
                return index, alias
        for index, line in enumerate(lines):
            if matches_alias(line, alias):
                return index, alias
    return None


def find_header_line(lines: list[str], header_aliases: list[str] | tuple) -> int | None:
    """Line index of the header for the first alias present, or None."""
    found = find_header(lines, header_aliases)
    return found[0] if found else None


def collect_section_body(
    lines: list[str], start: int, vocabulary: frozenset = KNOWN_SECTION_HEADERS
) -> list[str]:
    """
    Accumulate lines from start until the section ends.

    Args:
        lines: Document lines
        start: Index of the first body line (the line after the header)
        vocabulary: Header names that end the section

    Returns:
        Body lines, unmodified, in document order
    """
    body = []
    for line in lines[start:]:
        if is_references_line(line):
            break
        if is_section_header(line, vocabulary) or is_inline_section_header(line, vocabulary):
            break
        body.append(line)
    return body


def locate_section(
    full_text: str,
    header_aliases: list[str] | tuple,
    vocabulary: frozenset = KNOWN_SECTION_HEADERS,
) -> str:
    """
    Return the body text of the section introduced by one of the aliases.

    Only the first alias found is used, so callers pass ordered fallbacks.

    Args:
        full_text: Whole résumé text
        header_aliases: Ordered fallback aliases
        vocabulary: Header names that end the section

    Returns:
        Section body joined with newlines, or "" if no alias is found

    Example:
        >>> locate_section("Jane\\nSKILLS\\nPython, SQL\\nEDUCATION\\nBSc", ["skills"])
        'Python, SQL'
        >>> locate_section("Jane\\nSkills: Python, SQL\\nEDUCATION\\nBSc", ["skills"])
        'Python, SQL'
    """
    if not full_text:
        return ""

    lines = full_text.split("\n")
    found = find_header(lines, header_aliases)
    if found is None:
        return ""

    header_index, alias = found
    body = collect_section_body(lines, header_index + 1, vocabulary)
    inline = inline_section_text(lines[header_index], alias)
    if inline and not is_references_line(inline):
        body.insert(0, inline)

    return "\n".join(body)


def has_section(full_text: str, header_aliases: list[str] | tuple) -> bool:
    """True if a header for any of the aliases appears in the text."""
    return find_header(full_text.split("\n"), header_aliases) is not None


def locate_sections(full_text: str) -> dict[str, str]:
    """
    Locate every standard section (summary, skills, experience, education).

    Args:
        full_text: Whole résumé text

    Returns:
        Dict mapping canonical section name to body text ("" when absent)
    """
    return {
        name: locate_section(full_text, aliases) for name, aliases in STANDARD_SECTIONS.items()
    }
