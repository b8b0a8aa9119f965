"""
CV parsing for the Intake context.

Turns plain résumé text into a CVRecord:

    normalize -> size ceiling -> locate sections -> extract fields -> CVRecord

Pattern follows the context split: extractors and walkers produce values,
the parser only wires them together and logs what it found.
"""

from sieve.contexts.intake.cv_data_structure import CVRecord, PersonalInfo
from sieve.contexts.intake.entry_walkers import walk_education, walk_experience
from sieve.contexts.intake.field_extractors import (
    detect_known_skills,
    extract_email,
    extract_linkedin,
    extract_name,
    extract_phone,
    extract_skills,
    extract_summary,
)
from sieve.contexts.intake.logger import _log_debug, log_parse_result, log_section_hits
from sieve.contexts.intake.normalizer import enforce_size_ceiling, normalize_text
from sieve.contexts.intake.section_locator import has_section, locate_sections
from sieve.contexts.intake.section_patterns import SectionAliases
from sieve.utils.settings import DEFAULT_SETTINGS, ExtractionSettings


def prepare_text(
    text: str, settings: ExtractionSettings = DEFAULT_SETTINGS, strict: bool = False
) -> str:
    """
    Normalize résumé text and apply the size ceiling.

    Args:
        text: Raw extracted text
        settings: Limits to apply
        strict: Raise OversizeInputError instead of truncating

    Returns:
        Normalized text no longer than settings.max_input_chars

    Raises:
        TypeError: If text is not a string
        OversizeInputError: If strict and the text is over the ceiling
    """
    if not isinstance(text, str):
        raise TypeError(f"CV text must be a str, got {type(text).__name__}")
    return enforce_size_ceiling(normalize_text(text), settings.max_input_chars, strict=strict)


def _skills(text: str, section: str, settings: ExtractionSettings) -> list[str]:
    if has_section(text, SectionAliases.SKILLS):
        return extract_skills(section, max_skills=settings.max_skills)
    _log_debug("No Skills section, looking for known skills in the whole text")
    return detect_known_skills(text, max_skills=settings.max_skills)


def parse_cv(text: str, settings: ExtractionSettings = DEFAULT_SETTINGS) -> CVRecord:
    """
    Parse résumé text into a CVRecord.

    Never raises for string input: empty or unrecognizable text yields a record
    whose fields are all empty, and text over the size ceiling is truncated.

    Contact details and the name come from the whole document. Summary, skills,
    experience and education come from their located sections. A CV with no
    Skills header at all falls back to known skills mentioned anywhere.

    Args:
        text: Plain résumé text (already extracted from PDF/DOCX/OCR)
        settings: Caps on entries, skills and input size

    Returns:
        A new CVRecord

    Example:
        >>> record = parse_cv("Jane Doe\\njane@x.io\\n\\nSKILLS\\nPython, SQL")
        >>> record.skills
        ['Python', 'SQL']
    """
    text = prepare_text(text, settings)
    if not text.strip():
        _log_debug("Empty CV text, returning empty record")
        return CVRecord()

    sections = locate_sections(text)
    log_section_hits(sections)

    record = CVRecord(
        personal_info=PersonalInfo(
            name=extract_name(text),
            email=extract_email(text),
            phone=extract_phone(text),
            linkedin=extract_linkedin(text),
        ),
        summary=extract_summary(sections["summary"]),
        experience=walk_experience(sections["experience"], settings.max_experience_entries),
        skills=_skills(text, sections["skills"], settings),
        education=walk_education(sections["education"], settings.max_education_entries),
    )

    log_parse_result(record)
    return record
