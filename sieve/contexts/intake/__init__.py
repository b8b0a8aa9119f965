"""
Intake Context

Responsibilities:
- Normalizes résumé text extracted by PDF/DOCX/OCR collaborators
- Locates named sections (Summary, Skills, Experience, Education)
- Extracts contact details, skills and experience/education entries

Owns: CV parsing logic and the CVRecord contract
Never: Scores a CV or renders it
"""

from sieve.contexts.intake.cv_data_structure import (
    CVRecord,
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
)
from sieve.contexts.intake.cv_parser import parse_cv, prepare_text
from sieve.contexts.intake.exceptions import OversizeInputError
from sieve.contexts.intake.section_locator import locate_section, locate_sections

__all__ = [
    "CVRecord",
    "EducationEntry",
    "ExperienceEntry",
    "OversizeInputError",
    "PersonalInfo",
    "locate_section",
    "locate_sections",
    "parse_cv",
    "prepare_text",
]
