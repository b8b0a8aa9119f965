"""
Résumé text normalizer for the Intake context.

Preprocesses text handed over by PDF/DOCX/OCR extraction before any
heuristic runs. Design principle: normalize BEFORE parsing, so every
extractor sees the same line structure.

Dashes and bullets are deliberately left alone. Date ranges ("2019 – 2021")
are returned verbatim and skills are split on "•".
"""

import re
import unicodedata

from sieve.contexts.intake.exceptions import OversizeInputError
from sieve.contexts.intake.logger import _log_warning

# Unicode replacements: problematic char → ASCII equivalent
UNICODE_REPLACEMENTS = {
    # Spaces
    "\u00a0": " ",  # non-breaking space
    "\u202f": " ",  # narrow no-break space
    # Zero-width characters → remove
    "\u200b": "",  # zero-width space
    "\u200c": "",  # zero-width non-joiner
    "\u200d": "",  # zero-width joiner
    "\u2060": "",  # word joiner
    "\ufeff": "",  # BOM / zero-width no-break space
}


def normalize_text(text: str) -> str:
    """
    Normalize unicode and line endings.

    Applies NFKC normalization (folds PDF ligatures like "ﬁ" and full-width
    characters), converts CRLF/CR to LF, and replaces invisible characters.

    Args:
        text: Raw extracted text

    Returns:
        Text with normalized unicode and "\\n" line endings
    """
    if not text:
        return ""

    text = unicodedata.normalize("NFKC", text)
    text = text.replace("\r\n", "\n").replace("\r", "\n")

    for char, replacement in UNICODE_REPLACEMENTS.items():
        text = text.replace(char, replacement)

    return text


def clean_extracted_text(text: str) -> str:
    """
    Tidy OCR or PDF output for display.

    Trims each line, collapses runs of whitespace inside lines and drops
    empty lines.

    Args:
        text: Raw extracted text

    Returns:
        One non-empty, single-spaced line per source line
    """
    if not text:
        return ""

    cleaned = []
    for line in normalize_text(text).split("\n"):
        line = re.sub(r"\s+", " ", line).strip()
        if line:
            cleaned.append(line)

    return "\n".join(cleaned)


def enforce_size_ceiling(text: str, max_chars: int, strict: bool = False) -> str:
    """
    Bound the amount of text the regex heuristics will scan.

    Args:
        text: Résumé text
        max_chars: Character ceiling
        strict: Raise instead of truncating

    Returns:
        Text unchanged if within the ceiling, otherwise its first max_chars characters

    Raises:
        OversizeInputError: If strict and the text is over the ceiling
    """
    if len(text) <= max_chars:
        return text

    if strict:
        raise OversizeInputError(len(text), max_chars)

    _log_warning(f"CV text truncated from {len(text):,} to {max_chars:,} characters")
    return text[:max_chars]
