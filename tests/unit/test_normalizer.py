"""Unit tests for text normalization and the size ceiling."""

import pytest

from sieve.contexts.intake.exceptions import OversizeInputError
from sieve.contexts.intake.normalizer import (
    clean_extracted_text,
    enforce_size_ceiling,
    normalize_text,
)


@pytest.mark.unit
class TestNormalizeText:
    def test_line_endings(self):
        assert normalize_text("a\r\nb\rc") == "a\nb\nc"

    def test_ligature_folded(self):
        assert normalize_text("\ufb01nance") == "finance"

    def test_invisible_characters(self):
        assert normalize_text("Jane\u00a0Doe\u200b\ufeff") == "Jane Doe"

    def test_dashes_and_bullets_preserved(self):
        text = "• Python\n2019 – 2021\n2019 — 2021"
        assert normalize_text(text) == text

    def test_empty(self):
        assert normalize_text("") == ""


@pytest.mark.unit
def test_clean_extracted_text():
    assert clean_extracted_text("  a   b \n\n\t c \r\n") == "a b\nc"


@pytest.mark.unit
class TestEnforceSizeCeiling:
    def test_within_ceiling(self):
        assert enforce_size_ceiling("abc", 5) == "abc"

    def test_truncates(self):
        assert enforce_size_ceiling("abcdef", 3) == "abc"

    def test_strict_raises(self):
        with pytest.raises(OversizeInputError) as exc_info:
            enforce_size_ceiling("abcdef", 3, strict=True)
        assert exc_info.value.length == 6
        assert exc_info.value.max_chars == 3
        assert isinstance(exc_info.value, ValueError)
