"""Unit tests for job-independent scoring."""

import pytest

from sieve.contexts.intake.cv_data_structure import CVRecord, ExperienceEntry, PersonalInfo
from sieve.contexts.scoring.ats_scorer import (
    calculate_ats_score,
    general_suggestions,
    looks_like_cv,
    score_sections,
    section_suggestions,
)

KEYWORD_TEXT = (
    "leadership management agile cloud scrum devops machine learning database programming"
)


@pytest.mark.unit
class TestCalculateAtsScore:
    def test_empty(self):
        assert calculate_ats_score("") == 0

    def test_contact_and_section_words(self):
        text = "email: jane@x.com\nPhone 555-123-4567\nExperience\nEducation\nSkills"
        assert calculate_ats_score(text) == 50

    def test_at_sign_counts_as_email(self):
        assert calculate_ats_score("jane@x.com") == 10

    def test_keyword_contribution_capped(self):
        assert calculate_ats_score(KEYWORD_TEXT) == 40

    def test_total_capped(self):
        text = f"jane@x.com 555.123.4567 experience education skills {KEYWORD_TEXT}"
        assert calculate_ats_score(text) == 90
        assert calculate_ats_score(text, ceiling=60) == 60

    def test_custom_vocabulary(self):
        assert calculate_ats_score("kubernetes", keywords=("kubernetes",)) == 5


@pytest.mark.unit
class TestScoreSections:
    def test_empty_text(self):
        result = score_sections("")
        assert result.total_score == 0
        assert result.max_possible_score == 100
        assert not any(row.present for row in result.sections.values())

    def test_keywords_anywhere_in_text(self):
        result = score_sections("Worked at a university; email me")
        assert result.sections["experience"].present
        assert result.sections["education"].present
        assert result.sections["contact"].present
        assert not result.sections["skills"].present
        assert result.sections["skills"].score == 0
        assert result.sections["skills"].weight == 25
        assert result.total_score == 60

    def test_to_dict(self):
        data = score_sections("Awards").to_dict()
        assert data["totalScore"] == 15
        assert data["sections"]["achievements"] == {"present": True, "score": 15, "weight": 15}


@pytest.mark.unit
def test_looks_like_cv():
    assert looks_like_cv("Experience\nEducation\nSkills")
    assert not looks_like_cv("Hello world")
    assert not looks_like_cv("Education only")


@pytest.mark.unit
class TestGeneralSuggestions:
    def test_empty_record(self):
        assert general_suggestions(CVRecord()) == [
            "Add a professional email address",
            "Include your phone number",
            "Add more relevant technical skills",
            "Include a professional summary or objective statement",
            "Add more work experience details",
        ]

    def test_complete_record(self):
        record = CVRecord(
            personal_info=PersonalInfo(name="Jane", email="jane@x.com", phone="555-123-4567"),
            summary="Engineer",
            experience=[ExperienceEntry(title="A"), ExperienceEntry(title="B")],
            skills=["Python", "Go", "SQL", "Docker", "Git"],
        )
        assert general_suggestions(record) == []


@pytest.mark.unit
class TestSectionSuggestions:
    def test_empty_text(self):
        assert section_suggestions("") == [
            "Add work experience section",
            "Add education section",
            "Add skills section",
            "Add contact information",
            "Consider adding more details to your CV",
        ]

    def test_short_cv_with_every_section(self):
        text = "jane@x.com\nEXPERIENCE\nEDUCATION\nSKILLS"
        assert section_suggestions(text) == ["Consider adding more details to your CV"]

    def test_email_word_counts_as_contact(self):
        text = "Email on request\nExperience, education and skills" + "." * 500
        assert section_suggestions(text) == []

    def test_custom_minimum_length(self):
        assert section_suggestions("a@b.co experience education skills", min_length=10) == []
