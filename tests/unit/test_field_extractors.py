"""Unit tests for contact, duration, skills and summary extractors."""

import pytest

from sieve.contexts.intake.field_extractors import (
    SKILL_KEYWORDS,
    detect_known_skills,
    extract_duration,
    extract_email,
    extract_linkedin,
    extract_name,
    extract_phone,
    extract_skills,
    extract_summary,
)


@pytest.mark.unit
class TestContactExtractors:
    def test_email(self):
        assert extract_email("Contact: jane.doe@mail.example.com today") == "jane.doe@mail.example.com"

    def test_email_missing(self):
        assert extract_email("no address here") == ""

    def test_phone_international(self):
        assert extract_phone("Phone: +1 (555) 123-4567") == "+1 (555) 123-4567"

    def test_phone_missing(self):
        assert extract_phone("Call me maybe") == ""

    def test_phone_matches_date_range(self):
        """Known limitation: a date range looks like a phone number."""
        assert extract_phone("Worked 2019 - 2021 at Acme") == "2019 - 2021"

    def test_linkedin(self):
        text = "Profile: https://www.linkedin.com/in/jane-doe/ (updated)"
        assert extract_linkedin(text) == "https://www.linkedin.com/in/jane-doe"

    def test_linkedin_without_scheme(self):
        assert extract_linkedin("linkedin.com/in/jdoe") == "linkedin.com/in/jdoe"

    def test_name_is_first_non_empty_line(self):
        assert extract_name("\n\n  Jane Doe  \nEngineer") == "Jane Doe"

    def test_name_of_blank_text(self):
        assert extract_name(" \n \n") == ""


@pytest.mark.unit
class TestExtractDuration:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Engineer | Jan 2020 - Dec 2023", "Jan 2020 - Dec 2023"),
            ("March 2019 to June 2021", "March 2019 to June 2021"),
            ("Sep 2021 – Present", "Sep 2021 – Present"),
            ("Acme 2018-2020", "2018-2020"),
            ("2021 - present", "2021 - present"),
            ("01/2020 - 12/2023", "01/2020 - 12/2023"),
            ("06/2022 - Present", "06/2022 - Present"),
            ("2015 — 2017", "2015 — 2017"),
            ("Sept 2021 - Present", "Sept 2021 - Present"),
            ("September 2019 to Jan. 2021", "September 2019 to Jan. 2021"),
        ],
    )
    def test_formats(self, text, expected):
        assert extract_duration(text) == expected

    def test_month_range_preferred_over_year_range(self):
        assert extract_duration("Jan 2020 - Present") == "Jan 2020 - Present"

    def test_no_duration(self):
        assert extract_duration("Software Engineer") == ""

    def test_words_starting_with_a_month_are_not_months(self):
        assert extract_duration("Head of Marketing 2020 - Present") == "2020 - Present"
        assert extract_duration("Decision Analyst 2017 - 2019") == "2017 - 2019"


@pytest.mark.unit
class TestExtractSkills:
    def test_bullets_labels_and_delimiters(self):
        section = "• Python, Go; SQL\nTools: Docker | Git"
        assert extract_skills(section) == ["Python", "Go", "SQL", "Docker", "Git"]

    def test_drops_stopwords_and_single_characters(self):
        assert extract_skills("Python, and, R, C, using") == ["Python"]

    def test_drops_long_fragments(self):
        long_fragment = "x" * 60
        assert extract_skills(f"Python, {long_fragment}") == ["Python"]

    def test_dedupe_is_case_sensitive(self):
        assert extract_skills("Python, python, Python") == ["Python", "python"]

    def test_cap(self):
        section = ", ".join(f"Skill{i:02d}" for i in range(40))
        skills = extract_skills(section)
        assert len(skills) == 30
        assert skills[0] == "Skill00"
        assert extract_skills(section, max_skills=5) == [f"Skill{i:02d}" for i in range(5)]

    def test_stops_at_non_skill_section(self):
        assert extract_skills("Python\nInterests: chess, hiking\nRust") == ["Python"]

    def test_stops_at_references(self):
        assert extract_skills("Python\nReferences\nGo") == ["Python"]

    def test_custom_stopwords(self):
        assert extract_skills("Python, Excel", stopwords=frozenset({"excel"})) == ["Python"]

    def test_empty_section(self):
        assert extract_skills("") == []


@pytest.mark.unit
def test_extract_summary_joins_lines():
    assert extract_summary("  Seasoned engineer\n\n  building systems ") == (
        "Seasoned engineer building systems"
    )
    assert extract_summary("") == ""


@pytest.mark.unit
class TestDetectKnownSkills:
    def test_vocabulary_order_and_spelling(self):
        text = "Built services in go and node.js on AWS"
        assert detect_known_skills(text) == ["Node.js", "AWS", "Go"]

    def test_whole_words_only(self):
        assert detect_known_skills("JavaScript on GitHub, Gopher mascot") == ["JavaScript"]

    def test_symbol_skills(self):
        assert detect_known_skills("Wrote C++ and C# daily") == ["C#", "C++"]

    def test_custom_vocabulary_and_cap(self):
        assert detect_known_skills("Terraform, Ansible", vocabulary=("Ansible", "Terraform")) == [
            "Ansible",
            "Terraform",
        ]
        assert len(detect_known_skills(" ".join(SKILL_KEYWORDS), max_skills=4)) == 4

    def test_nothing_known(self):
        assert detect_known_skills("") == []
        assert detect_known_skills("Jane Doe\nBaker") == []
