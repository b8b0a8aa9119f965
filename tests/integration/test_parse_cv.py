"""
Integration tests for parse_cv: raw résumé text to CVRecord.
Tests: worked scenarios, caps, references termination, idempotence.
"""

import json

import pytest

from sieve.contexts.intake import CVRecord, parse_cv
from sieve.contexts.intake.cv_data_structure import EducationEntry, ExperienceEntry
from sieve.utils.settings import ExtractionSettings

SCENARIO_A = (
    "John Smith\njohn@x.com\n555-123-4567\n\nSKILLS\nPython, Go, SQL\n\n"
    "EXPERIENCE\nSoftware Engineer\nAcme Corp\n2020 - 2022\nBuilt things.\n\n"
    "EDUCATION\nBS Computer Science\nMIT\n2019"
)


@pytest.mark.integration
def test_stacked_sections_scenario():
    record = parse_cv(SCENARIO_A)

    assert record.personal_info.name == "John Smith"
    assert record.personal_info.email == "john@x.com"
    assert record.personal_info.phone == "555-123-4567"
    assert record.skills == ["Python", "Go", "SQL"]
    assert record.experience == [
        ExperienceEntry(
            title="Software Engineer",
            company="Acme Corp",
            duration="2020 - 2022",
            description="Built things.",
        )
    ]
    assert record.education == [
        EducationEntry(degree="BS Computer Science", institution="MIT", year="2019")
    ]
    assert record.summary == ""


@pytest.mark.integration
@pytest.mark.parametrize("text", ["", "   ", "\n\n\t\n"])
def test_blank_input_gives_empty_record(text):
    assert parse_cv(text) == CVRecord()


@pytest.mark.integration
def test_references_after_skills():
    text = "Jane Doe\nSKILLS\nPython, SQL\nReferences\nAvailable upon request"
    assert parse_cv(text).skills == ["Python", "SQL"]


@pytest.mark.integration
def test_full_cv(sample_cv):
    record = parse_cv(sample_cv)

    assert record.personal_info.name == "Jane Doe"
    assert record.personal_info.phone == "+44 20 7946 0958"
    assert record.summary.startswith("Backend engineer with ten years")
    assert record.skills == ["Python", "Go", "PostgreSQL"]
    assert [(e.title, e.company, e.duration) for e in record.experience] == [
        ("Senior Engineer", "Acme", "Jan 2020 - Present"),
        ("Engineer", "Globex", "2016 - 2019"),
    ]
    assert record.experience[1].description == "Built billing pipeline"
    assert [(e.degree, e.institution, e.year) for e in record.education] == [
        ("MSc Computer Science", "University of Edinburgh", "2015"),
        ("BSc Mathematics", "University of Leeds", "2013"),
    ]


@pytest.mark.integration
class TestReferencesTerminator:
    """A references line hides the rest of the section it appears in."""

    REFERENCES = "References available upon request"

    def _insert_after(self, text: str, line: str) -> str:
        return text.replace(line + "\n", f"{line}\n{self.REFERENCES}\n", 1)

    def test_in_skills(self, sample_cv):
        record = parse_cv(self._insert_after(sample_cv, "SKILLS"))
        assert record.skills == []
        assert len(record.experience) == 2

    def test_in_experience(self, sample_cv):
        record = parse_cv(self._insert_after(sample_cv, "• Led platform team"))
        assert [e.company for e in record.experience] == ["Acme"]
        assert record.experience[0].description == "Led platform team"

    def test_in_education(self, sample_cv):
        line = "MSc Computer Science, University of Edinburgh, 2015"
        record = parse_cv(self._insert_after(sample_cv, line))
        assert [e.year for e in record.education] == ["2015"]


@pytest.mark.integration
def test_caps():
    skills = ", ".join(f"Skill{i:02d}" for i in range(45))
    jobs = "\n".join(f"Engineer {i} | Company {i} | 200{i} - 201{i}" for i in range(8))
    degrees = "\n".join(f"Degree {i}, School {i}, 199{i}" for i in range(6))
    text = f"Jane\nSKILLS\n{skills}\nEXPERIENCE\n{jobs}\nEDUCATION\n{degrees}"

    record = parse_cv(text)
    assert len(record.skills) == 30
    assert len(record.experience) == 5
    assert len(record.education) == 3

    tight = ExtractionSettings(max_skills=3, max_experience_entries=1, max_education_entries=1)
    record = parse_cv(text, settings=tight)
    assert (len(record.skills), len(record.experience), len(record.education)) == (3, 1, 1)


@pytest.mark.integration
def test_oversize_input_is_truncated():
    text = "Jane Doe\n" + "x" * 100 + "\nSKILLS\nPython"
    record = parse_cv(text, settings=ExtractionSettings(max_input_chars=50))
    assert record.personal_info.name == "Jane Doe"
    assert record.skills == []


@pytest.mark.integration
def test_idempotent(sample_cv):
    assert parse_cv(sample_cv) == parse_cv(sample_cv)


@pytest.mark.integration
@pytest.mark.parametrize(
    "text",
    [
        "\x00",
        "•\n•\n•",
        "References",
        "-" * 1000,
        "2019 - 2021\n" * 50,
        "EXPERIENCE\n\n\n",
        "SKILLS:\n,,,;;;|||",
        "ＳＫＩＬＬＳ\nＰｙｔｈｏｎ",
        "a" * 10_000,
    ],
)
def test_never_raises_and_fields_are_well_typed(text):
    record = parse_cv(text)

    info = record.personal_info
    assert all(isinstance(value, str) for value in info.to_dict().values())
    assert isinstance(record.summary, str)
    assert all(isinstance(skill, str) for skill in record.skills)
    assert len(record.skills) == len(set(record.skills))
    assert len(record.experience) <= 5
    assert len(record.education) <= 3
    json.dumps(record.to_dict())


@pytest.mark.integration
def test_non_string_input_is_a_programmer_error():
    with pytest.raises(TypeError):
        parse_cv(None)


@pytest.mark.integration
class TestInlineHeaders:
    """Headers written as "Label: content" keep their content."""

    def test_inline_skills(self):
        text = "Jane Doe\nSkills: Python, Go, SQL\nEDUCATION\nBSc Physics, Leeds, 2014"
        record = parse_cv(text)
        assert record.skills == ["Python", "Go", "SQL"]
        assert record.education == [
            EducationEntry(degree="BSc Physics", institution="Leeds", year="2014")
        ]

    def test_inline_summary(self):
        record = parse_cv("Jane Doe\nSummary: Backend engineer building APIs\nSKILLS\nPython")
        assert record.summary == "Backend engineer building APIs"
        assert record.skills == ["Python"]

    def test_inline_experience(self):
        text = (
            "Jane Doe\nExperience: Senior Engineer | Acme | Jan 2020 - Present\n"
            "• Led platform team\nSkills: Go"
        )
        record = parse_cv(text)
        assert record.experience == [
            ExperienceEntry(
                title="Senior Engineer",
                company="Acme",
                duration="Jan 2020 - Present",
                description="Led platform team",
            )
        ]
        assert record.skills == ["Go"]


@pytest.mark.integration
class TestKnownSkillsFallback:
    def test_used_without_skills_section(self):
        text = "Jane Doe\njane@x.com\nEXPERIENCE\nDeveloper\nUsed Python and Docker daily."
        assert parse_cv(text).skills == ["Python", "Docker"]

    def test_not_used_when_skills_section_is_empty(self, sample_cv):
        text = sample_cv.replace("Python, Go, PostgreSQL\n", "")
        assert parse_cv(text).skills == []

    def test_respects_skill_cap(self):
        text = "Jane\nPython Java SQL Docker Git"
        assert parse_cv(text, settings=ExtractionSettings(max_skills=2)).skills == [
            "Python",
            "Java",
        ]
