"""
CV data structures for the Intake context.

Provides the records produced by the CV parser. These are the single contract
consumed by scoring, by the web layer (as JSON) and by any external PDF
renderer.

Absence is always an empty string or an empty list, never None, so consumers
can substitute placeholders uniformly. Records are frozen: a CVRecord is built
once per parse and never mutated. A user-edited copy coming back from the UI is
a new record built with CVRecord.from_dict().
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class PersonalInfo:
    """Contact details. location is not extracted and stays empty."""

    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "location": self.location,
            "linkedin": self.linkedin,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PersonalInfo":
        return cls(**{key: _as_str(data.get(key)) for key in cls.__dataclass_fields__})


@dataclass(frozen=True)
class ExperienceEntry:
    """One job. duration is the raw date-range text, e.g. "Jan 2020 - Present"."""

    title: str = ""
    company: str = ""
    duration: str = ""
    description: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "title": self.title,
            "company": self.company,
            "duration": self.duration,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ExperienceEntry":
        return cls(**{key: _as_str(data.get(key)) for key in cls.__dataclass_fields__})


@dataclass(frozen=True)
class EducationEntry:
    """One qualification. year is a 4-digit string or empty."""

    degree: str = ""
    institution: str = ""
    year: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"degree": self.degree, "institution": self.institution, "year": self.year}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EducationEntry":
        return cls(**{key: _as_str(data.get(key)) for key in cls.__dataclass_fields__})


@dataclass(frozen=True)
class CVRecord:
    """
    Structured résumé produced by parse_cv().

    Serializes to the camelCase JSON shape used at the web boundary:
    personalInfo, summary, experience[], skills[], education[].
    """

    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    summary: str = ""
    experience: list[ExperienceEntry] = field(default_factory=list)
    skills: list[str] = field(default_factory=list)
    education: list[EducationEntry] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """True when nothing at all could be extracted."""
        return self == CVRecord()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON boundary shape."""
        return {
            "personalInfo": self.personal_info.to_dict(),
            "summary": self.summary,
            "experience": [entry.to_dict() for entry in self.experience],
            "skills": list(self.skills),
            "education": [entry.to_dict() for entry in self.education],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CVRecord":
        """
        Build a record from the JSON boundary shape.

        Missing keys and nulls become empty values, so a partially filled form
        from the UI still yields a well-typed record.

        Args:
            data: Dict with personalInfo/summary/experience/skills/education keys

        Returns:
            CVRecord instance
        """
        return cls(
            personal_info=PersonalInfo.from_dict(data.get("personalInfo") or {}),
            summary=_as_str(data.get("summary")),
            experience=[ExperienceEntry.from_dict(e) for e in data.get("experience") or []],
            skills=[str(s) for s in data.get("skills") or [] if s],
            education=[EducationEntry.from_dict(e) for e in data.get("education") or []],
        )


def _as_str(value: Any) -> str:
    """Coerce a JSON value to str, mapping None to ""."""
    return "" if value is None else str(value)
