"""
Result data structures for the Scoring context.

Every record serializes with to_dict() to the camelCase JSON shape returned at
the web boundary. Lists are always lists and scores always ints.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from sieve.contexts.intake.cv_data_structure import CVRecord


@dataclass(frozen=True)
class MatchResult:
    """Keyword overlap between a CV and a job description."""

    match_score: int = 0
    matching_keywords: list[str] = field(default_factory=list)
    missing_keywords: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "matchScore": self.match_score,
            "matchingKeywords": list(self.matching_keywords),
            "missingKeywords": list(self.missing_keywords),
            "suggestions": list(self.suggestions),
        }


class InsightType(str, Enum):
    """Severity of an insight, as shown by the UI."""

    WARNING = "warning"
    SUGGESTION = "suggestion"
    CRITICAL = "critical"
    IMPROVEMENT = "improvement"


@dataclass(frozen=True)
class Insight:
    type: InsightType
    title: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"type": self.type.value, "title": self.title, "message": self.message}


@dataclass(frozen=True)
class SectionPresence:
    """One row of section-presence scoring."""

    present: bool
    score: int
    weight: int

    def to_dict(self) -> dict[str, Any]:
        return {"present": self.present, "score": self.score, "weight": self.weight}


@dataclass(frozen=True)
class SectionScore:
    """
    Section-presence score of a CV.

    total_score sums the weights of sections whose keywords appear anywhere in
    the text; max_possible_score sums all weights.
    """

    total_score: int
    max_possible_score: int
    sections: dict[str, SectionPresence] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalScore": self.total_score,
            "maxPossibleScore": self.max_possible_score,
            "sections": {name: row.to_dict() for name, row in self.sections.items()},
        }


@dataclass(frozen=True)
class AnalysisReport:
    """
    Everything the web layer returns for one analyzed CV.

    match_score is the keyword match score when a job description was given,
    otherwise the ATS score.
    """

    match_score: int
    extracted_data: CVRecord
    suggestions: list[str] = field(default_factory=list)
    missing_keywords: list[str] = field(default_factory=list)
    matching_keywords: list[str] = field(default_factory=list)
    insights: list[Insight] = field(default_factory=list)
    completeness_score: int = 0
    is_cv: bool = False
    section_scores: SectionScore = field(
        default_factory=lambda: SectionScore(total_score=0, max_possible_score=0)
    )
    top_keywords: list[str] = field(default_factory=list)
    has_job_description: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON boundary shape."""
        return {
            "matchScore": self.match_score,
            "extractedData": self.extracted_data.to_dict(),
            "suggestions": list(self.suggestions),
            "missingKeywords": list(self.missing_keywords),
            "matchingKeywords": list(self.matching_keywords),
            "insights": [insight.to_dict() for insight in self.insights],
            "completenessScore": self.completeness_score,
            "isCV": self.is_cv,
            "sectionScores": self.section_scores.to_dict(),
            "topKeywords": list(self.top_keywords),
        }
