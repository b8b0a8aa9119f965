"""
Scoring Context

Responsibilities:
- Matches CV keywords against a job description
- Scores ATS friendliness and section coverage when no job description is given
- Derives insights, suggestions and a completeness score from a CVRecord
- Assembles the AnalysisReport returned at the web boundary

Owns: Scoring formulas, suggestion and insight wording
Never: Parses raw CV text itself (delegates to the intake context)
"""

from sieve.contexts.scoring.analysis import analyze_cv, top_keywords
from sieve.contexts.scoring.ats_scorer import (
    calculate_ats_score,
    general_suggestions,
    looks_like_cv,
    score_sections,
    section_suggestions,
)
from sieve.contexts.scoring.insights import calculate_completeness_score, generate_insights
from sieve.contexts.scoring.keyword_matcher import match_keywords
from sieve.contexts.scoring.score_data_structure import (
    AnalysisReport,
    Insight,
    InsightType,
    MatchResult,
    SectionPresence,
    SectionScore,
)

__all__ = [
    "AnalysisReport",
    "Insight",
    "InsightType",
    "MatchResult",
    "SectionPresence",
    "SectionScore",
    "analyze_cv",
    "calculate_ats_score",
    "calculate_completeness_score",
    "general_suggestions",
    "generate_insights",
    "looks_like_cv",
    "match_keywords",
    "score_sections",
    "section_suggestions",
    "top_keywords",
]
