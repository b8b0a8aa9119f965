"""
CV analysis orchestration.

Runs the full pipeline for one CV and assembles the AnalysisReport returned at
the web boundary:

    parse_cv -> match_keywords (job description given) | ATS score (none)
             -> insights, completeness, CV detection, section scores, top keywords
"""

from typing import Optional

from sieve.contexts.intake.cv_parser import parse_cv, prepare_text
from sieve.contexts.scoring.ats_scorer import (
    calculate_ats_score,
    general_suggestions,
    looks_like_cv,
    score_sections,
    section_suggestions,
)
from sieve.contexts.scoring.insights import calculate_completeness_score, generate_insights
from sieve.contexts.scoring.keyword_matcher import match_keywords
from sieve.contexts.scoring.logger import _log_debug, _log_warning, log_report_summary
from sieve.contexts.scoring.score_data_structure import AnalysisReport
from sieve.utils.settings import DEFAULT_SETTINGS, ExtractionSettings
from sieve.utils.token_processing import Tokenizer

TOP_KEYWORD_COUNT = 10


def top_keywords(
    text: str, tokenizer: Optional[Tokenizer] = None, n: int = TOP_KEYWORD_COUNT
) -> list[str]:
    """Most frequent keyword stems of text, ties in first-seen order."""
    tokenizer = tokenizer or Tokenizer()
    return tokenizer.most_common(text, n)


def analyze_cv(
    cv_text: str,
    job_description: str = "",
    settings: Optional[ExtractionSettings] = None,
    strict_size: bool = False,
    tokenizer: Optional[Tokenizer] = None,
) -> AnalysisReport:
    """
    Analyze one CV, optionally against a job description.

    With a non-blank job description the report carries the keyword match
    score, its suggestions and keywords. Without one it carries the ATS score
    and suggestions for missing fields and sections.

    Args:
        cv_text: Plain résumé text
        job_description: Plain job description text ("" for none)
        settings: Limits (defaults to DEFAULT_SETTINGS)
        strict_size: Refuse oversize CV text instead of truncating it
        tokenizer: Tokenizer shared by matching and top keywords

    Returns:
        AnalysisReport

    Raises:
        OversizeInputError: If strict_size and cv_text is over settings.max_input_chars
    """
    settings = settings or DEFAULT_SETTINGS
    tokenizer = tokenizer or Tokenizer()

    # Checked up front so strict mode refuses before any extraction runs
    text = prepare_text(cv_text, settings, strict=strict_size)
    record = parse_cv(text, settings)

    is_cv = looks_like_cv(text)
    if not is_cv:
        _log_warning("Text does not look like a CV")

    if (job_description or "").strip():
        _log_debug("Scoring against job description")
        match = match_keywords(
            text,
            job_description,
            tokenizer=tokenizer,
            max_missing=settings.max_missing_keywords,
            score_ceiling=settings.match_score_ceiling,
        )
        score = match.match_score
        suggestions = match.suggestions
        missing, matching = match.missing_keywords, match.matching_keywords
    else:
        _log_debug("No job description, using ATS score")
        match = None
        score = calculate_ats_score(text, ceiling=settings.ats_score_ceiling)
        suggestions = general_suggestions(record) + section_suggestions(text)
        missing, matching = [], []

    report = AnalysisReport(
        match_score=score,
        extracted_data=record,
        suggestions=suggestions,
        missing_keywords=missing,
        matching_keywords=matching,
        insights=generate_insights(record, match),
        completeness_score=calculate_completeness_score(record),
        is_cv=is_cv,
        section_scores=score_sections(text),
        top_keywords=top_keywords(text, tokenizer),
        has_job_description=match is not None,
    )
    log_report_summary(report)
    return report
