"""
Keyword matching between a CV and a job description.

Both texts are reduced to ordered sets of Porter stems with stopwords and short
tokens removed. The score is the share of job-description stems the CV covers,
capped below 100 so a match is never reported as perfect.
"""

from typing import Optional

from sieve.contexts.scoring.logger import _log_debug, log_match_result
from sieve.contexts.scoring.score_data_structure import MatchResult
from sieve.utils.text_processing import round_half_up
from sieve.utils.token_processing import Tokenizer

LOW_MATCH_THRESHOLD = 30
GOOD_MATCH_THRESHOLD = 60

# Missing stems shorter than this are not reported
MIN_MISSING_KEYWORD_LENGTH = 4

SUGGESTED_KEYWORD_COUNT = 5

LOW_MATCH_SUGGESTION = (
    "Your CV has low keyword overlap with the job description. "
    "Consider adding more relevant technical skills and experience."
)
GOOD_MATCH_SUGGESTION = (
    "Good foundation, but you could improve keyword matching by incorporating "
    "more job-specific terms."
)
EXCELLENT_MATCH_SUGGESTION = (
    "Excellent keyword alignment! Your CV matches well with the job requirements."
)
MISSING_JOB_DESCRIPTION_SUGGESTION = "Upload a job description to get matching analysis"


def overlap_score(cv_stems: dict, jd_stems: dict, ceiling: int = 95) -> int:
    """
    Percentage of job-description stems present in the CV.

    Args:
        cv_stems: Ordered set of CV stems
        jd_stems: Ordered set of job-description stems
        ceiling: Highest score reported

    Returns:
        Integer score in [0, ceiling]; 0 when jd_stems is empty
    """
    if not jd_stems:
        return 0
    shared = sum(1 for stem in jd_stems if stem in cv_stems)
    return min(round_half_up(100 * shared / len(jd_stems)), ceiling)


def match_suggestions(score: int, missing_keywords: list[str]) -> list[str]:
    """Score-bucket advice plus up to five keywords to add."""
    if score < LOW_MATCH_THRESHOLD:
        suggestions = [LOW_MATCH_SUGGESTION]
    elif score < GOOD_MATCH_THRESHOLD:
        suggestions = [GOOD_MATCH_SUGGESTION]
    else:
        suggestions = [EXCELLENT_MATCH_SUGGESTION]

    if missing_keywords:
        keywords = ", ".join(missing_keywords[:SUGGESTED_KEYWORD_COUNT])
        suggestions.append(f"Consider adding these keywords: {keywords}")

    return suggestions


def match_keywords(
    cv_text: str,
    job_description: str,
    tokenizer: Optional[Tokenizer] = None,
    max_missing: int = 10,
    score_ceiling: int = 95,
) -> MatchResult:
    """
    Compare a CV against a job description.

    Args:
        cv_text: Plain résumé text
        job_description: Plain job description text
        tokenizer: Tokenizer to use (defaults to stemming + NLTK English stopwords)
        max_missing: Maximum number of missing keywords reported
        score_ceiling: Highest match score reported

    Returns:
        MatchResult. An empty or stopword-only job description yields score 0,
        no keywords and a prompt to supply one.

    Example:
        >>> result = match_keywords("Python developer", "Python SQL Docker")
        >>> result.match_score, result.missing_keywords
        (33, ['docker'])
    """
    tokenizer = tokenizer or Tokenizer()

    jd_stems = tokenizer.token_set(job_description)
    if not jd_stems:
        _log_debug("Job description has no keywords, skipping match")
        return MatchResult(suggestions=[MISSING_JOB_DESCRIPTION_SUGGESTION])

    cv_stems = tokenizer.token_set(cv_text)

    score = overlap_score(cv_stems, jd_stems, ceiling=score_ceiling)
    matching = [stem for stem in jd_stems if stem in cv_stems]
    missing = [
        stem
        for stem in jd_stems
        if stem not in cv_stems and len(stem) >= MIN_MISSING_KEYWORD_LENGTH
    ][:max_missing]

    result = MatchResult(
        match_score=score,
        matching_keywords=matching,
        missing_keywords=missing,
        suggestions=match_suggestions(score, missing),
    )
    log_match_result(result)
    return result
