"""
Scoring context logger.

Provides logging interface for scoring context with automatic [score] prefix.
All scoring modules should import from this module, not from loguru directly.
"""

from pathlib import Path

from loguru import logger

from sieve.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[score]"


def setup_scoring_logger(log_dir: Path, mode: str = "ats") -> Path:
    """
    Setup logger for a scoring session.

    Args:
        log_dir: Directory for this scoring session
        mode: Scoring mode for provenance ("match" or "ats")

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="score",
        log_dir=log_dir,
        extra_provenance={"Mode": mode},
    )


# Wrapper functions with automatic [score] prefix


def _log_info(message: str) -> None:
    """Log info message with [score] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [score] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [score] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level scoring-specific logging helpers


def log_match_result(result) -> None:
    """
    Log a summary of a keyword match.

    Args:
        result: MatchResult returned by match_keywords()
    """
    _log_debug(
        f"Keyword match: score={result.match_score}, "
        f"matching={len(result.matching_keywords)}, missing={len(result.missing_keywords)}"
    )


def log_report_summary(report) -> None:
    """Log the headline numbers of an AnalysisReport at INFO."""
    _log_info(
        f"Analysis complete: match={report.match_score}, "
        f"completeness={report.completeness_score}, is_cv={report.is_cv}, "
        f"insights={len(report.insights)}"
    )
