"""
Intake context logger.

Provides logging interface for intake context with automatic [intake] prefix.
All intake modules should import from this module, not from loguru directly.
"""

from pathlib import Path

from loguru import logger

from sieve.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[intake]"


def setup_intake_logger(log_dir: Path) -> Path:
    """
    Setup logger for an intake session.

    Args:
        log_dir: Directory for this session

    Returns:
        Path to log file
    """
    return _setup_logger(context_name="intake", log_dir=log_dir)


# Wrapper functions with automatic [intake] prefix


def _log_warning(message: str) -> None:
    """Log warning message with [intake] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level intake-specific logging helpers


def log_section_hits(sections: dict[str, str]) -> None:
    """Log which standard sections were located and how many lines each holds."""
    for name, body in sections.items():
        if body:
            line_count = sum(1 for line in body.split("\n") if line.strip())
            _log_debug(f"Section '{name}': {line_count} non-empty lines")
        else:
            _log_debug(f"Section '{name}': not found")


def log_parse_result(record) -> None:
    """
    Log a one-line summary of a parsed CV.

    Args:
        record: CVRecord returned by parse_cv()
    """
    info = record.personal_info
    contact = [field for field in ("name", "email", "phone", "linkedin") if getattr(info, field)]
    _log_debug(
        f"Parsed CV: contact={contact or 'none'}, skills={len(record.skills)}, "
        f"experience={len(record.experience)}, education={len(record.education)}, "
        f"summary={len(record.summary)} chars"
    )
