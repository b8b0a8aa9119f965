"""
Shared utilities for SIEVE.

Common functionality used across contexts:
- Text processing and tokenization
- Logger setup
- Settings loading
- Plain-text report formatting
"""

from sieve.utils.settings import DEFAULT_SETTINGS, ExtractionSettings, load_settings

__all__ = ["DEFAULT_SETTINGS", "ExtractionSettings", "load_settings"]
