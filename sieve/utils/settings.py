"""
Extraction and scoring limits.

Defaults live in the ExtractionSettings dataclass. A YAML file can override any
subset of them, either passed explicitly or pointed to by SIEVE_CONFIG_PATH:

    # sieve.yaml
    max_input_chars: 100000
    max_skills: 20

Vocabularies (section names, stopwords, ATS keywords) are not settings. They are
immutable constants in the pattern modules and are overridden per call instead.
"""

import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()


class SettingsError(ValueError):
    """Raised when a settings file has unknown keys or invalid values."""


@dataclass(frozen=True)
class ExtractionSettings:
    """Caps and ceilings applied by the intake and scoring contexts."""

    # Texts longer than this are truncated (or refused in strict mode)
    max_input_chars: int = 200_000

    max_experience_entries: int = 5
    max_education_entries: int = 3
    max_skills: int = 30
    max_missing_keywords: int = 10

    # Keyword overlap never reports a perfect match
    match_score_ceiling: int = 95
    ats_score_ceiling: int = 90


DEFAULT_SETTINGS = ExtractionSettings()


def load_settings(config_path: Optional[Path] = None) -> ExtractionSettings:
    """
    Load settings, merging a YAML override file over the defaults.

    Args:
        config_path: Optional YAML file. Falls back to the SIEVE_CONFIG_PATH
            environment variable, then to pure defaults.

    Returns:
        ExtractionSettings instance

    Raises:
        SettingsError: If the file has unknown keys or a non-positive limit
        FileNotFoundError: If the configured file does not exist
    """
    if config_path is None:
        env_path = os.getenv("SIEVE_CONFIG_PATH")
        if not env_path:
            return DEFAULT_SETTINGS
        config_path = Path(env_path)

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Settings file not found: {config_path}")

    overrides = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True) or {}
    if not isinstance(overrides, dict):
        raise SettingsError(f"Settings file must contain a mapping: {config_path}")

    known = {f.name for f in fields(ExtractionSettings)}
    unknown = set(overrides) - known
    if unknown:
        raise SettingsError(
            f"Unknown settings in {config_path}: {', '.join(sorted(unknown))}. "
            f"Valid settings are: {', '.join(sorted(known))}"
        )

    merged = OmegaConf.merge(OmegaConf.create(asdict(DEFAULT_SETTINGS)), overrides)
    values = OmegaConf.to_container(merged, resolve=True)

    for name, value in values.items():
        if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
            raise SettingsError(f"Setting '{name}' must be a positive integer, got: {value!r}")

    return ExtractionSettings(**values)
