"""Unit tests for settings loading."""

import pytest

from sieve.utils.settings import (
    DEFAULT_SETTINGS,
    ExtractionSettings,
    SettingsError,
    load_settings,
)


@pytest.fixture(autouse=True)
def no_config_env(monkeypatch):
    monkeypatch.delenv("SIEVE_CONFIG_PATH", raising=False)


@pytest.mark.unit
class TestLoadSettings:
    def test_defaults(self):
        settings = load_settings()
        assert settings == DEFAULT_SETTINGS
        assert settings.max_input_chars == 200_000
        assert settings.max_experience_entries == 5
        assert settings.max_education_entries == 3
        assert settings.max_skills == 30
        assert settings.match_score_ceiling == 95

    def test_yaml_override(self, tmp_path):
        config = tmp_path / "sieve.yaml"
        config.write_text("max_skills: 10\nmax_input_chars: 5000\n")
        settings = load_settings(config)
        assert settings.max_skills == 10
        assert settings.max_input_chars == 5000
        assert settings.max_experience_entries == 5

    def test_env_var_path(self, tmp_path, monkeypatch):
        config = tmp_path / "env.yaml"
        config.write_text("max_education_entries: 1\n")
        monkeypatch.setenv("SIEVE_CONFIG_PATH", str(config))
        assert load_settings().max_education_entries == 1

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_settings(tmp_path / "absent.yaml")

    def test_unknown_key(self, tmp_path):
        config = tmp_path / "sieve.yaml"
        config.write_text("max_skillz: 10\n")
        with pytest.raises(SettingsError, match="max_skillz"):
            load_settings(config)

    @pytest.mark.parametrize("value", ["0", "-3", "true", "ten"])
    def test_invalid_values(self, tmp_path, value):
        config = tmp_path / "sieve.yaml"
        config.write_text(f"max_skills: {value}\n")
        with pytest.raises(SettingsError):
            load_settings(config)

    def test_non_mapping(self, tmp_path):
        config = tmp_path / "sieve.yaml"
        config.write_text("- max_skills\n- 10\n")
        with pytest.raises(SettingsError):
            load_settings(config)


@pytest.mark.unit
def test_settings_are_frozen():
    with pytest.raises(AttributeError):
        ExtractionSettings().max_skills = 3
