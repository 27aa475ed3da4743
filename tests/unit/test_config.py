"""
Unit tests for settings.
"""

import pytest

from organisationsnummer.config import Settings


class TestSettings:
    """Tests for pydantic-settings configuration."""

    def test_defaults(self):
        settings = Settings()
        assert settings.default_century == "20"
        assert settings.accepted_prefixes == ["16", "20"]
        assert settings.log_level == "INFO"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("ORGANISATIONSNUMMER_DEFAULT_CENTURY", "16")
        monkeypatch.setenv("ORGANISATIONSNUMMER_LOG_LEVEL", "debug")
        settings = Settings()
        assert settings.default_century == "16"
        assert settings.log_level == "DEBUG"

    def test_default_century_must_be_digits(self):
        with pytest.raises(ValueError):
            Settings(default_century="2O")

    def test_default_century_must_be_accepted(self):
        with pytest.raises(ValueError):
            Settings(default_century="19")

    def test_prefixes_must_be_two_digits(self):
        with pytest.raises(ValueError):
            Settings(accepted_prefixes=["16", "200"])
