"""Unit tests for clparse.core.config module.

Tests cover:
- Settings defaults
- Environment overrides
- Validation of the default value separator
"""

import pytest
from pydantic import ValidationError

from clparse.core.config import Settings


@pytest.mark.unit
class TestSettings:
    """Test suite for Settings configuration."""

    @pytest.fixture(autouse=True)
    def _clean_env(self, monkeypatch):
        for name in (
            "CLPARSE_PREFIX",
            "CLPARSE_LOG_LEVEL",
            "CLPARSE_DEFAULT_VALUE_SEPARATOR",
            "CLPARSE_TRUE_VALUES",
            "CLPARSE_FALSE_VALUES",
        ):
            monkeypatch.delenv(name, raising=False)

    def test_settings_defaults(self):
        """Test Settings uses correct default values."""
        settings = Settings(_env_file=None)

        assert settings.PREFIX == ""
        assert settings.LOG_LEVEL == "INFO"
        assert settings.DEFAULT_VALUE_SEPARATOR == ","
        assert "true" in settings.TRUE_VALUES
        assert "false" in settings.FALSE_VALUES
        assert settings.is_production is True

    def test_settings_custom_values(self, monkeypatch):
        """Test Settings reads the environment."""
        monkeypatch.setenv("CLPARSE_PREFIX", "dev-")
        monkeypatch.setenv("CLPARSE_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("CLPARSE_DEFAULT_VALUE_SEPARATOR", ";")
        monkeypatch.setenv("CLPARSE_TRUE_VALUES", '["Y", "ja"]')

        settings = Settings(_env_file=None)

        assert settings.PREFIX == "dev-"
        assert settings.is_production is False
        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.DEFAULT_VALUE_SEPARATOR == ";"
        assert settings.TRUE_VALUES == ["y", "ja"]

    def test_settings_by_field_name(self):
        """Fields can be set by name as well as by alias."""
        settings = Settings(_env_file=None, LOG_LEVEL="WARNING")

        assert settings.LOG_LEVEL == "WARNING"

    @pytest.mark.parametrize("separator", ["", ";;"])
    def test_invalid_separator(self, monkeypatch, separator):
        """The default separator must be exactly one character."""
        monkeypatch.setenv("CLPARSE_DEFAULT_VALUE_SEPARATOR", separator)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
