"""
Unit tests for configuration.
"""

import pytest
from pydantic import ValidationError

from filmdev.config import (
    CalculatorSettings,
    ExportSettings,
    Settings,
    configure,
    get_settings,
)
from filmdev.core.types import ExportFormat


class TestCalculatorSettings:
    """Tests for CalculatorSettings."""

    def test_defaults(self):
        settings = CalculatorSettings()
        assert settings.standard_temperature_c == 20.0
        assert settings.default_temperature_c == 20.0
        assert settings.default_volume_ml == 500
        assert settings.max_volume_ml == 5000

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("FILMDEV_CALC_DEFAULT_VOLUME_ML", "300")
        assert CalculatorSettings().default_volume_ml == 300

    def test_push_pull_range(self):
        with pytest.raises(ValidationError):
            CalculatorSettings(default_push_pull=5)


class TestExportSettings:
    """Tests for ExportSettings."""

    def test_defaults(self):
        settings = ExportSettings()
        assert settings.default_format == ExportFormat.TEXT
        assert settings.csv_delimiter == ","
        assert settings.json_indent == 2

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("FILMDEV_EXPORT_DEFAULT_FORMAT", "json")
        assert ExportSettings().default_format == ExportFormat.JSON

    def test_unknown_format(self):
        with pytest.raises(ValidationError):
            ExportSettings(default_format="xml")


class TestSettings:
    """Tests for the main Settings."""

    def test_log_level_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(log_level="chatty")

    def test_exports_dir_relative_to_data_dir(self, tmp_path):
        settings = Settings(data_dir=tmp_path, exports_dir="exports")
        assert settings.exports_dir == tmp_path / "exports"


class TestGlobalSettings:
    """Tests for get_settings and configure."""

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_configure_with_overrides(self):
        settings = configure(debug=True)
        assert settings.debug is True
        assert get_settings() is settings

    def test_configure_with_instance(self):
        settings = Settings(app_name="Darkroom")
        assert configure(settings) is settings
        assert get_settings().app_name == "Darkroom"
