"""
Settings for the film development calculator.

Every value can be set from the environment or a .env file. The top-level
settings read FILMDEV_*, and each group has its own prefix
(FILMDEV_CALC_*, FILMDEV_DB_*, FILMDEV_EXPORT_*).
"""

from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from filmdev.core.types import ExportFormat

load_dotenv()


class CalculatorSettings(BaseSettings):
    """Settings for development calculations."""

    model_config = SettingsConfigDict(env_prefix="FILMDEV_CALC_")

    # Reference temperature of the process data (multiplier 1.0)
    standard_temperature_c: float = Field(default=20.0, ge=15.0, le=30.0)

    # Request defaults
    default_temperature_c: float = Field(default=20.0, ge=0.0, le=50.0)
    default_volume_ml: int = Field(default=500, gt=0)
    default_push_pull: int = Field(default=0, ge=-2, le=3)

    # Largest tank volume accepted from the command line
    max_volume_ml: int = Field(default=5000, gt=0, le=100000)


class DatabaseSettings(BaseSettings):
    """Settings for reference data loading."""

    model_config = SettingsConfigDict(env_prefix="FILMDEV_DB_")

    path: Optional[Path] = Field(
        default=None,
        description="JSON reference document (bundled data is used when unset)",
    )


class ExportSettings(BaseSettings):
    """Settings for result export."""

    model_config = SettingsConfigDict(env_prefix="FILMDEV_EXPORT_")

    default_format: ExportFormat = Field(default=ExportFormat.TEXT)
    csv_delimiter: str = Field(default=",", min_length=1, max_length=1)
    json_indent: int = Field(default=2, ge=0, le=8)


_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})
_DEFAULT_DATA_DIR = Path.home() / ".filmdev"


class Settings(BaseSettings):
    """Application settings with the calculator, database and export groups."""

    model_config = SettingsConfigDict(
        env_prefix="FILMDEV_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field(default="Film Development Calculator")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # Relative exports_dir values live under data_dir
    data_dir: Path = Field(default=_DEFAULT_DATA_DIR)
    exports_dir: Optional[Path] = Field(default=None)

    calculator: CalculatorSettings = Field(default_factory=CalculatorSettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    export: ExportSettings = Field(default_factory=ExportSettings)

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("exports_dir", mode="before")
    @classmethod
    def anchor_exports_dir(cls, v: Any, info: ValidationInfo) -> Optional[Path]:
        if v is None:
            return None
        exports_dir = Path(v)
        if exports_dir.is_absolute():
            return exports_dir
        return Path(info.data.get("data_dir", _DEFAULT_DATA_DIR)) / exports_dir


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Process-wide settings, read from the environment on first use."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def configure(settings: Optional[Settings] = None, **overrides: Any) -> Settings:
    """Replace the process-wide settings.

    Args:
        settings: Use this instance as is.
        **overrides: Otherwise build a new Settings from these values
            (environment values fill the rest).

    Returns:
        The settings now returned by get_settings().
    """
    global _settings
    _settings = settings if settings is not None else Settings(**overrides)
    return _settings
