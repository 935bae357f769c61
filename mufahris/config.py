"""
Configuration management for Mufahris library.

Settings are read from environment variables prefixed with ``MUFAHRIS_``
(or a ``.env`` file) and can be overridden at runtime with ``configure()``.

Example:
    export MUFAHRIS_MORPHOLOGY_PATH="data/quranic-corpus-morphology-0.4.txt"
    export MUFAHRIS_DEFAULT_WINDOW_DISTANCE=5
"""

from pathlib import Path
from typing import Any, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mufahris.exceptions import ConfigurationError


_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class MufahrisSettings(BaseSettings):
    """
    Runtime settings for Mufahris.

    Attributes:
        morphology_path: Default location of the morphology annotation file
        default_window_distance: Token radius used by distance windows
        default_min_frequency: Minimum co-occurrence count kept in results
        sample_limit: Number of sample lemmas/windows attached to a result
        log_level: Level used by ``configure_logging`` when set up from settings
    """

    model_config = SettingsConfigDict(
        env_prefix="MUFAHRIS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    morphology_path: Optional[Path] = Field(
        default=None,
        description="Path to the Quranic corpus morphology annotation file",
    )
    default_window_distance: int = Field(
        default=3,
        description="Default +/- token radius for distance windows",
        ge=0,
    )
    default_min_frequency: int = Field(
        default=1,
        description="Default minimum co-occurrence count for collocates",
        ge=1,
    )
    sample_limit: int = Field(
        default=8,
        description="Maximum sample lemmas and windows per collocation result",
        ge=0,
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level name",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level: {value}")
        return level


_settings: Optional[MufahrisSettings] = None


def get_settings() -> MufahrisSettings:
    """
    Get the active settings instance.

    Returns:
        MufahrisSettings built from the environment on first access,
        or the instance installed by ``configure()``

    Raises:
        ConfigurationError: If the environment holds invalid values
    """
    global _settings
    if _settings is None:
        try:
            _settings = MufahrisSettings()
        except ValidationError as e:
            raise ConfigurationError(f"Invalid environment configuration: {e}")
    return _settings


def configure(**overrides: Any) -> MufahrisSettings:
    """
    Replace the active settings with explicit overrides.

    Unspecified settings keep their environment/default values.

    Args:
        **overrides: Setting names and values

    Returns:
        The new active settings

    Raises:
        ConfigurationError: If a setting is unknown or invalid
    """
    global _settings
    unknown = set(overrides) - set(MufahrisSettings.model_fields)
    if unknown:
        name = sorted(unknown)[0]
        raise ConfigurationError(f"Unknown setting: {name}", setting_name=name)

    try:
        settings = MufahrisSettings(**overrides)
    except ValidationError as e:
        errors = e.errors()
        name = str(errors[0]["loc"][0]) if errors and errors[0]["loc"] else None
        raise ConfigurationError(f"Invalid setting value: {e}", setting_name=name)

    _settings = settings
    return settings


def reset_settings() -> None:
    """Drop any configured overrides and re-read the environment on next access."""
    global _settings
    _settings = None
