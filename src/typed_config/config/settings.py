"""Library settings.

This module provides the TypedConfigSettings class and settings singleton.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from typed_config.config.validators import (
    resolve_path,
    validate_encoding,
    validate_log_format,
    validate_log_level,
)
from typed_config.telemetry import SETTINGS_LOAD_FAILED, SETTINGS_LOADED, get_logger

log = get_logger(__name__)


class TypedConfigSettings(BaseSettings):
    """Settings that control how typed_config itself behaves.

    Read from ``TYPED_CONFIG_*`` environment variables and validated with
    Pydantic. These never come from the ingested env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="TYPED_CONFIG_",
        case_sensitive=False,
        extra="ignore",
    )

    # Ingestion
    env_file: Path = Field(
        default=Path(".env"), description="Env file ingested when no path is given"
    )
    env_file_encoding: str = Field(default="utf-8", description="Encoding of the env file")
    override: bool = Field(
        default=False,
        description="Let values from the env file replace variables already set in the process",
    )

    # Telemetry
    log_level: str = Field(
        default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_format: str = Field(default="console", description="Console log format (json or console)")
    log_dir: Path | None = Field(
        default=None, description="Directory for the rotating JSONL log; unset disables it"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        return validate_log_level(v)

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format."""
        return validate_log_format(v)

    @field_validator("env_file_encoding")
    @classmethod
    def validate_env_file_encoding(cls, v: str) -> str:
        """Validate env file encoding."""
        return validate_encoding(v)

    @field_validator("log_dir", mode="before")
    @classmethod
    def resolve_log_dir(cls, v: Path | str | None) -> Path | None:
        """Resolve the log directory to an absolute path; empty means disabled."""
        if v is None or v == "":
            return None
        return resolve_path(v)


_settings: TypedConfigSettings | None = None


def load_settings() -> TypedConfigSettings:
    """Load and validate library settings from the environment.

    Returns:
        Validated TypedConfigSettings instance.

    Raises:
        ValidationError: If a TYPED_CONFIG_* variable holds an invalid value.
    """
    try:
        settings = TypedConfigSettings()
    except Exception as e:
        log.error(SETTINGS_LOAD_FAILED, error=str(e), error_type=type(e).__name__)
        raise

    log.debug(
        SETTINGS_LOADED,
        env_file=str(settings.env_file),
        override=settings.override,
        log_level=settings.log_level,
        log_format=settings.log_format,
    )
    return settings


def get_settings() -> TypedConfigSettings:
    """Get the library settings singleton.

    Returns:
        TypedConfigSettings instance (singleton pattern).
    """
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings
