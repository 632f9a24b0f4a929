"""Exceptions raised by typed_config.

Every exception derives from ConfigurationError so callers can catch the
whole family at once, and each carries the offending path, key, value or
primitive as attributes for diagnostics.
"""

from pathlib import Path
from typing import Any


class ConfigurationError(Exception):
    """Base exception for configuration ingestion and access errors."""

    pass


class ConfigurationAlreadyIngestedError(ConfigurationError):
    """Raised when ingest is called after a successful ingestion."""

    def __init__(self, path: str | Path) -> None:
        self.path = str(path)
        super().__init__(
            "Configuration has already been ingested. "
            f"Duplicate call attempted with path: {self.path}."
        )


class ConfigurationNotIngestedError(ConfigurationError):
    """Raised when the accessor is requested before ingestion."""

    def __init__(self) -> None:
        super().__init__("Cannot obtain configuration instance before ingestion.")


class ConfigurationFileError(ConfigurationError):
    """Base exception for failures reading or parsing the env file."""

    def __init__(self, path: str | Path, message: str) -> None:
        self.path = str(path)
        super().__init__(message)


class MissingConfigurationFileError(ConfigurationFileError):
    """Raised when no file exists at the ingestion path."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(path, f"Configuration file was not found at path: {path}.")


class ConfigurationFilePermissionError(ConfigurationFileError):
    """Raised when the env file exists but cannot be read."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.reason = reason
        super().__init__(
            path,
            "Insufficient permissions to read configuration file at path: "
            f"{path}, message: {reason}.",
        )


class UnknownConfigurationFileError(ConfigurationFileError):
    """Raised for any other failure while loading the env file."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.reason = reason
        super().__init__(
            path,
            "An unknown error occurred while loading the configuration file at path: "
            f"{path}, message: {reason}.",
        )


class MissingConfigurationError(ConfigurationError):
    """Raised when a required key is absent from the environment."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Missing required configuration: '{key}'.")


class InvalidNumberConfigurationError(ConfigurationError):
    """Raised when a value declared as a number is not a finite number."""

    def __init__(self, key: str, value: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid number value '{value}' for configuration key '{key}'.")


class UnsupportedPrimitiveError(ConfigurationError):
    """Raised when a schema declares a primitive outside string, number and boolean."""

    def __init__(self, key: str, primitive: Any) -> None:
        self.key = key
        self.primitive = primitive
        super().__init__(
            f"Unsupported primitive type '{primitive}' for configuration key '{key}'."
        )
