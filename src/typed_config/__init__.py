"""Typed access to configuration ingested from an env file.

Example:
    >>> import typed_config
    >>> typed_config.ingest(".env")
    >>> config = typed_config.get_instance().get_all({"PORT": "number", "DEBUG": "boolean"})
"""

from typed_config.coercion import coerce
from typed_config.errors import (
    ConfigurationAlreadyIngestedError,
    ConfigurationError,
    ConfigurationFileError,
    ConfigurationFilePermissionError,
    ConfigurationNotIngestedError,
    InvalidNumberConfigurationError,
    MissingConfigurationError,
    MissingConfigurationFileError,
    UnknownConfigurationFileError,
    UnsupportedPrimitiveError,
)
from typed_config.service import (
    ConfigurationContext,
    ConfigurationService,
    get_default_context,
    get_instance,
    ingest,
)
from typed_config.types import (
    ConfigurationSchema,
    ConfigurationValue,
    IngestionState,
    Primitive,
    ResolvedConfiguration,
)

__version__ = "0.1.0"

__all__ = [
    # Accessor
    "ConfigurationContext",
    "ConfigurationService",
    "get_default_context",
    "get_instance",
    "ingest",
    "coerce",
    # Types
    "ConfigurationSchema",
    "ConfigurationValue",
    "IngestionState",
    "Primitive",
    "ResolvedConfiguration",
    # Exception classes
    "ConfigurationError",
    "ConfigurationAlreadyIngestedError",
    "ConfigurationNotIngestedError",
    "ConfigurationFileError",
    "MissingConfigurationFileError",
    "ConfigurationFilePermissionError",
    "UnknownConfigurationFileError",
    "MissingConfigurationError",
    "InvalidNumberConfigurationError",
    "UnsupportedPrimitiveError",
]
