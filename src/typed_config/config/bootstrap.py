"""Bootstrap configuration helpers (pre-settings).

The logger needs a level and a format before the Pydantic settings singleton
can be built, since building settings itself logs.

Constraints:
- Keep this module dependency-light (no telemetry imports) to avoid circular imports.
- Validate values using the shared config validators.
"""

from __future__ import annotations

import os

from typed_config.config.validators import validate_log_format, validate_log_level


def get_bootstrap_log_level(default: str = "INFO") -> str:
    """Get logging level from environment without importing settings.

    Args:
        default: Default log level if not set or invalid.

    Returns:
        Uppercased, validated log level string.
    """
    value = os.getenv("TYPED_CONFIG_LOG_LEVEL", default)
    try:
        return validate_log_level(value)
    except ValueError:
        return validate_log_level(default)


def get_bootstrap_log_format(default: str = "console") -> str:
    """Get console log format from environment without importing settings."""
    value = os.getenv("TYPED_CONFIG_LOG_FORMAT", default)
    try:
        return validate_log_format(value)
    except ValueError:
        return validate_log_format(default)


def get_bootstrap_log_dir() -> str | None:
    """Get the optional JSONL log directory, or None when file logging is off."""
    value = os.getenv("TYPED_CONFIG_LOG_DIR", "").strip()
    return value or None
