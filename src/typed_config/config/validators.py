"""Custom Pydantic validators for library settings.

This module provides validators shared by the settings model and the
bootstrap helpers that run before settings exist.
"""

from pathlib import Path


def validate_log_level(value: str) -> str:
    """Validate log level is one of the standard levels.

    Args:
        value: Log level string.

    Returns:
        Validated, uppercased log level.

    Raises:
        ValueError: If log level is not valid.
    """
    valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
    if value.upper() not in valid_levels:
        raise ValueError(f"log_level must be one of {valid_levels}, got {value}")
    return value.upper()


def validate_log_format(value: str) -> str:
    """Validate log format is 'json' or 'console'.

    Args:
        value: Log format string.

    Returns:
        Validated, lowercased log format.

    Raises:
        ValueError: If log format is not valid.
    """
    valid_formats = {"json", "console"}
    if value.lower() not in valid_formats:
        raise ValueError(f"log_format must be one of {valid_formats}, got {value}")
    return value.lower()


def validate_encoding(value: str) -> str:
    """Validate that a text encoding name is known to the codec registry.

    Args:
        value: Encoding name, e.g. ``utf-8`` or ``latin-1``.

    Returns:
        The encoding name unchanged.

    Raises:
        ValueError: If Python has no codec registered under that name.
    """
    import codecs  # noqa: PLC0415

    try:
        codecs.lookup(value)
    except LookupError:
        raise ValueError(f"env_file_encoding is not a known codec: {value}") from None
    return value


def resolve_path(value: Path | str) -> Path:
    """Resolve a path against the current working directory.

    Env files are looked up relative to where the process was started,
    matching how python-dotenv treats relative paths.

    Args:
        value: Path value (can be string or Path).

    Returns:
        Absolute Path object.
    """
    path = Path(value) if isinstance(value, str) else value
    return path.expanduser().resolve()
