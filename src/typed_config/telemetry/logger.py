"""Structured logging configuration using structlog.

This module configures structlog with:
- Pretty-printed or JSON console output on stderr
- Optional rotating JSONL file output
- UTC timestamps
- Component tracking derived from the logger name

Loggers are built with ``structlog.wrap_logger`` and carry their own
processor chain, so the process-wide ``structlog.configure`` state belongs
to the host application and is never touched.
"""

from __future__ import annotations

import logging
import logging.handlers
import pathlib
import sys
from typing import Any

import structlog

_configured = False


def _get_log_level() -> str:
    """Get log level from the environment.

    Returns:
        Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    # Bootstrap from environment to avoid circular imports: settings log on load.
    from typed_config.config.bootstrap import get_bootstrap_log_level  # noqa: PLC0415

    return get_bootstrap_log_level()


def _get_log_format() -> str:
    """Get console log format ('json' or 'console') from the environment."""
    from typed_config.config.bootstrap import get_bootstrap_log_format  # noqa: PLC0415

    return get_bootstrap_log_format()


def _get_log_dir() -> pathlib.Path | None:
    """Get log directory path.

    Returns:
        Directory for the JSONL log file, or None when file logging is disabled.
    """
    from typed_config.config.bootstrap import get_bootstrap_log_dir  # noqa: PLC0415

    log_dir = get_bootstrap_log_dir()
    return pathlib.Path(log_dir) if log_dir else None


def _add_component_from_event_dict(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Add component name from the logger name structlog stored in event_dict.

    Runs after the add_logger_name processor, so "typed_config.service"
    becomes component "service".
    """
    logger_name = event_dict.get("logger", "")
    event_dict["component"] = logger_name.split(".")[-1] if logger_name else "unknown"
    return event_dict


def _processors() -> list[Any]:
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        _add_component_from_event_dict,
        structlog.processors.TimeStamper(fmt="iso", utc=True, key="timestamp"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def _configure_file_handler(log_dir: pathlib.Path) -> logging.handlers.RotatingFileHandler:
    """Configure rotating file handler for JSON logs.

    Args:
        log_dir: Directory for log files.

    Returns:
        Configured RotatingFileHandler writing ``typed_config.jsonl``.
    """
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        filename=str(log_dir / "typed_config.jsonl"),
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(processor=structlog.processors.JSONRenderer())
    )
    return handler


def _configure_console_handler(log_format: str) -> logging.StreamHandler[Any]:
    """Configure console handler.

    Args:
        log_format: 'console' for pretty-printed output, 'json' for one JSON object per line.

    Returns:
        Configured StreamHandler on stderr.
    """
    if log_format == "json":
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(processor=renderer))
    return handler


def configure_logging() -> None:
    """Attach handlers to the ``typed_config`` stdlib logger.

    Called once, lazily, by get_logger; calling it again rebuilds the
    handlers from the current environment. Neither the root logger nor the
    global structlog configuration is modified.
    """
    global _configured
    configured_level = getattr(logging, _get_log_level(), logging.INFO)

    package_logger = logging.getLogger("typed_config")
    package_logger.setLevel(logging.DEBUG)
    for handler in package_logger.handlers:
        handler.close()
    package_logger.handlers.clear()
    package_logger.propagate = False

    console_handler = _configure_console_handler(_get_log_format())
    console_handler.setLevel(configured_level)
    package_logger.addHandler(console_handler)

    log_dir = _get_log_dir()
    if log_dir is not None:
        # File handler keeps INFO+ regardless of console level
        file_handler = _configure_file_handler(log_dir)
        file_handler.setLevel(min(configured_level, logging.INFO))
        package_logger.addHandler(file_handler)

    _configured = True


def get_logger(name: str) -> Any:  # Returns structlog.stdlib.BoundLogger
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__ of the calling module).

    Returns:
        structlog logger bound to the stdlib logger of the same name.

    Example:
        >>> from typed_config.telemetry import get_logger
        >>> log = get_logger(__name__)
        >>> log.info("configuration_ingested", path="/srv/app/.env", keys=4)
    """
    if not _configured:
        configure_logging()

    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )
