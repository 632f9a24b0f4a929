"""Telemetry module for structured logging.

This module provides:
- Structured logging via structlog
- Semantic event constants
"""

from typed_config.telemetry.events import (
    CONFIGURATION_RESOLVED,
    INGEST_FAILED,
    INGEST_REJECTED,
    INGEST_STARTED,
    INGESTED,
    INSTANCE_CREATED,
    SETTINGS_LOAD_FAILED,
    SETTINGS_LOADED,
)
from typed_config.telemetry.logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    # Event constants
    "INGEST_STARTED",
    "INGESTED",
    "INGEST_FAILED",
    "INGEST_REJECTED",
    "INSTANCE_CREATED",
    "CONFIGURATION_RESOLVED",
    "SETTINGS_LOADED",
    "SETTINGS_LOAD_FAILED",
]
