"""Semantic event constants for structured logging.

Log events use these constants rather than magic strings so that log
queries stay stable.
"""

# Ingestion events
INGEST_STARTED = "configuration_ingest_started"
INGESTED = "configuration_ingested"
INGEST_FAILED = "configuration_ingest_failed"
INGEST_REJECTED = "configuration_ingest_rejected"

# Accessor events
INSTANCE_CREATED = "configuration_instance_created"
CONFIGURATION_RESOLVED = "configuration_resolved"

# Settings events
SETTINGS_LOADED = "settings_loaded"
SETTINGS_LOAD_FAILED = "settings_load_failed"
