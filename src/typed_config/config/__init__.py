"""Settings for typed_config itself.

These control ingestion defaults and logging, and are read from
``TYPED_CONFIG_*`` environment variables.
"""

from typed_config.config.settings import TypedConfigSettings, get_settings, load_settings

__all__ = [
    "TypedConfigSettings",
    "get_settings",
    "load_settings",
]
