"""Configuration for the MongoDB identity stores."""

from mongo_identity_config.log_config import configure_logging
from mongo_identity_config.settings import (
    MongoStoreOptions,
    Settings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "MongoStoreOptions",
    "Settings",
    "clear_settings_cache",
    "configure_logging",
    "get_settings",
]
