"""Logging setup for applications hosting the identity stores."""

import logging
import sys
from functools import lru_cache

from mongo_identity_config.settings import get_settings


@lru_cache(maxsize=1)
def configure_logging() -> None:
    """Configure logging for the identity stores.

    Sets up:
    - Console output with timestamps and module names
    - Configurable log level for mongo_identity modules (from settings)
    - WARNING level for the MongoDB driver
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("mongo_identity").setLevel(log_level)

    # Quiet down the driver
    logging.getLogger("pymongo").setLevel(logging.WARNING)
