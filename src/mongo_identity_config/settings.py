"""Store settings loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. MONGO_IDENTITY_ENV_FILE environment variable (path to .env file)
3. config/.env.dev - local development
4. config/.env - production/Docker

Uses pydantic-settings for automatic type coercion and validation.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

UuidRepresentationName = Literal[
    "standard", "python_legacy", "java_legacy", "csharp_legacy"
]


def _find_project_root() -> Path:
    """Find the project root directory."""
    current = Path(__file__).resolve().parent

    for parent in [current, *current.parents]:
        if (parent / "config").is_dir():
            return parent
        if (parent / ".git").is_dir():
            return parent

    return Path(__file__).resolve().parents[2]


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. MONGO_IDENTITY_ENV_FILE env var (full or project-relative path)
    2. config/.env.dev (local development)
    3. config/.env (production)
    """
    env_file_path = os.environ.get("MONGO_IDENTITY_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    config_dir = _find_project_root() / "config"

    dev_env = config_dir / ".env.dev"
    if dev_env.exists():
        return dev_env

    prod_env = config_dir / ".env"
    if prod_env.exists():
        return prod_env

    return None


class MongoStoreOptions(BaseModel):
    """Options handed to the store builder.

    Collection names default to the aggregate class name when unset. The
    UUID representation defaults to the connection's and must agree with it
    when given.
    """

    user_collection: str | None = None
    role_collection: str | None = None
    uuid_representation: UuidRepresentationName | None = None


class Settings(BaseSettings):
    """Store configuration loaded from environment variables.

    Values are loaded from:
    1. OS environment variables (highest priority)
    2. .env file (config/.env.dev or config/.env)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # MongoDB (MONGO_ prefix)
    mongo_connection_string: SecretStr = SecretStr("mongodb://localhost:27017")
    mongo_database: str = "identity"
    mongo_user_collection: str | None = None
    mongo_role_collection: str | None = None
    mongo_uuid_representation: UuidRepresentationName = "standard"

    # Logging (LOG_ prefix)
    log_level: str = "INFO"

    @property
    def store_options(self) -> MongoStoreOptions:
        return MongoStoreOptions(
            user_collection=self.mongo_user_collection,
            role_collection=self.mongo_role_collection,
            uuid_representation=self.mongo_uuid_representation,
        )


@lru_cache()
def get_settings() -> Settings:
    """Return cached store settings."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
