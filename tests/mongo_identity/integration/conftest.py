"""
Pytest configuration for mongo_identity integration tests.

Integration tests use Testcontainers for an ephemeral MongoDB instance.
Import the shared fixtures to make them available.
"""

# Re-export shared database fixtures
from tests.shared.fixtures.database import mongo_connection, mongo_container

__all__ = [
    "mongo_connection",
    "mongo_container",
]
