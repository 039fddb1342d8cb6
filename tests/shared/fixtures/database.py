"""
Testcontainers-based MongoDB fixtures for integration tests.

Provides an ephemeral MongoDB instance for the test session and a fresh
database per test.

Usage:
    # In your test file or conftest.py
    from tests.shared.fixtures.database import mongo_connection

    async def test_something(mongo_connection):
        store = MongoUserStore(mongo_connection.get_collection("users"), ...)
"""

from uuid import uuid4

import pytest
import pytest_asyncio
from testcontainers.mongodb import MongoDbContainer

from mongo_identity import MongoConnection

MONGO_IMAGE = "mongo:7"


@pytest.fixture(scope="session")
def mongo_container():
    """
    Start a MongoDB container for the test session.

    The container is shared across all tests in the session for performance.
    Each test gets its own database, dropped afterwards.
    """
    with MongoDbContainer(MONGO_IMAGE) as mongo:
        yield mongo


@pytest_asyncio.fixture
async def mongo_connection(mongo_container):
    """Connection to a uniquely named database on the test container."""
    database_name = f"identity_test_{uuid4().hex[:12]}"
    connection = MongoConnection.connect(
        mongo_container.get_connection_url(), database_name
    )

    yield connection

    await connection.get_database().client.drop_database(database_name)
    await connection.close()
