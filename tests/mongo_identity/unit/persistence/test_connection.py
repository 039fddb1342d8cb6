"""Unit tests for MongoConnection."""

import pytest
from bson.binary import UuidRepresentation

from mongo_identity import ConfigurationError, MongoConnection
from mongo_identity.infrastructure.persistence.mongo import UUID_REPRESENTATIONS
from tests.shared.fixtures.mongo import InMemoryMongoClient


class TestMongoConnection:
    """Tests for the shared connection wrapper."""

    def test_collections_come_from_the_configured_database(self):
        client = InMemoryMongoClient()
        connection = MongoConnection(client, "identity_test")

        collection = connection.get_collection("users")

        assert collection is client.get_database("identity_test").get_collection("users")
        assert connection.database_name == "identity_test"

    def test_uuid_representation(self):
        connection = MongoConnection(InMemoryMongoClient(), "db", "csharp_legacy")

        assert connection.uuid_representation == UuidRepresentation.CSHARP_LEGACY
        assert set(UUID_REPRESENTATIONS) == {
            "standard",
            "python_legacy",
            "java_legacy",
            "csharp_legacy",
        }

    def test_unknown_uuid_representation(self):
        with pytest.raises(ConfigurationError):
            MongoConnection(InMemoryMongoClient(), "db", "unspecified")

    @pytest.mark.asyncio
    async def test_connect_is_lazy(self):
        """Creating the client does not contact the server."""
        connection = MongoConnection.connect(
            "mongodb://localhost:1", "identity_test", "java_legacy"
        )

        assert connection.get_database().name == "identity_test"
        assert connection.uuid_representation == UuidRepresentation.JAVA_LEGACY

        await connection.close()

    @pytest.mark.asyncio
    async def test_close(self):
        client = InMemoryMongoClient()

        await MongoConnection(client, "db").close()

        assert client.closed is True
