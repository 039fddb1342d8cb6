"""Shared MongoDB connection.

One ``MongoConnection`` is created per process and shared by every store.
Stores only hold collection handles; closing the connection is the
application's job.
"""

import logging

from bson.binary import UuidRepresentation
from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase

from mongo_identity.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

UUID_REPRESENTATIONS: dict[str, int] = {
    "standard": UuidRepresentation.STANDARD,
    "python_legacy": UuidRepresentation.PYTHON_LEGACY,
    "java_legacy": UuidRepresentation.JAVA_LEGACY,
    "csharp_legacy": UuidRepresentation.CSHARP_LEGACY,
}

# Names accepted by the client's ``uuidRepresentation`` option.
_CLIENT_UUID_OPTIONS: dict[str, str] = {
    "standard": "standard",
    "python_legacy": "pythonLegacy",
    "java_legacy": "javaLegacy",
    "csharp_legacy": "csharpLegacy",
}


def resolve_uuid_representation(name: str) -> int:
    """Map a configured representation name to the BSON constant.

    Raises
    ------
    ConfigurationError
        If the name is not one of ``UUID_REPRESENTATIONS``
    """
    try:
        return UUID_REPRESENTATIONS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown UUID representation: {name}",
            details={"allowed": sorted(UUID_REPRESENTATIONS)},
        ) from None


class MongoConnection:
    """Async MongoDB client bound to one database."""

    def __init__(
        self,
        client: AsyncMongoClient,
        database_name: str,
        uuid_representation: str = "standard",
    ) -> None:
        self._client = client
        self._database_name = database_name
        self.uuid_representation_name = uuid_representation
        self.uuid_representation = resolve_uuid_representation(uuid_representation)

    @classmethod
    def connect(
        cls,
        connection_string: str,
        database_name: str,
        uuid_representation: str = "standard",
    ) -> "MongoConnection":
        """
        Create the client for ``connection_string``.

        The driver connects lazily; no I/O happens here.

        Parameters
        ----------
        connection_string
            MongoDB connection URI
        database_name
            Database holding the identity collections
        uuid_representation
            How UUID keys are encoded, one of ``UUID_REPRESENTATIONS``

        Returns
        -------
        MongoConnection for the database
        """
        resolve_uuid_representation(uuid_representation)
        client: AsyncMongoClient = AsyncMongoClient(
            connection_string,
            uuidRepresentation=_CLIENT_UUID_OPTIONS[uuid_representation],
            tz_aware=True,
        )
        logger.info(
            "Created MongoDB client for database '%s' (uuid representation: %s)",
            database_name,
            uuid_representation,
        )
        return cls(client, database_name, uuid_representation)

    @property
    def database_name(self) -> str:
        return self._database_name

    def get_database(self) -> AsyncDatabase:
        return self._client.get_database(self._database_name)

    def get_collection(self, name: str) -> AsyncCollection:
        return self.get_database().get_collection(name)

    async def close(self) -> None:
        await self._client.close()
        logger.info("Closed MongoDB client for database '%s'", self._database_name)
