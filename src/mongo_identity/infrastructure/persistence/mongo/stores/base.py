"""Behaviour shared by the MongoDB user and role stores."""

import logging
from typing import Any

from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from mongo_identity.cancellation import CancellationToken
from mongo_identity.exceptions import (
    ErrorCode,
    InvalidArgumentError,
    PersistenceError,
    StoreDisposedError,
)
from mongo_identity.infrastructure.persistence.mongo.key_codecs import KeyCodec
from mongo_identity.schemas import IdentityError, IdentityResult

logger = logging.getLogger(__name__)


class MongoStoreBase:
    """
    Collection access and the write policy common to all stores.

    Writes follow two tiers: ``create`` raises when the insert is not
    acknowledged, while ``update`` and ``delete`` report failures as a
    failed ``IdentityResult``. Targeted field updates let driver errors
    propagate.
    """

    def __init__(self, collection: AsyncCollection, key_codec: KeyCodec) -> None:
        self._collection = collection
        self._key_codec = key_codec
        self._disposed = False

    @property
    def collection(self) -> AsyncCollection:
        return self._collection

    @property
    def key_codec(self) -> KeyCodec:
        return self._key_codec

    def close(self) -> None:
        self._disposed = True

    def _guard(
        self,
        cancellation_token: CancellationToken | None,
        **required: Any,
    ) -> None:
        """Entry checks run by every operation before any database call.

        Raises
        ------
        OperationCancelledError
            If the token is cancelled or past its deadline
        StoreDisposedError
            If ``close()`` has been called
        InvalidArgumentError
            If any of ``required`` is None
        """
        if cancellation_token is not None:
            cancellation_token.raise_if_cancellation_requested()
        if self._disposed:
            raise StoreDisposedError(type(self).__name__)
        for name, value in required.items():
            if value is None:
                raise InvalidArgumentError(name)

    @staticmethod
    def _require_id(entity: Any, argument: str) -> None:
        if entity.id is None:
            raise InvalidArgumentError(argument, f"{type(entity).__name__} has no id")

    def _id_filter(self, key: Any) -> dict[str, Any]:
        return {"_id": self._key_codec.to_bson(key)}

    async def _insert(self, document: dict[str, Any], key: Any) -> IdentityResult:
        try:
            result = await self._collection.insert_one(document)
        except PyMongoError as e:
            raise PersistenceError(
                f"Failed to insert {key} into {self._collection.name}: {e}",
                details={"id": str(key)},
            ) from e

        if not result.acknowledged:
            raise PersistenceError(
                f"Insert of {key} into {self._collection.name} was not acknowledged",
                details={"id": str(key)},
            )

        logger.debug("Inserted %s into %s", key, self._collection.name)
        return IdentityResult.success()

    async def _replace(self, document: dict[str, Any], key: Any) -> IdentityResult:
        try:
            result = await self._collection.replace_one(self._id_filter(key), document)
        except PyMongoError as e:
            logger.warning("Replace of %s in %s failed: %s", key, self._collection.name, e)
            return IdentityResult.failed(
                IdentityError(ErrorCode.UPDATE_ERROR.value, str(e))
            )

        if not result.acknowledged:
            return IdentityResult.failed(
                IdentityError(
                    ErrorCode.UPDATE_ERROR.value,
                    f"Update of {key} was not acknowledged",
                )
            )

        logger.debug(
            "Replaced %s in %s (matched: %d)",
            key,
            self._collection.name,
            result.matched_count,
        )
        return IdentityResult.success()

    async def _delete(self, key: Any) -> IdentityResult:
        try:
            result = await self._collection.delete_one(self._id_filter(key))
        except PyMongoError as e:
            logger.warning("Delete of %s in %s failed: %s", key, self._collection.name, e)
            return IdentityResult.failed(
                IdentityError(ErrorCode.DELETE_ERROR.value, str(e))
            )

        if not result.acknowledged:
            return IdentityResult.failed(
                IdentityError(
                    ErrorCode.DELETE_ERROR.value,
                    f"Delete of {key} was not acknowledged",
                )
            )

        logger.debug("Deleted %s from %s", key, self._collection.name)
        return IdentityResult.success()

    async def _set_field(self, key: Any, field: str, value: Any) -> None:
        """Persist a single field of one document with ``$set``."""
        await self._collection.update_one(
            self._id_filter(key), {"$set": {field: value}}
        )
        logger.debug("Set %s on %s in %s", field, key, self._collection.name)

    async def _find_one(self, filter: dict[str, Any]) -> dict[str, Any] | None:
        return await self._collection.find_one(filter)

    async def _find_many(self, filter: dict[str, Any]) -> list[dict[str, Any]]:
        cursor = self._collection.find(filter)
        return await cursor.to_list()

    async def _aggregate_first(
        self, pipeline: list[dict[str, Any]]
    ) -> dict[str, Any] | None:
        cursor = await self._collection.aggregate(pipeline)
        rows = await cursor.to_list()
        return rows[0] if rows else None
