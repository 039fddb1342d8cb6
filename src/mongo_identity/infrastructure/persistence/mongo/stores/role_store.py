"""MongoDB implementation of RoleStore."""

import logging
from typing import Any

from bson.binary import UuidRepresentation
from pymongo.asynchronous.collection import AsyncCollection

from mongo_identity.cancellation import CancellationToken
from mongo_identity.domain.role import (
    IdentityRole,
    IdentityRoleAsGuid,
    IdentityRoleAsObjectId,
    RoleStore,
)
from mongo_identity.domain.role.repositories.role_store import TRole
from mongo_identity.domain.value_objects import Claim
from mongo_identity.exceptions import InvalidArgumentError
from mongo_identity.infrastructure.persistence.mongo.documents import (
    claims_to_documents,
    role_from_document,
    role_to_document,
)
from mongo_identity.infrastructure.persistence.mongo.key_codecs import (
    KeyCodec,
    ObjectIdKeyCodec,
    StringKeyCodec,
    UuidKeyCodec,
)
from mongo_identity.infrastructure.persistence.mongo.stores.base import MongoStoreBase
from mongo_identity.schemas import IdentityResult

logger = logging.getLogger(__name__)


class MongoRoleStore(MongoStoreBase, RoleStore[TRole]):
    """Role store keeping one document per role with its claims embedded."""

    def __init__(
        self,
        collection: AsyncCollection,
        role_type: type[TRole] = IdentityRole,  # type: ignore[assignment]
        key_codec: KeyCodec | None = None,
    ) -> None:
        super().__init__(collection, key_codec or StringKeyCodec())
        self._role_type = role_type

    @property
    def role_type(self) -> type[TRole]:
        return self._role_type

    async def create(
        self, role: TRole, cancellation_token: CancellationToken | None = None
    ) -> IdentityResult:
        self._guard(cancellation_token, role=role)
        if role.id is None:
            raise InvalidArgumentError("role.id", "Role must have an id before create")

        return await self._insert(role_to_document(role, self._key_codec), role.id)

    async def update(
        self, role: TRole, cancellation_token: CancellationToken | None = None
    ) -> IdentityResult:
        self._guard(cancellation_token, role=role)
        self._require_id(role, "role.id")
        return await self._replace(role_to_document(role, self._key_codec), role.id)

    async def delete(
        self, role: TRole, cancellation_token: CancellationToken | None = None
    ) -> IdentityResult:
        self._guard(cancellation_token, role=role)
        self._require_id(role, "role.id")
        return await self._delete(role.id)

    async def find_by_id(
        self, role_id: str, cancellation_token: CancellationToken | None = None
    ) -> TRole | None:
        self._guard(cancellation_token, role_id=role_id)
        key = self._key_codec.parse(role_id)

        document = await self._find_one(self._id_filter(key))
        if document is None:
            return None

        return self._map_to_domain(document)

    async def find_by_name(
        self,
        normalized_role_name: str,
        cancellation_token: CancellationToken | None = None,
    ) -> TRole | None:
        self._guard(cancellation_token, normalized_role_name=normalized_role_name)

        document = await self._find_one({"normalized_name": normalized_role_name})
        if document is None:
            return None

        return self._map_to_domain(document)

    async def get_role_id(
        self, role: TRole, cancellation_token: CancellationToken | None = None
    ) -> str | None:
        self._guard(cancellation_token, role=role)
        return self._key_codec.format(role.id)

    async def get_role_name(
        self, role: TRole, cancellation_token: CancellationToken | None = None
    ) -> str | None:
        self._guard(cancellation_token, role=role)
        return role.name

    async def set_role_name(
        self,
        role: TRole,
        role_name: str | None,
        cancellation_token: CancellationToken | None = None,
    ) -> None:
        self._guard(cancellation_token, role=role)
        await self._set_scalar(role, "name", role_name)

    async def get_normalized_role_name(
        self, role: TRole, cancellation_token: CancellationToken | None = None
    ) -> str | None:
        self._guard(cancellation_token, role=role)
        return role.normalized_name

    async def set_normalized_role_name(
        self,
        role: TRole,
        normalized_name: str | None,
        cancellation_token: CancellationToken | None = None,
    ) -> None:
        self._guard(cancellation_token, role=role)
        await self._set_scalar(role, "normalized_name", normalized_name)

    async def get_claims(
        self, role: TRole, cancellation_token: CancellationToken | None = None
    ) -> list[Claim]:
        self._guard(cancellation_token, role=role)
        return role.claim_manager.get_all()

    async def add_claim(
        self,
        role: TRole,
        claim: Claim,
        cancellation_token: CancellationToken | None = None,
    ) -> None:
        self._guard(cancellation_token, role=role, claim=claim)
        if role.claim_manager.try_add(
            claim.type, claim.value, claim.value_type, claim.issuer
        ):
            await self._set_field(role.id, "claims", claims_to_documents(role.claims))

    async def remove_claim(
        self,
        role: TRole,
        claim: Claim,
        cancellation_token: CancellationToken | None = None,
    ) -> None:
        self._guard(cancellation_token, role=role, claim=claim)
        if role.claim_manager.try_remove(claim):
            await self._set_field(role.id, "claims", claims_to_documents(role.claims))

    async def _set_scalar(self, role: TRole, field: str, value: Any) -> None:
        if getattr(role, field) == value:
            return
        setattr(role, field, value)
        await self._set_field(role.id, field, value)

    def _map_to_domain(self, document: dict[str, Any]) -> TRole:
        return role_from_document(document, self._role_type, self._key_codec)  # type: ignore[return-value]


class MongoRoleStoreAsGuid(MongoRoleStore[TRole]):
    """Role store for UUID keys."""

    def __init__(
        self,
        collection: AsyncCollection,
        role_type: type[TRole] = IdentityRoleAsGuid,  # type: ignore[assignment]
        uuid_representation: int = UuidRepresentation.STANDARD,
    ) -> None:
        super().__init__(collection, role_type, UuidKeyCodec(uuid_representation))


class MongoRoleStoreAsObjectId(MongoRoleStore[TRole]):
    """Role store for ObjectId keys."""

    def __init__(
        self,
        collection: AsyncCollection,
        role_type: type[TRole] = IdentityRoleAsObjectId,  # type: ignore[assignment]
    ) -> None:
        super().__init__(collection, role_type, ObjectIdKeyCodec())
