"""MongoDB implementations of the user store contracts.

A user is one document with its claims, role references, logins and tokens
embedded. Sub-collection changes are applied to the in-memory user through
its managers and, only when a manager reports a change, the affected array
is written back with a single ``$set``.
"""

import logging
from datetime import datetime
from typing import Any

from bson.binary import UuidRepresentation
from pymongo.asynchronous.collection import AsyncCollection

from mongo_identity.cancellation import CancellationToken
from mongo_identity.domain.role import (
    IdentityRole,
    IdentityRoleAsGuid,
    IdentityRoleAsObjectId,
)
from mongo_identity.domain.user import (
    IdentityUser,
    IdentityUserAsGuid,
    IdentityUserAsObjectId,
    UserClaimStore,
    UserLoginStore,
    UserRoleStore,
    UserStore,
    UserTokenStore,
)
from mongo_identity.domain.user.repositories.user_store import TUser
from mongo_identity.domain.value_objects import Claim, UserLoginInfo, UserToken
from mongo_identity.exceptions import (
    InvalidArgumentError,
    RoleNotFoundError,
    UserNotFoundError,
)
from mongo_identity.infrastructure.persistence.mongo.documents import (
    claims_to_documents,
    logins_to_documents,
    role_from_document,
    roles_to_documents,
    tokens_to_documents,
    user_from_document,
    user_to_document,
)
from mongo_identity.infrastructure.persistence.mongo.key_codecs import (
    KeyCodec,
    ObjectIdKeyCodec,
    StringKeyCodec,
    UuidKeyCodec,
)
from mongo_identity.infrastructure.persistence.mongo.stores.base import MongoStoreBase
from mongo_identity.schemas import IdentityResult, UserLoginMatch, UserRoleMatch

logger = logging.getLogger(__name__)

# Provider under which the authenticator key and recovery codes are kept.
INTERNAL_LOGIN_PROVIDER = "[AspNetUserStore]"
AUTHENTICATOR_KEY_TOKEN_NAME = "AuthenticatorKey"
RECOVERY_CODE_TOKEN_NAME = "RecoveryCodes"
RECOVERY_CODE_SEPARATOR = ";"


class MongoUserOnlyStore(
    MongoStoreBase,
    UserStore[TUser],
    UserClaimStore[TUser],
    UserLoginStore[TUser],
    UserTokenStore[TUser],
):
    """User store for deployments without roles."""

    def __init__(
        self,
        collection: AsyncCollection,
        user_type: type[TUser] = IdentityUser,  # type: ignore[assignment]
        key_codec: KeyCodec | None = None,
    ) -> None:
        super().__init__(collection, key_codec or StringKeyCodec())
        self._user_type = user_type

    @property
    def user_type(self) -> type[TUser]:
        return self._user_type

    # ------------------------------------------------------------------
    # Core CRUD
    # ------------------------------------------------------------------

    async def create(
        self, user: TUser, cancellation_token: CancellationToken | None = None
    ) -> IdentityResult:
        self._guard(cancellation_token, user=user)
        if user.id is None:
            raise InvalidArgumentError("user.id", "User must have an id before create")

        return await self._insert(user_to_document(user, self._key_codec), user.id)

    async def update(
        self, user: TUser, cancellation_token: CancellationToken | None = None
    ) -> IdentityResult:
        self._guard(cancellation_token, user=user)
        self._require_id(user, "user.id")
        return await self._replace(user_to_document(user, self._key_codec), user.id)

    async def delete(
        self, user: TUser, cancellation_token: CancellationToken | None = None
    ) -> IdentityResult:
        self._guard(cancellation_token, user=user)
        self._require_id(user, "user.id")
        return await self._delete(user.id)

    async def find_by_id(
        self, user_id: str, cancellation_token: CancellationToken | None = None
    ) -> TUser | None:
        self._guard(cancellation_token, user_id=user_id)
        return await self._find_by_key(self._key_codec.parse(user_id))

    async def find_by_name(
        self,
        normalized_user_name: str,
        cancellation_token: CancellationToken | None = None,
    ) -> TUser | None:
        self._guard(cancellation_token, normalized_user_name=normalized_user_name)
        document = await self._find_one({"normalized_user_name": normalized_user_name})
        return self._map_to_domain(document) if document is not None else None

    async def find_by_email(
        self,
        normalized_email: str,
        cancellation_token: CancellationToken | None = None,
    ) -> TUser | None:
        self._guard(cancellation_token, normalized_email=normalized_email)
        document = await self._find_one({"normalized_email": normalized_email})
        return self._map_to_domain(document) if document is not None else None

    # ------------------------------------------------------------------
    # Scalar accessors
    # ------------------------------------------------------------------

    async def get_user_id(
        self, user: TUser, cancellation_token: CancellationToken | None = None
    ) -> str | None:
        self._guard(cancellation_token, user=user)
        return self._key_codec.format(user.id)

    async def get_user_name(
        self, user: TUser, cancellation_token: CancellationToken | None = None
    ) -> str | None:
        self._guard(cancellation_token, user=user)
        return user.user_name

    async def set_user_name(
        self,
        user: TUser,
        user_name: str | None,
        cancellation_token: CancellationToken | None = None,
    ) -> None:
        self._guard(cancellation_token, user=user)
        await self._set_scalar(user, "user_name", user_name)

    async def get_normalized_user_name(
        self, user: TUser, cancellation_token: CancellationToken | None = None
    ) -> str | None:
        self._guard(cancellation_token, user=user)
        return user.normalized_user_name

    async def set_normalized_user_name(
        self,
        user: TUser,
        normalized_name: str | None,
        cancellation_token: CancellationToken | None = None,
    ) -> None:
        self._guard(cancellation_token, user=user)
        await self._set_scalar(user, "normalized_user_name", normalized_name)

    async def get_email(
        self, user: TUser, cancellation_token: CancellationToken | None = None
    ) -> str | None:
        self._guard(cancellation_token, user=user)
        return user.email

    async def set_email(
        self,
        user: TUser,
        email: str | None,
        cancellation_token: CancellationToken | None = None,
    ) -> None:
        self._guard(cancellation_token, user=user)
        await self._set_scalar(user, "email", email)

    async def get_normalized_email(
        self, user: TUser, cancellation_token: CancellationToken | None = None
    ) -> str | None:
        self._guard(cancellation_token, user=user)
        return user.normalized_email

    async def set_normalized_email(
        self,
        user: TUser,
        normalized_email: str | None,
        cancellation_token: CancellationToken | None = None,
    ) -> None:
        self._guard(cancellation_token, user=user)
        await self._set_scalar(user, "normalized_email", normalized_email)

    async def get_email_confirmed(
        self, user: TUser, cancellation_token: CancellationToken | None = None
    ) -> bool:
        self._guard(cancellation_token, user=user)
        return user.email_confirmed

    async def set_email_confirmed(
        self,
        user: TUser,
        confirmed: bool,
        cancellation_token: CancellationToken | None = None,
    ) -> None:
        self._guard(cancellation_token, user=user)
        await self._set_scalar(user, "email_confirmed", confirmed)

    async def get_password_hash(
        self, user: TUser, cancellation_token: CancellationToken | None = None
    ) -> str | None:
        self._guard(cancellation_token, user=user)
        return user.password_hash

    async def set_password_hash(
        self,
        user: TUser,
        password_hash: str | None,
        cancellation_token: CancellationToken | None = None,
    ) -> None:
        self._guard(cancellation_token, user=user)
        await self._set_scalar(user, "password_hash", password_hash)

    async def has_password(
        self, user: TUser, cancellation_token: CancellationToken | None = None
    ) -> bool:
        self._guard(cancellation_token, user=user)
        return user.password_hash is not None

    async def get_phone_number(
        self, user: TUser, cancellation_token: CancellationToken | None = None
    ) -> str | None:
        self._guard(cancellation_token, user=user)
        return user.phone_number

    async def set_phone_number(
        self,
        user: TUser,
        phone_number: str | None,
        cancellation_token: CancellationToken | None = None,
    ) -> None:
        self._guard(cancellation_token, user=user)
        await self._set_scalar(user, "phone_number", phone_number)

    async def get_phone_number_confirmed(
        self, user: TUser, cancellation_token: CancellationToken | None = None
    ) -> bool:
        self._guard(cancellation_token, user=user)
        return user.phone_number_confirmed

    async def set_phone_number_confirmed(
        self,
        user: TUser,
        confirmed: bool,
        cancellation_token: CancellationToken | None = None,
    ) -> None:
        self._guard(cancellation_token, user=user)
        await self._set_scalar(user, "phone_number_confirmed", confirmed)

    async def get_security_stamp(
        self, user: TUser, cancellation_token: CancellationToken | None = None
    ) -> str | None:
        self._guard(cancellation_token, user=user)
        return user.security_stamp

    async def set_security_stamp(
        self,
        user: TUser,
        stamp: str,
        cancellation_token: CancellationToken | None = None,
    ) -> None:
        self._guard(cancellation_token, user=user, stamp=stamp)
        await self._set_scalar(user, "security_stamp", stamp)

    async def get_two_factor_enabled(
        self, user: TUser, cancellation_token: CancellationToken | None = None
    ) -> bool:
        self._guard(cancellation_token, user=user)
        return user.two_factor_enabled

    async def set_two_factor_enabled(
        self,
        user: TUser,
        enabled: bool,
        cancellation_token: CancellationToken | None = None,
    ) -> None:
        self._guard(cancellation_token, user=user)
        await self._set_scalar(user, "two_factor_enabled", enabled)

    async def get_lockout_end_date(
        self, user: TUser, cancellation_token: CancellationToken | None = None
    ) -> datetime | None:
        self._guard(cancellation_token, user=user)
        return user.lockout_end

    async def set_lockout_end_date(
        self,
        user: TUser,
        lockout_end: datetime | None,
        cancellation_token: CancellationToken | None = None,
    ) -> None:
        self._guard(cancellation_token, user=user)
        await self._set_scalar(user, "lockout_end", lockout_end)

    async def get_lockout_enabled(
        self, user: TUser, cancellation_token: CancellationToken | None = None
    ) -> bool:
        self._guard(cancellation_token, user=user)
        return user.lockout_enabled

    async def set_lockout_enabled(
        self,
        user: TUser,
        enabled: bool,
        cancellation_token: CancellationToken | None = None,
    ) -> None:
        self._guard(cancellation_token, user=user)
        await self._set_scalar(user, "lockout_enabled", enabled)

    async def get_access_failed_count(
        self, user: TUser, cancellation_token: CancellationToken | None = None
    ) -> int:
        self._guard(cancellation_token, user=user)
        return user.access_failed_count

    async def increment_access_failed_count(
        self, user: TUser, cancellation_token: CancellationToken | None = None
    ) -> int:
        self._guard(cancellation_token, user=user)
        await self._set_scalar(user, "access_failed_count", user.access_failed_count + 1)
        return user.access_failed_count

    async def reset_access_failed_count(
        self, user: TUser, cancellation_token: CancellationToken | None = None
    ) -> None:
        self._guard(cancellation_token, user=user)
        await self._set_scalar(user, "access_failed_count", 0)

    # ------------------------------------------------------------------
    # Claims
    # ------------------------------------------------------------------

    async def get_claims(
        self, user: TUser, cancellation_token: CancellationToken | None = None
    ) -> list[Claim]:
        self._guard(cancellation_token, user=user)
        return user.claim_manager.get_all()

    async def add_claims(
        self,
        user: TUser,
        claims: list[Claim],
        cancellation_token: CancellationToken | None = None,
    ) -> None:
        self._guard(cancellation_token, user=user, claims=claims)
        if user.claim_manager.try_add_many(claims):
            await self._persist_claims(user)

    async def replace_claim(
        self,
        user: TUser,
        claim: Claim,
        new_claim: Claim,
        cancellation_token: CancellationToken | None = None,
    ) -> None:
        self._guard(cancellation_token, user=user, claim=claim, new_claim=new_claim)
        if user.claim_manager.try_replace(claim, new_claim):
            await self._persist_claims(user)

    async def remove_claims(
        self,
        user: TUser,
        claims: list[Claim],
        cancellation_token: CancellationToken | None = None,
    ) -> None:
        self._guard(cancellation_token, user=user, claims=claims)
        if user.claim_manager.try_remove_many(claims):
            await self._persist_claims(user)

    async def get_users_for_claim(
        self, claim: Claim, cancellation_token: CancellationToken | None = None
    ) -> list[TUser]:
        self._guard(cancellation_token, claim=claim)
        documents = await self._find_many(
            {"claims": {"$elemMatch": {"type": claim.type, "value": claim.value}}}
        )
        return [self._map_to_domain(document) for document in documents]

    # ------------------------------------------------------------------
    # Logins
    # ------------------------------------------------------------------

    async def add_login(
        self,
        user: TUser,
        login: UserLoginInfo,
        cancellation_token: CancellationToken | None = None,
    ) -> None:
        self._guard(cancellation_token, user=user, login=login)
        if user.login_manager.try_add(
            login.login_provider, login.provider_key, login.provider_display_name
        ):
            await self._set_field(user.id, "logins", logins_to_documents(user.logins))

    async def remove_login(
        self,
        user: TUser,
        login_provider: str,
        provider_key: str,
        cancellation_token: CancellationToken | None = None,
    ) -> None:
        self._guard(
            cancellation_token,
            user=user,
            login_provider=login_provider,
            provider_key=provider_key,
        )
        if user.login_manager.try_remove(login_provider, provider_key):
            await self._set_field(user.id, "logins", logins_to_documents(user.logins))

    async def get_logins(
        self, user: TUser, cancellation_token: CancellationToken | None = None
    ) -> list[UserLoginInfo]:
        self._guard(cancellation_token, user=user)
        return user.login_manager.get_all()

    async def find_by_login(
        self,
        login_provider: str,
        provider_key: str,
        cancellation_token: CancellationToken | None = None,
    ) -> TUser | None:
        match = await self.find_user_login(
            None, login_provider, provider_key, cancellation_token
        )
        if match is None:
            return None

        return await self._find_by_key(match.user_id)

    async def find_user_login(
        self,
        user_id: Any | None,
        login_provider: str,
        provider_key: str,
        cancellation_token: CancellationToken | None = None,
    ) -> UserLoginMatch | None:
        """
        Locate one login row with an aggregation pipeline.

        Parameters
        ----------
        user_id
            Key of the user to search, or None to search every user
        login_provider
            Provider of the login
        provider_key
            Key issued by the provider

        Returns
        -------
        The matching row, or None when no user holds the login
        """
        self._guard(
            cancellation_token,
            login_provider=login_provider,
            provider_key=provider_key,
        )

        pipeline: list[dict[str, Any]] = []
        if user_id is not None:
            pipeline.append({"$match": self._id_filter(user_id)})
        pipeline.extend(
            [
                {"$unwind": {"path": "$logins", "preserveNullAndEmptyArrays": False}},
                {
                    "$match": {
                        "$and": [
                            {"logins.login_provider": login_provider},
                            {"logins.provider_key": provider_key},
                        ]
                    }
                },
                {
                    "$project": {
                        "_id": 0,
                        "user_id": "$_id",
                        "login_provider": "$logins.login_provider",
                        "provider_key": "$logins.provider_key",
                        "provider_display_name": "$logins.provider_display_name",
                    }
                },
                {"$limit": 1},
            ]
        )

        row = await self._aggregate_first(pipeline)
        if row is None:
            return None

        return UserLoginMatch(
            user_id=self._key_codec.from_bson(row["user_id"]),
            login_provider=row["login_provider"],
            provider_key=row["provider_key"],
            provider_display_name=row.get("provider_display_name"),
        )

    # ------------------------------------------------------------------
    # Tokens
    # ------------------------------------------------------------------

    async def set_token(
        self,
        user: TUser,
        login_provider: str,
        name: str,
        value: str | None,
        cancellation_token: CancellationToken | None = None,
    ) -> None:
        self._guard(
            cancellation_token, user=user, login_provider=login_provider, name=name
        )

        token = user.token_manager.find(login_provider, name)
        if token is not None:
            if token.value == value:
                return
            user.token_manager.try_replace(login_provider, name, value)
            await self._set_field(user.id, "tokens", tokens_to_documents(user.tokens))
            return

        stored = await self._require_stored_user(user)
        if stored.token_manager.try_add(login_provider, name, value):
            await self._set_field(
                stored.id, "tokens", tokens_to_documents(stored.tokens)
            )
        user.token_manager.try_add(login_provider, name, value)

    async def remove_token(
        self,
        user: TUser,
        login_provider: str,
        name: str,
        cancellation_token: CancellationToken | None = None,
    ) -> None:
        self._guard(
            cancellation_token, user=user, login_provider=login_provider, name=name
        )

        if user.token_manager.find(login_provider, name) is None:
            return

        stored = await self._require_stored_user(user)
        if stored.token_manager.try_remove(login_provider, name):
            await self._set_field(
                stored.id, "tokens", tokens_to_documents(stored.tokens)
            )
        user.token_manager.try_remove(login_provider, name)

    async def find_token(
        self,
        user: TUser,
        login_provider: str,
        name: str,
        cancellation_token: CancellationToken | None = None,
    ) -> UserToken | None:
        self._guard(
            cancellation_token, user=user, login_provider=login_provider, name=name
        )
        return user.token_manager.find(login_provider, name)

    async def get_token(
        self,
        user: TUser,
        login_provider: str,
        name: str,
        cancellation_token: CancellationToken | None = None,
    ) -> str | None:
        token = await self.find_token(user, login_provider, name, cancellation_token)
        return token.value if token is not None else None

    async def get_authenticator_key(
        self, user: TUser, cancellation_token: CancellationToken | None = None
    ) -> str | None:
        return await self.get_token(
            user,
            INTERNAL_LOGIN_PROVIDER,
            AUTHENTICATOR_KEY_TOKEN_NAME,
            cancellation_token,
        )

    async def set_authenticator_key(
        self,
        user: TUser,
        key: str,
        cancellation_token: CancellationToken | None = None,
    ) -> None:
        await self.set_token(
            user,
            INTERNAL_LOGIN_PROVIDER,
            AUTHENTICATOR_KEY_TOKEN_NAME,
            key,
            cancellation_token,
        )

    async def replace_codes(
        self,
        user: TUser,
        recovery_codes: list[str],
        cancellation_token: CancellationToken | None = None,
    ) -> None:
        self._guard(cancellation_token, user=user, recovery_codes=recovery_codes)
        await self.set_token(
            user,
            INTERNAL_LOGIN_PROVIDER,
            RECOVERY_CODE_TOKEN_NAME,
            RECOVERY_CODE_SEPARATOR.join(recovery_codes),
            cancellation_token,
        )

    async def redeem_code(
        self,
        user: TUser,
        code: str,
        cancellation_token: CancellationToken | None = None,
    ) -> bool:
        """Consume a recovery code; False when the user does not hold it."""
        self._guard(cancellation_token, user=user, code=code)

        codes = await self._get_recovery_codes(user, cancellation_token)
        if code not in codes:
            return False

        await self.replace_codes(
            user, [existing for existing in codes if existing != code], cancellation_token
        )
        return True

    async def count_codes(
        self, user: TUser, cancellation_token: CancellationToken | None = None
    ) -> int:
        return len(await self._get_recovery_codes(user, cancellation_token))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _get_recovery_codes(
        self, user: TUser, cancellation_token: CancellationToken | None
    ) -> list[str]:
        merged = await self.get_token(
            user, INTERNAL_LOGIN_PROVIDER, RECOVERY_CODE_TOKEN_NAME, cancellation_token
        )
        if not merged:
            return []
        return merged.split(RECOVERY_CODE_SEPARATOR)

    async def _require_stored_user(self, user: TUser) -> TUser:
        stored = await self._find_by_key(user.id)
        if stored is None:
            raise UserNotFoundError(user.id)
        return stored

    async def _find_by_key(self, key: Any) -> TUser | None:
        document = await self._find_one(self._id_filter(key))
        if document is None:
            return None
        return self._map_to_domain(document)

    async def _set_scalar(self, user: TUser, field: str, value: Any) -> None:
        if getattr(user, field) == value:
            return
        setattr(user, field, value)
        await self._set_field(user.id, field, value)

    async def _persist_claims(self, user: TUser) -> None:
        await self._set_field(user.id, "claims", claims_to_documents(user.claims))

    def _map_to_domain(self, document: dict[str, Any]) -> TUser:
        return user_from_document(document, self._user_type, self._key_codec)  # type: ignore[return-value]


class MongoUserStore(MongoUserOnlyStore[TUser], UserRoleStore[TUser]):
    """User store with role membership backed by a role collection.

    Role references are snapshots taken when the user joins a role; they
    are not refreshed when the role is renamed.
    """

    def __init__(
        self,
        collection: AsyncCollection,
        role_collection: AsyncCollection,
        user_type: type[TUser] = IdentityUser,  # type: ignore[assignment]
        role_type: type[IdentityRole] = IdentityRole,
        key_codec: KeyCodec | None = None,
    ) -> None:
        super().__init__(collection, user_type, key_codec)
        self._role_collection = role_collection
        self._role_type = role_type

    @property
    def role_collection(self) -> AsyncCollection:
        return self._role_collection

    async def add_to_role(
        self,
        user: TUser,
        normalized_role_name: str,
        cancellation_token: CancellationToken | None = None,
    ) -> None:
        self._guard(
            cancellation_token, user=user, normalized_role_name=normalized_role_name
        )
        self._require_role_name(normalized_role_name)

        role = await self._find_role(normalized_role_name)
        if role is None:
            raise RoleNotFoundError(normalized_role_name)

        if user.role_manager.try_add(role.id, role.normalized_name, role.name):
            await self._persist_roles(user)

    async def remove_from_role(
        self,
        user: TUser,
        normalized_role_name: str,
        cancellation_token: CancellationToken | None = None,
    ) -> None:
        self._guard(
            cancellation_token, user=user, normalized_role_name=normalized_role_name
        )
        self._require_role_name(normalized_role_name)

        if user.role_manager.try_remove(normalized_role_name):
            await self._persist_roles(user)

    async def get_roles(
        self, user: TUser, cancellation_token: CancellationToken | None = None
    ) -> list[str]:
        self._guard(cancellation_token, user=user)
        return user.role_manager.get_names()

    async def is_in_role(
        self,
        user: TUser,
        normalized_role_name: str,
        cancellation_token: CancellationToken | None = None,
    ) -> bool:
        self._guard(
            cancellation_token, user=user, normalized_role_name=normalized_role_name
        )
        self._require_role_name(normalized_role_name)

        role = await self._find_role(normalized_role_name)
        if role is None:
            return False
        return user.role_manager.has_id(role.id)

    async def get_users_in_role(
        self,
        normalized_role_name: str,
        cancellation_token: CancellationToken | None = None,
    ) -> list[TUser]:
        self._guard(cancellation_token, normalized_role_name=normalized_role_name)
        self._require_role_name(normalized_role_name)

        role = await self._find_role(normalized_role_name)
        if role is None:
            return []

        documents = await self._find_many(
            {"roles": {"$elemMatch": {"_id": self._key_codec.to_bson(role.id)}}}
        )
        return [self._map_to_domain(document) for document in documents]

    async def find_user_role(
        self,
        user_id: Any,
        role_id: Any,
        cancellation_token: CancellationToken | None = None,
    ) -> UserRoleMatch | None:
        self._guard(cancellation_token, user_id=user_id, role_id=role_id)

        pipeline: list[dict[str, Any]] = [
            {"$match": self._id_filter(user_id)},
            {"$unwind": {"path": "$roles", "preserveNullAndEmptyArrays": False}},
            {"$match": {"roles._id": self._key_codec.to_bson(role_id)}},
            {"$project": {"_id": 0, "user_id": "$_id", "role_id": "$roles._id"}},
            {"$limit": 1},
        ]

        row = await self._aggregate_first(pipeline)
        if row is None:
            return None

        return UserRoleMatch(
            user_id=self._key_codec.from_bson(row["user_id"]),
            role_id=self._key_codec.from_bson(row["role_id"]),
        )

    async def _find_role(self, normalized_role_name: str) -> IdentityRole | None:
        document = await self._role_collection.find_one(
            {"normalized_name": normalized_role_name}
        )
        if document is None:
            return None
        return role_from_document(document, self._role_type, self._key_codec)

    async def _persist_roles(self, user: TUser) -> None:
        await self._set_field(
            user.id, "roles", roles_to_documents(user.roles, self._key_codec)
        )

    @staticmethod
    def _require_role_name(normalized_role_name: str) -> None:
        if not normalized_role_name.strip():
            raise InvalidArgumentError(
                "normalized_role_name", "Role name must not be blank"
            )


class MongoUserOnlyStoreAsGuid(MongoUserOnlyStore[TUser]):
    """User-only store for UUID keys."""

    def __init__(
        self,
        collection: AsyncCollection,
        user_type: type[TUser] = IdentityUserAsGuid,  # type: ignore[assignment]
        uuid_representation: int = UuidRepresentation.STANDARD,
    ) -> None:
        super().__init__(collection, user_type, UuidKeyCodec(uuid_representation))


class MongoUserOnlyStoreAsObjectId(MongoUserOnlyStore[TUser]):
    """User-only store for ObjectId keys."""

    def __init__(
        self,
        collection: AsyncCollection,
        user_type: type[TUser] = IdentityUserAsObjectId,  # type: ignore[assignment]
    ) -> None:
        super().__init__(collection, user_type, ObjectIdKeyCodec())


class MongoUserStoreAsGuid(MongoUserStore[TUser]):
    """User store for UUID keys."""

    def __init__(
        self,
        collection: AsyncCollection,
        role_collection: AsyncCollection,
        user_type: type[TUser] = IdentityUserAsGuid,  # type: ignore[assignment]
        role_type: type[IdentityRole] = IdentityRoleAsGuid,
        uuid_representation: int = UuidRepresentation.STANDARD,
    ) -> None:
        super().__init__(
            collection,
            role_collection,
            user_type,
            role_type,
            UuidKeyCodec(uuid_representation),
        )


class MongoUserStoreAsObjectId(MongoUserStore[TUser]):
    """User store for ObjectId keys."""

    def __init__(
        self,
        collection: AsyncCollection,
        role_collection: AsyncCollection,
        user_type: type[TUser] = IdentityUserAsObjectId,  # type: ignore[assignment]
        role_type: type[IdentityRole] = IdentityRoleAsObjectId,
    ) -> None:
        super().__init__(
            collection, role_collection, user_type, role_type, ObjectIdKeyCodec()
        )
