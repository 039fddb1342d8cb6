"""Configuration-time selection of the store variant for a key type.

The key type is read from the type argument an application class passes
to ``IdentityUser`` / ``IdentityRole`` somewhere up its inheritance chain,
e.g. ``class AppUser(IdentityUser[UUID])``. Resolution is pure: it performs
no I/O and gives the same answer for the same classes.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Any, TypeVar, get_args, get_origin
from uuid import UUID

from bson import ObjectId
from pymongo.asynchronous.collection import AsyncCollection

from mongo_identity.domain.role import IdentityRole
from mongo_identity.domain.user import IdentityUser
from mongo_identity.exceptions import ConfigurationError
from mongo_identity.infrastructure.persistence.mongo.connection import (
    MongoConnection,
    resolve_uuid_representation,
)
from mongo_identity.infrastructure.persistence.mongo.key_codecs import StringKeyCodec
from mongo_identity.infrastructure.persistence.mongo.stores import (
    MongoRoleStore,
    MongoRoleStoreAsGuid,
    MongoRoleStoreAsObjectId,
    MongoUserOnlyStore,
    MongoUserOnlyStoreAsGuid,
    MongoUserOnlyStoreAsObjectId,
    MongoUserStore,
    MongoUserStoreAsGuid,
    MongoUserStoreAsObjectId,
)
from mongo_identity_config.settings import MongoStoreOptions, get_settings

logger = logging.getLogger(__name__)

MAX_INHERITANCE_DEPTH = 10


class KeyKind(str, Enum):
    """Key variants with a dedicated store implementation."""

    STRING = "string"
    UUID = "uuid"
    OBJECT_ID = "object_id"

    @classmethod
    def from_key_type(cls, key_type: type) -> "KeyKind":
        """Any type other than UUID and ObjectId uses the string variant."""
        if isinstance(key_type, type):
            if issubclass(key_type, UUID):
                return cls.UUID
            if issubclass(key_type, ObjectId):
                return cls.OBJECT_ID
        return cls.STRING

    @property
    def default_key_type(self) -> type:
        return _DEFAULT_KEY_TYPES[self]


_DEFAULT_KEY_TYPES: dict[KeyKind, type] = {
    KeyKind.STRING: str,
    KeyKind.UUID: UUID,
    KeyKind.OBJECT_ID: ObjectId,
}

# (user store, user-only store, role store) per key variant
_STORE_CLASSES: dict[KeyKind, tuple[type, type, type]] = {
    KeyKind.STRING: (MongoUserStore, MongoUserOnlyStore, MongoRoleStore),
    KeyKind.UUID: (MongoUserStoreAsGuid, MongoUserOnlyStoreAsGuid, MongoRoleStoreAsGuid),
    KeyKind.OBJECT_ID: (
        MongoUserStoreAsObjectId,
        MongoUserOnlyStoreAsObjectId,
        MongoRoleStoreAsObjectId,
    ),
}


def resolve_key_type(entity_type: type, generic_base: type) -> type:
    """
    Find the key type ``entity_type`` passes to ``generic_base[K]``.

    Walks at most ``MAX_INHERITANCE_DEPTH`` classes up the first-base chain,
    starting with ``entity_type`` itself. Type arguments given to generic
    intermediate classes are carried along the walk.

    Parameters
    ----------
    entity_type
        Application user or role class
    generic_base
        ``IdentityUser`` or ``IdentityRole``

    Returns
    -------
    The declared key type

    Raises
    ------
    ConfigurationError
        If no parameterised base is found within the depth limit, or the
        key is still a type variable
    """
    current = entity_type
    # Type arguments bound to the type variables of ``current``
    bindings: dict[Any, Any] = {}
    for _ in range(MAX_INHERITANCE_DEPTH):
        orig_bases = current.__dict__.get("__orig_bases__", ())
        for base in orig_bases:
            if get_origin(base) is not generic_base:
                continue
            key_type = get_args(base)[0]
            key_type = bindings.get(key_type, key_type)
            if isinstance(key_type, TypeVar):
                raise ConfigurationError(
                    f"Key type of {entity_type.__name__} is unresolved "
                    f"({generic_base.__name__}[{key_type.__name__}])",
                    details={"type": entity_type.__name__},
                )
            return key_type

        parent = next(
            (
                base
                for base in current.__bases__
                if isinstance(base, type) and issubclass(base, generic_base)
            ),
            None,
        )
        if parent is None or parent is generic_base:
            raise ConfigurationError(
                f"{entity_type.__name__} does not declare a key type through "
                f"{generic_base.__name__}[K]",
                details={"type": entity_type.__name__},
            )

        parent_bindings: dict[Any, Any] = {}
        for base in orig_bases:
            if get_origin(base) is parent:
                arguments = [bindings.get(arg, arg) for arg in get_args(base)]
                parent_bindings = dict(
                    zip(getattr(parent, "__parameters__", ()), arguments)
                )
                break
        bindings = parent_bindings
        current = parent

    raise ConfigurationError(
        f"Could not resolve the key type of {entity_type.__name__} within "
        f"{MAX_INHERITANCE_DEPTH} base classes",
        details={"type": entity_type.__name__, "max_depth": MAX_INHERITANCE_DEPTH},
    )


@dataclass(frozen=True)
class StoreSelection:
    """Store classes chosen for a user type and optional role type."""

    user_type: type
    role_type: type | None
    key_kind: KeyKind
    key_type: type
    user_store_class: type
    role_store_class: type | None


def resolve_store_types(
    user_type: type,
    role_type: type | None = None,
    key_type: type | KeyKind | None = None,
) -> StoreSelection:
    """
    Select the store classes for the given aggregate types.

    Parameters
    ----------
    user_type
        Subclass of ``IdentityUser``
    role_type
        Subclass of ``IdentityRole``; without it a user-only store is chosen
    key_type
        Explicit key type or ``KeyKind``; skips inheritance inspection

    Returns
    -------
    StoreSelection for the key variant

    Raises
    ------
    ConfigurationError
        If a type is not an identity aggregate, its key type cannot be
        resolved, or user and role key types differ
    """
    if not (isinstance(user_type, type) and issubclass(user_type, IdentityUser)):
        raise ConfigurationError(f"{user_type!r} is not a subclass of IdentityUser")
    if role_type is not None and not (
        isinstance(role_type, type) and issubclass(role_type, IdentityRole)
    ):
        raise ConfigurationError(f"{role_type!r} is not a subclass of IdentityRole")

    if isinstance(key_type, KeyKind):
        key_kind = key_type
        resolved_key = key_type.default_key_type
    elif key_type is not None:
        key_kind = KeyKind.from_key_type(key_type)
        resolved_key = key_type
    else:
        resolved_key = resolve_key_type(user_type, IdentityUser)
        if role_type is not None:
            role_key = resolve_key_type(role_type, IdentityRole)
            if role_key is not resolved_key:
                raise ConfigurationError(
                    f"Key type mismatch: {user_type.__name__} uses "
                    f"{getattr(resolved_key, '__name__', resolved_key)} but "
                    f"{role_type.__name__} uses "
                    f"{getattr(role_key, '__name__', role_key)}",
                    details={"user_type": user_type.__name__, "role_type": role_type.__name__},
                )
        key_kind = KeyKind.from_key_type(resolved_key)

    user_store_class, user_only_store_class, role_store_class = _STORE_CLASSES[key_kind]

    return StoreSelection(
        user_type=user_type,
        role_type=role_type,
        key_kind=key_kind,
        key_type=resolved_key,
        user_store_class=user_store_class if role_type is not None else user_only_store_class,
        role_store_class=role_store_class if role_type is not None else None,
    )


@dataclass
class StoreRegistration:
    """Store factories bound to their collections."""

    selection: StoreSelection
    user_collection: AsyncCollection
    role_collection: AsyncCollection | None
    uuid_representation: int

    def _codec_arguments(self) -> dict[str, Any]:
        if self.selection.key_kind is KeyKind.UUID:
            return {"uuid_representation": self.uuid_representation}
        if self.selection.key_kind is KeyKind.OBJECT_ID:
            return {}
        return {"key_codec": StringKeyCodec(self.selection.key_type)}

    def create_user_store(self) -> Any:
        store_class = self.selection.user_store_class
        if self.role_collection is None:
            return store_class(
                self.user_collection,
                user_type=self.selection.user_type,
                **self._codec_arguments(),
            )
        return store_class(
            self.user_collection,
            self.role_collection,
            user_type=self.selection.user_type,
            role_type=self.selection.role_type,
            **self._codec_arguments(),
        )

    def create_role_store(self) -> Any:
        if self.selection.role_store_class is None or self.role_collection is None:
            raise ConfigurationError(
                f"No role type registered for {self.selection.user_type.__name__}"
            )
        return self.selection.role_store_class(
            self.role_collection,
            role_type=self.selection.role_type,
            **self._codec_arguments(),
        )


class IdentityStoreBuilder:
    """Registers MongoDB stores for application identity types."""

    def __init__(
        self,
        connection: MongoConnection,
        options: MongoStoreOptions | None = None,
    ) -> None:
        self._connection = connection
        self._options = options or MongoStoreOptions()

        if (
            self._options.uuid_representation is not None
            and self._options.uuid_representation != connection.uuid_representation_name
        ):
            raise ConfigurationError(
                f"UUID representation '{self._options.uuid_representation}' does not "
                f"match the connection's '{connection.uuid_representation_name}'"
            )

    def add_mongo_stores(
        self,
        user_type: type,
        role_type: type | None = None,
        key_type: type | KeyKind | None = None,
    ) -> StoreRegistration:
        """
        Resolve and bind the stores for ``user_type`` and ``role_type``.

        Collections are named after the classes unless the options override
        them.

        Returns
        -------
        StoreRegistration producing ready-to-use stores

        Raises
        ------
        ConfigurationError
            If the store types cannot be resolved
        """
        selection = resolve_store_types(user_type, role_type, key_type)

        user_collection_name = self._options.user_collection or user_type.__name__
        role_collection_name = None
        if role_type is not None:
            role_collection_name = self._options.role_collection or role_type.__name__

        registration = StoreRegistration(
            selection=selection,
            user_collection=self._connection.get_collection(user_collection_name),
            role_collection=(
                self._connection.get_collection(role_collection_name)
                if role_collection_name is not None
                else None
            ),
            uuid_representation=resolve_uuid_representation(
                self._connection.uuid_representation_name
            ),
        )

        logger.info(
            "Registered %s for %s (key: %s, collection: %s)",
            selection.user_store_class.__name__,
            user_type.__name__,
            selection.key_kind.value,
            user_collection_name,
        )
        if selection.role_store_class is not None:
            logger.info(
                "Registered %s for %s (collection: %s)",
                selection.role_store_class.__name__,
                role_type.__name__,  # type: ignore[union-attr]
                role_collection_name,
            )

        return registration


@lru_cache(maxsize=1)
def get_mongo_connection() -> MongoConnection:
    """
    Get the shared MongoDB connection (singleton).

    Returns
    -------
    MongoConnection configured from application settings
    """
    settings = get_settings()
    return MongoConnection.connect(
        settings.mongo_connection_string.get_secret_value(),
        settings.mongo_database,
        settings.mongo_uuid_representation,
    )


@lru_cache(maxsize=1)
def get_store_builder() -> IdentityStoreBuilder:
    """Get the shared store builder for the configured connection."""
    return IdentityStoreBuilder(get_mongo_connection(), get_settings().store_options)
