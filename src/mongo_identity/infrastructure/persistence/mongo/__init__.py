"""MongoDB persistence for identity aggregates."""

from mongo_identity.infrastructure.persistence.mongo.connection import (
    UUID_REPRESENTATIONS,
    MongoConnection,
)
from mongo_identity.infrastructure.persistence.mongo.key_codecs import (
    KeyCodec,
    ObjectIdKeyCodec,
    StringKeyCodec,
    UuidKeyCodec,
)
from mongo_identity.infrastructure.persistence.mongo.store_builder import (
    IdentityStoreBuilder,
    KeyKind,
    StoreRegistration,
    StoreSelection,
    get_mongo_connection,
    get_store_builder,
    resolve_key_type,
    resolve_store_types,
)
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

__all__ = [
    "UUID_REPRESENTATIONS",
    "IdentityStoreBuilder",
    "KeyCodec",
    "KeyKind",
    "MongoConnection",
    "MongoRoleStore",
    "MongoRoleStoreAsGuid",
    "MongoRoleStoreAsObjectId",
    "MongoUserOnlyStore",
    "MongoUserOnlyStoreAsGuid",
    "MongoUserOnlyStoreAsObjectId",
    "MongoUserStore",
    "MongoUserStoreAsGuid",
    "MongoUserStoreAsObjectId",
    "ObjectIdKeyCodec",
    "StoreRegistration",
    "StoreSelection",
    "StringKeyCodec",
    "UuidKeyCodec",
    "get_mongo_connection",
    "get_store_builder",
    "resolve_key_type",
    "resolve_store_types",
]
