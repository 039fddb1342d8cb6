from mongo_identity.infrastructure.persistence.mongo.stores.base import MongoStoreBase
from mongo_identity.infrastructure.persistence.mongo.stores.role_store import (
    MongoRoleStore,
    MongoRoleStoreAsGuid,
    MongoRoleStoreAsObjectId,
)
from mongo_identity.infrastructure.persistence.mongo.stores.user_store import (
    AUTHENTICATOR_KEY_TOKEN_NAME,
    INTERNAL_LOGIN_PROVIDER,
    RECOVERY_CODE_TOKEN_NAME,
    MongoUserOnlyStore,
    MongoUserOnlyStoreAsGuid,
    MongoUserOnlyStoreAsObjectId,
    MongoUserStore,
    MongoUserStoreAsGuid,
    MongoUserStoreAsObjectId,
)

__all__ = [
    "AUTHENTICATOR_KEY_TOKEN_NAME",
    "INTERNAL_LOGIN_PROVIDER",
    "RECOVERY_CODE_TOKEN_NAME",
    "MongoRoleStore",
    "MongoRoleStoreAsGuid",
    "MongoRoleStoreAsObjectId",
    "MongoStoreBase",
    "MongoUserOnlyStore",
    "MongoUserOnlyStoreAsGuid",
    "MongoUserOnlyStoreAsObjectId",
    "MongoUserStore",
    "MongoUserStoreAsGuid",
    "MongoUserStoreAsObjectId",
]
