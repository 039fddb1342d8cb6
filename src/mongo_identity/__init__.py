"""MongoDB identity stores.

Persists identity users and roles, with their claims, logins, tokens and
role memberships embedded, into MongoDB:
- Aggregates and their in-memory managers (domain)
- Store contracts consumed by the host identity framework
- MongoDB stores for string, UUID and ObjectId keys
- Configuration-time store selection by key type
"""

from mongo_identity.cancellation import CancellationToken
from mongo_identity.domain.role import (
    IdentityRole,
    IdentityRoleAsGuid,
    IdentityRoleAsObjectId,
    RoleStore,
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
from mongo_identity.domain.value_objects import (
    Claim,
    RoleReference,
    UserLoginInfo,
    UserToken,
)
from mongo_identity.exceptions import (
    ConfigurationError,
    ErrorCode,
    IdentityStoreError,
    InvalidArgumentError,
    InvalidKeyError,
    OperationCancelledError,
    PersistenceError,
    RoleNotFoundError,
    StoreDisposedError,
    UserNotFoundError,
)
from mongo_identity.infrastructure.persistence.mongo import (
    IdentityStoreBuilder,
    KeyKind,
    MongoConnection,
    MongoRoleStore,
    MongoRoleStoreAsGuid,
    MongoRoleStoreAsObjectId,
    MongoUserOnlyStore,
    MongoUserOnlyStoreAsGuid,
    MongoUserOnlyStoreAsObjectId,
    MongoUserStore,
    MongoUserStoreAsGuid,
    MongoUserStoreAsObjectId,
    StoreRegistration,
)
from mongo_identity.schemas import (
    IdentityError,
    IdentityResult,
    UserLoginMatch,
    UserRoleMatch,
)

__all__ = [
    # Domain
    "Claim",
    "IdentityRole",
    "IdentityRoleAsGuid",
    "IdentityRoleAsObjectId",
    "IdentityUser",
    "IdentityUserAsGuid",
    "IdentityUserAsObjectId",
    "RoleReference",
    "UserLoginInfo",
    "UserToken",
    # Store contracts
    "RoleStore",
    "UserClaimStore",
    "UserLoginStore",
    "UserRoleStore",
    "UserStore",
    "UserTokenStore",
    # Exceptions
    "ConfigurationError",
    "ErrorCode",
    "IdentityStoreError",
    "InvalidArgumentError",
    "InvalidKeyError",
    "OperationCancelledError",
    "PersistenceError",
    "RoleNotFoundError",
    "StoreDisposedError",
    "UserNotFoundError",
    # Schemas
    "CancellationToken",
    "IdentityError",
    "IdentityResult",
    "UserLoginMatch",
    "UserRoleMatch",
    # MongoDB
    "IdentityStoreBuilder",
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
    "StoreRegistration",
]
