"""User domain: the user aggregate and its store contracts."""

from mongo_identity.domain.user.aggregates import (
    IdentityUser,
    IdentityUserAsGuid,
    IdentityUserAsObjectId,
)
from mongo_identity.domain.user.repositories import (
    UserClaimStore,
    UserLoginStore,
    UserRoleStore,
    UserStore,
    UserTokenStore,
)

__all__ = [
    "IdentityUser",
    "IdentityUserAsGuid",
    "IdentityUserAsObjectId",
    "UserClaimStore",
    "UserLoginStore",
    "UserRoleStore",
    "UserStore",
    "UserTokenStore",
]
