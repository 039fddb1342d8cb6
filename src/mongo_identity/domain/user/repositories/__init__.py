from mongo_identity.domain.user.repositories.user_store import (
    UserClaimStore,
    UserLoginStore,
    UserRoleStore,
    UserStore,
    UserTokenStore,
)

__all__ = [
    "UserClaimStore",
    "UserLoginStore",
    "UserRoleStore",
    "UserStore",
    "UserTokenStore",
]
