from mongo_identity.domain.user.aggregates.user import (
    IdentityUser,
    IdentityUserAsGuid,
    IdentityUserAsObjectId,
)

__all__ = ["IdentityUser", "IdentityUserAsGuid", "IdentityUserAsObjectId"]
