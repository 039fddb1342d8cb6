from mongo_identity.domain.role.aggregates.role import (
    IdentityRole,
    IdentityRoleAsGuid,
    IdentityRoleAsObjectId,
)

__all__ = ["IdentityRole", "IdentityRoleAsGuid", "IdentityRoleAsObjectId"]
