"""Role domain: the role aggregate and its store contract."""

from mongo_identity.domain.role.aggregates import (
    IdentityRole,
    IdentityRoleAsGuid,
    IdentityRoleAsObjectId,
)
from mongo_identity.domain.role.repositories import RoleStore

__all__ = [
    "IdentityRole",
    "IdentityRoleAsGuid",
    "IdentityRoleAsObjectId",
    "RoleStore",
]
