"""Value objects embedded in identity aggregates."""

from mongo_identity.domain.value_objects.claim import (
    DEFAULT_ISSUER,
    Claim,
    ClaimValueTypes,
)
from mongo_identity.domain.value_objects.role_reference import RoleReference
from mongo_identity.domain.value_objects.user_login_info import UserLoginInfo
from mongo_identity.domain.value_objects.user_token import UserToken

__all__ = [
    "DEFAULT_ISSUER",
    "Claim",
    "ClaimValueTypes",
    "RoleReference",
    "UserLoginInfo",
    "UserToken",
]
