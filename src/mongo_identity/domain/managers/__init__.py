"""Sub-entity managers: pure set logic over embedded collections, no I/O."""

from mongo_identity.domain.managers.claim_manager import Claimable, ClaimManager
from mongo_identity.domain.managers.role_manager import RoleManager
from mongo_identity.domain.managers.token_manager import TokenManager
from mongo_identity.domain.managers.user_login_manager import UserLoginManager

__all__ = [
    "ClaimManager",
    "Claimable",
    "RoleManager",
    "TokenManager",
    "UserLoginManager",
]
