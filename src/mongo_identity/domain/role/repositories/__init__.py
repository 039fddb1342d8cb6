from mongo_identity.domain.role.repositories.role_store import RoleStore

__all__ = ["RoleStore"]
