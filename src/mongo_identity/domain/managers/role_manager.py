"""In-memory role membership of a user."""

from dataclasses import replace
from typing import Generic, Protocol, TypeVar

from mongo_identity.domain.value_objects import RoleReference

TKey = TypeVar("TKey")


class RoleHolder(Protocol[TKey]):
    roles: list[RoleReference[TKey]]


class RoleManager(Generic[TKey]):
    """Manages the role references of one user.

    Membership is matched on the role id or on the normalized role name,
    depending on the caller.
    """

    def __init__(self, owner: RoleHolder[TKey]) -> None:
        self._owner = owner

    @property
    def _roles(self) -> list[RoleReference[TKey]]:
        return self._owner.roles

    def has_id(self, role_id: TKey) -> bool:
        return any(role.id == role_id for role in self._roles)

    def find_by_id(self, role_id: TKey) -> RoleReference[TKey] | None:
        return next((role for role in self._roles if role.id == role_id), None)

    def has_name(self, normalized_name: str) -> bool:
        return any(role.normalized_name == normalized_name for role in self._roles)

    def find_by_name(self, normalized_name: str) -> RoleReference[TKey] | None:
        return next(
            (role for role in self._roles if role.normalized_name == normalized_name),
            None,
        )

    def get_names(self) -> list[str]:
        return [role.name for role in self._roles if role.name is not None]

    def try_add(
        self,
        role_id: TKey,
        normalized_name: str | None,
        name: str | None,
    ) -> bool:
        if self.has_id(role_id):
            return False

        self._roles.append(
            RoleReference(id=role_id, name=name, normalized_name=normalized_name)
        )
        return True

    def try_remove(self, normalized_name: str) -> bool:
        kept = [role for role in self._roles if role.normalized_name != normalized_name]
        if len(kept) == len(self._roles):
            return False

        self._roles[:] = kept
        return True

    def get_all(self) -> list[RoleReference[TKey]]:
        return [replace(role) for role in self._roles]
