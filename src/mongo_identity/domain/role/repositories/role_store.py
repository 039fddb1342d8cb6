"""Role store interface consumed by the host identity framework."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from mongo_identity.cancellation import CancellationToken
from mongo_identity.domain.role.aggregates.role import IdentityRole
from mongo_identity.domain.value_objects import Claim
from mongo_identity.schemas import IdentityResult

TRole = TypeVar("TRole", bound=IdentityRole)


class RoleStore(ABC, Generic[TRole]):
    """Persistence contract for roles and their claims.

    Every operation checks the cancellation token first, then whether the
    store has been closed, then its required arguments.
    """

    @abstractmethod
    async def create(
        self, role: TRole, cancellation_token: CancellationToken | None = None
    ) -> IdentityResult:
        """Insert a new role document."""

    @abstractmethod
    async def update(
        self, role: TRole, cancellation_token: CancellationToken | None = None
    ) -> IdentityResult:
        """Replace the whole role document."""

    @abstractmethod
    async def delete(
        self, role: TRole, cancellation_token: CancellationToken | None = None
    ) -> IdentityResult:
        """Delete the role document."""

    @abstractmethod
    async def find_by_id(
        self, role_id: str, cancellation_token: CancellationToken | None = None
    ) -> TRole | None:
        """Find a role by the textual form of its key."""

    @abstractmethod
    async def find_by_name(
        self,
        normalized_role_name: str,
        cancellation_token: CancellationToken | None = None,
    ) -> TRole | None:
        """Find a role by its normalized name."""

    @abstractmethod
    async def get_role_id(
        self, role: TRole, cancellation_token: CancellationToken | None = None
    ) -> str | None:
        """Return the role's key rendered as text."""

    @abstractmethod
    async def get_role_name(
        self, role: TRole, cancellation_token: CancellationToken | None = None
    ) -> str | None: ...

    @abstractmethod
    async def set_role_name(
        self,
        role: TRole,
        role_name: str | None,
        cancellation_token: CancellationToken | None = None,
    ) -> None:
        """Set the name, persisting only that field when it changed."""

    @abstractmethod
    async def get_normalized_role_name(
        self, role: TRole, cancellation_token: CancellationToken | None = None
    ) -> str | None: ...

    @abstractmethod
    async def set_normalized_role_name(
        self,
        role: TRole,
        normalized_name: str | None,
        cancellation_token: CancellationToken | None = None,
    ) -> None:
        """Set the normalized name, persisting only that field when it changed."""

    @abstractmethod
    async def get_claims(
        self, role: TRole, cancellation_token: CancellationToken | None = None
    ) -> list[Claim]: ...

    @abstractmethod
    async def add_claim(
        self,
        role: TRole,
        claim: Claim,
        cancellation_token: CancellationToken | None = None,
    ) -> None: ...

    @abstractmethod
    async def remove_claim(
        self,
        role: TRole,
        claim: Claim,
        cancellation_token: CancellationToken | None = None,
    ) -> None: ...

    @abstractmethod
    def close(self) -> None:
        """Mark the store closed; later calls raise StoreDisposedError."""
