"""Result and row types returned across the store boundary.

These are simple data classes used for transferring data between the
stores and the host identity framework.
"""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

TKey = TypeVar("TKey")


@dataclass(frozen=True)
class IdentityError:
    """A single failure reported by a mutating store call.

    Attributes
    ----------
    code
        Stable operation code such as ``UpdateError`` or ``DeleteError``
    description
        Human-readable description of the failure
    """

    code: str
    description: str


@dataclass(frozen=True)
class IdentityResult:
    """Outcome of a mutating store call (create, update, delete)."""

    succeeded: bool
    errors: tuple[IdentityError, ...] = field(default_factory=tuple)

    @classmethod
    def success(cls) -> "IdentityResult":
        return cls(succeeded=True)

    @classmethod
    def failed(cls, *errors: IdentityError) -> "IdentityResult":
        return cls(succeeded=False, errors=tuple(errors))

    def __str__(self) -> str:
        if self.succeeded:
            return "Succeeded"
        return "Failed : " + ",".join(error.code for error in self.errors)


@dataclass(frozen=True)
class UserLoginMatch(Generic[TKey]):
    """One login row located inside a user document by the login pipeline."""

    user_id: TKey
    login_provider: str
    provider_key: str
    provider_display_name: str | None = None


@dataclass(frozen=True)
class UserRoleMatch(Generic[TKey]):
    """One role-membership row located inside a user document."""

    user_id: TKey
    role_id: TKey

