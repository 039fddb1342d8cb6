"""User store interfaces consumed by the host identity framework.

The contract is split the way the host framework splits it: a core store
plus optional claim, login, token and role extensions. Implementations
usually provide several of them at once.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Generic, TypeVar

from mongo_identity.cancellation import CancellationToken
from mongo_identity.domain.user.aggregates.user import IdentityUser
from mongo_identity.domain.value_objects import Claim, UserLoginInfo, UserToken
from mongo_identity.schemas import IdentityResult, UserLoginMatch, UserRoleMatch

TUser = TypeVar("TUser", bound=IdentityUser)

Token = CancellationToken | None


class UserStore(ABC, Generic[TUser]):
    """Core user persistence plus the scalar field accessors.

    Setters change the in-memory user and, only when the value differs,
    issue a single-field update for that field.
    """

    @abstractmethod
    async def create(self, user: TUser, cancellation_token: Token = None) -> IdentityResult:
        """Insert a new user document."""

    @abstractmethod
    async def update(self, user: TUser, cancellation_token: Token = None) -> IdentityResult:
        """Replace the whole user document."""

    @abstractmethod
    async def delete(self, user: TUser, cancellation_token: Token = None) -> IdentityResult:
        """Delete the user document."""

    @abstractmethod
    async def find_by_id(self, user_id: str, cancellation_token: Token = None) -> TUser | None:
        """Find a user by the textual form of its key."""

    @abstractmethod
    async def find_by_name(
        self, normalized_user_name: str, cancellation_token: Token = None
    ) -> TUser | None: ...

    @abstractmethod
    async def find_by_email(
        self, normalized_email: str, cancellation_token: Token = None
    ) -> TUser | None: ...

    @abstractmethod
    async def get_user_id(self, user: TUser, cancellation_token: Token = None) -> str | None: ...

    @abstractmethod
    async def get_user_name(self, user: TUser, cancellation_token: Token = None) -> str | None: ...

    @abstractmethod
    async def set_user_name(
        self, user: TUser, user_name: str | None, cancellation_token: Token = None
    ) -> None: ...

    @abstractmethod
    async def get_normalized_user_name(
        self, user: TUser, cancellation_token: Token = None
    ) -> str | None: ...

    @abstractmethod
    async def set_normalized_user_name(
        self, user: TUser, normalized_name: str | None, cancellation_token: Token = None
    ) -> None: ...

    @abstractmethod
    async def get_email(self, user: TUser, cancellation_token: Token = None) -> str | None: ...

    @abstractmethod
    async def set_email(
        self, user: TUser, email: str | None, cancellation_token: Token = None
    ) -> None: ...

    @abstractmethod
    async def get_normalized_email(
        self, user: TUser, cancellation_token: Token = None
    ) -> str | None: ...

    @abstractmethod
    async def set_normalized_email(
        self, user: TUser, normalized_email: str | None, cancellation_token: Token = None
    ) -> None: ...

    @abstractmethod
    async def get_email_confirmed(self, user: TUser, cancellation_token: Token = None) -> bool: ...

    @abstractmethod
    async def set_email_confirmed(
        self, user: TUser, confirmed: bool, cancellation_token: Token = None
    ) -> None: ...

    @abstractmethod
    async def get_password_hash(
        self, user: TUser, cancellation_token: Token = None
    ) -> str | None: ...

    @abstractmethod
    async def set_password_hash(
        self, user: TUser, password_hash: str | None, cancellation_token: Token = None
    ) -> None: ...

    @abstractmethod
    async def has_password(self, user: TUser, cancellation_token: Token = None) -> bool: ...

    @abstractmethod
    async def get_phone_number(
        self, user: TUser, cancellation_token: Token = None
    ) -> str | None: ...

    @abstractmethod
    async def set_phone_number(
        self, user: TUser, phone_number: str | None, cancellation_token: Token = None
    ) -> None: ...

    @abstractmethod
    async def get_phone_number_confirmed(
        self, user: TUser, cancellation_token: Token = None
    ) -> bool: ...

    @abstractmethod
    async def set_phone_number_confirmed(
        self, user: TUser, confirmed: bool, cancellation_token: Token = None
    ) -> None: ...

    @abstractmethod
    async def get_security_stamp(
        self, user: TUser, cancellation_token: Token = None
    ) -> str | None: ...

    @abstractmethod
    async def set_security_stamp(
        self, user: TUser, stamp: str, cancellation_token: Token = None
    ) -> None: ...

    @abstractmethod
    async def get_two_factor_enabled(
        self, user: TUser, cancellation_token: Token = None
    ) -> bool: ...

    @abstractmethod
    async def set_two_factor_enabled(
        self, user: TUser, enabled: bool, cancellation_token: Token = None
    ) -> None: ...

    @abstractmethod
    async def get_lockout_end_date(
        self, user: TUser, cancellation_token: Token = None
    ) -> datetime | None: ...

    @abstractmethod
    async def set_lockout_end_date(
        self, user: TUser, lockout_end: datetime | None, cancellation_token: Token = None
    ) -> None: ...

    @abstractmethod
    async def get_lockout_enabled(self, user: TUser, cancellation_token: Token = None) -> bool: ...

    @abstractmethod
    async def set_lockout_enabled(
        self, user: TUser, enabled: bool, cancellation_token: Token = None
    ) -> None: ...

    @abstractmethod
    async def get_access_failed_count(
        self, user: TUser, cancellation_token: Token = None
    ) -> int: ...

    @abstractmethod
    async def increment_access_failed_count(
        self, user: TUser, cancellation_token: Token = None
    ) -> int: ...

    @abstractmethod
    async def reset_access_failed_count(
        self, user: TUser, cancellation_token: Token = None
    ) -> None: ...

    @abstractmethod
    def close(self) -> None:
        """Mark the store closed; later calls raise StoreDisposedError."""


class UserClaimStore(ABC, Generic[TUser]):
    @abstractmethod
    async def get_claims(self, user: TUser, cancellation_token: Token = None) -> list[Claim]: ...

    @abstractmethod
    async def add_claims(
        self, user: TUser, claims: list[Claim], cancellation_token: Token = None
    ) -> None: ...

    @abstractmethod
    async def replace_claim(
        self, user: TUser, claim: Claim, new_claim: Claim, cancellation_token: Token = None
    ) -> None: ...

    @abstractmethod
    async def remove_claims(
        self, user: TUser, claims: list[Claim], cancellation_token: Token = None
    ) -> None: ...

    @abstractmethod
    async def get_users_for_claim(
        self, claim: Claim, cancellation_token: Token = None
    ) -> list[TUser]:
        """All users holding a claim with the same type and value."""


class UserLoginStore(ABC, Generic[TUser]):
    @abstractmethod
    async def add_login(
        self, user: TUser, login: UserLoginInfo, cancellation_token: Token = None
    ) -> None: ...

    @abstractmethod
    async def remove_login(
        self,
        user: TUser,
        login_provider: str,
        provider_key: str,
        cancellation_token: Token = None,
    ) -> None: ...

    @abstractmethod
    async def get_logins(
        self, user: TUser, cancellation_token: Token = None
    ) -> list[UserLoginInfo]: ...

    @abstractmethod
    async def find_by_login(
        self, login_provider: str, provider_key: str, cancellation_token: Token = None
    ) -> TUser | None:
        """The user owning a login; logins are unique store-wide."""

    @abstractmethod
    async def find_user_login(
        self,
        user_id: Any | None,
        login_provider: str,
        provider_key: str,
        cancellation_token: Token = None,
    ) -> UserLoginMatch | None:
        """Locate one login row, optionally scoped to a single user."""


class UserTokenStore(ABC, Generic[TUser]):
    @abstractmethod
    async def set_token(
        self,
        user: TUser,
        login_provider: str,
        name: str,
        value: str | None,
        cancellation_token: Token = None,
    ) -> None: ...

    @abstractmethod
    async def remove_token(
        self, user: TUser, login_provider: str, name: str, cancellation_token: Token = None
    ) -> None: ...

    @abstractmethod
    async def find_token(
        self, user: TUser, login_provider: str, name: str, cancellation_token: Token = None
    ) -> UserToken | None: ...

    @abstractmethod
    async def get_token(
        self, user: TUser, login_provider: str, name: str, cancellation_token: Token = None
    ) -> str | None: ...

    @abstractmethod
    async def get_authenticator_key(
        self, user: TUser, cancellation_token: Token = None
    ) -> str | None: ...

    @abstractmethod
    async def set_authenticator_key(
        self, user: TUser, key: str, cancellation_token: Token = None
    ) -> None: ...

    @abstractmethod
    async def replace_codes(
        self, user: TUser, recovery_codes: list[str], cancellation_token: Token = None
    ) -> None: ...

    @abstractmethod
    async def redeem_code(
        self, user: TUser, code: str, cancellation_token: Token = None
    ) -> bool: ...

    @abstractmethod
    async def count_codes(self, user: TUser, cancellation_token: Token = None) -> int: ...


class UserRoleStore(ABC, Generic[TUser]):
    @abstractmethod
    async def add_to_role(
        self, user: TUser, normalized_role_name: str, cancellation_token: Token = None
    ) -> None: ...

    @abstractmethod
    async def remove_from_role(
        self, user: TUser, normalized_role_name: str, cancellation_token: Token = None
    ) -> None: ...

    @abstractmethod
    async def get_roles(self, user: TUser, cancellation_token: Token = None) -> list[str]: ...

    @abstractmethod
    async def is_in_role(
        self, user: TUser, normalized_role_name: str, cancellation_token: Token = None
    ) -> bool: ...

    @abstractmethod
    async def get_users_in_role(
        self, normalized_role_name: str, cancellation_token: Token = None
    ) -> list[TUser]: ...

    @abstractmethod
    async def find_user_role(
        self, user_id: Any, role_id: Any, cancellation_token: Token = None
    ) -> UserRoleMatch | None: ...
