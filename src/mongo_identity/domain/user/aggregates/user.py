"""User aggregate."""

from datetime import datetime
from typing import Any, Generic, Iterable, TypeVar
from uuid import UUID, uuid4

from bson import ObjectId

from mongo_identity.domain.managers import (
    ClaimManager,
    RoleManager,
    TokenManager,
    UserLoginManager,
)
from mongo_identity.domain.value_objects import (
    Claim,
    RoleReference,
    UserLoginInfo,
    UserToken,
)

TKey = TypeVar("TKey")


class IdentityUser(Generic[TKey]):
    """
    User aggregate root.

    Holds the user's scalar identity fields plus four embedded collections
    (claims, role references, logins, tokens), each behind its own manager.
    The collections are ordered lists that behave as sets keyed by the
    entry's identifying fields.

    ``concurrency_stamp`` is stored and round-tripped but never compared.
    """

    def __init__(
        self,
        user_name: str | None = None,
        id: TKey | None = None,
        normalized_user_name: str | None = None,
        email: str | None = None,
        normalized_email: str | None = None,
        email_confirmed: bool = False,
        password_hash: str | None = None,
        security_stamp: str | None = None,
        concurrency_stamp: str | None = None,
        phone_number: str | None = None,
        phone_number_confirmed: bool = False,
        two_factor_enabled: bool = False,
        lockout_end: datetime | None = None,
        lockout_enabled: bool = False,
        access_failed_count: int = 0,
        claims: Iterable[Claim] | None = None,
        roles: Iterable[RoleReference[TKey]] | None = None,
        logins: Iterable[UserLoginInfo] | None = None,
        tokens: Iterable[UserToken] | None = None,
    ):
        self.id = id if id is not None else self.new_id()
        self.user_name = user_name
        self.normalized_user_name = normalized_user_name
        self.email = email
        self.normalized_email = normalized_email
        self.email_confirmed = email_confirmed
        self.password_hash = password_hash
        self.security_stamp = security_stamp
        self.concurrency_stamp = concurrency_stamp or str(uuid4())
        self.phone_number = phone_number
        self.phone_number_confirmed = phone_number_confirmed
        self.two_factor_enabled = two_factor_enabled
        self.lockout_end = lockout_end
        self.lockout_enabled = lockout_enabled
        self.access_failed_count = access_failed_count

        self.claims: list[Claim] = list(claims) if claims else []
        self.roles: list[RoleReference[TKey]] = list(roles) if roles else []
        self.logins: list[UserLoginInfo] = list(logins) if logins else []
        self.tokens: list[UserToken] = list(tokens) if tokens else []

        self.claim_manager = ClaimManager(self)
        self.role_manager: RoleManager[TKey] = RoleManager(self)
        self.login_manager = UserLoginManager(self)
        self.token_manager = TokenManager(self)

    @classmethod
    def new_id(cls) -> Any:
        """Key assigned to users created without an explicit id."""
        return None

    @classmethod
    def reconstitute(cls, **fields: Any) -> "IdentityUser[TKey]":
        return cls(**fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IdentityUser):
            return NotImplemented
        if self.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id) if self.id is not None else id(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id}, user_name={self.user_name})"


class IdentityUserAsGuid(IdentityUser[UUID]):
    """User keyed by a random UUID."""

    @classmethod
    def new_id(cls) -> UUID:
        return uuid4()


class IdentityUserAsObjectId(IdentityUser[ObjectId]):
    """User keyed by a BSON ObjectId."""

    @classmethod
    def new_id(cls) -> ObjectId:
        return ObjectId()
