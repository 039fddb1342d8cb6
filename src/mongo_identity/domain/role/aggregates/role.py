"""Role aggregate."""

from typing import Any, Generic, Iterable, TypeVar
from uuid import UUID, uuid4

from bson import ObjectId

from mongo_identity.domain.managers import ClaimManager
from mongo_identity.domain.value_objects import Claim

TKey = TypeVar("TKey")


class IdentityRole(Generic[TKey]):
    """
    Role aggregate root.

    Persisted as one document holding the role's scalar fields and its
    embedded claims. Applications subclass it with a concrete key type,
    e.g. ``class AppRole(IdentityRole[str])``; the store builder reads that
    type argument to pick the matching store.
    """

    def __init__(
        self,
        name: str | None = None,
        id: TKey | None = None,
        normalized_name: str | None = None,
        concurrency_stamp: str | None = None,
        claims: Iterable[Claim] | None = None,
    ):
        self.id = id if id is not None else self.new_id()
        self.name = name
        self.normalized_name = normalized_name
        self.concurrency_stamp = concurrency_stamp or str(uuid4())
        self.claims: list[Claim] = list(claims) if claims else []
        self.claim_manager = ClaimManager(self)

    @classmethod
    def new_id(cls) -> Any:
        """Key assigned to roles created without an explicit id."""
        return None

    @classmethod
    def reconstitute(cls, **fields: Any) -> "IdentityRole[TKey]":
        return cls(**fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IdentityRole):
            return NotImplemented
        if self.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id) if self.id is not None else id(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id}, name={self.name})"


class IdentityRoleAsGuid(IdentityRole[UUID]):
    """Role keyed by a random UUID."""

    @classmethod
    def new_id(cls) -> UUID:
        return uuid4()


class IdentityRoleAsObjectId(IdentityRole[ObjectId]):
    """Role keyed by a BSON ObjectId."""

    @classmethod
    def new_id(cls) -> ObjectId:
        return ObjectId()
