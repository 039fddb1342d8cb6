"""In-memory set operations over an aggregate's claims."""

from dataclasses import replace
from typing import Iterable, Protocol

from mongo_identity.domain.value_objects import Claim


class Claimable(Protocol):
    """Anything owning an embedded list of claims (users and roles)."""

    claims: list[Claim]


class ClaimManager:
    """Manages the claims of one user or role.

    Reads the owner's list on every call, so mutations are applied to the
    aggregate itself. Entries are matched on ``(type, value)``.
    """

    def __init__(self, owner: Claimable) -> None:
        self._owner = owner

    @property
    def _claims(self) -> list[Claim]:
        return self._owner.claims

    def find_by(self, type: str, value: str) -> list[Claim]:
        """Return every claim matching ``(type, value)``."""
        return [claim for claim in self._claims if claim.matches(type, value)]

    def has(self, type: str, value: str) -> bool:
        return any(claim.matches(type, value) for claim in self._claims)

    def find(self, type: str, value: str) -> Claim | None:
        return next(
            (claim for claim in self._claims if claim.matches(type, value)),
            None,
        )

    def try_add(
        self,
        type: str,
        value: str,
        value_type: str | None = None,
        issuer: str | None = None,
    ) -> bool:
        """Append a claim unless one with the same ``(type, value)`` exists."""
        if self.has(type, value):
            return False

        claim = Claim(type=type, value=value)
        if value_type is not None:
            claim.value_type = value_type
        if issuer is not None:
            claim.issuer = issuer

        self._claims.append(claim)
        return True

    def try_add_many(self, claims: Iterable[Claim]) -> bool:
        """Add each claim; ``True`` if at least one was added."""
        added = False
        for claim in claims:
            if self.try_add(claim.type, claim.value, claim.value_type, claim.issuer):
                added = True
        return added

    def try_remove(self, claim: Claim) -> bool:
        return self.try_remove_many([claim])

    def try_remove_many(self, claims: Iterable[Claim]) -> bool:
        """Remove all entries matching any of ``claims`` on ``(type, value)``."""
        keys = {(claim.type, claim.value) for claim in claims}
        kept = [claim for claim in self._claims if (claim.type, claim.value) not in keys]
        removed = len(self._claims) - len(kept)
        if removed:
            self._claims[:] = kept
        return removed > 0

    def try_replace(self, claim: Claim, new_claim: Claim) -> bool:
        """Overwrite every field of all entries matching ``claim``.

        Duplicate ``(type, value)`` rows are all rewritten as one edit.
        """
        matches = self.find_by(claim.type, claim.value)
        if not matches:
            return False

        for match in matches:
            match.type = new_claim.type
            match.value = new_claim.value
            match.value_type = new_claim.value_type
            match.issuer = new_claim.issuer

        return True

    def get_all(self) -> list[Claim]:
        """Snapshot of the claims; editing it does not touch the aggregate."""
        return [replace(claim) for claim in self._claims]
