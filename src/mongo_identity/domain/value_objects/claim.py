"""Claim value object embedded in users and roles."""

from dataclasses import dataclass


class ClaimValueTypes:
    """Well-known claim value types."""

    STRING = "http://www.w3.org/2001/XMLSchema#string"


DEFAULT_ISSUER = "LOCAL AUTHORITY"


@dataclass
class Claim:
    """A claim owned by exactly one user or role.

    Lookups match on ``(type, value)`` only; ``value_type`` and ``issuer``
    take part in full structural equality.
    """

    type: str
    value: str
    value_type: str = ClaimValueTypes.STRING
    issuer: str = DEFAULT_ISSUER

    def matches(self, type: str, value: str) -> bool:
        return self.type == type and self.value == value
