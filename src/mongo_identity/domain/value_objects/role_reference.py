"""Role membership snapshot embedded in a user."""

from dataclasses import dataclass
from typing import Generic, TypeVar

TKey = TypeVar("TKey")


@dataclass
class RoleReference(Generic[TKey]):
    """Denormalized copy of a role taken when the user joined it.

    Not refreshed when the source role is renamed.
    """

    id: TKey
    name: str | None = None
    normalized_name: str | None = None
