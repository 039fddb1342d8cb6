"""Authentication token stored on a user."""

from dataclasses import dataclass


@dataclass
class UserToken:
    """A token issued by a login provider.

    Unique per user on ``(login_provider, name)``.
    """

    login_provider: str
    name: str
    value: str | None = None
