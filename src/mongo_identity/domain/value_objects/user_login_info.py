"""External login attached to a user."""

from dataclasses import dataclass


@dataclass
class UserLoginInfo:
    """Login information and source for a user record.

    ``(login_provider, provider_key)`` identifies at most one user in the
    whole store.
    """

    login_provider: str
    provider_key: str
    provider_display_name: str | None = None
