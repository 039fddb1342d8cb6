"""In-memory external logins of a user."""

from dataclasses import replace
from typing import Protocol

from mongo_identity.domain.value_objects import UserLoginInfo


class LoginHolder(Protocol):
    logins: list[UserLoginInfo]


class UserLoginManager:
    """Manages the external logins of one user.

    Logins are identified by ``(login_provider, provider_key)``; a non-empty
    display name narrows lookups to entries with that display name.
    """

    def __init__(self, owner: LoginHolder) -> None:
        self._owner = owner

    @property
    def _logins(self) -> list[UserLoginInfo]:
        return self._owner.logins

    def _matches(
        self,
        login: UserLoginInfo,
        login_provider: str,
        provider_key: str,
        display_name: str | None,
    ) -> bool:
        if login.login_provider != login_provider or login.provider_key != provider_key:
            return False
        return not display_name or login.provider_display_name == display_name

    def has(
        self,
        login_provider: str,
        provider_key: str,
        display_name: str | None = None,
    ) -> bool:
        return any(
            self._matches(login, login_provider, provider_key, display_name)
            for login in self._logins
        )

    def find(
        self,
        login_provider: str,
        provider_key: str,
        display_name: str | None = None,
    ) -> UserLoginInfo | None:
        return next(
            (
                login
                for login in self._logins
                if self._matches(login, login_provider, provider_key, display_name)
            ),
            None,
        )

    def try_add(
        self,
        login_provider: str,
        provider_key: str,
        display_name: str | None = None,
    ) -> bool:
        if self.has(login_provider, provider_key):
            return False

        self._logins.append(
            UserLoginInfo(
                login_provider=login_provider,
                provider_key=provider_key,
                provider_display_name=display_name,
            )
        )
        return True

    def try_remove(self, login_provider: str, provider_key: str) -> bool:
        kept = [
            login
            for login in self._logins
            if not self._matches(login, login_provider, provider_key, None)
        ]
        if len(kept) == len(self._logins):
            return False

        self._logins[:] = kept
        return True

    def get_all(self) -> list[UserLoginInfo]:
        return [replace(login) for login in self._logins]
