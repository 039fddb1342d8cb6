"""In-memory tokens of a user."""

from dataclasses import replace
from typing import Protocol

from mongo_identity.domain.value_objects import UserToken


class TokenHolder(Protocol):
    tokens: list[UserToken]


class TokenManager:
    """Manages the tokens of one user.

    Tokens are identified by ``(login_provider, name)``. Lookups that pass a
    non-empty ``value`` also require the value to match; an empty or missing
    value matches on the identifying pair only.
    """

    def __init__(self, owner: TokenHolder) -> None:
        self._owner = owner

    @property
    def _tokens(self) -> list[UserToken]:
        return self._owner.tokens

    def _matches(
        self,
        token: UserToken,
        login_provider: str,
        name: str,
        value: str | None,
    ) -> bool:
        if token.login_provider != login_provider or token.name != name:
            return False
        return not value or token.value == value

    def has(self, login_provider: str, name: str, value: str | None = None) -> bool:
        return any(
            self._matches(token, login_provider, name, value) for token in self._tokens
        )

    def find(
        self,
        login_provider: str,
        name: str,
        value: str | None = None,
    ) -> UserToken | None:
        return next(
            (
                token
                for token in self._tokens
                if self._matches(token, login_provider, name, value)
            ),
            None,
        )

    def try_add(self, login_provider: str, name: str, value: str | None) -> bool:
        if self.has(login_provider, name):
            return False

        self._tokens.append(UserToken(login_provider=login_provider, name=name, value=value))
        return True

    def try_remove(
        self,
        login_provider: str,
        name: str,
        value: str | None = None,
    ) -> bool:
        kept = [
            token
            for token in self._tokens
            if not self._matches(token, login_provider, name, value)
        ]
        if len(kept) == len(self._tokens):
            return False

        self._tokens[:] = kept
        return True

    def try_replace(self, login_provider: str, name: str, new_value: str | None) -> bool:
        """Replace the value of the token stored under ``(login_provider, name)``."""
        replaced = False
        for token in self._tokens:
            if self._matches(token, login_provider, name, None):
                token.value = new_value
                replaced = True
        return replaced

    def get_all(self) -> list[UserToken]:
        return [replace(token) for token in self._tokens]
