"""Identity store exceptions.

These exceptions are raised by the mongo_identity stores and the store
builder. Argument, cancellation and disposal errors are raised at the store
boundary before any database call is made; failed writes are reported as
``IdentityResult`` values instead (see ``mongo_identity.schemas``).
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for callers of the stores."""

    INVALID_ARGUMENT = "InvalidArgument"
    INVALID_KEY = "InvalidKey"
    CANCELLED = "Cancelled"
    DISPOSED = "Disposed"
    CREATE_ERROR = "CreateError"
    UPDATE_ERROR = "UpdateError"
    DELETE_ERROR = "DeleteError"
    CONFIGURATION_ERROR = "ConfigurationError"
    USER_NOT_FOUND = "UserNotFound"
    ROLE_NOT_FOUND = "RoleNotFound"


class IdentityStoreError(Exception):
    """Base exception for all identity store errors.

    Attributes
    ----------
    message
        Human-readable error message
    code
        Stable error code for programmatic handling
    details
        Optional additional context
    """

    default_code = ErrorCode.INVALID_ARGUMENT

    def __init__(
        self,
        message: str,
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class InvalidArgumentError(IdentityStoreError, ValueError):
    """Raised when a required argument is missing or blank."""

    def __init__(self, argument: str, message: str | None = None) -> None:
        self.argument = argument
        super().__init__(
            message or f"Argument '{argument}' must not be empty",
            details={"argument": argument},
        )


class InvalidKeyError(InvalidArgumentError):
    """Raised when an id string cannot be parsed into the store's key type."""

    default_code = ErrorCode.INVALID_KEY

    def __init__(self, value: Any, key_type: type) -> None:
        self.value = value
        self.key_type = key_type
        super().__init__(
            "id",
            f"'{value}' is not a valid {key_type.__name__} key",
        )


class OperationCancelledError(IdentityStoreError):
    """Raised when a store operation observes a cancelled or expired token."""

    default_code = ErrorCode.CANCELLED

    def __init__(self, message: str = "The operation was cancelled") -> None:
        super().__init__(message)


class StoreDisposedError(IdentityStoreError):
    """Raised when a store is used after it has been closed."""

    default_code = ErrorCode.DISPOSED

    def __init__(self, store_name: str) -> None:
        self.store_name = store_name
        super().__init__(f"Cannot access a closed store: {store_name}")


class PersistenceError(IdentityStoreError):
    """Raised when the database does not acknowledge a write."""

    default_code = ErrorCode.CREATE_ERROR


class ConfigurationError(IdentityStoreError):
    """Raised at startup when store types cannot be resolved.

    Never raised at request time.
    """

    default_code = ErrorCode.CONFIGURATION_ERROR


class UserNotFoundError(IdentityStoreError):
    """The owning user of a token no longer exists in the store."""

    default_code = ErrorCode.USER_NOT_FOUND

    def __init__(self, user_id: Any) -> None:
        self.user_id = user_id
        super().__init__(f"User {user_id} doesn't exist")


class RoleNotFoundError(IdentityStoreError):
    """A role referenced by normalized name does not exist."""

    default_code = ErrorCode.ROLE_NOT_FOUND

    def __init__(self, normalized_role_name: str) -> None:
        self.normalized_role_name = normalized_role_name
        super().__init__(f"Role {normalized_role_name} doesn't exist")
