"""Cancellation tokens accepted by every store operation."""

import time

from mongo_identity.exceptions import OperationCancelledError


class CancellationToken:
    """Cooperative cancellation signal with an optional deadline.

    Stores check the token once at entry, before any database call.
    The deadline is measured on the monotonic clock.
    """

    def __init__(self, deadline: float | None = None) -> None:
        self._deadline = deadline
        self._cancelled = False

    @classmethod
    def with_timeout(cls, seconds: float) -> "CancellationToken":
        return cls(deadline=time.monotonic() + seconds)

    @property
    def deadline(self) -> float | None:
        return self._deadline

    @property
    def is_cancellation_requested(self) -> bool:
        if self._cancelled:
            return True
        return self._deadline is not None and time.monotonic() >= self._deadline

    def cancel(self) -> None:
        self._cancelled = True

    def raise_if_cancellation_requested(self) -> None:
        if self._cancelled:
            raise OperationCancelledError()
        if self._deadline is not None and time.monotonic() >= self._deadline:
            raise OperationCancelledError("The operation deadline has expired")

    def __repr__(self) -> str:
        return (
            f"CancellationToken(deadline={self._deadline}, "
            f"cancelled={self._cancelled})"
        )
