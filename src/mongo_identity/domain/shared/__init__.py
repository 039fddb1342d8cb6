"""Shared domain helpers."""

from mongo_identity.domain.shared.time import ensure_tz_aware

__all__ = ["ensure_tz_aware"]
