"""Time utilities for the domain layer."""

from datetime import datetime, timezone


def ensure_tz_aware(dt: datetime | None) -> datetime | None:
    """Ensure datetime is timezone-aware (UTC if naive).

    MongoDB returns naive UTC datetimes unless the client is tz-aware.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt
