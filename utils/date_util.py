from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """
    Normalise a datetime to aware UTC.

    Naive datetimes are assumed to already be UTC (SQLite hands back naive
    values for DateTime(timezone=True) columns).

    Examples:
        ensure_utc(datetime(2025, 1, 20, 5, 0))                       -> 2025-01-20 05:00:00+00:00
        ensure_utc(datetime(2025, 1, 20, 0, 0, tzinfo=EST))           -> 2025-01-20 05:00:00+00:00
        ensure_utc(None)                                              -> None
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
