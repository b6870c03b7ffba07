"""
Centralized DateTime Utilities
==============================

All timestamps handled by the backend are timezone-aware UTC datetimes.

Functions:
- utc_now(): current UTC time
- ensure_utc(): normalize a datetime read back from MongoDB to aware UTC
- parse_iso_instant(): strict ISO 8601 instant parsing (offset required)
"""
from datetime import datetime, timezone as dt_timezone
from typing import Optional


def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.

    Use this for all timestamps that will be persisted to MongoDB (BSON Date).
    """
    return datetime.now(dt_timezone.utc)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime into a timezone-aware UTC datetime.

    - If dt is None -> None
    - If dt is naive -> assume it represents UTC (this matches MongoDB/PyMongo behavior)
    - If dt is aware -> convert to UTC
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(dt_timezone.utc)


def parse_iso_instant(dt_str: str) -> datetime:
    """
    Parse an ISO 8601 instant ("2024-01-15T10:30:00Z", "2024-01-15T10:30:00+05:30").

    Args:
        dt_str: ISO 8601 string carrying a UTC designator or numeric offset

    Returns:
        timezone-aware datetime in UTC

    Raises:
        ValueError: If the string is not an ISO 8601 date-time or has no offset
    """
    normalized = dt_str.strip()
    if normalized.endswith(("Z", "z")):
        normalized = normalized[:-1] + "+00:00"
    # Date-only strings parse as midnight local; an instant needs a time part
    if "T" not in normalized and "t" not in normalized:
        raise ValueError(f"Not an ISO 8601 date-time: {dt_str!r}")

    dt = datetime.fromisoformat(normalized)
    if dt.tzinfo is None:
        raise ValueError(f"ISO 8601 instant must include a UTC offset: {dt_str!r}")
    return dt.astimezone(dt_timezone.utc)
