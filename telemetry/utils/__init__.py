"""Utility modules for the telemetry backend."""

from .datetime_utils import ensure_utc, parse_iso_instant, utc_now

__all__ = [
    "ensure_utc",
    "parse_iso_instant",
    "utc_now",
]
