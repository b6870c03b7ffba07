"""
Turns the optional start/end query parameters of the event listing into an
EventTimeWindow over DeviceEvent.happened_at.

| start | end | window                      |
|-------|-----|-----------------------------|
| -     | -   | unbounded (full history)    |
| x     | -   | happened_at >= x            |
| -     | y   | happened_at <= y            |
| x     | y   | x <= happened_at <= y       |
"""

# Standard library imports
from datetime import datetime
from typing import Optional

# Local application imports
from ...domain.exceptions import ValidationError
from ...domain.models.time_window import EventTimeWindow
from ...utils.datetime_utils import parse_iso_instant


def _parse_bound(name: str, value: Optional[str]) -> Optional[datetime]:
    if value is None:
        return None
    if not value.strip():
        raise ValidationError(f"{name} must be an ISO 8601 date-time")
    try:
        return parse_iso_instant(value)
    except ValueError as exception:
        raise ValidationError(f"{name} must be an ISO 8601 date-time with a UTC offset") from exception


def plan_event_window(start_date: Optional[str], end_date: Optional[str]) -> EventTimeWindow:
    """
    Build the happened_at window for an event query

    Args:
        start_date: Inclusive lower bound, ISO 8601 instant, or None
        end_date: Inclusive upper bound, ISO 8601 instant, or None

    Returns:
        EventTimeWindow in UTC. A start after the end yields a window that
        matches nothing.

    Raises:
        ValidationError: If a present bound is not a valid ISO 8601 instant
    """
    return EventTimeWindow(
        start=_parse_bound("startDate", start_date),
        end=_parse_bound("endDate", end_date),
    )
