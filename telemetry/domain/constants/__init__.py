"""Constants for domain model field names"""

from .user_fields import UserFields
from .device_fields import DeviceFields
from .ownership_fields import OwnershipFields
from .event_fields import EventFields

__all__ = [
    "UserFields",
    "DeviceFields",
    "OwnershipFields",
    "EventFields",
]
