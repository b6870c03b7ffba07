from .user_repository import UserRepository
from .device_repository import DeviceRepository
from .ownership_registry import OwnershipRegistry
from .event_repository import EventRepository

__all__ = ["UserRepository", "DeviceRepository", "OwnershipRegistry", "EventRepository"]
