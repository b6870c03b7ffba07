from .mongo_connection import (
    close_database,
    ensure_indexes,
    get_database,
    get_device_collection,
    get_event_collection,
    get_ownership_collection,
    get_user_collection,
)
from .mongo_user_repository import MongoUserRepository
from .mongo_device_repository import MongoDeviceRepository
from .mongo_ownership_registry import MongoOwnershipRegistry
from .mongo_event_repository import MongoEventRepository

__all__ = [
    "close_database",
    "ensure_indexes",
    "get_database",
    "get_device_collection",
    "get_event_collection",
    "get_ownership_collection",
    "get_user_collection",
    "MongoUserRepository",
    "MongoDeviceRepository",
    "MongoOwnershipRegistry",
    "MongoEventRepository",
]
