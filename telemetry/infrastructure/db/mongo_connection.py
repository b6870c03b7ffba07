# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING, IndexModel

# Local application imports
from ...core.config import Settings, get_settings
from ...domain.constants import DeviceFields, EventFields, OwnershipFields, UserFields

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"
DEVICES_COLLECTION = "devices"
OWNERSHIPS_COLLECTION = "user_devices"
EVENTS_COLLECTION = "device_events"


# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database(settings: Optional[Settings] = None) -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    Args:
        settings: Connection settings; the process-wide settings when omitted

    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = settings or get_settings()
    # tz_aware so datetimes read back compare correctly with query bounds
    _mongo_client = AsyncIOMotorClient(settings.mongo_uri, tz_aware=True)
    _mongo_database = _mongo_client[settings.mongo_database_name]
    return _mongo_database


def close_database() -> None:
    """Close the MongoDB client if one was opened"""
    global _mongo_client, _mongo_database
    if _mongo_client is not None:
        _mongo_client.close()
    _mongo_client = None
    _mongo_database = None


def get_user_collection() -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB

    Returns:
        MongoDB collection for users
    """
    return get_database()[USERS_COLLECTION]


def get_device_collection() -> AsyncIOMotorCollection:
    """
    Get devices collection from MongoDB

    Returns:
        MongoDB collection for devices
    """
    return get_database()[DEVICES_COLLECTION]


def get_ownership_collection() -> AsyncIOMotorCollection:
    """
    Get user/device ownership link collection from MongoDB

    Returns:
        MongoDB collection for ownership links
    """
    return get_database()[OWNERSHIPS_COLLECTION]


def get_event_collection() -> AsyncIOMotorCollection:
    """
    Get device events collection from MongoDB

    Returns:
        MongoDB collection for device events
    """
    return get_database()[EVENTS_COLLECTION]


async def ensure_indexes(database: AsyncIOMotorDatabase) -> None:
    """
    Create the indexes the repositories rely on.

    The unique indexes are what turns a concurrent duplicate insert into a
    DuplicateKeyError, which the repositories report as ConflictError.
    """
    await database[USERS_COLLECTION].create_indexes([
        IndexModel([(UserFields.EMAIL, ASCENDING)], unique=True, name="uniq_email"),
    ])
    await database[DEVICES_COLLECTION].create_indexes([
        IndexModel([(DeviceFields.SERIAL_NUMBER, ASCENDING)], unique=True, name="uniq_serial_number"),
    ])
    await database[OWNERSHIPS_COLLECTION].create_indexes([
        IndexModel(
            [(OwnershipFields.USER_ID, ASCENDING), (OwnershipFields.DEVICE_ID, ASCENDING)],
            unique=True,
            name="uniq_user_device",
        ),
        IndexModel([(OwnershipFields.DEVICE_ID, ASCENDING)], name="device_owners"),
    ])
    await database[EVENTS_COLLECTION].create_indexes([
        IndexModel(
            [(EventFields.DEVICE_ID, ASCENDING), (EventFields.HAPPENED_AT, ASCENDING)],
            name="device_happened_at",
        ),
    ])
    logger.info(f"MongoDB indexes ensured on database {database.name}")
