# Standard library imports
import logging
from typing import Any, Dict, Optional, Set

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...domain.repositories.ownership_registry import OwnershipRegistry
from ...domain.constants import OwnershipFields
from ...domain.exceptions import StorageError
from ...utils.datetime_utils import utc_now
from .mongo_connection import get_ownership_collection

logger = logging.getLogger(__name__)


class MongoOwnershipRegistry(OwnershipRegistry):
    """MongoDB implementation of OwnershipRegistry (one document per link)"""

    def __init__(self, ownership_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.ownership_collection = (
            ownership_collection if ownership_collection is not None else get_ownership_collection()
        )

    async def link(self, user_id: str, device_id: str) -> None:
        """
        Upsert the (user_id, device_id) link.

        Two concurrent upserts of the same new pair can both miss the filter;
        the unique index rejects the second insert, and that outcome is the
        state we wanted anyway.
        """
        try:
            await self.ownership_collection.update_one(
                self._link_filter(user_id, device_id),
                {"$setOnInsert": {OwnershipFields.CREATED_AT: utc_now()}},
                upsert=True,
            )
        except DuplicateKeyError:
            logger.debug(f"Ownership link {user_id}/{device_id} inserted concurrently")
        except PyMongoError as e:
            logger.error(f"Error linking device: {e}", exc_info=True)
            raise StorageError("Error linking device") from e

    async def unlink(self, user_id: str, device_id: str) -> None:
        try:
            await self.ownership_collection.delete_one(self._link_filter(user_id, device_id))
        except PyMongoError as e:
            logger.error(f"Error unlinking device: {e}", exc_info=True)
            raise StorageError("Error unlinking device") from e

    async def unlink_device(self, device_id: str) -> int:
        try:
            result = await self.ownership_collection.delete_many({OwnershipFields.DEVICE_ID: device_id})
        except PyMongoError as e:
            logger.error(f"Error unlinking device owners: {e}", exc_info=True)
            raise StorageError("Error unlinking device") from e
        return result.deleted_count

    async def devices_of(self, user_id: str) -> Set[str]:
        if not user_id:
            return set()

        try:
            cursor = self.ownership_collection.find(
                {OwnershipFields.USER_ID: user_id},
                {OwnershipFields.DEVICE_ID: 1},
            )
            device_ids: Set[str] = set()
            async for document in cursor:
                device_ids.add(document[OwnershipFields.DEVICE_ID])
            return device_ids
        except PyMongoError as e:
            logger.error(f"Error listing owned devices: {e}", exc_info=True)
            raise StorageError("Error listing devices") from e

    async def is_owner(self, user_id: str, device_id: str) -> bool:
        if not user_id or not device_id:
            return False

        try:
            document = await self.ownership_collection.find_one(
                self._link_filter(user_id, device_id),
                {OwnershipFields.MONGO_ID: 1},
            )
        except PyMongoError as e:
            logger.error(f"Error checking device ownership: {e}", exc_info=True)
            raise StorageError("Error checking device ownership") from e
        return document is not None

    @staticmethod
    def _link_filter(user_id: str, device_id: str) -> Dict[str, Any]:
        return {OwnershipFields.USER_ID: user_id, OwnershipFields.DEVICE_ID: device_id}
