# Standard library imports
import logging
from typing import Any, Dict, Iterable, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...domain.repositories.device_repository import DeviceRepository
from ...domain.models.device import Device
from ...domain.constants import DeviceFields
from ...domain.exceptions import ConflictError, StorageError
from ...utils.datetime_utils import ensure_utc, utc_now
from .mongo_connection import get_device_collection

logger = logging.getLogger(__name__)


def _to_object_id(device_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(device_id)
    except (InvalidId, ValueError, TypeError):
        return None


class MongoDeviceRepository(DeviceRepository):
    """MongoDB implementation of DeviceRepository"""

    def __init__(self, device_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.device_collection = device_collection if device_collection is not None else get_device_collection()

    async def find_by_id(self, device_id: str) -> Optional[Device]:
        """Find device by ID"""
        object_id = _to_object_id(device_id) if device_id else None
        if object_id is None:
            return None

        try:
            document = await self.device_collection.find_one({DeviceFields.MONGO_ID: object_id})
        except PyMongoError as e:
            logger.error(f"Error finding device by ID: {e}", exc_info=True)
            raise StorageError("Error finding device") from e

        if document is None:
            return None
        return self._document_to_device(document)

    async def find_by_serial_number(self, serial_number: str) -> Optional[Device]:
        """Find device by its serial number"""
        if not serial_number:
            return None

        try:
            document = await self.device_collection.find_one({DeviceFields.SERIAL_NUMBER: serial_number})
        except PyMongoError as e:
            logger.error(f"Error finding device by serial number: {e}", exc_info=True)
            raise StorageError("Error finding device") from e

        if document is None:
            return None
        return self._document_to_device(document)

    async def find_by_ids(self, device_ids: Iterable[str]) -> List[Device]:
        """Find all devices whose ID is in device_ids, oldest first"""
        object_ids = [oid for oid in (_to_object_id(device_id) for device_id in device_ids) if oid is not None]
        if not object_ids:
            return []

        try:
            cursor = self.device_collection.find(
                {DeviceFields.MONGO_ID: {"$in": object_ids}}
            ).sort(DeviceFields.CREATED_AT, 1)
            devices = []
            async for document in cursor:
                devices.append(self._document_to_device(document))
            return devices
        except PyMongoError as e:
            logger.error(f"Error listing devices: {e}", exc_info=True)
            raise StorageError("Error listing devices") from e

    async def create(self, device: Device) -> Device:
        """Insert a new device; ConflictError if the serial number is taken"""
        if not device:
            raise ValueError("Device cannot be None")

        device_dict = self._device_to_dict(device)
        device_dict[DeviceFields.CREATED_AT] = device.created_at or utc_now()

        try:
            result = await self.device_collection.insert_one(device_dict)
        except DuplicateKeyError as e:
            raise ConflictError("Device already exists") from e
        except PyMongoError as e:
            logger.error(f"Error saving device: {e}", exc_info=True)
            raise StorageError("Error saving device") from e

        device_dict[DeviceFields.MONGO_ID] = result.inserted_id
        return self._document_to_device(device_dict)

    async def delete(self, device_id: str) -> bool:
        """Delete device by ID"""
        object_id = _to_object_id(device_id) if device_id else None
        if object_id is None:
            return False

        try:
            result = await self.device_collection.delete_one({DeviceFields.MONGO_ID: object_id})
        except PyMongoError as e:
            logger.error(f"Error deleting device: {e}", exc_info=True)
            raise StorageError("Error deleting device") from e
        return result.deleted_count > 0

    def _document_to_device(self, document: Dict[str, Any]) -> Device:
        """Convert MongoDB document to Device domain model"""
        if not document or DeviceFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return Device(
            id=str(document[DeviceFields.MONGO_ID]),
            serial_number=document.get(DeviceFields.SERIAL_NUMBER, ""),
            created_at=ensure_utc(document.get(DeviceFields.CREATED_AT)),
        )

    def _device_to_dict(self, device: Device) -> Dict[str, Any]:
        """Convert Device domain model to MongoDB document"""
        return {
            DeviceFields.SERIAL_NUMBER: device.serial_number,
        }
