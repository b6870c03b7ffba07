# Standard library imports
import logging
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.event_repository import EventRepository
from ...domain.models.event import DeviceEvent
from ...domain.models.time_window import EventTimeWindow
from ...domain.constants import EventFields
from ...domain.exceptions import StorageError
from ...utils.datetime_utils import ensure_utc, utc_now
from .mongo_connection import get_event_collection

logger = logging.getLogger(__name__)


def build_event_query(device_id: str, window: EventTimeWindow) -> Dict[str, Any]:
    """Render a device ID and time window as a MongoDB filter"""
    query: Dict[str, Any] = {EventFields.DEVICE_ID: device_id}
    if window.is_unbounded:
        return query

    happened_at_query: Dict[str, Any] = {}
    if window.start is not None:
        happened_at_query["$gte"] = window.start
    if window.end is not None:
        happened_at_query["$lte"] = window.end
    query[EventFields.HAPPENED_AT] = happened_at_query
    return query


class MongoEventRepository(EventRepository):
    """MongoDB implementation of EventRepository"""

    def __init__(self, event_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.event_collection = event_collection if event_collection is not None else get_event_collection()

    async def create(self, event: DeviceEvent) -> DeviceEvent:
        if not event:
            raise ValueError("Event cannot be None")

        doc = {
            EventFields.DEVICE_ID: event.device_id,
            EventFields.MAC_ADDRESS: event.mac_address,
            EventFields.IP_ADDRESS: event.ip_address,
            EventFields.SOIL_MOISTURE: event.soil_moisture,
            EventFields.HUMIDITY: event.humidity,
            EventFields.TEMPERATURE: event.temperature,
            EventFields.LIGHT_INTENSITY: event.light_intensity,
            EventFields.HAPPENED_AT: event.happened_at,
            EventFields.CREATED_AT: event.created_at or utc_now(),
        }

        try:
            result = await self.event_collection.insert_one(doc)
        except PyMongoError as e:
            logger.error(f"Error saving device event: {e}", exc_info=True)
            raise StorageError("Error saving device event") from e

        doc[EventFields.MONGO_ID] = result.inserted_id
        return self._document_to_event(doc)

    async def list_for_device(self, device_id: str, window: EventTimeWindow) -> List[DeviceEvent]:
        query = build_event_query(device_id, window)

        try:
            cursor = self.event_collection.find(query).sort(
                [(EventFields.HAPPENED_AT, 1), (EventFields.CREATED_AT, 1)]
            )
            items: List[DeviceEvent] = []
            async for doc in cursor:
                items.append(self._document_to_event(doc))
            return items
        except PyMongoError as e:
            logger.error(f"Error listing device events: {e}", exc_info=True)
            raise StorageError("Error listing device events") from e

    async def delete_for_device(self, device_id: str) -> int:
        try:
            result = await self.event_collection.delete_many({EventFields.DEVICE_ID: device_id})
        except PyMongoError as e:
            logger.error(f"Error deleting device events: {e}", exc_info=True)
            raise StorageError("Error deleting device events") from e
        return result.deleted_count

    def _document_to_event(self, doc: dict) -> DeviceEvent:
        return DeviceEvent(
            id=str(doc.get(EventFields.MONGO_ID)),
            device_id=doc.get(EventFields.DEVICE_ID) or "",
            mac_address=doc.get(EventFields.MAC_ADDRESS) or "",
            ip_address=doc.get(EventFields.IP_ADDRESS) or "",
            soil_moisture=doc.get(EventFields.SOIL_MOISTURE),
            humidity=doc.get(EventFields.HUMIDITY),
            temperature=doc.get(EventFields.TEMPERATURE),
            light_intensity=doc.get(EventFields.LIGHT_INTENSITY),
            happened_at=ensure_utc(doc.get(EventFields.HAPPENED_AT)),
            created_at=ensure_utc(doc.get(EventFields.CREATED_AT)),
        )
