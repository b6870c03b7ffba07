from abc import ABC, abstractmethod
from typing import List

from ..models.event import DeviceEvent
from ..models.time_window import EventTimeWindow


class EventRepository(ABC):
    """Repository interface - defines contract for device event data access"""

    @abstractmethod
    async def create(self, event: DeviceEvent) -> DeviceEvent:
        """Append event and return it with ID set"""
        pass

    @abstractmethod
    async def list_for_device(self, device_id: str, window: EventTimeWindow) -> List[DeviceEvent]:
        """Events of a device whose happened_at falls in window, oldest first"""
        pass

    @abstractmethod
    async def delete_for_device(self, device_id: str) -> int:
        """Delete all events of a device; returns the number removed"""
        pass
