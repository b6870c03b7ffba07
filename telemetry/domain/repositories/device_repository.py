from abc import ABC, abstractmethod
from typing import Iterable, List, Optional
from ..models.device import Device


class DeviceRepository(ABC):
    """Repository interface - defines contract for device data access"""

    @abstractmethod
    async def find_by_id(self, device_id: str) -> Optional[Device]:
        """Find device by ID"""
        pass

    @abstractmethod
    async def find_by_serial_number(self, serial_number: str) -> Optional[Device]:
        """Find device by its serial number"""
        pass

    @abstractmethod
    async def find_by_ids(self, device_ids: Iterable[str]) -> List[Device]:
        """Find all devices whose ID is in device_ids"""
        pass

    @abstractmethod
    async def create(self, device: Device) -> Device:
        """Create device; raises ConflictError if the serial number exists"""
        pass

    @abstractmethod
    async def delete(self, device_id: str) -> bool:
        """Delete device; returns False if it did not exist"""
        pass
