from abc import ABC, abstractmethod
from typing import Set


class OwnershipRegistry(ABC):
    """
    Sole owner of the user/device link lifecycle.

    link and unlink are idempotent: repeating either leaves the same state
    and raises nothing.
    """

    @abstractmethod
    async def link(self, user_id: str, device_id: str) -> None:
        """Record that user_id owns device_id"""
        pass

    @abstractmethod
    async def unlink(self, user_id: str, device_id: str) -> None:
        """Remove the link between user_id and device_id if present"""
        pass

    @abstractmethod
    async def unlink_device(self, device_id: str) -> int:
        """Remove every link to device_id; returns the number removed"""
        pass

    @abstractmethod
    async def devices_of(self, user_id: str) -> Set[str]:
        """IDs of all devices linked to user_id"""
        pass

    @abstractmethod
    async def is_owner(self, user_id: str, device_id: str) -> bool:
        """Whether a link between user_id and device_id exists"""
        pass
