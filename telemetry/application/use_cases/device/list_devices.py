# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.device_repository import DeviceRepository
from ....domain.repositories.ownership_registry import OwnershipRegistry
from ...dto.device_dto import DeviceResponse


class ListDevicesUseCase:
    """Use case for listing all devices linked to a user"""

    def __init__(
        self,
        device_repository: DeviceRepository,
        ownership_registry: OwnershipRegistry,
    ) -> None:
        self.device_repository = device_repository
        self.ownership_registry = ownership_registry

    async def execute(
        self,
        owner_user_id: str,
    ) -> List[DeviceResponse]:
        """
        List all devices for a user

        Args:
            owner_user_id: ID of the user

        Returns:
            List of DeviceResponse objects
        """
        device_ids = await self.ownership_registry.devices_of(owner_user_id)
        if not device_ids:
            return []

        devices = await self.device_repository.find_by_ids(device_ids)

        return [
            DeviceResponse(
                id=device.id or "",
                serial_number=device.serial_number,
                created_at=device.created_at,
            )
            for device in devices
        ]
