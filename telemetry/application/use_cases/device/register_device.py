# Standard library imports
import logging

# Local application imports
from ....domain.repositories.device_repository import DeviceRepository
from ....domain.repositories.ownership_registry import OwnershipRegistry
from ....application.services.device_provisioning import find_or_create_device
from ...dto.device_dto import DeviceCreateRequest, DeviceResponse

logger = logging.getLogger(__name__)


class RegisterDeviceUseCase:
    """Use case for a user claiming a device by serial number"""

    def __init__(
        self,
        device_repository: DeviceRepository,
        ownership_registry: OwnershipRegistry,
    ) -> None:
        self.device_repository = device_repository
        self.ownership_registry = ownership_registry

    async def execute(
        self,
        request: DeviceCreateRequest,
        owner_user_id: str,
    ) -> DeviceResponse:
        """
        Register a device for the current user

        The device row is created if absent (it may already exist from
        ingestion or another owner), then the caller is linked to it. Both
        steps are idempotent, so a retry after a partial failure converges to
        one device and one link.

        Args:
            request: Device registration request
            owner_user_id: ID of the user registering the device

        Returns:
            DeviceResponse with device information
        """
        device = await find_or_create_device(self.device_repository, request.serial_number)
        await self.ownership_registry.link(owner_user_id, device.id or "")

        logger.info(f"Linked device {device.id} to user {owner_user_id}")

        return DeviceResponse(
            id=device.id or "",
            serial_number=device.serial_number,
            created_at=device.created_at,
        )
