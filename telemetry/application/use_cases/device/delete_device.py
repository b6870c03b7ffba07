# Standard library imports
import logging

# Local application imports
from ....domain.repositories.device_repository import DeviceRepository
from ....domain.repositories.event_repository import EventRepository
from ....domain.repositories.ownership_registry import OwnershipRegistry
from ...services.device_gatekeeper import DeviceGateKeeper

logger = logging.getLogger(__name__)


class DeleteDeviceUseCase:
    """Use case for deleting an owned device together with its events and links"""

    def __init__(
        self,
        device_repository: DeviceRepository,
        event_repository: EventRepository,
        ownership_registry: OwnershipRegistry,
        gatekeeper: DeviceGateKeeper,
    ) -> None:
        self.device_repository = device_repository
        self.event_repository = event_repository
        self.ownership_registry = ownership_registry
        self.gatekeeper = gatekeeper

    async def execute(self, device_id: str, owner_user_id: str) -> None:
        """
        Delete a device owned by the user

        Links are removed last: while any link remains the caller still passes
        the ownership check, so re-running after a partial failure finishes the
        cascade instead of leaving an unreachable device behind.

        Raises:
            NotFoundError: If the device does not exist or is not owned by the user
        """
        await self.gatekeeper.require_ownership(owner_user_id, device_id)

        removed_events = await self.event_repository.delete_for_device(device_id)
        await self.device_repository.delete(device_id)
        removed_links = await self.ownership_registry.unlink_device(device_id)

        logger.info(
            f"Deleted device {device_id} for user {owner_user_id} "
            f"({removed_events} events, {removed_links} ownership links)"
        )
