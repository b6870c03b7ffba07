# Standard library imports
import logging

# Local application imports
from ....domain.repositories.ownership_registry import OwnershipRegistry
from ...services.device_gatekeeper import DeviceGateKeeper

logger = logging.getLogger(__name__)


class ReleaseDeviceUseCase:
    """Use case for a user giving up ownership of a device without deleting it"""

    def __init__(self, ownership_registry: OwnershipRegistry, gatekeeper: DeviceGateKeeper) -> None:
        self.ownership_registry = ownership_registry
        self.gatekeeper = gatekeeper

    async def execute(self, device_id: str, owner_user_id: str) -> None:
        """
        Raises:
            NotFoundError: If the user does not own the device
        """
        await self.gatekeeper.require_ownership(owner_user_id, device_id)

        await self.ownership_registry.unlink(owner_user_id, device_id)
        logger.info(f"User {owner_user_id} released device {device_id}")
