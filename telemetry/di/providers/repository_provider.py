from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.device_repository import DeviceRepository
from ...domain.repositories.ownership_registry import OwnershipRegistry
from ...domain.repositories.event_repository import EventRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository
from ...infrastructure.db.mongo_device_repository import MongoDeviceRepository
from ...infrastructure.db.mongo_ownership_registry import MongoOwnershipRegistry
from ...infrastructure.db.mongo_event_repository import MongoEventRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets collections from database provider and creates repository instances.
        """
        container.register_singleton(
            UserRepository,
            MongoUserRepository(user_collection=container.get("user_collection"))
        )

        container.register_singleton(
            DeviceRepository,
            MongoDeviceRepository(device_collection=container.get("device_collection"))
        )

        container.register_singleton(
            OwnershipRegistry,
            MongoOwnershipRegistry(ownership_collection=container.get("ownership_collection"))
        )

        container.register_singleton(
            EventRepository,
            MongoEventRepository(event_collection=container.get("event_collection"))
        )
