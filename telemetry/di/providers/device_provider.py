from typing import TYPE_CHECKING
from ...domain.repositories.device_repository import DeviceRepository
from ...domain.repositories.event_repository import EventRepository
from ...domain.repositories.ownership_registry import OwnershipRegistry
from ...application.services.device_gatekeeper import DeviceGateKeeper
from ...application.use_cases.device.register_device import RegisterDeviceUseCase
from ...application.use_cases.device.list_devices import ListDevicesUseCase
from ...application.use_cases.device.delete_device import DeleteDeviceUseCase
from ...application.use_cases.device.release_device import ReleaseDeviceUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DeviceProvider:
    """Device use case provider - registers all device-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all device use cases.
        Use cases are created on-demand via factories.
        """
        container.register_factory(
            RegisterDeviceUseCase,
            lambda: RegisterDeviceUseCase(
                device_repository=container.get(DeviceRepository),
                ownership_registry=container.get(OwnershipRegistry),
            )
        )

        container.register_factory(
            ListDevicesUseCase,
            lambda: ListDevicesUseCase(
                device_repository=container.get(DeviceRepository),
                ownership_registry=container.get(OwnershipRegistry),
            )
        )

        container.register_factory(
            DeleteDeviceUseCase,
            lambda: DeleteDeviceUseCase(
                device_repository=container.get(DeviceRepository),
                event_repository=container.get(EventRepository),
                ownership_registry=container.get(OwnershipRegistry),
                gatekeeper=container.get(DeviceGateKeeper),
            )
        )

        container.register_factory(
            ReleaseDeviceUseCase,
            lambda: ReleaseDeviceUseCase(
                ownership_registry=container.get(OwnershipRegistry),
                gatekeeper=container.get(DeviceGateKeeper),
            )
        )
