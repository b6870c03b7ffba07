from .register_device import RegisterDeviceUseCase
from .list_devices import ListDevicesUseCase
from .delete_device import DeleteDeviceUseCase
from .release_device import ReleaseDeviceUseCase

__all__ = [
    "RegisterDeviceUseCase",
    "ListDevicesUseCase",
    "DeleteDeviceUseCase",
    "ReleaseDeviceUseCase",
]
