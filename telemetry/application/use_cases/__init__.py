from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    GetCurrentUserUseCase,
)
from .device import (
    RegisterDeviceUseCase,
    ListDevicesUseCase,
    DeleteDeviceUseCase,
    ReleaseDeviceUseCase,
)
from .event import (
    IngestDeviceEventUseCase,
    ListDeviceEventsUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "GetCurrentUserUseCase",
    "RegisterDeviceUseCase",
    "ListDevicesUseCase",
    "DeleteDeviceUseCase",
    "ReleaseDeviceUseCase",
    "IngestDeviceEventUseCase",
    "ListDeviceEventsUseCase",
]
