from .auth_dto import UserRegistrationRequest, UserLoginRequest, TokenResponse
from .user_dto import UserResponse
from .device_dto import DeviceCreateRequest, DeviceResponse
from .event_dto import DeviceEventCreateRequest, DeviceEventResponse

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "TokenResponse",
    "UserResponse",
    "DeviceCreateRequest",
    "DeviceResponse",
    "DeviceEventCreateRequest",
    "DeviceEventResponse",
]
