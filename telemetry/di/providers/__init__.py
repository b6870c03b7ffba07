from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .security_provider import SecurityProvider
from .auth_provider import AuthProvider
from .device_provider import DeviceProvider
from .events_provider import EventsProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "SecurityProvider",
    "AuthProvider",
    "DeviceProvider",
    "EventsProvider",
]
