# Standard library imports
from typing import Optional

# Local application imports
from ..core.config import Settings, get_settings
from .base_container import BaseContainer
from .providers import (
    AuthProvider,
    DatabaseProvider,
    DeviceProvider,
    EventsProvider,
    RepositoryProvider,
    SecurityProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database connections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Security services (SecurityProvider) - depends on settings and repositories
    4. Use cases (AuthProvider, DeviceProvider, EventsProvider)
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        super().__init__()
        self.register_singleton(Settings, settings or get_settings())
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → security → use cases
        """
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        SecurityProvider.register(self)
        AuthProvider.register(self)
        DeviceProvider.register(self)
        EventsProvider.register(self)
