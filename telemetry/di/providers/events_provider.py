from typing import TYPE_CHECKING

from ...domain.repositories.device_repository import DeviceRepository
from ...domain.repositories.event_repository import EventRepository
from ...application.services.device_gatekeeper import DeviceGateKeeper
from ...application.use_cases.event.ingest_event import IngestDeviceEventUseCase
from ...application.use_cases.event.list_events import ListDeviceEventsUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class EventsProvider:
    """Events use case provider - registers all event-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            IngestDeviceEventUseCase,
            lambda: IngestDeviceEventUseCase(
                device_repository=container.get(DeviceRepository),
                event_repository=container.get(EventRepository),
            ),
        )

        container.register_factory(
            ListDeviceEventsUseCase,
            lambda: ListDeviceEventsUseCase(
                event_repository=container.get(EventRepository),
                gatekeeper=container.get(DeviceGateKeeper),
            ),
        )
