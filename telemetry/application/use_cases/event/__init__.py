from .ingest_event import IngestDeviceEventUseCase
from .list_events import ListDeviceEventsUseCase

__all__ = ["IngestDeviceEventUseCase", "ListDeviceEventsUseCase"]
