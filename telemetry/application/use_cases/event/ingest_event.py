# Standard library imports
import logging

# Local application imports
from ....domain.repositories.device_repository import DeviceRepository
from ....domain.repositories.event_repository import EventRepository
from ....domain.models.event import DeviceEvent
from ....domain.exceptions import ValidationError
from ....application.services.device_provisioning import find_or_create_device
from ....utils.datetime_utils import ensure_utc, utc_now
from ...dto.event_dto import DeviceEventCreateRequest, DeviceEventResponse
from .list_events import to_event_response

logger = logging.getLogger(__name__)


class IngestDeviceEventUseCase:
    """Use case for appending a reading pushed by a device"""

    def __init__(
        self,
        device_repository: DeviceRepository,
        event_repository: EventRepository,
    ) -> None:
        self._device_repository = device_repository
        self._event_repository = event_repository

    async def execute(self, serial_number: str, request: DeviceEventCreateRequest) -> DeviceEventResponse:
        """
        Store one reading; the device row is created on its first event

        Raises:
            ValidationError: If serial_number is blank
        """
        serial_number = (serial_number or "").strip()
        if not serial_number:
            raise ValidationError("Serial number must be provided")

        device = await find_or_create_device(self._device_repository, serial_number)

        event = await self._event_repository.create(
            DeviceEvent(
                id=None,
                device_id=device.id or "",
                mac_address=request.mac_address,
                ip_address=str(request.ip_address),
                soil_moisture=request.soil_moisture,
                humidity=request.humidity,
                temperature=request.temperature,
                light_intensity=request.light_intensity,
                happened_at=ensure_utc(request.happened_at),
                created_at=utc_now(),
            )
        )
        logger.debug(f"Stored event {event.id} for device {device.id}")
        return to_event_response(event)
