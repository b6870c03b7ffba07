# Standard library imports
from typing import List, Optional

# Local application imports
from ....domain.models.event import DeviceEvent
from ....domain.repositories.event_repository import EventRepository
from ....domain.exceptions import ValidationError
from ....application.dto.event_dto import DeviceEventResponse
from ...services.device_gatekeeper import DeviceGateKeeper
from ...services.event_query_planner import plan_event_window


def to_event_response(event: DeviceEvent) -> DeviceEventResponse:
    """Convert a stored DeviceEvent into its API representation"""
    return DeviceEventResponse(
        id=event.id or "",
        device_id=event.device_id,
        mac_address=event.mac_address,
        ip_address=event.ip_address,
        soil_moisture=event.soil_moisture,
        humidity=event.humidity,
        temperature=event.temperature,
        light_intensity=event.light_intensity,
        happened_at=event.happened_at,
        created_at=event.created_at,
    )


class ListDeviceEventsUseCase:
    """Use case for reading the events of an owned device within a time window"""

    def __init__(self, event_repository: EventRepository, gatekeeper: DeviceGateKeeper) -> None:
        self._event_repository = event_repository
        self._gatekeeper = gatekeeper

    async def execute(
        self,
        owner_user_id: str,
        serial_number: str,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> List[DeviceEventResponse]:
        """
        List events of a device owned by the user, oldest first

        Args:
            owner_user_id: ID of the requesting user
            serial_number: Serial number of the device
            start_date: Inclusive lower bound (startDate query parameter)
            end_date: Inclusive upper bound (endDate query parameter)

        Returns:
            List of DeviceEventResponse objects ordered by happened_at

        Raises:
            ValidationError: If the serial number is blank or a bound is malformed
            NotFoundError: If the device does not exist or is not owned by the user
        """
        serial_number = (serial_number or "").strip()
        if not serial_number:
            raise ValidationError("Serial number must be provided")

        # Validate the window before touching storage
        window = plan_event_window(start_date, end_date)

        device = await self._gatekeeper.owned_device_by_serial(owner_user_id, serial_number)
        events = await self._event_repository.list_for_device(device.id or "", window)
        return [to_event_response(e) for e in events]
