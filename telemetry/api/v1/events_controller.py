"""
Device events API: devices push readings, owners query them by time window.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import List, Optional

# -----------------------------------------------------------------------------
# Third-party
# -----------------------------------------------------------------------------
from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError as PydanticValidationError

# -----------------------------------------------------------------------------
# Application
# -----------------------------------------------------------------------------
from ...application.dto.event_dto import DeviceEventCreateRequest, DeviceEventResponse
from ...application.services.device_gatekeeper import SessionIdentity
from ...application.use_cases.event.ingest_event import IngestDeviceEventUseCase
from ...application.use_cases.event.list_events import ListDeviceEventsUseCase
from ...di.base_container import BaseContainer

from .dependencies import get_container, get_current_identity, require_ingestion_secret

# -----------------------------------------------------------------------------
# Router
# -----------------------------------------------------------------------------
router = APIRouter(tags=["events"])


@router.get("/{serial_number}/events", response_model=List[DeviceEventResponse])
async def list_device_events(
    serial_number: str,
    start_date: Optional[str] = Query(None, alias="startDate", description="Inclusive lower bound, ISO 8601 instant"),
    end_date: Optional[str] = Query(None, alias="endDate", description="Inclusive upper bound, ISO 8601 instant"),
    identity: SessionIdentity = Depends(get_current_identity),
    container: BaseContainer = Depends(get_container),
) -> List[DeviceEventResponse]:
    """
    List readings of an owned device, oldest first.
    Without bounds the full history is returned.
    """
    use_case = container.get(ListDeviceEventsUseCase)
    return await use_case.execute(
        owner_user_id=identity.user_id,
        serial_number=serial_number,
        start_date=start_date,
        end_date=end_date,
    )


async def read_event_body(request: Request) -> DeviceEventCreateRequest:
    """
    Parse the reading from the raw body.

    The body is not declared as a route parameter, so FastAPI leaves it
    untouched until the ingestion secret has been checked.
    """
    try:
        return DeviceEventCreateRequest.model_validate_json(await request.body())
    except PydanticValidationError as exception:
        errors = [{**error, "loc": ("body", *error.get("loc", ()))} for error in exception.errors()]
        raise RequestValidationError(errors) from exception


@router.post(
    "/{serial_number}/events",
    response_model=DeviceEventResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_ingestion_secret)],
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": DeviceEventCreateRequest.model_json_schema()}},
        }
    },
)
async def ingest_device_event(
    serial_number: str,
    request: Request,
    container: BaseContainer = Depends(get_container),
) -> DeviceEventResponse:
    """
    Device-originated reading, authorized by the X-API-Key header.
    An unseen serial number registers the device on its first event.
    """
    reading = await read_event_body(request)
    use_case = container.get(IngestDeviceEventUseCase)
    return await use_case.execute(serial_number=serial_number, request=reading)
