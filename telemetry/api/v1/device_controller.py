# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends, Response, status

# Local application imports
from ...application.dto.device_dto import DeviceCreateRequest, DeviceResponse
from ...application.services.device_gatekeeper import SessionIdentity
from ...application.use_cases.device.register_device import RegisterDeviceUseCase
from ...application.use_cases.device.list_devices import ListDevicesUseCase
from ...application.use_cases.device.delete_device import DeleteDeviceUseCase
from ...application.use_cases.device.release_device import ReleaseDeviceUseCase
from ...di.base_container import BaseContainer
from .dependencies import get_container, get_current_identity


router = APIRouter(tags=["devices"])


@router.post("", response_model=DeviceResponse, status_code=status.HTTP_201_CREATED)
async def register_device(
    request: DeviceCreateRequest,
    identity: SessionIdentity = Depends(get_current_identity),
    container: BaseContainer = Depends(get_container),
) -> DeviceResponse:
    """
    Register a device by serial number and link it to the current user

    Args:
        request: Device registration request
        identity: Current authenticated user (from dependency)

    Returns:
        DeviceResponse with device information
    """
    register_device_use_case = container.get(RegisterDeviceUseCase)
    return await register_device_use_case.execute(
        request=request,
        owner_user_id=identity.user_id,
    )


@router.get("", response_model=List[DeviceResponse])
async def list_devices(
    identity: SessionIdentity = Depends(get_current_identity),
    container: BaseContainer = Depends(get_container),
) -> List[DeviceResponse]:
    """
    List all devices linked to the current user

    Args:
        identity: Current authenticated user (from dependency)

    Returns:
        List of DeviceResponse objects
    """
    list_devices_use_case = container.get(ListDevicesUseCase)
    return await list_devices_use_case.execute(owner_user_id=identity.user_id)


@router.delete("/{device_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_device(
    device_id: str,
    identity: SessionIdentity = Depends(get_current_identity),
    container: BaseContainer = Depends(get_container),
) -> Response:
    """
    Delete an owned device, its events and all of its ownership links

    Args:
        device_id: ID of the device
        identity: Current authenticated user (from dependency)
    """
    delete_device_use_case = container.get(DeleteDeviceUseCase)
    await delete_device_use_case.execute(device_id=device_id, owner_user_id=identity.user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{device_id}/ownership", status_code=status.HTTP_204_NO_CONTENT)
async def release_device(
    device_id: str,
    identity: SessionIdentity = Depends(get_current_identity),
    container: BaseContainer = Depends(get_container),
) -> Response:
    """
    Remove the current user's link to a device; the device and its events stay

    Args:
        device_id: ID of the device
        identity: Current authenticated user (from dependency)
    """
    release_device_use_case = container.get(ReleaseDeviceUseCase)
    await release_device_use_case.execute(device_id=device_id, owner_user_id=identity.user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
