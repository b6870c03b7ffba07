# Standard library imports
import logging

# Local application imports
from ...domain.exceptions import ConflictError, StorageError
from ...domain.models.device import Device
from ...domain.repositories.device_repository import DeviceRepository

logger = logging.getLogger(__name__)


async def find_or_create_device(device_repository: DeviceRepository, serial_number: str) -> Device:
    """
    Return the device with serial_number, creating it if it does not exist.

    Two callers racing on a new serial number both miss the lookup; the loser
    of the insert gets ConflictError from the unique index and re-reads the
    row the winner created.
    """
    device = await device_repository.find_by_serial_number(serial_number)
    if device is not None:
        return device

    try:
        device = await device_repository.create(Device(id=None, serial_number=serial_number))
        logger.info(f"Created device {device.id} for serial number {serial_number}")
        return device
    except ConflictError:
        logger.info(f"Device with serial number {serial_number} created concurrently, re-fetching")

    device = await device_repository.find_by_serial_number(serial_number)
    if device is None:
        # Conflicting row vanished between insert and re-read (deleted meanwhile)
        raise StorageError("Device could not be created")
    return device
