# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Device:
    """
    Pure domain model for Device entity.

    A device is identified externally by its serial number, the natural key
    used by the ingestion route. Ownership lives in separate link records, so
    a device created by its first ingested event has no owner yet.
    """
    id: Optional[str]
    serial_number: str
    created_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.serial_number or not self.serial_number.strip():
            raise ValueError("Serial number is required")
