from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class DeviceEvent:
    """
    Domain model for one sensor reading pushed by a device.

    happened_at is reported by the device and may arrive out of order;
    created_at is assigned on ingestion. Each reading is independently
    optional because a sensor may be absent or faulty. Events are never
    modified after creation.
    """

    id: Optional[str]
    device_id: str

    mac_address: str
    ip_address: str

    soil_moisture: Optional[float]
    humidity: Optional[float]
    temperature: Optional[float]
    light_intensity: Optional[float]

    happened_at: datetime
    created_at: Optional[datetime] = None
