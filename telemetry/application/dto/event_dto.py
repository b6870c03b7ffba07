from datetime import datetime
from typing import Optional

from pydantic import AwareDatetime, BaseModel, Field, IPvAnyAddress


class DeviceEventCreateRequest(BaseModel):
    """Reading pushed by a device; any sensor value may be missing"""
    mac_address: str = Field(min_length=1, max_length=64)
    ip_address: IPvAnyAddress
    soil_moisture: Optional[float] = None
    humidity: Optional[float] = None
    temperature: Optional[float] = None
    light_intensity: Optional[float] = None
    happened_at: AwareDatetime


class DeviceEventResponse(BaseModel):
    id: str
    device_id: str
    mac_address: str
    ip_address: str
    soil_moisture: Optional[float] = None
    humidity: Optional[float] = None
    temperature: Optional[float] = None
    light_intensity: Optional[float] = None
    happened_at: datetime
    created_at: Optional[datetime] = None
