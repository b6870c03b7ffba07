from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class DeviceCreateRequest(BaseModel):
    """DTO for device registration request"""
    serial_number: str = Field(min_length=1, max_length=128)


class DeviceResponse(BaseModel):
    """DTO for device response"""
    id: str
    serial_number: str
    created_at: Optional[datetime] = None
