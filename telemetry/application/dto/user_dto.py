from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    id: str
    email: EmailStr
    created_at: Optional[datetime] = None
