"""
Pydantic models for the pre‑launch waitlist.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from ..models import UserType
from .user import EMAIL_PATTERN


class WaitlistCreate(BaseModel):
    """Schema for joining the waitlist."""

    full_name: str = Field(..., min_length=1, examples=["Alice Smith"])
    email: str = Field(..., pattern=EMAIL_PATTERN, examples=["alice@example.com"])
    user_type: UserType
    receives_updates: bool = Field(True, description="Whether the person wants launch updates by e‑mail")


class WaitlistRead(WaitlistCreate):
    id: int
    created_at: datetime

    model_config = {
        "from_attributes": True,
    }
