"""
Pydantic models for messages exchanged between users.

``is_read`` and ``sent_at`` are set by the server and are therefore
absent from ``MessageCreate``; any value sent by a client is ignored.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class MessageCreate(BaseModel):
    booking_id: Optional[int] = Field(None, description="Booking the message relates to, if any")
    sender_id: int
    receiver_id: int
    content: str


class MessageRead(BaseModel):
    id: int
    booking_id: Optional[int] = None
    sender_id: int
    receiver_id: int
    content: str
    is_read: bool
    sent_at: datetime

    model_config = {
        "from_attributes": True,
    }
