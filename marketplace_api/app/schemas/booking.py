"""
Pydantic models for bookings.

A booking is raised by a customer against a business for a given
event date.  New bookings start as ``pending`` unless the client
supplies another status; afterwards only the status may change, via
``BookingStatusUpdate``.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from ..models import BookingStatus


class BookingCreate(BaseModel):
    """Schema for creating a booking."""

    customer_id: int
    business_id: int
    event_date: datetime = Field(..., examples=["2026-06-01T15:00:00Z"])
    status: Optional[BookingStatus] = Field(None, description="Defaults to 'pending' when omitted")
    details: Optional[str] = None


class BookingStatusUpdate(BaseModel):
    """Body of ``PATCH /bookings/{id}/status``.

    ``status`` is kept as a plain string so the endpoint can reject
    unknown values with its own message instead of a generic
    validation error.
    """

    status: Optional[str] = Field(None, examples=["confirmed"])


class BookingRead(BaseModel):
    id: int
    customer_id: int
    business_id: int
    event_date: datetime
    status: BookingStatus
    details: Optional[str] = None
    created_at: datetime

    model_config = {
        "from_attributes": True,
    }
