"""
Pydantic schemas for business reviews.

Customers rate a business from 1 to 5 after a booking, optionally
with a comment.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ReviewCreate(BaseModel):
    """Schema for creating a new review."""

    booking_id: int = Field(..., description="Booking the review refers to")
    customer_id: int
    business_id: int
    rating: int = Field(..., ge=1, le=5, description="Rating from 1 to 5")
    comment: Optional[str] = Field(None, description="Optional textual comment")


class ReviewRead(BaseModel):
    """Schema for reading a review from the API."""

    id: int
    booking_id: int
    customer_id: int
    business_id: int
    rating: int
    comment: Optional[str] = None
    created_at: datetime

    model_config = {
        "from_attributes": True,
    }
