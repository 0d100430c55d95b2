"""
Booking endpoints.

Customers request bookings against a business; either side can list
the bookings that concern them, and the status can be moved through
``pending``, ``confirmed``, ``cancelled`` and ``completed``.  The
referenced customer and business are not checked for existence.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, status

from marketplace_api.app.api.dependencies import get_storage
from marketplace_api.app.core.storage import MemStorage
from marketplace_api.app.models import BookingStatus
from marketplace_api.app.schemas.booking import (
    BookingCreate,
    BookingRead,
    BookingStatusUpdate,
)


router = APIRouter()

VALID_STATUSES = {s.value for s in BookingStatus}


@router.post(
    "/bookings",
    response_model=BookingRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_booking(
    booking: BookingCreate,
    storage: MemStorage = Depends(get_storage),
) -> BookingRead:
    """Create a booking.  Its status is ``pending`` unless given."""
    return storage.create_booking(booking)


@router.get("/bookings/{booking_id}", response_model=BookingRead)
async def get_booking(
    booking_id: int = Path(..., description="ID of the booking"),
    storage: MemStorage = Depends(get_storage),
) -> BookingRead:
    booking = storage.get_booking_by_id(booking_id)
    if booking is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Booking not found")
    return booking


@router.patch("/bookings/{booking_id}/status", response_model=BookingRead)
async def update_booking_status(
    body: BookingStatusUpdate,
    booking_id: int = Path(..., description="ID of the booking"),
    storage: MemStorage = Depends(get_storage),
) -> BookingRead:
    """Change the status of a booking.

    Returns HTTP 400 if ``status`` is missing or not one of the known
    values, and HTTP 404 if the booking does not exist.
    """
    if not body.status or body.status not in VALID_STATUSES:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid status value")
    booking = storage.update_booking_status(booking_id, BookingStatus(body.status))
    if booking is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Booking not found")
    return booking


@router.get("/users/{user_id}/bookings", response_model=List[BookingRead])
async def list_user_bookings(
    user_id: int = Path(..., description="ID of the customer"),
    storage: MemStorage = Depends(get_storage),
) -> List[BookingRead]:
    return storage.get_user_bookings(user_id)


@router.get("/businesses/{business_id}/bookings", response_model=List[BookingRead])
async def list_business_bookings(
    business_id: int = Path(..., description="ID of the business"),
    storage: MemStorage = Depends(get_storage),
) -> List[BookingRead]:
    return storage.get_business_bookings(business_id)
