"""
Domain entities held by the in‑memory store.

These are plain dataclasses, independent of FastAPI and pydantic.
Request payloads are validated by the schemas in ``app.schemas``
before the store turns them into one of the records below.  Required
fields come first; optional fields carry a default.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import List, Optional


class UserType(str, Enum):
    """Role a person plays on the marketplace."""
    CUSTOMER = "customer"
    PROVIDER = "provider"
    BOTH = "both"


class BookingStatus(str, Enum):
    """Booking lifecycle states."""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


@dataclass
class User:
    id: int
    email: str
    username: str
    password: str
    full_name: str
    user_type: UserType
    external_auth_id: Optional[str] = None


@dataclass
class Business:
    """Provider profile offering a service in a category."""
    id: int
    user_id: int
    name: str
    description: str
    category: str
    location: str
    contact_email: str
    contact_phone: Optional[str] = None
    portfolio: Optional[List[str]] = None
    pricing: Optional[str] = None
    rating: Optional[int] = None


@dataclass
class Booking:
    """Request by a customer for a business to serve an event."""
    id: int
    customer_id: int
    business_id: int
    event_date: datetime
    status: BookingStatus
    created_at: datetime
    details: Optional[str] = None


@dataclass
class Message:
    id: int
    sender_id: int
    receiver_id: int
    content: str
    sent_at: datetime
    is_read: bool = False
    booking_id: Optional[int] = None


@dataclass
class Review:
    id: int
    booking_id: int
    customer_id: int
    business_id: int
    rating: int
    created_at: datetime
    comment: Optional[str] = None


@dataclass
class WaitlistEntry:
    """Pre‑launch sign‑up expressing interest in the marketplace."""
    id: int
    full_name: str
    email: str
    user_type: UserType
    receives_updates: bool
    created_at: datetime
