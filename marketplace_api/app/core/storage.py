"""
In‑memory storage for the marketplace.

``MemStorage`` owns every entity collection (users, businesses,
bookings, messages, reviews and waitlist entries) and is the only
component allowed to mutate them.  Each collection is a dictionary
keyed by id plus its own counter.  Counters start at 1 and advance only
after a record has been stored, so a rejected insert never consumes an
id.

State lives for the lifetime of the object.  ``create_storage`` builds
a fresh instance; the application factory keeps one per app and tests
create as many as they need.  Nothing is persisted: a restart loses
all data.

Lookups return ``None`` when a record is absent.  Only the two
uniqueness‑checked writes (``create_user`` and ``add_to_waitlist``)
can fail, by raising ``ConflictError``.  Referential fields such as
``customer_id`` or ``sender_id`` are stored as given; the store does
not check that they point at existing records.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from ..models import (
    Booking,
    BookingStatus,
    Business,
    Message,
    Review,
    User,
    WaitlistEntry,
)
from ..schemas.booking import BookingCreate
from ..schemas.business import BusinessCreate
from ..schemas.message import MessageCreate
from ..schemas.review import ReviewCreate
from ..schemas.user import UserCreate
from ..schemas.waitlist import WaitlistCreate
from .errors import ConflictError

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Default clock: the current time in UTC."""
    return datetime.now(timezone.utc)


class MemStorage:
    """Process‑local store for all marketplace entities.

    Parameters
    ----------
    clock : Optional[Callable[[], datetime]]
        Source of ``created_at`` and ``sent_at`` timestamps.  Defaults
        to :func:`utc_now`; tests pass a deterministic clock.
    """

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self._clock: Clock = clock or utc_now

        self._users: Dict[int, User] = {}
        self._businesses: Dict[int, Business] = {}
        self._bookings: Dict[int, Booking] = {}
        self._messages: Dict[int, Message] = {}
        self._reviews: Dict[int, Review] = {}
        self._waitlist: Dict[int, WaitlistEntry] = {}

        self._user_id = 1
        self._business_id = 1
        self._booking_id = 1
        self._message_id = 1
        self._review_id = 1
        self._waitlist_id = 1

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def create_user(self, data: UserCreate) -> User:
        """Store a new user.

        Raises ``ConflictError`` when another user already has the same
        email or username, compared case‑insensitively.  The email is
        checked first.
        """
        if self.get_user_by_email(data.email) is not None:
            logger.warning("Rejected user registration: email %s already registered", data.email)
            raise ConflictError("email", "Email already registered")
        if self.get_user_by_username(data.username) is not None:
            logger.warning("Rejected user registration: username %s already taken", data.username)
            raise ConflictError("username", "Username already taken")

        user = User(id=self._user_id, **data.model_dump())
        self._users[user.id] = user
        self._user_id += 1
        logger.info("Registered user %s (%s) as %s", user.id, user.username, user.user_type.value)
        return user

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        return self._users.get(user_id)

    def get_user_by_email(self, email: str) -> Optional[User]:
        """Find a user by email, ignoring case."""
        wanted = email.lower()
        for user in self._users.values():
            if user.email.lower() == wanted:
                return user
        return None

    def get_user_by_username(self, username: str) -> Optional[User]:
        """Find a user by username, ignoring case."""
        wanted = username.lower()
        for user in self._users.values():
            if user.username.lower() == wanted:
                return user
        return None

    # ------------------------------------------------------------------
    # Businesses
    # ------------------------------------------------------------------
    def create_business(self, data: BusinessCreate) -> Business:
        business = Business(id=self._business_id, **data.model_dump())
        self._businesses[business.id] = business
        self._business_id += 1
        logger.info("Created business %s (%s) for user %s", business.id, business.name, business.user_id)
        return business

    def get_business_by_id(self, business_id: int) -> Optional[Business]:
        return self._businesses.get(business_id)

    def get_businesses_by_user_id(self, user_id: int) -> List[Business]:
        return [b for b in self._businesses.values() if b.user_id == user_id]

    def list_businesses(self, category: Optional[str] = None) -> List[Business]:
        """Return all businesses, or only those in ``category``.

        The category must match exactly, ignoring case; substrings do
        not match.  An empty string behaves like no filter.
        """
        businesses = list(self._businesses.values())
        if category:
            wanted = category.lower()
            businesses = [b for b in businesses if b.category.lower() == wanted]
        return businesses

    # ------------------------------------------------------------------
    # Bookings
    # ------------------------------------------------------------------
    def create_booking(self, data: BookingCreate) -> Booking:
        """Store a booking, defaulting its status to ``pending``."""
        booking = Booking(
            id=self._booking_id,
            customer_id=data.customer_id,
            business_id=data.business_id,
            event_date=data.event_date,
            status=data.status or BookingStatus.PENDING,
            details=data.details,
            created_at=self._clock(),
        )
        self._bookings[booking.id] = booking
        self._booking_id += 1
        logger.info(
            "Customer %s requested booking %s with business %s",
            booking.customer_id, booking.id, booking.business_id,
        )
        return booking

    def get_booking_by_id(self, booking_id: int) -> Optional[Booking]:
        return self._bookings.get(booking_id)

    def get_user_bookings(self, user_id: int) -> List[Booking]:
        """Bookings raised by the customer ``user_id``."""
        return [b for b in self._bookings.values() if b.customer_id == user_id]

    def get_business_bookings(self, business_id: int) -> List[Booking]:
        return [b for b in self._bookings.values() if b.business_id == business_id]

    def update_booking_status(self, booking_id: int, status: str) -> Optional[Booking]:
        """Replace the status of an existing booking.

        Returns the updated booking, or ``None`` if there is no booking
        with this id.  The value is trusted; callers validate it.
        """
        booking = self._bookings.get(booking_id)
        if booking is None:
            return None
        booking.status = status
        logger.info("Booking %s status changed to %s", booking_id, status)
        return booking

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------
    def create_message(self, data: MessageCreate) -> Message:
        """Store a message; it always starts unread."""
        message = Message(
            id=self._message_id,
            booking_id=data.booking_id,
            sender_id=data.sender_id,
            receiver_id=data.receiver_id,
            content=data.content,
            is_read=False,
            sent_at=self._clock(),
        )
        self._messages[message.id] = message
        self._message_id += 1
        logger.debug("Message %s sent from %s to %s", message.id, message.sender_id, message.receiver_id)
        return message

    def get_conversation(self, user_id: int, other_user_id: int) -> List[Message]:
        """Messages exchanged between two users, oldest first.

        Direction does not matter, so swapping the arguments yields the
        same list.  Messages with equal ``sent_at`` keep the order in
        which they were stored.
        """
        pair = {user_id, other_user_id}
        messages = [
            m for m in self._messages.values()
            if {m.sender_id, m.receiver_id} == pair
        ]
        return sorted(messages, key=lambda m: m.sent_at)

    # ------------------------------------------------------------------
    # Reviews
    # ------------------------------------------------------------------
    def create_review(self, data: ReviewCreate) -> Review:
        review = Review(id=self._review_id, created_at=self._clock(), **data.model_dump())
        self._reviews[review.id] = review
        self._review_id += 1
        logger.info(
            "Customer %s reviewed business %s with rating %s",
            review.customer_id, review.business_id, review.rating,
        )
        return review

    def get_business_reviews(self, business_id: int) -> List[Review]:
        return [r for r in self._reviews.values() if r.business_id == business_id]

    # ------------------------------------------------------------------
    # Waitlist
    # ------------------------------------------------------------------
    def add_to_waitlist(self, data: WaitlistCreate) -> WaitlistEntry:
        """Add a person to the pre‑launch waitlist.

        Raises ``ConflictError`` if the email is already on the list,
        compared case‑insensitively.
        """
        wanted = data.email.lower()
        for entry in self._waitlist.values():
            if entry.email.lower() == wanted:
                logger.warning("Rejected waitlist sign‑up: %s already registered", data.email)
                raise ConflictError("email", "Email already registered in waitlist")

        entry = WaitlistEntry(id=self._waitlist_id, created_at=self._clock(), **data.model_dump())
        self._waitlist[entry.id] = entry
        self._waitlist_id += 1
        logger.info("Added %s to the waitlist as %s", entry.email, entry.user_type.value)
        return entry

    def list_waitlist(self) -> List[WaitlistEntry]:
        return list(self._waitlist.values())


def create_storage(clock: Optional[Clock] = None) -> MemStorage:
    """Return a new, empty store with all id counters at 1."""
    return MemStorage(clock=clock)
