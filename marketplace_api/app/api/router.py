"""
Top‑level API router.

Aggregates the domain routers under a single router which the
application mounts at ``settings.api_prefix``.  When a new domain is
added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import (
    auth,
    bookings,
    businesses,
    health,
    messages,
    reviews,
    users,
    waitlist,
)

router = APIRouter()

router.include_router(waitlist.router, prefix="/waitlist", tags=["waitlist"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(businesses.router, prefix="/businesses", tags=["businesses"])
# Bookings and reviews are reachable both at their own collection and
# nested below users/businesses, so these routers carry full paths.
router.include_router(bookings.router, tags=["bookings"])
router.include_router(reviews.router, tags=["reviews"])
router.include_router(messages.router, prefix="/messages", tags=["messages"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(health.router, prefix="/health", tags=["health"])
