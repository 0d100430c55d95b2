"""
Application package initializer.

The project is organised into small pieces: ``core`` holds settings,
logging, errors and the in‑memory store; ``models`` the domain
records; ``schemas`` the request/response payloads; and
``api/endpoints`` one router per domain (waitlist, users, businesses,
bookings, messages, reviews, auth).
"""

from .main import app, create_app  # noqa: F401
