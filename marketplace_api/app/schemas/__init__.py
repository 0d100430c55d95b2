"""
Pydantic schema definitions for API payloads.

Each domain (users, businesses, bookings, etc.) defines its own
Pydantic models for request and response bodies.  Schemas are kept
separate from the dataclasses in ``app.models`` so that the API
representation can evolve without touching the store.
"""
