"""Pytest configuration and fixtures."""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

# Make the repository root importable when the package is not installed.
repo_root = Path(__file__).parent.parent
sys.path.insert(0, str(repo_root))

import pytest
from fastapi.testclient import TestClient

from marketplace_api.app.core.storage import create_storage
from marketplace_api.app.main import create_app


class StepClock:
    """Deterministic clock advancing one second per call."""

    def __init__(self, start: datetime = datetime(2026, 1, 1, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self) -> datetime:
        current = self.now
        self.now = current + timedelta(seconds=1)
        return current


@pytest.fixture
def clock():
    return StepClock()


@pytest.fixture
def storage(clock):
    """A fresh, empty store driven by the step clock."""
    return create_storage(clock=clock)


@pytest.fixture
def app(storage):
    return create_app(storage=storage)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def user_payload():
    return {
        "email": "a@x.com",
        "username": "alice",
        "password": "secret",
        "full_name": "Alice Smith",
        "user_type": "customer",
    }


@pytest.fixture
def business_payload():
    return {
        "user_id": 1,
        "name": "Foo Photos",
        "description": "Wedding and event photography",
        "category": "Photography",
        "location": "Springfield",
        "contact_email": "hello@foophotos.com",
    }


@pytest.fixture
def waitlist_payload():
    return {
        "full_name": "Bob Jones",
        "email": "bob@example.com",
        "user_type": "provider",
    }
