"""Pytest fixtures and configuration for userapi tests."""

import threading
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from userapi.api.app import create_app
from userapi.config import Settings
from userapi.storage.user_store import UserStore


class StepClock:
    """Deterministic clock that advances one second on every reading."""

    def __init__(self, start: datetime):
        self._lock = threading.Lock()
        self._next = start

    def __call__(self) -> datetime:
        with self._lock:
            now = self._next
            self._next = now + timedelta(seconds=1)
            return now


@pytest.fixture
def clock():
    """Clock starting at a fixed UTC instant."""
    return StepClock(datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def user_store(clock):
    """Create an empty UserStore driven by the step clock."""
    return UserStore(clock=clock)


@pytest.fixture
def test_settings():
    """Settings used by the test application."""
    return Settings(service_name="userapi-test")


@pytest.fixture
def test_client(user_store, test_settings):
    """Create a FastAPI test client serving the test store."""
    app = create_app(store=user_store, settings=test_settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def john(user_store):
    """A stored user."""
    return user_store.create_user("John Doe", "john@example.com")
