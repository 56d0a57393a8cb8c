"""Shared fixtures for URL shortener tests."""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from linkshort.core.config import Settings
from linkshort.main import create_app
from linkshort.services.links import LinkService

T0 = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime = T0):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    """Create a controllable clock."""
    return FakeClock()


@pytest.fixture
def settings():
    """Settings with defaults, independent of the environment."""
    return Settings(_env_file=None)


@pytest.fixture
def service(settings, clock):
    """Create a link service with its own registry."""
    return LinkService(settings, clock=clock)


@pytest.fixture
def app(settings, clock):
    """Create an isolated application."""
    return create_app(settings=settings, clock=clock)


@pytest.fixture
def client(app):
    """Create a test client for the isolated application."""
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client
