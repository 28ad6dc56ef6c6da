"""
Test configuration and fixtures for pytest.

This module provides shared fixtures used across all tests:
- The fixture feed parsed into EventRecords
- An in-memory calendar client serving that feed
- Test client (FastAPI TestClient) wired to the fake client
"""

from typing import Generator, List

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.deps import get_calendar_client
from app.environments.google.calendar import parse_feed
from app.main import create_app
from app.schemas.event import EventRecord
from tests.factories import FEED_BODY, FakeCalendarClient


# ---------------------------------------------------------------------------
# DATA FIXTURES
# ---------------------------------------------------------------------------

@pytest.fixture
def feed_events() -> List[EventRecord]:
    """The fixture feed parsed into EventRecords."""
    return parse_feed(FEED_BODY)


# ---------------------------------------------------------------------------
# APP FIXTURES
# ---------------------------------------------------------------------------

@pytest.fixture
def test_settings() -> Settings:
    """Test-mode settings with no API key anywhere."""
    return Settings(
        TESTING=True,
        GOOGLE_CALENDAR_API_KEY="",
        GOOGLE_CALENDAR_API_KEY_FILE="does-not-exist.key",
    )


@pytest.fixture
def fake_calendar() -> FakeCalendarClient:
    return FakeCalendarClient()


@pytest.fixture
def client(test_settings: Settings, fake_calendar: FakeCalendarClient) -> Generator[TestClient, None, None]:
    """
    Create a test client serving the fixture feed.

    Overrides the get_calendar_client dependency with the fake client.
    """
    app = create_app(test_settings)
    app.dependency_overrides[get_calendar_client] = lambda: fake_calendar

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
