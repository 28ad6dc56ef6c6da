"""
Tests for the Google Calendar feed client.

The upstream is replaced by httpx.MockTransport, so no network is used.
These tests verify:
- The events.list request (URL, query parameters)
- Raw passthrough of body and content type
- Parsing: offsets kept, all-day and cancelled items, malformed items
- Error mapping to APIError / FeedFormatError
"""

import json
from datetime import datetime, timedelta, timezone

import httpx
import pytest

from app.core.config import Settings
from app.environments.base import APIError, FeedFormatError
from app.environments.google.calendar import FeedEvent, GoogleCalendarClient, parse_feed
from tests.factories import FEED_BODY


CALENDAR_ID = "yusu.org_h8uou2ovt1c6gg87q5g758tsvs@group.calendar.google.com"


@pytest.fixture
def settings():
    return Settings(GOOGLE_CALENDAR_API_KEY="test-key", GOOGLE_CALENDAR_ID=CALENDAR_ID)


def make_client(settings, handler) -> GoogleCalendarClient:
    return GoogleCalendarClient(settings, transport=httpx.MockTransport(handler))


def feed_response(body: bytes = FEED_BODY) -> httpx.Response:
    return httpx.Response(
        200,
        content=body,
        headers={"content-type": "application/json; charset=UTF-8"},
    )


# ---------------------------------------------------------------------------
# REQUEST / RAW FEED
# ---------------------------------------------------------------------------

class TestFetchRawFeed:
    """Tests for GoogleCalendarClient.fetch_raw_feed."""

    @pytest.mark.asyncio
    async def test_request_parameters(self, settings):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return feed_response()

        await make_client(settings, handler).fetch_raw_feed()

        request = seen[0]
        assert request.method == "GET"
        assert request.url.host == "www.googleapis.com"
        assert request.url.path == f"/calendar/v3/calendars/{CALENDAR_ID}/events"
        assert request.url.params["singleEvents"] == "true"
        assert request.url.params["maxResults"] == "2500"
        assert request.url.params["orderBy"] == "startTime"
        assert request.url.params["key"] == "test-key"

    @pytest.mark.asyncio
    async def test_returns_body_unmodified(self, settings):
        raw = await make_client(settings, lambda request: feed_response()).fetch_raw_feed()

        assert raw.body == FEED_BODY
        assert raw.content_type == "application/json; charset=UTF-8"

    @pytest.mark.asyncio
    async def test_api_key_override(self, settings):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url.params["key"])
            return feed_response()

        client = GoogleCalendarClient(settings, api_key="other", transport=httpx.MockTransport(handler))
        await client.fetch_raw_feed()

        assert seen == ["other"]

    @pytest.mark.asyncio
    async def test_forbidden(self, settings):
        client = make_client(settings, lambda request: httpx.Response(403, text="forbidden"))

        with pytest.raises(APIError) as exc_info:
            await client.fetch_raw_feed()

        assert exc_info.value.status_code == 403

    @pytest.mark.asyncio
    async def test_non_200(self, settings):
        client = make_client(settings, lambda request: httpx.Response(404, text="Not Found"))

        with pytest.raises(APIError) as exc_info:
            await client.fetch_raw_feed()

        assert exc_info.value.status_code == 404
        assert exc_info.value.response == "Not Found"

    @pytest.mark.asyncio
    async def test_network_error(self, settings):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(APIError) as exc_info:
            await make_client(settings, handler).fetch_raw_feed()

        assert exc_info.value.status_code is None


# ---------------------------------------------------------------------------
# PARSING
# ---------------------------------------------------------------------------

class TestListEvents:
    """Tests for GoogleCalendarClient.list_events and parse_feed."""

    @pytest.mark.asyncio
    async def test_parses_fixture_feed(self, settings):
        events = await make_client(settings, lambda request: feed_response()).list_events()

        assert len(events) == 10
        assert events[0].summary == "Board Games & Cake"
        assert events[0].location == "The Room Formerly Known as the Pod"

    def test_keeps_feed_offset(self):
        events = parse_feed(FEED_BODY)

        first = events[0]
        assert first.start_time == datetime(2018, 10, 5, 19, tzinfo=timezone(timedelta(hours=1)))
        assert first.start_time.utcoffset() == timedelta(hours=1)
        assert first.start_time.hour == 19

    def test_meeting_link_from_hangout_link(self):
        events = parse_feed(FEED_BODY)
        july1 = next(e for e in events if e.summary == "Event in July 1")

        assert july1.meeting_link == "https://meet.google.com/abc-defg-hij"

    def test_unused_feed_fields_are_ignored(self):
        body = json.dumps({"items": [{
            "id": "linked",
            "summary": "Linked",
            "htmlLink": "https://www.google.com/calendar/event?eid=abc",
            "start": {"dateTime": "2019-12-02T10:00:00Z"},
            "end": {"dateTime": "2019-12-02T11:00:00Z"},
        }]}).encode()

        [event] = parse_feed(body)

        assert event.summary == "Linked"
        assert "html_link" not in FeedEvent.model_fields

    def test_missing_text_fields_are_none(self):
        events = parse_feed(FEED_BODY)
        may = next(e for e in events if e.summary == "Event in May")

        assert may.description is None
        assert may.location is None
        assert may.meeting_link is None

    def test_all_day_event(self):
        body = json.dumps({"items": [{
            "id": "xmas",
            "summary": "Christmas",
            "start": {"date": "2019-12-25"},
            "end": {"date": "2019-12-26"},
        }]}).encode()

        [event] = parse_feed(body)

        assert event.start_date.isoformat() == "2019-12-25"
        assert event.start_time.tzinfo is not None

    def test_cancelled_and_incomplete_items_are_dropped(self):
        body = json.dumps({"items": [
            {"id": "gone", "status": "cancelled",
             "start": {"dateTime": "2019-12-01T10:00:00Z"}, "end": {"dateTime": "2019-12-01T11:00:00Z"}},
            {"id": "no-start", "summary": "No start", "end": {"dateTime": "2019-12-01T11:00:00Z"}},
            {"id": "ok", "summary": "Kept",
             "start": {"dateTime": "2019-12-02T10:00:00Z"}, "end": {"dateTime": "2019-12-02T11:00:00Z"}},
        ]}).encode()

        assert [e.summary for e in parse_feed(body)] == ["Kept"]

    def test_empty_feed(self):
        assert parse_feed(b'{"kind": "calendar#events"}') == []

    def test_invalid_json(self):
        with pytest.raises(FeedFormatError):
            parse_feed(b"<html>not json</html>")

    def test_wrong_shape(self):
        with pytest.raises(FeedFormatError):
            parse_feed(b'{"items": "nope"}')

    @pytest.mark.asyncio
    async def test_malformed_feed_is_an_api_error(self, settings):
        client = make_client(settings, lambda request: feed_response(b"{"))

        with pytest.raises(APIError):
            await client.list_events()
