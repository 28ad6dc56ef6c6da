"""
Google Calendar API Client - Fetch the public events feed.

This client reads every event of one public Google Calendar with an API
key. It handles the request, error handling, and response parsing.

Key Features:
=============
1. Raw feed passthrough (bytes + content type, unmodified)
2. Parsed feed as EventRecords
3. Clean error handling with specific exceptions

API Reference:
==============
- Events API: https://developers.google.com/calendar/api/v3/reference/events/list

Usage Example:
==============
    from app.core.config import Settings
    from app.environments.google.calendar import GoogleCalendarClient

    client = GoogleCalendarClient(Settings(GOOGLE_CALENDAR_API_KEY="AIza..."))

    events = await client.list_events()
    for event in events:
        print(f"{event.start_time:%d/%m/%Y} - {event.summary}")
"""

import logging
from typing import List, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from app.core.config import Settings
from app.environments.base import APIError, EnvironmentService, FeedFormatError, RawFeed
from app.environments.google.calendar.schemas import CalendarEventsResponse
from app.schemas.event import EventRecord


logger = logging.getLogger("calendar_api.environments.google.calendar")


class GoogleCalendarClient(EnvironmentService):
    """
    Google Calendar API client.

    Every call fetches the whole feed again; nothing is cached.

    Attributes:
        settings: Application settings (calendar id, limits, timeout)
        api_key: Google API key resolved from settings

    Example:
        client = GoogleCalendarClient(settings)
        raw = await client.fetch_raw_feed()
    """

    # Google Calendar API base URL
    BASE_URL = "https://www.googleapis.com/calendar/v3"

    def __init__(
        self,
        settings: Settings,
        api_key: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the Calendar client.

        Args:
            settings: Application settings
            api_key: Override the key resolved from settings
            transport: Custom httpx transport (tests use httpx.MockTransport)
        """
        self.settings = settings
        self.api_key = api_key if api_key is not None else settings.resolve_api_key()
        self._transport = transport

    # -------------------------------------------------------------------------
    # HTTP REQUESTS
    # -------------------------------------------------------------------------

    def _events_url(self) -> str:
        calendar_id = quote(self.settings.GOOGLE_CALENDAR_ID, safe="@.")
        return f"{self.BASE_URL}/calendars/{calendar_id}/events"

    def _get_params(self) -> dict:
        """Query parameters for events.list."""
        return {
            "singleEvents": "true",
            "maxResults": self.settings.CALENDAR_MAX_RESULTS,
            "orderBy": "startTime",
            "key": self.api_key,
        }

    async def fetch_raw_feed(self) -> RawFeed:
        """
        Fetch the events document exactly as Google returns it.

        Returns:
            RawFeed with the response body and content type

        Raises:
            APIError: If the request fails or the status is not 200
        """
        url = self._events_url()
        logger.info(f"Fetching calendar feed for {self.settings.GOOGLE_CALENDAR_ID}")

        async with httpx.AsyncClient(transport=self._transport) as client:
            try:
                response = await client.get(
                    url,
                    params=self._get_params(),
                    headers={"Accept": "application/json"},
                    timeout=self.settings.CALENDAR_REQUEST_TIMEOUT,
                )
            except httpx.RequestError as e:
                logger.error(f"Network error in Calendar API: {e}")
                raise APIError(f"Network error: {e}")

        if response.status_code == 403:
            logger.error("Calendar API: Forbidden (API key may be invalid or calendar private)")
            raise APIError(
                "Forbidden - API key may be invalid or the calendar is not public",
                status_code=403,
                response=response.text,
            )

        if response.status_code != 200:
            error_detail = response.text
            logger.error(f"Calendar API error: {response.status_code} - {error_detail}")
            raise APIError(
                f"API request failed: {error_detail}",
                status_code=response.status_code,
                response=error_detail,
            )

        return RawFeed(
            body=response.content,
            content_type=response.headers.get("content-type"),
        )

    # -------------------------------------------------------------------------
    # CALENDAR EVENTS
    # -------------------------------------------------------------------------

    async def list_events(self) -> List[EventRecord]:
        """
        Fetch the feed and parse every item into an EventRecord.

        Cancelled items and items without a start or end are dropped.

        Returns:
            EventRecords in feed order

        Raises:
            APIError: If the fetch fails
            FeedFormatError: If the body is not a valid events document
        """
        raw = await self.fetch_raw_feed()
        return parse_feed(raw.body)


def parse_feed(body: bytes) -> List[EventRecord]:
    """
    Parse an events.list document into EventRecords.

    Args:
        body: JSON document as returned by the Calendar API

    Returns:
        EventRecords in document order

    Raises:
        FeedFormatError: If the document does not match the feed schema
    """
    try:
        events_response = CalendarEventsResponse.model_validate_json(body)
    except ValidationError as e:
        logger.error(f"Calendar feed is malformed: {e}")
        raise FeedFormatError(f"Malformed calendar feed: {e}")

    records = []
    for item in events_response.items:
        if item.is_cancelled():
            continue
        record = item.to_record()
        if record is None:
            logger.warning(f"Skipping event {item.id!r}: missing start or end")
            continue
        records.append(record)

    logger.info(f"Fetched {len(records)} calendar events")
    return records
