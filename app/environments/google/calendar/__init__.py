"""
Google Calendar Module - Calendar API Integration

This module reads the events of a public Google Calendar so they can be
served as JSON month lists and month grids.

Features:
=========
- Raw events feed passthrough
- Parsing of the feed into EventRecords
"""

from app.environments.google.calendar.client import GoogleCalendarClient, parse_feed
from app.environments.google.calendar.schemas import (
    CalendarEventsResponse,
    EventTime,
    FeedEvent,
)

__all__ = [
    "GoogleCalendarClient",
    "parse_feed",
    "CalendarEventsResponse",
    "EventTime",
    "FeedEvent",
]
