"""
Google Environment Module - Google Calendar Integration

Architecture:
=============
google/
├── __init__.py           # Module exports
└── calendar/             # Google Calendar API
    ├── __init__.py
    ├── client.py         # Events feed client
    └── schemas.py        # Feed data structures

Usage:
======
    from app.environments.google import GoogleCalendarClient

    calendar = GoogleCalendarClient(settings)
    events = await calendar.list_events()
"""

from app.environments.google.calendar import GoogleCalendarClient, FeedEvent

__all__ = [
    "GoogleCalendarClient",
    "FeedEvent",
]
