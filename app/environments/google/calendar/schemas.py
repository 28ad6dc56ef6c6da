"""
Google Calendar Schemas - Data structures for the events feed.

These Pydantic models represent the Google Calendar events.list response
in a clean, typed format. FeedEvent.to_record() turns one item into the
EventRecord used by the rest of the application.

Reference: https://developers.google.com/calendar/api/v3/reference/events/list
"""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field

from app.schemas.event import EventRecord


class EventTime(BaseModel):
    """
    Event start or end time.

    Google Calendar API returns times in one of two formats:
    - dateTime: For timed events (e.g., "2019-12-15T12:00:00Z")
    - date: For all-day events (e.g., "2019-12-15")

    We normalize this into a timezone-aware datetime.
    """
    date_time: Optional[datetime] = Field(None, alias="dateTime")
    date: Optional[str] = Field(None)  # YYYY-MM-DD format for all-day events
    time_zone: Optional[str] = Field(None, alias="timeZone")

    def get_datetime(self) -> Optional[datetime]:
        """
        Get the instant as an aware datetime.

        Timed values keep the offset the feed sent. All-day values become
        midnight at UTC offset zero so their calendar day is unchanged.
        """
        if self.date_time:
            if self.date_time.tzinfo is None:
                return self.date_time.replace(tzinfo=timezone.utc)
            return self.date_time
        if self.date:
            # Parse YYYY-MM-DD string to datetime
            return datetime.strptime(self.date, "%Y-%m-%d").replace(tzinfo=timezone.utc)
        return None

    class Config:
        populate_by_name = True


class FeedEvent(BaseModel):
    """
    One item of the events feed.

    Only the fields the API serves are modelled; the rest are ignored.
    """
    id: Optional[str] = Field(None, description="Unique event identifier")
    status: Optional[str] = Field(None, description="confirmed, tentative, cancelled")
    summary: Optional[str] = Field(None, description="Event title")
    description: Optional[str] = Field(None, description="Event description")
    location: Optional[str] = Field(None, description="Event location")

    # Times
    start: Optional[EventTime] = Field(None, description="Event start time")
    end: Optional[EventTime] = Field(None, description="Event end time")

    # Meeting info
    hangout_link: Optional[str] = Field(None, alias="hangoutLink")

    class Config:
        populate_by_name = True

    def is_cancelled(self) -> bool:
        return self.status == "cancelled"

    def to_record(self) -> Optional[EventRecord]:
        """
        Convert this item to an EventRecord.

        Returns:
            The record, or None if the item has no usable start or end
        """
        start = self.start.get_datetime() if self.start else None
        end = self.end.get_datetime() if self.end else None
        if start is None or end is None:
            return None

        return EventRecord(
            summary=self.summary,
            description=self.description,
            location=self.location,
            start_time=start,
            end_time=end,
            meeting_link=self.hangout_link,
        )


class CalendarEventsResponse(BaseModel):
    """
    Response from events.list API.

    Contains the list of events and calendar metadata.
    """
    summary: Optional[str] = Field(None, description="Calendar title")
    time_zone: Optional[str] = Field(None, alias="timeZone")
    items: List[FeedEvent] = Field(default_factory=list)

    class Config:
        populate_by_name = True
