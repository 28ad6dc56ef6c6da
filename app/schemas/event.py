"""
Event schemas - core value objects and the JSON views built from them.

Core types (frozen dataclasses, never mutated after construction):
- EventRecord: one calendar occurrence taken from the feed
- GridCell: one day of the month grid

Response types (Pydantic, serialized by FastAPI):
- EventView: the JSON shape of one event
- GridCellView: the JSON shape of one grid day
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# CORE VALUE OBJECTS
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class EventRecord:
    """
    A single calendar event.

    start_time and end_time are timezone-aware and keep the offset the
    feed encoded, so start_time.date() is the event's local calendar day.
    """
    summary: Optional[str]
    description: Optional[str]
    location: Optional[str]
    start_time: datetime
    end_time: datetime
    meeting_link: Optional[str] = None

    @property
    def start_date(self) -> date:
        """Calendar date of the start, in the event's own offset."""
        return self.start_time.date()


@dataclass(frozen=True)
class GridCell:
    """One day of the month grid."""
    date: date
    in_month: bool
    events: Tuple[EventRecord, ...] = ()

    @property
    def day(self) -> int:
        return self.date.day


# ---------------------------------------------------------------------------
# RESPONSE SCHEMAS (what the client receives)
# ---------------------------------------------------------------------------

class WhenRaw(BaseModel):
    """Start and end instants as ISO-8601 strings, offset included."""
    start: str
    end: str


class WhenHuman(BaseModel):
    """
    Display strings for an event's start and end.

    Example:
    {
        "start_time": "12:00",
        "end_time": "15:00",
        "short_start_date": "15/12/2019",
        "short_end_date": "15/12/2019",
        "long_start_date": "Sunday 15 December 2019",
        "long_end_date": "Sunday 15 December 2019"
    }
    """
    start_time: str = Field(..., description="HH:MM, 24-hour")
    end_time: str = Field(..., description="HH:MM, 24-hour")
    short_start_date: str = Field(..., description="DD/MM/YYYY")
    short_end_date: str = Field(..., description="DD/MM/YYYY")
    long_start_date: str = Field(..., description="e.g. Sunday 15 December 2019")
    long_end_date: str = Field(..., description="e.g. Sunday 15 December 2019")


class EventView(BaseModel):
    """The JSON shape of one event, shared by every endpoint."""
    when_raw: WhenRaw
    when_human: WhenHuman
    summary: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    meeting_link: Optional[str] = None


class GridCellView(BaseModel):
    """
    The JSON shape of one grid day.

    Example:
    {
        "date": "2019-12-15",
        "day": 15,
        "in_month": true,
        "events": [...]
    }
    """
    date: date
    day: int = Field(..., ge=1, le=31)
    in_month: bool
    events: List[EventView] = Field(default_factory=list)
