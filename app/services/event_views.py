"""
Event views - turn EventRecords and GridCells into response schemas.

Times and dates are rendered in the event's own UTC offset. Day and month
names are always English, whatever the process locale.
"""

from datetime import datetime

from app.schemas.event import EventRecord, EventView, GridCell, GridCellView, WhenHuman, WhenRaw


WEEKDAY_NAMES = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def format_time(moment: datetime) -> str:
    """24-hour "HH:MM"."""
    return f"{moment.hour:02d}:{moment.minute:02d}"


def format_short_date(moment: datetime) -> str:
    """Short date, DD/MM/YYYY."""
    return f"{moment.day:02d}/{moment.month:02d}/{moment.year:04d}"


def format_long_date(moment: datetime) -> str:
    """e.g. "Sunday 15 December 2019" (day not zero-padded)."""
    weekday = WEEKDAY_NAMES[moment.weekday()]
    month = MONTH_NAMES[moment.month - 1]
    return f"{weekday} {moment.day} {month} {moment.year}"


def to_view(event: EventRecord) -> EventView:
    """
    Build the JSON view of an event.

    Text fields are passed through unchanged; None stays None.
    """
    return EventView(
        when_raw=WhenRaw(
            start=event.start_time.isoformat(),
            end=event.end_time.isoformat(),
        ),
        when_human=WhenHuman(
            start_time=format_time(event.start_time),
            end_time=format_time(event.end_time),
            short_start_date=format_short_date(event.start_time),
            short_end_date=format_short_date(event.end_time),
            long_start_date=format_long_date(event.start_time),
            long_end_date=format_long_date(event.end_time),
        ),
        summary=event.summary,
        description=event.description,
        location=event.location,
        meeting_link=event.meeting_link,
    )


def to_cell_view(cell: GridCell) -> GridCellView:
    """Build the JSON view of one grid day."""
    return GridCellView(
        date=cell.date,
        day=cell.day,
        in_month=cell.in_month,
        events=[to_view(event) for event in cell.events],
    )
