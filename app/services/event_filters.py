"""
Event filters - select events by calendar month.

Months are compared on the event's local start date, i.e. in the UTC
offset the feed encoded for that event. An event at 00:30+01:00 on
1 October is an October event even though it is 30 September in UTC.
"""

from typing import Iterable, List, Tuple

from app.schemas.event import EventRecord


def previous_month(year: int, month: int) -> Tuple[int, int]:
    """(year, month) of the month before, wrapping January to December."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def next_month(year: int, month: int) -> Tuple[int, int]:
    """(year, month) of the month after, wrapping December to January."""
    if month == 12:
        return year + 1, 1
    return year, month + 1


def select_month(events: Iterable[EventRecord], year: int, month: int) -> List[EventRecord]:
    """
    Get the events starting in the given year and month.

    Args:
        events: Events in any order
        year: Calendar year
        month: Calendar month; 1 is January

    Returns:
        Matching events sorted by start time (empty if none match)
    """
    matching = [
        event for event in events
        if event.start_time.year == year and event.start_time.month == month
    ]
    return sorted(matching, key=lambda event: event.start_time)


def select_surrounding(events: Iterable[EventRecord], year: int, month: int) -> List[EventRecord]:
    """
    Get the events of a 3-month window centred on the given month.

    The result is three blocks, each sorted on its own: the previous
    month, the month itself, then the next month.

    Args:
        events: Events in any order
        year: Calendar year of the centre month
        month: Centre month; 1 is January

    Returns:
        Events of the previous, current and next month
    """
    events = list(events)
    prev_year, prev_month = previous_month(year, month)
    next_year, next_month_ = next_month(year, month)

    return (
        select_month(events, prev_year, prev_month)
        + select_month(events, year, month)
        + select_month(events, next_year, next_month_)
    )
