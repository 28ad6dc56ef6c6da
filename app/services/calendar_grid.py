"""
Calendar grid - lay out a month as weeks of days.

The grid starts on the week-start day on or before the 1st of the month
and always spans CALENDAR_ROWS * DAYS_OF_WEEK days. Rows at either end
that contain no day of the month are then removed, so December 2019
keeps 6 rows and February 2021 only 4.

Week start:
===========
WEEK_START is Monday. Changing it moves every cell of the grid.
"""

import calendar
from datetime import date, timedelta
from typing import Iterable, List, Sequence

from app.schemas.event import EventRecord, GridCell


WEEK_START = calendar.MONDAY
CALENDAR_ROWS = 6
DAYS_OF_WEEK = 7


def week_start(day: date, first_weekday: int = WEEK_START) -> date:
    """
    Get the first day of the week containing `day`.

    Args:
        day: Any date
        first_weekday: Weekday the week starts on (calendar.MONDAY == 0)

    Returns:
        The latest date on or before `day` falling on `first_weekday`
    """
    offset = (day.weekday() - first_weekday) % DAYS_OF_WEEK
    return day - timedelta(days=offset)


def trim_grid(rows: Sequence[Sequence[GridCell]]) -> List[List[GridCell]]:
    """
    Remove leading and trailing rows with no in-month cell.

    Inner rows are always kept. Trimming a trimmed grid changes nothing.
    """
    start = 0
    end = len(rows)
    while start < end and not any(cell.in_month for cell in rows[start]):
        start += 1
    while end > start and not any(cell.in_month for cell in rows[end - 1]):
        end -= 1
    return [list(row) for row in rows[start:end]]


def build_grid(year: int, month: int, events: Iterable[EventRecord]) -> List[List[GridCell]]:
    """
    Build the month grid for (year, month).

    Args:
        year: Calendar year
        month: Calendar month; 1 is January
        events: Events to place, normally the 3-month window around the month

    Returns:
        Week rows of DAYS_OF_WEEK cells each, trimmed

    Raises:
        ValueError: If month is not 1-12 or the year is out of range
    """
    events = list(events)
    current = week_start(date(year, month, 1))

    cells = []
    for _ in range(CALENDAR_ROWS * DAYS_OF_WEEK):
        cells.append(GridCell(
            date=current,
            in_month=(current.year == year and current.month == month),
            events=tuple(event for event in events if event.start_date == current),
        ))
        current += timedelta(days=1)

    rows = [cells[i:i + DAYS_OF_WEEK] for i in range(0, len(cells), DAYS_OF_WEEK)]
    return trim_grid(rows)
