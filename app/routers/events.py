"""
Events router - JSON views of the calendar feed.

Endpoints:
==========
- GET /json                           → Upstream feed, unmodified
- GET /events/{year}/{month}          → Events of one month, by start time
- GET /events/{year}/{month}/calendar → Month grid (week rows of 7 days)

Path parameters are kept as strings so non-numeric values can be answered
with {"error": "provide numbers"} instead of FastAPI's validation body.
Upstream failures are not handled here; APIError is turned into a 502 by
the handler registered in app.main.
"""

import logging
import re
from datetime import MAXYEAR, MINYEAR
from typing import List, Tuple

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from app.deps import get_calendar_client
from app.environments.base import EnvironmentService
from app.schemas.event import EventView, GridCellView
from app.services.calendar_grid import build_grid
from app.services.event_filters import select_month, select_surrounding
from app.services.event_views import to_cell_view, to_view


logger = logging.getLogger("calendar_api.routers.events")


# ---------------------------------------------------------------------------
# ROUTER SETUP
# ---------------------------------------------------------------------------
router = APIRouter(tags=["events"])

NUMBER_PATTERN = re.compile(r"\d+", re.ASCII)

# The December grid of MAXYEAR would run past date.max
LAST_YEAR = MAXYEAR - 1


# ---------------------------------------------------------------------------
# HELPER FUNCTIONS
# ---------------------------------------------------------------------------

class InvalidPeriod(Exception):
    """Raised when a year/month path pair cannot be served."""
    pass


def parse_period(year: str, month: str) -> Tuple[int, int]:
    """
    Validate and convert the year/month path parameters.

    Args:
        year: Raw year path segment
        month: Raw month path segment

    Returns:
        (year, month) as integers

    Raises:
        InvalidPeriod: With the message to send back to the client
    """
    if not (NUMBER_PATTERN.fullmatch(year) and NUMBER_PATTERN.fullmatch(month)):
        raise InvalidPeriod("provide numbers")

    # Bound the digits before int(); huge strings exceed the conversion limit
    year_digits = year.lstrip("0") or "0"
    month_digits = month.lstrip("0") or "0"
    if len(month_digits) > 2:
        raise InvalidPeriod("month must be between 1 and 12")
    if len(year_digits) > len(str(LAST_YEAR)):
        raise InvalidPeriod("year out of range")

    year_number = int(year_digits)
    month_number = int(month_digits)

    if not 1 <= month_number <= 12:
        raise InvalidPeriod("month must be between 1 and 12")
    if not MINYEAR <= year_number <= LAST_YEAR:
        raise InvalidPeriod("year out of range")

    return year_number, month_number


def bad_request(error: InvalidPeriod) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": str(error)},
    )


# ---------------------------------------------------------------------------
# ENDPOINTS
# ---------------------------------------------------------------------------

@router.get("/json")
async def get_raw_feed(
    calendar_client: EnvironmentService = Depends(get_calendar_client),
):
    """
    Return the upstream calendar document unmodified.

    The content type mirrors upstream, falling back to application/json.
    """
    raw = await calendar_client.fetch_raw_feed()
    return Response(
        content=raw.body,
        media_type=raw.content_type or "application/json",
    )


@router.get(
    "/events/{year}/{month}",
    response_model=List[EventView],
    responses={400: {"description": "Year or month is not a valid number"}},
)
async def get_month_events(
    year: str,
    month: str,
    calendar_client: EnvironmentService = Depends(get_calendar_client),
):
    """
    Get the events of one month, sorted by start time.

    An empty month returns an empty list.
    """
    try:
        year_number, month_number = parse_period(year, month)
    except InvalidPeriod as e:
        logger.info(f"Rejected /events/{year}/{month}: {e}")
        return bad_request(e)

    events = await calendar_client.list_events()
    return [to_view(event) for event in select_month(events, year_number, month_number)]


@router.get(
    "/events/{year}/{month}/calendar",
    response_model=List[List[GridCellView]],
    responses={400: {"description": "Year or month is not a valid number"}},
)
async def get_month_calendar(
    year: str,
    month: str,
    calendar_client: EnvironmentService = Depends(get_calendar_client),
):
    """
    Get the month as a grid of week rows.

    Each row has 7 days starting on Monday. Days from the neighbouring
    months fill the first and last rows and carry their own events.
    """
    try:
        year_number, month_number = parse_period(year, month)
    except InvalidPeriod as e:
        logger.info(f"Rejected /events/{year}/{month}/calendar: {e}")
        return bad_request(e)

    events = await calendar_client.list_events()
    window = select_surrounding(events, year_number, month_number)
    grid = build_grid(year_number, month_number, window)

    return [[to_cell_view(cell) for cell in row] for row in grid]
