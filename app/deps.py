"""
Dependencies module - reusable FastAPI dependencies for route handlers.

The calendar client is built once in create_app() and kept on app.state,
so tests can replace it with app.dependency_overrides.
"""

from fastapi import Request

from app.environments.base import EnvironmentService


def get_calendar_client(request: Request) -> EnvironmentService:
    """Upstream calendar feed used by the events endpoints."""
    return request.app.state.calendar_client
