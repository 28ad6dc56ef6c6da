"""
Base classes and interfaces for Environment integrations.

This module defines the contract that an upstream calendar source must
implement, and the exceptions it may raise.

Design Pattern: Strategy Pattern
================================
- EnvironmentService: Abstract base for an upstream feed (strategy for fetching)

The routers only depend on EnvironmentService, so tests can swap the
Google client for an in-memory feed.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List, Optional

from app.schemas.event import EventRecord


# ---------------------------------------------------------------------------
# CUSTOM EXCEPTIONS
# ---------------------------------------------------------------------------
# Specific exceptions for environment operations.
# Using custom exceptions allows for precise error handling in routes.


class EnvironmentError(Exception):
    """Base exception for all environment-related errors."""
    pass


class APIError(EnvironmentError):
    """Raised when an API call to the provider fails."""

    def __init__(self, message: str, status_code: Optional[int] = None, response: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class FeedFormatError(APIError):
    """Raised when the upstream document does not look like an events feed."""
    pass


class ConfigurationError(Exception):
    """Raised at startup when a required setting is missing."""
    pass


# ---------------------------------------------------------------------------
# DATA STRUCTURES
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RawFeed:
    """
    The upstream document exactly as it was received.

    Kept as bytes so the passthrough endpoint can return it unmodified.
    """
    body: bytes
    content_type: Optional[str] = None


# ---------------------------------------------------------------------------
# ABSTRACT BASE CLASSES
# ---------------------------------------------------------------------------


class EnvironmentService(ABC):
    """
    Abstract base class for an upstream calendar feed.

    Example Implementation:
        class GoogleCalendarClient(EnvironmentService):
            async def fetch_raw_feed(self) -> RawFeed:
                ...
    """

    @abstractmethod
    async def fetch_raw_feed(self) -> RawFeed:
        """
        Fetch the upstream document.

        Returns:
            RawFeed with the body and content type

        Raises:
            APIError: If the upstream cannot be reached or answers non-2xx
        """
        pass

    @abstractmethod
    async def list_events(self) -> List[EventRecord]:
        """
        Fetch the feed and parse it into event records.

        Returns:
            EventRecords in feed order

        Raises:
            APIError: If the fetch fails
            FeedFormatError: If the document is not a valid feed
        """
        pass
