"""
Environments Module - External Service Integrations

This module holds the upstream sources the API reads its events from.

Architecture Overview:
======================
environments/
├── __init__.py           # Module exports
├── base.py               # Abstract feed contract and exceptions
└── google/               # Google Calendar integration
    └── calendar/         # Public events feed (API key)

Design Principles:
==================
1. The routers depend on EnvironmentService, not on Google
2. Every upstream failure surfaces as APIError
3. Testability: a fake EnvironmentService can replace the Google client
"""

from app.environments.base import (
    EnvironmentService,
    EnvironmentError,
    APIError,
    FeedFormatError,
    ConfigurationError,
    RawFeed,
)

__all__ = [
    "EnvironmentService",
    "EnvironmentError",
    "APIError",
    "FeedFormatError",
    "ConfigurationError",
    "RawFeed",
]
