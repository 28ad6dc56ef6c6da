"""
Configuration module - centralized settings for the events API.
Uses pydantic-settings to load values from environment variables and .env file.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Pydantic-settings automatically:
    1. Reads from environment variables (highest priority)
    2. Falls back to .env file values
    3. Uses default values if neither exists

    There is no global instance: create_app() builds one and hands it
    to the calendar client explicitly.

    To override in production, set environment variables:
        export GOOGLE_CALENDAR_API_KEY=AIza...
        export GOOGLE_CALENDAR_ID=someone@group.calendar.google.com
    """

    # ---------------------------------------------------------------------------
    # PYDANTIC SETTINGS CONFIGURATION
    # ---------------------------------------------------------------------------
    model_config = SettingsConfigDict(
        env_file=".env",        # Load from .env file in project root
        env_file_encoding="utf-8",  # File encoding
        extra="ignore",         # Ignore extra env vars not defined here
        frozen=True,            # Settings are read-only once built
    )

    # ---------------------------------------------------------------------------
    # APPLICATION SETTINGS
    # ---------------------------------------------------------------------------
    # APP_NAME: Display name shown in API docs
    APP_NAME: str = "Calendar Events API"

    # DEBUG: Enable debug mode (more verbose errors)
    DEBUG: bool = False

    # TESTING: Skip the API key check at startup (test suites only)
    TESTING: bool = False

    # LOG_LEVEL: Level for the "calendar_api" logger tree
    LOG_LEVEL: str = "INFO"

    # ---------------------------------------------------------------------------
    # GOOGLE CALENDAR SETTINGS
    # ---------------------------------------------------------------------------
    # GOOGLE_CALENDAR_API_KEY: Public API key from Google Cloud Console
    # - The calendar must be public; no OAuth is involved
    GOOGLE_CALENDAR_API_KEY: str = ""

    # GOOGLE_CALENDAR_API_KEY_FILE: Fallback file holding the key
    # - Older deployments keep the key in a ".key" file next to the app
    GOOGLE_CALENDAR_API_KEY_FILE: str = ".key"

    # GOOGLE_CALENDAR_ID: The calendar whose events are served
    GOOGLE_CALENDAR_ID: str = "yusu.org_h8uou2ovt1c6gg87q5g758tsvs@group.calendar.google.com"

    # CALENDAR_MAX_RESULTS: maxResults for events.list (API maximum is 2500)
    CALENDAR_MAX_RESULTS: int = 2500

    # CALENDAR_REQUEST_TIMEOUT: Upstream request timeout in seconds
    CALENDAR_REQUEST_TIMEOUT: float = 30.0

    def resolve_api_key(self) -> str:
        """
        Return the Google Calendar API key.

        The environment value wins; otherwise the stripped contents of
        GOOGLE_CALENDAR_API_KEY_FILE are used if that file exists.

        Returns:
            The API key, or "" if none is configured
        """
        if self.GOOGLE_CALENDAR_API_KEY:
            return self.GOOGLE_CALENDAR_API_KEY

        key_file = Path(self.GOOGLE_CALENDAR_API_KEY_FILE)
        if key_file.is_file():
            return key_file.read_text(encoding="utf-8").strip()

        return ""
