"""Error types raised by the calendar pipeline and its collaborators.

All of them are fatal for a run and propagate to the entry point. Lines or
items that fail to parse are not errors and never raise.
"""


class CalendarError(Exception):
    """Base class for unrecoverable updater errors."""


class FetchError(CalendarError):
    """The feed request failed or returned a non-success status."""

    def __init__(self, url: str, status_code: int | None = None, reason=None):
        self.url = url
        self.status_code = status_code
        message = f"Failed to fetch feed from {url}"
        if status_code is not None:
            message += f" (HTTP {status_code})"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class DecodeError(CalendarError):
    """The feed body is not XML or lacks the channel item collection."""


class ConfigError(CalendarError, ValueError):
    """A required configuration value is missing or has the wrong type."""


class PublishError(CalendarError):
    """The wiki page could not be read or written."""
