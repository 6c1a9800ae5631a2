"""
Typed errors raised by the domain pipelines, the connection cache and services.

The API layer maps them to HTTP responses in devevent.api.errors.
"""

from typing import Any, Optional


class DevEventError(Exception):
    """Base class for application errors."""

    status_code: int = 500
    error: str = "internal_error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(DevEventError):
    """A required setting is missing."""

    error = "configuration_error"

    def __init__(self, setting: str) -> None:
        self.setting = setting
        super().__init__(
            f"Please define the {setting} environment variable (or set it in .env)"
        )


class DatabaseConnectionError(DevEventError):
    """Establishing the database connection failed. A later call may retry."""

    status_code = 503
    error = "database_unavailable"


class ValidationError(DevEventError):
    """A value failed a schema constraint. Not retryable without correction."""

    status_code = 422
    error = "validation_error"

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        self.field = field
        super().__init__(message)


class EventReferenceError(ValidationError):
    """A booking points at an event that does not exist."""

    def __init__(self, event_id: Any) -> None:
        self.event_id = event_id
        super().__init__(f"Event with ID {event_id} does not exist", field="event_id")


class NotFoundError(DevEventError):
    status_code = 404
    error = "not_found"


class DuplicateSlugError(DevEventError):
    status_code = 409
    error = "duplicate_slug"

    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__(f"An event with slug '{slug}' already exists")
