"""
Domain errors raised by services and rendered by the API layer.

Every error carries a machine-readable ``kind`` and a human-readable
``message``. The HTTP status is attached to the class so handlers in
``app.main`` can render any of them uniformly:

    raise NotFoundError("Mood not found for 2024-05-01")
"""
from typing import Any, Optional


class MoodTrackerError(Exception):
    """Base class for all expected, structured failures."""
    kind = "error"
    status_code = 500

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class NotFoundError(MoodTrackerError):
    """Entity absent."""
    kind = "not_found"
    status_code = 404


class ValidationError(MoodTrackerError):
    """Missing or malformed field, unknown reference, or bad date range."""
    kind = "validation_error"
    status_code = 400


class ConflictError(MoodTrackerError):
    """Uniqueness violation, e.g. a second check-in on the same day."""
    kind = "conflict"
    status_code = 409


class UnauthorizedError(MoodTrackerError):
    """Missing or invalid credential."""
    kind = "unauthorized"
    status_code = 401


class ForbiddenError(MoodTrackerError):
    """Authenticated, but the request is not allowed in the current state."""
    kind = "forbidden"
    status_code = 403
