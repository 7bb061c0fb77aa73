"""
Typed failures for classroom operations.

Every failure is recoverable and reported to the caller. The API layer
translates them into JSON responses using ``status_code``.
"""

from fastapi import status


class ClassroomError(Exception):
    """Base class for all recoverable classroom failures."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = "Request could not be completed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFound(ClassroomError):
    """Username, peer, subject, topic, or assignment is absent."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class AlreadyExists(ClassroomError):
    """Duplicate username or subject."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Resource already exists"


class PermissionDenied(ClassroomError):
    """The acting role lacks rights for the requested operation."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Permission denied"


class InvalidCredentials(ClassroomError):
    """Login mismatch or missing session."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid credentials"


class CapacityExceeded(ClassroomError):
    """A bounded store is full."""

    status_code = status.HTTP_507_INSUFFICIENT_STORAGE
    default_message = "Capacity exceeded"


class IOUnavailable(ClassroomError):
    """A persistence file cannot be opened."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_message = "File unavailable"
