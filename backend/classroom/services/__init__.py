"""Services sitting between the API and the data structures."""

from classroom.services.classroom_service import ClassroomService

__all__ = ["ClassroomService"]
