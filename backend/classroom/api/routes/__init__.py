"""API routes package."""

from classroom.api.routes import (
    admin,
    announcements,
    assignments,
    auth,
    chat,
    syllabus,
)

__all__ = [
    "admin",
    "announcements",
    "assignments",
    "auth",
    "chat",
    "syllabus",
]
