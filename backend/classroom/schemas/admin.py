"""Admin panel schemas."""

from pydantic import BaseModel, Field

from classroom.schemas.base import BaseSchema
from classroom.schemas.syllabus import SubjectCompletion
from classroom.schemas.user import UserRead


class UserFileRequest(BaseSchema):
    """Path of a user file, relative to the configured data directory."""

    path: str = Field(..., min_length=1, max_length=255)


class UserFileResponse(BaseModel):
    """Outcome of a user export or import."""

    path: str
    count: int = Field(..., description="Records written, or new users loaded")


class UserListResponse(BaseModel):
    """Every registered user in directory order."""

    users: list[UserRead]
    total: int


class SyllabusReport(BaseModel):
    """Completion of every subject."""

    subjects: list[SubjectCompletion]
