"""Assignment schemas."""

from datetime import datetime

from pydantic import Field, field_validator

from classroom.core.scheduler import validate_due_date
from classroom.schemas.base import BaseSchema, ShortText


class AssignmentCreate(BaseSchema):
    """Schema for creating an assignment."""

    title: ShortText
    description: str = Field("", max_length=511)
    due_date: int = Field(..., description="Due date as YYYYMMDD", examples=[20251105])

    @field_validator("due_date")
    @classmethod
    def check_due_date(cls, v: int) -> int:
        """Ensure due_date is a real calendar date in YYYYMMDD form."""
        return validate_due_date(v)


class SubmissionCreate(BaseSchema):
    """Schema for submitting an assignment (simulated upload)."""

    filename: ShortText


class SubmissionRead(BaseSchema):
    """Schema for reading a submission."""

    student_id: int
    student_username: str
    filename: str
    timestamp: datetime


class AssignmentRead(BaseSchema):
    """Schema for reading assignment data, submissions newest first."""

    id: int
    title: str
    description: str
    due_date: int
    submissions: list[SubmissionRead] = Field(default_factory=list)
