"""Subject and topic schemas."""

from pydantic import BaseModel, Field

from classroom.schemas.base import BaseSchema, ShortText, SubjectName


class SubjectCreate(BaseSchema):
    """Schema for creating a subject."""

    name: SubjectName


class TopicCreate(BaseSchema):
    """Schema for adding a topic to a subject."""

    name: ShortText


class TopicRead(BaseSchema):
    """A topic and its completion state."""

    name: str
    completed: bool


class TopicListResponse(BaseModel):
    """Topics of a subject in name order."""

    subject: str
    topics: list[TopicRead]


class TopicAddResponse(BaseModel):
    """Result of adding a topic. ``created`` is false for a duplicate name."""

    subject: str
    name: str
    created: bool


class SubjectCompletion(BaseModel):
    """Completion percentage of one subject."""

    subject: str
    completion_percent: float = Field(..., ge=0, le=100)
