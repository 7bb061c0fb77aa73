"""Pydantic schemas for API request/response validation."""

from classroom.schemas.user import UserCreate, UserRead
from classroom.schemas.auth import LoginRequest, TokenResponse
from classroom.schemas.chat import MessageListResponse, MessageRead, MessageSendRequest
from classroom.schemas.syllabus import (
    SubjectCompletion,
    SubjectCreate,
    TopicAddResponse,
    TopicCreate,
    TopicListResponse,
    TopicRead,
)
from classroom.schemas.announcements import AnnouncementCreate, AnnouncementRead
from classroom.schemas.assignments import (
    AssignmentCreate,
    AssignmentRead,
    SubmissionCreate,
    SubmissionRead,
)
from classroom.schemas.admin import (
    SyllabusReport,
    UserFileRequest,
    UserFileResponse,
    UserListResponse,
)

__all__ = [
    # User
    "UserCreate",
    "UserRead",
    # Auth
    "LoginRequest",
    "TokenResponse",
    # Chat
    "MessageListResponse",
    "MessageRead",
    "MessageSendRequest",
    # Syllabus
    "SubjectCompletion",
    "SubjectCreate",
    "TopicAddResponse",
    "TopicCreate",
    "TopicListResponse",
    "TopicRead",
    # Announcements
    "AnnouncementCreate",
    "AnnouncementRead",
    # Assignments
    "AssignmentCreate",
    "AssignmentRead",
    "SubmissionCreate",
    "SubmissionRead",
    # Admin
    "SyllabusReport",
    "UserFileRequest",
    "UserFileResponse",
    "UserListResponse",
]
