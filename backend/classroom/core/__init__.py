"""In-memory data structures backing the classroom."""

from classroom.core.announcements import Announcement, AnnouncementBoard
from classroom.core.chat import ChatEdge, ChatGraph, Message
from classroom.core.classroom import Classroom
from classroom.core.errors import (
    AlreadyExists,
    CapacityExceeded,
    ClassroomError,
    InvalidCredentials,
    IOUnavailable,
    NotFound,
    PermissionDenied,
)
from classroom.core.scheduler import Assignment, AssignmentScheduler, Submission
from classroom.core.syllabus import SyllabusIndex, TopicNode, TopicTree
from classroom.core.users import Role, User, UserDirectory, UserRecord

__all__ = [
    # Structures
    "AnnouncementBoard",
    "AssignmentScheduler",
    "ChatGraph",
    "Classroom",
    "SyllabusIndex",
    "TopicTree",
    "UserDirectory",
    # Records
    "Announcement",
    "Assignment",
    "ChatEdge",
    "Message",
    "Role",
    "Submission",
    "TopicNode",
    "User",
    "UserRecord",
    # Errors
    "AlreadyExists",
    "CapacityExceeded",
    "ClassroomError",
    "InvalidCredentials",
    "IOUnavailable",
    "NotFound",
    "PermissionDenied",
]
