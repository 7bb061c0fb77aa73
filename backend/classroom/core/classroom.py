"""
Classroom aggregate.

Owns one instance of every structure. Nothing here is process-global, so
independent classrooms (one per app, one per test) never share state.
"""

import logging
from typing import TYPE_CHECKING

from classroom.core.announcements import AnnouncementBoard
from classroom.core.chat import ChatGraph
from classroom.core.scheduler import DEFAULT_CAPACITY, AssignmentScheduler
from classroom.core.syllabus import SyllabusIndex
from classroom.core.users import DEFAULT_BUCKET_COUNT, Role, UserDirectory

if TYPE_CHECKING:
    from classroom.config import Settings

logger = logging.getLogger(__name__)


class Classroom:
    """Users, chat, syllabus, announcements and assignments for one class."""

    def __init__(
        self,
        bucket_count: int = DEFAULT_BUCKET_COUNT,
        assignment_capacity: int = DEFAULT_CAPACITY,
    ):
        self.directory = UserDirectory(bucket_count)
        self.chat = ChatGraph()
        self.syllabus = SyllabusIndex()
        self.announcements = AnnouncementBoard()
        self.scheduler = AssignmentScheduler(assignment_capacity)

    @classmethod
    def from_settings(cls, settings: "Settings") -> "Classroom":
        classroom = cls(
            bucket_count=settings.user_hash_buckets,
            assignment_capacity=settings.assignment_capacity,
        )
        if settings.seed_sample_data:
            classroom.seed_sample_data()
        return classroom

    def seed_sample_data(self) -> None:
        """Load the demo roster, syllabus, announcements and assignments."""
        self.directory.create("admin", "adminpass", Role.ADMIN)
        teacher = self.directory.create("teacher1", "teachpass", Role.TEACHER)
        alice = self.directory.create("alice", "alice123", Role.STUDENT)
        bob = self.directory.create("bob", "bob123", Role.STUDENT)

        self.syllabus.create_subject("Math")
        for topic in ("Algebra", "Calculus", "Probability"):
            self.syllabus.add_topic("Math", topic)
        self.syllabus.create_subject("CS")
        for topic in ("Data Structures", "Algorithms", "Operating Systems"):
            self.syllabus.add_topic("CS", topic)

        self.announcements.post("Welcome to the semester! Check syllabus updates.")
        self.announcements.post("Midterm scheduled in 2 weeks.")

        self.scheduler.push(self.scheduler.create("Algebra HW1", "Solve Q1-Q10", 20251105))
        self.scheduler.push(self.scheduler.create("DS Lab1", "Implement linked list", 20251030))

        self.chat.ensure_edge(teacher.id, alice.id)
        self.chat.ensure_edge(teacher.id, bob.id)

        logger.info("Seeded sample classroom with %d users", len(self.directory))
