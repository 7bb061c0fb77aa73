"""
Classroom command service.

Resolves acting identities, enforces role rights and serializes access to
each structure. Every structure has its own lock; they never call into each
other, so the locks are independent.
"""

import logging
import threading
from pathlib import Path

from classroom.core.announcements import Announcement
from classroom.core.chat import Message
from classroom.core.classroom import Classroom
from classroom.core.errors import (
    CapacityExceeded,
    InvalidCredentials,
    NotFound,
    PermissionDenied,
)
from classroom.core.persistence import load_users, save_users
from classroom.core.scheduler import Assignment, Submission
from classroom.core.users import Role, User

logger = logging.getLogger(__name__)

UNKNOWN_USERNAME = "Unknown"


class ClassroomService:
    """Command surface over a single ``Classroom``."""

    def __init__(self, classroom: Classroom):
        self.classroom = classroom
        self._directory_lock = threading.RLock()
        self._chat_lock = threading.RLock()
        self._syllabus_lock = threading.RLock()
        self._announcements_lock = threading.RLock()
        self._scheduler_lock = threading.RLock()

    # =========================================================================
    # PERMISSIONS
    # =========================================================================

    @staticmethod
    def _require_staff(actor: User, action: str) -> None:
        if actor.role == Role.STUDENT:
            logger.warning("Student %s denied: %s", actor.username, action)
            raise PermissionDenied(f"Students cannot {action}")

    @staticmethod
    def _require_admin(actor: User) -> None:
        if actor.role != Role.ADMIN:
            logger.warning("Non-admin %s denied admin access", actor.username)
            raise PermissionDenied("Admin only")

    @staticmethod
    def _require_student(actor: User) -> None:
        if actor.role != Role.STUDENT:
            raise PermissionDenied("Only students can submit")

    # =========================================================================
    # ACCOUNTS
    # =========================================================================

    def register(self, username: str, password: str, role: Role) -> User:
        """Create an account. Raises AlreadyExists for a taken username."""
        with self._directory_lock:
            user = self.classroom.directory.create(username, password, role)
        logger.info("Registered %s as %s (id %d)", user.username, user.role.label, user.id)
        return user

    def login(self, username: str, password: str) -> User:
        """
        Check credentials.

        Raises:
            InvalidCredentials: if the user is unknown or the password differs.
        """
        with self._directory_lock:
            user = self.classroom.directory.find_by_name(username)
        if user is None or not user.check_password(password):
            logger.warning("Rejected login for %s", username)
            raise InvalidCredentials()
        logger.info("Logged in %s (id %d)", user.username, user.id)
        return user

    def get_user(self, user_id: int) -> User | None:
        with self._directory_lock:
            return self.classroom.directory.find_by_id(user_id)

    def username_of(self, user_id: int) -> str:
        """Display name for ``user_id``, or "Unknown" if it does not resolve."""
        user = self.get_user(user_id)
        return user.username if user else UNKNOWN_USERNAME

    def _user_by_name(self, username: str) -> User:
        with self._directory_lock:
            user = self.classroom.directory.find_by_name(username)
        if user is None:
            raise NotFound(f"User '{username}' not found")
        return user

    # =========================================================================
    # CHAT
    # =========================================================================

    def send_message(self, sender: User, peer_username: str, text: str) -> Message:
        peer = self._user_by_name(peer_username)
        with self._chat_lock:
            message = self.classroom.chat.send(sender.id, peer.id, text)
        if message is None:
            # Only reachable with non-positive ids, which the directory never issues.
            raise NotFound(f"User '{peer_username}' not found")
        return message

    def view_messages(self, viewer: User, peer_username: str) -> list[Message]:
        """Messages ``peer_username`` sent to ``viewer``; not the ones viewer sent."""
        peer = self._user_by_name(peer_username)
        with self._chat_lock:
            return self.classroom.chat.messages_between(viewer.id, peer.id)

    def transcript(self, viewer: User, peer_username: str) -> list[Message]:
        """Both directions of a conversation, merged by time."""
        peer = self._user_by_name(peer_username)
        with self._chat_lock:
            return self.classroom.chat.transcript(viewer.id, peer.id)

    def peers(self, user: User) -> list[int]:
        with self._chat_lock:
            return self.classroom.chat.peers_of(user.id)

    # =========================================================================
    # SYLLABUS
    # =========================================================================

    def create_subject(self, actor: User, name: str) -> None:
        self._require_staff(actor, "create subjects")
        with self._syllabus_lock:
            self.classroom.syllabus.create_subject(name)
        logger.info("%s created subject %s", actor.username, name)

    def list_subjects(self) -> list[str]:
        with self._syllabus_lock:
            return self.classroom.syllabus.subjects()

    def add_topic(self, actor: User, subject: str, topic: str) -> bool:
        """Returns False when the topic already existed."""
        self._require_staff(actor, "add topics")
        with self._syllabus_lock:
            return self.classroom.syllabus.add_topic(subject, topic)

    def mark_topic_complete(self, actor: User, subject: str, topic: str) -> None:
        self._require_staff(actor, "mark topics complete")
        with self._syllabus_lock:
            self.classroom.syllabus.mark_complete(subject, topic)
        logger.info("Marked '%s' as completed in %s", topic, subject)

    def view_topics(self, subject: str) -> list[tuple[str, bool]]:
        with self._syllabus_lock:
            return list(self.classroom.syllabus.list_topics(subject))

    def subject_completion(self, subject: str) -> float:
        with self._syllabus_lock:
            return self.classroom.syllabus.completion_percent(subject)

    # =========================================================================
    # ANNOUNCEMENTS
    # =========================================================================

    def post_announcement(self, actor: User, text: str) -> Announcement:
        self._require_staff(actor, "post announcements")
        with self._announcements_lock:
            return self.classroom.announcements.post(text)

    def view_announcements(self) -> list[Announcement]:
        with self._announcements_lock:
            return self.classroom.announcements.list()

    # =========================================================================
    # ASSIGNMENTS
    # =========================================================================

    def create_assignment(
        self, actor: User, title: str, description: str, due_date: int
    ) -> Assignment:
        """Create and schedule an assignment."""
        self._require_staff(actor, "create assignments")
        scheduler = self.classroom.scheduler
        with self._scheduler_lock:
            # Checked before allocation so a full store does not consume an id.
            if len(scheduler) >= scheduler.capacity:
                logger.warning("Assignment store full (%d)", scheduler.capacity)
                raise CapacityExceeded(
                    f"Assignment store is full ({scheduler.capacity} assignments)"
                )
            assignment = scheduler.create(title, description, due_date)
            scheduler.push(assignment)
        logger.info("%s created assignment %d due %d", actor.username, assignment.id, due_date)
        return assignment

    def list_assignments(self) -> list[Assignment]:
        with self._scheduler_lock:
            return self.classroom.scheduler.list_all_sorted_by_due()

    def get_assignment(self, assignment_id: int) -> Assignment:
        with self._scheduler_lock:
            assignment = self.classroom.scheduler.find_by_id(assignment_id)
        if assignment is None:
            raise NotFound(f"Assignment with id {assignment_id} not found")
        return assignment

    def next_assignment(self) -> Assignment | None:
        with self._scheduler_lock:
            return self.classroom.scheduler.peek_min()

    def submit_assignment(self, actor: User, assignment_id: int, filename: str) -> Submission:
        self._require_student(actor)
        with self._scheduler_lock:
            submission = self.classroom.scheduler.record_submission(
                assignment_id, actor.id, filename
            )
        logger.info(
            "Submission recorded for assignment %d by user %d", assignment_id, actor.id
        )
        return submission

    # =========================================================================
    # ADMIN
    # =========================================================================

    def list_users(self, actor: User) -> list[User]:
        self._require_admin(actor)
        with self._directory_lock:
            return list(self.classroom.directory)

    def export_users(self, actor: User, path: Path) -> int:
        self._require_admin(actor)
        with self._directory_lock:
            count = save_users(self.classroom.directory, path)
        logger.info("Users saved to %s (%d records)", path, count)
        return count

    def import_users(self, actor: User, path: Path) -> int:
        self._require_admin(actor)
        with self._directory_lock:
            count = load_users(self.classroom.directory, path)
        logger.info("Users loaded from %s (%d new)", path, count)
        return count

    def syllabus_report(self, actor: User) -> list[tuple[str, float]]:
        self._require_admin(actor)
        with self._syllabus_lock:
            return self.classroom.syllabus.report()
