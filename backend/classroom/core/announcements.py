"""Announcement board: a prepend-only stack, newest first."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(frozen=True)
class Announcement:
    text: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class AnnouncementBoard:
    def __init__(self):
        self._stack: list[Announcement] = []

    def __len__(self) -> int:
        return len(self._stack)

    def post(self, text: str) -> Announcement:
        announcement = Announcement(text=text)
        self._stack.append(announcement)
        return announcement

    def list(self) -> list[Announcement]:
        """All announcements, most recent first."""
        return self._stack[::-1]
