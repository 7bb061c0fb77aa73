"""
User directory: a hash table keyed by username.

Collisions are resolved by chaining. New entries go to the head of their
bucket chain, so iteration order is bucket order, newest first within a
bucket. The hash is stable across runs, which keeps exported files
reproducible.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator, NamedTuple

from classroom.core.errors import AlreadyExists

DEFAULT_BUCKET_COUNT = 101


class Role(IntEnum):
    """Account role. The integer value is the persisted role code."""

    STUDENT = 0
    TEACHER = 1
    ADMIN = 2

    @property
    def label(self) -> str:
        return self.name.capitalize()


@dataclass
class User:
    """A registered account. Passwords are opaque tokens."""

    id: int
    username: str
    password: str
    role: Role

    def check_password(self, password: str) -> bool:
        return self.password == password


class UserRecord(NamedTuple):
    """Flat export form of a user."""

    id: int
    username: str
    password: str
    role_code: int


def hash_username(username: str, bucket_count: int = DEFAULT_BUCKET_COUNT) -> int:
    """djb2 over the UTF-8 bytes of ``username``, reduced modulo ``bucket_count``."""
    h = 5381
    for byte in username.encode("utf-8"):
        h = ((h << 5) + h + byte) & 0xFFFFFFFFFFFFFFFF
    return h % bucket_count


class UserDirectory:
    """Hash-indexed user store with sequential id allocation."""

    def __init__(self, bucket_count: int = DEFAULT_BUCKET_COUNT):
        if bucket_count <= 0:
            raise ValueError("bucket_count must be positive")
        self.bucket_count = bucket_count
        self._buckets: list[list[User]] = [[] for _ in range(bucket_count)]
        self._next_id = 1
        self._size = 0

    @property
    def next_id(self) -> int:
        """Id that the next ``create`` call will assign."""
        return self._next_id

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[User]:
        for chain in self._buckets:
            yield from chain

    def __contains__(self, username: object) -> bool:
        return isinstance(username, str) and self.find_by_name(username) is not None

    def _bucket_for(self, username: str) -> list[User]:
        return self._buckets[hash_username(username, self.bucket_count)]

    def _insert(self, user: User) -> None:
        self._bucket_for(user.username).insert(0, user)
        self._size += 1

    def create(self, username: str, password: str, role: Role) -> User:
        """
        Register a new user.

        Raises:
            AlreadyExists: if ``username`` is taken (case-sensitive match).
        """
        if self.find_by_name(username) is not None:
            raise AlreadyExists(f"Username '{username}' already exists")
        user = User(id=self._next_id, username=username, password=password, role=Role(role))
        self._next_id += 1
        self._insert(user)
        return user

    def find_by_name(self, username: str) -> User | None:
        for user in self._bucket_for(username):
            if user.username == username:
                return user
        return None

    def find_by_id(self, user_id: int) -> User | None:
        # No secondary index; lookups by id are rare next to lookups by name.
        for user in self:
            if user.id == user_id:
                return user
        return None

    def export_records(self) -> list[UserRecord]:
        """Every user as an ``(id, username, password, role_code)`` record, bucket order."""
        return [UserRecord(u.id, u.username, u.password, int(u.role)) for u in self]

    def load_records(self, records: Iterable[UserRecord]) -> int:
        """
        Insert records while preserving their ids.

        Usernames already present are skipped, never overwritten. Records
        whose id is already held by another user are skipped too, so ids
        stay unique. The id counter advances past the largest loaded id.

        Returns:
            Number of users inserted.
        """
        inserted = 0
        for record in records:
            if record.id <= 0:
                continue
            if self.find_by_name(record.username) is not None:
                continue
            if self.find_by_id(record.id) is not None:
                continue
            self._insert(
                User(
                    id=record.id,
                    username=record.username,
                    password=record.password,
                    role=Role(record.role_code),
                )
            )
            if record.id >= self._next_id:
                self._next_id = record.id + 1
            inserted += 1
        return inserted
