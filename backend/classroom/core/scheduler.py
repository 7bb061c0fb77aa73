"""
Assignment scheduler: a bounded binary min-heap ordered by due date.

Due dates are 8-digit ``YYYYMMDD`` integers, so integer order is
chronological order. Ties between equal due dates are broken arbitrarily.
"""

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone

from classroom.core.errors import CapacityExceeded, NotFound

DEFAULT_CAPACITY = 500


def validate_due_date(value: int) -> int:
    """
    Check that ``value`` is an 8-digit ``YYYYMMDD`` calendar date.

    Raises:
        ValueError: if it is not.
    """
    if not 10_000_000 <= value <= 99_999_999:
        raise ValueError("due date must be an 8-digit YYYYMMDD integer")
    try:
        datetime.strptime(str(value), "%Y%m%d")
    except ValueError as e:
        raise ValueError(f"due date {value} is not a calendar date") from e
    return value


@dataclass(frozen=True)
class Submission:
    """One hand-in of an assignment. Never removed or deduplicated."""

    student_id: int
    filename: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class Assignment:
    """An assignment and its submissions, newest first."""

    id: int
    title: str
    description: str
    due_date: int
    submissions: deque[Submission] = field(default_factory=deque)


class AssignmentScheduler:
    """Min-heap of assignments keyed by ``due_date``."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._heap: list[Assignment] = []
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._heap)

    def create(self, title: str, description: str, due_date: int) -> Assignment:
        """Allocate an assignment. It is not scheduled until ``push``."""
        assignment = Assignment(
            id=self._next_id,
            title=title,
            description=description,
            due_date=due_date,
        )
        self._next_id += 1
        return assignment

    # -------------------------------------------------------------------------
    # Heap maintenance
    # -------------------------------------------------------------------------

    def _swap(self, i: int, j: int) -> None:
        self._heap[i], self._heap[j] = self._heap[j], self._heap[i]

    def _sift_up(self, i: int) -> None:
        while i > 0:
            parent = (i - 1) // 2
            if self._heap[parent].due_date <= self._heap[i].due_date:
                break
            self._swap(parent, i)
            i = parent

    def _sift_down(self, i: int) -> None:
        size = len(self._heap)
        while True:
            left, right, smallest = 2 * i + 1, 2 * i + 2, i
            if left < size and self._heap[left].due_date < self._heap[smallest].due_date:
                smallest = left
            if right < size and self._heap[right].due_date < self._heap[smallest].due_date:
                smallest = right
            if smallest == i:
                return
            self._swap(i, smallest)
            i = smallest

    def push(self, assignment: Assignment) -> None:
        """
        Schedule ``assignment``.

        Raises:
            CapacityExceeded: if the heap already holds ``capacity`` entries.
        """
        if len(self._heap) >= self.capacity:
            raise CapacityExceeded(
                f"Assignment store is full ({self.capacity} assignments)"
            )
        self._heap.append(assignment)
        self._sift_up(len(self._heap) - 1)

    def pop_min(self) -> Assignment | None:
        """Remove and return the earliest-due assignment, or None when empty."""
        if not self._heap:
            return None
        top = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return top

    def peek_min(self) -> Assignment | None:
        return self._heap[0] if self._heap else None

    # -------------------------------------------------------------------------
    # Lookup and reporting
    # -------------------------------------------------------------------------

    def find_by_id(self, assignment_id: int) -> Assignment | None:
        # Heap order is not search order.
        for assignment in self._heap:
            if assignment.id == assignment_id:
                return assignment
        return None

    def record_submission(
        self, assignment_id: int, student_id: int, filename: str
    ) -> Submission:
        """
        Prepend a submission to an assignment. Roles are not checked here.

        Raises:
            NotFound: if no scheduled assignment has ``assignment_id``.
        """
        assignment = self.find_by_id(assignment_id)
        if assignment is None:
            raise NotFound(f"Assignment with id {assignment_id} not found")
        submission = Submission(student_id=student_id, filename=filename)
        assignment.submissions.appendleft(submission)
        return submission

    def list_all_sorted_by_due(self) -> list[Assignment]:
        """All scheduled assignments by due date. The heap is left as is."""
        return sorted(self._heap, key=lambda a: a.due_date)
