"""
Syllabus index: one binary search tree of topics per subject.

Topics are keyed by name (case-sensitive, code-point order). The tree is
not rebalanced, so insert and search are O(depth) and degrade to O(n) when
names arrive already sorted. Insertion, search and traversal are iterative,
which keeps degenerate trees clear of the recursion limit.
"""

from dataclasses import dataclass
from typing import Iterator

from classroom.core.errors import AlreadyExists, NotFound


@dataclass
class TopicNode:
    """A topic and its place in the subject tree."""

    name: str
    completed: bool = False
    left: "TopicNode | None" = None
    right: "TopicNode | None" = None


class TopicTree:
    """Unbalanced BST of topics for a single subject."""

    def __init__(self):
        self.root: TopicNode | None = None
        self._size = 0
        self._completed = 0

    def __len__(self) -> int:
        return self._size

    @property
    def completed_count(self) -> int:
        return self._completed

    def insert(self, name: str) -> bool:
        """
        Insert ``name``. An existing node with the same name is left untouched.

        Returns:
            True if a node was added.
        """
        node = TopicNode(name)
        if self.root is None:
            self.root = node
            self._size += 1
            return True

        cur = self.root
        while True:
            if name < cur.name:
                if cur.left is None:
                    cur.left = node
                    break
                cur = cur.left
            elif name > cur.name:
                if cur.right is None:
                    cur.right = node
                    break
                cur = cur.right
            else:
                return False
        self._size += 1
        return True

    def search(self, name: str) -> TopicNode | None:
        cur = self.root
        while cur is not None:
            if name == cur.name:
                return cur
            cur = cur.left if name < cur.name else cur.right
        return None

    def mark_complete(self, name: str) -> bool:
        """Set the completion flag. Returns False if ``name`` is not in the tree."""
        node = self.search(name)
        if node is None:
            return False
        if not node.completed:
            node.completed = True
            self._completed += 1
        return True

    def __iter__(self) -> Iterator[TopicNode]:
        """In-order traversal, ascending by name."""
        stack: list[TopicNode] = []
        cur = self.root
        while stack or cur is not None:
            while cur is not None:
                stack.append(cur)
                cur = cur.left
            cur = stack.pop()
            yield cur
            cur = cur.right

    def completion_percent(self) -> float:
        if self._size == 0:
            return 0.0
        return 100.0 * self._completed / self._size


class SyllabusIndex:
    """Subjects by name, each owning a topic tree."""

    def __init__(self):
        self._subjects: dict[str, TopicTree] = {}

    def __contains__(self, subject: object) -> bool:
        return subject in self._subjects

    def __len__(self) -> int:
        return len(self._subjects)

    def _tree(self, subject: str) -> TopicTree:
        tree = self._subjects.get(subject)
        if tree is None:
            raise NotFound(f"Subject '{subject}' not found")
        return tree

    def create_subject(self, name: str) -> None:
        if name in self._subjects:
            raise AlreadyExists(f"Subject '{name}' already exists")
        self._subjects[name] = TopicTree()

    def subjects(self) -> list[str]:
        """Subject names in creation order."""
        return list(self._subjects)

    def add_topic(self, subject: str, topic_name: str) -> bool:
        """
        Add a topic to ``subject``. Duplicate names are a silent no-op.

        Returns:
            True if the topic was new.

        Raises:
            NotFound: if the subject does not exist.
        """
        return self._tree(subject).insert(topic_name)

    def mark_complete(self, subject: str, topic_name: str) -> None:
        """
        Mark a topic complete. Idempotent.

        Raises:
            NotFound: if the subject or topic does not exist.
        """
        if not self._tree(subject).mark_complete(topic_name):
            raise NotFound(f"Topic '{topic_name}' not found in '{subject}'")

    def list_topics(self, subject: str) -> Iterator[tuple[str, bool]]:
        """
        Lazily yield ``(name, completed)`` pairs sorted by name.

        The subject is resolved eagerly so a missing subject raises at call
        time rather than on first iteration. Call again to restart.
        """
        tree = self._tree(subject)
        return ((node.name, node.completed) for node in tree)

    def topic_count(self, subject: str) -> int:
        return len(self._tree(subject))

    def completion_percent(self, subject: str) -> float:
        """Completed topics over total topics, times 100. 0.0 for an empty subject."""
        return self._tree(subject).completion_percent()

    def report(self) -> list[tuple[str, float]]:
        """Completion percentage of every subject, creation order."""
        return [(name, tree.completion_percent()) for name, tree in self._subjects.items()]
