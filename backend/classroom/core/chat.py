"""
Chat graph: user ids connected by edges that carry message queues.

Each relationship has two directed sides. A message is stored on the
recipient's side, under the recipient's edge toward the sender, so each
user's view of a conversation holds only what was sent to them (inbox
semantics). ``transcript`` merges both inboxes when a full conversation is
wanted.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from heapq import merge


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Message:
    """An immutable chat message."""

    sender_id: int
    text: str
    timestamp: datetime = field(default_factory=_now)


@dataclass
class ChatEdge:
    """The holder's side of a relationship: messages received from ``peer_id``."""

    peer_id: int
    messages: list[Message] = field(default_factory=list)


class ChatGraph:
    """Adjacency map from user id to that user's edges, keyed by peer id."""

    def __init__(self):
        # Plain dicts grow with the largest id seen; there is no fixed range.
        self._adjacency: dict[int, dict[int, ChatEdge]] = {}

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._adjacency

    def _edge(self, user_id: int, peer_id: int) -> ChatEdge | None:
        return self._adjacency.get(user_id, {}).get(peer_id)

    def ensure_edge(self, a: int, b: int) -> bool:
        """
        Connect ``a`` and ``b`` in both directions if not already connected.

        Non-positive ids are ignored. Returns True when the pair is connected
        afterwards.
        """
        if a <= 0 or b <= 0:
            return False
        self._adjacency.setdefault(a, {}).setdefault(b, ChatEdge(peer_id=b))
        self._adjacency.setdefault(b, {}).setdefault(a, ChatEdge(peer_id=a))
        return True

    def send(self, from_id: int, to_id: int, text: str) -> Message | None:
        """
        Append a message from ``from_id`` to the recipient's queue.

        Returns the stored message, or None if the edge could not be made.
        """
        if not self.ensure_edge(from_id, to_id):
            return None
        inbox = self._edge(to_id, from_id)
        message = Message(sender_id=from_id, text=text)
        inbox.messages.append(message)
        return message

    def messages_between(self, viewer_id: int, peer_id: int) -> list[Message]:
        """Messages ``peer_id`` sent to ``viewer_id``, oldest first."""
        edge = self._edge(viewer_id, peer_id)
        if edge is None:
            return []
        return list(edge.messages)

    def peers_of(self, user_id: int) -> list[int]:
        """Peer ids of ``user_id`` in the order the edges were created."""
        return list(self._adjacency.get(user_id, {}))

    def transcript(self, a: int, b: int) -> list[Message]:
        """Both inboxes of the pair merged by timestamp."""
        return list(
            merge(
                self.messages_between(a, b),
                self.messages_between(b, a),
                key=lambda m: m.timestamp,
            )
        )
