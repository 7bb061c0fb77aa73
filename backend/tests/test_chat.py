"""ChatGraph tests."""

from datetime import datetime, timedelta, timezone

from classroom.core.chat import ChatGraph, Message
from classroom.core.users import Role, UserDirectory


def test_recipient_sees_message_sender_does_not():
    directory = UserDirectory()
    alice = directory.create("alice", "pw", Role.STUDENT)
    bob = directory.create("bob", "pw", Role.TEACHER)
    chat = ChatGraph()

    chat.send(bob.id, alice.id, "hi")

    received = chat.messages_between(alice.id, bob.id)
    assert [m.text for m in received] == ["hi"]
    assert received[0].sender_id == bob.id
    assert chat.messages_between(bob.id, alice.id) == []


def test_each_side_only_holds_what_was_sent_to_it():
    chat = ChatGraph()
    chat.send(1, 2, "one to two")
    chat.send(2, 1, "two to one")
    chat.send(1, 2, "again one to two")

    assert [m.text for m in chat.messages_between(2, 1)] == [
        "one to two",
        "again one to two",
    ]
    assert [m.text for m in chat.messages_between(1, 2)] == ["two to one"]


def test_queue_is_fifo():
    chat = ChatGraph()
    texts = [f"msg {i}" for i in range(50)]
    for text in texts:
        chat.send(3, 4, text)

    assert [m.text for m in chat.messages_between(4, 3)] == texts


def test_no_relation_yields_empty_sequence():
    chat = ChatGraph()
    assert chat.messages_between(1, 2) == []
    assert chat.peers_of(1) == []


def test_ensure_edge_is_idempotent_and_bidirectional():
    chat = ChatGraph()
    assert chat.ensure_edge(1, 2)
    chat.send(2, 1, "kept")
    assert chat.ensure_edge(1, 2)
    assert chat.ensure_edge(2, 1)

    assert chat.peers_of(1) == [2]
    assert chat.peers_of(2) == [1]
    assert [m.text for m in chat.messages_between(1, 2)] == ["kept"]


def test_non_positive_ids_are_ignored():
    chat = ChatGraph()

    assert not chat.ensure_edge(0, 1)
    assert not chat.ensure_edge(-3, 1)
    assert chat.send(0, 1, "lost") is None
    assert chat.peers_of(1) == []
    assert 0 not in chat


def test_peers_in_edge_creation_order():
    chat = ChatGraph()
    chat.ensure_edge(1, 5)
    chat.send(3, 1, "hello")
    chat.ensure_edge(1, 2)

    assert chat.peers_of(1) == [5, 3, 2]


def test_adjacency_grows_past_any_fixed_range():
    chat = ChatGraph()
    chat.send(1, 5000, "far away")
    chat.send(250_000, 1, "further")

    assert [m.text for m in chat.messages_between(5000, 1)] == ["far away"]
    assert [m.text for m in chat.messages_between(1, 250_000)] == ["further"]


def test_returned_sequence_is_a_copy():
    chat = ChatGraph()
    chat.send(1, 2, "original")

    view = chat.messages_between(2, 1)
    view.clear()

    assert len(chat.messages_between(2, 1)) == 1


def test_transcript_merges_both_inboxes_by_time():
    chat = ChatGraph()
    start = datetime(2025, 10, 1, tzinfo=timezone.utc)
    chat.ensure_edge(1, 2)
    # Place messages with explicit timestamps to pin the interleaving
    chat._edge(2, 1).messages.extend(
        [Message(1, "a1", start), Message(1, "a3", start + timedelta(minutes=2))]
    )
    chat._edge(1, 2).messages.append(Message(2, "b2", start + timedelta(minutes=1)))

    assert [m.text for m in chat.transcript(1, 2)] == ["a1", "b2", "a3"]
    # The inbox views are untouched
    assert [m.text for m in chat.messages_between(1, 2)] == ["b2"]
