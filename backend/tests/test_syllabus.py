"""SyllabusIndex tests."""

import random

import pytest

from classroom.core.errors import AlreadyExists, NotFound
from classroom.core.syllabus import SyllabusIndex, TopicTree


@pytest.fixture
def index() -> SyllabusIndex:
    idx = SyllabusIndex()
    idx.create_subject("Math")
    return idx


def test_math_scenario(index):
    index.add_topic("Math", "Calculus")
    index.add_topic("Math", "Algebra")

    assert [name for name, _ in index.list_topics("Math")] == ["Algebra", "Calculus"]
    assert index.completion_percent("Math") == 0.0

    index.mark_complete("Math", "Algebra")

    assert index.completion_percent("Math") == 50.0
    assert list(index.list_topics("Math")) == [("Algebra", True), ("Calculus", False)]


@pytest.mark.parametrize("seed", range(10))
def test_listing_is_strictly_sorted_and_deduplicated(index, seed):
    rng = random.Random(seed)
    pool = [f"topic-{rng.randint(0, 40)}" for _ in range(80)]
    for name in pool:
        index.add_topic("Math", name)

    names = [name for name, _ in index.list_topics("Math")]

    assert names == sorted(set(pool))
    assert all(a < b for a, b in zip(names, names[1:]))
    assert index.topic_count("Math") == len(set(pool))


def test_duplicate_insert_keeps_first_node(index):
    assert index.add_topic("Math", "Algebra")
    index.mark_complete("Math", "Algebra")

    assert not index.add_topic("Math", "Algebra")
    assert list(index.list_topics("Math")) == [("Algebra", True)]


def test_names_compare_case_sensitively(index):
    for name in ("beta", "Beta", "alpha", "Alpha"):
        index.add_topic("Math", name)

    assert [n for n, _ in index.list_topics("Math")] == ["Alpha", "Beta", "alpha", "beta"]


def test_mark_complete_is_idempotent(index):
    index.add_topic("Math", "Algebra")
    index.add_topic("Math", "Geometry")
    index.mark_complete("Math", "Algebra")
    index.mark_complete("Math", "Algebra")

    assert index.completion_percent("Math") == 50.0


def test_mark_complete_unknown_subject_or_topic(index):
    with pytest.raises(NotFound):
        index.mark_complete("History", "Rome")
    with pytest.raises(NotFound):
        index.mark_complete("Math", "Topology")


def test_empty_subject_completion_is_zero(index):
    assert index.completion_percent("Math") == 0.0
    assert list(index.list_topics("Math")) == []


def test_unknown_subject(index):
    with pytest.raises(NotFound):
        index.add_topic("History", "Rome")
    with pytest.raises(NotFound):
        index.list_topics("History")
    with pytest.raises(NotFound):
        index.completion_percent("History")


def test_duplicate_subject(index):
    with pytest.raises(AlreadyExists):
        index.create_subject("Math")
    assert index.subjects() == ["Math"]


def test_listing_is_lazy_and_restartable(index):
    for name in ("b", "a", "c"):
        index.add_topic("Math", name)

    listing = index.list_topics("Math")
    assert next(listing) == ("a", False)

    assert [n for n, _ in index.list_topics("Math")] == ["a", "b", "c"]
    assert [n for n, _ in listing] == ["b", "c"]


def test_sorted_insertion_builds_deep_tree_without_recursion():
    tree = TopicTree()
    names = [f"{i:05d}" for i in range(5000)]
    for name in names:
        tree.insert(name)

    assert [node.name for node in tree] == names
    assert tree.search("04999") is not None
    assert tree.search("nope") is None


def test_report_lists_every_subject(index):
    index.create_subject("CS")
    index.add_topic("CS", "Algorithms")
    index.add_topic("CS", "Data Structures")
    index.add_topic("CS", "Operating Systems")
    index.mark_complete("CS", "Algorithms")

    report = dict(index.report())

    assert report["Math"] == 0.0
    assert report["CS"] == pytest.approx(100 / 3)
