"""ClassroomService tests: role rights, credentials, seeding."""

import pytest

from classroom.core.classroom import Classroom
from classroom.core.errors import (
    AlreadyExists,
    CapacityExceeded,
    InvalidCredentials,
    NotFound,
    PermissionDenied,
)
from classroom.core.users import Role
from classroom.services import ClassroomService


@pytest.fixture
def people(service: ClassroomService):
    return {
        "admin": service.register("admin", "adminpass", Role.ADMIN),
        "teacher": service.register("teacher1", "teachpass", Role.TEACHER),
        "alice": service.register("alice", "alice123", Role.STUDENT),
    }


def test_login_checks_password(service, people):
    assert service.login("alice", "alice123") is people["alice"]
    with pytest.raises(InvalidCredentials):
        service.login("alice", "wrong")
    with pytest.raises(InvalidCredentials):
        service.login("nobody", "alice123")


def test_register_duplicate(service, people):
    with pytest.raises(AlreadyExists):
        service.register("alice", "x", Role.TEACHER)


@pytest.mark.parametrize(
    "action",
    [
        lambda s, u: s.create_subject(u, "Math"),
        lambda s, u: s.add_topic(u, "Math", "Algebra"),
        lambda s, u: s.mark_topic_complete(u, "Math", "Algebra"),
        lambda s, u: s.post_announcement(u, "no"),
        lambda s, u: s.create_assignment(u, "t", "d", 20251105),
    ],
)
def test_students_cannot_mutate_shared_content(service, people, action):
    with pytest.raises(PermissionDenied):
        action(service, people["alice"])


def test_only_students_submit(service, people):
    assignment = service.create_assignment(people["teacher"], "HW", "", 20251105)

    with pytest.raises(PermissionDenied):
        service.submit_assignment(people["teacher"], assignment.id, "t.txt")
    with pytest.raises(PermissionDenied):
        service.submit_assignment(people["admin"], assignment.id, "a.txt")

    service.submit_assignment(people["alice"], assignment.id, "alice.txt")
    assert len(service.get_assignment(assignment.id).submissions) == 1


@pytest.mark.parametrize("who", ["teacher", "alice"])
def test_admin_panel_is_admin_only(service, people, who, tmp_path):
    actor = people[who]
    with pytest.raises(PermissionDenied):
        service.list_users(actor)
    with pytest.raises(PermissionDenied):
        service.export_users(actor, tmp_path / "users.txt")
    with pytest.raises(PermissionDenied):
        service.import_users(actor, tmp_path / "users.txt")
    with pytest.raises(PermissionDenied):
        service.syllabus_report(actor)


def test_admin_export_and_import(service, people, tmp_path):
    path = tmp_path / "users.txt"
    assert service.export_users(people["admin"], path) == 3

    other = ClassroomService(Classroom())
    other.register("root", "pw", Role.ADMIN)
    assert other.import_users(other.get_user(1), path) == 2  # "admin" is skipped: id 1 is taken
    assert other.get_user(2).username == "teacher1"


def test_full_store_does_not_consume_an_id():
    service = ClassroomService(Classroom(assignment_capacity=1))
    teacher = service.register("t", "pw", Role.TEACHER)
    service.create_assignment(teacher, "first", "", 20250101)

    with pytest.raises(CapacityExceeded):
        service.create_assignment(teacher, "second", "", 20250102)

    service.classroom.scheduler.pop_min()
    assert service.create_assignment(teacher, "third", "", 20250103).id == 2


def test_messages_to_unknown_user(service, people):
    with pytest.raises(NotFound):
        service.send_message(people["alice"], "ghost", "hello?")
    with pytest.raises(NotFound):
        service.view_messages(people["alice"], "ghost")


def test_username_of_unknown_id(service):
    assert service.username_of(404) == "Unknown"


def test_seed_sample_data():
    classroom = Classroom()
    classroom.seed_sample_data()

    assert len(classroom.directory) == 4
    assert classroom.directory.find_by_name("admin").role == Role.ADMIN
    assert classroom.syllabus.subjects() == ["Math", "CS"]
    assert [n for n, _ in classroom.syllabus.list_topics("CS")] == [
        "Algorithms",
        "Data Structures",
        "Operating Systems",
    ]
    assert classroom.scheduler.peek_min().title == "DS Lab1"
    assert classroom.announcements.list()[0].text == "Midterm scheduled in 2 weeks."
    teacher = classroom.directory.find_by_name("teacher1")
    assert sorted(classroom.chat.peers_of(teacher.id)) == [3, 4]
