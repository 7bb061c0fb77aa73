"""Admin panel endpoint tests."""

from httpx import AsyncClient

from classroom.core.users import Role


async def test_list_users(client: AsyncClient, user_headers):
    admin = await user_headers("admin", Role.ADMIN)
    await user_headers("alice", Role.STUDENT)

    response = await client.get("/admin/users", headers=admin)
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 2
    assert {u["username"] for u in data["users"]} == {"admin", "alice"}


async def test_admin_only(client: AsyncClient, user_headers):
    teacher = await user_headers("teacher1", Role.TEACHER)

    assert (await client.get("/admin/users", headers=teacher)).status_code == 403
    assert (await client.get("/admin/syllabus-report", headers=teacher)).status_code == 403
    response = await client.post(
        "/admin/users/export", json={"path": "users.txt"}, headers=teacher
    )
    assert response.status_code == 403


async def test_export_then_import(client: AsyncClient, service, user_headers, tmp_path):
    admin = await user_headers("admin", Role.ADMIN)
    await user_headers("alice", Role.STUDENT)
    path = str(tmp_path / "users.txt")

    response = await client.post("/admin/users/export", json={"path": path}, headers=admin)
    assert response.status_code == 200
    assert response.json()["count"] == 2
    assert "2|alice|alice-pw|0" in (tmp_path / "users.txt").read_text().splitlines()

    # Re-importing the same roster adds nobody
    response = await client.post("/admin/users/import", json={"path": path}, headers=admin)
    assert response.status_code == 200
    assert response.json()["count"] == 0
    assert len(service.classroom.directory) == 2


async def test_import_missing_file(client: AsyncClient, user_headers, tmp_path):
    admin = await user_headers("admin", Role.ADMIN)

    response = await client.post(
        "/admin/users/import", json={"path": str(tmp_path / "absent.txt")}, headers=admin
    )
    assert response.status_code == 503


async def test_syllabus_report(client: AsyncClient, service, user_headers):
    admin = await user_headers("admin", Role.ADMIN)
    service.classroom.syllabus.create_subject("Math")
    service.classroom.syllabus.add_topic("Math", "Algebra")
    service.classroom.syllabus.mark_complete("Math", "Algebra")
    service.classroom.syllabus.create_subject("CS")

    response = await client.get("/admin/syllabus-report", headers=admin)
    assert response.status_code == 200
    assert response.json()["subjects"] == [
        {"subject": "Math", "completion_percent": 100.0},
        {"subject": "CS", "completion_percent": 0.0},
    ]


async def test_imported_user_logs_in_with_exact_password(
    client: AsyncClient, user_headers, tmp_path
):
    admin = await user_headers("admin", Role.ADMIN)
    path = tmp_path / "users.txt"
    path.write_bytes(b"7|carol|pw |1\n8|d\xffve|pw|0\n")

    response = await client.post(
        "/admin/users/import", json={"path": str(path)}, headers=admin
    )
    assert response.status_code == 200
    assert response.json()["count"] == 1

    response = await client.post("/auth/login", json={"username": "carol", "password": "pw "})
    assert response.status_code == 200
