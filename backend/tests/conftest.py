"""Pytest configuration and fixtures."""

import os

# Settings are read when the app module is imported
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("ENVIRONMENT", "development")

from collections.abc import AsyncGenerator, Awaitable, Callable

import pytest
from httpx import ASGITransport, AsyncClient

from classroom.core.classroom import Classroom
from classroom.core.users import Role
from classroom.main import app
from classroom.services import ClassroomService

AuthHeaders = dict[str, str]


@pytest.fixture
def classroom() -> Classroom:
    """An empty classroom, independent from every other test."""
    return Classroom()


@pytest.fixture
def service(classroom: Classroom) -> ClassroomService:
    return ClassroomService(classroom)


@pytest.fixture
async def client(service: ClassroomService) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client for testing FastAPI endpoints."""
    app.state.classroom_service = service
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.state.classroom_service = None


@pytest.fixture
def login(client: AsyncClient) -> Callable[[str, str], Awaitable[AuthHeaders]]:
    """Log in and return bearer headers. The session cookie is dropped so
    each request acts as whoever's headers it carries."""

    async def _login(username: str, password: str) -> AuthHeaders:
        response = await client.post(
            "/auth/login", json={"username": username, "password": password}
        )
        assert response.status_code == 200, response.text
        client.cookies.clear()
        return {"Authorization": f"Bearer {response.json()['access_token']}"}

    return _login


@pytest.fixture
def user_headers(
    service: ClassroomService,
    login: Callable[[str, str], Awaitable[AuthHeaders]],
) -> Callable[[str, Role], Awaitable[AuthHeaders]]:
    """Register a user directly in the service and return their headers."""

    async def _user_headers(username: str, role: Role = Role.STUDENT) -> AuthHeaders:
        service.register(username, f"{username}-pw", role)
        return await login(username, f"{username}-pw")

    return _user_headers
