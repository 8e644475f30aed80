"""Integration tests for the admin session endpoints and the admin guard."""

import pytest
from httpx import AsyncClient

from blog.application.schemas import SessionUser
from blog.infrastructure.auth import get_session_user
from blog.main import app


@pytest.mark.asyncio
async def test_session_status_anonymous(client: AsyncClient):
    response = await client.get("/api/v1/auth/session")
    assert response.json() == {"authenticated": False, "user": None}


@pytest.mark.asyncio
async def test_session_status_admin(admin_client: AsyncClient):
    response = await admin_client.get("/api/v1/auth/session")
    body = response.json()
    assert body["authenticated"] is True
    assert body["user"]["email"] == "admin@example.com"


@pytest.mark.asyncio
async def test_non_admin_session_is_not_authenticated(client: AsyncClient):
    app.dependency_overrides[get_session_user] = lambda: SessionUser(email="visitor@example.com")

    response = await client.get("/api/v1/auth/session")

    assert response.json()["authenticated"] is False


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("method", "path"),
    [
        ("GET", "/api/v1/admin/articles"),
        ("POST", "/api/v1/admin/articles"),
        ("GET", "/api/v1/admin/articles/1"),
        ("PUT", "/api/v1/admin/articles/1"),
        ("DELETE", "/api/v1/admin/articles/1"),
        ("GET", "/api/v1/admin/genres"),
    ],
)
async def test_admin_routes_reject_anonymous(client: AsyncClient, method: str, path: str):
    response = await client.request(method, path, json={"title": "t", "genre": "g", "content": "c"})
    assert response.status_code == 401
    assert response.json() == {"detail": "Unauthorized"}


@pytest.mark.asyncio
async def test_admin_routes_reject_other_google_account(client: AsyncClient):
    app.dependency_overrides[get_session_user] = lambda: SessionUser(email="visitor@example.com")

    response = await client.get("/api/v1/admin/articles")

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_logout_clears_session_and_redirects(client: AsyncClient):
    response = await client.get("/api/v1/auth/logout")
    assert response.status_code == 303
    assert response.headers["location"] == "/"


@pytest.mark.asyncio
async def test_login_without_google_client_is_unavailable(client: AsyncClient):
    response = await client.get("/api/v1/auth/login")
    assert response.status_code == 503
