"""Fixtures for driving the FastAPI app against a throwaway SQLite database."""

from collections.abc import AsyncIterator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from blog.application.schemas import SessionUser
from blog.infrastructure.auth import get_session_user
from blog.infrastructure.database import Base, engine
from blog.main import app

ADMIN = SessionUser(email="admin@example.com", name="Admin")


@pytest_asyncio.fixture
async def tables() -> AsyncIterator[None]:
    """Fresh tables for one test; the pool is disposed so no connection outlives its loop."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def client(tables: None) -> AsyncIterator[AsyncClient]:
    """Anonymous client on fresh tables."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http:
        yield http

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def admin_client(client: AsyncClient) -> AsyncClient:
    """Same client, with the admin signed in."""
    app.dependency_overrides[get_session_user] = lambda: ADMIN
    return client
