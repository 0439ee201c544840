"""
Shared fixtures.

Every test gets its own in-memory SQLite database; the app's session
dependency is overridden to use it, so nothing touches a real server.
"""

import os
from typing import AsyncGenerator, Awaitable, Callable, Dict

# Settings are read at import time, so these must be set before importing app
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-with-enough-length-for-hs256")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_async_session
from app.main import app as fastapi_app

AuthHeaders = Dict[str, str]


@pytest_asyncio.fixture
async def engine():
    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker:
    return async_sessionmaker(bind=engine, expire_on_commit=False, class_=AsyncSession)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def async_client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    async def override_get_async_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    fastapi_app.dependency_overrides[get_async_session] = override_get_async_session
    transport = ASGITransport(app=fastapi_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def register_and_login(async_client) -> Callable[..., Awaitable[AuthHeaders]]:
    """Create a user through the API and return ready-to-use auth headers."""

    async def _register_and_login(email: str = "alice@x.com", password: str = "pw1", name: str = "Alice") -> AuthHeaders:
        resp = await async_client.post(
            "/api/v1/auth/register",
            json={"name": name, "email": email, "password": password},
        )
        assert resp.status_code == 200, resp.text
        resp = await async_client.post(
            "/api/v1/auth/login",
            json={"email": email, "password": password},
        )
        assert resp.status_code == 200, resp.text
        return {"Authorization": f"Bearer {resp.json()['token']}"}

    return _register_and_login


@pytest_asyncio.fixture
async def alice(register_and_login) -> AuthHeaders:
    return await register_and_login("alice@x.com", "pw1", "Alice")


@pytest_asyncio.fixture
async def bob(register_and_login) -> AuthHeaders:
    return await register_and_login("bob@x.com", "pw2", "Bob")


@pytest.fixture
def create_goal(async_client) -> Callable[..., Awaitable[dict]]:
    async def _create_goal(headers: AuthHeaders, **overrides) -> dict:
        body = {
            "title": "Trip",
            "target_amount": 1000,
            "start_date": "2024-01-01",
            "end_date": "2024-12-31",
        }
        body.update(overrides)
        resp = await async_client.post("/api/v1/goals", json=body, headers=headers)
        assert resp.status_code == 200, resp.text
        return resp.json()

    return _create_goal
