"""
PetCarePlus Backend: Test Configuration (conftest.py)
=======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Points the app at a throwaway SQLite file (aiosqlite) before any
       petcareplus import, creates the schema per test, and drives the real
       FastAPI app through HTTPX's ASGITransport.

Fixture Hierarchy (all function-scoped):
    ├── db_tables:        create_all before the test, drop_all + dispose after
    ├── db_session:       AsyncSession on the test database
    ├── seeded_users:     admin / user / guest / role-less credentials
    ├── mock_db_session:  AsyncMock session for store-failure unit tests
    ├── client:           anonymous AsyncClient
    ├── admin_client:     AsyncClient logged in as admin
    ├── user_client:      AsyncClient logged in as a plain user
    ├── credentials:      seeded credentials by name
    └── login_as:         log an existing client in by credential name
"""

import os
import tempfile
from contextlib import asynccontextmanager
from typing import AsyncIterator
from unittest.mock import AsyncMock, MagicMock

# ══════════════════════════════════════════════════════════════════════════
# Environment Setup (before any petcareplus import)
# ══════════════════════════════════════════════════════════════════════════

_TEST_DIR = tempfile.mkdtemp(prefix="petcareplus_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DIR}/test.db"
os.environ["SESSION_SECRET"] = "test-session-secret"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["FRONTEND_DIR"] = os.path.join(_TEST_DIR, "no-frontend")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from petcareplus.database import Base, async_session_factory, engine  # noqa: E402
from petcareplus.main import app  # noqa: E402
from petcareplus.models.user import User, UserAccount  # noqa: E402

ADMIN = {"email": "admin@petcare.test", "password": "admin-pass"}
USER = {"email": "reception@petcare.test", "password": "user-pass"}
GUEST = {"email": "visitor@petcare.test", "password": "guest-pass"}
NO_ROLE = {"email": "newhire@petcare.test", "password": "no-role-pass"}


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_tables():
    """Fresh schema for each test; the pool is disposed inside the test's loop."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_tables):
    async with async_session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def seeded_users(db_tables):
    """
    Credential & role rows:
        admin@   → role admin
        reception@ → role user
        visitor@ → role guest
        newhire@ → no user_accounts row (defaults to user)
    """
    async with async_session_factory() as session:
        session.add_all([
            User(id=1, **ADMIN),
            User(id=2, **USER),
            User(id=3, **GUEST),
            User(id=4, **NO_ROLE),
            UserAccount(email=ADMIN["email"], role="admin"),
            UserAccount(email=USER["email"], role="user"),
            UserAccount(email=GUEST["email"], role="guest"),
        ])
        await session.commit()


@pytest.fixture
def mock_db_session():
    """
    A mock AsyncSession for exercising the store-failure paths.

    Usage:
        mock_db_session.execute.side_effect = OperationalError("SELECT", {}, Exception())
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


# ══════════════════════════════════════════════════════════════════════════
# HTTP Client Fixtures
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def _app_client() -> AsyncIterator[AsyncClient]:
    # Unhandled errors become 500 responses instead of propagating into the test
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


async def login(client: AsyncClient, credentials: dict) -> None:
    response = await client.post("/api/login", json=credentials)
    assert response.status_code == 200, response.text


@pytest_asyncio.fixture
async def client(db_tables):
    async with _app_client() as c:
        yield c


@pytest_asyncio.fixture
async def admin_client(seeded_users):
    async with _app_client() as c:
        await login(c, ADMIN)
        yield c


@pytest_asyncio.fixture
async def user_client(seeded_users):
    async with _app_client() as c:
        await login(c, USER)
        yield c


@pytest.fixture
def credentials():
    """Seeded credentials by name: admin, user, guest, no_role."""
    return {"admin": ADMIN, "user": USER, "guest": GUEST, "no_role": NO_ROLE}


@pytest.fixture
def login_as(credentials):
    async def _login_as(client: AsyncClient, name: str) -> None:
        await login(client, credentials[name])
    return _login_as
