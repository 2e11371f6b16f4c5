import os
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from libs.common.config import get_settings
from libs.db.base import Base
from libs.db.session import get_async_db
from services.volunteer_service.app.main import app

# Import models so metadata includes every table
from services.volunteer_service import models as _volunteer_models  # noqa: F401

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# Cheapest bcrypt cost; every sign-up hashes a password
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "4")
get_settings.cache_clear()
settings = get_settings()


@pytest_asyncio.fixture
async def test_engine():
    """
    In-memory SQLite engine, fresh for each test.
    StaticPool keeps the single connection alive so every session sees the
    same database.
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """
    Yield a database session bound to the test engine.
    expire_on_commit=False matches the app's session factory, so objects
    stay readable after a commit without an implicit async refresh.
    """
    session_factory = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
    session = session_factory()

    try:
        yield session
    finally:
        await session.close()


@pytest_asyncio.fixture
async def client(db_session) -> AsyncGenerator[AsyncClient, None]:
    """
    Yield an AsyncClient for the app with the DB dependency overridden.
    ASGITransport does not run the lifespan, so tables come from test_engine.
    """
    app.dependency_overrides[get_async_db] = lambda: db_session

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def signup_payload() -> dict:
    """A valid sign-up body for a 14-year-old (teens table)."""
    return {
        "name": "Jordan Lee",
        "age": 14,
        "email": "jordan@example.com",
        "phone": "555-0100",
        "password": "hunter22",
        "confirm_password": "hunter22",
    }


@pytest_asyncio.fixture
async def auth_headers(client, signup_payload) -> dict:
    """Sign up the default volunteer and return bearer headers for them."""
    response = await client.post("/auth/signup", json=signup_payload)
    assert response.status_code == 201, response.text
    token = response.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}
