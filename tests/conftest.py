"""Pytest configuration: in-memory sqlite database and an HTTP client on the app."""
import os

# Settings are loaded at import time, so the environment must be set first
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from httpx import ASGITransport, AsyncClient

from api.main import app
from api.shared.entities.registry import BaseEntity


@pytest.fixture
async def database():
    """Fresh schema per test; the in-memory database vanishes on shutdown."""
    db = app.container.infrastructure.database()
    await db.init()
    await db.create_schema(BaseEntity)
    yield db
    await db.shutdown()


@pytest.fixture
async def db_session(database):
    session = database.get_session()
    try:
        yield session
    finally:
        await session.close()


@pytest.fixture
async def client(database):
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as c:
        yield c
