"""API test fixtures — FastAPI test client over the default composition.

Invariants:
    - get_db dependency overridden to use the per-test SQLite session factory
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - httpx AsyncClient over ASGITransport: no lifespan, no real socket
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.infrastructure.database import get_db, DatabaseSessionManager
import app.infrastructure.database as db_module
from app.main import app


@pytest.fixture
async def client(test_engine, test_session_factory):
    """Test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def alice(client):
    """A created user; returns the POST response body."""
    res = await client.post(
        "/api/users/",
        json={"username": "alice", "email": "a@x.com", "password": "secret"},
    )
    assert res.status_code == 201
    return res.json()
