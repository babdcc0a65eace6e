"""API test fixtures: FastAPI test client over the per-test SQLite database.

Invariants:
    - get_db dependency overridden to use the test DB
    - db_manager patched so readiness checks hit the test DB
    - Assertions on stored rows use a fresh session, never the request's one
"""

import pytest
from sqlalchemy import func, select
from httpx import ASGITransport, AsyncClient

from medicos_api.infrastructure.database import get_db, DatabaseSessionManager
import medicos_api.infrastructure.database as db_module
from medicos_api.main import app
from medicos_api.models.medico import Medico


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
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
def fetch_medico(test_session_factory):
    """Read a row straight from the DB in a fresh session (None if absent)."""

    async def _fetch(medico_id: int):
        async with test_session_factory() as session:
            return await session.get(Medico, medico_id)

    return _fetch


@pytest.fixture
def count_medicos(test_session_factory):

    async def _count() -> int:
        async with test_session_factory() as session:
            return await session.scalar(select(func.count()).select_from(Medico))

    return _count
