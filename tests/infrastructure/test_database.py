"""Database session manager: error mapping and health check on SQLite.

Invariants:
    - SQLAlchemy errors escaping a session become DatabaseError (503)
    - health_check reports True on a reachable database
"""

import pytest
from sqlalchemy import text

from medicos_api.core.errors import DatabaseError
from medicos_api.infrastructure.database import DatabaseSessionManager


@pytest.fixture
async def manager(tmp_path):
    mgr = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'db.sqlite'}")
    yield mgr
    await mgr.dispose()


async def test_operational_error_becomes_database_error(manager):
    with pytest.raises(DatabaseError) as exc_info:
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM no_such_table"))

    assert exc_info.value.http_status == 503
    assert exc_info.value.code == "DATABASE_ERROR"


async def test_non_database_errors_propagate_unchanged(manager):
    with pytest.raises(RuntimeError):
        async with manager.session():
            raise RuntimeError("boom")


async def test_health_check_on_reachable_database(manager):
    assert await manager.health_check() is True
