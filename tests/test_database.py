import pytest
from sqlalchemy import text

from chatstore.config import settings
from chatstore.database import Database


def test_database_defaults_to_configured_url(monkeypatch) -> None:
    monkeypatch.setattr(settings, "DATABASE_URL", "sqlite+aiosqlite:///./configured.sqlite")
    db = Database(echo=False)
    assert db.url == "sqlite+aiosqlite:///./configured.sqlite"
    assert db.is_open


@pytest.mark.asyncio
async def test_session_runs_statements(database) -> None:
    async with database.session() as session:
        result = await session.execute(text("SELECT 1"))
        assert result.scalar_one() == 1


@pytest.mark.asyncio
async def test_close_is_idempotent(database) -> None:
    assert database.is_open
    await database.close()
    assert not database.is_open
    await database.close()
    assert not database.is_open
