"""Shared pytest fixtures.

Every test gets its own SQLite file patched into the service layer, so no
PostgreSQL server is needed and tests never share game records.
"""

import os

# Must be set before tictactoe_server.db is imported.
os.environ["DB_BACKEND"] = "sqlite"

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from tictactoe_server.services import game_db


@pytest.fixture
def test_store(tmp_path, monkeypatch):
    """Point the service layer at a fresh SQLite database."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'games.sqlite3'}", poolclass=NullPool
    )
    session = async_sessionmaker(
        autocommit=False, class_=AsyncSession, autoflush=True, bind=engine
    )
    monkeypatch.setattr(game_db, "engine", engine)
    monkeypatch.setattr(game_db, "Session", session)
    return engine


@pytest_asyncio.fixture
async def store(test_store):
    await game_db.create_tables()
    yield test_store
    await test_store.dispose()
