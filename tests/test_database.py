"""
Tests for the storage handle: connectivity check and schema sync.
"""

import pytest
from sqlalchemy import inspect, text

from todo_api.database import Database, DatabaseUnavailableError


async def test_connect(database):
    """Test that a reachable database passes the startup check."""
    await database.connect()
    assert database.backend == "sqlite"


async def test_connect_unreachable(tmp_path):
    """Test that an unreachable database fails loudly."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'dir' / 'x.db'}")
    with pytest.raises(DatabaseUnavailableError):
        await db.connect()
    await db.dispose()


async def test_sync_schema_creates_tables(tmp_path):
    """Test that a fresh database gets both tables."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'fresh.db'}")
    await db.sync_schema()

    async with db.engine.connect() as conn:
        tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
    await db.dispose()

    assert {"users", "todos"} <= set(tables)


async def test_sync_schema_is_idempotent(database):
    """Test that a second sync changes nothing."""
    assert await database.sync_schema() == []


async def test_sync_schema_adds_missing_columns(tmp_path):
    """Test that a column missing from an existing table is added in place."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'legacy.db'}")
    async with db.engine.begin() as conn:
        await conn.execute(text(
            "CREATE TABLE todos ("
            "id INTEGER PRIMARY KEY AUTOINCREMENT, "
            "owner_id INTEGER, "
            "task TEXT, "
            "created_at DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP, "
            "updated_at DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP)"
        ))
        await conn.execute(text("INSERT INTO todos (owner_id, task) VALUES (1, 'old task')"))

    added = await db.sync_schema()

    async with db.engine.connect() as conn:
        done = (await conn.execute(text("SELECT done FROM todos"))).scalar_one()
    await db.dispose()

    assert added == ["todos.done"]
    assert not done
