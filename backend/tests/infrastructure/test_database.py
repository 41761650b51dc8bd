"""Database Session Manager - verifies sessions, rollback mapping and schema sync.

Invariants:
    - SQLAlchemy errors inside a session surface as DatabaseError
    - synchronize_schema creates only the registered entities' tables
    - init_db builds the manager from a ConnectionDescriptor; close_db resets it

Design Decisions:
    - aiosqlite file database under tmp_path: pooled like a server database,
      no PostgreSQL needed
"""

import pytest
from sqlalchemy import String, inspect, text
from sqlalchemy.orm import Mapped, mapped_column

import app.infrastructure.database as db_module
from app.core.errors import DatabaseError
from app.db.base import Base
from app.infrastructure.connection import ConnectionDescriptor
from app.infrastructure.database import (
    DatabaseSessionManager, close_db, get_db, init_db,
)


class Widget(Base):
    __tablename__ = "widgets"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)


@pytest.fixture
def sqlite_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"


@pytest.fixture
async def manager(sqlite_url):
    mgr = DatabaseSessionManager(sqlite_url, pool_size=2, max_overflow=0)
    yield mgr
    await mgr.close()


@pytest.fixture
def reset_db_manager():
    original = db_module.db_manager
    yield
    db_module.db_manager = original


async def _table_names(mgr):
    async with mgr.engine.connect() as conn:
        return await conn.run_sync(lambda c: inspect(c).get_table_names())


async def test_synchronize_without_entities_creates_nothing(manager):
    await manager.synchronize_schema()
    assert await _table_names(manager) == []


async def test_synchronize_creates_registered_entities(sqlite_url):
    mgr = DatabaseSessionManager(
        sqlite_url, pool_size=2, max_overflow=0,
        entities=[Widget], synchronize=True,
    )
    try:
        await mgr.synchronize_schema()
        assert await _table_names(mgr) == ["widgets"]
    finally:
        await mgr.close()


async def test_integrity_error_mapped_and_rolled_back(sqlite_url):
    mgr = DatabaseSessionManager(
        sqlite_url, pool_size=2, max_overflow=0, entities=[Widget],
    )
    await mgr.synchronize_schema()
    try:
        async with mgr.session() as db:
            db.add(Widget(id=1, name="a"))
            await db.commit()

        with pytest.raises(DatabaseError) as exc_info:
            async with mgr.session() as db:
                db.add(Widget(id=1, name="duplicate"))
                await db.commit()
        assert exc_info.value.operation == "commit"

        async with mgr.session() as db:
            count = (await db.execute(text("SELECT COUNT(*) FROM widgets"))).scalar()
        assert count == 1
    finally:
        await mgr.close()


async def test_operational_error_mapped(manager):
    with pytest.raises(DatabaseError) as exc_info:
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM no_such_table"))
    assert exc_info.value.operation == "execute"


async def test_init_db_uses_descriptor(reset_db_manager):
    descriptor = ConnectionDescriptor(
        host="db", port=6543, username="u", password="p", database="app",
    )
    mgr = init_db(descriptor, pool_size=5, max_overflow=1)
    try:
        assert db_module.db_manager is mgr
        url = mgr.engine.url
        assert url.drivername == "postgresql+asyncpg"
        assert (url.host, url.port, url.database) == ("db", 6543, "app")
        assert mgr.entities == ()
        assert mgr.synchronize is False
    finally:
        await close_db()
    assert db_module.db_manager is None


async def test_get_db_requires_initialization(reset_db_manager):
    db_module.db_manager = None
    with pytest.raises(DatabaseError) as exc_info:
        await get_db().__anext__()
    assert exc_info.value.operation == "connect"


async def test_get_db_yields_session(manager, reset_db_manager):
    db_module.db_manager = manager
    gen = get_db()
    session = await gen.__anext__()
    assert (await session.execute(text("SELECT 1"))).scalar() == 1
    await gen.aclose()
