"""Database Session Manager - async connection pool with automatic rollback and schema sync.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection
    - All SQLAlchemy exceptions mapped to DatabaseError (core/errors.py)
    - get_db raises DatabaseError before startup has initialized db_manager
    - Schema is only created when the descriptor asks for synchronize

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan owns the
      lifecycle (no global import side effects)
    - expire_on_commit=False: prevents lazy-load issues in async context
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Sequence

from sqlalchemy.engine import URL
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)

from app.core.errors import DatabaseError
from app.db.base import Base
from app.infrastructure.connection import ConnectionDescriptor

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and schema sync."""

    def __init__(
        self,
        database_url: str | URL,
        pool_size: int = 20,
        max_overflow: int = 10,
        entities: Sequence[type] = (),
        synchronize: bool = False,
    ):
        self.engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        self.entities = tuple(entities)
        self.synchronize = synchronize

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            logger.error(f"DB integrity error: {e}")
            raise DatabaseError("Integrity constraint violated", "commit")
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}")
            raise DatabaseError("Connection or operational error", "execute")
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}")
            raise DatabaseError("Database driver error", "query")
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise DatabaseError("Database operation failed", "unknown")
        finally:
            await session.close()

    async def synchronize_schema(self) -> None:
        """Create tables for the registered entities (no-op without entities)."""
        tables = [entity.__table__ for entity in self.entities]
        if not tables:
            return
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all, tables=tables)
        logger.info(f"Schema synchronized for {len(tables)} table(s)")

    async def close(self) -> None:
        await self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(descriptor: ConnectionDescriptor, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(
        descriptor.url(),
        entities=descriptor.entities,
        synchronize=descriptor.synchronize,
        **kwargs,
    )
    return db_manager


async def close_db() -> None:
    global db_manager
    if db_manager is not None:
        await db_manager.close()
        db_manager = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise DatabaseError("Database not initialized", "connect")
    async with db_manager.session() as session:
        yield session
