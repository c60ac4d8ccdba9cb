"""
Database handle and session management.

This module owns the storage handle used by the application: the async
engine, the session factory, the startup connectivity check and the
additive schema sync. The handle is created explicitly at startup and
handed to request handlers through ``app.state``.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, List

from fastapi import Request
from sqlalchemy import inspect, text
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.schema import CreateColumn

from todo_api.utils.logging_config import get_logger

logger = get_logger(__name__)

# Base class for all database models
Base = declarative_base()


class DatabaseUnavailableError(RuntimeError):
    """Raised when the database cannot be reached at startup."""


def _add_missing_columns(connection: Connection) -> List[str]:
    """
    Create missing tables, then add declared columns missing from live tables.

    Runs inside a synchronous connection (via ``run_sync``). Nothing is ever
    dropped or retyped.

    Returns:
        ``table.column`` names that were added
    """
    import todo_api.models  # noqa: F401 - registers every model on Base

    Base.metadata.create_all(connection)

    added = []
    inspector = inspect(connection)
    preparer = connection.dialect.identifier_preparer
    for table in Base.metadata.sorted_tables:
        existing = {column["name"] for column in inspector.get_columns(table.name)}
        for column in table.columns:
            if column.name in existing or column.primary_key:
                continue
            column_ddl = CreateColumn(column).compile(dialect=connection.dialect)
            connection.execute(
                text(f"ALTER TABLE {preparer.format_table(table)} ADD COLUMN {column_ddl}")
            )
            added.append(f"{table.name}.{column.name}")
    return added


class Database:
    """
    Storage handle wrapping an async SQLAlchemy engine.

    Args:
        url: SQLAlchemy async database URL
        echo: Log emitted SQL statements
    """

    def __init__(self, url: str, *, echo: bool = False):
        self.url = url
        self.engine = create_async_engine(
            url,
            echo=echo,
            future=True,
            pool_pre_ping=True,
        )
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @property
    def backend(self) -> str:
        """Dialect name of the configured database (e.g. ``postgresql``)."""
        return self.engine.dialect.name

    async def connect(self) -> None:
        """
        Check that the database is reachable.

        Raises:
            DatabaseUnavailableError: If a trivial query cannot be executed
        """
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError) as exc:
            raise DatabaseUnavailableError(f"Unable to connect to the database: {exc}") from exc
        logger.info(f"Connection to {self.backend} database established")

    async def sync_schema(self) -> List[str]:
        """
        Align the live schema with the declared models, additively.

        Returns:
            ``table.column`` names that were added to existing tables
        """
        async with self.engine.begin() as conn:
            added = await conn.run_sync(_add_missing_columns)
        for name in added:
            logger.info(f"Schema sync added column {name}")
        logger.info("Database schema synchronized")
        return added

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Yield a session, rolling back if the block raises."""
        async with self.session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    async def dispose(self) -> None:
        """Release every pooled connection."""
        await self.engine.dispose()


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """
    Dependency function to get database session.

    Yields an async session from the ``Database`` the application was
    started with and ensures proper cleanup.
    """
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session
