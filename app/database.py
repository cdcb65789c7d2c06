"""Database engine, declarative base and the storage handle used by services."""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from sqlalchemy import text
from sqlalchemy.engine import RowMapping
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from app.core.config import settings
from app.core.exceptions import StorageError


class Base(DeclarativeBase):
    """Declarative base for database models."""


def _create_engine_args(url: str) -> dict[str, Any]:
    """
    Build engine arguments for the given URL.

    PostgreSQL gets a bounded pool with the configured timeouts,
    SQLite keeps SQLAlchemy's defaults.
    """
    args: dict[str, Any] = {"echo": settings.DEBUG}

    if url.startswith("postgresql"):
        connection_timeout = settings.DB_CONNECTION_TIMEOUT_MS / 1000
        args.update({
            "pool_size": settings.DB_POOL_SIZE,
            "max_overflow": 0,
            "pool_timeout": connection_timeout,
            "pool_recycle": settings.DB_IDLE_TIMEOUT_MS / 1000,
            "pool_pre_ping": True,
            "connect_args": {"timeout": connection_timeout},
        })

    return args


class Database:
    """
    Storage handle wrapping an async SQLAlchemy engine.

    Every query leases its own pooled connection and hands it back on
    exit, so independent queries can run concurrently.
    """

    def __init__(self, url: str | None = None, engine: AsyncEngine | None = None) -> None:
        self.url = url or settings.database_url
        self.engine = engine or create_async_engine(self.url, **_create_engine_args(self.url))

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[AsyncConnection]:
        """Lease a connection from the pool."""
        async with self.engine.connect() as conn:
            yield conn

    async def query(self, statement: Any) -> list[RowMapping]:
        """
        Run a read statement and return its rows as mappings.

        Raises:
            StorageError: if the connection or the statement fails
        """
        try:
            async with self.acquire() as conn:
                result = await conn.execute(statement)
                return list(result.mappings().all())
        except (SQLAlchemyError, OSError, OverflowError) as e:
            print(f"❌ Query error: {e}")
            raise StorageError(f"Database query failed: {e}") from e

    async def execute(self, statement: Any) -> None:
        """Run a write statement inside its own transaction."""
        try:
            async with self.engine.begin() as conn:
                await conn.execute(statement)
        except (SQLAlchemyError, OSError, OverflowError) as e:
            print(f"❌ Query error: {e}")
            raise StorageError(f"Database query failed: {e}") from e

    async def test_connection(self) -> bool:
        """Check that the database answers a trivial query."""
        try:
            rows = await self.query(text("SELECT CURRENT_TIMESTAMP AS now"))
        except StorageError as e:
            print(f"❌ Database connection failed: {e}")
            return False

        print("✅ Database connection successful")
        print(f"🕐 Server time: {rows[0]['now']}")
        return True

    async def close(self) -> None:
        """Dispose of the pool and every idle connection."""
        await self.engine.dispose()
        print("🔒 Connection pool closed")


async def init_db(database: Database) -> None:
    """Create all tables known to the models."""
    # Register models on the metadata
    import app.models  # noqa: F401

    async with database.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
