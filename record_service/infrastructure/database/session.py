"""SQLAlchemy database handle and per-request session dependency."""

import logging
from collections.abc import AsyncGenerator

from fastapi import Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from record_service.config import Settings
from record_service.domain.exceptions import StorageError
from record_service.infrastructure.database.base import Base

logger = logging.getLogger(__name__)


def get_async_url(url: str) -> str:
    """Convert a sync SQLAlchemy URL to an async one."""
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if url.startswith("mysql://"):
        return url.replace("mysql://", "mysql+aiomysql://", 1)
    return url


class Database:
    """Owns the async engine (connection pool) and its session factory.

    Built once per application in the lifespan and disposed on shutdown;
    nothing else in the process holds connection state.
    """

    def __init__(self, url: str, *, echo: bool = False):
        self.engine: AsyncEngine = create_async_engine(get_async_url(url), echo=echo)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(settings.database_url, echo=settings.database_echo)

    async def create_tables(self) -> None:
        """Create every registered table that does not exist yet."""
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as exc:
            raise StorageError("create_tables", str(exc)) from exc

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.debug("Database engine disposed (%s)", self.engine.url.drivername)


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield one session per request and roll back whatever was left uncommitted.

    Writes are committed by the repository inside the endpoint; cleanup here
    may run after the response has started, so it must not be able to fail
    a request that already answered.
    """
    database: Database = request.app.state.database
    async with database.session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
