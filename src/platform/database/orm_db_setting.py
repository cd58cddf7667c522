"""
SQLAlchemy async engine and session management

- AsyncEngineManager: one engine per running event loop
- Database: the storage handle built by the DI container and handed to repositories
- Base: declarative base for all ORM models

Isolation:
- PostgreSQL keeps READ COMMITTED; ledger transactions take row locks
  (SELECT ... FOR UPDATE) on the showtime they touch
- SQLite has no row locks, so every transaction starts with BEGIN IMMEDIATE,
  serializing writers for the whole file
"""

import asyncio
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Optional

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger


class Base(DeclarativeBase):
    pass


def _enable_sqlite_immediate_transactions(engine: AsyncEngine) -> None:
    # pysqlite's own BEGIN handling is disabled so the one below is authoritative
    @event.listens_for(engine.sync_engine, 'connect')
    def _on_connect(dbapi_connection: Any, _connection_record: Any) -> None:
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute('PRAGMA foreign_keys=ON')
        cursor.close()

    @event.listens_for(engine.sync_engine, 'begin')
    def _on_begin(conn: Any) -> None:
        conn.exec_driver_sql('BEGIN IMMEDIATE')


def create_engine_for_url(database_url: str) -> AsyncEngine:
    url = make_url(database_url)
    if url.get_backend_name() == 'sqlite':
        engine = create_async_engine(
            url,
            echo=False,
            connect_args={'timeout': settings.SQLITE_BUSY_TIMEOUT_SECONDS},
        )
        _enable_sqlite_immediate_transactions(engine)
        return engine

    return create_async_engine(
        url,
        echo=False,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_POOL_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_recycle=settings.DB_POOL_RECYCLE,
        pool_pre_ping=settings.DB_POOL_PRE_PING,
    )


class AsyncEngineManager:
    """
    Keeps the engine bound to the current event loop.

    Test clients and the application may run on different loops; reusing a
    pool across loops raises "Future attached to a different loop".
    """

    def __init__(self, *, database_url: str) -> None:
        self._database_url = database_url
        self._engine: Optional[AsyncEngine] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._session_maker: Optional[async_sessionmaker[AsyncSession]] = None

    def get_engine(self) -> AsyncEngine:
        try:
            current_loop = asyncio.get_running_loop()
        except RuntimeError:
            current_loop = None

        if self._engine is not None and (current_loop is None or self._loop is current_loop):
            return self._engine

        if self._engine is not None:
            # Old pool belongs to a dead loop; it cannot be awaited from here
            Logger.base.warning('🔄 [DB] Event loop changed, recreating engine...')

        Logger.base.info(f'🔗 [DB] Creating engine for event loop {id(current_loop)}')
        self._engine = create_engine_for_url(self._database_url)
        self._session_maker = None
        self._loop = current_loop
        return self._engine

    def get_session_maker(self) -> async_sessionmaker[AsyncSession]:
        engine = self.get_engine()
        if self._session_maker is None:
            self._session_maker = async_sessionmaker(
                engine,
                class_=AsyncSession,
                expire_on_commit=False,
            )
        return self._session_maker

    async def dispose(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
        self._engine = None
        self._session_maker = None
        self._loop = None


class Database:
    """Storage handle passed to repositories and the unit of work"""

    def __init__(self, *, database_url: str | None = None) -> None:
        self._engine_manager = AsyncEngineManager(
            database_url=database_url or settings.DATABASE_URL_ASYNC
        )

    @property
    def engine(self) -> AsyncEngine:
        return self._engine_manager.get_engine()

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Session context; the session rolls back on exception and closes on exit"""
        session_maker = self._engine_manager.get_session_maker()
        async with session_maker() as session:
            yield session

    async def create_tables(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all, checkfirst=True)
        Logger.base.info('🗄️  [DB] Tables ensured')

    async def drop_tables(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def dispose(self) -> None:
        await self._engine_manager.dispose()
