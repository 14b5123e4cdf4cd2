from __future__ import annotations

from contextlib import asynccontextmanager
from contextvars import ContextVar
from typing import Any, AsyncIterator, TypeVar

from sqlalchemy import Select
from sqlalchemy import select as sa_select
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import DeclarativeBase, selectinload
from sqlalchemy.pool import StaticPool

from classroom.logger import get_logger
from classroom.settings import settings


T = TypeVar("T")

logger = get_logger(__name__)


class Base(DeclarativeBase):
    pass


def select(entity: Any, *args: Any) -> Select[Any]:
    """Shortcut for :func:`sqlalchemy.select` which eagerly loads the given relationships."""

    if not args:
        return sa_select(entity)

    options = []
    for arg in args:
        if isinstance(arg, (tuple, list)):
            head, *tail = arg
            opt = selectinload(head)
            for x in tail:
                opt = opt.selectinload(x)
            options.append(opt)
        else:
            options.append(selectinload(arg))

    return sa_select(entity).options(*options)


def filter_by(cls: Any, *args: Any, **kwargs: Any) -> Select[Any]:
    """Shortcut for :meth:`sqlalchemy.sql.Select.filter_by`."""

    return select(cls, *args).filter_by(**kwargs)


class DB:
    """
    Async database handle.

    The session is bound to the current context, so every coroutine running inside
    :meth:`context` shares the same unit of work.
    """

    def __init__(self, url: str, **options: Any) -> None:
        self.engine = create_async_engine(url, **options)
        self._session: ContextVar[AsyncSession | None] = ContextVar("session", default=None)

    async def create_tables(self) -> None:
        logger.debug("Creating tables")
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    @property
    def session(self) -> AsyncSession:
        if (session := self._session.get()) is None:
            raise RuntimeError("No database session in the current context")
        return session

    async def add(self, obj: T) -> T:
        self.session.add(obj)
        return obj

    async def flush(self) -> None:
        await self.session.flush()

    async def all(self, statement: Select[Any]) -> list[Any]:
        return list((await self.session.scalars(statement)).all())

    async def first(self, statement: Select[Any]) -> Any | None:
        return (await self.session.scalars(statement)).first()

    async def get(self, cls: type[T], *args: Any, **kwargs: Any) -> T | None:
        return await self.first(filter_by(cls, *args, **kwargs))

    @asynccontextmanager
    async def context(self) -> AsyncIterator[AsyncSession]:
        session = AsyncSession(self.engine, expire_on_commit=False)
        token = self._session.set(session)
        try:
            yield session
            await session.commit()
        finally:
            await session.close()
            self._session.reset(token)


def get_database(url: str | None = None) -> DB:
    url = url or settings.database_url
    options: dict[str, Any] = {"echo": settings.sql_show_statements}
    if not url.startswith("sqlite"):
        options |= {
            "pool_recycle": settings.pool_recycle,
            "pool_size": settings.pool_size,
            "max_overflow": settings.max_overflow,
        }
    elif url.endswith("://") or ":memory:" in url:
        # in-memory databases only live as long as their single connection
        options["poolclass"] = StaticPool

    return DB(url, **options)


db: DB = get_database()
