"""Настройка сессии базы данных."""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from sales_dashboard.core.config import settings


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Создает асинхронный движок под указанную базу.

    PostgreSQL: пул с проверкой соединения перед выдачей.
    SQLite в памяти: одно общее соединение (StaticPool), иначе каждое
    новое соединение видело бы свою пустую базу.

    Args:
        database_url: Строка подключения SQLAlchemy.
        echo: Логировать ли SQL-запросы.

    Returns:
        Объект AsyncEngine.
    """
    url = make_url(database_url)
    options: dict[str, Any] = {"echo": echo}
    if url.get_backend_name() == "sqlite":
        if url.database in (None, "", ":memory:"):
            options["poolclass"] = StaticPool
    else:
        options["pool_pre_ping"] = True
    return create_async_engine(url, **options)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Фабрика сессий: без autoflush, объекты остаются доступны после commit."""
    return async_sessionmaker(
        engine,
        autoflush=False,
        expire_on_commit=False,
        class_=AsyncSession,
    )


async_engine = build_engine(settings.database_url, echo=settings.DB_ECHO)
AsyncSessionFactory = build_session_factory(async_engine)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Зависимость (dependency) для получения сессии базы данных.

    Yields:
        Объект асинхронной сессии SQLAlchemy.
    """
    async with AsyncSessionFactory() as session:
        yield session
