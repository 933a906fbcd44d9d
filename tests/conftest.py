"""Конфигурация и фикстуры для тестов Pytest."""

import os
from collections.abc import AsyncGenerator

# Используем асинхронный драйвер для SQLite для тестов
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
os.environ.setdefault("DATABASE_URL", TEST_DATABASE_URL)

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import delete  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
)
from sqlmodel import SQLModel  # noqa: E402

from sales_dashboard.db.models import SalesRecord  # noqa: E402
from sales_dashboard.db.session import (  # noqa: E402
    build_engine,
    build_session_factory,
    get_db_session,
)
from sales_dashboard.main import app  # noqa: E402


@pytest.fixture(scope="session")
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """
    Фикстура для создания асинхронного движка БД для тестов.
    """
    async_engine = build_engine(TEST_DATABASE_URL)
    async with async_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield async_engine

    await async_engine.dispose()


@pytest.fixture(scope="session")
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Фикстура, создающая фабрику сессий для тестов.
    """
    return build_session_factory(engine)


async def _clear_table(session_factory: async_sessionmaker[AsyncSession]) -> None:
    async with session_factory() as db_session:
        await db_session.execute(delete(SalesRecord))
        await db_session.commit()


@pytest.fixture
async def session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """
    Фикстура, предоставляющая изолированную сессию БД для каждого теста.
    """
    async with session_factory() as db_session:
        yield db_session
    await _clear_table(session_factory)


@pytest.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTP-клиент к приложению; зависимость сессии подменена на тестовую БД.
    """

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as db_session:
            yield db_session

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
    await _clear_table(session_factory)


@pytest.fixture
def payload() -> dict[str, object]:
    """Корректные данные записи в том виде, в каком их шлет фронтенд."""
    return {
        "product_name": "Widget",
        "q1_sales": 100.5,
        "q2_sales": 200,
        "q3_sales": "300.25",
        "q4_sales": 0,
        "target": 750,
    }
