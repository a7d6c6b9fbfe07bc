"""Pytest configuration and fixtures: in-memory SQLite database and an ASGI test client."""

from collections.abc import AsyncGenerator, Generator
from datetime import date

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from freezer_backend.config.database import Base, get_db
from freezer_backend.config.timezone import get_today
from freezer_backend.models import Drawer, Freezer, Product, Storage

TEST_DATABASE_URL = "sqlite+aiosqlite://"

# Fixed "today" for all HTTP tests
TODAY = date(2023, 6, 1)

FREEZERS = [
    (1, "Kelder"),
    (2, "Garage"),
]

DRAWERS = [
    (1, "Schuif 1", 1),
    (2, "Schuif 2", 1),
    (3, "Schuif 1", 2),
]

PRODUCTS = [
    (1, "Brocoli", 16),
    (2, "Asperges", 12),
    (3, "Kip", 6),
    (4, "Zalm", 1),
]

# (storage_id, product_id, drawer_id, weight_grams, date_in, date_out)
STORAGE = [
    (1, 1, 1, 550.0, date(2023, 1, 1), None),                # expires 2024-05-01
    (2, 2, 2, 300.0, date(2023, 1, 1), None),                # expires 2024-01-01, 214 days left
    (3, 3, 3, 800.0, date(2022, 11, 30), None),              # expires 2023-05-30, expired 2 days ago
    (4, 4, 1, 250.0, date(2023, 5, 20), date(2023, 5, 25)),  # withdrawn
    (5, 3, 2, 450.0, date(2023, 3, 31), None),               # expires 2023-09-30 (day clamped)
    (6, 1, 3, 1200.0, date(2023, 2, 15), None),              # above the default maxWeight
]


async def seed(session: AsyncSession) -> None:
    session.add_all(Freezer(freezer_id=i, name=n) for i, n in FREEZERS)
    await session.flush()
    session.add_all(Drawer(drawer_id=i, name=n, freezer_id=f) for i, n, f in DRAWERS)
    session.add_all(Product(product_id=i, name=n, expiration_months=m) for i, n, m in PRODUCTS)
    await session.flush()
    session.add_all(
        Storage(
            storage_id=i,
            product_id=p,
            drawer_id=d,
            weight_grams=w,
            date_in=d_in,
            date_out=d_out,
            available=d_out is None,
        )
        for i, p, d, w, d_in, d_out in STORAGE
    )
    await session.commit()


@pytest_asyncio.fixture(scope="function")
async def session_factory() -> AsyncGenerator[async_sessionmaker, None]:
    """Fresh, seeded in-memory database per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    async with factory() as session:
        await seed(session)

    yield factory
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def test_app(session_factory) -> Generator[FastAPI, None, None]:
    """Production app with the database and "today" overridden.

    ASGITransport does not run the lifespan, so no MySQL connection is attempted.
    """
    from freezer_backend.main import app

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_today] = lambda: TODAY
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def client(test_app) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
