"""Pytest configuration and fixtures."""

from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from smart_parking.db.seed import seed_database
from smart_parking.db.session import create_engine, create_schema, create_session_factory, get_db
from smart_parking.db.store import ParkingStore
from smart_parking.main import app
from smart_parking.services.booking import BookingService


@pytest.fixture(scope="function")
async def engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """Engine on a fresh SQLite file with the schema created."""
    test_engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.sqlite'}")
    await create_schema(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture(scope="function")
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Session on an empty database."""
    session_factory = create_session_factory(engine)
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture(scope="function")
async def seeded_session(db_session: AsyncSession) -> AsyncSession:
    """Session on a database holding the sample lots and slots."""
    await seed_database(db_session)
    return db_session


@pytest.fixture(scope="function")
def store(seeded_session: AsyncSession) -> ParkingStore:
    return ParkingStore(seeded_session)


@pytest.fixture(scope="function")
def service(store: ParkingStore) -> BookingService:
    return BookingService(store)


@pytest.fixture(scope="function")
async def async_client(seeded_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client bound to the seeded session."""

    async def override_get_db():
        yield seeded_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
