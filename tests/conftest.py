"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory SQLite store client and sessions, app/client factories,
service mocks
Dependencies: pytest, sqlalchemy, aiosqlite, fastapi
System role: Test infrastructure and fixture management
"""

from unittest.mock import AsyncMock
import uuid

import pytest
from fastapi.testclient import TestClient

from course_records.configs import DatabaseSettings, Settings

SQLITE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def test_settings() -> Settings:
    """Settings pointing at an in-memory SQLite database."""
    return Settings(database=DatabaseSettings(url=SQLITE_URL, create_tables=True))


@pytest.fixture
async def test_database(test_settings):
    """
    Connected store client over in-memory SQLite with tables created.

    Yields:
        Database: Store client, disposed after the test
    """
    from course_records.boundary.db import Database

    database = Database(test_settings.database)
    database.connect()
    await database.create_tables()

    yield database

    await database.drop_tables()
    await database.dispose()


@pytest.fixture
async def test_async_db(test_database):
    """
    Async session on the in-memory database.

    Yields:
        AsyncSession: Test database session with rollback on exit
    """
    async with test_database.session() as session:
        yield session
        await session.rollback()


@pytest.fixture
def live_client(test_settings):
    """
    TestClient running the real app against in-memory SQLite.

    The lifespan owns the store client so that the engine lives on the
    client's event loop.

    Yields:
        TestClient: Client with lifespan started
    """
    from course_records.main import create_app

    app = create_app(settings=test_settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def mock_course_service():
    """
    Create mock CourseService for testing.

    Returns:
        AsyncMock: Mocked CourseService
    """
    return AsyncMock()


@pytest.fixture
def mock_dataset_service():
    """
    Create mock DatasetService for testing.

    Returns:
        AsyncMock: Mocked DatasetService
    """
    return AsyncMock()


@pytest.fixture
def course_id():
    """Generate a test course ID."""
    return uuid.uuid4()
