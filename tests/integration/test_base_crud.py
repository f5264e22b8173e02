"""
Test suite for BaseCRUD generic database operations.

Tests basic CRUD functionality: create, read (by ID and all), update, delete.
Uses AsyncMock sessions to verify the calls issued to SQLAlchemy.

System role: Verification of generic database layer foundation
"""

import uuid
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from course_records.boundary.db.CRUD.base_crud import BaseCRUD
from course_records.boundary.db.models.course_model import CourseModel


@pytest.fixture
def base_crud() -> BaseCRUD:
    """Provide BaseCRUD instance for testing."""
    return BaseCRUD(CourseModel)


@pytest.fixture
def mock_session() -> AsyncSession:
    """Provide mock async database session."""
    return AsyncMock(spec=AsyncSession)


@pytest.fixture
def sample_id() -> uuid.UUID:
    """Provide sample UUID for testing."""
    return uuid.uuid4()


class TestBaseCRUDCreate:
    """Test suite for BaseCRUD.create() method."""

    @pytest.mark.asyncio
    async def test_create_should_add_instance_to_session(
        self, base_crud: BaseCRUD, mock_session: AsyncSession
    ) -> None:
        """Test create adds instance and flushes/refreshes."""
        mock_session.flush = AsyncMock()
        mock_session.refresh = AsyncMock()

        instance = await base_crud.create(mock_session, name="CS101")

        mock_session.add.assert_called_once_with(instance)
        assert instance.name == "CS101"
        mock_session.flush.assert_called_once()
        mock_session.refresh.assert_called_once_with(instance)

    @pytest.mark.asyncio
    async def test_create_should_flush_before_refresh(
        self, base_crud: BaseCRUD, mock_session: AsyncSession
    ) -> None:
        """Test flush is called before refresh to ensure ID generation."""
        call_order = []

        async def flush_effect() -> None:
            call_order.append("flush")

        async def refresh_effect(obj: Any) -> None:
            call_order.append("refresh")

        mock_session.flush = AsyncMock(side_effect=flush_effect)
        mock_session.refresh = AsyncMock(side_effect=refresh_effect)

        await base_crud.create(mock_session)

        assert call_order == ["flush", "refresh"]


class TestBaseCRUDGetByID:
    """Test suite for BaseCRUD.get_by_id() method."""

    @pytest.mark.asyncio
    async def test_get_by_id_should_return_model_when_found(
        self, base_crud: BaseCRUD, mock_session: AsyncSession, sample_id: uuid.UUID
    ) -> None:
        """Test get_by_id returns model instance when ID exists."""
        mock_instance = MagicMock()
        mock_instance.id = sample_id

        mock_result = MagicMock()
        mock_result.scalar_one_or_none = MagicMock(return_value=mock_instance)
        mock_session.execute = AsyncMock(return_value=mock_result)

        result = await base_crud.get_by_id(mock_session, sample_id)

        assert result == mock_instance
        mock_session.execute.assert_called_once()

    @pytest.mark.asyncio
    async def test_get_by_id_should_return_none_when_not_found(
        self, base_crud: BaseCRUD, mock_session: AsyncSession, sample_id: uuid.UUID
    ) -> None:
        """Test get_by_id returns None when ID doesn't exist."""
        mock_result = MagicMock()
        mock_result.scalar_one_or_none = MagicMock(return_value=None)
        mock_session.execute = AsyncMock(return_value=mock_result)

        assert await base_crud.get_by_id(mock_session, sample_id) is None


class TestBaseCRUDUpdate:
    """Test suite for BaseCRUD.update_by_id() method."""

    @pytest.mark.asyncio
    async def test_update_should_set_fields_and_flush(
        self, base_crud: BaseCRUD, mock_session: AsyncSession, sample_id: uuid.UUID
    ) -> None:
        """Test update assigns each field on the loaded instance."""
        instance = CourseModel(name="Old", code="C1", assessments=[])
        mock_result = MagicMock()
        mock_result.scalar_one_or_none = MagicMock(return_value=instance)
        mock_session.execute = AsyncMock(return_value=mock_result)

        updated = await base_crud.update_by_id(mock_session, sample_id, name="New")

        assert updated is instance
        assert instance.name == "New"
        assert instance.code == "C1"
        mock_session.flush.assert_called_once()

    @pytest.mark.asyncio
    async def test_update_should_return_none_when_not_found(
        self, base_crud: BaseCRUD, mock_session: AsyncSession, sample_id: uuid.UUID
    ) -> None:
        """Test update does not flush when the record is missing."""
        mock_result = MagicMock()
        mock_result.scalar_one_or_none = MagicMock(return_value=None)
        mock_session.execute = AsyncMock(return_value=mock_result)

        assert await base_crud.update_by_id(mock_session, sample_id, name="New") is None
        mock_session.flush.assert_not_called()


class TestBaseCRUDDelete:
    """Test suite for BaseCRUD.delete_by_id() method."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("rowcount,expected", [(1, True), (0, False)])
    async def test_delete_reports_rowcount(
        self,
        base_crud: BaseCRUD,
        mock_session: AsyncSession,
        sample_id: uuid.UUID,
        rowcount: int,
        expected: bool,
    ) -> None:
        """Test delete returns whether a row was removed."""
        mock_result = MagicMock()
        mock_result.rowcount = rowcount
        mock_session.execute = AsyncMock(return_value=mock_result)

        assert await base_crud.delete_by_id(mock_session, sample_id) is expected
