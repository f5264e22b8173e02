"""
Dataset CRUD operations.

Provides lookups by (course, semester) with optional row locking, and the
filtered listing that resolves each dataset's course name.

Dependencies: sqlalchemy, course_records.boundary.db.models
System role: Dataset persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from course_records.boundary.db.models.course_model import CourseModel
from course_records.boundary.db.models.dataset_model import DatasetModel
from course_records.boundary.db.CRUD.base_crud import BaseCRUD


class DatasetCRUD(BaseCRUD[DatasetModel]):
    """
    CRUD operations for DatasetModel.

    Extends BaseCRUD with the (course, sem) lookup used by the merge and
    the equality filter used by the query endpoint.
    """

    def __init__(self) -> None:
        """Initialize DatasetCRUD with DatasetModel."""
        super().__init__(DatasetModel)

    async def get_by_course_and_sem(
        self,
        session: AsyncSession,
        course_id: UUID,
        sem: str,
        for_update: bool = False,
    ) -> DatasetModel | None:
        """
        Retrieve the dataset for a course and (already normalized) semester.

        Args:
            session: Async database session
            course_id: Course UUID
            sem: Normalized semester label
            for_update: Lock the row until the transaction ends

        Returns:
            DatasetModel if found, None otherwise
        """
        stmt = select(DatasetModel).where(
            DatasetModel.course_id == course_id,
            DatasetModel.sem == sem,
        )
        if for_update:
            stmt = stmt.with_for_update()
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def filter_with_course_name(
        self,
        session: AsyncSession,
        course_id: UUID | None = None,
        sem: str | None = None,
        academic_year: str | None = None,
    ) -> Sequence[tuple[DatasetModel, str | None]]:
        """
        Retrieve datasets matching every given value exactly.

        Args:
            session: Async database session
            course_id: Course UUID constraint
            sem: Stored semester constraint (no normalization)
            academic_year: Label that must appear in academic_year

        Returns:
            Sequence of (dataset, course name) pairs; name is None when the
            referenced course no longer exists
        """
        stmt = (
            select(DatasetModel, CourseModel.name)
            .outerjoin(CourseModel, CourseModel.id == DatasetModel.course_id)
            .order_by(DatasetModel.created_at)
        )
        if course_id is not None:
            stmt = stmt.where(DatasetModel.course_id == course_id)
        if sem is not None:
            stmt = stmt.where(DatasetModel.sem == sem)

        result = await session.execute(stmt)
        rows = [(dataset, name) for dataset, name in result.all()]

        # JSON array containment differs per dialect; match labels in Python
        if academic_year is not None:
            rows = [row for row in rows if academic_year in row[0].academic_year]
        return rows


dataset_crud = DatasetCRUD()
