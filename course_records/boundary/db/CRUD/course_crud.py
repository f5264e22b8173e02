"""
Course CRUD operations.

Dependencies: sqlalchemy, course_records.boundary.db.models
System role: Course persistence operations
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from course_records.boundary.db.models.course_model import CourseModel
from course_records.boundary.db.CRUD.base_crud import BaseCRUD


class CourseCRUD(BaseCRUD[CourseModel]):
    """CRUD operations for CourseModel."""

    def __init__(self) -> None:
        """Initialize CourseCRUD with CourseModel."""
        super().__init__(CourseModel)

    async def get_assessment_names(
        self,
        session: AsyncSession,
        id: UUID,
    ) -> list[str | None] | None:
        """
        Retrieve only the assessment names of a course, in stored order.

        Args:
            session: Async database session
            id: Course UUID

        Returns:
            List of assessment names, None if the course does not exist
        """
        stmt = select(CourseModel.assessments).where(CourseModel.id == id)
        result = await session.execute(stmt)
        row = result.one_or_none()
        if row is None:
            return None
        return [item.get("assessment") for item in row.assessments or []]


course_crud = CourseCRUD()
