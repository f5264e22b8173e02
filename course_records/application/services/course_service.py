"""
Course service orchestrator.

Coordinates course lifecycle operations.

Dependencies: course_records.boundary.db.CRUD, course_records.core
System role: Course use case orchestration
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from course_records.boundary.db.CRUD.course_crud import course_crud
from course_records.boundary.db.models.course_model import CourseModel
from course_records.core.exceptions import NotFoundError

logger = logging.getLogger(__name__)


def course_to_dict(course: CourseModel) -> dict[str, Any]:
    """Flatten a CourseModel into the dict shape the routers respond with."""
    return {
        "id": course.id,
        "name": course.name,
        "code": course.code,
        "assessments": list(course.assessments or []),
        "created_at": course.created_at,
        "updated_at": course.updated_at,
    }


class CourseService:
    """Course service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize course service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def create_course(
        self,
        name: str | None = None,
        code: str | None = None,
        assessments: list[dict] | None = None,
    ) -> dict:
        """
        Create and persist a new course.

        Args:
            name: Course name
            code: Course code
            assessments: List of {"assessment", "mark"} dicts in display order

        Returns:
            dict: Created course data including its id

        Raises:
            SQLAlchemyError: If the store rejects the write
        """
        try:
            course = await course_crud.create(
                self.db,
                name=name,
                code=code,
                assessments=assessments or [],
            )
            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to create course",
                extra={"error": str(e), "course_name": name}
            )
            raise

        logger.info(
            "Course created",
            extra={"course_id": str(course.id), "course_name": name}
        )
        return course_to_dict(course)

    async def get_course(self, course_id: UUID) -> dict:
        """
        Get course by ID.

        Args:
            course_id: Course UUID

        Returns:
            dict: Course data

        Raises:
            NotFoundError: If course not found
        """
        course = await course_crud.get_by_id(self.db, course_id)
        if course is None:
            raise NotFoundError("Course", course_id)
        return course_to_dict(course)

    async def get_all_courses(self) -> list[dict]:
        """
        Get every course, unfiltered and unpaginated.

        Returns:
            list[dict]: List of course dicts
        """
        courses = await course_crud.get_all(self.db)
        return [course_to_dict(c) for c in courses]

    async def update_course(
        self,
        course_id: UUID,
        name: str | None = None,
        code: str | None = None,
        assessments: list[dict] | None = None,
    ) -> dict:
        """
        Replace name, code and assessments of a course.

        All three fields are written; an omitted argument stores its
        default (None for name and code, an empty list for assessments).

        Args:
            course_id: Course UUID
            name: New course name
            code: New course code
            assessments: New list of {"assessment", "mark"} dicts

        Returns:
            dict: Updated course data

        Raises:
            NotFoundError: If course not found
        """
        try:
            updated = await course_crud.update_by_id(
                self.db,
                course_id,
                name=name,
                code=code,
                assessments=assessments or [],
            )
            if updated is None:
                raise NotFoundError("Course", course_id)
            await self.db.commit()
        except NotFoundError:
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to update course",
                extra={"error": str(e), "course_id": str(course_id)}
            )
            raise

        logger.info("Course updated", extra={"course_id": str(course_id)})
        return course_to_dict(updated)

    async def delete_course(self, course_id: UUID) -> None:
        """
        Delete a course. Datasets referencing it are left in place.

        Args:
            course_id: Course UUID

        Raises:
            NotFoundError: If course not found
        """
        deleted = await course_crud.delete_by_id(self.db, course_id)
        if not deleted:
            raise NotFoundError("Course", course_id)
        await self.db.commit()
        logger.info("Course deleted", extra={"course_id": str(course_id)})

    async def get_assessment_names(self, course_id: UUID) -> list[str | None]:
        """
        Get a course's assessment names in display order.

        Args:
            course_id: Course UUID

        Returns:
            list: Assessment names, marks dropped

        Raises:
            NotFoundError: If course not found
        """
        names = await course_crud.get_assessment_names(self.db, course_id)
        if names is None:
            raise NotFoundError("Course", course_id)
        return names
