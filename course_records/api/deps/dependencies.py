"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: course_records.application, course_records.boundary
System role: DI container for service injection
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from course_records.boundary.db import get_async_db
from course_records.application.services import CourseService, DatasetService


def get_course_service(db: AsyncSession = Depends(get_async_db)) -> CourseService:
    """
    Get course service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        CourseService: Course service instance
    """
    return CourseService(db=db)


def get_dataset_service(db: AsyncSession = Depends(get_async_db)) -> DatasetService:
    """
    Get dataset service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        DatasetService: Dataset service instance
    """
    return DatasetService(db=db)
