"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - Database, get_database(), get_async_db(): Store client and FastAPI dependencies
  - CourseModel, DatasetModel: Domain entities
  - course_crud, dataset_crud: CRUD operation singletons

Dependencies: sqlalchemy, course_records.configs
System role: Document store adapter for courses and datasets
"""

from course_records.boundary.db.base import Base, TimestampMixin, UUIDMixin
from course_records.boundary.db.connection import Database, get_async_db, get_database
from course_records.boundary.db.models import CourseModel, DatasetModel
from course_records.boundary.db.CRUD import (
    BaseCRUD,
    CourseCRUD,
    DatasetCRUD,
    course_crud,
    dataset_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "Database",
    "get_async_db",
    "get_database",
    # Models
    "CourseModel",
    "DatasetModel",
    # CRUD
    "BaseCRUD",
    "CourseCRUD",
    "DatasetCRUD",
    "course_crud",
    "dataset_crud",
]
