"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from course_records.boundary.db.CRUD import course_crud, dataset_crud

    course = await course_crud.get_by_id(db, course_id)
"""

from course_records.boundary.db.CRUD.base_crud import BaseCRUD
from course_records.boundary.db.CRUD.course_crud import CourseCRUD, course_crud
from course_records.boundary.db.CRUD.dataset_crud import DatasetCRUD, dataset_crud

__all__ = [
    "BaseCRUD",
    "CourseCRUD",
    "course_crud",
    "DatasetCRUD",
    "dataset_crud",
]
