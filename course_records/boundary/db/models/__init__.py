"""
Database models package.

Exports:
  - CourseModel: Course ORM model
  - DatasetModel: Dataset ORM model

Dependencies: sqlalchemy, course_records.boundary.db.base
System role: Database model definitions for domain entities
"""

from course_records.boundary.db.models.course_model import CourseModel
from course_records.boundary.db.models.dataset_model import DatasetModel

__all__ = [
    "CourseModel",
    "DatasetModel",
]
