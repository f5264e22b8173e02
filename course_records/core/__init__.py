"""Core domain primitives shared across layers."""

from course_records.core.exceptions import (
    ConflictError,
    CourseRecordsException,
    InternalError,
    NotFoundError,
    ValidationError,
)

__all__ = [
    "ConflictError",
    "CourseRecordsException",
    "InternalError",
    "NotFoundError",
    "ValidationError",
]
