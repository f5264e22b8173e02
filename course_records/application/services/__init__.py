"""Service orchestrators."""

from .course_service import CourseService
from .dataset_service import DatasetService, MergeOutcome

__all__ = [
    "CourseService",
    "DatasetService",
    "MergeOutcome",
]
