"""API request/response schemas."""

from course_records.models.common import MessageResponse
from course_records.models.course import (
    Assessment,
    AssessmentNamesResponse,
    CourseMutationResponse,
    CourseRequest,
    CourseResponse,
)
from course_records.models.dataset import (
    AddDatasetRequest,
    DatasetCourseRef,
    DatasetResponse,
)

__all__ = [
    "AddDatasetRequest",
    "Assessment",
    "AssessmentNamesResponse",
    "CourseMutationResponse",
    "CourseRequest",
    "CourseResponse",
    "DatasetCourseRef",
    "DatasetResponse",
    "MessageResponse",
]
