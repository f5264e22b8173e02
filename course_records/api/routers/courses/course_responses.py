"""
Course response mapping utilities.

Transforms service dictionaries into Pydantic response models.

Dependencies: course_records.models.course
System role: Course response transformation
"""

from typing import Any

from course_records.models.course import CourseMutationResponse, CourseResponse


def map_course_to_response(course_data: dict[str, Any]) -> CourseResponse:
    """
    Transform course data dictionary into CourseResponse.

    Args:
        course_data: Dictionary containing course fields
            Expected keys: id, name, code, assessments, created_at, updated_at

    Returns:
        CourseResponse: Pydantic model for API response
    """
    return CourseResponse(**course_data)


def map_courses_to_response(courses_data: list[dict[str, Any]]) -> list[CourseResponse]:
    """Transform a list of course dictionaries into CourseResponses."""
    return [map_course_to_response(course) for course in courses_data]


def map_course_mutation(message: str, course_data: dict[str, Any]) -> CourseMutationResponse:
    """Wrap a created or updated course with its acknowledgement message."""
    return CourseMutationResponse(
        message=message,
        course=map_course_to_response(course_data),
    )
