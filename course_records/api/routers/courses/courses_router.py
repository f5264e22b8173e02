"""
Course API endpoints.

Routes:
- POST /api/addCourse - Create new course
- PUT /api/updateCourse/{course_id} - Replace course fields
- GET /api/courses - List all courses
- DELETE /api/deleteCourse/{course_id} - Delete course
- GET /api/courses/assessments/{course_id} - List assessment names of a course
- GET /api/courses/{course_id} - Get single course

Dependencies: course_records.application.services, course_records.models
System role: Course management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status

from course_records.application.services import CourseService
from course_records.api.deps import get_course_service
from course_records.api.error_handling import handle_api_errors
from course_records.models.common import MessageResponse
from course_records.models.course import (
    AssessmentNamesResponse,
    CourseMutationResponse,
    CourseRequest,
    CourseResponse,
)

from .course_responses import (
    map_course_mutation,
    map_course_to_response,
    map_courses_to_response,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["courses"])


@router.post(
    "/addCourse",
    response_model=CourseMutationResponse,
    status_code=status.HTTP_201_CREATED,
)
@handle_api_errors(fallback_status=status.HTTP_400_BAD_REQUEST)
async def add_course(
    request: CourseRequest,
    course_service: CourseService = Depends(get_course_service),
) -> CourseMutationResponse:
    """
    Create new course.

    Args:
        request: CourseRequest with name, code, assessments
        course_service: Injected CourseService

    Returns:
        CourseMutationResponse: Acknowledgement and created course

    Raises:
        400: Invalid request or store rejection
    """
    logger.info(
        "Creating new course",
        extra={"course_name": request.name, "assessment_count": len(request.assessments or [])}
    )

    course_data = await course_service.create_course(**request.model_dump())

    return map_course_mutation("Course added successfully!", course_data)


@router.put("/updateCourse/{course_id}", response_model=CourseMutationResponse)
@handle_api_errors(fallback_status=status.HTTP_400_BAD_REQUEST)
async def update_course(
    course_id: UUID,
    request: CourseRequest,
    course_service: CourseService = Depends(get_course_service),
) -> CourseMutationResponse:
    """
    Replace name, code and assessments of a course.

    Fields omitted from the body are cleared (null, or an empty list).

    Raises:
        404: Course not found
        400: Invalid request or store rejection
    """
    logger.info(
        "Updating course",
        extra={"course_id": str(course_id), "course_name": request.name}
    )

    course_data = await course_service.update_course(course_id, **request.model_dump())

    return map_course_mutation("Course updated successfully!", course_data)


@router.get("/courses", response_model=list[CourseResponse])
@handle_api_errors(fallback_status=status.HTTP_400_BAD_REQUEST)
async def list_courses(
    course_service: CourseService = Depends(get_course_service),
) -> list[CourseResponse]:
    """List every course."""
    courses = await course_service.get_all_courses()

    logger.info("Courses retrieved", extra={"count": len(courses)})

    return map_courses_to_response(courses)


@router.delete("/deleteCourse/{course_id}", response_model=MessageResponse)
@handle_api_errors(fallback_status=status.HTTP_400_BAD_REQUEST)
async def delete_course(
    course_id: UUID,
    course_service: CourseService = Depends(get_course_service),
) -> MessageResponse:
    """
    Delete course by ID. Datasets referencing it are kept.

    Raises:
        404: Course not found
        400: Store failure
    """
    logger.info("Deleting course", extra={"course_id": str(course_id)})

    await course_service.delete_course(course_id)

    return MessageResponse(message="Course deleted successfully!")


@router.get(
    "/courses/assessments/{course_id}",
    response_model=AssessmentNamesResponse,
)
@handle_api_errors(
    not_found_key="message",
    fallback_key="message",
    fallback_message="Failed to fetch assessments",
)
async def get_course_assessments(
    course_id: UUID,
    course_service: CourseService = Depends(get_course_service),
) -> AssessmentNamesResponse:
    """
    List the assessment names of a course in display order.

    Raises:
        404: Course not found
        500: Retrieval failed
        400: Malformed course id, rejected before the handler runs
    """
    names = await course_service.get_assessment_names(course_id)
    return AssessmentNamesResponse(assessments=names)


@router.get("/courses/{course_id}", response_model=CourseResponse)
@handle_api_errors(not_found_key="message")
async def get_course(
    course_id: UUID,
    course_service: CourseService = Depends(get_course_service),
) -> CourseResponse:
    """
    Get single course by ID.

    Raises:
        404: Course not found
        500: Retrieval failed
        400: Malformed course id, rejected before the handler runs
    """
    course_data = await course_service.get_course(course_id)
    return map_course_to_response(course_data)
