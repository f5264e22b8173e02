"""
Course domain models and schemas.

Request/response schemas for course operations.

Dependencies: pydantic
System role: Course API contracts
"""

from pydantic import BaseModel, Field
import uuid
from datetime import datetime


class Assessment(BaseModel):
    """One assessment of a course and the mark it carries."""

    assessment: str | None = Field(None, description="Assessment name")
    mark: int | float | None = Field(None, description="Mark or weight")


class CourseRequest(BaseModel):
    """Request schema for creating or replacing a course."""

    name: str | None = Field(None, description="Course name")
    code: str | None = Field(None, description="Course code")
    assessments: list[Assessment] | None = Field(
        default_factory=list,
        description="Assessments in display order; null is stored as empty",
    )


class CourseResponse(BaseModel):
    """Response schema for a stored course."""

    id: uuid.UUID
    name: str | None
    code: str | None
    assessments: list[Assessment]
    created_at: datetime
    updated_at: datetime


class CourseMutationResponse(BaseModel):
    """Response schema for create and update."""

    message: str
    course: CourseResponse


class AssessmentNamesResponse(BaseModel):
    """Assessment names of a course, marks dropped."""

    assessments: list[str | None]
