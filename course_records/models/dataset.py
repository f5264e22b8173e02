"""
Dataset domain models and schemas.

Request/response schemas for dataset upsert/merge and filtering. Wire
names follow the public API (academicYear); Python attributes are snake_case.

Dependencies: pydantic
System role: Dataset API contracts
"""

from datetime import datetime
from typing import Union
import uuid

from pydantic import BaseModel, ConfigDict, Field

CellValue = Union[str, int, float, bool, None]


class AddDatasetRequest(BaseModel):
    """
    Request schema for PUT /api/add-dataset.

    Required fields are optional here so that the presence check can report
    every missing field in one message.
    """

    model_config = ConfigDict(populate_by_name=True)

    course: uuid.UUID | None = Field(None, description="Course id")
    sem: str | None = Field(None, description="Semester label")
    academic_year: str | None = Field(
        None, alias="academicYear", description="Academic year label"
    )
    columns: list[str] | None = Field(None, description="Column names")
    data: list[list[CellValue]] | None = Field(None, description="Table rows")
    replace: bool = Field(False, description="Accepted for compatibility; not consulted")
    concat: bool = Field(False, description="Append to an existing dataset")


class DatasetCourseRef(BaseModel):
    """Course reference resolved with its name."""

    id: uuid.UUID
    name: str | None


class DatasetResponse(BaseModel):
    """Response schema for a stored dataset."""

    model_config = ConfigDict(populate_by_name=True)

    id: uuid.UUID
    course: DatasetCourseRef
    sem: str
    academic_year: list[str] = Field(alias="academicYear")
    columns: list[str]
    data: list[list[CellValue]]
    created_at: datetime
    updated_at: datetime
