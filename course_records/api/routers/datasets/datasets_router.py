"""
Dataset API endpoints.

Routes:
- PUT /api/add-dataset - Create a (course, semester) dataset or append a new academic year
- GET /api/datasets/filter - List datasets by course, semester and academic year

Dependencies: course_records.application.services, course_records.models
System role: Dataset HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from course_records.application.services import DatasetService, MergeOutcome
from course_records.api.deps import get_dataset_service
from course_records.api.error_handling import handle_api_errors
from course_records.models.common import MessageResponse
from course_records.models.dataset import AddDatasetRequest, DatasetResponse

from .dataset_validators import validate_dataset_presence

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["datasets"])

OUTCOME_MESSAGES = {
    MergeOutcome.CREATED: "Dataset added successfully!",
    MergeOutcome.CONCATENATED: "Dataset updated successfully with new academic year and data!",
}


@router.put("/add-dataset", response_model=MessageResponse)
@handle_api_errors(fallback_message="Failed to add, update, or concatenate dataset")
async def add_dataset(
    request: AddDatasetRequest,
    dataset_service: DatasetService = Depends(get_dataset_service),
) -> MessageResponse:
    """
    Add a dataset, or concatenate a new academic year onto an existing one.

    Args:
        request: AddDatasetRequest with course, sem, academicYear, columns, data
        dataset_service: Injected DatasetService

    Returns:
        MessageResponse: What was done

    Raises:
        400: Required fields missing
        409: Academic year already stored, or concat not requested
        500: Store failure
    """
    validate_dataset_presence(request)

    logger.info(
        "Adding dataset",
        extra={
            "course_id": str(request.course),
            "sem": request.sem,
            "academic_year": request.academic_year,
            "row_count": len(request.data),
            "concat": request.concat,
        }
    )

    outcome = await dataset_service.add_or_merge_dataset(
        course_id=request.course,
        sem=request.sem,
        academic_year=request.academic_year,
        columns=request.columns,
        data=request.data,
        concat=request.concat,
        replace=request.replace,
    )

    return MessageResponse(message=OUTCOME_MESSAGES[outcome])


@router.get("/datasets/filter", response_model=list[DatasetResponse])
@handle_api_errors(fallback_message="Failed to fetch datasets.")
async def filter_datasets(
    course: UUID | None = Query(None, description="Course id"),
    sem: str | None = Query(None, description="Stored (normalized) semester"),
    academic_year: str | None = Query(None, alias="academicYear", description="Academic year label"),
    dataset_service: DatasetService = Depends(get_dataset_service),
) -> list[DatasetResponse]:
    """
    List datasets matching every supplied parameter exactly.

    Empty parameters are not constraints. No normalization is applied.

    Raises:
        500: Retrieval failed
        400: Malformed course id, rejected before the handler runs
    """
    datasets = await dataset_service.filter_datasets(
        course_id=course,
        sem=sem or None,
        academic_year=academic_year or None,
    )

    logger.info(
        "Datasets filtered",
        extra={"count": len(datasets), "sem": sem, "academic_year": academic_year}
    )

    return [DatasetResponse(**dataset) for dataset in datasets]
