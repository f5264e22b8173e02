"""
Dataset service orchestrator.

Implements the dataset upsert-and-merge policy and the filtered query.

A dataset is keyed by (course, normalized semester) and accumulates one
slice per academic year. A new year is only appended when the caller asks
to concatenate; a year already present (compared trimmed and lowercased)
is always rejected. The lookup, the decision and the write run in one
transaction holding a row lock on the matched dataset.

Dependencies: sqlalchemy, course_records.boundary.db.CRUD, course_records.core
System role: Dataset use case orchestration
"""

import enum
import logging
from typing import Any, Sequence
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from course_records.boundary.db.CRUD.dataset_crud import dataset_crud
from course_records.boundary.db.models.dataset_model import DatasetModel
from course_records.core.exceptions import ConflictError

logger = logging.getLogger(__name__)


class MergeOutcome(str, enum.Enum):
    """What add_or_merge_dataset did."""

    CREATED = "created"
    CONCATENATED = "concatenated"


def normalize_label(value: str) -> str:
    """Trim and lowercase a label for comparison."""
    return value.strip().lower()


def union_columns(existing: Sequence[str], incoming: Sequence[str]) -> list[str]:
    """Existing columns in order, then unseen incoming columns in order."""
    merged = list(dict.fromkeys(existing))
    seen = set(merged)
    for column in incoming:
        if column not in seen:
            merged.append(column)
            seen.add(column)
    return merged


def dataset_to_dict(dataset: DatasetModel, course_name: str | None = None) -> dict[str, Any]:
    """Flatten a DatasetModel with its resolved course name."""
    return {
        "id": dataset.id,
        "course": {"id": dataset.course_id, "name": course_name},
        "sem": dataset.sem,
        "academic_year": list(dataset.academic_year),
        "columns": list(dataset.columns),
        "data": list(dataset.data),
        "created_at": dataset.created_at,
        "updated_at": dataset.updated_at,
    }


class DatasetService:
    """Dataset service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize dataset service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def add_or_merge_dataset(
        self,
        course_id: UUID,
        sem: str,
        academic_year: str,
        columns: list[str],
        data: list[list[Any]],
        concat: bool = False,
        replace: bool = False,
    ) -> MergeOutcome:
        """
        Create the (course, sem) dataset or append a new academic year to it.

        Args:
            course_id: Referenced course UUID
            sem: Semester label as supplied
            academic_year: Academic year label as supplied
            columns: Column names of the incoming slice
            data: Rows of the incoming slice
            concat: Append to an existing dataset instead of rejecting
            replace: Accepted for compatibility; never consulted

        Returns:
            MergeOutcome: CREATED for a new dataset, CONCATENATED for an append

        Raises:
            ConflictError: Year already present, or dataset exists and concat is off
            SQLAlchemyError: If the store fails
        """
        normalized_sem = normalize_label(sem)
        normalized_year = normalize_label(academic_year)

        if replace:
            logger.info(
                "Ignoring replace flag on dataset merge",
                extra={"course_id": str(course_id), "sem": normalized_sem},
            )

        try:
            existing = await dataset_crud.get_by_course_and_sem(
                self.db, course_id, normalized_sem, for_update=True
            )

            if existing is None:
                await dataset_crud.create(
                    self.db,
                    course_id=course_id,
                    sem=normalized_sem,
                    academic_year=[academic_year],
                    columns=columns,
                    data=data,
                )
                await self.db.commit()
                logger.info(
                    "Dataset created",
                    extra={"course_id": str(course_id), "sem": normalized_sem},
                )
                return MergeOutcome.CREATED

            stored_years = {normalize_label(y) for y in existing.academic_year}
            if normalized_year in stored_years:
                raise ConflictError(
                    "Dataset with course, semester, and academic year "
                    f"({academic_year}) already exists.",
                    details={"course_id": str(course_id), "sem": normalized_sem},
                )

            if not concat:
                raise ConflictError(
                    "Dataset with the same course and semester exists. "
                    "Confirm replacement or concatenation.",
                    details={"course_id": str(course_id), "sem": normalized_sem},
                )

            # Reassign rather than mutate so the JSON columns are flagged dirty
            existing.academic_year = [*existing.academic_year, academic_year]
            existing.columns = union_columns(existing.columns, columns)
            existing.data = [*existing.data, *data]
            await self.db.flush()
            await self.db.commit()
        except ConflictError:
            await self.db.rollback()
            raise
        except IntegrityError as e:
            # Lost the race to insert the first slice for this (course, sem)
            await self.db.rollback()
            logger.warning(
                "Concurrent dataset insert rejected",
                extra={"course_id": str(course_id), "sem": normalized_sem, "error": str(e)},
            )
            raise ConflictError(
                "Dataset with the same course and semester exists. "
                "Confirm replacement or concatenation.",
                details={"course_id": str(course_id), "sem": normalized_sem},
            ) from e
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to add, update, or concatenate dataset",
                extra={"error": str(e), "course_id": str(course_id)},
            )
            raise

        width = len(existing.columns)
        misaligned = sum(1 for row in existing.data if len(row) != width)
        if misaligned:
            # TODO: decide between rejecting and padding misaligned rows once clients agree on a policy
            logger.warning(
                "Dataset rows do not match column count after concatenation",
                extra={
                    "dataset_id": str(existing.id),
                    "column_count": width,
                    "misaligned_rows": misaligned,
                },
            )

        logger.info(
            "Dataset concatenated",
            extra={
                "dataset_id": str(existing.id),
                "academic_years": len(existing.academic_year),
                "rows": len(existing.data),
            },
        )
        return MergeOutcome.CONCATENATED

    async def filter_datasets(
        self,
        course_id: UUID | None = None,
        sem: str | None = None,
        academic_year: str | None = None,
    ) -> list[dict]:
        """
        List datasets matching the given values exactly.

        Args:
            course_id: Course UUID constraint
            sem: Stored semester constraint, not normalized
            academic_year: Label the dataset must contain

        Returns:
            list[dict]: Matching datasets with course name resolved
        """
        rows = await dataset_crud.filter_with_course_name(
            self.db,
            course_id=course_id,
            sem=sem,
            academic_year=academic_year,
        )
        return [dataset_to_dict(dataset, name) for dataset, name in rows]
