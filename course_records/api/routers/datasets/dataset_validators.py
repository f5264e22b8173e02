"""
Dataset validation utilities.

Presence checks not expressed in the Pydantic model, so that every
missing field is reported in a single message.

Dependencies: course_records.models.dataset, course_records.core
System role: Dataset request validation
"""

from typing import Any

from course_records.core.exceptions import ValidationError
from course_records.models.dataset import AddDatasetRequest

# (attribute, wire name) in reporting order
REQUIRED_FIELDS = (
    ("course", "course"),
    ("sem", "sem"),
    ("academic_year", "academicYear"),
    ("columns", "columns"),
    ("data", "data"),
)


def is_missing(value: Any) -> bool:
    """Absent, null and empty strings are missing; empty lists are present."""
    return value is None or value == ""


def validate_dataset_presence(request: AddDatasetRequest) -> None:
    """
    Ensure every required dataset field was supplied.

    Args:
        request: AddDatasetRequest as parsed from the body

    Raises:
        ValidationError: Naming every missing field, comma-joined
    """
    missing = [
        wire_name
        for attribute, wire_name in REQUIRED_FIELDS
        if is_missing(getattr(request, attribute))
    ]
    if missing:
        raise ValidationError(
            f"Missing required fields: {', '.join(missing)}",
            fields=missing,
        )
