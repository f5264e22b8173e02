"""
Schema checks for the ORM models.

System role: Verification of column types the store enforces
"""

import pytest
from sqlalchemy import Text

from course_records.boundary.db.models import CourseModel, DatasetModel


@pytest.mark.parametrize(
    "column",
    [
        CourseModel.__table__.c.name,
        CourseModel.__table__.c.code,
        DatasetModel.__table__.c.sem,
    ],
)
def test_label_columns_are_unbounded_text(column) -> None:
    assert isinstance(column.type, Text)
    assert column.type.length is None
