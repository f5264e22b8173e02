"""
Dataset ORM model.

Tabular grade data for one course and semester, accumulated across
academic years.

Dependencies: sqlalchemy, course_records.boundary.db.base
System role: Dataset persistence
"""

import uuid

from sqlalchemy import JSON, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from course_records.boundary.db.base import Base, UUIDMixin, TimestampMixin


class DatasetModel(Base, UUIDMixin, TimestampMixin):
    """
    Dataset ORM model.

    At most one row exists per (course_id, sem); sem is stored normalized.
    course_id is a plain reference with no foreign key so that deleting a
    course never cascades.

    Attributes:
        id: UUID primary key (auto-generated)
        course_id: Referenced course UUID
        sem: Semester label, trimmed and lowercased
        academic_year: JSON list of academic year labels as originally supplied
        columns: JSON list of column names
        data: JSON list of rows (lists of scalars)
    """

    __tablename__ = "datasets"
    __table_args__ = (
        UniqueConstraint("course_id", "sem", name="uq_datasets_course_sem"),
    )

    course_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        nullable=False,
        index=True,
        doc="Referenced course id"
    )

    sem: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        doc="Normalized semester"
    )

    academic_year: Mapped[list] = mapped_column(
        JSON,
        nullable=False,
        doc="Academic year labels"
    )

    columns: Mapped[list] = mapped_column(
        JSON,
        nullable=False,
        doc="Column names"
    )

    data: Mapped[list] = mapped_column(
        JSON,
        nullable=False,
        doc="Row-major table values"
    )
