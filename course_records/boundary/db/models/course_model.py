"""
Course ORM model.

Represents an academic course with its ordered list of assessments.

Dependencies: sqlalchemy, course_records.boundary.db.base
System role: Course persistence
"""

from sqlalchemy import JSON, Text
from sqlalchemy.orm import Mapped, mapped_column

from course_records.boundary.db.base import Base, UUIDMixin, TimestampMixin


class CourseModel(Base, UUIDMixin, TimestampMixin):
    """
    Course ORM model.

    Datasets reference a course by id only; deleting a course leaves its
    datasets untouched.

    Attributes:
        id: UUID primary key (auto-generated)
        name: Course name (optional)
        code: Course code (optional)
        assessments: JSON list of {"assessment": str, "mark": number}, display order
        created_at: Course creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)
    """

    __tablename__ = "courses"

    name: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        default=None,
        doc="Course name"
    )

    code: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        default=None,
        doc="Course code"
    )

    assessments: Mapped[list] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        doc="Ordered assessment name/mark pairs"
    )
