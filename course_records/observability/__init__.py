"""
Observability module.

Provides structured logging, correlation ID tracking and request logging.
"""

from course_records.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from course_records.observability.logger import configure_logging

__all__ = [
    "clear_correlation_id",
    "configure_logging",
    "get_correlation_id",
    "set_correlation_id",
]
