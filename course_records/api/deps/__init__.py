"""API-specific dependencies."""

from .dependencies import get_course_service, get_dataset_service

__all__ = [
    "get_course_service",
    "get_dataset_service",
]
