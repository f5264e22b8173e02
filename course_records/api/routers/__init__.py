"""API routers."""

from .courses import router as courses_router
from .datasets import router as datasets_router
from .health import router as health_router

__all__ = [
    "courses_router",
    "datasets_router",
    "health_router",
]
