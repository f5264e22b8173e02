"""
Datasets router package.

Exports the router for dataset upsert and query endpoints.
"""

from .datasets_router import router

__all__ = ["router"]
